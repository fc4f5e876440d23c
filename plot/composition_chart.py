import matplotlib.pyplot as plt
import pandas as pd


def plot_composition(frame: pd.DataFrame, path: str, top_k: int = 20) -> None:
    """Write a grouped bar chart of input vs. sample share for the top_k byte values."""
    fig, ax = plt.subplots(figsize=(11, 6))
    top = frame.head(top_k)
    if not top.empty:
        shares = top[["input_share", "sample_share"]].astype(float)
        shares.index = top["symbol"]
        shares.plot.bar(ax=ax, width=0.8, color=["tab:blue", "tab:orange"], rot=0)
        ax.legend(["Input", "Sample"], loc="upper right", frameon=False)
    ax.set_title(f"Byte Composition of Input vs. Sample (Top {top_k})")
    ax.set_xlabel("Byte Value")
    ax.set_ylabel("Share")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
