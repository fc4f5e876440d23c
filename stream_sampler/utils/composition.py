from collections import Counter

import pandas as pd

from stream_sampler.algorithms.frequency_counter import FrequencyTable
from stream_sampler.utils.byte_handler import format_byte

COLUMNS = ["symbol", "input_count", "input_share", "sample_count", "sample_share"]


def composition_frame(table: FrequencyTable, sample: bytes) -> pd.DataFrame:
    """
    Side-by-side byte composition of the input and of a sample drawn from it.

    One row per distinct input byte value, indexed by value and ordered like
    the sampler ranks them (descending count, ascending value on ties).
    Shares are fractions of the respective totals.
    """
    ranked = table.ranked()
    if not ranked:
        return pd.DataFrame(columns=COLUMNS, index=pd.Index([], name="byte", dtype="int64"))

    sample_counts = Counter(sample)
    df = pd.DataFrame(
        {
            "symbol": [format_byte(value) for value, _ in ranked],
            "input_count": [count for _, count in ranked],
            "sample_count": [sample_counts.get(value, 0) for value, _ in ranked],
        },
        index=pd.Index([value for value, _ in ranked], name="byte"),
    )
    df["input_share"] = df["input_count"] / table.total_count
    df["sample_share"] = df["sample_count"] / len(sample) if sample else 0.0
    return df[COLUMNS]
