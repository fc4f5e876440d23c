import logging
import random
import sys
from typing import Optional

import click

from input_source import ALPHABET, GeneratedInputSource, StreamInputSource
from plot.composition_chart import plot_composition
from stream_sampler.algorithms.frequency_counter import DEFAULT_CHUNK_SIZE, FrequencyCounter
from stream_sampler.errors import StreamSamplerError
from stream_sampler.sampling_pipeline import SamplingPipeline
from stream_sampler.utils.composition import composition_frame
from stream_sampler.utils.logging_config import configure_logging

logger = logging.getLogger("run_sampler")


def pick_seed(seed: Optional[int]) -> int:
    """Return the given seed, or a fresh one from the OS entropy pool."""
    if seed is not None:
        return seed
    return random.SystemRandom().getrandbits(32)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-n",
    "--size",
    "sample_size",
    type=click.IntRange(min=0),
    required=True,
    metavar="SIZE",
    help="Sample size.",
)
@click.option(
    "-s",
    "--seed",
    type=int,
    default=None,
    metavar="SEED",
    help="Seed for random number generator. Used for both sample creation and input generation.",
)
@click.option(
    "-g",
    "--generate",
    "generate_size",
    type=click.IntRange(min=0),
    default=None,
    metavar="INPUT_SIZE",
    help=f"Size of random input to generate out of '{ALPHABET}' instead of reading STDIN.",
)
@click.option(
    "--chunk-size",
    type=click.IntRange(min=1),
    default=DEFAULT_CHUNK_SIZE,
    show_default=True,
    help="Number of bytes read from the input at a time.",
)
@click.option(
    "--stats/--no-stats",
    default=False,
    show_default=True,
    help="Print an input vs. sample composition summary to STDERR.",
)
@click.option(
    "--top",
    type=click.IntRange(min=1),
    default=10,
    show_default=True,
    help="Number of most frequent byte values shown in the summary and chart.",
)
@click.option(
    "--plot",
    "plot_path",
    type=click.Path(dir_okay=False, writable=True, path_type=str),
    default=None,
    help="Write a chart comparing input and sample composition to this file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostics written to STDERR.",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
def main(
        sample_size: int,
        seed: Optional[int],
        generate_size: Optional[int],
        chunk_size: int,
        stats: bool,
        top: int,
        plot_path: Optional[str],
        log_level: str,
        debug: bool,
) -> None:
    """
    Creates a random representative sample of length SIZE out of the input.

    Input is either STDIN, or randomly generated within application.
    If SEED is specified, then it's used for both - sample creation and input generation.

    Example: cat file.txt | stream-sampler -n SIZE
    """
    configure_logging(debug=debug, level=log_level)

    seed = pick_seed(seed)
    logger.info("Using seed %d", seed)
    rng = random.Random(seed)

    if generate_size is not None:
        source = GeneratedInputSource(generate_size, rng)
    else:
        source = StreamInputSource(sys.stdin.buffer)

    pipeline = SamplingPipeline(sample_size, rng, counter=FrequencyCounter(chunk_size=chunk_size))
    try:
        out = pipeline.run(source, sys.stdout.buffer)
    except StreamSamplerError as exc:
        logger.debug("Sampling failed", exc_info=True)
        cause = f" ({exc.__cause__})" if exc.__cause__ is not None else ""
        raise click.ClickException(f"{exc}{cause}") from exc

    if stats or plot_path:
        frame = composition_frame(out["table"], out["sample"])
        if stats:
            click.echo(
                f"Sampled {out['sample_bytes']} bytes from {out['input_bytes']} input bytes "
                f"({out['distinct_values']} distinct values, seed={seed}).",
                err=True,
            )
            if not frame.empty:
                click.echo(frame.head(top).to_string(), err=True)
        if plot_path:
            plot_composition(frame, plot_path, top_k=top)
            click.echo(f"Wrote composition chart to {plot_path}.", err=True)


if __name__ == "__main__":
    main()
