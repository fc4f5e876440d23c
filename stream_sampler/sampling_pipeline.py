import logging
import random
from typing import BinaryIO, Dict, Optional, Union

from input_source.base_input_source import BaseInputSource
from stream_sampler.algorithms.frequency_counter import FrequencyCounter
from stream_sampler.algorithms.representative_sampler import RepresentativeSampler, check_sample_size

logger = logging.getLogger(__name__)


class SamplingPipeline:
    """
    Orchestrates one sampling run:
      - FrequencyCounter (drains the input, exact per-byte counts)
      - RepresentativeSampler (draws offsets, resolves them to byte values)

    The sample size is validated here, before any input is read. Nothing is
    written to the sink unless counting and sampling both succeeded.
    """

    def __init__(
        self,
        sample_size: int,
        rng: random.Random,
        counter: Optional[FrequencyCounter] = None,
    ) -> None:
        self.sample_size = check_sample_size(sample_size)
        self.rng = rng
        self.counter = counter or FrequencyCounter()

    def run(self, source: Union[BaseInputSource, BinaryIO], sink: BinaryIO) -> Dict:
        """
        Count the source, sample it and write the sample to the sink in draw order.

        Returns a dict with the frequency table, the sample and a few totals.
        """
        handle = source.open() if isinstance(source, BaseInputSource) else source
        table = self.counter.count(handle)
        sample = RepresentativeSampler(table).sample(self.sample_size, self.rng)

        sink.write(sample)
        sink.flush()

        logger.info(
            "Sampled %d byte(s) from %d input byte(s) (%d distinct values)",
            len(sample), table.total_count, len(table),
        )
        return {
            "table": table,
            "sample": sample,
            "input_bytes": table.total_count,
            "distinct_values": len(table),
            "sample_bytes": len(sample),
        }

    def __repr__(self) -> str:
        return f"SamplingPipeline(sample_size={self.sample_size}, counter={self.counter})"
