import logging
import random
from bisect import bisect_right
from itertools import accumulate
from typing import Iterable, Iterator, List, Optional, Tuple

from stream_sampler.algorithms.frequency_counter import FrequencyTable
from stream_sampler.errors import InvalidArgument, InvariantViolation

logger = logging.getLogger(__name__)


def check_sample_size(sample_size: int) -> int:
    if isinstance(sample_size, bool) or not isinstance(sample_size, int):
        raise InvalidArgument(f"sample_size must be an integer, got {sample_size!r}")
    if sample_size < 0:
        raise InvalidArgument(f"sample_size must be non-negative, got {sample_size}")
    return sample_size


class CumulativeRanks:
    """
    Offset ranges of the distinct byte values of a table.

    Values are laid out by descending count (ascending byte value on ties),
    each one owning the half-open range [start, stop) of length count in the
    conceptual stream [0, total_count). The exclusive upper boundaries are a
    running-total fold over the ranked counts.
    """

    def __init__(self, table: FrequencyTable) -> None:
        ranked = table.ranked()
        self.values: List[int] = [value for value, _ in ranked]
        self.bounds: List[int] = list(accumulate(count for _, count in ranked))
        self.total_count = self.bounds[-1] if self.bounds else 0
        self._check_partition(table)

    def ranges(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (value, start, stop) for every distinct value in rank order."""
        start = 0
        for value, stop in zip(self.values, self.bounds):
            yield value, start, stop
            start = stop

    def _check_partition(self, table: FrequencyTable) -> None:
        expected = 0
        for value, start, stop in self.ranges():
            if start != expected or stop - start != table[value]:
                raise InvariantViolation(
                    f"range [{start}, {stop}) of byte value {value} does not continue the partition at {expected}"
                )
            expected = stop
        if expected != table.total_count:
            raise InvariantViolation(f"ranges cover {expected} offsets, table holds {table.total_count}")

    def resolve(self, offset: int) -> Optional[int]:
        """Byte value occupying offset, or None when offset is outside [0, total_count)."""
        if offset < 0 or offset >= self.total_count:
            return None
        return self.values[bisect_right(self.bounds, offset)]

    def __repr__(self) -> str:
        return f"CumulativeRanks(distinct={len(self.values)}, total={self.total_count})"


def draw_offsets(total_count: int, sample_size: int, rng: random.Random) -> List[int]:
    """
    Draw sample_size independent offsets uniform over [0, total_count).

    Each offset is floor(total_count * u) for one rng.random() call, in order,
    so a given seed always produces the same offsets. With total_count == 0
    every offset is 0 and resolves to no value.
    """
    check_sample_size(sample_size)
    last = max(total_count - 1, 0)
    # float rounding may reach total_count on very large totals
    return [min(int(total_count * rng.random()), last) for _ in range(sample_size)]


def resolve_offsets(table: FrequencyTable, offsets: Iterable[int]) -> List[Optional[int]]:
    """Map every offset to its byte value, keeping the order of offsets."""
    ranks = CumulativeRanks(table)
    return [ranks.resolve(offset) for offset in offsets]


def representative_sample(table: FrequencyTable, sample_size: int, rng: random.Random) -> bytes:
    return RepresentativeSampler(table).sample(sample_size, rng)


class RepresentativeSampler:
    """
    Samples byte values in proportion to their frequency in a FrequencyTable.

    Offsets are drawn with replacement, resolved through CumulativeRanks and
    emitted in draw order.
    """

    def __init__(self, table: FrequencyTable) -> None:
        if not isinstance(table, FrequencyTable):
            raise TypeError("table must be a FrequencyTable")
        self.table = table
        self.ranks = CumulativeRanks(table)

    def draw_offsets(self, sample_size: int, rng: random.Random) -> List[int]:
        return draw_offsets(self.ranks.total_count, sample_size, rng)

    def resolve(self, offsets: Iterable[int]) -> List[Optional[int]]:
        return [self.ranks.resolve(offset) for offset in offsets]

    def sample(self, sample_size: int, rng: random.Random) -> bytes:
        """
        Draw sample_size offsets and return the resolved byte values in draw order.
        An empty table yields an empty sample.
        """
        offsets = self.draw_offsets(sample_size, rng)
        resolved = self.resolve(offsets)
        sample = bytes(value for value in resolved if value is not None)
        logger.debug("Resolved %d offset(s) into %d sampled byte(s)", len(offsets), len(sample))
        return sample

    def __repr__(self) -> str:
        return f"RepresentativeSampler(ranks={self.ranks})"
