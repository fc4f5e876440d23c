import logging
from collections import Counter
from collections.abc import Mapping
from typing import BinaryIO, Dict, Iterator, List, Optional, Tuple

from stream_sampler.errors import InvalidArgument, InvariantViolation, ReadFailure

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


class FrequencyTable(Mapping):
    """
    Exact byte-value frequencies of a fully consumed stream.

    Maps each byte value (0-255) to the number of times it occurred.
    Immutable once built: the counter creates it, the sampler only reads it.
    Invariant: total_count == number of bytes consumed from the input.
    """

    def __init__(self, counts: Optional[Mapping] = None) -> None:
        clean: Dict[int, int] = {}
        for value, count in dict(counts or {}).items():
            if isinstance(value, bool) or not isinstance(value, int) or not (0 <= value <= 255):
                raise InvariantViolation(f"byte value out of range: {value!r}")
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise InvariantViolation(f"invalid count {count!r} for byte value {value}")
            if count:
                clean[value] = count
        self._counts = clean
        self._total = sum(clean.values())

    @classmethod
    def from_bytes(cls, data: bytes) -> "FrequencyTable":
        """Build a table directly from an in-memory byte string."""
        return cls(Counter(data))

    def __getitem__(self, value: int) -> int:
        return self._counts[value]

    def __iter__(self) -> Iterator[int]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    @property
    def total_count(self) -> int:
        return self._total

    def ranked(self) -> List[Tuple[int, int]]:
        """
        Distinct (value, count) pairs by descending count.
        Equal counts are ordered by ascending byte value so the order never
        depends on dict iteration.
        """
        return sorted(self._counts.items(), key=lambda item: (-item[1], item[0]))

    def merge(self, other: "FrequencyTable") -> "FrequencyTable":
        """
        Combine two partial tables (counts summed per byte value) into a new table.
        """
        if not isinstance(other, FrequencyTable):
            raise TypeError("other must be a FrequencyTable")
        merged = Counter(self._counts)
        merged.update(other._counts)
        return FrequencyTable(merged)

    def __repr__(self) -> str:
        return f"FrequencyTable(distinct={len(self._counts)}, total={self._total})"


class FrequencyCounter:
    """
    Single-pass exact byte counter.

    Drains a binary source until EOF. The source is read in chunks of
    chunk_size bytes; every byte of a chunk counts as one unit, so the chunk
    size never changes the result. The source is neither closed nor rewound.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
            raise InvalidArgument("chunk_size must be a positive integer")
        self.chunk_size = chunk_size

    def _chunks(self, source: BinaryIO) -> Iterator[bytes]:
        while True:
            try:
                chunk = source.read(self.chunk_size)
            except (OSError, ValueError) as exc:  # ValueError: read on a closed handle
                raise ReadFailure("Error while reading a stream") from exc
            if not chunk:
                return
            if isinstance(chunk, str):
                raise InvalidArgument("source must be opened in binary mode")
            yield chunk

    def count(self, source: BinaryIO) -> FrequencyTable:
        """Consume the source to exhaustion and return its frequency table."""
        counts: Counter = Counter()
        chunks = 0
        for chunk in self._chunks(source):
            counts.update(chunk)
            chunks += 1
        table = FrequencyTable(counts)
        logger.debug("Counted %d bytes in %d chunk(s): %r", table.total_count, chunks, table)
        return table

    def __repr__(self) -> str:
        return f"FrequencyCounter(chunk_size={self.chunk_size})"


def count_frequencies(source: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> FrequencyTable:
    return FrequencyCounter(chunk_size=chunk_size).count(source)
