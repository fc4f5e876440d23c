import io
import logging
import random
from typing import BinaryIO

from input_source.base_input_source import BaseInputSource
from stream_sampler.errors import InvalidArgument

logger = logging.getLogger(__name__)

ALPHABET = "abcdefghijklmnoprstuwxyz"


def generate_random_bytes(size: int, rng: random.Random, alphabet: str = ALPHABET) -> bytes:
    """
    Draw size characters uniformly from alphabet, one rng.randrange call per character.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise InvalidArgument(f"size must be a non-negative integer, got {size!r}")
    if not alphabet:
        raise InvalidArgument("alphabet must not be empty")
    try:
        symbols = alphabet.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise InvalidArgument("alphabet must only contain single-byte characters") from exc
    return bytes(symbols[rng.randrange(len(symbols))] for _ in range(size))


class GeneratedInputSource(BaseInputSource):
    def __init__(self, size: int, rng: random.Random, alphabet: str = ALPHABET, name: str = "generated"):
        """
        Synthetic input of `size` bytes drawn uniformly from `alphabet`.
        Bytes are generated on open(), from the same rng later used for sampling.
        """
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise InvalidArgument(f"size must be a non-negative integer, got {size!r}")
        if not alphabet:
            raise InvalidArgument("alphabet must not be empty")
        self.size = size
        self.rng = rng
        self.alphabet = alphabet
        super().__init__(name=name)

    def open(self) -> BinaryIO:
        data = generate_random_bytes(self.size, self.rng, self.alphabet)
        logger.debug("Generated %d byte(s) of input out of %r", len(data), self.alphabet)
        return io.BytesIO(data)
