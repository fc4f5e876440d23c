import io

import matplotlib
import pytest

# charts are only ever written to files in tests
matplotlib.use("Agg")


class FailingStream(io.RawIOBase):
    """Binary stream whose every read raises, like a broken pipe or disk."""

    def __init__(self):
        super().__init__()
        self.reads = 0

    def readable(self):
        return True

    def read(self, size=-1):
        self.reads += 1
        raise OSError("Gotcha!")


class ScriptedRandom:
    """Stand-in for random.Random that returns a fixed sequence of draws."""

    def __init__(self, draws):
        self._draws = iter(draws)
        self.calls = 0

    def random(self):
        self.calls += 1
        return next(self._draws)


@pytest.fixture
def failing_stream():
    return FailingStream()


@pytest.fixture
def scripted_random():
    return ScriptedRandom
