import io
import random
from unittest import mock

import pytest

from input_source import GeneratedInputSource, StreamInputSource
from stream_sampler import InvalidArgument, ReadFailure, SamplingPipeline
from stream_sampler.algorithms.frequency_counter import FrequencyCounter


def _run(data, sample_size, seed=None):
    out = io.BytesIO()
    summary = SamplingPipeline(sample_size, random.Random(seed)).run(io.BytesIO(data), out)
    return out.getvalue(), summary


def test_single_character_input():
    written, summary = _run(b"AAA", 5)

    assert written == b"AAAAA"
    assert summary["sample"] == written
    assert summary["input_bytes"] == 3
    assert summary["distinct_values"] == 1
    assert summary["sample_bytes"] == 5


def test_many_characters_only_sample_input_values():
    data = b"THEQUICKBROWNFOXJUMPEDOVERTHELAZYDOG"
    for seed in range(50):
        written, _ = _run(data, 5, seed)
        assert len(written) == 5
        for b in written:
            assert b in data, f"Unexpected byte {b}"


def test_non_ascii_input_is_sampled_bytewise():
    data = "Ąćźżółöäß".encode("utf-8")
    written, summary = _run(data, 5, 12345)

    assert len(written) == 5
    assert set(written) <= set(data)
    assert summary["input_bytes"] == len(data)


def test_empty_input_writes_nothing():
    written, summary = _run(b"", 5)

    assert written == b""
    assert summary["sample_bytes"] == 0


def test_zero_sample_size():
    written, _ = _run(b"abc", 0)

    assert written == b""


def test_same_seed_same_output():
    data = bytes(range(256)) * 4

    assert _run(data, 64, 7)[0] == _run(data, 64, 7)[0]


def test_negative_size_rejected_before_reading():
    source = mock.Mock()

    with pytest.raises(InvalidArgument):
        SamplingPipeline(-1, random.Random(1)).run(source, io.BytesIO())
    source.read.assert_not_called()


def test_read_failure_writes_nothing(failing_stream):
    out = io.BytesIO()

    with pytest.raises(ReadFailure):
        SamplingPipeline(5, random.Random(1)).run(failing_stream, out)
    assert out.getvalue() == b""


def test_input_source_objects_are_opened():
    out = io.BytesIO()
    SamplingPipeline(4, random.Random(1)).run(StreamInputSource(io.BytesIO(b"zz")), out)

    assert out.getvalue() == b"zzzz"


def test_generated_input_shares_the_random_source():
    def run_once():
        rng = random.Random(12345)
        out = io.BytesIO()
        summary = SamplingPipeline(10, rng, counter=FrequencyCounter(chunk_size=3)).run(
            GeneratedInputSource(20, rng), out
        )
        return out.getvalue(), summary

    first, summary = run_once()
    second, _ = run_once()

    assert first == second
    assert summary["input_bytes"] == 20
    assert set(first) <= set(summary["table"])
