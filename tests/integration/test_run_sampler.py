import io
from pathlib import Path

import pytest
from click.testing import CliRunner

from input_source import ALPHABET
from run_sampler import main

TEXT = b"THEQUICKBROWNFOXJUMPEDOVERTHELAZYDOG"


def _invoke(args, input=None):
    return CliRunner().invoke(main, args, input=input)


def test_samples_stdin():
    result = _invoke(["-n", "5", "-s", "42"], input=TEXT)

    assert result.exit_code == 0, result.output
    assert len(result.stdout_bytes) == 5
    assert set(result.stdout_bytes) <= set(TEXT)


def test_seeded_runs_are_identical():
    first = _invoke(["--size", "40", "--seed", "2024"], input=TEXT)
    second = _invoke(["--size", "40", "--seed", "2024"], input=TEXT)

    assert first.exit_code == second.exit_code == 0
    assert first.stdout_bytes == second.stdout_bytes


def test_generated_input():
    result = _invoke(["-n", "30", "-s", "12345", "-g", "20"])

    assert result.exit_code == 0, result.output
    assert len(result.stdout_bytes) == 30
    assert set(result.stdout_bytes) <= set(ALPHABET.encode())
    assert result.stdout_bytes == _invoke(["-n", "30", "-s", "12345", "-g", "20"]).stdout_bytes


def test_empty_input_produces_no_output():
    result = _invoke(["-n", "5"], input=b"")

    assert result.exit_code == 0
    assert result.stdout_bytes == b""


def test_zero_size():
    result = _invoke(["-n", "0"], input=TEXT)

    assert result.exit_code == 0
    assert result.stdout_bytes == b""


def test_negative_size_is_a_usage_error():
    result = _invoke(["-n", "-3"], input=TEXT)

    assert result.exit_code == 2


def test_size_is_required():
    result = _invoke([], input=TEXT)

    assert result.exit_code == 2


def test_help():
    result = _invoke(["--help"])

    assert result.exit_code == 0
    assert "representative sample" in result.output


def test_stats_summary():
    result = _invoke(["-n", "10", "-s", "1", "--stats"], input=b"aaab")

    assert result.exit_code == 0
    assert "Sampled 10 bytes from 4 input bytes (2 distinct values, seed=1)." in result.output


def test_plot_option_writes_chart(tmp_path: Path):
    chart = tmp_path / "chart.png"
    result = _invoke(["-n", "10", "-s", "1", "--plot", str(chart)], input=TEXT)

    assert result.exit_code == 0, result.output
    assert chart.exists()


class BrokenStdin(io.BytesIO):
    """STDIN that looks readable but faults on the first real read."""

    def read(self, size=-1):
        if size == 0:
            return b""
        raise OSError("disk gone")


def test_read_failure_exits_with_error_and_no_output():
    result = _invoke(["-n", "5", "-s", "1"], input=BrokenStdin())

    assert result.exit_code == 1
    assert result.stdout_bytes == b""
    assert "Error while reading a stream (disk gone)" in result.stderr


@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_cli_streams_use_no_deprecated_click_api():
    result = _invoke(["-n", "5", "-s", "3"], input=TEXT)

    assert result.exit_code == 0, result.output
    assert len(result.stdout_bytes) == 5
