"""Tests for the command line interface."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from subdemux.cli import cli

FIXTURES = Path(__file__).parent / "fixtures"


def _cue_lines(output: str) -> list[str]:
    # log records share the stream, cue lines start with the time range
    return [line for line in output.splitlines() if line.startswith("[")]


@pytest.fixture
def runner(monkeypatch):
    for key in ("SUBDEMUX_TYPE", "SUBDEMUX_FPS", "SUBDEMUX_ORIGINAL_FPS", "SUBDEMUX_DELAY", "SUBDEMUX_SORT"):
        monkeypatch.delenv(key, raising=False)
    return CliRunner()


def test_formats(runner):
    result = runner.invoke(cli, ["formats"])
    assert result.exit_code == 0
    assert "subrip" in result.output
    assert "JacoSub" in result.output
    assert "unknown" not in result.output


def test_info_single_file(runner):
    result = runner.invoke(cli, ["info", str(FIXTURES / "sample.ass")])
    assert result.exit_code == 0
    assert "SSA/ASS (ass)" in result.output
    assert "codec:    ssa" in result.output
    assert "cues:     2" in result.output
    assert "header:" in result.output


def test_info_directory(runner):
    result = runner.invoke(cli, ["info", str(FIXTURES)])
    assert result.exit_code == 0
    assert "sample.srt" in result.output
    assert "sample.jss" in result.output


def test_dump(runner):
    result = runner.invoke(cli, ["dump", str(FIXTURES / "sample.srt")])
    assert result.exit_code == 0
    lines = _cue_lines(result.output)
    assert lines[0] == "[00:00:01.000 --> 00:00:04.000] Hello, how are you?"
    assert "[00:01:10.000 --> 00:01:12.250] Goodbye" in lines


def test_dump_with_delay(runner):
    result = runner.invoke(cli, ["dump", "--delay", "10", str(FIXTURES / "sample.srt")])
    assert result.exit_code == 0
    assert _cue_lines(result.output)[0].startswith("[00:00:02.000 --> 00:00:05.000]")


def test_dump_open_ended_cue(runner):
    result = runner.invoke(cli, ["dump", str(FIXTURES / "sample_vplayer.txt")])
    assert result.exit_code == 0
    assert "[00:00:05.000 --> --:--:--.---] Second line" in result.output


def test_dump_forced_type(runner):
    result = runner.invoke(cli, ["dump", "--type", "mpl2", str(FIXTURES / "sample.srt")])
    assert result.exit_code == 0
    assert _cue_lines(result.output) == []


def test_empty_file_fails(runner, tmp_path):
    empty = tmp_path / "empty.srt"
    empty.write_bytes(b"")
    result = runner.invoke(cli, ["dump", str(empty)])
    assert result.exit_code == 1
    assert "empty" in result.output


def test_unrecognized_file_fails(runner, tmp_path):
    junk = tmp_path / "junk.txt"
    junk.write_text("nothing to see here\n")
    result = runner.invoke(cli, ["info", str(junk)])
    assert result.exit_code == 1
    assert "failed to recognize subtitle type" in result.output


def test_play_fast(runner):
    result = runner.invoke(
        cli, ["play", "--speed", "1000000", "--tick", "0.001", str(FIXTURES / "sample.srt")]
    )
    assert result.exit_code == 0
    assert "Goodbye" in result.output


def test_play_rejects_bad_speed(runner):
    result = runner.invoke(cli, ["play", "--speed", "0", str(FIXTURES / "sample.srt")])
    assert result.exit_code == 2


def test_config(runner):
    result = runner.invoke(cli, ["config"])
    assert result.exit_code == 0
    assert "type: auto" in result.output
    assert "delay: 0" in result.output


def test_dump_quiet_keeps_output_to_cues(runner):
    result = runner.invoke(cli, ["dump", "-q", str(FIXTURES / "sample.srt")])
    assert result.exit_code == 0
    assert "Opening subtitles" not in result.output
    assert result.output.splitlines()[0] == "[00:00:01.000 --> 00:00:04.000] Hello, how are you?"
