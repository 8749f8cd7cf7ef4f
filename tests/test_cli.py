"""
Tests for the streamslice command line.

These tests drive the click command end to end: argument handling (including
negative ranges that look like options), stdin vs files, the --no-seek switch
and error reporting.
"""

import pytest
from click.testing import CliRunner

from streamslice import __version__
from streamslice.cli.main import cli

HELLO_WORLD = b"hello\nworld\n"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestCLIOutput:
    """Test slicing through the command line."""

    def test_first_line_of_file(self, runner, write_input):
        path = write_input(HELLO_WORLD)
        result = runner.invoke(cli, ["0:1", str(path)])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"hello\n"

    def test_negative_range_without_separator(self, runner, write_input):
        path = write_input(HELLO_WORLD)
        result = runner.invoke(cli, ["-1:", str(path)])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"world\n"

    def test_negative_range_after_separator(self, runner, write_input):
        path = write_input(HELLO_WORLD)
        result = runner.invoke(cli, ["--", "-1:", str(path)])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"world\n"

    def test_byte_mode_from_stdin(self, runner):
        result = runner.invoke(cli, ["-c", "-6:"], input=HELLO_WORLD)

        assert result.exit_code == 0
        assert result.stdout_bytes == b"world\n"

    def test_dash_means_stdin(self, runner):
        result = runner.invoke(cli, ["--byte", "1:+3", "-"], input=b"abcdef")

        assert result.exit_code == 0
        assert result.stdout_bytes == b"bcd"

    def test_byte_mode_file_is_clamped(self, runner, write_input):
        path = write_input(b"0123456789")
        result = runner.invoke(cli, ["-100:", str(path), "-c"])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"0123456789"

    def test_no_seek_matches_seek(self, runner, write_input):
        path = write_input(bytes(range(256)) * 4)
        for range_text in ["10:20", "-30:", "5:-7", "-50:-10", "-50:+5", "600:2000"]:
            seek = runner.invoke(cli, ["-c", range_text, str(path)])
            stream = runner.invoke(cli, ["-c", "--no-seek", range_text, str(path)])
            assert seek.exit_code == stream.exit_code == 0
            assert seek.stdout_bytes == stream.stdout_bytes

    def test_empty_output_is_success(self, runner, write_input):
        path = write_input(b"abcdef")
        result = runner.invoke(cli, ["-c", "4:2", str(path)])

        assert result.exit_code == 0
        assert result.stdout_bytes == b""

    def test_line_delimiter_from_environment(self, runner):
        result = runner.invoke(
            cli,
            ["1:2"],
            input=b"a;b;c;",
            env={"STREAMSLICE_LINE_DELIMITER": ";"},
        )

        assert result.exit_code == 0
        assert result.stdout_bytes == b"b;"

    def test_verbose_logs_strategy(self, runner, write_input):
        path = write_input(HELLO_WORLD)
        result = runner.invoke(cli, ["-v", "-c", "0:5", str(path)])

        assert result.exit_code == 0
        assert "bytes via seek" in result.output


class TestCLIErrors:
    """Test error reporting and exit codes."""

    def test_invalid_range(self, runner):
        result = runner.invoke(cli, ["abc"], input=b"data")

        assert result.exit_code == 1
        assert "Invalid range" in result.output
        assert "expected the format start:end" in result.output

    def test_non_integer_bound(self, runner):
        result = runner.invoke(cli, ["1:x"], input=b"data")

        assert result.exit_code == 1
        assert "is not an integer" in result.output

    def test_relative_end_overflow(self, runner):
        result = runner.invoke(cli, ["-2:+3"], input=b"data")

        assert result.exit_code == 1
        assert "+3" in result.output

    def test_directory_input(self, runner, tmp_path):
        result = runner.invoke(cli, ["0:1", str(tmp_path)])

        assert result.exit_code == 1
        assert "directory" in result.output

    def test_missing_input(self, runner, tmp_path):
        result = runner.invoke(cli, ["0:1", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "I/O error" in result.output

    def test_invalid_configuration(self, runner):
        result = runner.invoke(
            cli, ["0:1"], input=b"data", env={"STREAMSLICE_READ_CHUNK_SIZE": "0"}
        )

        assert result.exit_code == 2
        assert "STREAMSLICE_" in result.output

    def test_missing_range(self, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code == 2
        assert "RANGE" in result.output


class TestCLIInfo:
    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "START:END" in result.output
        assert "--byte" in result.output
        assert "--no-seek" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
