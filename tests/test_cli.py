"""Tests for the command line entry point."""

import io

import pytest

from pipesay import cli
from pipesay.figure import COW, compose


class TtyStream(io.StringIO):
    """A stream that reports itself as an interactive terminal."""

    def isatty(self):
        return True


class FailingStream(io.StringIO):
    """A stream that fails partway through reading."""

    def __iter__(self):
        yield "first line\n"
        raise OSError("device went away")


class ClosedCheckStream(io.StringIO):
    """A stream whose terminal check fails."""

    def isatty(self):
        raise ValueError("I/O operation on closed file")


class TestReadLines:
    """Tests for read_lines function."""

    def test_strips_newlines(self):
        """Test line terminators are removed."""
        assert cli.read_lines(io.StringIO("a\nb\n")) == ["a", "b"]

    def test_strips_crlf(self):
        """Test CRLF terminators are removed."""
        assert cli.read_lines(io.StringIO("a\r\nb\r\n", newline="")) == ["a", "b"]

    def test_last_line_without_newline(self):
        """Test a final unterminated line is kept."""
        assert cli.read_lines(io.StringIO("a\nb")) == ["a", "b"]

    def test_blank_lines_kept(self):
        """Test empty lines in the middle are preserved."""
        assert cli.read_lines(io.StringIO("a\n\nb\n")) == ["a", "", "b"]

    def test_empty_stream(self):
        """Test empty input gives no lines."""
        assert cli.read_lines(io.StringIO("")) == []

    def test_read_failure(self):
        """Test stream errors become InputReadError."""
        with pytest.raises(cli.InputReadError) as exc_info:
            cli.read_lines(FailingStream())
        assert isinstance(exc_info.value.cause, OSError)
        assert "device went away" in str(exc_info.value)


class TestRun:
    """Tests for run function."""

    def test_piped_input(self):
        """Test the balloon and cow are written for piped text."""
        stdout = io.StringIO()
        assert cli.run(io.StringIO("hi\nthere\n"), stdout) == 0
        assert stdout.getvalue() == (
            " _______\n"
            "/ hi    \\\n"
            "\\ there /\n"
            " -------\n"
            "\n" + COW + "\n"
        )

    def test_empty_piped_input(self):
        """Test empty input still prints borders and the cow."""
        stdout = io.StringIO()
        assert cli.run(io.StringIO(""), stdout) == 0
        assert stdout.getvalue() == compose(" __\n --")

    def test_interactive_terminal(self):
        """Test the usage hint is printed when nothing is piped."""
        stdout = io.StringIO()
        assert cli.run(TtyStream("ignored\n"), stdout) == 0
        assert stdout.getvalue() == (
            "The command is intended to work with pipes.\n"
            "Usage: fortune | pipesay\n"
        )

    def test_read_error(self, capsys):
        """Test a read failure exits 1 with a message on stderr."""
        stdout = io.StringIO()
        assert cli.run(FailingStream(), stdout) == 1
        assert stdout.getvalue() == ""
        assert "Error reading input: device went away" in capsys.readouterr().err

    def test_terminal_check_error(self, capsys):
        """Test a failing terminal check exits 1."""
        assert cli.run(ClosedCheckStream(), io.StringIO()) == 1
        assert "Error reading stdin" in capsys.readouterr().err


class TestMain:
    """Tests for main entry point."""

    def test_main_exit_code(self, monkeypatch, capsys):
        """Test main renders stdin and exits 0."""
        monkeypatch.setattr("sys.argv", ["pipesay"])
        monkeypatch.setattr("sys.stdin", io.StringIO("moo\n"))
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith(" _____\n< moo >\n -----\n\n")

    def test_unknown_arguments_ignored(self, monkeypatch, capsys):
        """Test extra arguments do not change the output."""
        monkeypatch.setattr("sys.argv", ["pipesay", "--loud", "extra"])
        monkeypatch.setattr("sys.stdin", io.StringIO("moo\n"))
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 0
        assert "< moo >" in capsys.readouterr().out

    def test_version(self, capsys):
        """Test --version prints the version."""
        with pytest.raises(SystemExit) as exc_info:
            cli.parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "pipesay" in capsys.readouterr().out
