"""Tests for terminal devices."""

import io

import pytest
from rich.console import Console

from revolver.terminal import MockTerminal, ReadLine, StreamingTerminal, TerminalError, WriteLine


def make_streaming(text: str):
    """Streaming terminal over a string input and a captured console."""
    out = io.StringIO()
    console = Console(file=out, highlight=False, markup=False, emoji=False, width=200)
    return StreamingTerminal(input=io.StringIO(text), console=console), out


class BrokenStream(io.StringIO):
    def readline(self, *args):
        raise OSError("device gone")


class TestMockTerminal:
    """Test MockTerminal."""

    def test_replays_lines_then_eof(self):
        terminal = MockTerminal(["one", "two"])
        assert terminal.read_line() == "one"
        assert terminal.read_line("> ") == "two"
        assert terminal.read_line() is None
        assert terminal.read_line() is None

    def test_records_invocations(self):
        terminal = MockTerminal(["in"])
        terminal.read_line("> ")
        terminal.write_line("out")

        assert terminal.invocations == [ReadLine("> ", "in"), WriteLine("out")]
        assert terminal.output == ["out"]
        assert terminal.prompts == ["> "]
        assert terminal.reads == 1

    def test_scripted_read_error(self):
        terminal = MockTerminal(["ok", TerminalError("gone")])
        terminal.read_line()
        with pytest.raises(TerminalError):
            terminal.read_line()

    def test_failing_writes(self):
        terminal = MockTerminal(fail_writes=TerminalError("closed"))
        with pytest.raises(TerminalError):
            terminal.write_line("x")
        assert terminal.output == []


class TestReadValue:
    """Test Terminal.read_value helpers."""

    def test_reprompts_until_valid(self):
        terminal = MockTerminal(["abc", " 42 "])
        assert terminal.read_value("n? ", int) == 42
        assert terminal.prompts == ["n? ", "n? "]
        assert terminal.output[0].startswith("Invalid input: invalid literal")

    def test_eof(self):
        assert MockTerminal(["x"]).read_value("n? ", int) is None

    def test_default_on_blank(self):
        terminal = MockTerminal(["   "])
        assert terminal.read_value_default("n? ", int, 7) == 7

    def test_default_not_used_for_value(self):
        terminal = MockTerminal(["3"])
        assert terminal.read_value_default("n? ", int, 7) == 3


class TestStreamingTerminal:
    """Test StreamingTerminal over in-memory streams."""

    def test_reads_lines_without_newline(self):
        terminal, _ = make_streaming("add 1 2\r\nquit\n")
        assert terminal.read_line() == "add 1 2"
        assert terminal.read_line() == "quit"
        assert terminal.read_line() is None

    def test_last_line_without_newline(self):
        terminal, _ = make_streaming("quit")
        assert terminal.read_line() == "quit"
        assert terminal.read_line() is None

    def test_blank_line_is_not_eof(self):
        terminal, _ = make_streaming("\nquit\n")
        assert terminal.read_line() == ""
        assert terminal.read_line() == "quit"

    def test_prompt_written(self):
        terminal, out = make_streaming("x\n")
        terminal.read_line("+>> ")
        assert out.getvalue() == "+>> "

    def test_write_line_verbatim(self):
        """Markup-like text is not interpreted."""
        terminal, out = make_streaming("")
        terminal.write_line("[bold]5[/bold]")
        assert out.getvalue() == "[bold]5[/bold]\n"

    def test_read_error(self):
        console = Console(file=io.StringIO())
        terminal = StreamingTerminal(input=BrokenStream(), console=console)
        with pytest.raises(TerminalError, match="device gone"):
            terminal.read_line()

    def test_default_console(self):
        assert isinstance(StreamingTerminal().console, Console)
