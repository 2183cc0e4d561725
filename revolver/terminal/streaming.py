"""Terminal over text streams, stdin/stdout by default."""

from typing import Optional, TextIO

from rich.console import Console

from revolver.terminal.base import Terminal, TerminalError


class StreamingTerminal(Terminal):
    """Reads lines from an input stream and writes through a rich Console.

    With no arguments this is the interactive stdin/stdout terminal.
    Markup and highlighting are switched off so user-supplied text is
    printed verbatim.
    """

    def __init__(self, input: Optional[TextIO] = None, console: Optional[Console] = None) -> None:
        self._input = input
        self._console = console or Console(highlight=False, markup=False, emoji=False)

    @property
    def console(self) -> Console:
        """The underlying output console."""
        return self._console

    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            if self._input is None:
                return self._console.input(prompt, markup=False, emoji=False)

            if prompt:
                self._console.print(prompt, end="", markup=False, highlight=False, soft_wrap=True)
            line = self._input.readline()
        except EOFError:
            return None
        except OSError as err:
            raise TerminalError(f"read failed: {err}") from err

        if not line:
            return None
        return line.rstrip("\r\n")

    def write_line(self, text: str) -> None:
        try:
            self._console.print(text, markup=False, highlight=False, soft_wrap=True)
        except OSError as err:
            raise TerminalError(f"write failed: {err}") from err
