"""Abstract text terminal."""

from abc import ABC, abstractmethod
from typing import Callable, Optional, TypeVar

V = TypeVar("V")


class TerminalError(Exception):
    """The terminal could not be read from or written to."""


class Terminal(ABC):
    """A line-oriented text device for talking to the user.

    Ordinarily backed by stdin/stdout; separating the contract from the
    device allows user interactions to be scripted in tests.
    """

    @abstractmethod
    def read_line(self, prompt: str = "") -> Optional[str]:
        """Read one line, blocking until it is available.

        Args:
            prompt: Text shown before reading, if the device shows prompts

        Returns:
            The line without its trailing newline, or None at end of input

        Raises:
            TerminalError: if the device could not be read
        """

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write one line of text.

        Raises:
            TerminalError: if the device could not be written
        """

    def read_value(self, prompt: str, convert: Callable[[str], V]) -> Optional[V]:
        """Read a value, re-prompting until ``convert`` accepts the input.

        ``convert`` receives the stripped line and signals bad input by
        raising ValueError; the error is shown and never propagated.

        Returns:
            The converted value, or None at end of input
        """
        while True:
            line = self.read_line(prompt)
            if line is None:
                return None
            try:
                return convert(line.strip())
            except ValueError as err:
                self.write_line(f"Invalid input: {err}.")

    def read_value_default(self, prompt: str, convert: Callable[[str], V], default: V) -> Optional[V]:
        """Like read_value, but blank input yields ``default``."""

        def convert_or_default(text: str) -> V:
            return convert(text) if text else default

        return self.read_value(prompt, convert_or_default)
