"""Command parser contract and line splitting."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Tuple

if TYPE_CHECKING:
    from revolver.commands.command import Command
    from revolver.commands.commander import Commander


class ParseError(Exception):
    """Raised by a parser when its argument text is malformed."""

    @classmethod
    def convert(cls, err: Exception) -> "ParseError":
        """Wrap another exception's message, e.g. a failed int() conversion."""
        return cls(str(err))


@dataclass(frozen=True)
class Example:
    """An example of using a command."""

    scenario: str  # lowercase part-sentence, no trailing period
    command: str  # sample arguments, without the command name


@dataclass(frozen=True)
class Description:
    """Describes a command for the help listing."""

    purpose: str = ""
    usage: str = ""
    examples: Tuple[Example, ...] = ()


@dataclass
class ParsedCommand:
    """A raw input line split into command name and argument text."""

    name: str
    args: str = ""
    raw: str = ""

    @property
    def is_blank(self) -> bool:
        """True when the line held no command at all."""
        return not self.name


def split_command(line: str) -> ParsedCommand:
    """Split a line into its leading token and the remaining argument text.

    Supports:
    - Bare commands: "quit"
    - Commands with args: "add 2 3" -> ("add", "2 3")
    - Surrounding whitespace: "  add   2 3  " -> ("add", "2 3")

    The argument text keeps its inner whitespace; only the whitespace
    separating it from the command name is consumed.

    Args:
        line: Raw input line

    Returns:
        ParsedCommand instance, with an empty name for blank input
    """
    stripped = line.strip()
    if not stripped:
        return ParsedCommand(name="", raw=line)

    parts = stripped.split(None, 1)
    name = parts[0]
    args = parts[1] if len(parts) > 1 else ""

    return ParsedCommand(name=name, args=args, raw=line)


class NamedCommandParser(ABC):
    """Builds a Command from the argument text of one named command.

    Subclasses set ``name`` (and optionally ``shorthand`` and
    ``description``) and implement ``parse``. Parsers are stateless across
    loop iterations; any configuration is fixed at construction.
    """

    name: str = ""
    shorthand: Optional[str] = None
    description: Description = Description()

    @abstractmethod
    def parse(self, args: str) -> "Command":
        """Parse the argument text into a Command.

        Raises:
            ParseError: if the arguments are malformed
        """

    def parse_no_args(self, args: str, factory: Callable[[], "Command"]) -> "Command":
        """Build ``factory()`` for a command that takes no arguments."""
        if args:
            raise ParseError(f"expected no arguments, got '{args}'")
        return factory()

    def bind(self, commander: "Commander") -> None:
        """Called once by the Commander this parser is registered with."""
