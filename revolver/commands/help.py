"""The built-in help command."""

from typing import TYPE_CHECKING, Any, List, Optional

from revolver.commands.command import Command, Outcome
from revolver.commands.commander import InvalidParserSpec
from revolver.commands.parser import Description, NamedCommandParser, ParseError

if TYPE_CHECKING:
    from revolver.commands.commander import Commander
    from revolver.terminal import Terminal


def _syntax(name: str, parser: NamedCommandParser) -> str:
    """Left column of a help line: shorthand, name and usage."""
    syntax = f"{parser.shorthand}, {name}" if parser.shorthand else name
    usage = parser.description.usage
    if usage:
        syntax = f"{syntax} {usage}"
    return syntax


def format_help(commander: "Commander") -> List[str]:
    """Render one line per registered command, in registration order.

    Each line holds the command's syntax (shorthand, name and usage),
    padded to a common width and followed by its purpose when it has one:

        a, add <value>  Adds a value to the register.
        h, help         Displays a list of commands.
    """
    entries = [(_syntax(name, parser), parser.description.purpose) for name, parser in commander.parsers()]
    if not entries:
        return []

    width = max(len(syntax) for syntax, _ in entries)
    lines = []
    for syntax, purpose in entries:
        if purpose:
            lines.append(f"{syntax.ljust(width)}  {purpose}")
        else:
            lines.append(syntax)
    return lines


class Help(Command):
    """Lists the available commands."""

    def __init__(self, commander: "Commander") -> None:
        self.commander = commander

    def execute(self, context: Any, terminal: "Terminal") -> Outcome:
        for line in format_help(self.commander):
            terminal.write_line(line)
        return Outcome.CONTINUE


class HelpParser(NamedCommandParser):
    """Parser for help. Any argument text is accepted and ignored.

    An instance lists the Commander it was first registered with, so it
    cannot be shared between Commanders.
    """

    name = "help"
    shorthand = "h"
    description = Description(purpose="Displays a list of commands.")

    def __init__(self) -> None:
        self._commander: Optional["Commander"] = None

    def bind(self, commander: "Commander") -> None:
        if self._commander is not None and self._commander is not commander:
            raise InvalidParserSpec(f"'{self.name}' parser is already registered with another commander")
        self._commander = commander

    def parse(self, args: str) -> Command:
        if self._commander is None:
            raise ParseError("help is not registered with a commander")
        return Help(self._commander)
