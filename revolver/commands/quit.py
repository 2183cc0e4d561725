"""The built-in quit command."""

from typing import TYPE_CHECKING, Any

from revolver.commands.command import Command, Outcome
from revolver.commands.parser import Description, NamedCommandParser

if TYPE_CHECKING:
    from revolver.terminal import Terminal


class Quit(Command):
    """Stops the loop. Writes nothing and tears nothing down."""

    def execute(self, context: Any, terminal: "Terminal") -> Outcome:
        return Outcome.STOP


class QuitParser(NamedCommandParser):
    """Parser for quit. Any argument text is accepted and ignored."""

    name = "quit"
    shorthand = "q"
    description = Description(purpose="Exits the program.")

    def parse(self, args: str) -> Command:
        return Quit()
