"""A register calculator REPL.

Commands:
  add <value>       - Add a value to the register and print it
  subtract <value>  - Subtract a value from the register and print it
  print             - Print the register
  help, quit        - Built-ins
"""

from dataclasses import dataclass
from typing import Optional

from revolver.commands import (
    Command,
    Commander,
    Description,
    Example,
    HelpParser,
    NamedCommandParser,
    Outcome,
    ParseError,
    QuitParser,
)
from revolver.config import Config
from revolver.looper import Looper
from revolver.terminal import StreamingTerminal, Terminal


@dataclass
class Register:
    """The calculator's only state."""

    value: float = 0.0

    def print(self, terminal: Terminal) -> None:
        terminal.write_line(f"{self.value:g}")


def _parse_value(args: str) -> float:
    try:
        return float(args)
    except ValueError as err:
        raise ParseError.convert(err) from err


class Add(Command):
    def __init__(self, value: float) -> None:
        self.value = value

    def execute(self, context: Register, terminal: Terminal) -> Outcome:
        context.value += self.value
        context.print(terminal)
        return Outcome.CONTINUE


class AddParser(NamedCommandParser):
    name = "add"
    shorthand = "a"
    description = Description(
        purpose="Adds a value to the register.",
        usage="<value>",
        examples=(Example(scenario="adds 1.5 to the register", command="1.5"),),
    )

    def parse(self, args: str) -> Command:
        return Add(_parse_value(args))


class Subtract(Command):
    def __init__(self, value: float) -> None:
        self.value = value

    def execute(self, context: Register, terminal: Terminal) -> Outcome:
        context.value -= self.value
        context.print(terminal)
        return Outcome.CONTINUE


class SubtractParser(NamedCommandParser):
    name = "subtract"
    shorthand = "s"
    description = Description(
        purpose="Subtracts a value from the register.",
        usage="<value>",
        examples=(Example(scenario="subtracts 1.5 from the register", command="1.5"),),
    )

    def parse(self, args: str) -> Command:
        return Subtract(_parse_value(args))


class Print(Command):
    def execute(self, context: Register, terminal: Terminal) -> Outcome:
        context.print(terminal)
        return Outcome.CONTINUE


class PrintParser(NamedCommandParser):
    name = "print"
    shorthand = "p"
    description = Description(purpose="Prints the contents of the register.")

    def parse(self, args: str) -> Command:
        return self.parse_no_args(args, Print)


def build_commander() -> Commander:
    """Create the calculator's command registry."""
    return Commander([
        AddParser(),
        SubtractParser(),
        PrintParser(),
        HelpParser(),
        QuitParser(),
    ])


def run(terminal: Optional[Terminal] = None, config: Optional[Config] = None) -> Register:
    """Run the calculator until quit or end of input.

    Returns:
        The register as the session left it
    """
    register = Register()
    looper = Looper(terminal or StreamingTerminal(), build_commander(), register, config)
    looper.run()
    return register
