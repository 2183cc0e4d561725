"""Command parsing and dispatch for revolver."""

from revolver.commands.command import Command, CommandError, Outcome
from revolver.commands.commander import (
    Commander,
    DecodeError,
    InvalidArgumentsError,
    InvalidParserSpec,
    UnknownCommandError,
)
from revolver.commands.help import Help, HelpParser, format_help
from revolver.commands.parser import (
    Description,
    Example,
    NamedCommandParser,
    ParseError,
    ParsedCommand,
    split_command,
)
from revolver.commands.quit import Quit, QuitParser

__all__ = [
    "Command",
    "CommandError",
    "Outcome",
    "Commander",
    "DecodeError",
    "InvalidArgumentsError",
    "InvalidParserSpec",
    "UnknownCommandError",
    "Help",
    "HelpParser",
    "format_help",
    "Description",
    "Example",
    "NamedCommandParser",
    "ParseError",
    "ParsedCommand",
    "split_command",
    "Quit",
    "QuitParser",
]
