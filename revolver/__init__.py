"""revolver - a small framework for read-eval-print loop applications."""

from revolver.commands import (
    Command,
    CommandError,
    Commander,
    DecodeError,
    Description,
    Example,
    HelpParser,
    InvalidArgumentsError,
    InvalidParserSpec,
    NamedCommandParser,
    Outcome,
    ParseError,
    QuitParser,
    UnknownCommandError,
)
from revolver.config import Config
from revolver.looper import Looper, RunState
from revolver.terminal import MockTerminal, StreamingTerminal, Terminal, TerminalError

__version__ = "0.1.0"

__all__ = [
    "Command",
    "CommandError",
    "Commander",
    "DecodeError",
    "Description",
    "Example",
    "HelpParser",
    "InvalidArgumentsError",
    "InvalidParserSpec",
    "NamedCommandParser",
    "Outcome",
    "ParseError",
    "QuitParser",
    "UnknownCommandError",
    "Config",
    "Looper",
    "RunState",
    "MockTerminal",
    "StreamingTerminal",
    "Terminal",
    "TerminalError",
]
