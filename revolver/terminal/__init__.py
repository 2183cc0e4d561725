"""Line-oriented terminal devices."""

from revolver.terminal.base import Terminal, TerminalError
from revolver.terminal.mock import Invocation, MockTerminal, ReadLine, WriteLine
from revolver.terminal.streaming import StreamingTerminal

__all__ = [
    "Terminal",
    "TerminalError",
    "Invocation",
    "MockTerminal",
    "ReadLine",
    "WriteLine",
    "StreamingTerminal",
]
