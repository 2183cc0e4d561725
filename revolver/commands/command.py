"""Executable commands and their outcomes."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from revolver.terminal import Terminal


class Outcome(Enum):
    """What the loop should do after a command has executed."""

    CONTINUE = "continue"
    STOP = "stop"


class CommandError(Exception):
    """A controlled failure inside a command.

    The loop reports the message to the terminal and keeps running.
    Any other exception raised by a command propagates to the caller.
    """


class Command(ABC):
    """One unit of executable behaviour, built fresh for every input line."""

    @abstractmethod
    def execute(self, context: Any, terminal: "Terminal") -> Outcome:
        """Run the command.

        Args:
            context: Application state shared across the session; only
                valid for the duration of this call
            terminal: Terminal to write output to

        Returns:
            Outcome telling the loop whether to continue
        """
