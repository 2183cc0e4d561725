"""The read-decode-execute loop."""

import logging
from enum import Enum
from typing import Any, Optional

from revolver.commands import Commander, CommandError, DecodeError, Outcome, UnknownCommandError
from revolver.config import Config
from revolver.terminal import Terminal

logger = logging.getLogger(__name__)


class RunState(Enum):
    """Whether the loop keeps going."""

    RUNNING = "running"
    STOPPED = "stopped"


class Looper:
    """Drives one REPL session over a terminal.

    Each iteration reads a line, decodes it with the Commander and
    executes the resulting command against the shared context. Decode
    errors and CommandError are reported to the terminal and the loop
    carries on; TerminalError and anything else a command raises
    propagate out of run().
    """

    def __init__(
        self,
        terminal: Terminal,
        commander: Commander,
        context: Any = None,
        config: Optional[Config] = None,
    ) -> None:
        self._terminal = terminal
        self._commander = commander
        self._context = context
        self._config = config or Config()
        self._state = RunState.RUNNING

    @property
    def terminal(self) -> Terminal:
        return self._terminal

    @property
    def commander(self) -> Commander:
        return self._commander

    @property
    def context(self) -> Any:
        return self._context

    @property
    def state(self) -> RunState:
        return self._state

    def run(self) -> None:
        """Loop until a command stops it or the input ends.

        May be called again after returning; the state is reset but the
        context is left as the previous run left it.

        Raises:
            TerminalError: if the terminal fails
        """
        self._state = RunState.RUNNING
        logger.debug("Loop started")
        try:
            self._loop()
        finally:
            self._state = RunState.STOPPED
            logger.debug("Loop stopped")

    def _loop(self) -> None:
        erred = False
        while self._state is RunState.RUNNING:
            prompt = self._config.error_prompt if erred else self._config.prompt
            line = self._terminal.read_line(prompt)
            if line is None:
                logger.debug("End of input")
                self._state = RunState.STOPPED
                break

            try:
                command = self._commander.decode(line)
            except DecodeError as err:
                self._terminal.write_line(self._describe(err))
                erred = True
                continue

            if command is None:
                continue

            try:
                outcome = command.execute(self._context, self._terminal)
            except CommandError as err:
                self._terminal.write_line(f"Command error: {err}.")
                erred = True
                continue

            erred = False
            if outcome is Outcome.STOP:
                self._state = RunState.STOPPED

    def _describe(self, err: DecodeError) -> str:
        """Render a decode error for the user."""
        message = f"Invalid input: {err}."
        if self._config.suggest and isinstance(err, UnknownCommandError) and err.suggestions:
            message += f" Did you mean: {', '.join(err.suggestions)}?"
        return message
