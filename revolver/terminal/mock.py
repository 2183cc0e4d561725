"""Scripted terminal for tests."""

from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from revolver.terminal.base import Terminal


@dataclass(frozen=True)
class ReadLine:
    """A read_line call and what it returned (None at end of input)."""

    prompt: str
    line: Optional[str]


@dataclass(frozen=True)
class WriteLine:
    """A write_line call."""

    text: str


Invocation = Union[ReadLine, WriteLine]


class MockTerminal(Terminal):
    """Terminal that replays pre-canned lines and records everything.

    Lines are returned in order; once exhausted, reads signal end of
    input. An exception instance in ``lines`` is raised when its turn
    comes, which is how read failures are simulated. Setting
    ``fail_writes`` makes every write raise it.
    """

    def __init__(
        self,
        lines: Iterable[Union[str, Exception]] = (),
        fail_writes: Optional[Exception] = None,
    ) -> None:
        self._lines = deque(lines)
        self.fail_writes = fail_writes
        self.invocations: List[Invocation] = []

    def read_line(self, prompt: str = "") -> Optional[str]:
        if not self._lines:
            self.invocations.append(ReadLine(prompt, None))
            return None

        item = self._lines.popleft()
        if isinstance(item, Exception):
            raise item

        self.invocations.append(ReadLine(prompt, item))
        return item

    def write_line(self, text: str) -> None:
        if self.fail_writes is not None:
            raise self.fail_writes
        self.invocations.append(WriteLine(text))

    @property
    def output(self) -> List[str]:
        """All lines written so far."""
        return [inv.text for inv in self.invocations if isinstance(inv, WriteLine)]

    @property
    def reads(self) -> int:
        """Number of completed read_line calls."""
        return sum(1 for inv in self.invocations if isinstance(inv, ReadLine))

    @property
    def prompts(self) -> List[str]:
        """Prompts passed to read_line, in order."""
        return [inv.prompt for inv in self.invocations if isinstance(inv, ReadLine)]

    @property
    def remaining(self) -> int:
        """Number of lines not yet consumed."""
        return len(self._lines)
