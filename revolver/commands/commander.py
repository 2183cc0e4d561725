"""Decoding of input lines into commands."""

import difflib
import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from revolver.commands.command import Command
from revolver.commands.parser import NamedCommandParser, ParseError, split_command

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 2
MAX_SUGGESTIONS = 3


class InvalidParserSpec(ValueError):
    """The parsers given to a Commander are misconfigured or conflict."""


class DecodeError(Exception):
    """An input line could not be decoded into a command."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class UnknownCommandError(DecodeError):
    """The leading token names no registered parser."""

    def __init__(self, name: str, suggestions: Tuple[str, ...] = ()) -> None:
        super().__init__(name, f"no command parser for '{name}'")
        self.suggestions = suggestions


class InvalidArgumentsError(DecodeError):
    """The matched parser rejected its argument text."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(name, f"invalid arguments to '{name}': {message}")
        self.reason = message


ParserSpec = Union[Mapping[str, NamedCommandParser], Iterable[NamedCommandParser]]


class Commander:
    """Owns the name -> parser registry and decodes input lines.

    The registry is fixed at construction. Names are matched exactly
    (case-sensitive); a parser's shorthand is accepted as well.
    """

    def __init__(self, parsers: ParserSpec) -> None:
        if isinstance(parsers, Mapping):
            entries = list(parsers.items())
        else:
            entries = [(parser.name, parser) for parser in parsers]

        self._by_name: Dict[str, NamedCommandParser] = {}
        self._by_shorthand: Dict[str, str] = {}

        for name, parser in entries:
            self._register(name, parser)

        for parser in self._by_name.values():
            parser.bind(self)

        for name, parser in self._by_name.items():
            self._check_examples(name, parser)

        logger.debug("Commander registered %d commands: %s", len(self._by_name), self.names())

    def _register(self, name: str, parser: NamedCommandParser) -> None:
        """Add one parser, rejecting bad names and collisions."""
        if not name or any(ch.isspace() for ch in name):
            raise InvalidParserSpec(f"invalid command name '{name}': must be a single word")
        if len(name) < MIN_NAME_LENGTH:
            raise InvalidParserSpec(
                f"invalid command name '{name}': must contain at least {MIN_NAME_LENGTH} characters"
            )
        if name in self._by_name or name in self._by_shorthand:
            raise InvalidParserSpec(f"duplicate command parser for '{name}'")

        shorthand = parser.shorthand
        if shorthand:
            if shorthand in self._by_name or shorthand in self._by_shorthand or shorthand == name:
                raise InvalidParserSpec(f"duplicate command parser for '{shorthand}'")
            self._by_shorthand[shorthand] = name

        self._by_name[name] = parser

    def _check_examples(self, name: str, parser: NamedCommandParser) -> None:
        """Every example in a description must parse with its own parser."""
        for example in parser.description.examples:
            try:
                parser.parse(example.command)
            except ParseError as err:
                raise InvalidParserSpec(
                    f"unparsable example command '{name} {example.command}': {err}"
                ) from err

    # ---------------- Lookup ----------------

    def names(self) -> List[str]:
        """Registered names, in registration order."""
        return list(self._by_name)

    def parsers(self) -> List[Tuple[str, NamedCommandParser]]:
        """(name, parser) pairs, in registration order."""
        return list(self._by_name.items())

    def get(self, name: str) -> Optional[NamedCommandParser]:
        """Return the parser for a name or shorthand, or None."""
        registered = self._resolve(name)
        if registered is None:
            return None
        return self._by_name[registered]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    # ---------------- Decoding ----------------

    def decode(self, line: str) -> Optional[Command]:
        """Decode an input line into a Command.

        Args:
            line: Raw input line, possibly blank

        Returns:
            The Command, or None when the line holds no command

        Raises:
            UnknownCommandError: if the leading token is not registered
            InvalidArgumentsError: if the parser rejects the arguments
        """
        parsed = split_command(line)
        if parsed.is_blank:
            return None

        name = self._resolve(parsed.name)
        if name is None:
            logger.debug("Unknown command: %s", parsed.name)
            raise UnknownCommandError(parsed.name, self._suggest(parsed.name))

        try:
            command = self._by_name[name].parse(parsed.args)
        except ParseError as err:
            logger.debug("Parser for %s rejected %r: %s", name, parsed.args, err)
            raise InvalidArgumentsError(name, str(err)) from err

        logger.debug("Decoded %s -> %s", name, type(command).__name__)
        return command

    def _resolve(self, token: str) -> Optional[str]:
        """Registered name for a name or shorthand token."""
        if token in self._by_name:
            return token
        return self._by_shorthand.get(token)

    def _suggest(self, name: str) -> Tuple[str, ...]:
        """Close matches for a misspelled command name."""
        universe = [*self._by_name, *self._by_shorthand]
        return tuple(difflib.get_close_matches(name, universe, n=MAX_SUGGESTIONS, cutoff=0.6))
