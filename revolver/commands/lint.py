"""Linting of parser descriptions.

Meant for use in an application's own test suite, e.g.::

    def test_add_parser_lints():
        assert_pedantic(AddParser())
"""

from enum import Enum
from typing import Iterable, List

from revolver.commands.parser import Description, Example, NamedCommandParser


class Lint(Enum):
    """Problems found while validating a parser's description."""

    PURPOSE_HAS_EXCESS_WHITESPACE = "purpose has excess whitespace"
    PURPOSE_IS_EMPTY = "purpose is empty"
    PURPOSE_DOES_NOT_BEGIN_WITH_UPPERCASE = "purpose does not begin with uppercase"
    PURPOSE_DOES_NOT_END_WITH_PERIOD = "purpose does not end with period"
    USAGE_HAS_EXCESS_WHITESPACE = "usage has excess whitespace"
    USAGE_BEGINS_WITH_COMMAND_NAME = "usage begins with command name"
    EXAMPLE_SCENARIO_HAS_EXCESS_WHITESPACE = "example scenario has excess whitespace"
    EXAMPLE_SCENARIO_IS_EMPTY = "example scenario is empty"
    EXAMPLE_SCENARIO_BEGINS_WITH_UPPERCASE = "example scenario begins with uppercase"
    EXAMPLE_SCENARIO_ENDS_WITH_PERIOD = "example scenario ends with period"
    EXAMPLE_COMMAND_HAS_EXCESS_WHITESPACE = "example command has excess whitespace"
    EXAMPLE_COMMAND_IS_EMPTY = "example command is empty"
    EXAMPLE_COMMAND_BEGINS_WITH_COMMAND_NAME = "example command begins with command name"


def validate(parser: NamedCommandParser) -> List[Lint]:
    """Return the lints raised by a parser's description."""
    failed: List[Lint] = []
    _validate_description(parser.name, parser.description, failed)
    return failed


def check(parser: NamedCommandParser, exclusions: Iterable[Lint] = ()) -> None:
    """Fail on the first lint that is not excluded.

    Raises:
        AssertionError: naming the failed lint
    """
    excluded = set(exclusions)
    for lint in validate(parser):
        if lint not in excluded:
            raise AssertionError(f"failed lint for '{parser.name}': {lint.value}")


def assert_pedantic(parser: NamedCommandParser) -> None:
    """Fail on any lint at all."""
    check(parser)


def _validate_description(command_name: str, desc: Description, failed: List[Lint]) -> None:
    purpose, usage = desc.purpose, desc.usage

    _require(purpose.strip() == purpose, Lint.PURPOSE_HAS_EXCESS_WHITESPACE, failed)
    if _require(bool(purpose), Lint.PURPOSE_IS_EMPTY, failed):
        _require(purpose[0].isupper(), Lint.PURPOSE_DOES_NOT_BEGIN_WITH_UPPERCASE, failed)
        _require(purpose.endswith("."), Lint.PURPOSE_DOES_NOT_END_WITH_PERIOD, failed)

    _require(usage.strip() == usage, Lint.USAGE_HAS_EXCESS_WHITESPACE, failed)
    if usage:
        _require(not usage.startswith(command_name), Lint.USAGE_BEGINS_WITH_COMMAND_NAME, failed)

    for example in desc.examples:
        _validate_example(command_name, example, failed)


def _validate_example(command_name: str, example: Example, failed: List[Lint]) -> None:
    scenario, command = example.scenario, example.command

    _require(scenario.strip() == scenario, Lint.EXAMPLE_SCENARIO_HAS_EXCESS_WHITESPACE, failed)
    if _require(bool(scenario), Lint.EXAMPLE_SCENARIO_IS_EMPTY, failed):
        _require(not scenario[0].isupper(), Lint.EXAMPLE_SCENARIO_BEGINS_WITH_UPPERCASE, failed)
        _require(not scenario.endswith("."), Lint.EXAMPLE_SCENARIO_ENDS_WITH_PERIOD, failed)

    _require(command.strip() == command, Lint.EXAMPLE_COMMAND_HAS_EXCESS_WHITESPACE, failed)
    if _require(bool(command), Lint.EXAMPLE_COMMAND_IS_EMPTY, failed):
        _require(
            not command.startswith(command_name),
            Lint.EXAMPLE_COMMAND_BEGINS_WITH_COMMAND_NAME,
            failed,
        )


def _require(condition: bool, lint: Lint, failed: List[Lint]) -> bool:
    if not condition:
        failed.append(lint)
    return condition
