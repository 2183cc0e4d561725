"""Tests for the calculator demo."""

from revolver.calculator import AddParser, PrintParser, SubtractParser, build_commander, run
from revolver.commands.lint import assert_pedantic
from revolver.terminal import MockTerminal


class TestCalculator:
    """Test the calculator session."""

    def test_session(self):
        terminal = MockTerminal(["add 1.5", "s 0.5", "print", "quit"])
        register = run(terminal)

        assert register.value == 1.0
        assert terminal.output == ["1.5", "1", "1"]

    def test_bad_value(self):
        terminal = MockTerminal(["add lots"])
        register = run(terminal)

        assert register.value == 0.0
        assert terminal.output[0].startswith("Invalid input: invalid arguments to 'add': ")

    def test_bad_value_via_shorthand(self):
        terminal = MockTerminal(["s lots"])
        run(terminal)

        assert terminal.output[0].startswith("Invalid input: invalid arguments to 'subtract': ")

    def test_print_takes_no_args(self):
        terminal = MockTerminal(["print now"])
        run(terminal)

        assert terminal.output == [
            "Invalid input: invalid arguments to 'print': expected no arguments, got 'now'."
        ]

    def test_help(self):
        terminal = MockTerminal(["help"])
        run(terminal)

        assert terminal.output == [
            "a, add <value>       Adds a value to the register.",
            "s, subtract <value>  Subtracts a value from the register.",
            "p, print             Prints the contents of the register.",
            "h, help              Displays a list of commands.",
            "q, quit              Exits the program.",
        ]

    def test_registry(self):
        assert build_commander().names() == ["add", "subtract", "print", "help", "quit"]

    def test_parsers_lint_clean(self):
        for parser in (AddParser(), SubtractParser(), PrintParser()):
            assert_pedantic(parser)
