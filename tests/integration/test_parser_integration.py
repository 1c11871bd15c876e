"""Integration tests for the parser facade.

Tests exercise registration, parsing and value access through ArgsParser the
way a host program uses it.
"""

from pathlib import Path
from typing import get_type_hints

import pytest

from argspy import ArgsParser, Parsed
from argspy.core.resolver import ParseState
from argspy.errors import (
    AlreadyParsedError,
    DuplicateFlagError,
    InvalidArgTypeError,
    MandatoryArgNotProvidedError,
    NotYetParsedError,
    ToggleError,
    UndefinedFlagError,
    UnknownFlagError,
)


@pytest.fixture
def parser() -> ArgsParser:
    """Parser with a typical set of parameters."""
    parser = ArgsParser()
    parser.add_string("file", "f", "file to read", mandatory=True)
    parser.add_string("save", "s", "file to write")
    parser.add_integer("limit", "l", "maximum number of rows", default=10)
    parser.add_double("ratios", "r", "ratios to apply", array=True)
    return parser


class TestParsing:
    """Test full parsing runs."""

    def test_values_by_any_flag_form(self, parser: ArgsParser) -> None:
        """When parsing succeeds, values can be read by full flag, short flag or name."""
        parser.parse_unchecked(["-f", "in.txt", "--save", "out.txt"])
        assert [parser.get_argument_of(flag) for flag in ("file", "--file", "-f")] == [
            "in.txt"
        ] * 3

    def test_default_used_when_absent(self, parser: ArgsParser) -> None:
        """When an optional flag with default is absent, the default is returned."""
        parser.parse_unchecked(["-f", "in.txt"])
        assert parser.get_argument_of("limit") == 10

    def test_array_values(self, parser: ArgsParser) -> None:
        """When an array flag gets several values, a tuple is returned."""
        parser.parse_unchecked(["-r", "0.5", "1.5", "-f", "in.txt"])
        assert parser.get_argument_of("-r") == (0.5, 1.5)

    def test_raw_tokens(self, parser: ArgsParser) -> None:
        """When raw tokens are requested, they are returned unconverted."""
        parser.parse_unchecked(["-l", "007", "-f", "in.txt"])
        assert parser.get_raw_of("--limit") == ("007",)

    def test_returns_parsed(self, parser: ArgsParser) -> None:
        """When parsing succeeds, a Parsed result is returned."""
        assert isinstance(parser.parse_unchecked(["-f", "in.txt"]), Parsed)

    def test_value_is_stable(self, parser: ArgsParser) -> None:
        """When a value is read twice, the same object is returned."""
        parser.parse_unchecked(["-r", "1", "2", "-f", "in.txt"])
        assert parser.get_argument_of("ratios") is parser.get_argument_of("ratios")

    def test_missing_mandatory(self, parser: ArgsParser) -> None:
        """When the mandatory flag is absent, it is reported."""
        with pytest.raises(MandatoryArgNotProvidedError) as exc_info:
            parser.parse_unchecked(["-s", "out.txt"])
        assert exc_info.value.missing_flags == ("--file",)

    def test_invalid_integer(self, parser: ArgsParser) -> None:
        """When an integer flag gets text, the type error names the flag."""
        with pytest.raises(InvalidArgTypeError) as exc_info:
            parser.parse_unchecked(["-f", "in.txt", "-l", "ten"])
        assert exc_info.value.flag == "--limit"

    def test_unknown_flag_message(self, parser: ArgsParser) -> None:
        """When a flag is misspelled, the message suggests the right one."""
        with pytest.raises(UnknownFlagError) as exc_info:
            parser.parse_unchecked(["-f", "in.txt", "--sav", "out.txt"])
        assert exc_info.value.message == (
            "\n<!> unknown flag or command: --sav\n"
            "> did you mean: --save ?\n"
            "\n> Use --help for more information.\n"
        )

    def test_state_after_parse(self, parser: ArgsParser) -> None:
        """When parsing succeeds, the parser reports COMPLETED."""
        parser.parse_unchecked(["-f", "in.txt"])
        assert parser.state is ParseState.COMPLETED

    def test_typed_adders(self) -> None:
        """When booleans and characters are declared, their values are converted."""
        parser = ArgsParser()
        parser.add_boolean("flags", array=True)
        parser.add_character("sep")
        parser.parse_unchecked(["--flags", "true", "FALSE", "--sep", ";;"])
        assert (parser.get_argument_of("flags"), parser.get_argument_of("sep")) == (
            (True, False),
            ";",
        )

    def test_typed_adders_are_annotated(self) -> None:
        """When a typed adder is inspected, its flags carry the hints of add_parameter."""
        assert get_type_hints(ArgsParser.add_path)["short_flag"] == get_type_hints(
            ArgsParser.add_parameter
        )["short_flag"]

    def test_path_check_uses_predicate(self) -> None:
        """When a checked path exists according to the predicate, it is accepted."""
        parser = ArgsParser(exists=lambda path: path.name == "data.csv")
        parser.add_path("input", "i", path_check=True)
        parser.parse_unchecked(["-i", "dir/data.csv"])
        assert parser.get_argument_of("input") == Path("dir/data.csv")


class TestCommands:
    """Test commands and toggles."""

    def test_command_is_reported(self) -> None:
        """When a command is given, it is reported as provided."""
        parser = ArgsParser()
        parser.add_command("build", "b")
        parser.parse_unchecked(["b"])
        assert parser.is_command_provided("build") is True

    def test_toggle_violation(self) -> None:
        """When two toggled commands are given, parsing fails."""
        parser = ArgsParser()
        quiet = parser.add_command("quiet", "q")
        loud = parser.add_command("loud", "L")
        parser.toggle(quiet, loud)
        with pytest.raises(ToggleError):
            parser.parse_unchecked(["q", "L"])

    def test_unknown_command_query(self) -> None:
        """When an undeclared command is queried, the query fails."""
        parser = ArgsParser()
        parser.parse_unchecked([])
        with pytest.raises(UndefinedFlagError):
            parser.is_command_provided("build")


class TestApiMisuse:
    """Test errors caused by the host program."""

    def test_duplicate_flag(self, parser: ArgsParser) -> None:
        """When a flag is declared twice, registration fails."""
        with pytest.raises(DuplicateFlagError):
            parser.add_string("file")

    def test_register_after_parse(self, parser: ArgsParser) -> None:
        """When a flag is declared after parsing, registration fails."""
        parser.parse_unchecked(["-f", "in.txt"])
        with pytest.raises(AlreadyParsedError):
            parser.add_string("late")

    def test_query_before_parse(self, parser: ArgsParser) -> None:
        """When a value is read before parsing, it fails."""
        with pytest.raises(NotYetParsedError):
            parser.get_argument_of("file")

    def test_query_undefined_flag(self, parser: ArgsParser) -> None:
        """When an undeclared flag is queried, it fails."""
        parser.parse_unchecked(["-f", "in.txt"])
        with pytest.raises(UndefinedFlagError):
            parser.get_argument_of("--nope")

    def test_parse_twice(self, parser: ArgsParser) -> None:
        """When parse is called twice, the second call fails."""
        parser.parse_unchecked(["-f", "in.txt"])
        with pytest.raises(AlreadyParsedError):
            parser.parse_unchecked(["-f", "in.txt"])

    def test_contains(self, parser: ArgsParser) -> None:
        """When a declared short flag is checked, it is contained."""
        assert "-l" in parser


class TestProcessExit:
    """Test parse(), which prints and exits."""

    def test_help_exits_zero(self, parser: ArgsParser) -> None:
        """When help is requested, the process exits with status 0."""
        with pytest.raises(SystemExit) as exc_info:
            parser.parse(["--help"])
        assert exc_info.value.code == 0

    def test_help_is_printed(self, parser: ArgsParser, capsys) -> None:
        """When help is requested, the help text is printed."""
        with pytest.raises(SystemExit):
            parser.parse(["-h"])
        assert "Available Parameters:" in capsys.readouterr().out

    def test_error_exits_one(self, parser: ArgsParser) -> None:
        """When the input is invalid, the process exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            parser.parse(["--file"])
        assert exc_info.value.code == 1

    def test_error_is_printed(self, parser: ArgsParser, capsys) -> None:
        """When the input is invalid, the framed message is printed."""
        with pytest.raises(SystemExit):
            parser.parse(["--file"])
        assert "<!> Missing argument for flag: --file" in capsys.readouterr().out

    def test_success_returns_result(self, parser: ArgsParser) -> None:
        """When the input is valid, parse returns normally."""
        assert isinstance(parser.parse(["-f", "in.txt"]), Parsed)

    def test_reads_sys_argv(self, parser: ArgsParser, monkeypatch) -> None:
        """When no tokens are passed, sys.argv without the program name is used."""
        monkeypatch.setattr("sys.argv", ["prog", "-f", "argv.txt"])
        parser.parse()
        assert parser.get_argument_of("file") == "argv.txt"
