"""Integration tests for help output produced by a parser."""

from argspy import ArgsParser, HelpRequested, load_config


def _single_flag_help() -> str:
    header = "#" * 47 + " HELP " + "#" * 47
    return "\n".join(
        [
            header,
            "#" + " " * 44 + "[d]=Double",
            "#" + " " * 35 + "(!)=mandatory | (?)=optional",
            "#",
            "###  --parameterFlag4  -pf4  [d]  (?)  description",
            "#" + " " * 28 + "default:  5.6",
            "#",
            "#" * 100,
        ]
    )


class TestHelpOutput:
    """Test help text for complete parsers."""

    def test_help_for_single_flag(self) -> None:
        """When help follows a flag, only that flag is described."""
        parser = ArgsParser()
        parser.add_double("parameterFlag4", "pf4", "description", default=5.6)
        result = parser.parse_unchecked(["-pf4", "--help"])
        assert result == HelpRequested(_single_flag_help())

    def test_help_lists_commands(self) -> None:
        """When commands are declared, the help lists them in their own section."""
        parser = ArgsParser()
        parser.add_string("file", "f")
        parser.add_command("build", "b", "build the project")
        result = parser.parse_unchecked(["--help"])
        assert "#" + " " * 39 + "Available Commands:" in result.text.split("\n")

    def test_help_text_without_parsing(self) -> None:
        """When help text is requested directly, it matches the --help output."""
        parser = ArgsParser()
        parser.add_string("file", "f", "input file")
        text = parser.help_text()
        assert parser.parse_unchecked(["--help"]) == HelpRequested(text)

    def test_configured_width(self) -> None:
        """When a width is configured, the help box uses it."""
        parser = ArgsParser(load_config({"console_width": 60}))
        parser.add_string("file", "f", "input file " * 10)
        assert all(len(line) <= 60 for line in parser.help_text().split("\n"))

    def test_multiline_description(self) -> None:
        """When a description has a newline, the second line is aligned below the first."""
        parser = ArgsParser()
        parser.add_string("file", "f", "first line\nsecond line")
        lines = parser.help_text().split("\n")
        assert "#" + " " * 26 + "second line" in lines

    def test_long_path_default_is_chunked(self) -> None:
        """When a default path is longer than the box, it is cut at the box edge."""
        parser = ArgsParser()
        parser.add_path(
            "parameterFlag5",
            "pf5",
            "path",
            default="this/path/is/so/long/it/is/actually/longer/than/any/existing/path/"
            "that/I/have/on/my/PC/Do/You/Know/The/WordOberwesedampfschifffahrtsgesellschaft",
        )
        lines = parser.help_text().split("\n")
        expected = (
            "#" + " " * 28 + "default:  this/path/is/so/long/it/is/actually/longer/than/any/"
            "existing/"
        )
        assert expected in lines
