"""Constants shared across ArgsPy."""


class Constants:
    """Fixed values used by the parser and the help renderer."""

    # Help flags, in the order they are offered as suggestions
    HELP_FLAGS = ("--help", "-h")
    # Names that can never be registered as a flag or command
    RESERVED_FLAGS = frozenset({"--help", "--h", "-h", "-help"})

    DEFAULT_CONSOLE_WIDTH = 100
    MIN_CONSOLE_WIDTH = 40
    DEFAULT_SUGGESTION_THRESHOLD = 0.1
    DEFAULT_HELP_TITLE = " HELP "

    NO_DESCRIPTION = "No description available!"
    DEFAULT_LABEL = "default:  "
    TOGGLE_LABEL = "cannot be combined with:  "
    MANDATORY_MARKER = "(!)"
    OPTIONAL_MARKER = "(?)"
    COMMAND_MARKER = "(/)"
