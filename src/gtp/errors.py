"""GTP exception hierarchy.

All library exceptions inherit from GtpError so callers can catch every
failure of a parse call with a single clause. Line-level rejections share
ParseError, which carries the offending line and a stable ``kind`` code.
"""


class GtpError(Exception):
    """Base exception for all GTP errors."""

    kind = "gtp_error"


class ParseError(GtpError):
    """A protocol line could not be turned into a command."""

    kind = "parse_error"

    def __init__(self, message: str = "", *, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class NoWhitespaceError(ParseError):
    """Mandatory whitespace after the leading count was missing."""

    kind = "no_whitespace"


class NoCommandError(ParseError):
    """The line contained no command name."""

    kind = "no_command"


class CountOverflowError(ParseError):
    """The leading count does not fit in an unsigned 32-bit integer."""

    kind = "count_overflow"


class PatternCompilationError(GtpError):
    """A token pattern failed to compile."""

    kind = "pattern_compilation"


class ParserReusedError(GtpError):
    """A parser instance was asked to parse a second time."""

    kind = "parser_reused"


class ConfigError(GtpError):
    """Invalid or missing configuration."""

    kind = "config_error"
