"""Go Text Protocol line parsing."""

from gtp.commands import TypedCommand, UnrecognisedCommand, custom_command
from gtp.errors import (
    ConfigError,
    CountOverflowError,
    GtpError,
    NoCommandError,
    NoWhitespaceError,
    ParseError,
    ParserReusedError,
    PatternCompilationError,
)
from gtp.parser import CommandTarget, Parser, RawCommand, parse
from gtp.tokenizer import Tokenizer

__all__ = [
    "CommandTarget",
    "ConfigError",
    "CountOverflowError",
    "GtpError",
    "NoCommandError",
    "NoWhitespaceError",
    "ParseError",
    "Parser",
    "ParserReusedError",
    "PatternCompilationError",
    "RawCommand",
    "Tokenizer",
    "TypedCommand",
    "UnrecognisedCommand",
    "custom_command",
    "parse",
]
