import logging

import pytest

from gtp.errors import (
    CountOverflowError,
    GtpError,
    NoCommandError,
    NoWhitespaceError,
    ParserReusedError,
)
from gtp.parser import Parser, RawCommand, parse


def test_parse_count_name_and_args() -> None:
    got = parse("3 play black D5")
    assert got == RawCommand(count=3, name="play", args=("black", "D5"))


def test_parse_bare_command() -> None:
    got = parse("quit")
    assert got.count is None
    assert got.name == "quit"
    assert got.args == ()


def test_parse_a_command() -> None:
    parser = Parser("123 hello arg1 arg2 arg3")
    got = parser.parse()
    assert got == RawCommand(count=123, name="hello", args=("arg1", "arg2", "arg3"))


def test_parse_empty_line_has_no_command() -> None:
    with pytest.raises(NoCommandError):
        parse("")


def test_parse_whitespace_only_line_has_no_command() -> None:
    with pytest.raises(NoCommandError):
        parse("   \t ")


def test_parse_count_without_whitespace_fails() -> None:
    with pytest.raises(NoWhitespaceError) as exc_info:
        parse("42")
    assert exc_info.value.line == "42"
    assert exc_info.value.kind == "no_whitespace"


def test_parse_count_glued_to_name_fails() -> None:
    with pytest.raises(NoWhitespaceError):
        parse("3play")


def test_parse_count_followed_by_whitespace_only_has_no_command() -> None:
    with pytest.raises(NoCommandError):
        parse("7   ")


def test_parse_count_overflow() -> None:
    with pytest.raises(CountOverflowError):
        parse("4294967296 play")


def test_parse_errors_share_base_class() -> None:
    for line in ("", "42"):
        with pytest.raises(GtpError):
            parse(line)


def test_parse_leading_whitespace_without_count_has_no_command() -> None:
    # whitespace is only skipped after a count or an identifier
    with pytest.raises(NoCommandError):
        parse("  quit")


def test_parse_collapses_repeated_separators() -> None:
    assert parse("1   genmove \t white").args == ("white",)


def test_parse_ignores_trailing_punctuation() -> None:
    got = parse("2 play black D5 # comment")
    assert got == RawCommand(count=2, name="play", args=("black", "D5"))


def test_parse_stops_at_glued_punctuation() -> None:
    assert parse("boardsize 19,extra") == RawCommand(count=None, name="boardsize", args=("19",))


def test_parse_numeric_arguments_are_strings() -> None:
    got = parse("boardsize 19")
    assert got.count is None
    assert got.args == ("19",)


def test_parse_unicode_word_characters() -> None:
    assert parse("jouer noir été").args == ("noir", "été")


@pytest.mark.parametrize(
    "line",
    [
        "list_commands",
        "play white Q16",
        "komi 6 5",
        "known_command genmove",
        "time_settings 0 30 5",
    ],
)
def test_parse_word_lines_match_whitespace_split(line: str) -> None:
    got = parse(line)
    tokens = line.split()
    assert got.count is None
    assert got.name == tokens[0]
    assert list(got.args) == tokens[1:]


@pytest.mark.parametrize(
    "command",
    [
        RawCommand(count=3, name="play", args=("black", "D5")),
        RawCommand(count=None, name="quit"),
        RawCommand(count=0, name="clear_board"),
        RawCommand(count=None, name="komi", args=("6",)),
    ],
)
def test_reparsing_serialised_command_is_stable(command: RawCommand) -> None:
    assert parse(command.to_line()) == command


def test_to_line_omits_missing_count() -> None:
    assert RawCommand(count=None, name="play", args=("b", "A1")).to_line() == "play b A1"
    assert RawCommand(count=9, name="quit").to_line() == "9 quit"


def test_raw_command_normalises_args_to_tuple() -> None:
    command = RawCommand(count=None, name="play", args=["black", "D5"])  # type: ignore[arg-type]
    assert command.args == ("black", "D5")
    assert hash(command) == hash(RawCommand(count=None, name="play", args=("black", "D5")))


def test_raw_command_is_immutable() -> None:
    command = parse("quit")
    with pytest.raises(AttributeError):
        command.name = "other"  # type: ignore[misc]


def test_parser_is_single_use() -> None:
    parser = Parser("quit")
    parser.parse()
    with pytest.raises(ParserReusedError):
        parser.parse()


def test_failed_parser_is_also_consumed() -> None:
    parser = Parser("")
    with pytest.raises(NoCommandError):
        parser.parse()
    with pytest.raises(ParserReusedError):
        parser.parse()


def test_parse_into_any_type() -> None:
    class QuickCmd:
        def __init__(self, count: int | None, name: str, args: tuple[str, ...]) -> None:
            self.parts = (count, name, args)

        @classmethod
        def from_raw(cls, raw: RawCommand) -> "QuickCmd":
            return cls(raw.count, raw.name, raw.args)

    got = parse("123 hello arg1 arg2 arg3", QuickCmd)
    assert isinstance(got, QuickCmd)
    assert got.parts == (123, "hello", ("arg1", "arg2", "arg3"))


def test_parse_with_raw_command_target_is_identity() -> None:
    assert parse("5 quit", RawCommand) == parse("5 quit")


def test_parse_logs_outcome(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="gtp.parser")
    parse("1 quit")
    with pytest.raises(NoWhitespaceError):
        parse("1")
    messages = [record.getMessage() for record in caplog.records]
    assert any("gtp line parsed" in message for message in messages)
    assert any("kind=no_whitespace" in message for message in messages)


def test_parse_count_followed_by_unit_separator_fails() -> None:
    with pytest.raises(NoWhitespaceError):
        parse("1\x1fquit")


def test_parse_decomposed_accent_ends_argument_list() -> None:
    assert parse("play black cafe\u0301 x").args == ("black", "cafe")
