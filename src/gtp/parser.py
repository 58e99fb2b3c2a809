"""Line parser for the Go Text Protocol.

A line is an optional numeric count, a command name and zero or more
arguments, all separated by whitespace::

    >>> parse("3 play black D5")
    RawCommand(count=3, name='play', args=('black', 'D5'))

``parse`` also accepts a target with a ``from_raw`` hook (for example a
``TypedCommand`` subclass) and returns whatever that hook produces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar, overload

from gtp.errors import NoCommandError, ParseError, ParserReusedError
from gtp.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@dataclass(frozen=True)
class RawCommand:
    """An untyped command: optional count, command name and its arguments."""

    count: int | None
    name: str
    args: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def from_raw(cls, raw: RawCommand) -> RawCommand:
        return raw

    def to_line(self) -> str:
        parts = [self.name, *self.args]
        if self.count is not None:
            parts.insert(0, str(self.count))
        return " ".join(parts)


class CommandTarget(Protocol[T_co]):
    """Anything that can be built from a RawCommand."""

    def from_raw(self, raw: RawCommand, /) -> T_co: ...


class Parser:
    """Single-use parser for one protocol line."""

    def __init__(self, line: str) -> None:
        self._tokenizer = Tokenizer(line)
        self._consumed = False

    @property
    def line(self) -> str:
        return self._tokenizer.src

    def parse(self) -> RawCommand:
        """Parse the line into a RawCommand."""
        if self._consumed:
            raise ParserReusedError("parser has already consumed its line")
        self._consumed = True

        try:
            count, identifiers = self._lex()
        except ParseError as exc:
            logger.debug("gtp line rejected: kind=%s line=%r", exc.kind, self.line)
            raise

        if not identifiers:
            logger.debug("gtp line rejected: kind=%s line=%r", NoCommandError.kind, self.line)
            raise NoCommandError("no command found in line", line=self.line)

        command = RawCommand(count=count, name=identifiers[0], args=tuple(identifiers[1:]))
        logger.debug(
            "gtp line parsed: count=%s name=%s args=%d",
            command.count,
            command.name,
            len(command.args),
        )
        return command

    def _lex(self) -> tuple[int | None, list[str]]:
        tokenizer = self._tokenizer
        count = tokenizer.read_number()
        if count is not None:
            tokenizer.skip_whitespace(mandatory=True)

        identifiers: list[str] = []
        while (token := tokenizer.lex_identifier()) is not None:
            identifiers.append(token)
            tokenizer.skip_whitespace(mandatory=False)
        return count, identifiers


@overload
def parse(line: str) -> RawCommand: ...


@overload
def parse(line: str, target: CommandTarget[T]) -> T: ...


def parse(line: str, target: CommandTarget[Any] | None = None) -> Any:
    """Parse one line, optionally converting it with ``target.from_raw``."""
    raw = Parser(line).parse()
    if target is None:
        return raw
    return target.from_raw(raw)

