"""Token primitives for a single GTP line."""

from __future__ import annotations

import re
from functools import lru_cache

from gtp.errors import CountOverflowError, NoWhitespaceError, PatternCompilationError

NUMBER_PATTERN = r"\d+"
# \s minus the ASCII information separators (\x1c-\x1f), which are not Unicode White_Space.
WHITESPACE_PATTERN = r"[^\S\x1c-\x1f]+"
# Letters, digits and underscore; combining marks are not word characters.
IDENTIFIER_PATTERN = r"\w+"

U32_MAX = 2**32 - 1


@lru_cache(maxsize=None)
def compile_pattern(source: str) -> re.Pattern[str]:
    """Compile and cache a token pattern."""
    try:
        return re.compile(source)
    except re.error as exc:
        raise PatternCompilationError(f"invalid token pattern {source!r}: {exc}") from exc


class Tokenizer:
    """Forward-only cursor over one line of input.

    Each primitive tries to match at the cursor and only moves it on success.
    Characters that are neither whitespace nor word characters are never
    consumed; they simply stop the number and identifier matches.
    """

    def __init__(self, line: str) -> None:
        self.src = line
        self.pointer = 0

    @property
    def remaining(self) -> str:
        return self.src[self.pointer :]

    @property
    def at_end(self) -> bool:
        return self.pointer >= len(self.src)

    def _match(self, source: str) -> re.Match[str] | None:
        return compile_pattern(source).match(self.src, self.pointer)

    def read_number(self) -> int | None:
        """Read a run of decimal digits, returning None if there is none."""
        match = self._match(NUMBER_PATTERN)
        if match is None:
            return None
        value = int(match.group())
        if value > U32_MAX:
            raise CountOverflowError(
                f"count {match.group()} exceeds {U32_MAX}", line=self.src
            )
        self.pointer = match.end()
        return value

    def skip_whitespace(self, mandatory: bool) -> None:
        """Move past any whitespace; raise if none was found and it was required."""
        match = self._match(WHITESPACE_PATTERN)
        if match is not None:
            self.pointer = match.end()
            return
        if mandatory:
            raise NoWhitespaceError(
                f"expected whitespace at offset {self.pointer}", line=self.src
            )

    def lex_identifier(self) -> str | None:
        """Read a run of word characters (letters, digits, underscore)."""
        match = self._match(IDENTIFIER_PATTERN)
        if match is None:
            return None
        self.pointer = match.end()
        return match.group()
