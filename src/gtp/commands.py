"""Typed commands built on top of RawCommand.

A typed command is an enum of payload-free variants whose values are the
declared command names. Incoming names are matched case-insensitively, and
anything that matches no variant becomes an ``UnrecognisedCommand`` carrying
the original count, name and arguments::

    class EngineCommand(TypedCommand):
        ShowBoard = "ShowBoard"
        Quit = "Quit"

    parse("showboard", EngineCommand)  # EngineCommand.ShowBoard
    parse("3 foo bar", EngineCommand)  # UnrecognisedCommand(3, "foo", ("bar",))

``custom_command()`` builds the same kind of enum from a list of names.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Self

from gtp.parser import RawCommand

logger = logging.getLogger(__name__)

_VARIANT_NAME_RE = re.compile(r"\w+")


@dataclass(frozen=True)
class UnrecognisedCommand:
    """A command whose name matched no declared variant."""

    count: int | None
    name: str
    args: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    def to_raw(self) -> RawCommand:
        return RawCommand(count=self.count, name=self.name, args=self.args)


class TypedCommand(StrEnum):
    """Base class for caller-defined command sets.

    Member values are the declared command names and must be strings.
    """

    @classmethod
    def from_raw(cls, raw: RawCommand) -> Self | UnrecognisedCommand:
        wanted = raw.name.lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return UnrecognisedCommand(count=raw.count, name=raw.name, args=raw.args)

    @classmethod
    def variant_names(cls) -> list[str]:
        return [member.value for member in cls]


# Names that would shadow TypedCommand or str attributes on the generated class.
_RESERVED_VARIANT_NAMES = frozenset(
    name for name in (*vars(TypedCommand), *dir(str)) if not name.startswith("_")
) | {"mro"}


def custom_command(
    name: str,
    variants: Sequence[str],
    *,
    doc: str | None = None,
    module: str | None = None,
) -> type[TypedCommand]:
    """Build a TypedCommand subclass with one member per variant name.

    Args:
        name: Class name of the generated enum.
        variants: Command names in declaration order. Earlier names win when
            two of them only differ by case.
        doc: Optional docstring for the generated class.
        module: Module to report for the generated class (used for pickling).

    Raises:
        ValueError: If a variant name is empty, not made of word characters,
            reserved by the generated class, or declared twice.
    """
    for variant in variants:
        if not isinstance(variant, str) or not _VARIANT_NAME_RE.fullmatch(variant):
            raise ValueError(f"invalid command variant name: {variant!r}")
        if variant.startswith("_"):
            raise ValueError(f"command variant name must not start with '_': {variant!r}")
        if variant in _RESERVED_VARIANT_NAMES:
            raise ValueError(f"command variant name is reserved: {variant!r}")
    duplicates = sorted({variant for variant in variants if variants.count(variant) > 1})
    if duplicates:
        raise ValueError(f"duplicate command variant names: {', '.join(duplicates)}")

    command_cls = TypedCommand(name, [(variant, variant) for variant in variants], module=module)
    if doc is not None:
        command_cls.__doc__ = doc
    logger.debug("built typed command %s with %d variants", name, len(variants))
    return command_cls
