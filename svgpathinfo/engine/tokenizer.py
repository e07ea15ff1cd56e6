"""Command tokenizer — splits path data into one token per argument group.

A command letter may be followed by several argument groups; each group
repeats the command. Groups after the first one of ``M``/``m`` are implicit
``L``/``l`` commands. Numbers and arc flags are scanned inline because how
many values a group holds depends on the command.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from svgpathinfo.engine.scanner import scan_flag, scan_number, skip_separators
from svgpathinfo.errors import ArityMismatchError, UnknownCommandError
from svgpathinfo.models.segments import COMMAND_LETTERS, Position, segment_class

logger = logging.getLogger(__name__)

_IMPLICIT_REPEAT_CMD = {"M": "L", "m": "l"}

# Value slots of an arc group that hold flags instead of numbers
_ARC_FLAG_SLOTS = (3, 4)


@dataclass(frozen=True)
class Token:
    letter: str
    offset: int
    args: tuple[float, ...] = ()

    @property
    def position(self) -> Position:
        return segment_class(self.letter)._position_for(self.letter)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, scanning every argument on the way."""
    tokens: list[Token] = []
    pos = skip_separators(text, 0)

    while pos < len(text):
        ch = text[pos]
        if ch not in COMMAND_LETTERS:
            if ch.isalpha():
                raise UnknownCommandError(f"Unknown path command {ch!r}", offset=pos)
            raise UnknownCommandError(
                f"Path data must start with a command letter, found {ch!r}", offset=pos
            )
        start = pos
        values, offsets, pos = _scan_values(text, pos + 1, ch)
        tokens.extend(_split_groups(ch, start, values, offsets))

    logger.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
    return tokens


def _scan_values(text: str, pos: int, letter: str) -> tuple[list[float], list[int], int]:
    """Scan values after a command letter up to the next letter or end of input."""
    values: list[float] = []
    offsets: list[int] = []
    is_arc = letter in "Aa"

    while True:
        pos = skip_separators(text, pos)
        if pos >= len(text) or text[pos].isalpha():
            break
        if is_arc and len(values) % 7 in _ARC_FLAG_SLOTS:
            value, used = scan_flag(text, pos)
        else:
            value, used = scan_number(text, pos)
        offsets.append(pos)
        values.append(value)
        pos += used

    return values, offsets, pos


def _split_groups(
    letter: str, start: int, values: list[float], offsets: list[int]
) -> list[Token]:
    arity = segment_class(letter).arity

    if arity == 0:
        if values:
            raise ArityMismatchError(
                f"Command {letter!r} takes no arguments, got {len(values)}",
                offset=offsets[0],
            )
        return [Token(letter, start)]

    if not values or len(values) % arity:
        raise ArityMismatchError(
            f"Command {letter!r} expects a multiple of {arity} values, got {len(values)}",
            offset=start,
        )

    tokens: list[Token] = []
    for i in range(0, len(values), arity):
        if i == 0:
            tokens.append(Token(letter, start, tuple(values[:arity])))
        else:
            repeat = _IMPLICIT_REPEAT_CMD.get(letter, letter)
            tokens.append(Token(repeat, offsets[i], tuple(values[i : i + arity])))
    return tokens
