"""Tokenizer — raw path text → flat sequence of command and number tokens.

Separators (whitespace and commas) are optional wherever the grammar is
unambiguous: ``M10-10`` is ``M``, ``10``, ``-10`` and ``1.5.5`` is ``1.5``, ``.5``.
"""

from __future__ import annotations

import enum
import logging
import math
import re
from dataclasses import dataclass

from clippath.engine.errors import TokenizeError

logger = logging.getLogger(__name__)

COMMAND_LETTERS = frozenset("MmLlHhVvCcSsQqTtAaZz")

_SEPARATORS = frozenset(" \t\n\r,")
_NUMBER_START = frozenset("0123456789+-.")
_DIGITS = frozenset("0123456789")

# A complete literal: sign, mantissa with at least one digit, optional exponent with digits.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class TokenKind(enum.Enum):
    COMMAND = "command"
    NUMBER = "number"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str | float
    # Character offset of the token in the source text
    index: int = 0

    @property
    def is_command(self) -> bool:
        return self.kind is TokenKind.COMMAND

    @property
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    def describe(self) -> str:
        if self.is_command:
            return f'command "{self.value}"'
        return f"number {self.value:.15g}"


def tokenize(text: str) -> list[Token]:
    """Split path data into tokens, raising TokenizeError on anything unrecognised."""
    tokens: list[Token] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch in _SEPARATORS:
            i += 1
            continue

        if ch in COMMAND_LETTERS:
            tokens.append(Token(TokenKind.COMMAND, ch, i))
            i += 1
            continue

        if ch in _NUMBER_START:
            end = _scan_number(text, i)
            literal = text[i:end]
            if not _NUMBER_RE.fullmatch(literal):
                raise TokenizeError(literal, i, reason="number")
            value = float(literal)
            if not math.isfinite(value):
                raise TokenizeError(literal, i, reason="number")
            tokens.append(Token(TokenKind.NUMBER, value, i))
            i = end
            continue

        raise TokenizeError(ch, i)

    logger.debug("Tokenized %d chars into %d tokens", n, len(tokens))
    return tokens


def _scan_number(text: str, start: int) -> int:
    """Return the end offset of the longest numeric-looking run starting at ``start``.

    The run is validated separately; this only decides where it stops.
    """
    i = start
    n = len(text)
    seen_dot = False
    seen_exp = False

    if text[i] in "+-":
        i += 1

    while i < n:
        ch = text[i]
        if ch in _DIGITS:
            i += 1
        elif ch == "." and not seen_dot and not seen_exp:
            seen_dot = True
            i += 1
        elif ch in "eE" and not seen_exp and i > start:
            seen_exp = True
            i += 1
            if i < n and text[i] in "+-":
                i += 1
        else:
            break

    return i
