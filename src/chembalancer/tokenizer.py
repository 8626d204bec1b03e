"""Lexer for formula strings."""

from __future__ import annotations

import re

from chembalancer.errors import FormulaSyntaxError, InternalConsistencyError

UNICODE_MINUS = "\u2212"

NAME_PATTERN = re.compile(r"[A-Za-z][a-z]*")
NUMBER_PATTERN = re.compile(r"[0-9]+")

_TOKEN = re.compile(r"[A-Za-z][a-z]*|[0-9]+|[+\-^=()]")
_SPACES = re.compile(r"[ \t]*")


class Tokenizer:
    """Position-tracked token stream over a formula.

    Tokens are element-name-shaped words, digit runs, or one of ``+ - ^ = ( )``.
    Spaces and tabs between tokens are skipped.
    """

    def __init__(self, formula: str) -> None:
        self._text = formula.replace(UNICODE_MINUS, "-")
        self._pos = 0
        self._skip_spaces()

    def position(self) -> int:
        return self._pos

    def peek(self) -> str | None:
        """Return the next token without consuming it, or None at end of input."""
        if self._pos == len(self._text):
            return None
        match = _TOKEN.match(self._text, self._pos)
        if match is None:
            raise FormulaSyntaxError("Invalid symbol", start=self._pos)
        return match.group()

    def take(self) -> str:
        token = self.peek()
        if token is None:
            raise InternalConsistencyError("Advancing beyond last token")
        self._pos += len(token)
        self._skip_spaces()
        return token

    def consume(self, expected: str) -> None:
        if self.take() != expected:
            raise InternalConsistencyError("Token mismatch")

    def _skip_spaces(self) -> None:
        self._pos = _SPACES.match(self._text, self._pos).end()
