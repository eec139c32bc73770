# --------------------------
# Tokenizer / Lexer
# --------------------------

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from spancalc.errors import InvalidCharError, LexEofError, NumberTooLargeError
from spancalc.span import Annot, Span

logger = logging.getLogger(__name__)

# Number literals are unsigned 64-bit values.
MAX_LITERAL = 2 ** 64 - 1

_DIGITS = "0123456789"
_SPACES = " \n\t"


class TokenKind(Enum):
    NUMBER = "number"
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"


_PUNCTUATION = {
    kind.value: kind for kind in TokenKind if kind is not TokenKind.NUMBER
}


@dataclass(frozen=True)
class Token(Annot[TokenKind]):
    """A token kind with its span; NUMBER tokens also carry their literal."""
    literal: Optional[int] = None

    @classmethod
    def number(cls, n: int, span: Span) -> Token:
        return cls(TokenKind.NUMBER, span, n)

    @classmethod
    def punct(cls, kind: TokenKind, span: Span) -> Token:
        return cls(kind, span)

    @property
    def kind(self) -> TokenKind:
        return self.value

    @property
    def text(self) -> str:
        if self.value is TokenKind.NUMBER:
            return str(self.literal)
        return self.value.value

    def __repr__(self) -> str:
        if self.value is TokenKind.NUMBER:
            return f"Token(NUMBER {self.literal}, {self.span})"
        return f"Token({self.value.name}, {self.span})"


class Lexer:
    """Tokenizer for one line of arithmetic.

    Produces NUMBER, PLUS, MINUS, ASTERISK, SLASH, LPAREN and RPAREN tokens.
    Stops at the first invalid character; no partial output is returned.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.len = len(text)

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        while self.pos < self.len:
            ch = self.text[self.pos]
            if ch in _DIGITS:
                tokens.append(self._lex_number())
            elif ch in _PUNCTUATION:
                tokens.append(self._lex_punct(_PUNCTUATION[ch]))
            elif ch in _SPACES:
                self._skip_spaces()
            else:
                raise InvalidCharError(ch, Span(self.pos, self.pos + 1))
        logger.debug("lexed %d tokens from %r: %s", len(tokens), self.text, tokens)
        return tokens

    def _consume_char(self, expected: str) -> int:
        """Consume `expected` at the cursor and return the new cursor position."""
        if self.pos >= self.len:
            raise LexEofError(Span(self.pos, self.pos))
        ch = self.text[self.pos]
        if ch != expected:
            raise InvalidCharError(ch, Span(self.pos, self.pos + 1))
        self.pos += 1
        return self.pos

    def _recognize_many(self, pred: Callable[[str], bool]) -> int:
        while self.pos < self.len and pred(self.text[self.pos]):
            self.pos += 1
        return self.pos

    def _lex_punct(self, kind: TokenKind) -> Token:
        end = self._consume_char(kind.value)
        return Token.punct(kind, Span(end - 1, end))

    def _lex_number(self) -> Token:
        start = self.pos
        end = self._recognize_many(lambda ch: ch in _DIGITS)
        raw = self.text[start:end]
        # check the digit count first; int() refuses very long strings
        digits = raw.lstrip("0") or "0"
        if len(digits) > len(str(MAX_LITERAL)) or int(digits) > MAX_LITERAL:
            raise NumberTooLargeError(raw, Span(start, end))
        return Token.number(int(digits), Span(start, end))

    def _skip_spaces(self) -> None:
        self._recognize_many(lambda ch: ch in _SPACES)


def tokenize(text: str) -> List[Token]:
    return Lexer(text).tokenize()
