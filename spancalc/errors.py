# --------------------------
# Exceptions
# --------------------------
#
# One hierarchy per stage (lexer, parser, evaluator) under CalcError. Every
# error carries the span it refers to so diagnostics can underline it.

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from spancalc.span import Span

if TYPE_CHECKING:
    from spancalc.lexer import Token


class CalcError(Exception):
    """Base class for every error reported on a single input line."""

    def __init__(self, message: str, span: Span):
        super().__init__(message)
        self.message = message
        self.span = span

    def __str__(self) -> str:
        return self.message


class LineError(CalcError):
    """Raised by the pipeline when a stage fails; the stage error is the cause."""

    def __init__(self, stage: str, span: Span):
        super().__init__(f"{stage} error", span)
        self.stage = stage


# --------------------------
# Lexer errors
# --------------------------

class LexError(CalcError):
    """Raised for errors during tokenization."""
    pass


class InvalidCharError(LexError):
    def __init__(self, char: str, span: Span):
        super().__init__(f"invalid character {char!r} at {span}", span)
        self.char = char


class LexEofError(LexError):
    def __init__(self, span: Span):
        super().__init__(f"unexpected end of input at {span.start}", span)


class NumberTooLargeError(LexError):
    def __init__(self, literal: str, span: Span):
        super().__init__(f"number {literal} is too large at {span}", span)
        self.literal = literal


# --------------------------
# Parser errors
# --------------------------

class ParseError(CalcError):
    """Raised for parsing errors. Errors caused by a token keep that token."""

    def __init__(self, message: str, span: Span, token: Optional[Token] = None):
        super().__init__(message, span)
        self.token = token


def _describe(token: Token) -> str:
    return f"{token.text!r} at {token.span}"


class UnexpectedTokenError(ParseError):
    def __init__(self, token: Token):
        super().__init__(f"{_describe(token)} is not expected", token.span, token)


class NotExpressionError(ParseError):
    def __init__(self, token: Token):
        super().__init__(f"{_describe(token)} is not a start of expression", token.span, token)


class NotOperatorError(ParseError):
    def __init__(self, token: Token):
        super().__init__(f"{_describe(token)} is not an operator", token.span, token)


class UnclosedOpenParenError(ParseError):
    def __init__(self, token: Token):
        super().__init__(f"{_describe(token)} is not closed", token.span, token)


class RedundantExpressionError(ParseError):
    def __init__(self, token: Token):
        super().__init__(
            f"expression after {_describe(token)} is redundant", token.span, token
        )


class ParseEofError(ParseError):
    def __init__(self, span: Span):
        super().__init__("end of input reached", span)


class ExpressionTooDeepError(ParseError):
    """Nesting exceeded what the recursive-descent parser can follow."""

    def __init__(self, span: Span):
        super().__init__("expression is nested too deeply", span)


# --------------------------
# Evaluator errors
# --------------------------

class EvalError(CalcError):
    """Raised for errors during evaluation."""
    pass


class DivisionByZeroError(EvalError):
    def __init__(self, span: Span):
        super().__init__("division by zero", span)


class IntegerOverflowError(EvalError):
    """Integer result outside the signed 64-bit range."""

    def __init__(self, span: Span):
        super().__init__(f"integer overflow at {span}", span)
