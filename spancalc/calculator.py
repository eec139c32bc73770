# Per-line pipeline: text -> tokens -> AST -> integer (or RPN text).
#
# Stage errors are re-raised as LineError chained to the original error so the
# diagnostic can say which stage failed and then walk down to the cause.

from __future__ import annotations

import logging
from typing import List

from spancalc.compiler import compile_rpn
from spancalc.errors import (
    EvalError,
    ExpressionTooDeepError,
    LexError,
    LineError,
    ParseError,
)
from spancalc.evaluator import evaluate
from spancalc.lexer import Token, tokenize
from spancalc.nodes import Node
from spancalc.parser import parse
from spancalc.span import Span

logger = logging.getLogger(__name__)


class Calculator:
    """Runs one line at a time; nothing is carried over between lines."""

    def __init__(self, rpn: bool = False):
        self.rpn = rpn

    def tokenize(self, line: str) -> List[Token]:
        try:
            return tokenize(line)
        except LexError as e:
            logger.debug("lexer failed on %r: %s", line, e)
            raise LineError("lexer", e.span) from e

    def parse(self, line: str) -> Node:
        tokens = self.tokenize(line)
        try:
            try:
                return parse(tokens)
            except RecursionError:
                raise ExpressionTooDeepError(Span(0, len(line))) from None
        except ParseError as e:
            logger.debug("parser failed on %r: %s", line, e)
            raise LineError("parser", e.span) from e

    def evaluate(self, line: str) -> int:
        ast = self.parse(line)
        try:
            return evaluate(ast)
        except EvalError as e:
            logger.debug("evaluator failed on %r: %s", line, e)
            raise LineError("evaluator", e.span) from e

    def compile(self, line: str) -> str:
        return compile_rpn(self.parse(line))

    def run_line(self, line: str) -> str:
        """Return the text to print for `line` in the selected mode."""
        if self.rpn:
            return self.compile(line)
        return str(self.evaluate(line))
