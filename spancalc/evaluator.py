# --------------------------
# Evaluator
# --------------------------

from __future__ import annotations

import logging
from typing import List

from spancalc.errors import DivisionByZeroError, IntegerOverflowError
from spancalc.nodes import (
    BinaryExpr,
    BinaryOp,
    BinaryOpKind,
    Node,
    NumberLiteral,
    UnaryExpr,
    UnaryOp,
    UnaryOpKind,
    postorder,
)
from spancalc.span import Span

logger = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _checked(value: int, span: Span) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise IntegerOverflowError(span)
    return value


def _trunc_div(left: int, right: int) -> int:
    # Python's // floors; integer division here truncates toward zero
    q = abs(left) // abs(right)
    return -q if (left < 0) != (right < 0) else q


class Evaluator:
    """Evaluates an AST to a signed 64-bit integer.

    Errors point at the operator that failed rather than the whole
    subexpression, so `1 + 4 / 0` underlines only the `/`.
    """

    def eval(self, node: Node) -> int:
        values: List[int] = []
        for n in postorder(node):
            if isinstance(n, NumberLiteral):
                values.append(_checked(n.value, n.span))
            elif isinstance(n, UnaryExpr):
                values.append(self.eval_unary(n.op, values.pop()))
            else:
                right = values.pop()
                left = values.pop()
                values.append(self.eval_binary(n.op, left, right))
        return values.pop()

    def eval_unary(self, op: UnaryOp, n: int) -> int:
        if op.value is UnaryOpKind.PLUS:
            return n
        return _checked(-n, op.span)

    def eval_binary(self, op: BinaryOp, left: int, right: int) -> int:
        kind = op.value
        if kind is BinaryOpKind.ADD:
            result = left + right
        elif kind is BinaryOpKind.SUB:
            result = left - right
        elif kind is BinaryOpKind.MUL:
            result = left * right
        elif kind is BinaryOpKind.DIV:
            if right == 0:
                raise DivisionByZeroError(op.span)
            result = _trunc_div(left, right)
        else:
            raise TypeError(f"Unknown binary operator: {kind}")
        return _checked(result, op.span)


def evaluate(node: Node) -> int:
    result = Evaluator().eval(node)
    logger.debug("evaluated %s to %d", node.span, result)
    return result
