# --------------------------
# Postfix (RPN) compiler
# --------------------------

from __future__ import annotations

import logging
from typing import List

from spancalc.nodes import Node, NumberLiteral, UnaryExpr, UnaryOpKind, postorder

logger = logging.getLogger(__name__)


class RpnCompiler:
    """Turns an AST into reverse Polish notation.

    `1 + 2 * 3 - -10` compiles to `1 2 3 * + 10 neg -`. Unary minus is the
    `neg` word so it cannot be confused with binary `-`; unary plus emits
    nothing.
    """

    def compile(self, node: Node) -> str:
        out: List[str] = []
        for n in postorder(node):
            if isinstance(n, NumberLiteral):
                out.append(str(n.value))
            elif isinstance(n, UnaryExpr):
                if n.op.value is UnaryOpKind.MINUS:
                    out.append("neg")
            else:
                out.append(n.op.value.value)
        return " ".join(out)


def compile_rpn(node: Node) -> str:
    code = RpnCompiler().compile(node)
    logger.debug("compiled %s to %r", node.span, code)
    return code
