# --------------------------
# AST Nodes
# --------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple, Union

from spancalc.span import Annot, Span


class UnaryOpKind(Enum):
    PLUS = "+"
    MINUS = "-"


class BinaryOpKind(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# Operators keep the span of the token they were parsed from.
UnaryOp = Annot[UnaryOpKind]
BinaryOp = Annot[BinaryOpKind]


@dataclass(frozen=True)
class NumberLiteral:
    value: int
    span: Span


@dataclass(frozen=True)
class UnaryExpr:
    op: UnaryOp
    operand: Node
    span: Span


@dataclass(frozen=True)
class BinaryExpr:
    op: BinaryOp
    left: Node
    right: Node
    span: Span


Node = Union[NumberLiteral, UnaryExpr, BinaryExpr]


def postorder(root: Node) -> Iterator[Node]:
    """Yield every node after its children, left child first.

    Walks with an explicit stack; a chain like `1+1+...+1` makes a tree as
    deep as it is long.
    """
    stack: List[Tuple[Node, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded or isinstance(node, NumberLiteral):
            yield node
        elif isinstance(node, UnaryExpr):
            stack.append((node, True))
            stack.append((node.operand, False))
        elif isinstance(node, BinaryExpr):
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
        else:
            raise TypeError(f"Unsupported AST node: {type(node).__name__}")


def dump(node: Node) -> str:
    """Compact structural form without spans, e.g. Sub(Add(1, 2), Neg(3))."""
    out: List[str] = []
    for n in postorder(node):
        if isinstance(n, NumberLiteral):
            out.append(str(n.value))
        elif isinstance(n, UnaryExpr):
            name = "Neg" if n.op.value is UnaryOpKind.MINUS else "Pos"
            out.append(f"{name}({out.pop()})")
        else:
            right = out.pop()
            out.append(f"{n.op.value.name.capitalize()}({out.pop()}, {right})")
    return out.pop()
