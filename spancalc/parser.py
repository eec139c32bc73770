# --------------------------
# Parser (recursive descent)
# --------------------------
#
# Grammar, loosest tier first. Binary tiers are left-associative:
#
#   expr   : addsub
#   addsub : muldiv (("+" | "-") muldiv)*
#   muldiv : unary (("*" | "/") unary)*
#   unary  : ("+" | "-")? atom
#   atom   : NUMBER | "(" expr ")"

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Dict, List, Optional

from spancalc.errors import (
    NotExpressionError,
    NotOperatorError,
    ParseEofError,
    RedundantExpressionError,
    UnclosedOpenParenError,
)
from spancalc.lexer import Token, TokenKind
from spancalc.nodes import (
    BinaryExpr,
    BinaryOp,
    BinaryOpKind,
    Node,
    NumberLiteral,
    UnaryExpr,
    UnaryOp,
    UnaryOpKind,
)
from spancalc.span import Annot, Span

logger = logging.getLogger(__name__)

# Operator tables: which tokens count as an operator on each binary tier.
ADDITIVE_OPS: Dict[TokenKind, BinaryOpKind] = {
    TokenKind.PLUS: BinaryOpKind.ADD,
    TokenKind.MINUS: BinaryOpKind.SUB,
}

MULTIPLICATIVE_OPS: Dict[TokenKind, BinaryOpKind] = {
    TokenKind.ASTERISK: BinaryOpKind.MUL,
    TokenKind.SLASH: BinaryOpKind.DIV,
}

UNARY_OPS: Dict[TokenKind, UnaryOpKind] = {
    TokenKind.PLUS: UnaryOpKind.PLUS,
    TokenKind.MINUS: UnaryOpKind.MINUS,
}


class Parser:
    """Recursive descent parser producing a spanned AST for one line."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def _peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _next(self) -> Optional[Token]:
        tok = self._peek()
        if tok is not None:
            self.pos += 1
        return tok

    def _eof(self) -> ParseEofError:
        end = self.tokens[-1].span.end if self.tokens else 0
        return ParseEofError(Span(end, end))

    def parse(self) -> Node:
        node = self.parse_expr()
        leftover = self._next()
        if leftover is not None:
            raise RedundantExpressionError(leftover)
        return node

    def parse_expr(self) -> Node:
        return self.parse_addsub()

    def parse_addsub(self) -> Node:
        logger.debug("addsub at token %d", self.pos)
        return self._parse_left_binop(
            self.parse_muldiv, partial(self._parse_binop, ADDITIVE_OPS)
        )

    def parse_muldiv(self) -> Node:
        logger.debug("muldiv at token %d", self.pos)
        return self._parse_left_binop(
            self.parse_unary, partial(self._parse_binop, MULTIPLICATIVE_OPS)
        )

    def _parse_left_binop(
        self,
        subexpr_parser: Callable[[], Node],
        op_parser: Callable[[], BinaryOp],
    ) -> Node:
        """Fold `subexpr (op subexpr)*` into a left-leaning tree.

        Stops without consuming anything when the input is exhausted or the
        next token is not an operator of this tier.
        """
        node = subexpr_parser()
        while self._peek() is not None:
            try:
                op = op_parser()
            except NotOperatorError:
                break
            right = subexpr_parser()
            node = BinaryExpr(op, node, right, node.span.merge(right.span))
        return node

    def _parse_binop(self, table: Dict[TokenKind, BinaryOpKind]) -> BinaryOp:
        tok = self._peek()
        if tok is None:
            raise self._eof()
        if tok.kind not in table:
            raise NotOperatorError(tok)
        self._next()
        return Annot(table[tok.kind], tok.span)

    def parse_unary(self) -> Node:
        tok = self._peek()
        if tok is None or tok.kind not in UNARY_OPS:
            return self.parse_atom()
        self._next()
        op: UnaryOp = Annot(UNARY_OPS[tok.kind], tok.span)
        operand = self.parse_atom()
        return UnaryExpr(op, operand, op.span.merge(operand.span))

    def parse_atom(self) -> Node:
        tok = self._next()
        if tok is None:
            raise self._eof()
        if tok.kind is TokenKind.NUMBER:
            return NumberLiteral(tok.literal, tok.span)
        if tok.kind is TokenKind.LPAREN:
            inner = self.parse_expr()
            closing = self._next()
            if closing is None:
                raise UnclosedOpenParenError(tok)
            if closing.kind is not TokenKind.RPAREN:
                raise RedundantExpressionError(closing)
            return inner
        raise NotExpressionError(tok)


def parse(tokens: List[Token]) -> Node:
    node = Parser(tokens).parse()
    logger.debug("parsed %d tokens into %s", len(tokens), node.span)
    return node
