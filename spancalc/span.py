# Source spans and annotated values.
#
# Every token, operator and AST node keeps the half-open range of the source
# line it came from so that errors can point at the exact characters.

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Span:
    """Half-open range [start, end) of character offsets into a source line."""
    start: int
    end: int

    def __post_init__(self):
        # a malformed span is a bug in the lexer or parser, not bad input
        if not 0 <= self.start <= self.end:
            raise ValueError(f"malformed span {self.start}..{self.end}")

    def merge(self, other: Span) -> Span:
        """Return the smallest span covering both spans.

        Operands of a binary expression are separated by the operator (and
        maybe whitespace), so the result also covers any gap between them.
        """
        return Span(min(self.start, other.start), max(self.end, other.end))

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


@dataclass(frozen=True)
class Annot(Generic[T]):
    """Pairs any value with the span it was read from."""
    value: T
    span: Span
