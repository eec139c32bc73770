# Diagnostic rendering: error message, the source line with the offending
# characters underlined, then one "caused by" line per chained cause.

from __future__ import annotations

import sys
from typing import Iterator, List, Optional, TextIO

from spancalc.span import Span


def _chain(err: BaseException) -> Iterator[BaseException]:
    cause: Optional[BaseException] = err
    while cause is not None:
        yield cause
        cause = cause.__cause__


def find_span(err: BaseException) -> Optional[Span]:
    """Return the first span found walking from `err` down its causes."""
    for e in _chain(err):
        span = getattr(e, "span", None)
        if isinstance(span, Span):
            return span
    return None


def annotate(span: Span) -> str:
    return " " * span.start + "^" * len(span)


def format_diagnostic(err: BaseException, line: str) -> str:
    lines: List[str] = [str(err), line]
    span = find_span(err)
    if span is not None:
        lines.append(annotate(span))
    for cause in list(_chain(err))[1:]:
        lines.append(f"caused by: {cause}")
    return "\n".join(lines)


def show_diagnostic(err: BaseException, line: str, stream: Optional[TextIO] = None) -> None:
    stream = stream if stream is not None else sys.stderr
    print(format_diagnostic(err, line), file=stream)
