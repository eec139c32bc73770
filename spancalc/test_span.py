import pytest

from spancalc.span import Annot, Span


@pytest.mark.parametrize("a, b, expected", [
    (Span(0, 1), Span(1, 3), Span(0, 3)),
    (Span(2, 5), Span(3, 4), Span(2, 5)),
    (Span(0, 1), Span(4, 5), Span(0, 5)),
    (Span(3, 3), Span(3, 6), Span(3, 6)),
])
def test_merge_covers_both_spans_in_either_order(a, b, expected):
    assert a.merge(b) == expected
    assert b.merge(a) == expected


def test_merge_with_itself_is_identity():
    span = Span(4, 9)
    assert span.merge(span) == span


def test_malformed_span_is_a_programming_error():
    with pytest.raises(ValueError):
        Span(5, 2)
    with pytest.raises(ValueError):
        Span(-1, 2)


def test_span_length_and_str():
    assert len(Span(2, 7)) == 5
    assert len(Span(3, 3)) == 0
    assert str(Span(2, 7)) == "2..7"


def test_annot_pairs_value_with_span():
    a = Annot("x", Span(0, 1))
    assert a.value == "x"
    assert a.span == Span(0, 1)
    assert a == Annot("x", Span(0, 1))
    assert a != Annot("x", Span(1, 2))
