import pytest

from spancalc.errors import DivisionByZeroError, IntegerOverflowError
from spancalc.evaluator import INT64_MAX, INT64_MIN, Evaluator, evaluate
from spancalc.lexer import tokenize
from spancalc.nodes import BinaryExpr, dump
from spancalc.parser import parse
from spancalc.span import Annot, Span


def calc(text):
    return evaluate(parse(tokenize(text)))


def test_reference_expression_evaluates_to_17():
    assert calc("1 + 2 * 3 - -10") == 17


@pytest.mark.parametrize("text, expected", [
    ("42", 42),
    ("+7", 7),
    ("-7", -7),
    ("2 + 3 * 4", 14),
    ("(2 + 3) * 4", 20),
    ("10 - 4 - 3", 3),
    ("100 / 10 / 5", 2),
    ("-(3 - 5) * 2", 4),
    ("0 - 0", 0),
])
def test_evaluate(text, expected):
    assert calc(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("7 / 2", 3),
    ("-7 / 2", -3),
    ("7 / -2", -3),
    ("-7 / -2", 3),
    ("1 / 3", 0),
    ("-1 / 3", 0),
])
def test_division_truncates_toward_zero(text, expected):
    assert calc(text) == expected


def test_division_by_zero_points_at_operator():
    ast = parse(tokenize("1/0"))
    assert isinstance(ast, BinaryExpr)
    assert dump(ast) == "Div(1, 0)"
    with pytest.raises(DivisionByZeroError) as e:
        evaluate(ast)
    assert e.value.span == Span(1, 2)
    assert e.value.span != ast.span


def test_division_by_computed_zero():
    with pytest.raises(DivisionByZeroError) as e:
        calc("8 + 4 / (2 - 2)")
    assert e.value.span == Span(6, 7)


def test_left_operand_is_evaluated_first():
    # both sides fail; the left one is reported
    with pytest.raises(DivisionByZeroError) as e:
        calc("(1 / 0) + (2 / 0)")
    assert e.value.span == Span(3, 4)


def test_signed_range_limits():
    assert calc(str(INT64_MAX)) == INT64_MAX
    assert calc(f"-{INT64_MAX} - 1") == INT64_MIN


@pytest.mark.parametrize("text, span", [
    (f"{INT64_MAX} + 1", Span(20, 21)),
    (f"-{INT64_MAX} - 2", Span(21, 22)),
    ("4294967296 * 4294967296", Span(11, 12)),
    (f"-(-{INT64_MAX} - 1)", Span(0, 1)),
    (f"(-{INT64_MAX} - 1) / -1", Span(27, 28)),
])
def test_overflow_points_at_operator(text, span):
    with pytest.raises(IntegerOverflowError) as e:
        calc(text)
    assert e.value.span == span


def test_unsigned_literal_outside_signed_range_overflows():
    text = f"1 + {INT64_MAX + 1}"
    with pytest.raises(IntegerOverflowError) as e:
        calc(text)
    assert e.value.span == Span(4, len(text))


def test_evaluator_rejects_unknown_nodes():
    with pytest.raises(TypeError):
        Evaluator().eval("1 + 2")


def test_long_left_nested_chain():
    assert calc(" - ".join(["1"] * 3000)) == -2998
    assert calc("*".join(["-1"] * 2001)) == -1


def test_unknown_binary_operator_is_a_type_error():
    with pytest.raises(TypeError):
        Evaluator().eval_binary(Annot("%", Span(1, 2)), 7, 2)
