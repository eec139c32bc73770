import pytest

from spancalc.compiler import RpnCompiler, compile_rpn
from spancalc.lexer import tokenize
from spancalc.parser import parse


def rpn(text):
    return compile_rpn(parse(tokenize(text)))


def test_reference_expression():
    assert rpn("1 + 2 * 3 - -10") == "1 2 3 * + 10 neg -"


@pytest.mark.parametrize("text, expected", [
    ("7", "7"),
    ("+7", "7"),
    ("-(1 + 2)", "1 2 + neg"),
    ("(1 + 2) * 3", "1 2 + 3 *"),
    ("1 - 2 - 3", "1 2 - 3 -"),
    ("8 / (4 / 2)", "8 4 2 / /"),
])
def test_compile(text, expected):
    assert rpn(text) == expected


def test_compile_does_not_evaluate():
    # division by zero is an evaluation error only
    assert RpnCompiler().compile(parse(tokenize("1 / 0"))) == "1 0 /"


def test_long_chain_compiles():
    assert rpn("*".join(["2"] * 1500)) == " ".join(["2 2 *"] + ["2 *"] * 1498)
