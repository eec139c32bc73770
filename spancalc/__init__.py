"""Integer arithmetic evaluator with span-accurate diagnostics."""

from spancalc.calculator import Calculator
from spancalc.compiler import RpnCompiler, compile_rpn
from spancalc.errors import CalcError, EvalError, LexError, LineError, ParseError
from spancalc.evaluator import Evaluator, evaluate
from spancalc.lexer import Lexer, Token, TokenKind, tokenize
from spancalc.parser import Parser, parse
from spancalc.span import Annot, Span

__version__ = "0.1.0"
