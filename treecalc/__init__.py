from treecalc.nodes import BinaryOperation, FloatLiteral, IntLiteral, Node, Operator, UnaryOperation
from treecalc.parser import Parser, ParserError, parse
from treecalc.printer import display
from treecalc.runtime import evaluate
from treecalc.tokenizer import Token, TokenizerError, TokenKind, Tokenizer, tokenize
from treecalc.utils import CalcInternalError
