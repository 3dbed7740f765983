import logging
from dataclasses import dataclass
from typing import Optional

from treecalc.nodes import BinaryOperation, FloatLiteral, IntLiteral, Node, Operator, UnaryOperation
from treecalc.tokenizer import Token, TokenKind, Tokenizer
from treecalc.utils import CalcInternalError, SourceError


@dataclass
class ParserError(SourceError):
    actual: TokenKind = TokenKind.EMPTY
    expected: Optional[TokenKind] = None

    stage = "Parser"


ADDITIVE_OPERATORS = {
    TokenKind.ADD: Operator.ADD,
    TokenKind.SUB: Operator.SUB,
}

MULTIPLICATIVE_OPERATORS = {
    TokenKind.MULT: Operator.MULT,
    TokenKind.DIV: Operator.DIV,
}


class Parser:
    """Recursive descent parser with exactly one token of lookahead.

    Grammar, lowest precedence first:

        expr      := mult_expr ((ADD | SUB) mult_expr)*
        mult_expr := entity ((MULT | DIV) entity)*
        entity    := INT_LITERAL | FLOAT_LITERAL | SUB entity | LPAREN expr RPAREN

    Both binary tiers fold to the left, so "8 - 3 - 2" is "(8 - 3) - 2".
    """

    def __init__(self, source: str = "") -> None:
        self._logger = logging.getLogger("Parser")
        self.tokenizer = Tokenizer(source)
        self.current_token = Token.empty()

    def set_source(self, source: str) -> None:
        self.tokenizer = Tokenizer(source)

    def parse(self, source: Optional[str] = None) -> Node:
        if source is not None:
            self.set_source(source)
        # tokens after a complete expression are left unread
        self._logger.debug("Parsing %r", self.tokenizer.source)

        self.current_token = self.tokenizer.next_token()
        try:
            return self._expr()
        except RecursionError as e:
            token = self.current_token
            raise ParserError(
                f"Expression nested too deeply at position {token.position}",
                code=self.tokenizer.source,
                error_char_idx=token.position,
                actual=token.kind,
            ) from e

    def eat(self, expected: TokenKind) -> None:
        """Consume the lookahead if it is of the expected kind and pull the next token"""
        token = self.current_token
        if token.kind is not expected:
            raise ParserError(
                f"Expected {expected}, got {token.kind} at position {token.position}",
                code=self.tokenizer.source,
                error_char_idx=token.position,
                actual=token.kind,
                expected=expected,
            )
        self._logger.debug("Ate %s at position %d", token, token.position)
        self.current_token = self.tokenizer.next_token()

    def _entity(self) -> Node:
        token = self.current_token
        if token.kind is TokenKind.INT_LITERAL:
            self.eat(TokenKind.INT_LITERAL)
            return IntLiteral(value=_literal_value(token))
        elif token.kind is TokenKind.FLOAT_LITERAL:
            self.eat(TokenKind.FLOAT_LITERAL)
            return FloatLiteral(value=_literal_value(token))
        elif token.kind is TokenKind.SUB:
            self.eat(TokenKind.SUB)
            return UnaryOperation(operator=Operator.SUB, right=self._entity())
        elif token.kind is TokenKind.LPAREN:
            self.eat(TokenKind.LPAREN)
            node = self._expr()
            self.eat(TokenKind.RPAREN)
            return node
        else:
            raise ParserError(
                f"Unexpected token {token.kind} at position {token.position}",
                code=self.tokenizer.source,
                error_char_idx=token.position,
                actual=token.kind,
            )

    def _mult_expr(self) -> Node:
        node = self._entity()
        while self.current_token.kind in MULTIPLICATIVE_OPERATORS:
            kind = self.current_token.kind
            self.eat(kind)
            node = BinaryOperation(operator=MULTIPLICATIVE_OPERATORS[kind], left=node, right=self._entity())
        return node

    def _expr(self) -> Node:
        node = self._mult_expr()
        while self.current_token.kind in ADDITIVE_OPERATORS:
            kind = self.current_token.kind
            self.eat(kind)
            node = BinaryOperation(operator=ADDITIVE_OPERATORS[kind], left=node, right=self._mult_expr())
        return node


def _literal_value(token: Token) -> str:
    if token.value is None:
        raise CalcInternalError(f"Literal token without a value: {token}")
    return token.value


def parse(code: str) -> Node:
    return Parser().parse(code)
