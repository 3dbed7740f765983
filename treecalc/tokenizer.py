import enum
from dataclasses import dataclass
from typing import Optional

from treecalc.utils import PrintableEnum, SourceError


@dataclass
class TokenizerError(SourceError):
    lexeme: str = ""

    stage = "Tokenizer"


class TokenKind(PrintableEnum):
    INT_LITERAL = enum.auto()
    FLOAT_LITERAL = enum.auto()
    ADD = enum.auto()
    SUB = enum.auto()
    MULT = enum.auto()
    DIV = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    EOF = enum.auto()
    # placeholder lookahead of a parser that has not started yet
    EMPTY = enum.auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Optional[str] = None
    position: int = 0

    @classmethod
    def empty(cls) -> "Token":
        return cls(kind=TokenKind.EMPTY)

    def __str__(self) -> str:
        if self.value is None:
            return f"<{self.kind}>"
        return f"<{self.kind}>{self.value}"


SINGLE_CHAR_TOKENS = {
    "+": TokenKind.ADD,
    "-": TokenKind.SUB,
    "*": TokenKind.MULT,
    "/": TokenKind.DIV,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

END_OF_INPUT = ""


def _is_digit(c: str) -> bool:
    return c.isascii() and c.isdigit()


class Tokenizer:
    """Splits an expression into tokens, one token per next_token() call.

    The cursor only moves forward; tokenizing another expression takes a new instance.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.char_pos = 0

    def _current_char(self) -> str:
        if self.char_pos >= len(self.source):
            return END_OF_INPUT
        return self.source[self.char_pos]

    def _next_char(self) -> str:
        if self.char_pos < len(self.source):
            self.char_pos += 1
        return self._current_char()

    def _digit_run(self) -> str:
        start = self.char_pos
        while _is_digit(self._current_char()):
            self._next_char()
        return self.source[start : self.char_pos]

    def _number(self) -> Token:
        start = self.char_pos
        lexeme = self._digit_run()
        if self._current_char() != ".":
            return Token(kind=TokenKind.INT_LITERAL, value=lexeme, position=start)

        self._next_char()
        lexeme += "."
        fraction = self._digit_run()
        if not fraction:
            raise TokenizerError(
                f"Unfinished float literal {lexeme!r} at position {self.char_pos}",
                code=self.source,
                error_char_idx=self.char_pos,
                lexeme=lexeme,
            )
        return Token(kind=TokenKind.FLOAT_LITERAL, value=lexeme + fraction, position=start)

    def next_token(self) -> Token:
        while self._current_char().isspace():
            self._next_char()

        c = self._current_char()
        if c == END_OF_INPUT:
            return Token(kind=TokenKind.EOF, position=self.char_pos)
        elif _is_digit(c):
            return self._number()
        elif c in SINGLE_CHAR_TOKENS:
            position = self.char_pos
            self._next_char()
            return Token(kind=SINGLE_CHAR_TOKENS[c], position=position)
        else:
            raise TokenizerError(
                f"Unrecognised character {c!r} at position {self.char_pos}",
                code=self.source,
                error_char_idx=self.char_pos,
                lexeme=c,
            )


def tokenize(code: str) -> list[Token]:
    tokenizer = Tokenizer(code)
    tokens: list[Token] = []
    while True:
        token = tokenizer.next_token()
        tokens.append(token)
        if token.kind is TokenKind.EOF:
            return tokens
