import enum
from dataclasses import dataclass

from treecalc.utils import PrintableEnum


class Operator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MULT = enum.auto()
    DIV = enum.auto()


@dataclass(frozen=True)
class BinaryOperation:
    operator: Operator
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class UnaryOperation:
    """Only SUB changes the value, any other operator passes the right side through"""

    operator: Operator
    right: "Node"


@dataclass(frozen=True)
class IntLiteral:
    value: str


@dataclass(frozen=True)
class FloatLiteral:
    value: str


Node = BinaryOperation | UnaryOperation | IntLiteral | FloatLiteral
