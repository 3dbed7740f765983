import math
import operator
from typing import Callable

from treecalc.nodes import BinaryOperation, FloatLiteral, IntLiteral, Node, Operator, UnaryOperation
from treecalc.utils import CalcInternalError


def _divide(a: float, b: float) -> float:
    # IEEE 754 division instead of ZeroDivisionError
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


BinaryOperationImpl = Callable[[float, float], float]

binary_impls: dict[Operator, BinaryOperationImpl] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MULT: operator.mul,
    Operator.DIV: _divide,
}


def _parse_literal(literal: IntLiteral | FloatLiteral) -> float:
    try:
        return float(literal.value)
    except ValueError as e:
        raise CalcInternalError(f"Malformed {type(literal).__name__} value: {literal.value!r}") from e


def evaluate(node: Node) -> float:
    """Post-order walk with an explicit stack, so long operator chains do not hit the recursion limit"""
    values: list[float] = []
    pending: list[tuple[Node, bool]] = [(node, False)]
    while pending:
        current, children_done = pending.pop()
        if isinstance(current, (IntLiteral, FloatLiteral)):
            values.append(_parse_literal(current))
        elif isinstance(current, BinaryOperation):
            impl = binary_impls.get(current.operator)
            if impl is None:
                raise CalcInternalError(f"Unexpected binary operator: {current.operator}")
            if children_done:
                right = values.pop()
                left = values.pop()
                values.append(impl(left, right))
            else:
                pending.append((current, True))
                pending.append((current.right, False))
                pending.append((current.left, False))
        elif isinstance(current, UnaryOperation):
            if not children_done:
                pending.append((current, True))
                pending.append((current.right, False))
            elif current.operator is Operator.SUB:
                values.append(-values.pop())
        else:
            raise CalcInternalError(f"Unexpected node type: {current!r}")
    return values.pop()
