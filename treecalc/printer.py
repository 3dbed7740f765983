from treecalc.nodes import BinaryOperation, FloatLiteral, IntLiteral, Node, UnaryOperation
from treecalc.utils import CalcInternalError

DISPLAY_INDENTATION = 4


def _attributes(node: Node) -> list[tuple[str, Node | str]]:
    if isinstance(node, BinaryOperation):
        return [("left", node.left), ("right", node.right), ("operator", str(node.operator))]
    elif isinstance(node, UnaryOperation):
        return [("right", node.right), ("operator", str(node.operator))]
    elif isinstance(node, (IntLiteral, FloatLiteral)):
        return [("value", node.value)]
    else:
        raise CalcInternalError(f"Unexpected node type: {node!r}")


def display(node: Node, depth: int = 0, indent: int = DISPLAY_INDENTATION) -> str:
    """Dump a tree as nested ``Name { attr: value }`` blocks.

    The first line carries no indentation since a child's opening is inlined
    onto its parent's attribute line; attributes sit one level deeper than
    ``depth`` and the closing brace at ``depth``. Lines are produced from an
    explicit stack so deep trees do not hit the recursion limit.
    """
    lines: list[str] = []
    # a pending entry is either a finished line or (node, depth, line prefix)
    pending: list[str | tuple[Node, int, str]] = [(node, depth, "")]
    while pending:
        entry = pending.pop()
        if isinstance(entry, str):
            lines.append(entry)
            continue

        current, current_depth, prefix = entry
        attribute_indent = " " * ((current_depth + 1) * indent)
        lines.append(f"{prefix}{type(current).__name__} {{")
        block: list[str | tuple[Node, int, str]] = []
        for name, value in _attributes(current):
            if isinstance(value, str):
                block.append(f"{attribute_indent}{name}: {value}")
            else:
                block.append((value, current_depth + 1, f"{attribute_indent}{name}: "))
        block.append(" " * (current_depth * indent) + "}")
        pending.extend(reversed(block))
    return "\n".join(lines)
