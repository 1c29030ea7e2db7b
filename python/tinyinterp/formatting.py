from __future__ import annotations

import math
from typing import Dict, List, Mapping, Sequence

from .abstract_syntax_tree import (
    AndExpr, BinaryOp, BooleanConstant, BooleanVariableRef, Node, NotExpr, NumberLiteral, OrExpr,
    TextLiteral, VariableRef, fold,
)
from .environment import Value, is_boolean, is_number


def format_value(value: Value) -> str:
    """
    Render a value the way `print` shows it.

    :param value: number, text or boolean
    :return: ``True``/``False``, ``30`` rather than ``30.0``, text unchanged
    """
    if is_boolean(value):
        return "True" if value else "False"
    if is_number(value):
        number = float(value)
        if math.isfinite(number) and number.is_integer():
            return str(int(number))
        return str(number)
    return str(value)


def format_expression(node: Node) -> str:
    """Fully parenthesised infix rendering of an expression tree."""
    return fold(node, _render)


def _render(node: Node, parts: List[str]) -> str:
    if isinstance(node, NumberLiteral):
        return format_value(node.value)
    if isinstance(node, (VariableRef, BooleanVariableRef)):
        return node.name
    if isinstance(node, TextLiteral):
        return f'"{node.value}"'
    if isinstance(node, BooleanConstant):
        return format_value(node.value)
    if isinstance(node, BinaryOp):
        return f"({parts[0]} {node.operator} {parts[1]})"
    if isinstance(node, AndExpr):
        return f"({parts[0]} and {parts[1]})"
    if isinstance(node, OrExpr):
        return f"({parts[0]} or {parts[1]})"
    if isinstance(node, NotExpr):
        return f"(not {parts[0]})"
    raise TypeError(node)


def format_environment(values: Mapping[str, Value]) -> str:
    lines = ["Current variables:"]
    lines.extend(f"  {name} = {format_value(value)}" for name, value in values.items())
    return "\n".join(lines)


def format_table(rows: Sequence[Dict[str, object]], width: int = 10) -> str:
    if not rows:
        return "Table is empty"

    columns: List[str] = list(rows[0].keys())
    header = " | ".join(c.ljust(width) for c in columns)
    rule = "-" * (len(columns) * (width + 3) - 3)
    body = [
        " | ".join(str(row.get(c, "")).ljust(width) for c in columns)
        for row in rows
    ]
    return "\n".join([header, rule, *body])
