"""Tree-walking evaluation of expressions and execution of script statements."""
from __future__ import annotations

import logging
from typing import Callable, List, Sequence, TextIO

from .abstract_syntax_tree import (
    AndExpr, Assignment, BinaryOp, BooleanConstant, BooleanVariableRef, Node, NotExpr,
    NumberLiteral, OrExpr, Print, Statement, TextLiteral, VariableRef, fold,
)
from .environment import Environment, Value, is_boolean, is_number, kind_of
from .errors import DivisionByZeroError, TypeMismatchError
from .formatting import format_value

logger = logging.getLogger(__name__)

OutputSink = Callable[[str], None]

_VERBS = {"+": "Adding", "-": "Subtracting", "*": "Multiplying", "/": "Dividing"}


def stream_sink(stream: TextIO) -> OutputSink:
    def write_line(text: str) -> None:
        stream.write(text + "\n")
        stream.flush()
    return write_line


class ListSink:
    """Output sink that keeps every printed line, in order."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def __call__(self, text: str) -> None:
        self.lines.append(text)


# -----------------------------------------------------------------------------
# Expressions
# -----------------------------------------------------------------------------

def interpret(node: Node, env: Environment) -> Value:
    # children are evaluated left first, both sides always
    return fold(node, lambda current, operands: _apply(current, operands, env))


def _apply(node: Node, operands: List[Value], env: Environment) -> Value:
    if isinstance(node, NumberLiteral):
        logger.debug("Interpreting number: %s", format_value(node.value))
        return node.value

    if isinstance(node, VariableRef):
        logger.debug("Interpreting variable: %s", node.name)
        return env.get_variable(node.name)

    if isinstance(node, TextLiteral):
        return node.value

    if isinstance(node, BinaryOp):
        left, right = operands
        result = _arithmetic(node.operator, left, right)
        logger.debug(
            "%s %s %s %s = %s", _VERBS[node.operator], format_value(left), node.operator,
            format_value(right), format_value(result),
        )
        return result

    if isinstance(node, BooleanConstant):
        logger.debug("Interpreting boolean constant: %s", node.value)
        return node.value

    if isinstance(node, BooleanVariableRef):
        logger.debug("Interpreting boolean variable: %s", node.name)
        value = env.get_variable(node.name)
        if not is_boolean(value):
            raise TypeMismatchError(
                f"Variable {node.name!r} holds a {kind_of(value)}, expected a boolean"
            )
        return value

    if isinstance(node, (AndExpr, OrExpr)):
        # no short-circuit: the right side was evaluated even when the left decides
        left = _expect_boolean(operands[0], node)
        right = _expect_boolean(operands[1], node)
        if isinstance(node, AndExpr):
            result = left and right
            logger.debug("AND operation: %s && %s = %s", left, right, result)
        else:
            result = left or right
            logger.debug("OR operation: %s || %s = %s", left, right, result)
        return result

    if isinstance(node, NotExpr):
        value = _expect_boolean(operands[0], node)
        logger.debug("NOT operation: !%s = %s", value, not value)
        return not value

    raise TypeError(node)


def interpret_boolean(node: Node, env: Environment) -> bool:
    return _expect_boolean(interpret(node, env), node)


def _expect_boolean(value: Value, node: Node) -> bool:
    if not is_boolean(value):
        raise TypeMismatchError(
            f"{type(node).__name__} expects boolean operands, got a {kind_of(value)}"
        )
    return value  # type: ignore[return-value]


def _arithmetic(op: str, left: Value, right: Value) -> float:
    if not is_number(left) or not is_number(right):
        raise TypeMismatchError(
            f"Operator '{op}' expects numbers, got {kind_of(left)} and {kind_of(right)}"
        )
    a = float(left)
    b = float(right)
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise DivisionByZeroError("Cannot divide by zero")
        return a / b
    raise TypeError(op)


# -----------------------------------------------------------------------------
# Statements
# -----------------------------------------------------------------------------

def execute(statement: Statement, env: Environment, write_line: OutputSink) -> None:
    if isinstance(statement, Assignment):
        env.set_variable(statement.name, interpret(statement.value, env))
    elif isinstance(statement, Print):
        write_line(format_value(interpret(statement.value, env)))
    else:
        raise TypeError(statement)


def run_script(statements: Sequence[Statement], env: Environment, write_line: OutputSink) -> None:
    """
    Execute `statements` in order against `env`.

    Errors are not caught here; the first failing statement stops the run and
    earlier assignments stay in `env`.
    """
    for statement in statements:
        execute(statement, env, write_line)
