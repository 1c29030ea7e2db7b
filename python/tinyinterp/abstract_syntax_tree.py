from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterator, List, Set, Tuple, TypeVar, Union

from .errors import ParserError


ARITHMETIC_OPERATORS = ("+", "-", "*", "/")

# -----------------------------------------------------------------------------
# Arithmetic expressions
# -----------------------------------------------------------------------------

@dataclass
class NumberLiteral:
    value: float

@dataclass
class VariableRef:
    name: str

@dataclass
class BinaryOp:
    operator: str
    left: "Expr"
    right: "Expr"

    def __post_init__(self) -> None:
        if self.operator not in ARITHMETIC_OPERATORS:
            raise ParserError(f"Unknown operator: {self.operator!r}")


Expr = Union[NumberLiteral, VariableRef, BinaryOp]

# Quoted string in a script; only valid as a whole assignment / print operand
@dataclass
class TextLiteral:
    value: str

# -----------------------------------------------------------------------------
# Boolean expressions
# -----------------------------------------------------------------------------

@dataclass
class BooleanConstant:
    value: bool

@dataclass
class BooleanVariableRef:
    name: str

@dataclass
class AndExpr:
    left: "BoolExpr"
    right: "BoolExpr"

@dataclass
class OrExpr:
    left: "BoolExpr"
    right: "BoolExpr"

@dataclass
class NotExpr:
    operand: "BoolExpr"


BoolExpr = Union[BooleanConstant, BooleanVariableRef, AndExpr, OrExpr, NotExpr]

Node = Union[Expr, TextLiteral, BoolExpr]

# -----------------------------------------------------------------------------
# Statements
# -----------------------------------------------------------------------------

@dataclass
class Assignment:
    line: int
    name: str
    value: Union[Expr, TextLiteral]

@dataclass
class Print:
    line: int
    value: Union[Expr, TextLiteral]


Statement = Union[Assignment, Print]

Script = List[Statement]

T = TypeVar("T")

# -----------------------------------------------------------------------------
# Tree helpers
# -----------------------------------------------------------------------------

def children(node: Node) -> List[Node]:
    if isinstance(node, (NumberLiteral, VariableRef, TextLiteral, BooleanConstant, BooleanVariableRef)):
        return []
    if isinstance(node, (BinaryOp, AndExpr, OrExpr)):
        return [node.left, node.right]
    if isinstance(node, NotExpr):
        return [node.operand]
    raise TypeError(node)


def iter_nodes(node: Node) -> Iterator[Node]:
    """Pre-order walk of `node` and all of its descendants."""
    stack: List[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(children(current)))


def variables_in(node: Node) -> Set[str]:
    return {
        n.name for n in iter_nodes(node)
        if isinstance(n, (VariableRef, BooleanVariableRef))
    }


def count_operators(node: Node) -> int:
    return sum(1 for n in iter_nodes(node) if children(n))


def fold(node: Node, visit: Callable[[Node, List[T]], T]) -> T:
    """
    Post-order reduction of a tree without recursion.

    `visit` receives each node together with the results already computed for
    its children, left to right, so arbitrarily deep trees are safe.
    """
    results: List[T] = []
    stack: List[Tuple[Node, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        kids = children(current)
        if kids and not expanded:
            stack.append((current, True))
            stack.extend((child, False) for child in reversed(kids))
            continue
        operands: List[T] = []
        if kids:
            operands = results[-len(kids):]
            del results[-len(kids):]
        results.append(visit(current, operands))
    return results.pop()
