"""Reverse Polish Notation to expression tree, in one pass over the tokens."""
from __future__ import annotations

import logging
from typing import List

from .abstract_syntax_tree import ARITHMETIC_OPERATORS, BinaryOp, Expr, NumberLiteral, VariableRef
from .errors import InsufficientOperandsError, ParserError
from .lexer import is_number_literal, split_postfix

logger = logging.getLogger(__name__)


def parse_expression(source: str) -> Expr:
    """
    Parse a whitespace separated postfix expression such as ``"x y + 3 *"``.

    The operand pushed first becomes the left child, so ``"a b -"`` is
    ``a - b``. Unknown words are variable references, resolved only when the
    tree is interpreted.

    :raises InsufficientOperandsError: an operator finds fewer than two operands
    :raises ParserError: the scan does not end with exactly one tree
    """
    stack: List[Expr] = []

    for position, token in enumerate(split_postfix(source), start=1):
        if token in ARITHMETIC_OPERATORS:
            if len(stack) < 2:
                raise InsufficientOperandsError(token, position)
            right = stack.pop()
            left = stack.pop()
            stack.append(BinaryOp(token, left, right))
        elif is_number_literal(token):
            stack.append(NumberLiteral(float(token)))
        else:
            stack.append(VariableRef(token))

    if len(stack) != 1:
        raise ParserError(
            "Invalid expression: incorrect number of operands and operators "
            f"({len(stack)} value(s) left on the stack) in {source!r}"
        )

    logger.debug("Parsed postfix %r", source)
    return stack.pop()
