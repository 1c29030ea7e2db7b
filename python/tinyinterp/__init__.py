import logging

from .abstract_syntax_tree import (
    AndExpr, Assignment, BinaryOp, BooleanConstant, BooleanVariableRef, NotExpr, NumberLiteral,
    OrExpr, Print, TextLiteral, VariableRef, count_operators, iter_nodes, variables_in,
)
from .environment import Environment, Value
from .errors import (
    DivisionByZeroError, EvaluationError, InsufficientOperandsError, InterpreterError, LexerError,
    ParserError, ScriptSyntaxError, TypeMismatchError, UndefinedVariableError,
)
from .evaluator import ListSink, execute, interpret, interpret_boolean, run_script, stream_sink
from .formatting import format_environment, format_expression, format_table, format_value
from .parser import parse_script
from .postfix import parse_expression
from .query import OrderBy, SelectAll, Table, Where, run_query

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AndExpr", "Assignment", "BinaryOp", "BooleanConstant", "BooleanVariableRef", "NotExpr",
    "NumberLiteral", "OrExpr", "Print", "TextLiteral", "VariableRef",
    "count_operators", "iter_nodes", "variables_in",
    "Environment", "Value",
    "DivisionByZeroError", "EvaluationError", "InsufficientOperandsError", "InterpreterError",
    "LexerError", "ParserError", "ScriptSyntaxError", "TypeMismatchError", "UndefinedVariableError",
    "ListSink", "execute", "interpret", "interpret_boolean", "run_script", "stream_sink",
    "format_environment", "format_expression", "format_table", "format_value",
    "parse_script", "parse_expression",
    "OrderBy", "SelectAll", "Table", "Where", "run_query",
]
