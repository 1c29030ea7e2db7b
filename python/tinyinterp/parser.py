from __future__ import annotations
import logging
from typing import List, NoReturn, Optional, Union

from .abstract_syntax_tree import (
    Assignment, BinaryOp, Expr, NumberLiteral, Print, Script, Statement, TextLiteral, VariableRef,
)
from .errors import LexerError, ScriptSyntaxError
from .lexer import Token, lex_line

logger = logging.getLogger(__name__)

COMMENT_MARKER = "//"

# Deepest nesting of parentheses and unary minus in one expression
MAX_NESTING = 100


# -----------------------
# Single-line statement parser
# -----------------------
class Parser:
    def __init__(self, toks: List[Token], text: str):
        self.toks = toks  # tokens of one line, EOF-terminated
        self.text = text  # trimmed source line, for error reports
        self.i = 0
        self.depth = 0    # open parentheses and unary minus signs

    def peek(self, offset: int = 0) -> Token:
        idx = self.i + offset
        if idx >= len(self.toks):
            return self.toks[-1]
        return self.toks[idx]

    def match(self, kind: Optional[str] = None, value: Optional[str] = None) -> bool:
        t = self.peek()
        if kind and t.kind != kind:
            return False
        if value and t.value != value:
            return False
        return True

    def consume(self, kind: Optional[str] = None, value: Optional[str] = None) -> Token:
        t = self.peek()
        if kind and t.kind != kind:
            self.error(f"expected {kind} at col {t.col}, got {t.kind}:{t.value}")
        if value and t.value != value:
            self.error(f"expected {value!r} at col {t.col}, got {t.value!r}")
        self.i += 1
        return t

    def nest(self) -> None:
        self.depth += 1
        if self.depth > MAX_NESTING:
            self.error(f"expression nested deeper than {MAX_NESTING} levels")

    def error(self, message: str) -> NoReturn:
        raise ScriptSyntaxError(self.peek().line, self.text, message)

    # -----------------------
    # Statements
    # -----------------------
    def parse_statement(self) -> Statement:
        t = self.peek()

        # `name = ...` wins over the keyword, so `print = 1` is an assignment
        if t.kind in ("ID", "KW") and self.peek(1).kind == "SYM" and self.peek(1).value == "=":
            name = self.consume().value
            self.consume("SYM", "=")
            stmt: Statement = Assignment(line=t.line, name=name, value=self.parse_operand())
        elif t.kind == "KW":
            self.consume("KW")
            if self.match("EOF"):
                self.error("print needs an argument")
            stmt = Print(line=t.line, value=self.parse_operand())
        else:
            self.error("expected an assignment or a print statement")

        if not self.match("EOF"):
            t = self.peek()
            self.error(f"unexpected {t.kind}:{t.value} at col {t.col}")
        return stmt

    def parse_operand(self) -> Union[Expr, TextLiteral]:
        if self.match("STR"):
            return TextLiteral(self.consume("STR").value[1:-1])
        return self.parse_expr()

    # -----------------------
    # Infix expressions
    # -----------------------
    def parse_expr(self) -> Expr:
        expr = self.parse_term()
        while self.match("OP", "+") or self.match("OP", "-"):
            op = self.consume("OP").value
            expr = BinaryOp(op, expr, self.parse_term())
        return expr

    def parse_term(self) -> Expr:
        expr = self.parse_unary()
        while self.match("OP", "*") or self.match("OP", "/"):
            op = self.consume("OP").value
            expr = BinaryOp(op, expr, self.parse_unary())
        return expr

    def parse_unary(self) -> Expr:
        if self.match("OP", "-"):
            self.consume("OP")
            self.nest()
            operand = self.parse_unary()
            self.depth -= 1
            if isinstance(operand, NumberLiteral):
                return NumberLiteral(-operand.value)
            return BinaryOp("-", NumberLiteral(0.0), operand)
        return self.parse_atom()

    def parse_atom(self) -> Expr:
        t = self.peek()

        if t.kind == "NUM":
            return NumberLiteral(float(self.consume("NUM").value))

        if t.kind in ("ID", "KW"):
            return VariableRef(self.consume().value)

        if t.kind == "SYM" and t.value == "(":
            self.consume("SYM", "(")
            self.nest()
            expr = self.parse_expr()
            self.depth -= 1
            self.consume("SYM", ")")
            return expr

        if t.kind == "STR":
            self.error("text literal must be the whole operand")
        self.error(f"expected operand at col {t.col}, got {t.kind}:{t.value}")


def parse_script(source: str) -> Script:
    """
    Parse a multi-line script into its statements, in source order.

    Blank lines and lines starting with ``//`` produce nothing. The first
    malformed line raises ScriptSyntaxError and stops parsing.
    """
    statements: Script = []
    for number, raw in enumerate(source.split("\n"), start=1):
        text = raw.strip()
        if not text or text.startswith(COMMENT_MARKER):
            continue
        try:
            toks = lex_line(text, number)
        except LexerError as e:
            raise ScriptSyntaxError(number, text, str(e)) from e
        statements.append(Parser(toks, text).parse_statement())

    logger.debug("Parsed %d statement(s)", len(statements))
    return statements
