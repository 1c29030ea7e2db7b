from __future__ import annotations
from dataclasses import dataclass
from typing import List
import re

from .errors import LexerError


KEYWORDS = {"print"}

_NUMBER = r"(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?"

# Main pattern for a single script line
_TOKEN_RE = re.compile(rf"""
    (?P<WS>[ \t\r]+)|                   # whitespace, skipped
    (?P<COMMENT>//[^\n]*)|              # comment up to end of line, skipped
    (?P<NUM>{_NUMBER})|                 # numeric literal
    (?P<STR>"[^"\n]*")|                 # double-quoted text literal
    (?P<ID>[A-Za-z_][A-Za-z0-9_]*)|     # identifier or keyword
    (?P<OP>[+\-*/])|                    # arithmetic operator
    (?P<SYM>[=()])                      # assignment and grouping
""", re.VERBOSE)

_LITERAL_RE = re.compile(rf"[+-]?{_NUMBER}")


@dataclass(frozen=True)
class Token:
    kind: str   # KW, ID, NUM, STR, OP, SYM, EOF
    value: str  # exact source text (STR keeps its quotes)
    line: int
    col: int


def lex_line(text: str, line: int = 1) -> List[Token]:
    """
    Split one line of script source into tokens, ending with EOF.

    :param text: the line, without its newline
    :param line: line number stamped on every token
    """
    toks: List[Token] = []
    pos = 0

    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if not m:
            if text[pos] == '"':
                raise LexerError(f"Unterminated string at line {line} col {pos + 1}")
            raise LexerError(
                f"Unexpected character at line {line} col {pos + 1}: {text[pos:pos + 20]!r}"
            )

        kind = m.lastgroup
        value = m.group(kind)
        if kind == "ID" and value.lower() in KEYWORDS:
            kind = "KW"
        if kind not in ("WS", "COMMENT"):
            toks.append(Token(kind, value, line, pos + 1))
        pos = m.end()

    toks.append(Token("EOF", "", line, len(text) + 1))
    return toks


def split_postfix(source: str) -> List[str]:
    return source.split()


def is_number_literal(token: str) -> bool:
    # float() alone would also accept "nan", "inf" and "1_000"
    return _LITERAL_RE.fullmatch(token) is not None
