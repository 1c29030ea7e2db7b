"""
Small table query language: select everything, filter on a column, order by a
column. Queries are built as trees and run against an in-memory table.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Union

from .errors import ParserError, TypeMismatchError

logger = logging.getLogger(__name__)

Row = Dict[str, object]

COMPARISONS: Dict[str, Callable[[object, object], bool]] = {
    "=": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
    ">": lambda a, b: a > b,  # type: ignore[operator]
    "<": lambda a, b: a < b,  # type: ignore[operator]
    ">=": lambda a, b: a >= b,  # type: ignore[operator]
    "<=": lambda a, b: a <= b,  # type: ignore[operator]
}


@dataclass
class Table:
    rows: List[Row] = field(default_factory=list)

    def add_row(self, row: Row) -> None:
        self.rows.append(dict(row))


@dataclass
class SelectAll:
    pass

@dataclass
class Where:
    source: "Query"
    column: str
    operator: str
    value: object

    def __post_init__(self) -> None:
        if self.operator not in COMPARISONS:
            raise ParserError(f"Unknown comparison operator: {self.operator!r}")

@dataclass
class OrderBy:
    source: "Query"
    column: str
    ascending: bool = True


Query = Union[SelectAll, Where, OrderBy]


def run_query(query: Query, table: Table) -> List[Row]:
    if isinstance(query, SelectAll):
        logger.debug("Executing SELECT * FROM table")
        return list(table.rows)

    if isinstance(query, Where):
        logger.debug("Executing WHERE %s %s %s", query.column, query.operator, query.value)
        compare = COMPARISONS[query.operator]
        out: List[Row] = []
        for row in run_query(query.source, table):
            if query.column not in row:
                continue
            try:
                matches = compare(row[query.column], query.value)
            except TypeError as e:
                raise TypeMismatchError(
                    f"Cannot compare column {query.column!r} value {row[query.column]!r} "
                    f"with {query.value!r}"
                ) from e
            if matches:
                out.append(row)
        return out

    if isinstance(query, OrderBy):
        logger.debug("Executing ORDER BY %s %s", query.column, "ASC" if query.ascending else "DESC")
        rows = run_query(query.source, table)
        # rows without the column sort first, like a null key
        try:
            out = sorted(rows, key=lambda r: (query.column in r, r.get(query.column)))
        except TypeError as e:
            raise TypeMismatchError(f"Column {query.column!r} holds values that cannot be ordered") from e
        if not query.ascending:
            out.reverse()
        return out

    raise TypeError(query)
