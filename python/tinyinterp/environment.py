"""Variable store shared by every expression and statement of a session."""
from __future__ import annotations

import logging
from typing import Dict, Iterator, Union

from .errors import TypeMismatchError, UndefinedVariableError

logger = logging.getLogger(__name__)

Value = Union[float, str, bool]


def is_number(value: object) -> bool:
    # bool is an int subclass and must never count as a number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_boolean(value: object) -> bool:
    return isinstance(value, bool)


def is_text(value: object) -> bool:
    return isinstance(value, str)


def kind_of(value: object) -> str:
    if is_boolean(value):
        return "boolean"
    if is_number(value):
        return "number"
    if is_text(value):
        return "text"
    return type(value).__name__


def normalize(value: object) -> Value:
    """
    Bring a host value into the interpreter's value domain.

    Integers become floats, booleans and strings are kept as they are.
    Anything else raises TypeMismatchError.
    """
    if is_boolean(value) or is_text(value):
        return value  # type: ignore[return-value]
    if is_number(value):
        try:
            return float(value)  # type: ignore[arg-type]
        except OverflowError as e:
            raise TypeMismatchError("Integer too large to convert to a number") from e
    raise TypeMismatchError(f"Unsupported value type: {type(value).__name__}")


class Environment:
    def __init__(self) -> None:
        self.values: Dict[str, Value] = {}

    def set_variable(self, name: str, value: object) -> None:
        if not name:
            raise ValueError("Variable name must not be empty")
        self.values[name] = normalize(value)
        logger.debug("Set variable %s = %s", name, self.values[name])

    def get_variable(self, name: str) -> Value:
        if name in self.values:
            return self.values[name]
        raise UndefinedVariableError(name)

    def has_variable(self, name: str) -> bool:
        return name in self.values

    def variables(self) -> Dict[str, Value]:
        return dict(self.values)

    def clear(self) -> None:
        self.values.clear()

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"Environment({self.values!r})"
