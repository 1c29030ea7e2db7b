from __future__ import annotations


class InterpreterError(Exception):
    pass


class LexerError(InterpreterError):
    pass


class ParserError(InterpreterError):
    pass


class InsufficientOperandsError(ParserError):
    def __init__(self, operator: str, position: int) -> None:
        super().__init__(
            f"Invalid expression: not enough operands for operator {operator!r} "
            f"at token {position}"
        )
        self.operator = operator
        self.position = position


class ScriptSyntaxError(ParserError):
    """
    Raised for a script line that is not a recognised statement.

    :param line_number: 1-based line number in the raw source
    :param text: the offending line, trimmed
    :param message: what the parser expected
    """

    def __init__(self, line_number: int, text: str, message: str) -> None:
        super().__init__(f"line {line_number}: {message}: {text!r}")
        self.line_number = line_number
        self.text = text


class EvaluationError(InterpreterError):
    pass


class UndefinedVariableError(EvaluationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Undefined variable: {name}")
        self.name = name


class TypeMismatchError(EvaluationError):
    pass


class DivisionByZeroError(EvaluationError):
    pass
