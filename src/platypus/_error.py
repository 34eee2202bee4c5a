"""Error classes raised while parsing and evaluating Platypus code.

Every runtime failure derives from `EvalError`. There is no way to catch
these from inside a Platypus program, so they always unwind to whoever
called the interpreter (the cli exits, the repl reports and carries on).
Each class carries a `kind`, the short name used by the language
documentation for that category of failure.
"""

__all__ = [
    "EvalError",
    "UndefinedNameError",
    "AccessError",
    "OperandTypeError",
    "ArityError",
    "MethodNotFoundError",
    "MatchError",
    "DivisionByZeroError",
    "StackOverflowError",
    "ParseError",
]


class EvalError(Exception):
    """Error while evaluating a Platypus program.

    Args:
        message: (str) Error description

    Attributes:
        message: (str) Error description
        kind: (str) Category name of the error
    """

    kind = "EvalError"

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class UndefinedNameError(EvalError):
    """Unbound variable, property, function or class name."""

    kind = "NameError"


class AccessError(EvalError):
    """Private name used outside of any function, method or lambda body."""

    kind = "AccessError"


class OperandTypeError(EvalError):
    """Operation applied to a value of the wrong dynamic type."""

    kind = "TypeError"


class ArityError(EvalError):
    """Wrong number of arguments in a call."""

    kind = "ArityError"


class MethodNotFoundError(EvalError):
    kind = "MethodNotFound"


class MatchError(EvalError):
    """No case of a match expression accepted the value."""

    kind = "MatchError"


class DivisionByZeroError(EvalError):
    kind = "DivisionByZero"


class StackOverflowError(EvalError):
    """Too many nested calls."""

    kind = "StackOverflow"


class ParseError(Exception):
    """Exception raised for parsing errors.

    Args:
        message: (str) Error description
        line: (int | None) Line where the error occurred, 1-indexed
        column: (int | None) Column where the error occurred, 1-indexed
        filename: (str | None) Source file name

    Attributes:
        message: (str) Error description
        line: (int | None) Line where the error occurred
        column: (int | None) Column where the error occurred
        filename: (str | None) Source file name
    """

    def __init__(self, message, line=None, column=None, filename=None):
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        super().__init__(self._describe())

    def _describe(self):
        if not self.line:
            return self.message
        where = f"line {self.line}, column {self.column}"
        if self.filename:
            where = f"{self.filename}: {where}"
        return f"{self.message} at {where}"
