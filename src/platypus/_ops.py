"""Operator evaluation for runtime values.

There is no implicit conversion between types. Any operand combination
not listed for an operator fails with OperandTypeError.
"""

__all__ = ["binary_op", "unary_op"]

from . import _error, _value

_VERBS = {
    "+": "add",
    "-": "subtract",
    "*": "multiply",
    "/": "divide",
    "<": "compare",
    "<=": "compare",
    ">": "compare",
    ">=": "compare",
}


def binary_op(op, left, right):
    """Apply a binary operator to two evaluated operands.

    The logic operators `&&` and `||` short circuit, so the interpreter
    handles them before both sides are evaluated.

    Args:
        op: (str) Operator symbol
        left: Left operand value
        right: Right operand value

    Returns:
        Resulting value

    Raises:
        OperandTypeError: Operands have unsupported types for `op`
        DivisionByZeroError: Division with a zero divisor
    """
    match op:
        case "==":
            return _value.values_equal(left, right)
        case "!=":
            return not _value.values_equal(left, right)
        case "+":
            if _both(left, right, float) or _both(left, right, str):
                return left + right
        case "-":
            if _both(left, right, float):
                return left - right
        case "*":
            if _both(left, right, float):
                return left * right
        case "/":
            if _both(left, right, float):
                if right == 0.0:
                    raise _error.DivisionByZeroError("Division by zero")
                return left / right
        case "<" | "<=" | ">" | ">=":
            if _both(left, right, float) or _both(left, right, str):
                return _compare(op, left, right)
        case _:
            raise ValueError(f"Unknown binary operator: {op}")

    raise _error.OperandTypeError(
        f"Cannot {_VERBS[op]} {_value.type_name(left)} and {_value.type_name(right)}")


def unary_op(op, operand):
    """Apply `!` or `-` to an evaluated operand."""
    match op:
        case "!":
            return not _value.is_truthy(operand)
        case "-":
            if isinstance(operand, float):
                return -operand
            raise _error.OperandTypeError(f"Cannot negate {_value.type_name(operand)}")
    raise ValueError(f"Unknown unary operator: {op}")


def _both(left, right, kind):
    return isinstance(left, kind) and isinstance(right, kind)


def _compare(op, left, right):
    match op:
        case "<":
            return left < right
        case "<=":
            return left <= right
        case ">":
            return left > right
        case ">=":
            return left >= right
