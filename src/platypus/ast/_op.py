"""Nodes for operators."""

__all__ = ["BinaryOp", "UnaryOp", "BINARY_OPS", "UNARY_OPS"]

from . import _base

BINARY_OPS = ("+", "-", "*", "/", "==", "!=", "<", "<=", ">", ">=", "&&", "||")
UNARY_OPS = ("!", "-")


class BinaryOp(_base.AstNode):
    """Binary operator.

    Args:
        op: (str) One of BINARY_OPS
        left: (AstNode) Left operand
        right: (AstNode) Right operand
    """

    def __init__(self, op, left, right):
        if op not in BINARY_OPS:
            raise ValueError(f"Unknown binary operator: {op}")
        self.op = op
        self.left = left
        self.right = right

    def unparse(self) -> str:
        return f"({self.left.unparse()} {self.op} {self.right.unparse()})"


class UnaryOp(_base.AstNode):
    """Prefix operator, `!` or `-`."""

    def __init__(self, op, operand):
        if op not in UNARY_OPS:
            raise ValueError(f"Unknown unary operator: {op}")
        self.op = op
        self.operand = operand

    def unparse(self) -> str:
        return f"{self.op}{self.operand.unparse()}"
