"""Nodes for literal values."""

__all__ = ["Literal", "ArrayLiteral"]

from .. import _value
from . import _base


class Literal(_base.AstNode):
    """Number, string, boolean or null literal.

    Args:
        value: (float | str | bool | None) The constant value
    """

    def __init__(self, value):
        self.value = value

    def unparse(self) -> str:
        if isinstance(self.value, str):
            escaped = self.value.replace('\\', '\\\\').replace('"', '\\"')
            escaped = escaped.replace("\n", "\\n").replace("\t", "\\t").replace("\r", "\\r")
            return f'"{escaped}"'
        return _value.format_value(self.value)


class ArrayLiteral(_base.AstNode):
    """Array literal, evaluates to a new Array each time."""

    def __init__(self, items):
        self.items = items

    def unparse(self) -> str:
        return "[" + ", ".join(item.unparse() for item in self.items) + "]"
