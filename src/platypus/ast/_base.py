"""Node base classes."""

__all__ = ["AstNode", "SourcePosition"]

from dataclasses import dataclass


@dataclass
class SourcePosition:
    """Source code position information for AST nodes.

    Attributes:
        filename: Source file path
        line: Starting line number (1-indexed)
        column: Starting column number (1-indexed)
    """
    filename: str | None = None
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        if self.filename and self.line:
            return f"{self.filename}:{self.line}"
        if self.line:
            return f"on line {self.line}"
        return ""


class AstNode:
    """Base class for all AST nodes.

    Nodes are plain data describing a parsed program. They know nothing
    about evaluation, the interpreter dispatches on node type.

    Two nodes compare equal when they are the same type and hold equal
    fields; the source position is ignored so that trees built by hand
    compare equal to parsed ones.

    Attributes:
        position: Optional source position, set by the parser.
    """

    position = None

    def unparse(self) -> str:
        """Convert this node back to source code."""
        raise NotImplementedError(f"{self.__class__.__name__}.unparse() not implemented")

    def fields(self):
        """Node attributes other than the source position."""
        return {k: v for k, v in vars(self).items() if k != "position"}

    def print_tree(self, depth=0, file=None):
        """Print ast nodes for debugging."""
        indent = "  " * depth
        print(f"{indent}{self!r}", file=file)
        for value in self.fields().values():
            if isinstance(value, AstNode):
                value.print_tree(depth + 1, file)
            elif isinstance(value, list):
                for child in value:
                    if isinstance(child, AstNode):
                        child.print_tree(depth + 1, file)

    def __eq__(self, other):
        return type(other) is type(self) and self.fields() == other.fields()

    __hash__ = None

    def __repr__(self):
        attrs = []
        for key, value in self.fields().items():
            if isinstance(value, AstNode) or (
                    isinstance(value, list) and value and isinstance(value[0], AstNode)):
                continue
            attrs.append(f"{key}={value!r}")
        return f"{self.__class__.__name__}({', '.join(attrs)})"
