"""Nodes for names and variable bindings."""

__all__ = ["Identifier", "Assign", "VarDecl"]

from . import _base


class Identifier(_base.AstNode):
    """Variable reference, looked up through the scope chain."""

    def __init__(self, name):
        self.name = name

    def unparse(self) -> str:
        return self.name


class Assign(_base.AstNode):
    """Bare assignment `name = value`.

    Rebinds the nearest existing binding of the name, or declares it in
    the current frame when nothing binds it yet. Evaluates to the value.
    """

    def __init__(self, name, value):
        self.name = name
        self.value = value

    def unparse(self) -> str:
        return f"{self.name} = {self.value.unparse()}"


class VarDecl(_base.AstNode):
    """Declaration `let name = value`, always binds in the current frame."""

    def __init__(self, name, value):
        self.name = name
        self.value = value

    def unparse(self) -> str:
        return f"let {self.name} = {self.value.unparse()}"
