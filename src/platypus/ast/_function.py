"""Nodes for functions, lambdas and calls."""

__all__ = ["FuncDecl", "Lambda", "FunctionCall", "Return"]

from . import _base


def _unparse_args(args):
    return ", ".join(arg.unparse() for arg in args)


class FuncDecl(_base.AstNode):
    """Named function declaration, also used for class methods.

    Args:
        name: (str) Function name
        params: (list[str]) Parameter names
        body: (Block) Function body
        return_type: (str | None) Declared return type, recorded but never checked
    """

    def __init__(self, name, params, body, return_type=None):
        self.name = name
        self.params = params
        self.body = body
        self.return_type = return_type

    def unparse(self) -> str:
        annotation = f": {self.return_type}" if self.return_type else ""
        return f"func {self.name}({', '.join(self.params)}){annotation} {self.body.unparse()}"


class Lambda(_base.AstNode):
    """Anonymous function `(a, b) => expr`."""

    def __init__(self, params, body):
        self.params = params
        self.body = body

    def unparse(self) -> str:
        return f"({', '.join(self.params)}) => {self.body.unparse()}"


class FunctionCall(_base.AstNode):
    """Call of a function bound to a name."""

    def __init__(self, name, args):
        self.name = name
        self.args = args

    def unparse(self) -> str:
        return f"{self.name}({_unparse_args(self.args)})"


class Return(_base.AstNode):
    """Return from the enclosing function, value is None for a bare return."""

    def __init__(self, value=None):
        self.value = value

    def unparse(self) -> str:
        if self.value is None:
            return "return"
        return f"return {self.value.unparse()}"
