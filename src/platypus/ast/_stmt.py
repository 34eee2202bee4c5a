"""Nodes for statements and control flow."""

__all__ = ["Program", "Block", "ExprStmt", "If", "While", "For", "ForEach"]

from . import _base


def _indent(text):
    return "\n".join("    " + line for line in text.splitlines())


def _unparse_body(statement):
    if isinstance(statement, Block):
        return statement.unparse()
    return "\n" + _indent(statement.unparse())


class Program(_base.AstNode):
    """Top level of a parsed source file."""

    def __init__(self, statements):
        self.statements = statements

    def unparse(self) -> str:
        return "\n".join(stmt.unparse() for stmt in self.statements)


class Block(_base.AstNode):
    """Braced statement list, runs in its own child scope."""

    def __init__(self, statements):
        self.statements = statements

    def unparse(self) -> str:
        if not self.statements:
            return "{}"
        body = "\n".join(_indent(stmt.unparse()) for stmt in self.statements)
        return f"{{\n{body}\n}}"


class ExprStmt(_base.AstNode):
    """Expression evaluated for its side effects."""

    def __init__(self, expr):
        self.expr = expr

    def unparse(self) -> str:
        return self.expr.unparse()


class If(_base.AstNode):
    def __init__(self, condition, then_branch, else_branch=None):
        self.condition = condition
        self.then_branch = then_branch
        self.else_branch = else_branch

    def unparse(self) -> str:
        text = f"if ({self.condition.unparse()}) {_unparse_body(self.then_branch)}"
        if self.else_branch is not None:
            text += f" else {_unparse_body(self.else_branch)}"
        return text


class While(_base.AstNode):
    def __init__(self, condition, body):
        self.condition = condition
        self.body = body

    def unparse(self) -> str:
        return f"while ({self.condition.unparse()}) {_unparse_body(self.body)}"


class For(_base.AstNode):
    """C style loop, each of the three clauses may be None."""

    def __init__(self, init, condition, step, body):
        self.init = init
        self.condition = condition
        self.step = step
        self.body = body

    def unparse(self) -> str:
        clauses = [
            node.unparse() if node is not None else ""
            for node in (self.init, self.condition, self.step)
        ]
        return f"for ({'; '.join(clauses)}) {_unparse_body(self.body)}"


class ForEach(_base.AstNode):
    """Loop over the elements of an array, `for (name in iterable)`."""

    def __init__(self, name, iterable, body):
        self.name = name
        self.iterable = iterable
        self.body = body

    def unparse(self) -> str:
        return f"for ({self.name} in {self.iterable.unparse()}) {_unparse_body(self.body)}"
