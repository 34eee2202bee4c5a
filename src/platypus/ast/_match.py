"""Nodes for match expressions and their patterns."""

__all__ = ["Match", "MatchCase", "LiteralPattern", "TypePattern", "WildcardPattern"]

from . import _base, _literal


class LiteralPattern(_base.AstNode):
    """Matches values equal to a constant."""

    def __init__(self, value):
        self.value = value

    def unparse(self) -> str:
        return _literal.Literal(self.value).unparse()


class TypePattern(_base.AstNode):
    """Matches values whose dynamic type, or class, has the given name."""

    def __init__(self, name):
        self.name = name

    def unparse(self) -> str:
        return self.name


class WildcardPattern(_base.AstNode):
    """The `_` pattern, matches anything."""

    def unparse(self) -> str:
        return "_"


class MatchCase(_base.AstNode):
    def __init__(self, pattern, body):
        self.pattern = pattern
        self.body = body

    def unparse(self) -> str:
        return f"case {self.pattern.unparse()} => {self.body.unparse()}"


class Match(_base.AstNode):
    """Match expression, cases are tried in source order.

    Args:
        subject: (AstNode) Expression evaluated once
        cases: (list[MatchCase]) Cases in source order
    """

    def __init__(self, subject, cases):
        self.subject = subject
        self.cases = cases

    def unparse(self) -> str:
        cases = ", ".join(case.unparse() for case in self.cases)
        return f"match ({self.subject.unparse()}) {{ {cases} }}"
