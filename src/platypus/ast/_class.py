"""Nodes for classes, instances and member access."""

__all__ = [
    "ClassDecl",
    "PropertyDecl",
    "New",
    "PropertyAccess",
    "PropertyAssign",
    "MethodCall",
]

from . import _base


def _unparse_args(args):
    return ", ".join(arg.unparse() for arg in args)


def _indent(text):
    return "\n".join("    " + line for line in text.splitlines())


class PropertyDecl(_base.AstNode):
    """Property declaration with its initializer expression."""

    def __init__(self, name, value):
        self.name = name
        self.value = value

    def unparse(self) -> str:
        return f"{self.name} = {self.value.unparse()}"


class ClassDecl(_base.AstNode):
    """Class declaration.

    Args:
        name: (str) Class name
        parent: (str | None) Name of the extended class
        properties: (list[PropertyDecl]) Properties in declared order
        methods: (list[FuncDecl]) Method declarations
    """

    def __init__(self, name, parent, properties, methods):
        self.name = name
        self.parent = parent
        self.properties = properties
        self.methods = methods

    def unparse(self) -> str:
        header = f"class {self.name}"
        if self.parent:
            header += f" extends {self.parent}"
        members = [prop.unparse() for prop in self.properties]
        members.extend(method.unparse() for method in self.methods)
        if not members:
            return header + " {}"
        body = "\n".join(_indent(member) for member in members)
        return f"{header} {{\n{body}\n}}"


class New(_base.AstNode):
    """Instantiation `new Name(args)`."""

    def __init__(self, class_name, args):
        self.class_name = class_name
        self.args = args

    def unparse(self) -> str:
        return f"new {self.class_name}({_unparse_args(self.args)})"


class PropertyAccess(_base.AstNode):
    def __init__(self, object, name):
        self.object = object
        self.name = name

    def unparse(self) -> str:
        return f"{self.object.unparse()}.{self.name}"


class PropertyAssign(_base.AstNode):
    def __init__(self, object, name, value):
        self.object = object
        self.name = name
        self.value = value

    def unparse(self) -> str:
        return f"{self.object.unparse()}.{self.name} = {self.value.unparse()}"


class MethodCall(_base.AstNode):
    """Method call on an instance, or a built-in method on an array."""

    def __init__(self, object, method, args):
        self.object = object
        self.method = method
        self.args = args

    def unparse(self) -> str:
        return f"{self.object.unparse()}.{self.method}({_unparse_args(self.args)})"
