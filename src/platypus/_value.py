"""Runtime values for the interpreter.

A Platypus value is always one of:

    Number    python float
    String    python str
    Boolean   python bool
    Null      None
    Array     `Array`, a shared handle around a mutable list
    Function  `Function` (user function or lambda) or `NativeFunction`
    Instance  `Instance`, a shared handle around a property dict

Scalars are immutable python objects so they behave as copied on
assignment. Arrays and Instances are handles; binding one to a second
name shares the same storage, and mutation through either name is seen
through the other.
"""

__all__ = [
    "Array",
    "Function",
    "NativeFunction",
    "ClassDef",
    "Instance",
    "type_name",
    "format_value",
    "is_truthy",
    "values_equal",
]

import types


class Array:
    """Ordered, mutable, shared sequence of values.

    Attributes:
        items: (list) Underlying element storage
    """

    __slots__ = ("items",)

    def __init__(self, items=None):
        self.items = [] if items is None else items

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self):
        return f"Array({self.items!r})"


class Function:
    """User defined function, method or lambda.

    The closure is the environment that was active where the function
    was defined. It is shared, not copied, so the function keeps seeing
    later changes to its defining scope and keeps that scope alive after
    the defining call has returned.

    Args:
        name: (str) Function name, "<lambda>" for lambdas
        params: (list[str]) Parameter names
        body: List of statement nodes, or a single expression node for lambdas
        closure: (Environment | None) Captured defining environment
        is_lambda: (bool) Body is an expression rather than statements
    """

    __slots__ = ("name", "params", "body", "closure", "is_lambda")

    def __init__(self, name, params, body, closure, is_lambda=False):
        self.name = name
        self.params = list(params)
        self.body = body
        self.closure = closure
        self.is_lambda = is_lambda

    def __repr__(self):
        return f"Function({self.name}, {self.params})"


class NativeFunction:
    """Built-in function implemented in python.

    The implementation is called as `func(interp, args)` with the already
    evaluated argument list.
    """

    __slots__ = ("name", "arity", "func")

    def __init__(self, name, arity, func):
        self.name = name
        self.arity = arity
        self.func = func

    def __call__(self, interp, args):
        return self.func(interp, args)

    def __repr__(self):
        return f"NativeFunction({self.name}, {self.arity})"


class ClassDef:
    """Class blueprint shared by every instance of the class.

    Inherited members are flattened in when the class is built: the
    property initializers start with the parent's (a redeclared name keeps
    its inherited position but takes the new initializer) and the method
    table is the parent's table updated with this class's methods.

    Nothing here changes after construction; the initializers are stored
    as a tuple and the method table as a read-only mapping.

    Args:
        name: (str) Class name
        properties: Iterable of (name, initializer expression) pairs
        methods: (dict[str, Function]) Methods declared by this class
        parent: (ClassDef | None) Class being extended
    """

    __slots__ = ("name", "parent", "properties", "methods")

    def __init__(self, name, properties, methods, parent=None):
        self.name = name
        self.parent = parent

        initializers = dict(parent.properties) if parent else {}
        initializers.update(properties)
        self.properties = tuple(initializers.items())

        table = dict(parent.methods) if parent else {}
        table.update(methods)
        self.methods = types.MappingProxyType(table)

    def find_method(self, name):
        return self.methods.get(name)

    def is_a(self, name):
        """Check this class or one of its ancestors is called `name`."""
        classdef = self
        while classdef is not None:
            if classdef.name == name:
                return True
            classdef = classdef.parent
        return False

    def __repr__(self):
        return f"ClassDef({self.name})"


class Instance:
    """Object created by `new`.

    Attributes:
        classdef: (ClassDef) Shared class blueprint
        properties: (dict) Property storage, unique to this instance
    """

    __slots__ = ("classdef", "properties")

    def __init__(self, classdef):
        self.classdef = classdef
        self.properties = {}

    def __repr__(self):
        return f"Instance({self.classdef.name}, {self.properties!r})"


def type_name(value):
    """Dynamic type name of a value, as reported by `typeof`."""
    match value:
        case None:
            return "Null"
        case bool():
            return "Boolean"
        case float():
            return "Number"
        case str():
            return "String"
        case Array():
            return "Array"
        case Function() | NativeFunction():
            return "Function"
        case Instance():
            return "Object"
    raise TypeError(f"Not a Platypus value: {value!r}")


def format_value(value):
    """Text shown by `print` and echoed by the repl."""
    match value:
        case None:
            return "null"
        case bool():
            return "true" if value else "false"
        case float():
            return _format_number(value)
        case str():
            return value
        case Array():
            return "[" + ", ".join(format_value(item) for item in value.items) + "]"
        case Function() if value.is_lambda:
            return f"<lambda({len(value.params)})>"
        case Function():
            return f"<function({len(value.params)})>"
        case NativeFunction():
            return f"<native function {value.name}({value.arity})>"
        case Instance():
            return f"<{value.classdef.name} object>"
    raise TypeError(f"Not a Platypus value: {value!r}")


def _format_number(number):
    if number.is_integer():
        return str(int(number))
    return repr(number)


def is_truthy(value):
    """Boolean interpretation used by conditions and logic operators."""
    match value:
        case None:
            return False
        case bool():
            return value
        case float():
            return value != 0.0
        case str():
            return value != ""
        case Array():
            return len(value.items) > 0
        case Function() | NativeFunction() | Instance():
            return True
    raise TypeError(f"Not a Platypus value: {value!r}")


def values_equal(left, right):
    """Equality for `==` and literal patterns.

    Scalars compare by value. Arrays, instances and functions compare by
    identity, two names are equal only when they share the same handle.
    Values of different types are never equal.
    """
    kind = type_name(left)
    if kind != type_name(right):
        return False
    if kind in ("Array", "Object", "Function"):
        return left is right
    return left == right
