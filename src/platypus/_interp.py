"""Tree-walking evaluator.

The interpreter walks AST nodes directly, evaluating each against the
environment it is given. Statements go through `execute_statement` and
expressions through `evaluate`; both dispatch on the node type.

Every function, method and lambda body runs inside
`ExecutionContext.call_frame`, which marks the context as inside a call
for the privacy gate and restores it on every way out of the body.
"""

__all__ = ["Interpreter"]

import logging
import sys
from contextlib import contextmanager

from . import _context, _env, _error, _ops, _parse, _value, ast, builtin

logger = logging.getLogger(__name__)


class _Return(Exception):
    """Unwinds a function body up to the call that is running it."""

    def __init__(self, value):
        super().__init__("return")
        self.value = value


class Interpreter:
    """Interpreter and state for one Platypus program or repl session.

    Interpreters share nothing with each other. Each has its own global
    environment, class registry and execution context.

    Args:
        output: Text stream for `print`, defaults to the current sys.stdout
        max_depth: (int) Largest number of nested calls allowed

    Attributes:
        globals: (Environment) Global frame, holds the built-in functions
        classes: (dict[str, ClassDef]) Class registry
        context: (ExecutionContext) Privacy flag and call depth
    """

    def __init__(self, output=None, max_depth=_context.DEFAULT_MAX_DEPTH):
        self.output = output
        self.context = _context.ExecutionContext(max_depth)
        self.globals = _env.Environment()
        self.classes = {}
        builtin.install(self.globals)

    def __repr__(self):
        return f"Interpreter<{len(self.globals.values)} globals, {len(self.classes)} classes>"

    def write(self, text):
        stream = self.output if self.output is not None else sys.stdout
        stream.write(text)

    # === Entry points ===

    def run(self, source, filename=None):
        """Parse and execute a complete program.

        Raises:
            ParseError: Source is not valid Platypus
            EvalError: The program failed while running
        """
        program = _parse.parse(source, filename)
        logger.debug("running %s", filename or "<source>")
        self.execute(program)

    def execute(self, program):
        """Execute the statements of a parsed program in the global frame."""
        with self._top_level():
            for statement in program.statements:
                self.execute_statement(statement, self.globals)

    def evaluate_source(self, source):
        """Run one interactive entry.

        When the source is a single expression statement its value is
        returned, otherwise the statements are executed and None returned.
        """
        program = _parse.parse(source)
        statements = program.statements
        if len(statements) == 1 and isinstance(statements[0], ast.ExprStmt):
            with self._top_level():
                return self.evaluate(statements[0].expr, self.globals)
        self.execute(program)
        return None

    @contextmanager
    def _top_level(self):
        with self.context.host_recursion():
            try:
                yield
            except _Return:
                raise _error.EvalError("'return' outside of a function") from None

    # === Statements ===

    def execute_statement(self, node, env):
        """Execute one statement node in `env`."""
        match node:
            case ast.ExprStmt():
                self.evaluate(node.expr, env)
            case ast.VarDecl():
                env.define(node.name, self.evaluate(node.value, env))
            case ast.FuncDecl():
                env.define(node.name, self._make_function(node, env))
            case ast.ClassDecl():
                self._declare_class(node, env)
            case ast.Return():
                value = None if node.value is None else self.evaluate(node.value, env)
                raise _Return(value)
            case ast.If():
                if _value.is_truthy(self.evaluate(node.condition, env)):
                    self.execute_statement(node.then_branch, env)
                elif node.else_branch is not None:
                    self.execute_statement(node.else_branch, env)
            case ast.While():
                while _value.is_truthy(self.evaluate(node.condition, env)):
                    self.execute_statement(node.body, env)
            case ast.For():
                self._run_for(node, env)
            case ast.ForEach():
                self._run_foreach(node, env)
            case ast.Block():
                self.execute_block(node.statements, _env.Environment(env))
            case _:
                raise NotImplementedError(f"Cannot execute {type(node).__name__}")

    def execute_block(self, statements, env):
        for statement in statements:
            self.execute_statement(statement, env)

    def _run_for(self, node, env):
        loop_env = _env.Environment(env)
        if isinstance(node.init, ast.VarDecl):
            self.execute_statement(node.init, loop_env)
        elif node.init is not None:
            self.evaluate(node.init, loop_env)

        while node.condition is None or _value.is_truthy(
                self.evaluate(node.condition, loop_env)):
            self.execute_statement(node.body, loop_env)
            if node.step is not None:
                self.evaluate(node.step, loop_env)

    def _run_foreach(self, node, env):
        iterable = self.evaluate(node.iterable, env)
        if not isinstance(iterable, _value.Array):
            raise _error.OperandTypeError(
                f"Cannot iterate over {_value.type_name(iterable)} in for loop")
        # Elements pushed by the body are not visited
        for item in list(iterable.items):
            loop_env = _env.Environment(env)
            loop_env.define(node.name, item)
            self.execute_statement(node.body, loop_env)

    def _make_function(self, node, env):
        return _value.Function(node.name, node.params, node.body.statements, env)

    def _declare_class(self, node, env):
        parent = None
        if node.parent is not None:
            parent = self.classes.get(node.parent)
            if parent is None:
                raise _error.UndefinedNameError(f"Parent class '{node.parent}' not found")

        methods = {method.name: self._make_function(method, env) for method in node.methods}
        properties = [(prop.name, prop.value) for prop in node.properties]
        self.classes[node.name] = _value.ClassDef(node.name, properties, methods, parent)
        logger.debug("registered class %s", node.name)

    # === Expressions ===

    def evaluate(self, node, env):
        """Evaluate an expression node in `env` and return its value."""
        match node:
            case ast.Literal():
                return node.value
            case ast.Identifier():
                return env.get(node.name)
            case ast.ArrayLiteral():
                return _value.Array([self.evaluate(item, env) for item in node.items])
            case ast.Assign():
                value = self.evaluate(node.value, env)
                env.assign(node.name, value)
                return value
            case ast.BinaryOp(op="&&"):
                return (_value.is_truthy(self.evaluate(node.left, env))
                        and _value.is_truthy(self.evaluate(node.right, env)))
            case ast.BinaryOp(op="||"):
                return (_value.is_truthy(self.evaluate(node.left, env))
                        or _value.is_truthy(self.evaluate(node.right, env)))
            case ast.BinaryOp():
                left = self.evaluate(node.left, env)
                right = self.evaluate(node.right, env)
                return _ops.binary_op(node.op, left, right)
            case ast.UnaryOp():
                return _ops.unary_op(node.op, self.evaluate(node.operand, env))
            case ast.Lambda():
                return _value.Function("<lambda>", node.params, node.body, env, is_lambda=True)
            case ast.FunctionCall():
                return self._call_named(node, env)
            case ast.MethodCall():
                return self._call_member(node, env)
            case ast.New():
                return self._new(node, env)
            case ast.PropertyAccess():
                return self._get_property(node, env)
            case ast.PropertyAssign():
                return self._set_property(node, env)
            case ast.Match():
                return self._match(node, env)
        raise NotImplementedError(f"Cannot evaluate {type(node).__name__}")

    # === Calls ===

    def _call_named(self, node, env):
        self.context.check_private(
            node.name, "Cannot call private function '{name}' from outside context")
        args = [self.evaluate(arg, env) for arg in node.args]
        func = env.get(node.name)
        return self.call(func, args, node.name)

    def call(self, func, args, name=None):
        """Invoke a function value with already evaluated arguments.

        Args:
            func: Function or NativeFunction value
            args: (list) Argument values
            name: (str | None) Name the function was called by, for messages

        Returns:
            Value returned by the function, None when it returns nothing

        Raises:
            OperandTypeError: `func` is not a function
            ArityError: Wrong number of arguments
        """
        match func:
            case _value.NativeFunction():
                _check_arity(func.arity, args, f"Native function {func.name}")
                return func(self, args)
            case _value.Function():
                label = "Lambda" if func.is_lambda else f"Function {func.name}"
                _check_arity(len(func.params), args, label)
                env = _env.Environment(func.closure)
                for param, arg in zip(func.params, args):
                    env.define(param, arg)
                return self._invoke(func, env)
        raise _error.OperandTypeError(f"{name or _value.format_value(func)} is not a function")

    def call_method(self, instance, name, args):
        """Invoke a method on an instance.

        The instance's own property dict becomes the frame around the call
        frame, so the body reads and writes the instance storage directly.
        Changes are visible to every holder of the instance as soon as
        they happen.

        Raises:
            MethodNotFoundError: The class has no method called `name`
            ArityError: Wrong number of arguments
        """
        classdef = instance.classdef
        method = classdef.find_method(name)
        if method is None:
            raise _error.MethodNotFoundError(
                f"Method '{name}' not found on class '{classdef.name}'")
        _check_arity(len(method.params), args, f"Method {name}")

        members = _env.Environment(method.closure or self.globals, instance.properties)
        env = _env.Environment(members)
        env.define("this", instance)
        for param, arg in zip(method.params, args):
            env.define(param, arg)
        return self._invoke(method, env)

    def _invoke(self, func, env):
        logger.debug("call %s at depth %d", func.name, self.context.depth + 1)
        with self.context.call_frame(func.name):
            if func.is_lambda:
                return self.evaluate(func.body, env)
            try:
                self.execute_block(func.body, env)
            except _Return as ret:
                return ret.value
        return None

    def _call_member(self, node, env):
        receiver = self.evaluate(node.object, env)
        self.context.check_private(
            node.method, "Cannot call private method '{name}' from outside class")
        args = [self.evaluate(arg, env) for arg in node.args]
        match receiver:
            case _value.Instance():
                return self.call_method(receiver, node.method, args)
            case _value.Array():
                return builtin.array_method(receiver, node.method, args)
        raise _error.OperandTypeError(
            f"Cannot call method '{node.method}' on {_value.type_name(receiver)}")

    # === Classes and properties ===

    def _new(self, node, env):
        self.context.check_private(
            node.class_name, "Cannot instantiate private class '{name}' from outside context")
        classdef = self.classes.get(node.class_name)
        if classdef is None:
            raise _error.UndefinedNameError(f"Class '{node.class_name}' not found")
        # No constructor step, arguments are only evaluated for their effects
        for arg in node.args:
            self.evaluate(arg, env)
        return self.instantiate(classdef)

    def instantiate(self, classdef):
        """Create an instance, evaluating the property initializers in order.

        Each initializer runs in a fresh frame whose parent is the global
        frame, whatever scope the `new` expression appeared in.
        """
        instance = _value.Instance(classdef)
        for name, initializer in classdef.properties:
            instance.properties[name] = self.evaluate(
                initializer, _env.Environment(self.globals))
        return instance

    def _get_property(self, node, env):
        instance = self.evaluate(node.object, env)
        if not isinstance(instance, _value.Instance):
            raise _error.OperandTypeError(
                f"Cannot access property '{node.name}' on {_value.type_name(instance)}")
        self.context.check_private(
            node.name, "Cannot access private property '{name}' from outside class")
        try:
            return instance.properties[node.name]
        except KeyError:
            raise _error.UndefinedNameError(
                f"Property '{node.name}' not found on object") from None

    def _set_property(self, node, env):
        instance = self.evaluate(node.object, env)
        if not isinstance(instance, _value.Instance):
            raise _error.OperandTypeError(
                f"Cannot assign property to {_value.type_name(instance)}")
        self.context.check_private(
            node.name, "Cannot assign private property '{name}' from outside class")
        value = self.evaluate(node.value, env)
        instance.properties[node.name] = value
        return value

    # === Match ===

    def _match(self, node, env):
        subject = self.evaluate(node.subject, env)
        for case in node.cases:
            if _pattern_matches(case.pattern, subject):
                return self.evaluate(case.body, env)
        raise _error.MatchError("No matching case found")


def _pattern_matches(pattern, value):
    match pattern:
        case ast.WildcardPattern():
            return True
        case ast.LiteralPattern():
            return _value.values_equal(pattern.value, value)
        case ast.TypePattern():
            if _value.type_name(value) == pattern.name:
                return True
            return isinstance(value, _value.Instance) and value.classdef.is_a(pattern.name)
    raise NotImplementedError(f"Cannot match {type(pattern).__name__}")


def _check_arity(expected, args, label):
    if len(args) != expected:
        raise _error.ArityError(f"{label} expects {expected} arguments, got {len(args)}")
