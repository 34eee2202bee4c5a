"""Built-in functions and array methods."""

__all__ = ["install", "array_method", "BUILTINS"]

from . import _error, _value


def _print(interp, args):
    interp.write(_value.format_value(args[0]) + "\n")
    return None


def _typeof(interp, args):
    return _value.type_name(args[0])


def _len(interp, args):
    (value,) = args
    if isinstance(value, (_value.Array, str)):
        return float(len(value))
    raise _error.OperandTypeError(
        f"len expects Array or String, got {_value.type_name(value)}")


def _str(interp, args):
    return _value.format_value(args[0])


def _map(interp, args):
    array, func = _sequence_and_callback("map", args)
    return _value.Array(
        [interp.call(func, [item], "map callback") for item in list(array.items)])


def _filter(interp, args):
    array, func = _sequence_and_callback("filter", args)
    kept = [
        item for item in list(array.items)
        if _value.is_truthy(interp.call(func, [item], "filter callback"))
    ]
    return _value.Array(kept)


def _sequence_and_callback(name, args):
    array, func = args
    if not isinstance(array, _value.Array):
        raise _error.OperandTypeError(
            f"{name} expects an array, got {_value.type_name(array)}")
    if not isinstance(func, (_value.Function, _value.NativeFunction)):
        raise _error.OperandTypeError(
            f"{name} expects a function as second argument, got {_value.type_name(func)}")
    return array, func


BUILTINS = (
    _value.NativeFunction("print", 1, _print),
    _value.NativeFunction("typeof", 1, _typeof),
    _value.NativeFunction("len", 1, _len),
    _value.NativeFunction("str", 1, _str),
    _value.NativeFunction("map", 2, _map),
    _value.NativeFunction("filter", 2, _filter),
)


def install(env):
    """Define every built-in function in an environment."""
    for native in BUILTINS:
        env.define(native.name, native)


def _push(array, args):
    array.items.append(args[0])
    return float(len(array.items))


def _pop(array, args):
    if not array.items:
        return None
    return array.items.pop()


_ARRAY_METHODS = {
    "push": (1, _push),
    "pop": (0, _pop),
}


def array_method(array, name, args):
    """Call a built-in method on an Array, mutating it in place.

    Raises:
        MethodNotFoundError: Arrays have no method called `name`
        ArityError: Wrong number of arguments
    """
    entry = _ARRAY_METHODS.get(name)
    if entry is None:
        raise _error.MethodNotFoundError(f"Method '{name}' not found on Array")
    arity, method = entry
    if len(args) != arity:
        raise _error.ArityError(
            f"Method {name} expects {arity} arguments, got {len(args)}")
    return method(array, args)
