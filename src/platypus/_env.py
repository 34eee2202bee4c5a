"""Scope chain for variable bindings."""

__all__ = ["Environment"]

from . import _error


class Environment:
    """One frame of the scope chain.

    Lookups start at this frame and walk outward through the parents,
    the first frame holding the name wins. Only the global frame has no
    parent.

    A frame can be built around an existing dict. Method calls use this to
    put an instance's own property dict in the chain, so reads and writes
    of property names inside the method body go straight to the instance.

    Args:
        parent: (Environment | None) Enclosing frame
        values: (dict | None) Storage to use for this frame's bindings

    Attributes:
        parent: (Environment | None) Enclosing frame
        values: (dict) Bindings owned by this frame
    """

    __slots__ = ("parent", "values")

    def __init__(self, parent=None, values=None):
        self.parent = parent
        self.values = {} if values is None else values

    def define(self, name, value):
        """Bind `name` in this frame, replacing any binding it already has here."""
        self.values[name] = value

    def get(self, name):
        """Look up `name` starting here and walking outward.

        Raises:
            UndefinedNameError: No frame in the chain binds `name`
        """
        frame = self.resolve(name)
        if frame is None:
            raise _error.UndefinedNameError(f"Undefined variable: {name}")
        return frame.values[name]

    def assign(self, name, value):
        """Rebind the nearest existing `name`.

        When no frame in the chain binds `name`, the assignment declares
        it in this frame instead.
        """
        frame = self.resolve(name)
        if frame is None:
            frame = self
        frame.values[name] = value

    def resolve(self, name):
        """Find the innermost frame binding `name`, or None."""
        frame = self
        while frame is not None:
            if name in frame.values:
                return frame
            frame = frame.parent
        return None

    def __contains__(self, name):
        return self.resolve(name) is not None

    def __repr__(self):
        depth = 0
        frame = self.parent
        while frame is not None:
            depth += 1
            frame = frame.parent
        return f"Environment({len(self.values)} names, depth={depth})"
