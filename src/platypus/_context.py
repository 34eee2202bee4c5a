"""Execution context and the privacy gate.

Names that start with the private marker can only be used while some
function, method or lambda body is executing. Which body it is does not
matter; any active call satisfies the gate, including a call into a
completely unrelated class.

The context belongs to a single interpreter. Independent programs need
independent interpreters and share nothing.
"""

__all__ = ["ExecutionContext", "PRIVATE_MARKER", "DEFAULT_MAX_DEPTH", "is_private"]

import sys
from contextlib import contextmanager

from . import _error

PRIVATE_MARKER = "_"

DEFAULT_MAX_DEPTH = 200

# Generous estimate of python frames used per Platypus call
_HOST_FRAMES_PER_CALL = 30


def is_private(name):
    """Check if a name uses the private naming convention."""
    return name.startswith(PRIVATE_MARKER)


class ExecutionContext:
    """Runtime state that follows the active call frames.

    Args:
        max_depth: (int) Largest number of nested calls allowed

    Attributes:
        in_context: (bool) True while any call body is executing
        depth: (int) Number of active calls
        max_depth: (int) Largest number of nested calls allowed
        calls: (list[str]) Names of the active calls, innermost last
    """

    def __init__(self, max_depth=DEFAULT_MAX_DEPTH):
        self.in_context = False
        self.depth = 0
        self.max_depth = max_depth
        self.calls = []

    @contextmanager
    def call_frame(self, name):
        """Scope a function, method or lambda body.

        The previous flag and depth are restored however the body exits,
        including when an error propagates through it.

        Raises:
            StackOverflowError: Entering would exceed `max_depth`
        """
        if self.depth >= self.max_depth:
            message = f"Maximum call depth of {self.max_depth} exceeded calling {name}"
            if self.calls:
                message += f" from {self.calls[-1]}"
            raise _error.StackOverflowError(message)
        previous = self.in_context
        self.in_context = True
        self.depth += 1
        self.calls.append(name)
        try:
            yield self
        finally:
            self.calls.pop()
            self.depth -= 1
            self.in_context = previous

    def check_private(self, name, message):
        """Apply the privacy gate to `name`.

        Args:
            name: (str) Property, method, function or class name
            message: (str) Error text, formatted with `name`

        Raises:
            AccessError: `name` is private and no call is active
        """
        if is_private(name) and not self.in_context:
            raise _error.AccessError(message.format(name=name))

    @contextmanager
    def host_recursion(self):
        """Make room on the python stack for `max_depth` nested calls.

        A python RecursionError that still escapes is reported as a
        StackOverflowError.
        """
        previous = sys.getrecursionlimit()
        wanted = self.max_depth * _HOST_FRAMES_PER_CALL + 1000
        if wanted > previous:
            sys.setrecursionlimit(wanted)
        try:
            yield
        except RecursionError as err:
            raise _error.StackOverflowError("Maximum call depth exceeded") from err
        finally:
            sys.setrecursionlimit(previous)

    def __repr__(self):
        return f"ExecutionContext(in_context={self.in_context}, depth={self.depth})"
