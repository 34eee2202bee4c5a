"""
Platypus Programming Language Implementation

A small dynamically typed scripting language with first class functions,
closures, single inheritance classes and pattern matching, run by a
tree-walking interpreter.
"""

__version__ = "0.1.0"


from ._error import *
from ._value import *
from ._env import *
from ._context import *
from ._parse import *
from ._interp import *
from . import ast
