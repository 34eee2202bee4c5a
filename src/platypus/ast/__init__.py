"""AST nodes produced by the parser and walked by the interpreter."""

from ._base import *
from ._class import *
from ._function import *
from ._ident import *
from ._literal import *
from ._match import *
from ._op import *
from ._stmt import *
