"""Parse Platypus source into AST nodes.

Source is parsed with the lark grammar in `lark/platypus.lark`. The lark
tree is an intermediate form that never leaves this module; `_Builder`
converts it straight into `platypus.ast` nodes, tagging each with the
position it came from.
"""

__all__ = ["parse", "parse_tree"]

import re

import lark
from lark import v_args

from . import _error, ast


def parse(source, filename=None):
    """Parse source code into a Program node.

    Args:
        source: (str) Platypus source code
        filename: (str | None) File name used in positions and errors

    Returns:
        (ast.Program) Parsed program

    Raises:
        ParseError: Source is not valid Platypus
    """
    tree = parse_tree(source, filename)
    return _Builder(filename).transform(tree)


def parse_tree(source, filename=None):
    """Parse source into the raw lark tree, mostly useful for debugging."""
    parser = _lark_parser()
    try:
        return parser.parse(source)
    except lark.exceptions.UnexpectedToken as err:
        if err.token.type == "$END":
            message = "Unexpected end of input"
        else:
            message = f"Unexpected token '{err.token}'"
        raise _error.ParseError(message, *_where(err), filename) from None
    except lark.exceptions.UnexpectedCharacters as err:
        raise _error.ParseError(
            f"Unexpected character '{err.char}'", *_where(err), filename) from None
    except lark.exceptions.UnexpectedEOF:
        raise _error.ParseError("Unexpected end of input", filename=filename) from None


def _where(err):
    """Line and column of a lark error, None when lark has no position."""
    line = getattr(err, "line", None)
    if not line or line < 0:
        return None, None
    return line, err.column


_parser = None


def _lark_parser():
    """Get globally shared lark parser."""
    global _parser
    if _parser is None:
        _parser = lark.Lark.open(
            "lark/platypus.lark", rel_to=__file__, parser="lalr", propagate_positions=True
        )
    return _parser


_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", '"': '"'}
_LAMBDA_PARAM = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _unescape(text):
    """Resolve backslash escapes, unknown escapes keep their backslash."""
    return re.sub(
        r"\\(.)",
        lambda m: _ESCAPES.get(m.group(1), "\\" + m.group(1)),
        text,
        flags=re.DOTALL,
    )


@v_args(meta=True)
class _Builder(lark.Transformer):
    """Convert lark trees into AST nodes, bottom up."""

    def __init__(self, filename=None):
        super().__init__()
        self._filename = filename

    def _at(self, node, meta):
        line = getattr(meta, "line", None)
        if line is not None:
            node.position = ast.SourcePosition(self._filename, line, meta.column)
        return node

    # Statements

    def start(self, meta, kids):
        return self._at(ast.Program(kids), meta)

    def func_decl(self, meta, kids):
        name, params, return_type, body = kids
        node = ast.FuncDecl(
            str(name), params or [], body, str(return_type) if return_type else None)
        return self._at(node, meta)

    def params(self, meta, kids):
        return [str(kid) for kid in kids]

    def class_decl(self, meta, kids):
        name, parent, *members = kids
        properties = [m for m in members if isinstance(m, ast.PropertyDecl)]
        methods = [m for m in members if isinstance(m, ast.FuncDecl)]
        node = ast.ClassDecl(str(name), str(parent) if parent else None, properties, methods)
        return self._at(node, meta)

    def property_decl(self, meta, kids):
        name, value = kids
        if value is None:
            value = ast.Literal(None)
        return self._at(ast.PropertyDecl(str(name), value), meta)

    def let_decl(self, meta, kids):
        name, value = kids
        return self._at(ast.VarDecl(str(name), value), meta)

    def return_stmt(self, meta, kids):
        return self._at(ast.Return(kids[0]), meta)

    def if_stmt(self, meta, kids):
        return self._at(ast.If(*kids), meta)

    def while_stmt(self, meta, kids):
        return self._at(ast.While(*kids), meta)

    def for_stmt(self, meta, kids):
        return self._at(ast.For(*kids), meta)

    def foreach_stmt(self, meta, kids):
        name, iterable, body = kids
        return self._at(ast.ForEach(str(name), iterable, body), meta)

    def block(self, meta, kids):
        return self._at(ast.Block(kids), meta)

    def expr_stmt(self, meta, kids):
        return self._at(ast.ExprStmt(kids[0]), meta)

    # Assignment and operators

    def assign(self, meta, kids):
        name, value = kids
        return self._at(ast.Assign(str(name), value), meta)

    def prop_assign(self, meta, kids):
        obj, name, value = kids
        return self._at(ast.PropertyAssign(obj, str(name), value), meta)

    def _binary(op):
        def build(self, meta, kids):
            return self._at(ast.BinaryOp(op, kids[0], kids[1]), meta)
        return build

    or_op = _binary("||")
    and_op = _binary("&&")
    eq = _binary("==")
    ne = _binary("!=")
    lt = _binary("<")
    le = _binary("<=")
    gt = _binary(">")
    ge = _binary(">=")
    add = _binary("+")
    sub = _binary("-")
    mul = _binary("*")
    div = _binary("/")

    def not_op(self, meta, kids):
        return self._at(ast.UnaryOp("!", kids[0]), meta)

    def neg(self, meta, kids):
        return self._at(ast.UnaryOp("-", kids[0]), meta)

    # Postfix forms

    def method_call(self, meta, kids):
        obj, name, args = kids
        return self._at(ast.MethodCall(obj, str(name), args or []), meta)

    def prop_access(self, meta, kids):
        obj, name = kids
        return self._at(ast.PropertyAccess(obj, str(name)), meta)

    def call(self, meta, kids):
        name, args = kids
        return self._at(ast.FunctionCall(str(name), args or []), meta)

    # Primaries

    def number(self, meta, kids):
        return self._at(ast.Literal(float(kids[0])), meta)

    def negative_number(self, meta, kids):
        return self._at(ast.Literal(-float(kids[0])), meta)

    def string(self, meta, kids):
        return self._at(ast.Literal(_unescape(str(kids[0])[1:-1])), meta)

    def const_true(self, meta, kids):
        return self._at(ast.Literal(True), meta)

    def const_false(self, meta, kids):
        return self._at(ast.Literal(False), meta)

    def const_null(self, meta, kids):
        return self._at(ast.Literal(None), meta)

    def var(self, meta, kids):
        return self._at(ast.Identifier(str(kids[0])), meta)

    def array(self, meta, kids):
        return self._at(ast.ArrayLiteral(kids[0] or []), meta)

    def new(self, meta, kids):
        name, args = kids
        return self._at(ast.New(str(name), args or []), meta)

    def lambda_expr(self, meta, kids):
        head, body = kids
        params = _LAMBDA_PARAM.findall(str(head))
        return self._at(ast.Lambda(params, body), meta)

    def args(self, meta, kids):
        return list(kids)

    # Match

    def match_expr(self, meta, kids):
        subject, *cases = kids
        return self._at(ast.Match(subject, cases), meta)

    def match_case(self, meta, kids):
        pattern, body = kids
        if isinstance(pattern, ast.Literal):
            pattern = self._at(ast.LiteralPattern(pattern.value), meta)
        return self._at(ast.MatchCase(pattern, body), meta)

    def type_pattern(self, meta, kids):
        name = str(kids[0])
        if name == "_":
            return self._at(ast.WildcardPattern(), meta)
        return self._at(ast.TypePattern(name), meta)

    del _binary
