"""Tests for parsing source into AST nodes."""

import pytest

import platypus
from platypus import ast


def parse_expr(source):
    """Parse a single expression statement and return the expression."""
    program = platypus.parse(source)
    assert len(program.statements) == 1
    stmt = program.statements[0]
    assert isinstance(stmt, ast.ExprStmt)
    return stmt.expr


class TestLiterals:
    def test_numbers_are_floats(self):
        assert parse_expr("42") == ast.Literal(42.0)
        assert parse_expr("3.25") == ast.Literal(3.25)

    def test_string_escapes(self):
        assert parse_expr(r'"a\nb\t\"q\"\\"') == ast.Literal('a\nb\t"q"\\')

    def test_constants(self):
        assert parse_expr("true") == ast.Literal(True)
        assert parse_expr("false") == ast.Literal(False)
        assert parse_expr("null") == ast.Literal(None)

    def test_array(self):
        assert parse_expr("[]") == ast.ArrayLiteral([])
        assert parse_expr("[1, x]") == ast.ArrayLiteral(
            [ast.Literal(1.0), ast.Identifier("x")])


class TestExpressions:
    def test_precedence(self):
        expected = ast.BinaryOp(
            "||",
            ast.Identifier("a"),
            ast.BinaryOp(
                "&&",
                ast.Identifier("b"),
                ast.BinaryOp(
                    "==",
                    ast.BinaryOp("+", ast.Literal(1.0),
                                 ast.BinaryOp("*", ast.Literal(2.0), ast.Literal(3.0))),
                    ast.Literal(7.0),
                ),
            ),
        )
        assert parse_expr("a || b && 1 + 2 * 3 == 7") == expected

    def test_unary(self):
        assert parse_expr("!-x") == ast.UnaryOp("!", ast.UnaryOp("-", ast.Identifier("x")))

    def test_assignment_is_right_associative(self):
        assert parse_expr("a = b = 1") == ast.Assign(
            "a", ast.Assign("b", ast.Literal(1.0)))

    def test_property_chain(self):
        node = parse_expr("a.b.c(1).d = 2")
        assert node == ast.PropertyAssign(
            ast.MethodCall(
                ast.PropertyAccess(ast.Identifier("a"), "b"), "c", [ast.Literal(1.0)]),
            "d",
            ast.Literal(2.0),
        )

    def test_call_and_new(self):
        assert parse_expr("f(1, 2)") == ast.FunctionCall(
            "f", [ast.Literal(1.0), ast.Literal(2.0)])
        assert parse_expr("new Point()") == ast.New("Point", [])

    def test_lambda(self):
        assert parse_expr("(a, b) => a + b") == ast.Lambda(
            ["a", "b"], ast.BinaryOp("+", ast.Identifier("a"), ast.Identifier("b")))
        assert parse_expr("() => 1") == ast.Lambda([], ast.Literal(1.0))

    def test_grouping_is_not_lambda(self):
        assert parse_expr("(a) + 1") == ast.BinaryOp(
            "+", ast.Identifier("a"), ast.Literal(1.0))

    def test_match(self):
        node = parse_expr('match (x) { case 1 => "one", case -2 => "neg" case String => "s" case _ => "other" }')
        assert node == ast.Match(ast.Identifier("x"), [
            ast.MatchCase(ast.LiteralPattern(1.0), ast.Literal("one")),
            ast.MatchCase(ast.LiteralPattern(-2.0), ast.Literal("neg")),
            ast.MatchCase(ast.TypePattern("String"), ast.Literal("s")),
            ast.MatchCase(ast.WildcardPattern(), ast.Literal("other")),
        ])


class TestStatements:
    def test_function_declaration(self):
        program = platypus.parse("func add(a, b): Number { return a + b }")
        func = program.statements[0]
        assert isinstance(func, ast.FuncDecl)
        assert func.name == "add"
        assert func.params == ["a", "b"]
        assert func.return_type == "Number"
        assert func.body == ast.Block([ast.Return(
            ast.BinaryOp("+", ast.Identifier("a"), ast.Identifier("b")))])

    def test_bare_return(self):
        func = platypus.parse("func f() { return }").statements[0]
        assert func.body.statements == [ast.Return(None)]

    def test_class_declaration(self):
        program = platypus.parse("""
        class Dog extends Animal {
            name = "rex"
            _age
            func bark() { print(this.name) }
        }
        """)
        cls = program.statements[0]
        assert isinstance(cls, ast.ClassDecl)
        assert cls.name == "Dog"
        assert cls.parent == "Animal"
        assert cls.properties == [
            ast.PropertyDecl("name", ast.Literal("rex")),
            ast.PropertyDecl("_age", ast.Literal(None)),
        ]
        assert [m.name for m in cls.methods] == ["bark"]

    def test_let_and_semicolons(self):
        program = platypus.parse("let x = 1; x = 2;")
        assert program.statements == [
            ast.VarDecl("x", ast.Literal(1.0)),
            ast.ExprStmt(ast.Assign("x", ast.Literal(2.0))),
        ]

    def test_if_else(self):
        stmt = platypus.parse("if (a) b() else { c() }").statements[0]
        assert stmt == ast.If(
            ast.Identifier("a"),
            ast.ExprStmt(ast.FunctionCall("b", [])),
            ast.Block([ast.ExprStmt(ast.FunctionCall("c", []))]),
        )

    def test_dangling_else_binds_inner(self):
        stmt = platypus.parse("if (a) if (b) x() else y()").statements[0]
        assert stmt.else_branch is None
        assert stmt.then_branch.else_branch is not None

    def test_for(self):
        stmt = platypus.parse("for (let i = 0; i < 3; i = i + 1) print(i)").statements[0]
        assert isinstance(stmt, ast.For)
        assert stmt.init == ast.VarDecl("i", ast.Literal(0.0))
        assert isinstance(stmt.condition, ast.BinaryOp)
        assert isinstance(stmt.step, ast.Assign)

    def test_for_empty_clauses(self):
        stmt = platypus.parse("for (;;) {}").statements[0]
        assert stmt == ast.For(None, None, None, ast.Block([]))

    def test_foreach(self):
        stmt = platypus.parse("for (item in items) {}").statements[0]
        assert stmt == ast.ForEach("item", ast.Identifier("items"), ast.Block([]))

    def test_comments(self):
        program = platypus.parse("// leading\nx = 1 // trailing\n")
        assert len(program.statements) == 1


class TestPositions:
    def test_positions(self):
        program = platypus.parse("x = 1\n  print(x)", filename="demo.plat")
        second = program.statements[1]
        assert second.position.line == 2
        assert second.position.column == 3
        assert second.position.filename == "demo.plat"

    def test_positions_ignored_by_equality(self):
        assert platypus.parse("x") == platypus.parse("\n\n  x")


class TestErrors:
    @pytest.mark.parametrize("source", [
        "x = ",
        "func (",
        "1 +",
        "class { }",
        '"unterminated',
        "x = 1 @ 2",
    ])
    def test_invalid(self, source):
        with pytest.raises(platypus.ParseError):
            platypus.parse(source)

    def test_error_location(self):
        with pytest.raises(platypus.ParseError) as info:
            platypus.parse("x = 1\ny = )", filename="bad.plat")
        err = info.value
        assert err.line == 2
        assert err.filename == "bad.plat"
        assert "bad.plat" in str(err)

    def test_end_of_input(self):
        with pytest.raises(platypus.ParseError, match="Unexpected end of input"):
            platypus.parse("func f() {")


def test_unparse_roundtrip_shape():
    source = "func f(a) { if (a > 1) { return a } return null }"
    program = platypus.parse(source)
    assert platypus.parse(program.unparse()) == program


def test_print_tree(capsys):
    platypus.parse("x = [1, 2]").print_tree()
    out = capsys.readouterr().out
    assert "Program" in out
    assert "Assign(name='x')" in out
    assert "Literal(value=2.0)" in out


def test_unparse_escapes_string_patterns():
    source = r'x = match (s) { case "a\"b" => 1 case "tab\there" => 2 case -3 => 3 }'
    program = platypus.parse(source)
    assert platypus.parse(program.unparse()) == program
