"""Tests for operators and their type rules."""

import pytest

import platypus
import plattest


@plattest.params(
    "source expected",
    add=("1 + 2", 3.0),
    sub=("5 - 7", -2.0),
    mul=("3 * 4", 12.0),
    div=("7 / 2", 3.5),
    precedence=("1 + 2 * 3", 7.0),
    grouping=("(1 + 2) * 3", 9.0),
    left_assoc=("10 - 4 - 3", 3.0),
    concat=('"foo" + "bar"', "foobar"),
    neg=("-(2 + 3)", -5.0),
    lt=("1 < 2", True),
    le=("2 <= 2", True),
    gt=("1 > 2", False),
    ge=("3 >= 4", False),
    string_lt=('"apple" < "banana"', True),
    eq=("1 == 1", True),
    ne=("1 != 1", False),
    eq_mixed=('1 == "1"', False),
    eq_null=("null == null", True),
    not_true=("!true", False),
    not_zero=("!0", True),
    not_empty=('!""', True),
    and_op=("true && false", False),
    or_op=("false || 1", True),
)
def test_expression(key, source, expected):
    assert plattest.evaluate(source) == expected


def test_logic_results_are_booleans():
    assert plattest.evaluate('1 && "x"') is True
    assert plattest.evaluate("0 || null") is False


def test_short_circuit():
    output = plattest.run("""
    func loud() { print("called") return true }
    false && loud()
    true || loud()
    print("done")
    """)
    assert output == "done\n"


def test_array_equality_is_identity():
    output = plattest.run("""
    a = [1]
    b = a
    print(a == b)
    print(a == [1])
    """)
    assert output == "true\nfalse\n"


@plattest.params(
    "source message",
    add_mixed=('1 + "a"', "Cannot add Number and String"),
    sub_strings=('"a" - "b"', "Cannot subtract String and String"),
    mul_bool=("true * 2", "Cannot multiply Boolean and Number"),
    div_null=("null / 1", "Cannot divide Null and Number"),
    compare_mixed=('1 < "2"', "Cannot compare Number and String"),
    negate=('-"a"', "Cannot negate String"),
)
def test_operand_errors(key, source, message):
    with pytest.raises(platypus.OperandTypeError, match=message):
        plattest.evaluate(source)


def test_division_by_zero():
    error = plattest.run_error("print(1 / 0)", platypus.DivisionByZeroError)
    assert error.message == "Division by zero"
    assert error.kind == "DivisionByZero"
