"""Tests for the classification cascade."""

import pytest

from necl_core.classifier import CASCADE, classify, is_number_literal
from necl_core.errors import UnclassifiableValue
from necl_core.model import Kind


@pytest.mark.parametrize(
    "text, kind",
    [
        ('"hello"', Kind.STRING),
        ("'hello'", Kind.STRING),
        ("[1, 2]", Kind.ARRAY),
        ("a == b", Kind.COMPARISON),
        ("a >= 3", Kind.COMPARISON),
        ("a + b", Kind.ARITHMETIC),
        ("10 / 2", Kind.ARITHMETIC),
        ('upper("x")', Kind.FUNC_STRING),
        ("length(name)", Kind.FUNC_STRING),
        ("power(2, 3)", Kind.FUNC_MATH),
        ("remainder(7, 2)", Kind.FUNC_MATH),
        ("xor(a, b)", Kind.FUNC_LOGIC),
        ("true", Kind.BOOLEAN),
        ("FALSE", Kind.BOOLEAN),
        ("42", Kind.NUMBER),
        ("3.1415", Kind.NUMBER),
    ],
)
def test_classify(text, kind):
    assert classify(text) is kind


def test_cascade_order():
    assert [kind for kind, _ in CASCADE] == [
        Kind.STRING,
        Kind.ARRAY,
        Kind.COMPARISON,
        Kind.ARITHMETIC,
        Kind.FUNC_STRING,
        Kind.FUNC_MATH,
        Kind.FUNC_LOGIC,
        Kind.BOOLEAN,
        Kind.NUMBER,
    ]


class TestPrecedence:
    def test_quoted_operator_is_string(self):
        assert classify('"a+b"') is Kind.STRING

    def test_comparison_before_arithmetic(self):
        assert classify("a + 1 > b") is Kind.COMPARISON

    def test_arithmetic_before_functions(self):
        assert classify("concat(a-b, c)") is Kind.ARITHMETIC

    def test_logic_function_before_boolean(self):
        assert classify("and(true, false)") is Kind.FUNC_LOGIC

    def test_boolean_is_substring_match(self):
        assert classify("untrue") is Kind.BOOLEAN
        assert classify("falsehood") is Kind.BOOLEAN

    def test_negative_literal_is_arithmetic(self):
        assert classify("-5") is Kind.ARITHMETIC


def test_unclassifiable():
    with pytest.raises(UnclassifiableValue, match="no valid type found"):
        classify("hello")


def test_is_number_literal():
    assert is_number_literal("1e5")
    assert is_number_literal(".5")
    assert not is_number_literal("3,14")
    assert not is_number_literal("12abc")
