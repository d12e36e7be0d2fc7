"""Binary comparison and arithmetic over integer operands."""

from __future__ import annotations

import math

from .classifier import COMPARATORS, OPERATORS
from .environment import Environment
from .errors import (
    NonIntegerOperand,
    UnknownAttributeReference,
    UnknownComparator,
    UnknownOperator,
)


def select_operator(text: str, candidates: tuple[str, ...]) -> str | None:
    """Pick the operator of *text*.

    Every candidate is tested in order and the *last* one that occurs in
    the text wins, so ``a >= b`` selects ``>=`` rather than ``>``.
    """
    chosen = None
    for op in candidates:
        if op in text:
            chosen = op
    return chosen


def split_operands(text: str, op: str) -> tuple[str, str]:
    i = text.index(op)
    return text[:i].strip(), text[i + len(op):].strip()


def _parse_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def resolve_operand(text: str, env: Environment, expr: str):
    """An integer literal, else the value of a scalar attribute."""
    literal = _parse_int(text)
    if literal is not None:
        return literal
    attr = env.lookup_scalar(text)
    if attr is None:
        raise UnknownAttributeReference(f"no attribute named {text!r} was found in {expr!r}")
    return attr.value


def _require_int(value, expr: str, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise NonIntegerOperand(
            f"{what} operations can only be done to integer values: {expr!r}"
        )
    return value


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

_COMPARE = {
    "==": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
    "<": lambda a, b: a < b,
    "<=": lambda a, b: a <= b,
    ">": lambda a, b: a > b,
    ">=": lambda a, b: a >= b,
}


def compare(text: str, env: Environment) -> bool:
    """Evaluate ``<a> <comparator> <b>``."""
    op = select_operator(text, COMPARATORS)
    if op is None:
        raise UnknownComparator(f"unknown comparator in {text!r}")
    left, right = split_operands(text, op)

    a = resolve_operand(left, env, text)
    b = resolve_operand(right, env, text)
    for value in (a, b):
        printed = str(value)
        if "." in printed or "," in printed:
            raise NonIntegerOperand(
                f"comparison operations can only be done to integer values: {text!r}"
            )
    return _COMPARE[op](_require_int(a, text, "comparison"), _require_int(b, text, "comparison"))


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

def trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero.

    ``b == 0`` raises ZeroDivisionError.
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * trunc_div(a, b)


_ARITHMETIC = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": trunc_div,
}


def _coerce_int(value, expr: str) -> int:
    if isinstance(value, float) and not math.isfinite(value):
        raise NonIntegerOperand(f"infinite operand in {expr!r}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NonIntegerOperand(
            f"arithmetic operations can only be done to integer values: {expr!r}"
        )
    return int(value)


def arithmetic(text: str, env: Environment) -> int:
    """Evaluate ``<a> <operator> <b>`` with integer semantics."""
    op = select_operator(text, OPERATORS)
    if op is None:
        raise UnknownOperator(f"unknown operator in {text!r}")
    left, right = split_operands(text, op)

    a = _coerce_int(resolve_operand(left, env, text), text)
    b = _coerce_int(resolve_operand(right, env, text), text)
    return _ARITHMETIC[op](a, b)
