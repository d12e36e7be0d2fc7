"""Reader layer: turns raw value text into attribute values."""

from __future__ import annotations

import re
import struct

from .chunk_utils import Line, split_top_level, unquote
from .classifier import classify
from .environment import Environment
from .errors import (
    EmptyAttributeName,
    NECLError,
    NestedArrayNotAllowed,
    UnclassifiableValue,
)
from .functions import logic_function, math_function, parse_bool, string_function
from .model import Attribute, Kind, Scalar
from .operators import arithmetic, compare

_EXPRESSION_RE = re.compile(r"^(if|for)\s")

CONTINUATION = "\\"


# ---------------------------------------------------------------------------
# Literal handling
# ---------------------------------------------------------------------------

def to_single(value: float) -> float:
    """Round *value* to the nearest single-precision float."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return float("inf") if value > 0 else float("-inf")


def parse_number(text: str) -> int | float:
    """Integer unless the literal has a decimal separator or exponent."""
    if "." in text or "," in text or "e" in text.lower():
        return to_single(float(text.replace(",", ".")))
    return int(text)


def is_expression(text: str) -> bool:
    return bool(_EXPRESSION_RE.match(text))


# ---------------------------------------------------------------------------
# Value building
# ---------------------------------------------------------------------------

def build_classified(text: str, kind: Kind, env: Environment) -> tuple[Kind, Scalar]:
    """Build the scalar value of *text* already classified as *kind*.

    Returns the reported kind together with the value.
    """
    if kind is Kind.STRING:
        return Kind.STRING, text[1:-1]
    if kind is Kind.NUMBER:
        return Kind.NUMBER, parse_number(text)
    if kind is Kind.BOOLEAN:
        return Kind.BOOLEAN, parse_bool(text)
    if kind is Kind.COMPARISON:
        return Kind.BOOLEAN, compare(text, env)
    if kind is Kind.ARITHMETIC:
        return Kind.NUMBER, arithmetic(text, env)
    if kind is Kind.FUNC_STRING:
        return string_function(text, env)
    if kind is Kind.FUNC_MATH:
        return Kind.NUMBER, math_function(text, env)
    if kind is Kind.FUNC_LOGIC:
        return Kind.BOOLEAN, logic_function(text, env)
    raise NestedArrayNotAllowed(f"an attribute with array type can't have nested arrays: {text!r}")


def build_array(text: str, env: Environment) -> list[Scalar]:
    """Parse an array literal ``[a, b, ...]`` whose elements are scalars."""
    elements = split_top_level(text.strip()[1:-1])
    if len(elements) > 1 and elements[-1] == "":
        elements.pop()  # trailing comma
    values: list[Scalar] = []
    for element in elements:
        _, value = build_classified(element, classify(element), env)
        values.append(value)
    return values


def build_value(text: str, env: Environment) -> tuple[Kind, Scalar | list[Scalar]]:
    """Evaluate any value form: literal, array, operator, function or expression."""
    text = text.strip()
    if is_expression(text):
        from .expressions import evaluate_expression
        return evaluate_expression(text, env)
    kind = classify(text)
    if kind is Kind.ARRAY:
        return Kind.ARRAY, build_array(text, env)
    return build_classified(text, kind, env)


# ---------------------------------------------------------------------------
# Multi-line values
# ---------------------------------------------------------------------------

def read_multiline_string(lines: list[Line], start: int, first: str) -> tuple[str, int]:
    """Join ``\\``-continued lines into one string.

    Every line loses its marker and one layer of quotes; pieces are joined
    with single spaces.  Returns the string and the index after the last
    line consumed.
    """
    pieces: list[str] = []
    i = start
    text = first
    while True:
        text = text.strip()
        more = text.endswith(CONTINUATION)
        pieces.append(unquote(text.removesuffix(CONTINUATION).strip()))
        i += 1
        if not more or i >= len(lines):
            return " ".join(pieces), i
        text = lines[i].text


def read_multiline_array(lines: list[Line], start: int, first: str) -> tuple[str, int]:
    """Accumulate lines of an array literal until one contains ``]``."""
    parts = [first.strip()]
    i = start + 1
    while i < len(lines):
        text = lines[i].text.strip()
        parts.append(text)
        i += 1
        if "]" in text:
            return " ".join(parts), i
    raise UnclassifiableValue(f"unterminated array starting with {first.strip()!r}")


# ---------------------------------------------------------------------------
# Attribute lines
# ---------------------------------------------------------------------------

def read_attribute(lines: list[Line], i: int, env: Environment) -> tuple[Attribute | None, int]:
    """Read the attribute defined on ``lines[i]``, if any.

    Returns the attribute (``None`` when the line defines none) and the
    index of the next unread line; multi-line values consume their
    continuation lines.
    """
    line = lines[i]
    eq = line.text.find("=")
    if eq == -1:
        return None, i + 1

    try:
        name = line.text[:eq].strip()
        if not name:
            raise EmptyAttributeName("attribute name cannot be empty")
        raw = line.text[eq + 1:].strip()

        if raw.endswith(CONTINUATION):
            value, nxt = read_multiline_string(lines, i, raw)
            return Attribute(name=name, type=Kind.STRING, value=value), nxt

        nxt = i + 1
        if raw.startswith("[") and "]" not in raw:
            raw, nxt = read_multiline_array(lines, i, raw)

        kind, value = build_value(raw, env)
    except NECLError as exc:
        raise exc.locate(line.number, line.text.strip())

    if kind is Kind.ARRAY:
        return Attribute(name=name, type=kind, array=value), nxt
    return Attribute(name=name, type=kind, value=value), nxt
