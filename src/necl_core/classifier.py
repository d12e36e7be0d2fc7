"""Scalar type classification.

The kind of a raw value is decided by an ordered cascade of substring
tests; the first rule that matches wins.  The order is the only
disambiguation there is: ``"a+b"`` is a string because the quote rule
runs before the arithmetic rule, and anything containing ``true`` or
``false`` (case-insensitively) is a boolean even when it is not literally
one of those words.
"""

from __future__ import annotations

import re
from typing import Callable

from .chunk_utils import is_quoted
from .errors import UnclassifiableValue
from .model import Kind


COMPARATORS = ("==", "!=", "<", "<=", ">", ">=")
OPERATORS = ("+", "-", "*", "/")
STRING_FUNCTIONS = ("upper", "lower", "concat", "contains", "length")
MATH_FUNCTIONS = ("power", "floor", "remainder")
LOGIC_FUNCTIONS = ("and", "or", "nand", "nor", "xor", "xnor")

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def contains_any(text: str, needles) -> bool:
    return any(n in text for n in needles)


def _calls(names: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(f"{name}(" for name in names)


def is_number_literal(text: str) -> bool:
    return bool(_NUMBER_RE.match(text))


def is_boolean_like(text: str) -> bool:
    lowered = text.lower()
    return "true" in lowered or "false" in lowered


# ---------------------------------------------------------------------------
# Cascade
# ---------------------------------------------------------------------------

_STRING_CALLS = _calls(STRING_FUNCTIONS)
_MATH_CALLS = _calls(MATH_FUNCTIONS)
_LOGIC_CALLS = _calls(LOGIC_FUNCTIONS)

CASCADE: tuple[tuple[Kind, Callable[[str], bool]], ...] = (
    (Kind.STRING, is_quoted),
    (Kind.ARRAY, lambda s: s.startswith("[") and s.endswith("]")),
    (Kind.COMPARISON, lambda s: contains_any(s, COMPARATORS)),
    (Kind.ARITHMETIC, lambda s: contains_any(s, OPERATORS)),
    (Kind.FUNC_STRING, lambda s: contains_any(s, _STRING_CALLS)),
    (Kind.FUNC_MATH, lambda s: contains_any(s, _MATH_CALLS)),
    (Kind.FUNC_LOGIC, lambda s: contains_any(s, _LOGIC_CALLS)),
    (Kind.BOOLEAN, is_boolean_like),
    (Kind.NUMBER, is_number_literal),
)


def classify(text: str) -> Kind:
    """Return the kind of the (trimmed) value *text*.

    Raises :class:`UnclassifiableValue` when no rule matches.
    """
    text = text.strip()
    for kind, matches in CASCADE:
        if matches(text):
            return kind
    raise UnclassifiableValue(f"no valid type found for {text!r}")
