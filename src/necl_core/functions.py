"""Built-in string, math and logic functions."""

from __future__ import annotations

import re

from .chunk_utils import is_quoted, split_top_level, unquote
from .classifier import LOGIC_FUNCTIONS, MATH_FUNCTIONS, STRING_FUNCTIONS
from .environment import Environment
from .errors import (
    InvalidArgumentType,
    NonIntegerOperand,
    UnclassifiableValue,
    UnknownAttributeReference,
    UnknownFunction,
    WrongArgumentCount,
)
from .model import Kind
from .operators import trunc_mod

_CALL_RE = re.compile(r"^\s*([A-Za-z_]\w*)\s*\((.*)\)\s*$", re.DOTALL)

_ARITY = {
    "upper": 1,
    "lower": 1,
    "length": 1,
    "concat": 2,
    "contains": 2,
    "power": 2,
    "floor": 2,
    "remainder": 2,
}


def parse_call(text: str, family: tuple[str, ...]) -> tuple[str, list[str]]:
    """Split ``name(a, b)`` into its name and raw arguments.

    The name must belong to *family* and the argument count must match
    the function's arity.
    """
    m = _CALL_RE.match(text)
    if m is None or m.group(1) not in family:
        raise UnknownFunction(f"unknown function in {text!r}")
    name = m.group(1)
    args = split_top_level(m.group(2))
    expected = _ARITY.get(name, 2)
    if len(args) != expected or any(a == "" for a in args):
        raise WrongArgumentCount(
            f"{name}() requires {expected} value{'s' if expected > 1 else ''}: {text!r}"
        )
    return name, args


# ---------------------------------------------------------------------------
# String functions
# ---------------------------------------------------------------------------

def _string_arg(raw: str, env: Environment) -> str:
    attr = env.lookup_scalar(raw)
    if attr is not None:
        if attr.type is not Kind.STRING:
            raise InvalidArgumentType(
                f"string functions can only take string attributes: {raw!r}"
            )
        return attr.value
    return unquote(raw)


def string_function(text: str, env: Environment) -> tuple[Kind, str | bool | int]:
    """Evaluate a string function; returns the result kind and value."""
    name, raw_args = parse_call(text, STRING_FUNCTIONS)
    args = [_string_arg(a, env) for a in raw_args]

    if name == "upper":
        return Kind.STRING, args[0].upper()
    if name == "lower":
        return Kind.STRING, args[0].lower()
    if name == "concat":
        return Kind.STRING, " ".join(args)
    if name == "contains":
        return Kind.BOOLEAN, args[1] in args[0]
    return Kind.NUMBER, len(args[0])


# ---------------------------------------------------------------------------
# Math functions
# ---------------------------------------------------------------------------

def _math_arg(raw: str, env: Environment) -> int:
    attr = env.lookup_scalar(raw)
    if attr is not None:
        value = attr.value
        if attr.type is not Kind.NUMBER:
            raise InvalidArgumentType(
                f"math functions can only take number attributes: {raw!r}"
            )
        if not isinstance(value, int):
            raise NonIntegerOperand(
                f"math functions can only be done to integer values: {raw!r}"
            )
        return value
    try:
        return int(unquote(raw))
    except ValueError:
        raise UnknownAttributeReference(f"no attribute named {raw!r} was found") from None


def math_function(text: str, env: Environment) -> int:
    name, raw_args = parse_call(text, MATH_FUNCTIONS)
    a, b = (_math_arg(x, env) for x in raw_args)

    if name == "power":
        if b < 0:
            # 0 to a negative power raises ZeroDivisionError
            return int(a ** b)
        return a ** b
    if name == "floor":
        return a // b
    return trunc_mod(a, b)


# ---------------------------------------------------------------------------
# Logic functions
# ---------------------------------------------------------------------------

# Equality-based definitions: and == xnor, nand == xor.
_LOGIC = {
    "and": lambda a, b: a == b,
    "or": lambda a, b: a or b,
    "nand": lambda a, b: not (a == b),
    "nor": lambda a, b: not (a or b),
    "xor": lambda a, b: a != b,
    "xnor": lambda a, b: not (a != b),
}

_STRICT_LOGIC = {
    "and": lambda a, b: a and b,
    "or": lambda a, b: a or b,
    "nand": lambda a, b: not (a and b),
    "nor": lambda a, b: not (a or b),
    "xor": lambda a, b: a != b,
    "xnor": lambda a, b: a == b,
}


def parse_bool(text: str) -> bool:
    """Parse a boolean literal (``true``, ``False``, ``T``, ``0`` ...)."""
    if text in ("1", "t", "T", "true", "TRUE", "True"):
        return True
    if text in ("0", "f", "F", "false", "FALSE", "False"):
        return False
    raise UnclassifiableValue(f"invalid boolean literal {text!r}")


def _logic_arg(raw: str, env: Environment) -> bool:
    attr = env.lookup_scalar(raw)
    if attr is not None:
        if attr.type is not Kind.BOOLEAN:
            raise InvalidArgumentType(
                f"logical functions can only have boolean attributes as parameters: {raw!r}"
            )
        return attr.value
    try:
        return parse_bool(unquote(raw) if is_quoted(raw) else raw)
    except UnclassifiableValue:
        raise UnknownAttributeReference(f"no attribute named {raw!r} was found") from None


def logic_function(text: str, env: Environment) -> bool:
    name, raw_args = parse_call(text, LOGIC_FUNCTIONS)
    a, b = (_logic_arg(x, env) for x in raw_args)
    table = _STRICT_LOGIC if env.options.strict_logic else _LOGIC
    return bool(table[name](a, b))
