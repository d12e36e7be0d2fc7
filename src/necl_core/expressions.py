"""Conditional (``if``) and projection (``for``) expressions.

Conditional::

    if <condition> ? <positive> : <negative>

Only the condition is evaluated.  The chosen outcome is returned as the
outcome classifier left it: attribute references, quoted strings,
booleans and numbers carry their value, while comparison and function
outcomes carry their raw, unevaluated text.

Projection::

    for <array attribute | array literal> : <outcome>

The outcome is evaluated once per element with ``index`` and ``value``
bound in the current scope.  Unless ``ParseOptions.hygienic_projection``
is set, those bindings are written into the enclosing attribute mapping
and remain there after the loop.
"""

from __future__ import annotations

from .chunk_utils import is_quoted, rfind_outside_quotes
from .classifier import (
    COMPARATORS,
    LOGIC_FUNCTIONS,
    classify,
    contains_any,
    is_boolean_like,
    is_number_literal,
)
from .environment import Environment
from .errors import (
    InvalidCondition,
    InvalidFunctionInCondition,
    InvalidProjectionSource,
    MissingOutcome,
    NestedArrayNotAllowed,
    UnclassifiableValue,
)
from .functions import logic_function, parse_bool, string_function
from .model import REPORTED_KIND, Kind, Scalar
from .operators import compare

_LOGIC_CALLS = tuple(f"{name}(" for name in LOGIC_FUNCTIONS)
_CONDITION_BANNED = ("upper(", "lower(", "concat(", "length(")


def evaluate_expression(text: str, env: Environment) -> tuple[Kind, Scalar | list[Scalar]]:
    text = text.strip()
    keyword = text.split(None, 1)[0]
    if keyword == "if":
        return evaluate_conditional(text, env)
    if keyword == "for":
        return evaluate_projection(text, env)
    raise UnclassifiableValue(f"unknown expression {text!r}")


# ---------------------------------------------------------------------------
# Outcome classification
# ---------------------------------------------------------------------------

def classify_outcome(text: str, env: Environment) -> tuple[Kind, Scalar | list[Scalar]]:
    """Classify a condition or outcome of a conditional expression.

    Values are computed only for attribute references, quoted strings,
    booleans and numbers; comparisons and function calls come back as
    their raw text.
    """
    attr = env.lookup(text)
    if attr is not None:
        return attr.type, attr.data
    if is_quoted(text):
        return Kind.STRING, text[1:-1]
    if contains_any(text, COMPARATORS):
        return Kind.COMPARISON, text
    if "contains(" in text:
        return Kind.FUNC_STRING, text
    if contains_any(text, _LOGIC_CALLS):
        return Kind.FUNC_LOGIC, text
    if is_boolean_like(text):
        return Kind.BOOLEAN, parse_bool(text)
    if is_number_literal(text):
        from .reader import parse_number
        return Kind.NUMBER, parse_number(text)
    raise UnclassifiableValue(f"unknown type for {text!r}")


# ---------------------------------------------------------------------------
# if <condition> ? <positive> : <negative>
# ---------------------------------------------------------------------------

def split_conditional(text: str) -> tuple[str, str, str]:
    colon = rfind_outside_quotes(text, ":")
    question = rfind_outside_quotes(text, "?", end=colon) if colon != -1 else -1
    if question == -1:
        raise MissingOutcome(f"missing outcome in {text!r}")

    condition = text[:question].strip()
    if condition.startswith("if"):
        condition = condition[2:].strip()
    positive = text[question + 1:colon].strip()
    negative = text[colon + 1:].strip()
    if not positive or not negative:
        raise MissingOutcome(f"missing outcome in {text!r}")
    return condition, positive, negative


def _eval_condition(condition: str, env: Environment) -> bool:
    if contains_any(condition, _CONDITION_BANNED):
        raise InvalidFunctionInCondition(
            f"only contains() is a valid function for an if condition: {condition!r}"
        )

    kind, value = classify_outcome(condition, env)
    if kind is Kind.BOOLEAN:
        return value
    if kind is Kind.COMPARISON:
        return compare(value, env)
    if kind is Kind.FUNC_STRING:
        return string_function(value, env)[1]
    if kind is Kind.FUNC_LOGIC:
        return logic_function(value, env)
    raise InvalidCondition(f"invalid type {kind} for condition {condition!r}")


def evaluate_conditional(text: str, env: Environment) -> tuple[Kind, Scalar | list[Scalar]]:
    condition, positive, negative = split_conditional(text)

    pos_kind, pos_value = classify_outcome(positive, env)
    neg_kind, neg_value = classify_outcome(negative, env)

    if _eval_condition(condition, env):
        return REPORTED_KIND[pos_kind], pos_value
    return REPORTED_KIND[neg_kind], neg_value


# ---------------------------------------------------------------------------
# for <array> : <outcome>
# ---------------------------------------------------------------------------

def _projection_source(source: str, env: Environment) -> list[Scalar]:
    attr = env.lookup(source)
    if attr is not None and attr.type is Kind.ARRAY:
        return list(attr.array)
    if source.startswith("[") and source.endswith("]"):
        from .reader import build_array
        return build_array(source, env)
    raise InvalidProjectionSource(
        f"for expression needs an array attribute or an array literal, got {source!r}"
    )


def _project(outcome: str, env: Environment) -> Scalar:
    from .reader import build_classified

    attr = env.lookup(outcome)
    if attr is not None:
        if attr.type is Kind.ARRAY:
            raise NestedArrayNotAllowed(f"for outcome {outcome!r} is an array")
        return attr.value
    kind = classify(outcome)
    if kind is Kind.ARRAY:
        raise NestedArrayNotAllowed(f"for outcome {outcome!r} is an array")
    return build_classified(outcome, kind, env)[1]


def evaluate_projection(text: str, env: Environment) -> tuple[Kind, list[Scalar]]:
    colon = rfind_outside_quotes(text, ":")
    if colon == -1:
        raise MissingOutcome(f"missing outcome in {text!r}")
    source = text[:colon].strip()[3:].strip()
    outcome = text[colon + 1:].strip()
    if not source or not outcome:
        raise MissingOutcome(f"missing outcome in {text!r}")

    items = _projection_source(source, env)
    scope = env.child() if env.options.hygienic_projection else env

    results: list[Scalar] = []
    for index, item in enumerate(items):
        scope.bind("index", index)
        scope.bind("value", item)
        results.append(_project(outcome, scope))
    return Kind.ARRAY, results
