"""Data model for NECL attributes and blocks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


Scalar = Union[str, int, float, bool]


# ---------------------------------------------------------------------------
# Kind
# ---------------------------------------------------------------------------

class Kind(Enum):
    """Value kinds produced by the classifier.

    Only ``STRING``, ``NUMBER``, ``BOOLEAN`` and ``ARRAY`` are ever stored on
    an :class:`Attribute`; the others describe unevaluated text.
    """

    STRING = "string"
    ARRAY = "array"
    COMPARISON = "comparison"
    ARITHMETIC = "arithmetic"
    FUNC_STRING = "func-string"
    FUNC_MATH = "func-math"
    FUNC_LOGIC = "func-logic"
    BOOLEAN = "boolean"
    NUMBER = "number"

    def __str__(self) -> str:
        return self.value


# Attribute type reported for each kind once it has been evaluated
REPORTED_KIND: dict[Kind, Kind] = {
    Kind.STRING: Kind.STRING,
    Kind.ARRAY: Kind.ARRAY,
    Kind.COMPARISON: Kind.BOOLEAN,
    Kind.ARITHMETIC: Kind.NUMBER,
    Kind.FUNC_STRING: Kind.BOOLEAN,
    Kind.FUNC_MATH: Kind.NUMBER,
    Kind.FUNC_LOGIC: Kind.BOOLEAN,
    Kind.BOOLEAN: Kind.BOOLEAN,
    Kind.NUMBER: Kind.NUMBER,
}


def kind_of(value: Scalar) -> Kind:
    """Return the attribute kind of an already-built Python value."""
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    if isinstance(value, list):
        return Kind.ARRAY
    return Kind.STRING


# ---------------------------------------------------------------------------
# Attribute / Block
# ---------------------------------------------------------------------------

@dataclass
class Attribute:
    name: str
    type: Kind
    value: Scalar | None = None
    array: list[Scalar] = field(default_factory=list)

    @property
    def data(self) -> Scalar | list[Scalar] | None:
        """The meaningful half of the attribute for its type."""
        if self.type is Kind.ARRAY:
            return self.array
        return self.value

    @classmethod
    def of(cls, name: str, value: Scalar | list[Scalar]) -> Attribute:
        if isinstance(value, list):
            return cls(name=name, type=Kind.ARRAY, array=list(value))
        return cls(name=name, type=kind_of(value), value=value)


@dataclass
class Block:
    name: str
    attributes: dict[str, Attribute] = field(default_factory=dict)
    blocks: dict[str, Block] = field(default_factory=dict)
    raw_text: list[str] = field(default_factory=list)
    start: int = 0  # 1-based line of the opening brace
    end: int = 0  # 1-based line of the closing brace

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {k: a.data for k, a in self.attributes.items()}
        for k, b in self.blocks.items():
            out[k] = b.to_dict()
        return out
