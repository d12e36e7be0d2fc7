"""Attribute scopes shared through the evaluator call graph."""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import DEFAULT_OPTIONS, ParseOptions
from .model import Attribute, Kind


@dataclass
class Environment:
    """The attribute mapping of one scope (the document or a block).

    Lookups fall back to ``parent`` only for child scopes created by
    :meth:`child`; blocks never see their enclosing block's attributes.
    """

    attributes: dict[str, Attribute] = field(default_factory=dict)
    options: ParseOptions = DEFAULT_OPTIONS
    parent: Environment | None = None

    # -- Lookup ---------------------------------------------------------

    def lookup(self, name: str) -> Attribute | None:
        attr = self.attributes.get(name)
        if attr is None and self.parent is not None:
            return self.parent.lookup(name)
        return attr

    def lookup_scalar(self, name: str) -> Attribute | None:
        """Like :meth:`lookup` but ignores array attributes."""
        attr = self.lookup(name)
        if attr is None or attr.type is Kind.ARRAY:
            return None
        return attr

    def __contains__(self, name: str) -> bool:
        return self.lookup(name) is not None

    # -- Binding --------------------------------------------------------

    def set(self, attr: Attribute) -> None:
        self.attributes[attr.name] = attr

    def bind(self, name: str, value) -> None:
        """Bind a Python value under *name*, inferring its kind."""
        self.set(Attribute.of(name, value))

    # -- Scopes ---------------------------------------------------------

    def child(self) -> Environment:
        return Environment(options=self.options, parent=self)
