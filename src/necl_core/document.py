"""The Document: final output of reading a NECL source."""

from __future__ import annotations

from dataclasses import dataclass, field

from .model import Attribute, Block


@dataclass
class Document:
    """Top-level attributes and blocks of a NECL source."""

    attributes: dict[str, Attribute] = field(default_factory=dict)
    blocks: dict[str, Block] = field(default_factory=dict)
    raw_text: list[str] = field(default_factory=list)

    # -- Convenience accessors ------------------------------------------

    def get(self, path: str) -> Attribute | Block | None:
        """Resolve a dotted path such as ``"spec.template.replicas"``."""
        from .getter import resolve
        return resolve(self, path)

    def value(self, path: str, default=None):
        """The value of the attribute at *path*, or *default*."""
        found = self.get(path)
        if isinstance(found, Attribute):
            return found.data
        return default

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {k: a.data for k, a in self.attributes.items()}
        for k, b in self.blocks.items():
            out[k] = b.to_dict()
        return out
