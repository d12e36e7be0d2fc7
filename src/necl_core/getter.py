"""Dotted-path resolution over a Document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .model import Attribute, Block

if TYPE_CHECKING:
    from .document import Document


def resolve(scope: Document | Block, path: str) -> Attribute | Block | None:
    """Walk *path* through nested blocks.

    - Every segment but the last must name a block
    - The last segment names an attribute first, then a block
    - Anything missing returns None
    """
    segments = [s.strip() for s in path.split(".")]
    if not path.strip() or any(not s for s in segments):
        return None

    for name in segments[:-1]:
        scope = scope.blocks.get(name)
        if scope is None:
            return None

    last = segments[-1]
    if last in scope.attributes:
        return scope.attributes[last]
    return scope.blocks.get(last)
