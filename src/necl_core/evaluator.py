"""Evaluator: raw lines -> Document."""

from __future__ import annotations

from typing import Iterable

from .blocks import scan_scope
from .chunk_utils import strip_comments
from .config import DEFAULT_OPTIONS, ParseOptions
from .document import Document
from .environment import Environment


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def evaluate(lines: Iterable[str], options: ParseOptions | None = None) -> Document:
    """Read a sequence of raw NECL lines and return the Document.

    Any failure is raised as a :class:`~necl_core.errors.NECLError`; no
    partial document is produced.
    """
    env = Environment(options=options or DEFAULT_OPTIONS)
    cleaned = strip_comments(lines)
    blocks, _, _ = scan_scope(cleaned, 0, env, nested=False)
    return Document(
        attributes=env.attributes,
        blocks=blocks,
        raw_text=[line.text for line in cleaned],
    )


def evaluate_text(text: str, options: ParseOptions | None = None) -> Document:
    """Convenience wrapper around :func:`evaluate` for a single string."""
    return evaluate(text.splitlines(), options)
