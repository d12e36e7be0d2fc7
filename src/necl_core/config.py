"""Options controlling how a NECL source is read."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseOptions:
    """Reader options.

    ``hygienic_projection`` evaluates ``for`` expressions in a child scope so
    the ``index`` / ``value`` bindings do not outlive the loop.  The default
    mutates the enclosing attribute mapping and leaves the last bindings
    behind.

    ``strict_logic`` gives ``and``, ``nand``, ``xor`` and ``xnor`` their
    textbook Boolean meaning.  The default keeps the equality-based
    definitions (``and == xnor``, ``nand == xor``).
    """

    hygienic_projection: bool = False
    strict_logic: bool = False
    extension: str = ".necl"
    encoding: str = "utf-8"


DEFAULT_OPTIONS = ParseOptions()
