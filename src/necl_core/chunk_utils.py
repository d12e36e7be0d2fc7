"""Line-level utilities: comment stripping and quote-aware splitting."""

from __future__ import annotations

from typing import Iterable, NamedTuple

_QUOTES = ("'", '"')
_OPENERS = "[("
_CLOSERS = "])"


class Line(NamedTuple):
    number: int  # 1-based position in the raw input
    text: str


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

def strip_comments(lines: Iterable[str]) -> list[Line]:
    """Drop ``//`` comment lines and truncate inline ``//`` comments.

    Line numbers of the surviving lines are kept so errors can point back
    at the raw input.
    """
    cleaned: list[Line] = []
    for number, raw in enumerate(lines, 1):
        raw = raw.rstrip("\r\n")
        if raw.strip().startswith("//"):
            continue
        cut = find_outside_quotes(raw, "//")
        if cut != -1:
            raw = raw[:cut]
        cleaned.append(Line(number, raw.rstrip()))
    return cleaned


# ---------------------------------------------------------------------------
# Quoting
# ---------------------------------------------------------------------------

def is_quoted(text: str) -> bool:
    """True if *text* is wrapped in a matching pair of quotes."""
    return len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]


def unquote(text: str) -> str:
    """Remove one layer of matching quotes, if present."""
    if is_quoted(text):
        return text[1:-1]
    return text


def _outside_quotes(text: str):
    """Yield ``(index, char)`` for every character not inside quotes."""
    quote: str | None = None
    for i, ch in enumerate(text):
        if quote is not None:
            if ch == quote:
                quote = None
            continue
        if ch in _QUOTES:
            quote = ch
            continue
        yield i, ch


def find_outside_quotes(text: str, needle: str) -> int:
    """Index of the first *needle* that starts outside quotes, or -1."""
    for i, _ in _outside_quotes(text):
        if text.startswith(needle, i):
            return i
    return -1


def rfind_outside_quotes(text: str, char: str, end: int | None = None) -> int:
    """Index of the last single *char* outside quotes before *end*, or -1."""
    found = -1
    for i, ch in _outside_quotes(text):
        if end is not None and i >= end:
            break
        if ch == char:
            found = i
    return found


def contains_outside_quotes(text: str, char: str) -> bool:
    return find_outside_quotes(text, char) != -1


def count_outside_quotes(text: str, char: str) -> int:
    return sum(1 for _, ch in _outside_quotes(text) if ch == char)


# ---------------------------------------------------------------------------
# Comma splitting
# ---------------------------------------------------------------------------

def split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split *text* on *sep* outside quotes, brackets and parentheses.

    Each piece is stripped.  An empty input yields an empty list.
    """
    if not text.strip():
        return []
    parts: list[str] = []
    depth = 0
    start = 0
    for i, ch in _outside_quotes(text):
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth = max(depth - 1, 0)
        elif ch == sep and depth == 0:
            parts.append(text[start:i].strip())
            start = i + 1
    parts.append(text[start:].strip())
    return parts
