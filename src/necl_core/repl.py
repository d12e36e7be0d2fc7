"""NECLRepl: incremental reader for interactive use.

Also provides the ``necl-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from .chunk_utils import count_outside_quotes, strip_comments
from .config import DEFAULT_OPTIONS, ParseOptions
from .document import Document
from .environment import Environment
from .errors import NECLError
from .evaluator import evaluate
from .loader import read_lines
from .model import Attribute, Block, Scalar
from .reader import CONTINUATION, build_value

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# NECLRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class NECLRepl:
    """Stateful reader that accumulates NECL lines across calls.

    Usage::

        repl = NECLRepl()
        repl.eval("items = [1, 2, 3]")
        repl.eval("doubled = for items : value * 2")
        repl.query("doubled")          # → [2, 4, 6]

        repl.doc.attributes   # top-level attributes
        repl.doc.blocks       # top-level blocks
        repl.reset()          # clear state

    Lines that leave a block, a multi-line string or a multi-line array
    open are buffered until the construct is complete.
    """

    def __init__(self, options: ParseOptions | None = None) -> None:
        self.options = options or DEFAULT_OPTIONS
        self.reset()

    @property
    def pending(self) -> bool:
        """True while buffered lines wait for the rest of a construct."""
        return bool(self._pending)

    def feed(self, line: str) -> bool:
        """Add one line; returns True once it has been committed."""
        self._pending.append(line)
        if _incomplete(self._pending):
            return False
        lines, self._pending = self._pending, []
        self._commit(lines)
        return True

    def eval(self, text: str) -> Document:
        """Feed every line of *text* and return the accumulated Document."""
        for line in text.splitlines():
            self.feed(line)
        return self.doc

    def load(self, path: str) -> Document:
        """Append the lines of a ``.necl`` file."""
        lines = read_lines(path, self.options)
        self._commit(lines)
        logger.debug("Loaded %d lines from %s into the session", len(lines), path)
        return self.doc

    def query(self, text: str) -> Scalar | list[Scalar] | Block | None:
        """Look up a dotted path, or evaluate *text* as a value.

        Expressions run against a copy of the top-level attributes, so
        projection bindings never leak into the session.
        """
        text = text.strip()
        found = self.doc.get(text)
        if isinstance(found, Attribute):
            return found.data
        if isinstance(found, Block):
            return found
        env = Environment(attributes=dict(self.doc.attributes), options=self.options)
        return build_value(text, env)[1]

    def reset(self) -> None:
        """Clear all accumulated state."""
        self.lines: list[str] = []
        self._pending: list[str] = []
        self.doc = Document()

    def _commit(self, lines: list[str]) -> None:
        # Re-read everything so later lines see earlier attributes
        doc = evaluate(self.lines + lines, self.options)
        self.lines.extend(lines)
        self.doc = doc


def _incomplete(lines: list[str]) -> bool:
    depth = 0
    in_array = False
    last = ""
    for line in strip_comments(lines):
        text = line.text.strip()
        if not text:
            continue
        last = text
        if in_array:
            in_array = "]" not in text
            continue
        depth += count_outside_quotes(text, "{") - count_outside_quotes(text, "}")
        _, eq, value = text.partition("=")
        value = value.strip()
        if eq and value.startswith("[") and "]" not in value:
            in_array = True
    return depth > 0 or in_array or last.endswith(CONTINUATION)


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value) -> str:
    """Format a value as NECL literal text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, list):
        return "[" + ", ".join(_fmt_inline(v) for v in value) + "]"
    if isinstance(value, Attribute):
        return _fmt_inline(value.data)
    if isinstance(value, Block):
        return f"Block({value.name})"
    return str(value)


def _fmt_inspect(value) -> str:
    """Pretty-print a block, attribute or value for inspect() / i()."""
    if isinstance(value, Block):
        if not value.attributes and not value.blocks:
            return f"Block({value.name}) {{}}"
        names = list(value.attributes) + list(value.blocks)
        width = max(len(k) for k in names)
        lines = [f"Block({value.name}) {{"]
        for k, attr in value.attributes.items():
            lines.append(f"  {k:<{width}} : {attr.type} = {_fmt_inline(attr.data)}")
        for k in value.blocks:
            lines.append(f"  {k:<{width}} : block")
        lines.append("}")
        return "\n".join(lines)

    if isinstance(value, Attribute):
        return f"{value.name} : {value.type} = {_fmt_inline(value.data)}"

    if value is None:
        return "None"
    return _fmt_inline(value)


def _query(repl: NECLRepl, expr: str, dest: IO[str]) -> None:
    result = repl.query(expr)
    if result is not None:
        print(_fmt_inline(result), file=dest)


def _inspect(repl: NECLRepl, path: str, dest: IO[str]) -> None:
    print(_fmt_inspect(repl.doc.get(path)), file=dest)


def _show_attrs(repl: NECLRepl, dest: IO[str]) -> None:
    """Print all top-level attributes."""
    attrs = repl.doc.attributes
    if not attrs:
        print("  (no attributes defined)", file=dest)
        return
    width = max(len(k) for k in attrs)
    for name, attr in attrs.items():
        print(f"  {name:<{width}} : {attr.type} = {_fmt_inline(attr.data)}", file=dest)


def _show_blocks(repl: NECLRepl, dest: IO[str]) -> None:
    """Print the block tree."""
    if not repl.doc.blocks:
        print("  (no blocks defined)", file=dest)
        return

    def walk(blocks: dict[str, Block], indent: int) -> None:
        for name, block in blocks.items():
            print(f"{' ' * indent}{name}  ({len(block.attributes)} attributes)", file=dest)
            walk(block.blocks, indent + 2)

    walk(repl.doc.blocks, 2)


def _load_file(repl: NECLRepl, filepath: str) -> None:
    try:
        repl.load(filepath)
    except NECLError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)


def _process_line(repl: NECLRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    stripped = line.strip()

    if repl.pending:
        _feed(repl, line)
        return True

    if not stripped:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if stripped in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if stripped == ":attrs":
        _show_attrs(repl, dest)
        return True

    if stripped == ":blocks":
        _show_blocks(repl, dest)
        return True

    if stripped == ":reset":
        repl.reset()
        return True

    # ── inspect() / i() ───────────────────────────────────────────────────
    for prefix in ("inspect(", "i("):
        if stripped.startswith(prefix) and stripped.endswith(")"):
            _inspect(repl, stripped[len(prefix):-1].strip(), dest)
            return True

    # ── ? expression ──────────────────────────────────────────────────────
    if stripped.startswith("? "):
        try:
            _query(repl, stripped[2:], dest)
        except NECLError as exc:
            print(f"Error: {exc}", file=sys.stderr)
        return True

    # ── Load a file ───────────────────────────────────────────────────────
    if stripped.startswith("?<< "):
        _load_file(repl, stripped[4:].strip())
        return True

    # ── Regular NECL input ────────────────────────────────────────────────
    _feed(repl, line)
    return True


def _feed(repl: NECLRepl, line: str) -> None:
    try:
        repl.feed(line)
    except NECLError as exc:
        print(f"Error: {exc}", file=sys.stderr)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    """Interactive NECL shell (``necl-repl`` / ``python -m necl_core.repl``).

    Files given on the command line are loaded before the prompt opens.
    """
    args = sys.argv[1:] if argv is None else argv
    repl = NECLRepl()
    dest: IO[str] = sys.stdout
    _file: IO[str] | None = None

    for filepath in args:
        _load_file(repl, filepath)

    print("NECL REPL  (:q to quit  |  :attrs  :blocks  :reset  |  ? <expr>  inspect(<path>))")

    while True:
        try:
            line = input("...  " if repl.pending else "NECL> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        # ── Output redirect: ?>> filepath  /  ?>> ─────────────────────────
        stripped = line.strip()
        if stripped.startswith("?>> ") and not repl.pending:
            filepath = stripped[4:].strip()
            try:
                opened = open(filepath, "w", encoding="utf-8")
            except OSError as exc:
                print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
                continue
            if _file:
                _file.close()
            _file = dest = opened
            continue

        if stripped == "?>>" and not repl.pending:
            if _file:
                _file.close()
                _file = None
            dest = sys.stdout
            continue

        # ── All other commands ────────────────────────────────────────────
        if not _process_line(repl, line, dest):
            break

    if _file:
        _file.close()


if __name__ == "__main__":
    main()
