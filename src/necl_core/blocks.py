"""Block discovery.

Blocks are found by a recursive-descent scan over the cleaned lines.  An
opening line (``name {``) starts a block; the block's own lines are
scanned until its closing ``}``, recursing into every nested block so the
outer scan resumes after the nested block's last line.  Attributes are
therefore only ever recorded in the innermost block that contains them.
"""

from __future__ import annotations

from .chunk_utils import Line, contains_outside_quotes, find_outside_quotes
from .environment import Environment
from .errors import UnbalancedBraces
from .model import Block
from .reader import read_attribute


def opens_block(text: str) -> bool:
    return contains_outside_quotes(text, "{")


def closes_block(text: str) -> bool:
    return contains_outside_quotes(text, "}")


def block_name(text: str) -> str:
    """The non-brace text of an opening line."""
    return text[:find_outside_quotes(text, "{")].strip()


def scan_scope(
    lines: list[Line],
    start: int,
    env: Environment,
    nested: bool,
) -> tuple[dict[str, Block], int, bool]:
    """Scan one scope starting at *start*.

    Attributes land in *env*; nested blocks are returned.  For a nested
    scope the scan stops after the closing brace.  Returns the blocks, the
    index of the next unread line and whether a closing brace was seen.
    """
    blocks: dict[str, Block] = {}
    i = start
    while i < len(lines):
        line = lines[i]
        if opens_block(line.text):
            child, i = read_block(lines, i, env)
            blocks[child.name] = child
            continue
        if closes_block(line.text):
            if not nested:
                raise UnbalancedBraces("'}' without an opening block").locate(
                    line.number, line.text.strip()
                )
            return blocks, i + 1, True
        attr, i = read_attribute(lines, i, env)
        if attr is not None:
            env.set(attr)
    return blocks, i, False


def read_block(lines: list[Line], start: int, parent: Environment) -> tuple[Block, int]:
    """Read the block opened on ``lines[start]``.

    Returns the block and the index of the line after its closing brace.
    """
    opening = lines[start]
    env = Environment(options=parent.options)
    block = Block(name=block_name(opening.text), attributes=env.attributes, start=opening.number)

    rest = opening.text[find_outside_quotes(opening.text, "{") + 1:]
    one_line = closes_block(rest)
    # name { attr = value }  or  name { attr = value
    inner = (rest[:find_outside_quotes(rest, "}")] if one_line else rest).strip()
    if inner:
        attr, _ = read_attribute([Line(opening.number, inner)], 0, env)
        if attr is not None:
            env.set(attr)
    if one_line:
        block.raw_text = [opening.text]
        block.end = opening.number
        return block, start + 1

    block.blocks, end, closed = scan_scope(lines, start + 1, env, nested=True)
    if not closed:
        raise UnbalancedBraces(f"block {block.name!r} is never closed").locate(
            opening.number, opening.text.strip()
        )
    block.raw_text = [line.text for line in lines[start:end]]
    block.end = lines[end - 1].number
    return block, end
