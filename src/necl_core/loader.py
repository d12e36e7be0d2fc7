"""Loading NECL files from disk."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

from .config import DEFAULT_OPTIONS, ParseOptions
from .document import Document
from .errors import InvalidFileExtension, IOFailure
from .evaluator import evaluate

logger = logging.getLogger(__name__)


def check_extension(path: str | PathLike[str], options: ParseOptions = DEFAULT_OPTIONS) -> Path:
    path = Path(path)
    if not path.name.endswith(options.extension):
        raise InvalidFileExtension(
            f"{path} is not a {options.extension} file"
        )
    return path


def read_lines(path: str | PathLike[str], options: ParseOptions = DEFAULT_OPTIONS) -> list[str]:
    """Validate the extension of *path* and return its lines."""
    path = check_extension(path, options)
    try:
        with open(path, encoding=options.encoding) as fh:
            lines = fh.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise IOFailure(f"could not read {path}: {exc}") from exc
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines


def load(path: str | PathLike[str], options: ParseOptions | None = None) -> Document:
    """Read and evaluate a ``.necl`` file."""
    options = options or DEFAULT_OPTIONS
    doc = evaluate(read_lines(path, options), options)
    logger.debug(
        "Loaded %s: %d attributes, %d blocks",
        path, len(doc.attributes), len(doc.blocks),
    )
    return doc
