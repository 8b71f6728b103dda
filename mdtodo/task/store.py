"""Backing file I/O for task documents.

Lines split on "\n" only and are written back untranslated, so every
terminator round-trips exactly.
No locking: concurrent invocations against the same file can lose updates.
"""

import logging
from pathlib import Path

from mdtodo.errors import PersistenceError
from mdtodo.lib import config

from .document import TaskDocument, strip_terminator

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
# undecodable bytes round-trip as lone surrogates
ENCODING_ERRORS = "surrogateescape"


def _bound_line(line: str, number: int, limit: int, policy: str) -> str:
    content = strip_terminator(line)
    if len(content) <= limit:
        return line
    if policy == "truncate":
        logger.warning(
            "Line %d is %d characters long; truncated to %d", number, len(content), limit
        )
        return content[:limit] + line[len(content) :]
    logger.warning(
        "Line %d is %d characters long (limit %d); kept intact", number, len(content), limit
    )
    return line


def load(path: str | Path) -> TaskDocument | None:
    """Read the document at `path`.

    Returns None when the file does not exist or is empty; both mean there
    is nothing to list and nothing to rewrite.
    """
    path = Path(path)
    cfg = config.settings()
    limit = cfg["max_line_length"]
    policy = cfg["long_lines"]

    try:
        with open(path, encoding=ENCODING, errors=ENCODING_ERRORS, newline="\n") as f:
            lines = [_bound_line(line, n, limit, policy) for n, line in enumerate(f, start=1)]
    except FileNotFoundError:
        logger.debug("No document at %s", path)
        return None
    except OSError as e:
        raise PersistenceError(path, "reading", e.strerror or str(e)) from e

    if not lines:
        logger.debug("Document %s is empty", path)
        return None

    logger.debug("Loaded %d lines from %s", len(lines), path)
    return TaskDocument(path=path, lines=lines)


def save(doc: TaskDocument | None) -> None:
    """Overwrite the backing file with the document's lines, verbatim."""
    if doc is None:
        return

    try:
        with open(doc.path, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
            f.writelines(doc.lines)
    except OSError as e:
        raise PersistenceError(doc.path, "writing", e.strerror or str(e)) from e

    logger.debug("Saved %d lines to %s", len(doc.lines), doc.path)


def append(path: str | Path, text: str) -> None:
    """Append `text` to the backing file without rewriting it."""
    path = Path(path)
    try:
        with open(path, "a", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
            f.write(text)
    except OSError as e:
        raise PersistenceError(path, "appending", e.strerror or str(e)) from e

    logger.debug("Appended %d characters to %s", len(text), path)
