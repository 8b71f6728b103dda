"""Task operations: check, remove, prune and add over a loaded document.

Every operation recomputes the index it needs; positions from an earlier
call are stale after any deletion.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from mdtodo.errors import InvalidIndexError, NoMatchingTasksError

from . import store
from .document import (
    FINISHED_MARKER,
    TaskDocument,
    finished_index,
    format_task_line,
    replace_marker,
    unfinished_index,
)

logger = logging.getLogger(__name__)


class BatchOp(Enum):
    CHECK = "check"
    REMOVE = "remove"


@dataclass
class BatchResult:
    applied: list[int] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def _resolve(doc: TaskDocument | None, number: int) -> int:
    if number <= 0:
        raise InvalidIndexError(number)

    index = unfinished_index(doc)
    if not index:
        raise NoMatchingTasksError(number)
    if number > len(index):
        raise InvalidIndexError(number, len(index))
    return index[number - 1]


def check_task(doc: TaskDocument | None, number: int) -> int:
    """Mark unfinished task `number` (1-based) as finished.

    Only the marker characters of the resolved line change. Returns the
    document position of that line.
    """
    pos = _resolve(doc, number)
    doc.lines[pos] = replace_marker(doc.lines[pos], FINISHED_MARKER)
    logger.debug("Checked task %d at line %d", number, pos)
    return pos


def remove_task(doc: TaskDocument | None, number: int) -> str:
    """Delete unfinished task `number` (1-based) and return the removed line."""
    pos = _resolve(doc, number)
    removed = doc.lines.pop(pos)
    logger.debug("Removed task %d at line %d", number, pos)
    return removed


def prune_finished(doc: TaskDocument | None) -> int:
    """Delete every finished task line. Returns how many were removed."""
    positions = finished_index(doc)
    if not positions:
        return 0

    # highest first so pending positions stay valid
    for pos in reversed(positions):
        del doc.lines[pos]

    logger.debug("Pruned %d finished tasks", len(positions))
    return len(positions)


def parse_numbers(tokens: list[str | int]) -> tuple[list[int], list[str]]:
    """Split raw tokens into positive task numbers and skip diagnostics."""
    numbers: list[int] = []
    skipped: list[str] = []
    for token in tokens:
        try:
            number = int(token)
        except (TypeError, ValueError):
            number = 0
        if number <= 0:
            message = f"Skipping invalid index: {token}"
            logger.debug(message)
            skipped.append(message)
            continue
        numbers.append(number)
    return numbers, skipped


def batch_apply(doc: TaskDocument | None, tokens: list[str | int], op: BatchOp) -> BatchResult:
    """Apply `op` to each task number in `tokens`, highest number first.

    Descending order keeps lower numbers valid while higher ones are removed.
    A number that does not resolve is reported and the batch continues.
    """
    numbers, skipped = parse_numbers(tokens)
    result = BatchResult(skipped=skipped)

    for number in sorted(numbers, reverse=True):
        try:
            if op is BatchOp.CHECK:
                check_task(doc, number)
            else:
                remove_task(doc, number)
        except InvalidIndexError as e:
            logger.debug("%s: %s", op.value, e)
            result.skipped.append(str(e))
            continue
        result.applied.append(number)

    return result


def add_task(path: str | Path, text: str, doc: TaskDocument | None = None) -> str:
    """Append `- [ ] <text>` to the file at `path` and return the written line.

    `doc` is the already-loaded document, used to see whether the last line
    needs a terminator first; it is updated to mirror the file.
    """
    line = format_task_line(text)
    separator = "" if doc is None or doc.ends_with_terminator() else "\n"
    store.append(path, separator + line)

    if doc is not None:
        if separator:
            doc.lines[-1] += separator
        doc.lines.append(line)

    logger.debug("Added task to %s", path)
    return line
