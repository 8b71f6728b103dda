"""Task primitive: checkbox lines in a Markdown document."""

from .document import TaskDocument, classify, finished_index, unfinished_index
from .operations import (
    BatchOp,
    BatchResult,
    add_task,
    batch_apply,
    check_task,
    prune_finished,
    remove_task,
)
from .store import append, load, save

__all__ = [
    "BatchOp",
    "BatchResult",
    "TaskDocument",
    "add_task",
    "append",
    "batch_apply",
    "check_task",
    "classify",
    "finished_index",
    "load",
    "prune_finished",
    "remove_task",
    "save",
    "unfinished_index",
]
