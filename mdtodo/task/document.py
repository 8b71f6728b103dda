"""Task document: ordered raw lines and the checkbox grammar over them.

A line is a task only when its first non-whitespace characters are one of
the two markers. Everything else is passthrough content and is never
touched.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

UNFINISHED_MARKER = "- [ ]"
FINISHED_MARKER = "- [x]"
MARKER_WIDTH = 5
LINE_TERMINATORS = ("\r\n", "\n")


class LineKind(Enum):
    UNFINISHED = "unfinished"
    FINISHED = "finished"
    OTHER = "other"


@dataclass
class TaskDocument:
    path: Path
    lines: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lines)

    def ends_with_terminator(self) -> bool:
        return not self.lines or self.lines[-1].endswith(LINE_TERMINATORS)


def marker_offset(line: str) -> int:
    """Position of the first non-whitespace character."""
    return len(line) - len(line.lstrip())


def classify(line: str) -> LineKind:
    head = line.lstrip()[:MARKER_WIDTH]
    if head == UNFINISHED_MARKER:
        return LineKind.UNFINISHED
    if head == FINISHED_MARKER:
        return LineKind.FINISHED
    return LineKind.OTHER


def _index(doc: TaskDocument | None, kind: LineKind) -> list[int]:
    if doc is None:
        return []
    return [pos for pos, line in enumerate(doc.lines) if classify(line) is kind]


def unfinished_index(doc: TaskDocument | None) -> list[int]:
    """0-based positions of unfinished task lines, in document order."""
    return _index(doc, LineKind.UNFINISHED)


def finished_index(doc: TaskDocument | None) -> list[int]:
    """0-based positions of finished task lines, in document order."""
    return _index(doc, LineKind.FINISHED)


def strip_terminator(line: str) -> str:
    for terminator in LINE_TERMINATORS:
        if line.endswith(terminator):
            return line[: -len(terminator)]
    return line


def task_text(line: str) -> str:
    """Task text with the marker, its separating space and the terminator removed."""
    body = strip_terminator(line.lstrip()[MARKER_WIDTH:])
    if body.startswith(" "):
        body = body[1:]
    return body


def replace_marker(line: str, marker: str) -> str:
    """Return `line` with the 5-character marker range replaced by `marker`."""
    if len(marker) != MARKER_WIDTH:
        raise ValueError(f"Marker must be {MARKER_WIDTH} characters: {marker!r}")
    start = marker_offset(line)
    return line[:start] + marker + line[start + MARKER_WIDTH :]


def format_task_line(text: str) -> str:
    return f"{UNFINISHED_MARKER} {text}\n"
