"""Task formatting for CLI display."""

from .document import TaskDocument, task_text, unfinished_index

NO_UNFINISHED = "No unfinished tasks found."


def unfinished_entries(doc: TaskDocument | None) -> list[dict]:
    """Unfinished tasks as {number, line, text} records, in document order."""
    if doc is None:
        return []
    return [
        {"number": number, "line": pos, "text": task_text(doc.lines[pos])}
        for number, pos in enumerate(unfinished_index(doc), start=1)
    ]


def format_task_list(doc: TaskDocument | None) -> str:
    """Format unfinished tasks as `N) text`, one per line."""
    entries = unfinished_entries(doc)
    if not entries:
        return NO_UNFINISHED
    return "\n".join(f"{entry['number']}) {entry['text']}" for entry in entries)
