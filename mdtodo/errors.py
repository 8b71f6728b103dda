class TodoError(Exception):
    """Base exception for mdtodo domain errors."""

    pass


class InvalidIndexError(TodoError):
    """Raised when a task number does not resolve to a task line."""

    def __init__(self, number: int, count: int | None = None, message: str | None = None):
        self.number = number
        self.count = count
        if message is None:
            if count is None:
                message = f"Invalid index: {number}"
            else:
                message = f"Invalid index: {number} (only {count} unfinished tasks)"
        super().__init__(message)


class NoMatchingTasksError(InvalidIndexError):
    """Raised when an operation needs at least one task but the index is empty."""

    def __init__(self, number: int = 0, kind: str = "unfinished"):
        super().__init__(number, 0, f"No {kind} tasks found.")


class PersistenceError(TodoError):
    """Raised when the backing file cannot be read or written."""

    def __init__(self, path, action: str, reason: str):
        self.path = path
        self.action = action
        super().__init__(f"Error opening {path} for {action}: {reason}")
