import os
from pathlib import Path

DEFAULT_TODO_FILE = "todo.md"


def config_home() -> Path:
    override = os.environ.get("MDTODO_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".mdtodo"


def config_file() -> Path:
    return config_home() / "config.yaml"


def todo_file(configured: str | None = None) -> Path:
    """Return the document path used when no file argument is given.

    MDTODO_FILE wins over the configured name; relative paths resolve
    against the current directory.
    """
    override = os.environ.get("MDTODO_FILE")
    name = override or configured or DEFAULT_TODO_FILE
    return Path(name).expanduser()


def is_todo_file_arg(arg: str) -> bool:
    return len(arg) > 3 and arg.endswith(".md")
