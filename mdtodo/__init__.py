"""mdtodo: Markdown checkbox task lists from the command line."""

__version__ = "0.1.0"
