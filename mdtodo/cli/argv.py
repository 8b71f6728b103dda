"""Rewrite raw process arguments into the form the Typer app parses.

Accepted shapes:

    mdtodo [<file.md>] "<task>"
    mdtodo [<file.md>] l(ist)
    mdtodo [<file.md>] c(heck) <index>...
    mdtodo [<file.md>] r(emove) <index>...
    mdtodo [<file.md>] clean
"""

from mdtodo.lib import paths

COMMANDS = ("add", "list", "check", "remove", "clean")
SHORTCUTS = {
    "l": "list",
    "c": "check",
    "r": "remove",
}
VALUE_OPTIONS = ("--file", "-f")
FLAG_OPTIONS = ("--quiet", "-q", "--json", "-j", "--verbose", "-v", "--help", "-h")


def _command_position(args: list[str]) -> int | None:
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in VALUE_OPTIONS:
            i += 2
            continue
        if arg in FLAG_OPTIONS or arg.startswith("--file="):
            i += 1
            continue
        return i
    return None


def normalize(args: list[str]) -> list[str]:
    """Return `args` with file argument, shortcuts and bare task text made explicit.

    A leading argument ending in `.md` selects the document. The first
    token that is not a known global flag names the command; shortcuts expand
    to their full name and anything that is not a command, dashes included,
    becomes the text of a new task.
    """
    args = list(args)
    if not args:
        return args

    prefix: list[str] = []
    if paths.is_todo_file_arg(args[0]):
        prefix = ["--file", args[0]]
        args = args[1:]

    pos = _command_position(args)
    if pos is not None:
        token = args[pos]
        if token in SHORTCUTS:
            args[pos] = SHORTCUTS[token]
        elif token not in COMMANDS:
            # "--" keeps text like "-call mom" from parsing as options
            args[pos:pos] = ["add", "--"]

    return prefix + args
