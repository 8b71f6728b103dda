"""Task CLI: Markdown checkbox todo list."""

import sys
from pathlib import Path
from typing import Annotated

import typer

from mdtodo.cli import argv, output
from mdtodo.cli.errors import error_feedback
from mdtodo.lib import config, logs, paths
from mdtodo.task import operations, store
from mdtodo.task.format import format_task_list, unfinished_entries

USAGE = """Usage:
  mdtodo [<file.md>] "<task>"           - Add a new task (default file: todo.md).
  mdtodo [<file.md>] l(ist)             - List all unfinished tasks.
  mdtodo [<file.md>] c(heck) <index>    - Mark the <index>th unfinished task as finished.
  mdtodo [<file.md>] r(emove) <index>   - Remove the <index>th unfinished task.
  mdtodo [<file.md>] clean              - Remove all finished tasks.

You can also use multiple <index>es for check and remove commands, i.e. mdtodo check 1 2 3.
A task whose text is a command name needs an explicit add, i.e. mdtodo add list.
A bare "add" with no text is a usage error, not a task."""

NO_FINISHED = "No finished tasks found."

main_app = typer.Typer(
    invoke_without_command=True,
    add_completion=False,
    help="""Todo list kept as Markdown checkboxes. Non-task lines are left untouched.""",
)


@main_app.callback(context_settings={"help_option_names": ["-h", "--help"]})
@error_feedback
def main_callback(
    ctx: typer.Context,
    file: Annotated[
        Path | None, typer.Option("--file", "-f", help="Todo document (default: todo.md).")
    ] = None,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    quiet_output: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    output.init_context(ctx, json_output, quiet_output)
    cfg = config.settings()
    logs.setup_logging(cfg["log_level"], verbose)
    ctx.obj["path"] = file if file is not None else paths.todo_file(cfg["file"])

    if ctx.resilient_parsing:
        return

    if ctx.invoked_subcommand is None:
        typer.echo(USAGE)
        raise typer.Exit(1)


@main_app.command("add")
@error_feedback
def add(
    ctx: typer.Context,
    words: list[str] = typer.Argument(..., help="Task text"),
):
    """Append a new unfinished task."""
    path = ctx.obj["path"]
    text = " ".join(words)
    doc = store.load(path)
    operations.add_task(path, text, doc)
    output.out_text(f"Added: {text}", ctx.obj)


@main_app.command("list")
@error_feedback
def list_cmd(ctx: typer.Context):
    """List unfinished tasks."""
    doc = store.load(ctx.obj["path"])
    if output.echo_json(unfinished_entries(doc), ctx):
        return
    typer.echo(format_task_list(doc))


def _batch(ctx: typer.Context, indexes: list[str], op: operations.BatchOp, verb: str) -> None:
    doc = store.load(ctx.obj["path"])
    result = operations.batch_apply(doc, indexes, op)
    for message in result.skipped:
        typer.echo(message)

    if not result.applied:
        return

    store.save(doc)
    done = ", ".join(str(n) for n in sorted(result.applied))
    output.out_text(f"{verb}: {done}", ctx.obj)


@main_app.command("check", context_settings={"ignore_unknown_options": True})
@error_feedback
def check(
    ctx: typer.Context,
    indexes: list[str] = typer.Argument(..., help="Unfinished task numbers"),
):
    """Mark unfinished tasks as finished."""
    _batch(ctx, indexes, operations.BatchOp.CHECK, "Checked")


@main_app.command("remove", context_settings={"ignore_unknown_options": True})
@error_feedback
def remove(
    ctx: typer.Context,
    indexes: list[str] = typer.Argument(..., help="Unfinished task numbers"),
):
    """Delete unfinished tasks."""
    _batch(ctx, indexes, operations.BatchOp.REMOVE, "Removed")


@main_app.command("clean")
@error_feedback
def clean(ctx: typer.Context):
    """Delete all finished tasks."""
    doc = store.load(ctx.obj["path"])
    removed = operations.prune_finished(doc)
    if not removed:
        output.out_text(NO_FINISHED, ctx.obj)
        return

    store.save(doc)
    output.out_text(f"Removed {removed} finished task(s).", ctx.obj)


def main(args: list[str] | None = None) -> None:
    """Entry point for the mdtodo command."""
    args = argv.normalize(sys.argv[1:] if args is None else args)
    try:
        main_app(args=args, prog_name="mdtodo")
    except SystemExit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e


app = main_app

__all__ = ["app", "main"]
