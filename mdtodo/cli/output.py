"""Output flags carried on the Typer context and the echo helpers that honor them."""

import json

import typer


def init_context(ctx: typer.Context, json_output: bool = False, quiet_output: bool = False) -> None:
    if ctx.obj is None or not isinstance(ctx.obj, dict):
        ctx.obj = {}
    ctx.obj["json_output"] = json_output
    ctx.obj["quiet_output"] = quiet_output


def out_text(msg: str, ctx_obj: dict | None = None) -> None:
    """Echo a confirmation unless --quiet was given."""
    if ctx_obj and ctx_obj.get("quiet_output"):
        return
    typer.echo(msg)


def echo_json(data, ctx: typer.Context) -> bool:
    """Echo `data` as indented JSON under --json. Returns whether it was echoed."""
    if not (ctx.obj and ctx.obj.get("json_output")):
        return False
    typer.echo(json.dumps(data, indent=2))
    return True
