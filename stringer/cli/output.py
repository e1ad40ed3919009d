import json as json_lib

import typer


def init_context(ctx: typer.Context, json_output: bool = False) -> None:
    """Initialize CLI context with the global output flags."""
    if ctx.obj is None or not isinstance(ctx.obj, dict):
        ctx.obj = {}
    ctx.obj["json_output"] = json_output


def is_json_mode(ctx: typer.Context) -> bool:
    """Check if JSON output mode is enabled."""
    return ctx.obj.get("json_output", False) if ctx.obj else False


def echo_json(data, ctx: typer.Context) -> bool:
    """Output data as JSON if in JSON mode. Returns True if output, False otherwise."""
    if is_json_mode(ctx):
        typer.echo(json_lib.dumps(data, indent=2, ensure_ascii=False))
        return True
    return False
