import json

import typer


def set_flags(ctx: typer.Context, json_output: bool = False, quiet_output: bool = False) -> None:
    ctx.obj = {"json_output": json_output, "quiet_output": quiet_output}


def _flag(ctx: typer.Context, key: str) -> bool:
    return bool(ctx.obj and ctx.obj.get(key))


def echo_json(data, ctx: typer.Context) -> bool:
    """Print data as JSON when --json is on. Returns whether anything was printed."""
    if not _flag(ctx, "json_output"):
        return False
    typer.echo(json.dumps(data, indent=2))
    return True


def echo_text(msg: str, ctx: typer.Context) -> None:
    if not _flag(ctx, "quiet_output"):
        typer.echo(msg)
