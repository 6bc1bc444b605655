"""Checklist CLI: add, remove, list, check and uncheck tasks."""

import logging
from functools import wraps

import typer
from click.exceptions import Exit

from checklist import dispatch, output
from checklist.codec import format_date
from checklist.config import Config
from checklist.dispatch import Command
from checklist.errors import ChecklistError
from checklist.format import format_task_list, task_to_dict

logger = logging.getLogger(__name__)

main_app = typer.Typer(
    invoke_without_command=True,
    add_completion=False,
    help="""Track recurring tasks in a flat file (set CHECKLIST_FILE).""",
)


def error_feedback(f):
    """Wrap command to report errors on stderr and exit 1.

    Nothing is written to the backing file once an error is raised.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except ChecklistError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e
        except OSError as e:
            typer.echo(f"File error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper


def _run(command: Command, *args: str | None) -> dispatch.Result:
    return dispatch.run(Config.from_env(), command, [a for a in args if a is not None])


@main_app.callback(context_settings={"help_option_names": ["-h", "--help"]})
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    quiet_output: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
):
    output.set_flags(ctx, json_output, quiet_output)
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="[checklist] %(message)s")

    if ctx.resilient_parsing:
        return

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@main_app.command("add")
@error_feedback
def add(
    ctx: typer.Context,
    task_name: str = typer.Argument(..., help="Task name (no commas)"),
    due_date: str = typer.Argument(..., help="Due date, YYYY-MM-DD"),
    interval: str | None = typer.Argument(None, help="Repeat every N days, or 'once'"),
):
    """Add a task."""
    result = _run(Command.ADD, task_name, due_date, interval)
    task = result.task
    if output.echo_json(task_to_dict(task), ctx):
        return
    output.echo_text(
        f"Added: {task.name} (due {format_date(task.due_date)}, {task.interval_label})", ctx
    )


@main_app.command("remove")
@error_feedback
def remove(
    ctx: typer.Context,
    task_name: str = typer.Argument(..., help="Task to remove"),
):
    """Remove a task."""
    result = _run(Command.REMOVE, task_name)
    if output.echo_json(task_to_dict(result.task), ctx):
        return
    output.echo_text(f"Removed: {result.task.name}", ctx)


@main_app.command("list")
@error_feedback
def list_cmd(ctx: typer.Context):
    """List tasks."""
    result = _run(Command.LIST)
    if output.echo_json([task_to_dict(t) for t in result.tasks], ctx):
        return
    typer.echo(format_task_list(result.tasks))


@main_app.command("check")
@error_feedback
def check(
    ctx: typer.Context,
    task_name: str = typer.Argument(..., help="Task to check off"),
):
    """Check off a task. Recurring tasks move to their next due date."""
    result = _run(Command.CHECK, task_name)
    task = result.task
    if output.echo_json(task_to_dict(task), ctx):
        return
    if task.is_recurring:
        output.echo_text(f"Checked: {task.name} (next due {format_date(task.due_date)})", ctx)
    else:
        output.echo_text(f"Checked: {task.name}", ctx)


@main_app.command("uncheck")
@error_feedback
def uncheck(
    ctx: typer.Context,
    task_name: str = typer.Argument(..., help="Task to uncheck"),
):
    """Clear a task's done flag."""
    result = _run(Command.UNCHECK, task_name)
    if output.echo_json(task_to_dict(result.task), ctx):
        return
    output.echo_text(f"Unchecked: {result.task.name}", ctx)


def main() -> None:
    """Entry point for the checklist command."""
    try:
        main_app()
    except SystemExit:
        raise
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e


app = main_app

__all__ = ["app", "error_feedback", "main"]
