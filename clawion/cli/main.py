"""clawion: file-backed mission tracker for cooperating agents."""

import sys
from typing import Annotated

import typer

from clawion import config
from clawion.agent.cli import app as agent_app
from clawion.lib import invocations, paths
from clawion.memory.cli import memory_app, secret_app
from clawion.mission import ensure_workspace
from clawion.mission.cli import app as mission_app
from clawion.task.cli import app as task_app
from clawion.thread.cli import message_app, thread_app
from clawion.working.cli import app as working_app

from . import argv, output
from .errors import error_feedback
from .help import render_help

app = typer.Typer(invoke_without_command=True, no_args_is_help=False, add_completion=False)


@app.callback(context_settings={"help_option_names": ["-h", "--help"]})
def main_callback(
    ctx: typer.Context,
    agent: Annotated[str | None, typer.Option("--agent", help="Agent ID for scoped actions.")] = None,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    quiet_output: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output."),
):
    """Clawion CLI

    Coordinate manager and worker agents on missions through files on disk."""
    if ctx.resilient_parsing:
        return

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        return

    config.setup_logging()
    missions_dir = paths.missions_dir()
    ensure_workspace(missions_dir)
    invocations.append_cli_invocation(sys.argv[1:])
    output.init_context(ctx, missions_dir, json_output, quiet_output, agent)


@app.command("help")
def help_cmd(topic: Annotated[list[str] | None, typer.Argument(help="Command, e.g. 'task update'")] = None):
    """Show detailed command help."""
    typer.echo(render_help(" ".join(topic) if topic else None))


@app.command("log")
@error_feedback
def log_cmd(
    ctx: typer.Context,
    limit: Annotated[int | None, typer.Option("--limit", "-n", help="Show only the last N")] = None,
):
    """Show CLI invocation logs."""
    entries = invocations.list_cli_invocations(limit=limit)
    if not entries:
        output.out_text("No invocations logged", ctx.obj)
        return
    for entry in entries:
        output.out_text(invocations.format_invocation(entry), ctx.obj)


@app.command("ui")
@error_feedback
def ui(
    host: Annotated[str | None, typer.Option("--host", help="Bind address")] = None,
    port: Annotated[int | None, typer.Option("--port", help="Port for the web UI server")] = None,
):
    """Start the web UI API server."""
    from clawion.api.main import main as serve

    serve(host=host, port=port)


app.add_typer(mission_app, name="mission")
app.add_typer(task_app, name="task")
app.add_typer(agent_app, name="agent")
app.add_typer(message_app, name="message")
app.add_typer(thread_app, name="thread")
app.add_typer(working_app, name="working")
app.add_typer(memory_app, name="memory")
app.add_typer(secret_app, name="secret")


def main() -> None:
    """Entry point for clawion command."""
    argv.flex_args("agent")
    try:
        app()
    except SystemExit:
        raise
    except BaseException as e:
        raise SystemExit(1) from e
