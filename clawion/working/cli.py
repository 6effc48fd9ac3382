"""Working CLI: log and review progress events."""

from typing import Annotated

import typer

from clawion.cli import output
from clawion.cli.errors import error_feedback

from . import api

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Working events.")


@app.command("add")
@error_feedback
def add(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
    content: Annotated[str, typer.Option("--content", help="Working content (markdown)")],
):
    """Append a working event for the acting agent."""
    agent = output.require_agent(ctx)
    entry = api.append_working_event(output.missions_dir(ctx), mission, agent, content)
    output.out_text(f"Working event added: {entry.id}", ctx.obj)


@app.command("list")
@error_feedback
def list_cmd(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
    of: Annotated[str | None, typer.Option("--of", help="Agent whose log to show")] = None,
    limit: Annotated[int, typer.Option("--limit", help="Most recent events to show")] = 8,
):
    """Show recent working events, newest first."""
    agent = of or output.require_agent(ctx)
    events = api.recent_events(api.list_working_events(output.missions_dir(ctx), mission, agent), limit)
    if output.echo_json([e.dump() for e in events], ctx):
        return
    if not events:
        output.out_text("No working events", ctx.obj)
        return
    for event in events:
        output.out_text(f"[{event.created_at}] {event.content.strip()}", ctx.obj)
