"""Memory and secret CLI."""

from typing import Annotated

import typer

from clawion.agent.api import require_agent
from clawion.cli import output
from clawion.cli.errors import error_feedback
from clawion.mission.workspace import resolve_mission_path

from . import api

memory_app = typer.Typer(no_args_is_help=True, add_completion=False, help="Agent memory notes.")
secret_app = typer.Typer(no_args_is_help=True, add_completion=False, help="Confidential agent briefs.")


@memory_app.command("set")
@error_feedback
def set_memory(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
    content: Annotated[str, typer.Option("--content", help="Memory content (markdown)")],
):
    """Replace the acting agent's memory."""
    agent = output.require_agent(ctx)
    api.set_memory(output.missions_dir(ctx), mission, agent, content)
    output.out_text(f"Memory updated: {agent}", ctx.obj)


@memory_app.command("show")
@error_feedback
def show_memory(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
):
    """Print the acting agent's memory."""
    agent = output.require_agent(ctx)
    content = api.read_memory(output.missions_dir(ctx), mission, agent)
    output.out_text(content.strip() or "_No memory yet._", ctx.obj)


@secret_app.command("set")
@error_feedback
def set_secret(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
    target: Annotated[str, typer.Option("--for", help="Agent receiving the secret")],
    content: Annotated[str, typer.Option("--content", help="Secret content (markdown)")],
):
    """Set an agent's dark secret (manager only)."""
    output.require_manager(ctx, mission)
    missions_dir = output.missions_dir(ctx)
    require_agent(resolve_mission_path(missions_dir, mission), target)
    api.set_secret(missions_dir, mission, target, content)
    output.out_text(f"Secret set: {target}", ctx.obj)
