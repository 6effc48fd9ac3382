"""Agent CLI: roster management and the wake briefing."""

from typing import Annotated

import typer

from clawion.cli import output
from clawion.cli.errors import error_feedback, fail
from clawion.mission.workspace import resolve_mission_path
from clawion.wake import run_wake

from . import api

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Agent management.")

SYSTEM_ROLES = ("manager", "worker")


@app.command("add")
@error_feedback
def add(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
    agent_id: Annotated[str, typer.Option("--id", help="Agent ID")],
    name: Annotated[str, typer.Option("--name", help="Display name")],
    system_role: Annotated[str, typer.Option("--system-role", help="manager|worker")],
    role_description: Annotated[
        str | None, typer.Option("--role-description", help="Role description (markdown)")
    ] = None,
):
    """Register an agent (manager only; the first manager may register itself)."""
    acting = output.require_agent(ctx)
    if system_role not in SYSTEM_ROLES:
        fail("system-role must be manager or worker.")

    missions_dir = output.missions_dir(ctx)
    mission_path = resolve_mission_path(missions_dir, mission)
    if not api.is_bootstrap(api.list_agents(mission_path), agent_id, system_role, acting):
        output.require_manager(ctx, mission)

    api.add_agent(mission_path, agent_id, name, system_role, role_description)
    output.out_text(f"Agent registered: {agent_id}", ctx.obj)


@app.command("list")
@error_feedback
def list_cmd(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
):
    """List the mission roster."""
    agents = api.list_agents(resolve_mission_path(output.missions_dir(ctx), mission)).agents
    if output.echo_json([a.dump() for a in agents], ctx):
        return
    if not agents:
        output.out_text("No agents registered", ctx.obj)
        return
    for agent in agents:
        output.out_text(f"{agent.id}: {agent.display_name} ({agent.system_role})", ctx.obj)


@app.command("wake")
@error_feedback
def wake(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
):
    """Print the agent's briefing and acknowledge the unread mentions it shows."""
    agent = output.require_agent(ctx)
    result = run_wake(output.missions_dir(ctx), mission, agent, emit=typer.echo)
    if result.ack_failures:
        typer.echo(
            f"Warning: failed to acknowledge {len(result.ack_failures)} mention(s): "
            f"{', '.join(result.ack_failures)}",
            err=True,
        )
