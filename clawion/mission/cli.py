"""Mission CLI: create, inspect and close missions."""

from typing import Annotated

import typer

from clawion.cli import output
from clawion.cli.errors import error_feedback, fail
from clawion.task.api import incomplete_tasks, list_tasks, with_status
from clawion.task.format import format_incomplete_tasks

from . import api

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Mission management.")


@app.command("create")
@error_feedback
def create(
    ctx: typer.Context,
    mission_id: Annotated[str, typer.Option("--id", help="Mission ID")],
    name: Annotated[str, typer.Option("--name", help="Mission name")],
    description: Annotated[str, typer.Option("--description", help="Mission description")] = "",
):
    """Create a mission from the template."""
    api.create_mission(output.missions_dir(ctx), mission_id, name, description)
    output.out_text(f"Mission created: {mission_id}", ctx.obj)


@app.command("list")
@error_feedback
def list_cmd(ctx: typer.Context):
    """List missions in the workspace."""
    missions = api.list_missions(output.missions_dir(ctx))
    if output.echo_json([m.dump() for m in missions], ctx):
        return
    if not missions:
        output.out_text("No missions", ctx.obj)
        return
    for mission in missions:
        output.out_text(f"[{mission.id}] {mission.name} ({mission.status})", ctx.obj)


@app.command("show")
@error_feedback
def show(
    ctx: typer.Context,
    mission_id: Annotated[str, typer.Option("--id", help="Mission ID")],
):
    """Show mission metadata and roadmap."""
    mission, roadmap = api.show_mission(output.missions_dir(ctx), mission_id)
    if output.echo_json({"mission": mission.dump(), "roadmap": roadmap}, ctx):
        return
    lines = [
        f"{mission.name} ({mission.id})",
        f"Status: {mission.status}",
    ]
    if mission.description.strip():
        lines.append(f"Description: {mission.description.strip()}")
    lines.append("")
    lines.append(roadmap.strip() or "_No roadmap yet._")
    output.out_text("\n".join(lines), ctx.obj)


@app.command("roadmap")
@error_feedback
def roadmap(
    ctx: typer.Context,
    mission_id: Annotated[str, typer.Option("--id", help="Mission ID")],
    content: Annotated[str | None, typer.Option("--set", help="Roadmap markdown")] = None,
):
    """Set the mission roadmap (manager only, write-once)."""
    if not content:
        fail("Roadmap is read via wake. Pass --set to write it.")

    output.require_manager(ctx, mission_id)
    missions_dir = output.missions_dir(ctx)
    if api.read_roadmap(missions_dir, mission_id).strip():
        fail("Roadmap already exists.")

    api.update_mission_roadmap(missions_dir, mission_id, content)
    output.out_text(f"Mission roadmap set: {mission_id}", ctx.obj)


@app.command("complete")
@error_feedback
def complete(
    ctx: typer.Context,
    mission_id: Annotated[str, typer.Option("--id", help="Mission ID")],
):
    """Mark a mission completed (manager only). Refuses while tasks remain open."""
    output.require_manager(ctx, mission_id)
    missions_dir = output.missions_dir(ctx)

    remaining = incomplete_tasks(with_status(list_tasks(missions_dir, mission_id)))
    if remaining:
        fail(format_incomplete_tasks(remaining))

    api.complete_mission(missions_dir, mission_id)
    output.out_text(f"Mission completed: {mission_id}", ctx.obj)
