"""Task CLI: the mission's task board."""

from typing import Annotated

import typer

from clawion.agent.api import require_agent
from clawion.cli import output
from clawion.cli.errors import error_feedback, fail
from clawion.mission.workspace import resolve_mission_path
from clawion.models import TaskStatus

from . import api
from .format import format_task_list

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Task management.")

INVALID_STATUS = "status must be pending, ongoing, blocked, or completed."


def _parse_status(raw: str | None) -> TaskStatus | None:
    value = (raw or "").strip()
    if not value:
        return None
    try:
        return TaskStatus(value)
    except ValueError:
        fail(INVALID_STATUS)


@app.command("create")
@error_feedback
def create(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
    task_id: Annotated[str, typer.Option("--id", help="Task ID")],
    title: Annotated[str, typer.Option("--title", help="Task title")],
    description: Annotated[str, typer.Option("--description", help="Task description (markdown)")],
):
    """Create a task (manager only)."""
    output.require_manager(ctx, mission)
    api.create_task(output.missions_dir(ctx), mission, task_id, title, description)
    output.out_text(f"Task created: {task_id}", ctx.obj)


@app.command("list")
@error_feedback
def list_cmd(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
    status: Annotated[str | None, typer.Option("--status", help="Filter by status")] = None,
):
    """List tasks with their derived status."""
    wanted = _parse_status(status)
    tasks = api.with_status(api.list_tasks(output.missions_dir(ctx), mission))
    if wanted is not None:
        tasks = api.tasks_by_status(tasks, wanted)
    if output.echo_json([t.dump() for t in tasks], ctx):
        return
    output.out_text(format_task_list(tasks), ctx.obj)


@app.command("mine")
@error_feedback
def mine(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
):
    """List the acting agent's active tasks."""
    agent = output.require_agent(ctx)
    board = api.with_status(api.list_tasks(output.missions_dir(ctx), mission))
    tasks = api.assigned_active_tasks(board, agent)
    if output.echo_json([t.dump() for t in tasks], ctx):
        return
    output.out_text(format_task_list(tasks), ctx.obj)


@app.command("update")
@error_feedback
def update(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
    task_id: Annotated[str, typer.Option("--id", help="Task ID")],
    status: Annotated[
        str | None, typer.Option("--status", help="pending|ongoing|blocked|completed")
    ] = None,
    status_notes: Annotated[str | None, typer.Option("--status-notes", help="Status notes")] = None,
):
    """Update task status or notes (manager only)."""
    output.require_manager(ctx, mission)
    api.update_task(
        output.missions_dir(ctx),
        mission,
        task_id,
        status=_parse_status(status),
        status_notes=status_notes,
    )
    output.out_text(f"Task updated: {task_id}", ctx.obj)


@app.command("assign")
@error_feedback
def assign(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
    task_id: Annotated[str, typer.Option("--task", help="Task ID")],
    assignee: Annotated[str, typer.Option("--to", help="Assignee agent ID")],
):
    """Assign a task to an agent (manager only)."""
    output.require_manager(ctx, mission)
    missions_dir = output.missions_dir(ctx)
    require_agent(resolve_mission_path(missions_dir, mission), assignee)
    api.assign_task(missions_dir, mission, task_id, assignee)
    output.out_text(f"Task assigned: {task_id}", ctx.obj)
