"""Thread CLI: post messages and review task threads."""

from typing import Annotated

import typer

from clawion.agent.api import list_agents
from clawion.cli import output
from clawion.cli.errors import error_feedback, fail
from clawion.inbox.api import acknowledge_all_task_mentions, list_unacked_task_mentions
from clawion.mission.workspace import resolve_mission_path
from clawion.task.api import list_tasks

from . import api
from .format import format_thread, format_thread_summaries

message_app = typer.Typer(no_args_is_help=True, add_completion=False, help="Thread messaging.")
thread_app = typer.Typer(no_args_is_help=True, add_completion=False, help="Thread operations.")


def parse_mentions(raw: str, author: str) -> list[str]:
    """Split comma-separated ids, dropping blanks and duplicates in order."""
    mentions = [value.strip() for value in raw.split(",") if value.strip()]
    if author in mentions:
        raise ValueError(f"Cannot mention yourself ({author}). Remove yourself from --mentions.")
    mentions = list(dict.fromkeys(mentions))
    if not mentions:
        raise ValueError("--mentions must include at least one agent ID.")
    return mentions


@message_app.command("add")
@error_feedback
def add(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
    task_id: Annotated[str, typer.Option("--task", help="Task ID")],
    content: Annotated[str, typer.Option("--content", help="Message content (markdown)")],
    mentions: Annotated[str, typer.Option("--mentions", help="Mentioned agent IDs, comma-separated")],
):
    """Append a message to a task thread."""
    author = output.require_agent(ctx)
    try:
        recipients = parse_mentions(mentions, author)
    except ValueError as e:
        fail(f"Error: {e}")

    missions_dir = output.missions_dir(ctx)
    agent_ids = {a.id for a in list_agents(resolve_mission_path(missions_dir, mission)).agents}
    if author not in agent_ids:
        fail(f"Error: Author agent not found: {author}. Register the agent first.")

    invalid = [agent_id for agent_id in recipients if agent_id not in agent_ids]
    if invalid:
        fail(f"Error: Invalid mentions: {', '.join(invalid)}. Check agents via wake.")

    task_ids = [task.id for task in list_tasks(missions_dir, mission).tasks]
    if task_id not in task_ids:
        fail(f"Error: Task not found: {task_id}. Valid tasks: {', '.join(task_ids)}")

    message = api.add_thread_message(missions_dir, mission, task_id, author, recipients, content)
    output.out_text(f"Message added: {message.id}", ctx.obj)


@thread_app.command("show")
@error_feedback
def show(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
    task_id: Annotated[str, typer.Option("--task", help="Task ID")],
):
    """Show thread messages for a task (manager only)."""
    output.require_manager(ctx, mission)
    missions_dir = output.missions_dir(ctx)
    messages = api.list_thread_messages(missions_dir, mission, task_id)
    if output.echo_json([m.dump() for m in messages], ctx):
        return
    title = next((t.title for t in list_tasks(missions_dir, mission).tasks if t.id == task_id), None)
    output.out_text(format_thread(task_id, title, messages), ctx.obj)


@thread_app.command("list")
@error_feedback
def list_cmd(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
):
    """List thread summaries with pending acknowledgements."""
    missions_dir = output.missions_dir(ctx)
    summaries = api.list_threads(missions_dir, mission)
    pending = {s.task_id: list_unacked_task_mentions(missions_dir, mission, s.task_id) for s in summaries}
    if output.echo_json([s.dump() for s in summaries], ctx):
        return
    output.out_text(format_thread_summaries(summaries, pending), ctx.obj)


@thread_app.command("ack-all")
@error_feedback
def ack_all(
    ctx: typer.Context,
    mission: Annotated[str, typer.Option("--mission", help="Mission ID")],
    task_id: Annotated[str, typer.Option("--task", help="Task ID")],
):
    """Acknowledge every pending mention in a thread (manager only)."""
    output.require_manager(ctx, mission)
    result = acknowledge_all_task_mentions(output.missions_dir(ctx), mission, task_id)
    if output.echo_json(
        {
            "ackedEntries": result.acked_entries,
            "ackedMessages": result.acked_messages,
            "ackedAgents": result.acked_agents,
        },
        ctx,
    ):
        return
    output.out_text(
        f"Acknowledged {result.acked_entries} mention(s) across "
        f"{result.acked_messages} message(s) for {result.acked_agents} agent(s).",
        ctx.obj,
    )
