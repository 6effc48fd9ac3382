"""Wake report rendering.

All wake prompts, section headings and command templates live here.
Each render_* function appends to a list of lines and may append nothing.
"""

from clawion.lib import paths
from clawion.models import Agent, TaskStatus, TaskView, UnreadMention, WorkingEvent
from clawion.task.api import (
    blocked_tasks,
    count_by_status,
    tasks_by_status,
    unassigned_active_tasks,
)
from clawion.thread.api import recent_threads
from clawion.working.api import recent_events

from .api import TeamWorkingSnapshot, WakeContext

RECENT_WORKING_LIMIT = 8
RECENT_THREADS_LIMIT = 12
NONE_MARK = "—"

NO_ROLE_DESCRIPTION = "_No role description._"
NO_ROADMAP = "_No roadmap yet._"
NO_AGENTS = "_No agents registered in this mission yet._"
AUTO_ACK_NOTE = "_All unread mentions shown below will be automatically acknowledged after this Wake._"
AUTO_ACK_FOOTER = "_Unread mentions shown above have been automatically acknowledged after this Wake._"

REPLY_HERE = 'clawion message add --mission {mission} --task {task} --content "..." --mentions {mentions} --agent {agent}'
THREAD_SHOW = "clawion thread show --mission {mission} --task {task} --agent {agent}"

WORKER_HEADER = """\
You are a Worker Agent currently on duty in Mission {mission}
This message is the only authoritative snapshot for deciding what to do next.
Your job is to move the mission forward this turn."""

MANAGER_HEADER = """\
SYSTEM: You are the Mission Manager for Mission {mission}. This Wake report is your single source of truth for this turn (ROADMAP, Team Directory, Mission Dashboard, Threads, Unread Mentions, Working/Memory).
SYSTEM: Protocol: (1) triage Unread Mentions; (2) scan mission health (blocked/unassigned tasks, recent thread activity, team working updates); (3) decide and dispatch next steps by creating/assigning/updating tasks; (4) communicate decisions via `clawion message add`. Messages shown as unread will be auto-acknowledged after this Wake."""

WORKER_PLAYBOOK = """\
## Turn Playbook
Your mission this turn: make one assigned task meaningfully closer to done (or fully done). If you can't progress, reduce uncertainty fast by asking the right person.

1) Handle Unread Mentions first.
   - Reply with an answer, a clear question, or a concrete next step.

2) Pick the single highest-priority Assigned Task.
   - If anything is blocked, focus on unblocking it.
   - Else continue the most ongoing task.
   - Else start a pending task with a short plan and a first deliverable.

3) Aim for a deliverable (not just activity).
   Deliverables can be: a patch/PR, a repro + diagnosis, a spec/proposal with tradeoffs, a test plan, or a concrete review result.

4) If your output is long, write it to a file for review.
   - Put long reports/specs in: {artifacts} (Markdown preferred).
   - Then post a short thread message with the file path so other agents can review.

5) Ask early when unclear or blocked.
   Use `clawion message add` to mention the manager and/or relevant peers. Include what you tried and what you need.

6) Write back before you stop.
   - `working add`: progress + next step (and blockers if any)
   - `memory set`: stable summary of what's true now
   - `message add`: close the loop with the manager (especially on completion)"""

MANAGER_PLAYBOOK = """\
## Turn Playbook
Your mission this turn: keep throughput high by dispatching clear work, removing blockers, and keeping the task board accurate.

1) Triage Unread Mentions.
   - Answer questions, make decisions, and acknowledge completions.

2) Scan mission health.
   - Focus on blocked tasks, unassigned tasks, and stale work.

3) Dispatch next steps.
   Ensure each task has: a clear outcome, constraints/acceptance criteria, an owner.

4) If you're about to produce a long report, write it to a file for review.
   - Put long reports/specs in: {artifacts} (Markdown preferred).
   - Then post a short thread message with the file path so other agents can review.

5) Communicate decisions in threads.
   - Keep messages short, explicit, with the next step and owner."""

WORKER_COMMANDS = """\
## Command Templates
- Reply / ask questions:
  `clawion message add --mission {mission} --task <taskId> --content "..." --mentions <agentId,...> --agent {agent}`
- Log progress:
  `clawion working add --mission {mission} --content "..." --agent {agent}`
- Update summary:
  `clawion memory set --mission {mission} --content "..." --agent {agent}`"""

MANAGER_COMMANDS = """\
## Command Templates (Manager)
- Communicate decisions:
  `clawion message add --mission {mission} --task <taskId> --content "..." --mentions <agentId,...> --agent {agent}`
- Read a thread:
  `clawion thread show --mission {mission} --task <taskId> --agent {agent}`
- Create tasks:
  `clawion task create --mission {mission} --id <taskId> --title "..." --description "..." --agent {agent}`
- Assign tasks:
  `clawion task assign --mission {mission} --task <taskId> --to <agentId> --agent {agent}`
- Update task board:
  `clawion task update --mission {mission} --id <taskId> --status <pending|ongoing|blocked|completed> --status-notes "..." --agent {agent}`
- Update roadmap (write-once):
  `clawion mission roadmap --id {mission} --set "..." --agent {agent}`
- Complete mission:
  `clawion mission complete --id {mission} --agent {agent}`
- Log progress:
  `clawion working add --mission {mission} --content "..." --agent {agent}`
- Update summary:
  `clawion memory set --mission {mission} --content "..." --agent {agent}`"""

DARK_SECRET_NOTE = (
    "_Only you can see this. Never reveal it, quote it, or hint at it in threads, "
    "working logs, or memory. Let it shape your decisions quietly._"
)


def build_reply_here_command(mission_id: str, task_id: str, agent_id: str, mention_agent_ids: list[str]) -> str:
    """Copy-paste reply command. Mentions are joined in the order given."""
    return REPLY_HERE.format(
        mission=mission_id,
        task=task_id,
        mentions=",".join(mention_agent_ids),
        agent=agent_id,
    )


def reply_mentions(mentions: list[UnreadMention], agent_id: str, manager_agent_id: str | None) -> list[str]:
    """Authors of the mentions (minus self), then the manager if not already there."""
    recipients = list(dict.fromkeys(m.author_agent_id for m in mentions if m.author_agent_id != agent_id))
    if manager_agent_id and manager_agent_id != agent_id and manager_agent_id not in recipients:
        recipients.append(manager_agent_id)
    return recipients


def render_identity(lines: list[str], agent: Agent, unread_count: int) -> None:
    lines.append("## Identity")
    lines.append(f"- ID: {agent.id}")
    lines.append(f"- Display name: {agent.display_name}")
    lines.append(f"- System role: {agent.system_role}")
    lines.append(f"- Inbox: Unread Mentions ({unread_count})")
    lines.append("")
    lines.append("### Role Description")
    lines.append(agent.role_description.strip() or NO_ROLE_DESCRIPTION)


def render_team_directory(lines: list[str], agents: list[Agent], self_id: str) -> None:
    lines.append("## Teammates")
    teammates = [agent for agent in agents if agent.id != self_id]
    if not teammates:
        lines.append(NO_AGENTS)
        return
    for agent in teammates:
        lines.append(f"- {agent.display_name} (@{agent.id}) — {agent.system_role}")


def render_mission_overview(lines: list[str], ctx: WakeContext) -> None:
    lines.append("## Mission Overview")
    lines.append(f"- ID: {ctx.mission.id}")
    lines.append(f"- Name: {ctx.mission.name}")
    lines.append(f"- Status: {ctx.mission.status}")
    if ctx.mission.description.strip():
        lines.append(f"- Description: {ctx.mission.description.strip()}")
    lines.append("")
    lines.append("### ROADMAP")
    lines.append(ctx.roadmap.strip() or NO_ROADMAP)


def render_task_section(
    lines: list[str],
    heading: str,
    tasks: list[TaskView],
    empty_message: str,
    mission_id: str,
    agent_id: str,
    is_manager: bool = False,
) -> None:
    lines.append(f"## {heading}")
    if not tasks:
        lines.append(empty_message)
        return

    for position, task in enumerate(tasks):
        if position:
            lines.append("")
        lines.append(f"- TaskId: {task.id}")
        lines.append(f"- Title: {task.title}")
        lines.append(f"- Status: {task.status}")
        lines.append(f"- Assignee: {task.assignee_agent_id or '**Unassigned**'}")
        lines.append(f"- Description: {task.description}")
        notes = task.status_notes.strip()
        if notes:
            lines.append(f"- Status Notes: {notes}")
        if is_manager:
            command = THREAD_SHOW.format(mission=mission_id, task=task.id, agent=agent_id)
            lines.append(f"- Thread: `{command}`")


def render_unread_mentions(
    lines: list[str],
    mission_id: str,
    agent_id: str,
    manager_agent_id: str | None,
    unread_count: int,
    task_ids: list[str],
    by_task: dict[str, list[UnreadMention]],
    task_title_by_id: dict[str, str],
) -> None:
    if unread_count == 0:
        return

    lines.append(f"## Unread Mentions ({unread_count})")
    lines.append(AUTO_ACK_NOTE)

    for task_id in task_ids:
        mentions = by_task.get(task_id, [])
        title = task_title_by_id.get(task_id)
        lines.append("")
        lines.append(f"### Task {task_id}" + (f" — {title}" if title else ""))
        recipients = reply_mentions(mentions, agent_id, manager_agent_id)
        lines.append(f"Reply here: `{build_reply_here_command(mission_id, task_id, agent_id, recipients)}`")

        for mention in mentions:
            lines.append("")
            lines.append(f"#### Message {mention.message_id}")
            lines.append(f"- From: {mention.author_agent_id}")
            lines.append(f"- At: {mention.created_at}")
            lines.append(f"- Mentions: {', '.join(mention.mentions_agent_ids)}")
            lines.append("")
            lines.append(mention.content.strip())


def render_working(lines: list[str], events: list[WorkingEvent]) -> None:
    if not events:
        return
    lines.append(f"## Working (recent events: {len(events)})")
    for event in recent_events(events, RECENT_WORKING_LIMIT):
        lines.append("")
        lines.append(f"- {event.created_at}")
        lines.append("")
        lines.append(event.content.strip())


def render_memory(lines: list[str], memory: str) -> None:
    if not memory.strip():
        return
    lines.append("## Memory")
    lines.append(memory.strip())


def render_dark_secret(lines: list[str], secret: str) -> None:
    if not secret.strip():
        return
    lines.append("## Dark Secret (Strictly Confidential)")
    lines.append(DARK_SECRET_NOTE)
    lines.append("")
    lines.append(secret.strip())


def render_task_dashboard(lines: list[str], ctx: WakeContext) -> None:
    counts = count_by_status(ctx.all_tasks)
    lines.append("## Mission Dashboard")
    lines.append(
        f"- Total: {len(ctx.all_tasks)}"
        f" | Pending: {counts[TaskStatus.PENDING]}"
        f" | Ongoing: {counts[TaskStatus.ONGOING]}"
        f" | Blocked: {counts[TaskStatus.BLOCKED]}"
        f" | Completed: {counts[TaskStatus.COMPLETED]}"
    )
    lines.append(f"- Unassigned (not completed): {len(unassigned_active_tasks(ctx.all_tasks))}")
    lines.append(f"- Unread mentions: {len(ctx.unread_mentions)}")
    lines.append(f"- Threads: {len(ctx.thread_summaries)}")


def render_thread_activity(lines: list[str], ctx: WakeContext) -> None:
    lines.append("## Recent Thread Activity")
    threads = recent_threads(ctx.thread_summaries, RECENT_THREADS_LIMIT)
    if not threads:
        lines.append("_No threads yet._")
        return
    for thread in threads:
        title = ctx.task_title_by_id.get(thread.task_id)
        label = f"Task {thread.task_id}" + (f" ({title})" if title else "")
        when = thread.last_message_at or NONE_MARK
        by = f"@{thread.last_author_agent_id}" if thread.last_author_agent_id else NONE_MARK
        lines.append(f"- {label}: {thread.message_count} messages · last at {when} by {by}")


def _team_line(item: TeamWorkingSnapshot) -> str:
    line = f"- {item.display_name} (@{item.agent_id}, {item.system_role}) · last: "
    if item.last_event is None:
        return line + NONE_MARK
    snippet = item.last_event.content.split("\n")[0].strip()
    return line + item.last_event.created_at + (f" · {snippet}" if snippet else "")


def render_team_working(lines: list[str], team: list[TeamWorkingSnapshot]) -> None:
    lines.append("## Team Working (latest per agent)")
    if not team:
        lines.append("_No team working events._")
        return
    for item in team:
        lines.append(_team_line(item))


def _section(lines: list[str], render, *args) -> None:
    """Run a renderer and keep a blank separator only if it produced output."""
    before = len(lines)
    render(lines, *args)
    if len(lines) > before:
        lines.append("")


def build_worker_wake_lines(ctx: WakeContext) -> list[str]:
    lines = [WORKER_HEADER.format(mission=ctx.mission_id), ""]
    artifacts = paths.artifacts_dir(ctx.mission_path)

    _section(lines, render_identity, ctx.agent, len(ctx.unread_mentions))
    _section(lines, render_team_directory, ctx.agents, ctx.agent_id)
    _section(lines, render_mission_overview, ctx)
    _section(
        lines,
        render_task_section,
        "Assigned Tasks",
        ctx.assigned_tasks,
        "_No assigned tasks._",
        ctx.mission_id,
        ctx.agent_id,
    )
    _section(
        lines,
        render_unread_mentions,
        ctx.mission_id,
        ctx.agent_id,
        ctx.manager_agent_id,
        len(ctx.unread_mentions),
        ctx.unread_task_ids,
        ctx.unread_by_task,
        ctx.task_title_by_id,
    )
    _section(lines, render_working, ctx.working_events)
    _section(lines, render_memory, ctx.memory)
    _section(lines, render_dark_secret, ctx.dark_secret)

    lines.append(WORKER_PLAYBOOK.format(artifacts=artifacts))
    lines.append("")
    lines.append(WORKER_COMMANDS.format(mission=ctx.mission_id, agent=ctx.agent_id))
    return lines


def build_manager_wake_lines(ctx: WakeContext) -> list[str]:
    lines = [MANAGER_HEADER.format(mission=ctx.mission_id), ""]
    artifacts = paths.artifacts_dir(ctx.mission_path)
    task_section = (ctx.mission_id, ctx.agent_id, True)

    _section(lines, render_identity, ctx.agent, len(ctx.unread_mentions))
    _section(lines, render_team_directory, ctx.agents, ctx.agent_id)
    _section(lines, render_mission_overview, ctx)
    _section(lines, render_task_dashboard, ctx)
    _section(
        lines,
        render_task_section,
        "Unassigned Tasks (not completed)",
        unassigned_active_tasks(ctx.all_tasks),
        "_No unassigned tasks._",
        *task_section,
    )
    _section(
        lines,
        render_task_section,
        "Blocked Tasks",
        blocked_tasks(ctx.all_tasks),
        "_No blocked tasks._",
        *task_section,
    )
    _section(
        lines,
        render_task_section,
        "Pending Tasks",
        tasks_by_status(ctx.all_tasks, TaskStatus.PENDING),
        "_No pending tasks._",
        *task_section,
    )
    _section(
        lines,
        render_task_section,
        "Ongoing Tasks",
        tasks_by_status(ctx.all_tasks, TaskStatus.ONGOING),
        "_No ongoing tasks._",
        *task_section,
    )
    _section(lines, render_thread_activity, ctx)
    _section(
        lines,
        render_unread_mentions,
        ctx.mission_id,
        ctx.agent_id,
        None,
        len(ctx.unread_mentions),
        ctx.unread_task_ids,
        ctx.unread_by_task,
        ctx.task_title_by_id,
    )
    _section(lines, render_team_working, ctx.team_working)
    _section(lines, render_working, ctx.working_events)
    _section(lines, render_memory, ctx.memory)
    _section(lines, render_dark_secret, ctx.dark_secret)

    lines.append(MANAGER_PLAYBOOK.format(artifacts=artifacts))
    lines.append("")
    lines.append(MANAGER_COMMANDS.format(mission=ctx.mission_id, agent=ctx.agent_id))
    if ctx.unread_mentions:
        lines.append("")
        lines.append(AUTO_ACK_FOOTER)
    return lines
