"""Wake: assemble one agent's consolidated mission briefing, then ack what it showed."""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from clawion.agent.api import list_agents
from clawion.errors import NotFoundError
from clawion.inbox.api import acked_message_ids, read_ledger, write_ack
from clawion.lib import clock, fs
from clawion.memory.api import read_memory, read_secret
from clawion.mission.api import show_mission
from clawion.mission.workspace import resolve_mission_path
from clawion.models import (
    Agent,
    Mission,
    TasksFile,
    TaskView,
    ThreadMessage,
    ThreadSummary,
    UnreadMention,
    WorkingEvent,
)
from clawion.task.api import assigned_active_tasks, list_tasks, with_status
from clawion.thread.api import iter_thread_files, list_threads
from clawion.working.api import read_working

logger = logging.getLogger(__name__)

MAX_WORKERS = 8


@dataclass
class TeamWorkingSnapshot:
    agent_id: str
    display_name: str
    system_role: str
    event_count: int
    last_event: WorkingEvent | None = None


@dataclass
class WakeContext:
    mission_id: str
    agent_id: str
    mission_path: Path
    generated_at: str
    agent: Agent
    agents: list[Agent]
    mission: Mission
    roadmap: str = ""
    all_tasks: list[TaskView] = field(default_factory=list)
    assigned_tasks: list[TaskView] = field(default_factory=list)
    unread_mentions: list[UnreadMention] = field(default_factory=list)
    unread_by_task: dict[str, list[UnreadMention]] = field(default_factory=dict)
    unread_task_ids: list[str] = field(default_factory=list)
    task_title_by_id: dict[str, str] = field(default_factory=dict)
    working_events: list[WorkingEvent] = field(default_factory=list)
    memory: str = ""
    dark_secret: str = ""
    # manager-only, empty for workers
    thread_summaries: list[ThreadSummary] = field(default_factory=list)
    team_working: list[TeamWorkingSnapshot] = field(default_factory=list)

    @property
    def is_manager(self) -> bool:
        return self.agent.system_role == "manager"

    @property
    def manager_agent_id(self) -> str | None:
        """First registered manager other than the waking agent."""
        return next(
            (a.id for a in self.agents if a.system_role == "manager" and a.id != self.agent_id),
            None,
        )


@dataclass
class WakeResult:
    report: str
    acked: list[str] = field(default_factory=list)
    ack_failures: list[str] = field(default_factory=list)


def build_task_title_by_id(tasks_file: TasksFile) -> dict[str, str]:
    return {task.id: task.title for task in tasks_file.tasks}


def list_unread_mentions(mission_path: Path, agent_id: str, acked_ids: set[str]) -> list[UnreadMention]:
    """Every thread message mentioning agent_id whose id is not in acked_ids.

    One pass over all thread files; the caller loads the ledger once.
    """
    unread = []
    for task_id, path in iter_thread_files(mission_path):
        for message in fs.read_jsonl(path, ThreadMessage):
            if agent_id not in message.mentions_agent_ids or message.id in acked_ids:
                continue
            unread.append(
                UnreadMention(
                    task_id=task_id,
                    message_id=message.id,
                    author_agent_id=message.author_agent_id,
                    mentions_agent_ids=list(message.mentions_agent_ids),
                    content=message.content,
                    created_at=message.created_at,
                )
            )
    return unread


def group_unread_mentions(
    mentions: list[UnreadMention],
) -> tuple[dict[str, list[UnreadMention]], list[str]]:
    """Group by task, oldest first within a task; tasks ordered by their oldest mention."""
    by_task: dict[str, list[UnreadMention]] = {}
    for mention in sorted(mentions, key=lambda m: m.created_at):
        by_task.setdefault(mention.task_id, []).append(mention)
    task_ids = sorted(by_task, key=lambda task_id: by_task[task_id][0].created_at)
    return by_task, task_ids


def _team_snapshot(mission_path: Path, agent: Agent) -> TeamWorkingSnapshot:
    events = read_working(mission_path, agent.id)
    return TeamWorkingSnapshot(
        agent_id=agent.id,
        display_name=agent.display_name,
        system_role=agent.system_role,
        event_count=len(events),
        last_event=events[-1] if events else None,
    )


def build_wake_context(missions_dir: Path, mission_id: str, agent_id: str) -> WakeContext:
    """Gather everything a wake report needs. Read-only.

    Raises NotFoundError for an unknown mission or agent before anything else runs.
    """
    mission_path = resolve_mission_path(missions_dir, mission_id)
    agents_file = list_agents(mission_path)
    agent = next((entry for entry in agents_file.agents if entry.id == agent_id), None)
    if agent is None:
        raise NotFoundError(f"Agent not found: {agent_id}")
    is_manager = agent.system_role == "manager"

    with ThreadPoolExecutor(max_workers=MAX_WORKERS) as executor:
        mission_future = executor.submit(show_mission, missions_dir, mission_id)
        tasks_future = executor.submit(list_tasks, missions_dir, mission_id)
        working_future = executor.submit(read_working, mission_path, agent_id)
        memory_future = executor.submit(read_memory, missions_dir, mission_id, agent_id)
        secret_future = executor.submit(read_secret, missions_dir, mission_id, agent_id)
        acks_future = executor.submit(read_ledger, mission_path, agent_id)
        threads_future = executor.submit(list_threads, missions_dir, mission_id) if is_manager else None
        team_futures = (
            [executor.submit(_team_snapshot, mission_path, entry) for entry in agents_file.agents]
            if is_manager
            else []
        )

        mission, roadmap = mission_future.result()
        tasks_file = tasks_future.result()
        working_events = working_future.result()
        memory = memory_future.result()
        dark_secret = secret_future.result()
        acks = acks_future.result()
        thread_summaries = threads_future.result() if threads_future else []
        team_working = [future.result() for future in team_futures]

    all_tasks = with_status(tasks_file)
    unread = list_unread_mentions(mission_path, agent_id, acked_message_ids(acks))
    by_task, task_ids = group_unread_mentions(unread)

    return WakeContext(
        mission_id=mission_id,
        agent_id=agent_id,
        mission_path=mission_path,
        generated_at=clock.now_local(),
        agent=agent,
        agents=list(agents_file.agents),
        mission=mission,
        roadmap=roadmap,
        all_tasks=all_tasks,
        assigned_tasks=assigned_active_tasks(all_tasks, agent_id),
        unread_mentions=unread,
        unread_by_task=by_task,
        unread_task_ids=task_ids,
        task_title_by_id=build_task_title_by_id(tasks_file),
        working_events=working_events,
        memory=memory,
        dark_secret=dark_secret,
        thread_summaries=thread_summaries,
        team_working=team_working,
    )


def render_wake(ctx: WakeContext) -> str:
    from .render import build_manager_wake_lines, build_worker_wake_lines

    lines = build_manager_wake_lines(ctx) if ctx.is_manager else build_worker_wake_lines(ctx)
    return "\n".join(lines)


def preview_wake(missions_dir: Path, mission_id: str, agent_id: str) -> str:
    """The report a wake would print, without acknowledging anything."""
    return render_wake(build_wake_context(missions_dir, mission_id, agent_id))


def _ack_mentions(ctx: WakeContext) -> tuple[list[str], list[str]]:
    if not ctx.unread_mentions:
        return [], []

    acked, failures = [], []
    workers = min(MAX_WORKERS, len(ctx.unread_mentions))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(
                write_ack, ctx.mission_path, ctx.mission_id, ctx.agent_id, m.message_id, m.task_id
            ): m
            for m in ctx.unread_mentions
        }
        for future, mention in futures.items():
            try:
                future.result()
                acked.append(mention.message_id)
            except Exception as e:
                logger.warning(f"Ack failed for {ctx.agent_id} on message {mention.message_id}: {e}")
                failures.append(mention.message_id)
    return acked, failures


def run_wake(
    missions_dir: Path,
    mission_id: str,
    agent_id: str,
    emit: Callable[[str], None] | None = None,
) -> WakeResult:
    """Render the wake report, hand it to emit, then ack every mention it showed.

    The report reflects the unread state before acknowledgement. Ack write
    failures do not undo the report; they are logged and returned.
    """
    ctx = build_wake_context(missions_dir, mission_id, agent_id)
    report = render_wake(ctx)
    if emit is not None:
        emit(report)

    acked, failures = _ack_mentions(ctx)
    return WakeResult(report=report, acked=acked, ack_failures=failures)
