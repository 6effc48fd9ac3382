"""Per-task message threads: one append-only JSONL file per task."""

import logging
from collections.abc import Iterator
from pathlib import Path

from clawion.lib import clock, fs, ids, paths
from clawion.mission.workspace import resolve_mission_path
from clawion.models import ThreadMessage, ThreadSummary

logger = logging.getLogger(__name__)

THREAD_SUFFIX = ".jsonl"


def add_thread_message(
    missions_dir: Path,
    mission_id: str,
    task_id: str,
    author_agent_id: str,
    mentions_agent_ids: list[str],
    content: str,
) -> ThreadMessage:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    message = ThreadMessage(
        id=ids.new_id(),
        created_at=clock.now_local(),
        author_agent_id=author_agent_id,
        mentions_agent_ids=mentions_agent_ids,
        content=content,
    )
    fs.append_jsonl(paths.thread_file(mission_path, task_id), message)
    logger.info(f"Message {message.id} on {mission_id}/{task_id} mentions {','.join(mentions_agent_ids)}")
    return message


def list_thread_messages(missions_dir: Path, mission_id: str, task_id: str) -> list[ThreadMessage]:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    return fs.read_jsonl(paths.thread_file(mission_path, task_id), ThreadMessage)


def iter_thread_files(mission_path: Path) -> Iterator[tuple[str, Path]]:
    """(task_id, path) for every thread file, in stable name order."""
    threads = paths.threads_dir(mission_path)
    if not threads.exists():
        return
    for path in sorted(threads.glob(f"*{THREAD_SUFFIX}")):
        yield path.name[: -len(THREAD_SUFFIX)], path


def summarize(task_id: str, messages: list[ThreadMessage]) -> ThreadSummary:
    last = messages[-1] if messages else None
    return ThreadSummary(
        task_id=task_id,
        message_count=len(messages),
        last_message_at=last.created_at if last else None,
        last_author_agent_id=last.author_agent_id if last else None,
        last_mentions_agent_ids=list(last.mentions_agent_ids) if last else [],
    )


def list_threads(missions_dir: Path, mission_id: str) -> list[ThreadSummary]:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    return [
        summarize(task_id, fs.read_jsonl(path, ThreadMessage))
        for task_id, path in iter_thread_files(mission_path)
    ]


def recent_threads(summaries: list[ThreadSummary], limit: int = 12) -> list[ThreadSummary]:
    """Most recently active threads first."""
    ordered = sorted(summaries, key=lambda s: s.last_message_at or "", reverse=True)
    return ordered[:limit]
