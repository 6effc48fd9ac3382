"""Inbox acknowledgements: per-agent append-only ledger of seen messages.

The ledger is a log, read back as a set: a message id counts as acknowledged
once it appears at least once. Duplicate acks are harmless.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from clawion.lib import clock, fs, paths
from clawion.mission.workspace import resolve_mission_path
from clawion.models import AckAllResult, InboxAck, ThreadMessage, UnackedMention

logger = logging.getLogger(__name__)

MAX_WORKERS = 8


def _ledger_path(mission_path: Path, agent_id: str) -> Path:
    return paths.inbox_file(mission_path, agent_id)


def read_ledger(mission_path: Path, agent_id: str) -> list[InboxAck]:
    return fs.read_jsonl(_ledger_path(mission_path, agent_id), InboxAck)


def write_ack(
    mission_path: Path, mission_id: str, agent_id: str, message_id: str, task_id: str | None = None
) -> InboxAck:
    entry = InboxAck(
        acked_at=clock.now_local(),
        mission_id=mission_id,
        agent_id=agent_id,
        message_id=message_id,
        task_id=task_id,
    )
    fs.append_jsonl(_ledger_path(mission_path, agent_id), entry)
    return entry


def append_ack(
    missions_dir: Path, mission_id: str, agent_id: str, message_id: str, task_id: str | None = None
) -> InboxAck:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    return write_ack(mission_path, mission_id, agent_id, message_id, task_id)


def list_acks(missions_dir: Path, mission_id: str, agent_id: str) -> list[InboxAck]:
    """Full ledger in append order; [] for an agent that never acknowledged."""
    mission_path = resolve_mission_path(missions_dir, mission_id)
    return read_ledger(mission_path, agent_id)


def acked_message_ids(acks: list[InboxAck]) -> set[str]:
    return {entry.message_id for entry in acks}


def _acked_sets(mission_path: Path, agent_ids: list[str]) -> dict[str, set[str]]:
    if not agent_ids:
        return {}
    with ThreadPoolExecutor(max_workers=min(MAX_WORKERS, len(agent_ids))) as executor:
        ledgers = executor.map(lambda agent_id: read_ledger(mission_path, agent_id), agent_ids)
        return {agent_id: acked_message_ids(ledger) for agent_id, ledger in zip(agent_ids, ledgers)}


def pending_mentions(
    mission_path: Path, task_id: str, messages: list[ThreadMessage]
) -> list[UnackedMention]:
    mentioned = list(dict.fromkeys(a for message in messages for a in message.mentions_agent_ids))
    acked = _acked_sets(mission_path, mentioned)

    pending = []
    seen = set()
    for message in messages:
        if message.id in seen:
            continue
        seen.add(message.id)
        unacked = [
            agent_id
            for agent_id in dict.fromkeys(message.mentions_agent_ids)
            if message.id not in acked[agent_id]
        ]
        if unacked:
            pending.append(
                UnackedMention(
                    task_id=task_id,
                    message_id=message.id,
                    author_agent_id=message.author_agent_id,
                    created_at=message.created_at,
                    unacked_agent_ids=unacked,
                )
            )
    return pending


def list_unacked_task_mentions(missions_dir: Path, mission_id: str, task_id: str) -> list[UnackedMention]:
    """Messages in a task thread with at least one mentioned agent not yet acked."""
    mission_path = resolve_mission_path(missions_dir, mission_id)
    messages = fs.read_jsonl(paths.thread_file(mission_path, task_id), ThreadMessage)
    if not messages:
        return []
    return pending_mentions(mission_path, task_id, messages)


def acknowledge_all_task_mentions(missions_dir: Path, mission_id: str, task_id: str) -> AckAllResult:
    """Ack every pending (message, agent) pair of a thread. No writes when nothing is pending."""
    mission_path = resolve_mission_path(missions_dir, mission_id)
    messages = fs.read_jsonl(paths.thread_file(mission_path, task_id), ThreadMessage)
    pending = pending_mentions(mission_path, task_id, messages) if messages else []
    pairs = [(m.message_id, agent_id) for m in pending for agent_id in m.unacked_agent_ids]
    if not pairs:
        return AckAllResult()

    with ThreadPoolExecutor(max_workers=min(MAX_WORKERS, len(pairs))) as executor:
        futures = [
            executor.submit(write_ack, mission_path, mission_id, agent_id, message_id, task_id)
            for message_id, agent_id in pairs
        ]
        for future in futures:
            future.result()

    result = AckAllResult(
        acked_entries=len(pairs),
        acked_messages=len({message_id for message_id, _ in pairs}),
        acked_agents=len({agent_id for _, agent_id in pairs}),
    )
    logger.info(
        f"Acked {result.acked_entries} mentions on {mission_id}/{task_id} "
        f"({result.acked_messages} messages, {result.acked_agents} agents)"
    )
    return result


def collect_pending_ack_agent_ids(mentions: list[UnackedMention]) -> list[str]:
    return sorted({agent_id for mention in mentions for agent_id in mention.unacked_agent_ids})
