"""Working log: an agent's append-only progress journal."""

from pathlib import Path

from clawion.lib import clock, fs, ids, paths
from clawion.mission.workspace import resolve_mission_path
from clawion.models import WorkingEvent


def read_working(mission_path: Path, agent_id: str) -> list[WorkingEvent]:
    return fs.read_jsonl(paths.working_file(mission_path, agent_id), WorkingEvent)


def append_working_event(missions_dir: Path, mission_id: str, agent_id: str, content: str) -> WorkingEvent:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    entry = WorkingEvent(
        id=ids.new_id(),
        created_at=clock.now_local(),
        agent_id=agent_id,
        content=content,
    )
    fs.append_jsonl(paths.working_file(mission_path, agent_id), entry)
    return entry


def list_working_events(missions_dir: Path, mission_id: str, agent_id: str) -> list[WorkingEvent]:
    """Events in append order, which is chronological."""
    mission_path = resolve_mission_path(missions_dir, mission_id)
    return read_working(mission_path, agent_id)


def recent_events(events: list[WorkingEvent], limit: int) -> list[WorkingEvent]:
    """Last `limit` events by append position, newest first."""
    if limit <= 0:
        return []
    return list(reversed(events[-limit:]))
