"""Per-agent memory notes and confidential briefs (Markdown)."""

from pathlib import Path

from clawion.lib import fs, paths
from clawion.mission.workspace import resolve_mission_path


def read_memory(missions_dir: Path, mission_id: str, agent_id: str) -> str:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    return fs.read_markdown(paths.memory_file(mission_path, agent_id))


def set_memory(missions_dir: Path, mission_id: str, agent_id: str, content: str) -> None:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    fs.write_markdown_atomic(paths.memory_file(mission_path, agent_id), content)


def read_secret(missions_dir: Path, mission_id: str, agent_id: str) -> str:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    return fs.read_markdown(paths.secret_file(mission_path, agent_id))


def set_secret(missions_dir: Path, mission_id: str, agent_id: str, content: str) -> None:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    fs.write_markdown_atomic(paths.secret_file(mission_path, agent_id), content)
