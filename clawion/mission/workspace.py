"""Workspace bootstrap and the missions index."""

import logging
from pathlib import Path

from clawion.errors import ClawionError, NotFoundError
from clawion.lib import clock, fs, paths
from clawion.models import AgentsFile, Mission, MissionIndexEntry, MissionsIndex, TaskColumn, TasksFile

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = [
    TaskColumn(id="pending", name="Pending", order=1),
    TaskColumn(id="ongoing", name="Ongoing", order=2),
    TaskColumn(id="blocked", name="Blocked", order=3),
    TaskColumn(id="completed", name="Completed", order=4),
]

TEMPLATE_DIRS = ("threads", "inbox", "working", "memory", "secrets", "artifacts")


def _ensure_json(path: Path, document) -> None:
    if path.exists():
        return
    fs.write_json_atomic(path, document)


def ensure_workspace(missions_dir: Path) -> None:
    """Create index.json and the mission template if missing. Never overwrites."""
    missions_dir.mkdir(parents=True, exist_ok=True)
    now = clock.now_local()

    _ensure_json(paths.index_file(missions_dir), MissionsIndex(updated_at=now))

    template = paths.template_dir(missions_dir)
    template.mkdir(parents=True, exist_ok=True)
    _ensure_json(
        paths.mission_json(template),
        Mission(
            id="template",
            name="Template Mission",
            description="Describe this mission.",
            created_at=now,
            updated_at=now,
        ),
    )
    _ensure_json(
        paths.tasks_json(template),
        TasksFile(description="Tasks for this mission.", columns=DEFAULT_COLUMNS),
    )
    _ensure_json(paths.agents_json(template), AgentsFile())

    roadmap = paths.roadmap_md(template)
    if not roadmap.exists():
        fs.write_markdown_atomic(roadmap, "")

    for name in TEMPLATE_DIRS:
        (template / name).mkdir(exist_ok=True)


def load_index(missions_dir: Path) -> MissionsIndex:
    index_path = paths.index_file(missions_dir)
    try:
        return fs.read_json(index_path, MissionsIndex)
    except NotFoundError as e:
        raise NotFoundError(f"Missions index not found: {index_path}. Is this a valid workspace?") from e


def save_index(missions_dir: Path, index: MissionsIndex) -> None:
    fs.write_json_atomic(paths.index_file(missions_dir), index)


def add_index_entry(missions_dir: Path, entry: MissionIndexEntry) -> None:
    index = load_index(missions_dir)
    if any(mission.id == entry.id for mission in index.missions):
        raise ClawionError(f"Mission already exists in index: {entry.id}")

    index.missions.append(entry)
    index.updated_at = clock.now_local()
    save_index(missions_dir, index)
    logger.info(f"Indexed mission {entry.id}")


def update_index_entry(missions_dir: Path, mission_id: str, **updates) -> None:
    index = load_index(missions_dir)
    for position, entry in enumerate(index.missions):
        if entry.id == mission_id:
            index.missions[position] = entry.model_copy(update=updates)
            break
    else:
        raise NotFoundError(f"Mission not found in index: {mission_id}")

    index.updated_at = clock.now_local()
    save_index(missions_dir, index)


def resolve_mission_path(missions_dir: Path, mission_id: str) -> Path:
    index = load_index(missions_dir)
    entry = next((mission for mission in index.missions if mission.id == mission_id), None)
    if entry is None:
        raise NotFoundError(f"Mission not found: {mission_id}")

    path = Path(entry.path)
    if path.is_absolute():
        return path
    return missions_dir / path
