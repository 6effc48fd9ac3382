"""Mission operations: create, show, roadmap, completion."""

import logging
import shutil
from pathlib import Path

from clawion.errors import ClawionError
from clawion.lib import clock, fs, paths
from clawion.models import Mission, MissionIndexEntry, TasksFile

from .workspace import add_index_entry, load_index, resolve_mission_path, update_index_entry

logger = logging.getLogger(__name__)


def create_mission(missions_dir: Path, mission_id: str, name: str, description: str = "") -> Mission:
    mission_dir = missions_dir / mission_id
    if mission_dir.exists():
        raise ClawionError(f"Mission directory already exists: {mission_id}")

    now = clock.now_local()
    mission = Mission(
        id=mission_id,
        name=name,
        description=description,
        status="active",
        created_at=now,
        updated_at=now,
    )
    shutil.copytree(paths.template_dir(missions_dir), mission_dir)
    fs.write_json_atomic(paths.mission_json(mission_dir), mission)

    tasks = fs.read_json(paths.tasks_json(mission_dir), TasksFile)
    tasks.description = f"Tasks for {name}."
    fs.write_json_atomic(paths.tasks_json(mission_dir), tasks)

    add_index_entry(
        missions_dir,
        MissionIndexEntry(
            id=mission_id,
            name=name,
            description=description,
            path=mission_id,
            status="active",
            created_at=now,
            updated_at=now,
        ),
    )
    logger.info(f"Created mission {mission_id}")
    return mission


def list_missions(missions_dir: Path) -> list[MissionIndexEntry]:
    return load_index(missions_dir).missions


def get_mission(missions_dir: Path, mission_id: str) -> Mission:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    return fs.read_json(paths.mission_json(mission_path), Mission)


def read_roadmap(missions_dir: Path, mission_id: str) -> str:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    return fs.read_markdown(paths.roadmap_md(mission_path))


def show_mission(missions_dir: Path, mission_id: str) -> tuple[Mission, str]:
    return get_mission(missions_dir, mission_id), read_roadmap(missions_dir, mission_id)


def update_mission_description(missions_dir: Path, mission_id: str, description: str) -> Mission:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    mission = fs.read_json(paths.mission_json(mission_path), Mission)
    updated = mission.model_copy(update={"description": description, "updated_at": clock.now_local()})
    fs.write_json_atomic(paths.mission_json(mission_path), updated)
    update_index_entry(missions_dir, mission_id, description=description, updated_at=updated.updated_at)
    return updated


def update_mission_roadmap(missions_dir: Path, mission_id: str, roadmap: str) -> None:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    fs.write_markdown_atomic(paths.roadmap_md(mission_path), roadmap)
    logger.info(f"Roadmap written for mission {mission_id}")


def complete_mission(missions_dir: Path, mission_id: str) -> Mission:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    mission = fs.read_json(paths.mission_json(mission_path), Mission)
    updated = mission.model_copy(update={"status": "completed", "updated_at": clock.now_local()})
    fs.write_json_atomic(paths.mission_json(mission_path), updated)
    update_index_entry(missions_dir, mission_id, status="completed", updated_at=updated.updated_at)
    logger.info(f"Completed mission {mission_id}")
    return updated
