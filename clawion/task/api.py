"""Task board operations and status-derived task views."""

import logging
from collections import Counter
from pathlib import Path

from clawion.errors import ClawionError, NotFoundError
from clawion.lib import clock, fs, paths
from clawion.mission.workspace import resolve_mission_path
from clawion.models import Task, TasksFile, TaskStatus, TaskView

from .status import resolve_column_id_for_status, resolve_status_for_column

logger = logging.getLogger(__name__)


def list_tasks(missions_dir: Path, mission_id: str) -> TasksFile:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    return fs.read_json(paths.tasks_json(mission_path), TasksFile)


def _save(missions_dir: Path, mission_id: str, tasks_file: TasksFile) -> None:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    validated = TasksFile.model_validate(tasks_file.dump())
    fs.write_json_atomic(paths.tasks_json(mission_path), validated)


def _find(tasks_file: TasksFile, task_id: str) -> int:
    for position, task in enumerate(tasks_file.tasks):
        if task.id == task_id:
            return position
    raise NotFoundError(f"Task not found: {task_id}")


def get_task(missions_dir: Path, mission_id: str, task_id: str) -> TaskView:
    tasks_file = list_tasks(missions_dir, mission_id)
    task = tasks_file.tasks[_find(tasks_file, task_id)]
    return decorate(tasks_file, task)


def create_task(missions_dir: Path, mission_id: str, task_id: str, title: str, description: str) -> Task:
    tasks_file = list_tasks(missions_dir, mission_id)
    if any(task.id == task_id for task in tasks_file.tasks):
        raise ClawionError(f"Task already exists: {task_id}")

    try:
        column_id = resolve_column_id_for_status(tasks_file.columns, TaskStatus.PENDING)
    except ValueError as e:
        raise ClawionError("No columns available to assign task.") from e

    now = clock.now_local()
    task = Task(
        id=task_id,
        title=title,
        description=description,
        column_id=column_id,
        status_notes="",
        created_at=now,
        updated_at=now,
    )
    tasks_file.tasks.append(task)
    _save(missions_dir, mission_id, tasks_file)
    logger.info(f"Created task {task_id} in {mission_id}")
    return task


def update_task(
    missions_dir: Path,
    mission_id: str,
    task_id: str,
    status: TaskStatus | str | None = None,
    status_notes: str | None = None,
) -> Task:
    tasks_file = list_tasks(missions_dir, mission_id)
    position = _find(tasks_file, task_id)
    task = tasks_file.tasks[position]

    column_id = task.column_id
    if status is not None:
        column_id = resolve_column_id_for_status(tasks_file.columns, status)

    updated = task.model_copy(
        update={
            "column_id": column_id,
            "status_notes": task.status_notes if status_notes is None else status_notes,
            "updated_at": clock.now_local(),
        }
    )
    tasks_file.tasks[position] = updated
    _save(missions_dir, mission_id, tasks_file)
    return updated


def assign_task(missions_dir: Path, mission_id: str, task_id: str, assignee_agent_id: str) -> Task:
    tasks_file = list_tasks(missions_dir, mission_id)
    position = _find(tasks_file, task_id)
    updated = tasks_file.tasks[position].model_copy(
        update={"assignee_agent_id": assignee_agent_id, "updated_at": clock.now_local()}
    )
    tasks_file.tasks[position] = updated
    _save(missions_dir, mission_id, tasks_file)
    logger.info(f"Assigned task {task_id} to {assignee_agent_id}")
    return updated


def decorate(tasks_file: TasksFile, task: Task) -> TaskView:
    status = resolve_status_for_column(tasks_file.columns, task.column_id)
    return TaskView(**task.model_dump(), status=status)


def with_status(tasks_file: TasksFile) -> list[TaskView]:
    """Every task decorated with its derived status, in board order."""
    return [decorate(tasks_file, task) for task in tasks_file.tasks]


def assigned_active_tasks(tasks: list[TaskView], agent_id: str) -> list[TaskView]:
    return [t for t in tasks if t.assignee_agent_id == agent_id and t.status != TaskStatus.COMPLETED]


def unassigned_active_tasks(tasks: list[TaskView]) -> list[TaskView]:
    return [t for t in tasks if not t.assignee_agent_id and t.status != TaskStatus.COMPLETED]


def blocked_tasks(tasks: list[TaskView]) -> list[TaskView]:
    return tasks_by_status(tasks, TaskStatus.BLOCKED)


def tasks_by_status(tasks: list[TaskView], status: TaskStatus) -> list[TaskView]:
    return [t for t in tasks if t.status == status]


def count_by_status(tasks: list[TaskView]) -> dict[TaskStatus, int]:
    counts = Counter(t.status for t in tasks)
    return {status: counts.get(status, 0) for status in TaskStatus}


def incomplete_tasks(tasks: list[TaskView]) -> list[TaskView]:
    return [t for t in tasks if t.status != TaskStatus.COMPLETED]
