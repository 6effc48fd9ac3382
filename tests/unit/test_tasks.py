"""Task board operations."""

import pytest

from clawion.errors import ClawionError, NotFoundError
from clawion.lib import fs, paths
from clawion.models import TaskColumn, TasksFile, TaskStatus
from clawion.task.api import (
    assign_task,
    count_by_status,
    create_task,
    get_task,
    incomplete_tasks,
    list_tasks,
    update_task,
    with_status,
)
from clawion.task.format import format_incomplete_tasks, format_task_list


def test_create_task_lands_in_pending_column(missions_dir, mission):
    task = create_task(missions_dir, mission, "t2", "Write docs", "Document the API")

    assert task.column_id == "pending"
    assert get_task(missions_dir, mission, "t2").status == TaskStatus.PENDING
    assert [t.id for t in list_tasks(missions_dir, mission).tasks] == ["t1", "t2"]


def test_create_duplicate_task_fails(missions_dir, mission):
    with pytest.raises(ClawionError, match="Task already exists: t1"):
        create_task(missions_dir, mission, "t1", "Again", "Dup")


def test_create_task_on_empty_board_fails(missions_dir, mission, mission_path):
    board = fs.read_json(paths.tasks_json(mission_path), TasksFile)
    board.columns = []
    fs.write_json_atomic(paths.tasks_json(mission_path), board)

    with pytest.raises(ClawionError, match="No columns available"):
        create_task(missions_dir, mission, "t2", "Write docs", "Document the API")


def test_update_status_moves_column(missions_dir, mission):
    updated = update_task(missions_dir, mission, "t1", status=TaskStatus.ONGOING, status_notes="Started")

    assert updated.column_id == "ongoing"
    view = get_task(missions_dir, mission, "t1")
    assert view.status == TaskStatus.ONGOING
    assert view.status_notes == "Started"


def test_update_notes_keeps_column(missions_dir, mission):
    update_task(missions_dir, mission, "t1", status_notes="Just notes")
    assert get_task(missions_dir, mission, "t1").column_id == "pending"


def test_status_follows_custom_columns(missions_dir, mission, mission_path):
    board = fs.read_json(paths.tasks_json(mission_path), TasksFile)
    board.columns = [
        TaskColumn(id="backlog", name="Backlog", order=0),
        TaskColumn(id="wip", name="Work", order=1),
        TaskColumn(id="shipped", name="Shipped", order=2),
    ]
    board.tasks[0].column_id = "backlog"
    fs.write_json_atomic(paths.tasks_json(mission_path), board)

    update_task(missions_dir, mission, "t1", status="completed")

    view = get_task(missions_dir, mission, "t1")
    assert view.column_id == "shipped"
    assert view.status == TaskStatus.COMPLETED


def test_missing_task_raises(missions_dir, mission):
    with pytest.raises(NotFoundError, match="Task not found: nope"):
        update_task(missions_dir, mission, "nope", status="ongoing")
    with pytest.raises(NotFoundError):
        assign_task(missions_dir, mission, "nope", "agent-1")


def test_assign_task(missions_dir, mission):
    assign_task(missions_dir, mission, "t1", "agent-1")
    assert get_task(missions_dir, mission, "t1").assignee_agent_id == "agent-1"


def test_counts_and_incomplete(missions_dir, mission):
    create_task(missions_dir, mission, "t2", "Docs", "Write docs")
    update_task(missions_dir, mission, "t2", status="completed")

    tasks = with_status(list_tasks(missions_dir, mission))
    counts = count_by_status(tasks)
    assert counts[TaskStatus.PENDING] == 1
    assert counts[TaskStatus.COMPLETED] == 1
    assert counts[TaskStatus.BLOCKED] == 0
    assert [t.id for t in incomplete_tasks(tasks)] == ["t1"]

    message = format_incomplete_tasks(incomplete_tasks(tasks))
    assert message.startswith("Cannot complete mission: 1 task(s) not completed.")
    assert "- t1 (Build Login) - pending, unassigned" in message


def test_format_task_list(missions_dir, mission):
    assert format_task_list([]) == "No tasks"
    assign_task(missions_dir, mission, "t1", "agent-1")
    update_task(missions_dir, mission, "t1", status_notes="halfway")
    tasks = with_status(list_tasks(missions_dir, mission))
    assert format_task_list(tasks) == "[t1] Build Login (pending) @agent-1 - halfway"
