"""Task primitive: the mission board and derived status."""

from .api import (
    assign_task,
    assigned_active_tasks,
    blocked_tasks,
    count_by_status,
    create_task,
    get_task,
    list_tasks,
    unassigned_active_tasks,
    update_task,
    with_status,
)
from .status import resolve_column_id_for_status, resolve_status_for_column

__all__ = [
    "assign_task",
    "assigned_active_tasks",
    "blocked_tasks",
    "count_by_status",
    "create_task",
    "get_task",
    "list_tasks",
    "resolve_column_id_for_status",
    "resolve_status_for_column",
    "unassigned_active_tasks",
    "update_task",
    "with_status",
]
