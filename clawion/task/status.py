"""Board column <-> semantic status mapping.

Mission authors name their columns freely, so meaning is inferred: first by
alias match on the column id/name, then by position on the board. Both
directions are total and deterministic for any non-empty column set; status
is always derived from placement and never stored on the task.
"""

from collections.abc import Sequence

from clawion.models import TaskColumn, TaskStatus

STATUS_ALIASES: dict[TaskStatus, tuple[str, ...]] = {
    TaskStatus.PENDING: ("pending", "todo", "to do"),
    TaskStatus.ONGOING: ("ongoing", "doing", "in progress", "in-progress"),
    TaskStatus.BLOCKED: ("blocked",),
    TaskStatus.COMPLETED: ("completed", "done", "complete"),
}

# Positional policy for boards without recognizable names. Assumes a
# todo -> doing -> (blocked | other) -> done workflow: slot 0 is pending,
# slot 1 ongoing, the last slot completed, and anything in between blocked.
# The first slot wins over the last on a one-column board; the last wins
# over slot 1 on a two-column board.
FIRST_SLOT_STATUS = TaskStatus.PENDING
LAST_SLOT_STATUS = TaskStatus.COMPLETED
SLOT_STATUS = {1: TaskStatus.ONGOING}
MIDDLE_SLOT_STATUS = TaskStatus.BLOCKED

# Inverse policy: preferred board slots per status, first valid one wins.
STATUS_SLOTS: dict[TaskStatus, tuple[int, ...]] = {
    TaskStatus.PENDING: (0,),
    TaskStatus.ONGOING: (1, 0),
    TaskStatus.BLOCKED: (2, -1, 0),
    TaskStatus.COMPLETED: (-1,),
}


def _normalize(value: str) -> str:
    return value.strip().lower()


def column_matches_status(column: TaskColumn, status: TaskStatus) -> bool:
    column_id = _normalize(column.id)
    name = _normalize(column.name)
    for alias in STATUS_ALIASES[status]:
        key = _normalize(alias)
        if column_id == key or name == key or key in name:
            return True
    return False


def sorted_columns(columns: Sequence[TaskColumn]) -> list[TaskColumn]:
    return sorted(columns, key=lambda column: column.order)


def _status_for_slot(index: int, count: int) -> TaskStatus:
    if index <= 0:
        return FIRST_SLOT_STATUS
    if index == count - 1:
        return LAST_SLOT_STATUS
    return SLOT_STATUS.get(index, MIDDLE_SLOT_STATUS)


def resolve_status_for_column(columns: Sequence[TaskColumn], column_id: str) -> TaskStatus:
    """Status of a task sitting in column_id. Unknown columns read as pending."""
    column = next((entry for entry in columns if entry.id == column_id), None)
    if column is None:
        return TaskStatus.PENDING

    for status in TaskStatus:
        if column_matches_status(column, status):
            return status

    ordered = sorted_columns(columns)
    index = next(i for i, entry in enumerate(ordered) if entry.id == column_id)
    return _status_for_slot(index, len(ordered))


def resolve_column_id_for_status(columns: Sequence[TaskColumn], status: TaskStatus | str) -> str:
    """Column a task should move to for status. Raises on an empty board."""
    status = TaskStatus(status)
    direct = next((column for column in columns if column_matches_status(column, status)), None)
    if direct is not None:
        return direct.id

    ordered = sorted_columns(columns)
    if not ordered:
        raise ValueError("No columns available to map task status.")

    for slot in STATUS_SLOTS[status]:
        if -len(ordered) <= slot < len(ordered):
            return ordered[slot].id
    return ordered[0].id
