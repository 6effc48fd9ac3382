"""Column/status mapping: alias match, positional fallback, totality."""

import pytest

from clawion.models import TaskColumn, TaskStatus
from clawion.mission.workspace import DEFAULT_COLUMNS
from clawion.task.status import resolve_column_id_for_status, resolve_status_for_column


def _columns(*names):
    return [TaskColumn(id=name.lower(), name=name, order=i) for i, name in enumerate(names)]


def test_default_columns_round_trip():
    """Contract: exact alias columns map both ways."""
    for column, status in zip(DEFAULT_COLUMNS, TaskStatus):
        assert resolve_status_for_column(DEFAULT_COLUMNS, column.id) == status
        assert resolve_column_id_for_status(DEFAULT_COLUMNS, status) == column.id


def test_alias_matches_name_substring():
    columns = [
        TaskColumn(id="backlog", name="To Do", order=0),
        TaskColumn(id="wip", name="In Progress (team)", order=1),
        TaskColumn(id="shipped", name="Done", order=2),
    ]
    assert resolve_status_for_column(columns, "backlog") == TaskStatus.PENDING
    assert resolve_status_for_column(columns, "wip") == TaskStatus.ONGOING
    assert resolve_status_for_column(columns, "shipped") == TaskStatus.COMPLETED
    assert resolve_column_id_for_status(columns, "ongoing") == "wip"


def test_alias_precedence_follows_status_order():
    """Contract: first status in declaration order wins when several match."""
    columns = [TaskColumn(id="x", name="Blocked but done", order=0)]
    assert resolve_status_for_column(columns, "x") == TaskStatus.BLOCKED


def test_positional_three_columns():
    columns = _columns("Start", "Middle", "End")
    assert resolve_status_for_column(columns, "start") == TaskStatus.PENDING
    assert resolve_status_for_column(columns, "middle") == TaskStatus.ONGOING
    assert resolve_status_for_column(columns, "end") == TaskStatus.COMPLETED


def test_positional_four_columns_third_is_blocked():
    columns = _columns("Alpha", "Beta", "Gamma", "Omega")
    assert resolve_status_for_column(columns, "gamma") == TaskStatus.BLOCKED
    assert resolve_status_for_column(columns, "omega") == TaskStatus.COMPLETED


def test_positional_uses_order_not_list_position():
    columns = [
        TaskColumn(id="c", name="Gamma", order=30),
        TaskColumn(id="a", name="Alpha", order=10),
        TaskColumn(id="b", name="Beta", order=20),
    ]
    assert resolve_status_for_column(columns, "a") == TaskStatus.PENDING
    assert resolve_status_for_column(columns, "b") == TaskStatus.ONGOING
    assert resolve_status_for_column(columns, "c") == TaskStatus.COMPLETED


def test_single_column_is_pending():
    """Boundary: first slot wins over last on a one-column board."""
    columns = _columns("Only")
    assert resolve_status_for_column(columns, "only") == TaskStatus.PENDING


def test_unknown_column_is_pending():
    """Boundary: unknown column ids never raise."""
    assert resolve_status_for_column(_columns("Start", "End"), "missing") == TaskStatus.PENDING
    assert resolve_status_for_column([], "missing") == TaskStatus.PENDING


def test_totality_over_many_boards():
    for size in range(1, 7):
        columns = _columns(*[f"Lane{i}" for i in range(size)])
        for column in columns:
            assert resolve_status_for_column(columns, column.id) in set(TaskStatus)
        for status in TaskStatus:
            assert resolve_column_id_for_status(columns, status) in {c.id for c in columns}


def test_inverse_positional_fallback():
    columns = _columns("Alpha", "Beta")
    assert resolve_column_id_for_status(columns, TaskStatus.PENDING) == "alpha"
    assert resolve_column_id_for_status(columns, TaskStatus.ONGOING) == "beta"
    assert resolve_column_id_for_status(columns, TaskStatus.BLOCKED) == "beta"
    assert resolve_column_id_for_status(columns, TaskStatus.COMPLETED) == "beta"

    single = _columns("Only")
    for status in TaskStatus:
        assert resolve_column_id_for_status(single, status) == "only"

    four = _columns("Alpha", "Beta", "Gamma", "Omega")
    assert resolve_column_id_for_status(four, TaskStatus.BLOCKED) == "gamma"
    assert resolve_column_id_for_status(four, TaskStatus.COMPLETED) == "omega"


def test_empty_columns_raise():
    """Boundary: no target column exists on an empty board."""
    for status in TaskStatus:
        with pytest.raises(ValueError, match="No columns available"):
            resolve_column_id_for_status([], status)


def test_invalid_status_raises():
    with pytest.raises(ValueError):
        resolve_column_id_for_status(DEFAULT_COLUMNS, "archived")
