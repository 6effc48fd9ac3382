"""Acknowledgement ledger and per-thread unacked mention scanning."""

import pytest

from clawion.agent.api import add_agent
from clawion.errors import ValidationFailure
from clawion.inbox.api import (
    acked_message_ids,
    acknowledge_all_task_mentions,
    append_ack,
    collect_pending_ack_agent_ids,
    list_acks,
    list_unacked_task_mentions,
)
from clawion.lib import paths
from clawion.thread.api import add_thread_message


def test_list_acks_empty_for_new_agent(missions_dir, mission):
    assert list_acks(missions_dir, mission, "agent-1") == []


def test_append_ack_records_entry(missions_dir, mission, mission_path):
    entry = append_ack(missions_dir, mission, "agent-1", "msg-1", "t1")

    acks = list_acks(missions_dir, mission, "agent-1")
    assert acks == [entry]
    assert entry.mission_id == mission
    assert entry.task_id == "t1"
    assert paths.inbox_file(mission_path, "agent-1").exists()


def test_duplicate_ack_is_idempotent(missions_dir, mission):
    """Contract: a message acked once or twice reads as acknowledged."""
    message = add_thread_message(missions_dir, mission, "t1", "manager-1", ["agent-1"], "Ping")

    append_ack(missions_dir, mission, "agent-1", message.id)
    assert list_unacked_task_mentions(missions_dir, mission, "t1") == []

    append_ack(missions_dir, mission, "agent-1", message.id)
    assert len(list_acks(missions_dir, mission, "agent-1")) == 2
    assert acked_message_ids(list_acks(missions_dir, mission, "agent-1")) == {message.id}
    assert list_unacked_task_mentions(missions_dir, mission, "t1") == []


def test_unacked_scan_reports_exactly_mentioning_messages(missions_dir, mission):
    first = add_thread_message(missions_dir, mission, "t1", "manager-1", ["agent-1"], "One")
    add_thread_message(missions_dir, mission, "t1", "agent-1", ["manager-1"], "Two")
    third = add_thread_message(missions_dir, mission, "t1", "manager-1", ["agent-1"], "Three")
    append_ack(missions_dir, mission, "manager-1", "unrelated")

    pending = list_unacked_task_mentions(missions_dir, mission, "t1")
    for_agent = [m for m in pending if "agent-1" in m.unacked_agent_ids]
    assert [m.message_id for m in for_agent] == [first.id, third.id]
    assert all(m.task_id == "t1" for m in pending)


def test_partial_ack_keeps_other_agents_pending(missions_dir, mission, mission_path):
    add_agent(mission_path, "agent-2", "Bob", "worker", "Backend dev")
    message = add_thread_message(missions_dir, mission, "t1", "manager-1", ["agent-1", "agent-2"], "Both")

    append_ack(missions_dir, mission, "agent-1", message.id)

    pending = list_unacked_task_mentions(missions_dir, mission, "t1")
    assert len(pending) == 1
    assert pending[0].unacked_agent_ids == ["agent-2"]
    assert collect_pending_ack_agent_ids(pending) == ["agent-2"]


def test_missing_thread_has_no_pending(missions_dir, mission):
    """Boundary: a task without a thread file is not an error."""
    assert list_unacked_task_mentions(missions_dir, mission, "t1") == []


def test_acknowledge_all_counts_and_clears(missions_dir, mission, mission_path):
    add_agent(mission_path, "agent-2", "Bob", "worker", "Backend dev")
    add_thread_message(missions_dir, mission, "t1", "manager-1", ["agent-1", "agent-2"], "Both")
    add_thread_message(missions_dir, mission, "t1", "manager-1", ["agent-1"], "Just you")

    result = acknowledge_all_task_mentions(missions_dir, mission, "t1")

    assert result.acked_entries == 3
    assert result.acked_messages == 2
    assert result.acked_agents == 2
    assert list_unacked_task_mentions(missions_dir, mission, "t1") == []


def test_acknowledge_all_without_pending_writes_nothing(missions_dir, mission, mission_path):
    """Boundary: nothing pending means no ledger files are created."""
    result = acknowledge_all_task_mentions(missions_dir, mission, "t1")

    assert (result.acked_entries, result.acked_messages, result.acked_agents) == (0, 0, 0)
    assert not paths.inbox_file(mission_path, "agent-1").exists()
    assert not paths.inbox_file(mission_path, "manager-1").exists()


def test_collect_pending_ack_agent_ids_sorted_unique(missions_dir, mission, mission_path):
    add_agent(mission_path, "agent-0", "Zed", "worker", "QA")
    add_thread_message(missions_dir, mission, "t1", "manager-1", ["agent-1", "agent-0"], "A")
    add_thread_message(missions_dir, mission, "t1", "manager-1", ["agent-1"], "B")

    pending = list_unacked_task_mentions(missions_dir, mission, "t1")
    assert collect_pending_ack_agent_ids(pending) == ["agent-0", "agent-1"]


def test_malformed_ledger_propagates(missions_dir, mission, mission_path):
    """Boundary: a corrupt ledger is an error, never an empty inbox."""
    add_thread_message(missions_dir, mission, "t1", "manager-1", ["agent-1"], "Ping")
    ledger = paths.inbox_file(mission_path, "agent-1")
    ledger.parent.mkdir(parents=True, exist_ok=True)
    ledger.write_text('{"type": "ack", "agentId": "agent-1"}\n')

    with pytest.raises(ValidationFailure) as info:
        list_unacked_task_mentions(missions_dir, mission, "t1")
    assert info.value.path == f"{ledger}:1"

    with pytest.raises(ValidationFailure):
        acknowledge_all_task_mentions(missions_dir, mission, "t1")
    assert ledger.read_text() == '{"type": "ack", "agentId": "agent-1"}\n'


def test_malformed_thread_propagates(missions_dir, mission, mission_path):
    add_thread_message(missions_dir, mission, "t1", "manager-1", ["agent-1"], "Ping")
    thread = paths.thread_file(mission_path, "t1")
    with open(thread, "a") as f:
        f.write('{"type": "message", "id": "m2"}\n')

    with pytest.raises(ValidationFailure) as info:
        list_unacked_task_mentions(missions_dir, mission, "t1")
    assert info.value.path == f"{thread}:2"

    with pytest.raises(ValidationFailure):
        acknowledge_all_task_mentions(missions_dir, mission, "t1")
    assert not paths.inbox_file(mission_path, "agent-1").exists()
