"""Agent roster and the manager permission check."""

import pytest

from clawion.agent.api import (
    DEFAULT_MANAGER_ROLE_DESCRIPTION,
    add_agent,
    assert_manager,
    is_bootstrap,
    list_agents,
    set_role_description,
)
from clawion.errors import ClawionError, NotFoundError, PermissionDenied
from clawion.mission import create_mission, resolve_mission_path
from clawion.models import AgentsFile


def test_manager_gets_default_role_description(missions_dir):
    create_mission(missions_dir, "m2", "Beta")
    mission_path = resolve_mission_path(missions_dir, "m2")

    agent = add_agent(mission_path, "boss", "Boss", "manager")

    assert agent.role_description == DEFAULT_MANAGER_ROLE_DESCRIPTION
    assert [a.id for a in list_agents(mission_path).agents] == ["boss"]


def test_worker_requires_role_description(mission_path):
    with pytest.raises(ValueError, match="roleDescription is required"):
        add_agent(mission_path, "agent-2", "Bob", "worker", "   ")


def test_duplicate_agent_fails(mission_path):
    with pytest.raises(ClawionError, match="Agent already exists: agent-1"):
        add_agent(mission_path, "agent-1", "Alice", "worker", "Again")


def test_set_role_description(mission_path):
    updated = set_role_description(mission_path, "agent-1", "Design lead")
    assert updated.role_description == "Design lead"
    with pytest.raises(NotFoundError):
        set_role_description(mission_path, "ghost", "x")


def test_bootstrap_rule():
    """Contract: only a manager registering itself into an empty roster."""
    empty = AgentsFile()
    assert is_bootstrap(empty, "boss", "manager", "boss")
    assert not is_bootstrap(empty, "boss", "manager", "someone-else")
    assert not is_bootstrap(empty, "boss", "worker", "boss")


def test_bootstrap_rule_needs_empty_roster(mission_path):
    assert not is_bootstrap(list_agents(mission_path), "boss-2", "manager", "boss-2")


def test_assert_manager(missions_dir, mission):
    assert assert_manager(missions_dir, mission, "manager-1").id == "manager-1"
    with pytest.raises(PermissionDenied, match="Manager role required"):
        assert_manager(missions_dir, mission, "agent-1")
    with pytest.raises(NotFoundError, match="Agent not found: ghost"):
        assert_manager(missions_dir, mission, "ghost")
