import pytest

from clawion import config
from clawion.agent.api import add_agent
from clawion.lib import paths
from clawion.mission import create_mission, ensure_workspace, resolve_mission_path
from clawion.task.api import create_task


@pytest.fixture
def test_workspace(monkeypatch, tmp_path):
    """Isolated clawion workspace per test.

    Provides:
    - CLAWION_WORKSPACE pointed at tmp_path
    - Bootstrapped missions dir (index + template)
    - Fresh config cache
    """
    workspace = tmp_path / "clawion"
    monkeypatch.setenv(paths.WORKSPACE_ENV, str(workspace))
    monkeypatch.delenv(config.LOG_LEVEL_ENV, raising=False)
    config.clear_cache()

    ensure_workspace(paths.missions_dir())
    yield workspace

    config.clear_cache()


@pytest.fixture
def missions_dir(test_workspace):
    return paths.missions_dir()


@pytest.fixture
def mission(missions_dir):
    """Mission m1 with manager-1, agent-1 (worker) and task t1."""
    create_mission(missions_dir, "m1", "Alpha", "Ship the login flow")
    mission_path = resolve_mission_path(missions_dir, "m1")
    add_agent(mission_path, "manager-1", "Manager", "manager")
    add_agent(mission_path, "agent-1", "Alice", "worker", "Frontend dev")
    create_task(missions_dir, "m1", "t1", "Build Login", "Implement login flow")
    return "m1"


@pytest.fixture
def mission_path(missions_dir, mission):
    return resolve_mission_path(missions_dir, mission)
