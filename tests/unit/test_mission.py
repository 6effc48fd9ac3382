"""Workspace bootstrap, missions index and mission lifecycle."""

import pytest

from clawion.errors import ClawionError, NotFoundError
from clawion.lib import paths
from clawion.mission import (
    complete_mission,
    create_mission,
    ensure_workspace,
    get_mission,
    list_missions,
    read_roadmap,
    resolve_mission_path,
    show_mission,
    update_mission_description,
    update_mission_roadmap,
)
from clawion.task.api import list_tasks


def test_ensure_workspace_is_idempotent(missions_dir):
    index = paths.index_file(missions_dir)
    before = index.read_text()

    ensure_workspace(missions_dir)

    assert index.read_text() == before
    template = paths.template_dir(missions_dir)
    for name in ("threads", "inbox", "working", "memory", "secrets", "artifacts"):
        assert (template / name).is_dir()


def test_create_mission_copies_template(missions_dir):
    mission = create_mission(missions_dir, "m2", "Beta", "Second mission")
    mission_path = resolve_mission_path(missions_dir, "m2")

    assert mission.status == "active"
    assert mission_path == missions_dir / "m2"
    assert get_mission(missions_dir, "m2").name == "Beta"
    assert list_tasks(missions_dir, "m2").description == "Tasks for Beta."
    assert [m.id for m in list_missions(missions_dir)] == ["m2"]
    assert read_roadmap(missions_dir, "m2").strip() == ""


def test_create_existing_mission_fails(missions_dir, mission):
    with pytest.raises(ClawionError, match="already exists"):
        create_mission(missions_dir, mission, "Again")


def test_unknown_mission(missions_dir):
    with pytest.raises(NotFoundError, match="Mission not found: ghost"):
        resolve_mission_path(missions_dir, "ghost")


def test_roadmap_and_description(missions_dir, mission):
    update_mission_roadmap(missions_dir, mission, "# Plan\n- ship")
    update_mission_description(missions_dir, mission, "New scope")

    found, roadmap = show_mission(missions_dir, mission)
    assert roadmap == "# Plan\n- ship\n"
    assert found.description == "New scope"
    assert list_missions(missions_dir)[0].description == "New scope"


def test_complete_mission_updates_index(missions_dir, mission):
    complete_mission(missions_dir, mission)

    assert get_mission(missions_dir, mission).status == "completed"
    assert list_missions(missions_dir)[0].status == "completed"
