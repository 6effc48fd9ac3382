"""Mission, roster and task board endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from clawion.lib import paths

from .errors import http_error

router = APIRouter(prefix="/api/missions", tags=["missions"])


class Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UpdateMission(Body):
    description: str | None = None
    roadmap: str | None = None


class UpdateRole(Body):
    role_description: str


def _mission_payload(mission_id: str) -> dict:
    from clawion.mission import show_mission

    mission, roadmap = show_mission(paths.missions_dir(), mission_id)
    return {"mission": mission.dump(), "roadmap": roadmap}


@router.get("")
def get_missions():
    from clawion.mission import list_missions

    try:
        return [m.dump() for m in list_missions(paths.missions_dir())]
    except Exception as e:
        raise http_error(e) from e


@router.get("/{mission_id}")
def get_mission(mission_id: str):
    try:
        return _mission_payload(mission_id)
    except Exception as e:
        raise http_error(e) from e


@router.put("/{mission_id}")
def update_mission(mission_id: str, body: UpdateMission):
    """Replace the mission description and/or roadmap."""
    from clawion.mission import update_mission_description, update_mission_roadmap

    missions_dir = paths.missions_dir()
    try:
        if body.description is None and body.roadmap is None:
            raise ValueError("description or roadmap is required.")
        if body.description is not None:
            update_mission_description(missions_dir, mission_id, body.description)
        if body.roadmap is not None:
            update_mission_roadmap(missions_dir, mission_id, body.roadmap)
        return _mission_payload(mission_id)
    except Exception as e:
        raise http_error(e) from e


@router.get("/{mission_id}/agents")
def get_agents(mission_id: str):
    from clawion.agent import list_agents
    from clawion.mission import resolve_mission_path

    try:
        mission_path = resolve_mission_path(paths.missions_dir(), mission_id)
        return list_agents(mission_path).dump()
    except Exception as e:
        raise http_error(e) from e


@router.put("/{mission_id}/agents/{agent_id}")
def update_agent_role(mission_id: str, agent_id: str, body: UpdateRole):
    from clawion.agent import set_role_description
    from clawion.mission import resolve_mission_path

    try:
        if not body.role_description.strip():
            raise ValueError("roleDescription must not be empty.")
        mission_path = resolve_mission_path(paths.missions_dir(), mission_id)
        agent = set_role_description(mission_path, agent_id, body.role_description)
        return {"agentId": agent.id, "roleDescription": agent.role_description, "updated": True}
    except Exception as e:
        raise http_error(e) from e


@router.get("/{mission_id}/tasks")
def get_tasks(mission_id: str):
    from clawion.task import list_tasks, with_status

    try:
        tasks_file = list_tasks(paths.missions_dir(), mission_id)
        payload = tasks_file.dump()
        payload["tasks"] = [task.dump() for task in with_status(tasks_file)]
        return payload
    except Exception as e:
        raise http_error(e) from e


@router.post("/{mission_id}/tasks/{task_id}/complete")
def complete_task(mission_id: str, task_id: str):
    """Move a task to the column that resolves to completed."""
    from clawion.models import TaskStatus
    from clawion.task import update_task

    try:
        update_task(paths.missions_dir(), mission_id, task_id, status=TaskStatus.COMPLETED)
        return {"ok": True, "taskId": task_id}
    except Exception as e:
        raise http_error(e) from e
