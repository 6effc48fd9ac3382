"""Per-agent endpoints: working log, memory and wake preview."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from clawion.lib import paths

from .errors import NO_CACHE_HEADERS, http_error

router = APIRouter(prefix="/api/missions/{mission_id}", tags=["agents"])


@router.get("/working/{agent_id}")
def get_working(mission_id: str, agent_id: str):
    from clawion.working import list_working_events

    try:
        return [e.dump() for e in list_working_events(paths.missions_dir(), mission_id, agent_id)]
    except Exception as e:
        raise http_error(e) from e


@router.get("/memory/{agent_id}")
def get_memory(mission_id: str, agent_id: str):
    from clawion.memory import read_memory

    try:
        return {"agentId": agent_id, "content": read_memory(paths.missions_dir(), mission_id, agent_id)}
    except Exception as e:
        raise http_error(e) from e


@router.get("/wake/{agent_id}", response_class=PlainTextResponse)
def get_wake_preview(mission_id: str, agent_id: str):
    """The wake report as it would render now. Acknowledges nothing."""
    from clawion.wake import preview_wake

    try:
        report = preview_wake(paths.missions_dir(), mission_id, agent_id)
    except Exception as e:
        raise http_error(e) from e
    return PlainTextResponse(report, headers=NO_CACHE_HEADERS)
