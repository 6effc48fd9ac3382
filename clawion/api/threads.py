"""Thread endpoints with acknowledgement state."""

from fastapi import APIRouter

from clawion.lib import paths

from .errors import http_error

router = APIRouter(prefix="/api/missions/{mission_id}/threads", tags=["threads"])


@router.get("")
def get_threads(mission_id: str):
    from clawion.inbox import collect_pending_ack_agent_ids, list_unacked_task_mentions
    from clawion.thread import list_threads

    missions_dir = paths.missions_dir()
    try:
        threads = []
        for summary in list_threads(missions_dir, mission_id):
            pending = list_unacked_task_mentions(missions_dir, mission_id, summary.task_id)
            threads.append(
                {
                    **summary.dump(),
                    "unackedMentionCount": len(pending),
                    "pendingAckAgentIds": collect_pending_ack_agent_ids(pending),
                }
            )
        return threads
    except Exception as e:
        raise http_error(e) from e


@router.get("/{task_id}")
def get_thread(mission_id: str, task_id: str):
    from clawion.thread import list_thread_messages

    try:
        messages = list_thread_messages(paths.missions_dir(), mission_id, task_id)
        return {"taskId": task_id, "messages": [m.dump() for m in messages]}
    except Exception as e:
        raise http_error(e) from e


@router.post("/{task_id}/ack-all")
def ack_all(mission_id: str, task_id: str):
    from clawion.inbox import acknowledge_all_task_mentions

    try:
        result = acknowledge_all_task_mentions(paths.missions_dir(), mission_id, task_id)
        return {
            "ackedEntries": result.acked_entries,
            "ackedMessages": result.acked_messages,
            "ackedAgents": result.acked_agents,
        }
    except Exception as e:
        raise http_error(e) from e
