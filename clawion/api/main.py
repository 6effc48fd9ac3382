"""FastAPI read layer over the mission workspace, for the dashboard."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from clawion.lib import paths

from . import agents, missions, threads
from .errors import NO_CACHE_HEADERS, http_error

app = FastAPI(title="Clawion API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def no_store(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(NO_CACHE_HEADERS)
    return response


@app.get("/api/overview")
def get_overview():
    from clawion.agent import list_agents
    from clawion.mission import list_missions, resolve_mission_path
    from clawion.task import count_by_status, list_tasks, with_status

    missions_dir = paths.missions_dir()
    try:
        overview = []
        for entry in list_missions(missions_dir):
            tasks = with_status(list_tasks(missions_dir, entry.id))
            agents_file = list_agents(resolve_mission_path(missions_dir, entry.id))
            overview.append(
                {
                    "id": entry.id,
                    "name": entry.name,
                    "status": entry.status,
                    "updatedAt": entry.updated_at,
                    "agentCount": len(agents_file.agents),
                    "taskCount": len(tasks),
                    "taskCounts": {str(status): count for status, count in count_by_status(tasks).items()},
                }
            )
        return {"missions": overview}
    except Exception as e:
        raise http_error(e) from e


app.include_router(missions.router)
app.include_router(threads.router)
app.include_router(agents.router)


def main(host: str | None = None, port: int | None = None):
    import uvicorn

    from clawion import config

    ui = config.load_config()["ui"]
    uvicorn.run(app, host=host or ui["host"], port=int(port or ui["port"]), access_log=False)
