import os
from pathlib import Path

WORKSPACE_ENV = "CLAWION_WORKSPACE"


def workspace_root(override: str | None = None) -> Path:
    """Root workspace directory. Default: ~/.clawion"""
    if override and override.strip():
        return Path(override.strip()).expanduser()

    env_path = os.environ.get(WORKSPACE_ENV, "").strip()
    if env_path:
        return Path(env_path).expanduser()

    return Path.home() / ".clawion"


def missions_dir(override: str | None = None) -> Path:
    return workspace_root(override) / "missions"


def config_file() -> Path:
    return workspace_root() / "config.yaml"


def invocations_log(root: Path | None = None) -> Path:
    return (root or workspace_root()) / "cli-invocations.jsonl"


def index_file(missions: Path) -> Path:
    return missions / "index.json"


def template_dir(missions: Path) -> Path:
    return missions / "_template"


def mission_json(mission_path: Path) -> Path:
    return mission_path / "mission.json"


def tasks_json(mission_path: Path) -> Path:
    return mission_path / "tasks.json"


def agents_json(mission_path: Path) -> Path:
    return mission_path / "agents.json"


def roadmap_md(mission_path: Path) -> Path:
    return mission_path / "ROADMAP.md"


def threads_dir(mission_path: Path) -> Path:
    return mission_path / "threads"


def thread_file(mission_path: Path, task_id: str) -> Path:
    return threads_dir(mission_path) / f"{task_id}.jsonl"


def inbox_file(mission_path: Path, agent_id: str) -> Path:
    return mission_path / "inbox" / f"{agent_id}.jsonl"


def working_file(mission_path: Path, agent_id: str) -> Path:
    return mission_path / "working" / f"{agent_id}.jsonl"


def memory_file(mission_path: Path, agent_id: str) -> Path:
    return mission_path / "memory" / f"{agent_id}.md"


def secret_file(mission_path: Path, agent_id: str) -> Path:
    return mission_path / "secrets" / f"{agent_id}.md"


def artifacts_dir(mission_path: Path) -> Path:
    return mission_path / "artifacts"
