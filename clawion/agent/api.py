"""Agent roster and the manager permission check."""

import logging
from pathlib import Path

from clawion.errors import ClawionError, NotFoundError, PermissionDenied
from clawion.lib import fs, paths
from clawion.mission.workspace import resolve_mission_path
from clawion.models import Agent, AgentsFile, SystemRole

logger = logging.getLogger(__name__)

DEFAULT_MANAGER_ROLE_DESCRIPTION = """\
You are the **Mission Manager** for this mission.

- **Ownership:** Turn `mission.json` + `ROADMAP.md` into an actionable plan and keep it moving.
- **Planning:** Break the mission into tasks with explicit scope and acceptance criteria.
- **Dispatch (manager-only):** Assign tasks, change mission status, and give final sign-off.
- **Single source of truth:** Coordinate only through the clawion CLI and the persisted JSON/Markdown state.
- **Thread discipline:** One task, one thread. Mention exactly who needs to act.
- **Status hygiene:** Keep each task's status notes current. Encode blockers as `Blocked: ...`.
"""


def list_agents(mission_path: Path) -> AgentsFile:
    agents_path = paths.agents_json(mission_path)
    try:
        return fs.read_json(agents_path, AgentsFile)
    except NotFoundError as e:
        raise NotFoundError(f"Agents file not found: {agents_path}. Is the mission initialized?") from e


def get_agent(mission_path: Path, agent_id: str) -> Agent | None:
    return next((a for a in list_agents(mission_path).agents if a.id == agent_id), None)


def require_agent(mission_path: Path, agent_id: str) -> Agent:
    agent = get_agent(mission_path, agent_id)
    if agent is None:
        raise NotFoundError(f"Agent not found: {agent_id}")
    return agent


def _role_description(system_role: SystemRole, role_description: str | None) -> str:
    trimmed = (role_description or "").strip()
    if trimmed:
        return trimmed
    if system_role == "manager":
        return DEFAULT_MANAGER_ROLE_DESCRIPTION
    raise ValueError("roleDescription is required for non-manager agents.")


def add_agent(
    mission_path: Path,
    agent_id: str,
    display_name: str,
    system_role: SystemRole,
    role_description: str | None = None,
) -> Agent:
    agents_file = list_agents(mission_path)
    if any(entry.id == agent_id for entry in agents_file.agents):
        raise ClawionError(f"Agent already exists: {agent_id}")

    agent = Agent(
        id=agent_id,
        display_name=display_name,
        role_description=_role_description(system_role, role_description),
        system_role=system_role,
    )
    agents_file.agents.append(agent)
    fs.write_json_atomic(paths.agents_json(mission_path), agents_file)
    logger.info(f"Registered agent {agent_id} ({system_role})")
    return agent


def set_role_description(mission_path: Path, agent_id: str, role_description: str) -> Agent:
    agents_file = list_agents(mission_path)
    for position, entry in enumerate(agents_file.agents):
        if entry.id == agent_id:
            updated = Agent.model_validate({**entry.dump(), "roleDescription": role_description})
            agents_file.agents[position] = updated
            fs.write_json_atomic(paths.agents_json(mission_path), agents_file)
            return updated
    raise NotFoundError(f"Agent not found: {agent_id}")


def is_bootstrap(agents_file: AgentsFile, agent_id: str, system_role: str, acting_agent_id: str) -> bool:
    """The first manager of an empty roster may register itself."""
    return not agents_file.agents and system_role == "manager" and agent_id == acting_agent_id


def assert_manager(missions_dir: Path, mission_id: str, agent_id: str) -> Agent:
    mission_path = resolve_mission_path(missions_dir, mission_id)
    agent = require_agent(mission_path, agent_id)
    if agent.system_role != "manager":
        raise PermissionDenied(f"Manager role required. Agent {agent_id} is not a manager.")
    return agent
