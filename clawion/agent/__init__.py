"""Agent primitive: mission roster and roles."""

from .api import (
    DEFAULT_MANAGER_ROLE_DESCRIPTION,
    add_agent,
    assert_manager,
    get_agent,
    list_agents,
    require_agent,
    set_role_description,
)

__all__ = [
    "DEFAULT_MANAGER_ROLE_DESCRIPTION",
    "add_agent",
    "assert_manager",
    "get_agent",
    "list_agents",
    "require_agent",
    "set_role_description",
]
