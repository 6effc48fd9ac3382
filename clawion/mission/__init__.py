"""Mission primitive: metadata, roadmap and the missions index."""

from .api import (
    complete_mission,
    create_mission,
    get_mission,
    list_missions,
    read_roadmap,
    show_mission,
    update_mission_description,
    update_mission_roadmap,
)
from .workspace import ensure_workspace, resolve_mission_path

__all__ = [
    "complete_mission",
    "create_mission",
    "ensure_workspace",
    "get_mission",
    "list_missions",
    "read_roadmap",
    "resolve_mission_path",
    "show_mission",
    "update_mission_description",
    "update_mission_roadmap",
]
