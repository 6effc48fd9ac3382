"""Wake primitive: per-agent mission briefing with mention acknowledgement."""

from .api import (
    WakeContext,
    WakeResult,
    build_wake_context,
    group_unread_mentions,
    list_unread_mentions,
    preview_wake,
    render_wake,
    run_wake,
)
from .render import build_manager_wake_lines, build_reply_here_command, build_worker_wake_lines

__all__ = [
    "WakeContext",
    "WakeResult",
    "build_manager_wake_lines",
    "build_reply_here_command",
    "build_wake_context",
    "build_worker_wake_lines",
    "group_unread_mentions",
    "list_unread_mentions",
    "preview_wake",
    "render_wake",
    "run_wake",
]
