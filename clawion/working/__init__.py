"""Working primitive: per-agent progress journal."""

from .api import append_working_event, list_working_events, recent_events

__all__ = ["append_working_event", "list_working_events", "recent_events"]
