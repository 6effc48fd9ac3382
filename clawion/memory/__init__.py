"""Memory primitive: agent memory notes and secrets."""

from .api import read_memory, read_secret, set_memory, set_secret

__all__ = ["read_memory", "read_secret", "set_memory", "set_secret"]
