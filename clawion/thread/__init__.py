"""Thread primitive: task-scoped message logs with mentions."""

from .api import add_thread_message, iter_thread_files, list_thread_messages, list_threads

__all__ = ["add_thread_message", "iter_thread_files", "list_thread_messages", "list_threads"]
