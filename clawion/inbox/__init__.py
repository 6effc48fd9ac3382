"""Inbox primitive: acknowledgement ledger and unread mention scanning."""

from .api import (
    acked_message_ids,
    acknowledge_all_task_mentions,
    append_ack,
    collect_pending_ack_agent_ids,
    list_acks,
    list_unacked_task_mentions,
)

__all__ = [
    "acked_message_ids",
    "acknowledge_all_task_mentions",
    "append_ack",
    "collect_pending_ack_agent_ids",
    "list_acks",
    "list_unacked_task_mentions",
]
