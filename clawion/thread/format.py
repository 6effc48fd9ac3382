"""Thread formatting for CLI display."""

from clawion.models import ThreadMessage, ThreadSummary, UnackedMention


def format_thread(task_id: str, task_title: str | None, messages: list[ThreadMessage]) -> str:
    lines = [f"## Thread for Task: {task_id} - {task_title or task_id} ({len(messages)} messages)"]

    if not messages:
        lines.append("")
        lines.append("_No messages in this thread._")
        return "\n".join(lines)

    for message in messages:
        mentions = ", ".join(f"@{agent_id}" for agent_id in message.mentions_agent_ids)
        lines.append("")
        lines.append(f"[{message.created_at}] @{message.author_agent_id} (mentions: {mentions})")
        lines.append(message.content.strip())
    return "\n".join(lines)


def format_thread_summaries(
    summaries: list[ThreadSummary], pending: dict[str, list[UnackedMention]]
) -> str:
    if not summaries:
        return "No threads"

    lines = []
    for summary in summaries:
        unacked = pending.get(summary.task_id, [])
        last = summary.last_message_at or "-"
        flag = f" · {len(unacked)} unacked" if unacked else ""
        lines.append(f"[{summary.task_id}] {summary.message_count} messages · last {last}{flag}")
    return "\n".join(lines)
