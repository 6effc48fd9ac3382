"""Task formatting for CLI display."""

from clawion.models import TaskView


def format_task_line(task: TaskView) -> str:
    agent_str = f" @{task.assignee_agent_id}" if task.assignee_agent_id else ""
    notes = task.status_notes.strip()
    notes_str = f" - {notes}" if notes else ""
    return f"[{task.id}] {task.title} ({task.status}){agent_str}{notes_str}"


def format_task_list(tasks: list[TaskView]) -> str:
    """One line per task with id, title, status, assignee and notes."""
    if not tasks:
        return "No tasks"
    return "\n".join(format_task_line(task) for task in tasks)


def format_incomplete_tasks(tasks: list[TaskView]) -> str:
    lines = [f"Cannot complete mission: {len(tasks)} task(s) not completed.", ""]
    for task in tasks:
        owner = f"assigned to {task.assignee_agent_id}" if task.assignee_agent_id else "unassigned"
        notes = task.status_notes.strip()
        lines.append(f"- {task.id} ({task.title}) - {task.status}, {owner}{': ' + notes if notes else ''}")
    lines.append("")
    lines.append("All tasks must be completed before the mission can be marked as completed.")
    return "\n".join(lines)
