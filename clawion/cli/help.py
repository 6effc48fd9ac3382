"""Detailed per-command help for `clawion help <topic>`."""

from dataclasses import dataclass, field


@dataclass
class HelpEntry:
    command: str
    purpose: str
    params: list[str] = field(default_factory=list)
    example: str | None = None


HELP_ENTRIES = [
    HelpEntry("ui", "Start the web UI API server.", ["--host <host> (optional)", "--port <port> (optional)"], "clawion ui --port 3000"),
    HelpEntry("log", "Show CLI invocation logs.", ["--limit <n> (optional)"], "clawion log"),
    HelpEntry(
        "mission create",
        "Create a new mission from the template.",
        ["--id <id>", "--name <name>", "--description <text> (optional)"],
        "clawion mission create --id m1 --name 'Alpha'",
    ),
    HelpEntry(
        "mission roadmap",
        "Set the mission roadmap (manager only, write-once).",
        ["--id <id>", "--set <markdown>", "--agent <agentId>"],
        "clawion mission roadmap --id m1 --set '# Roadmap' --agent manager-1",
    ),
    HelpEntry(
        "mission complete",
        "Mark a mission completed (manager only).",
        ["--id <id>", "--agent <agentId>"],
        "clawion mission complete --id m1 --agent manager-1",
    ),
    HelpEntry(
        "task create",
        "Create a task in a mission (manager only).",
        ["--mission <id>", "--id <taskId>", "--title <title>", "--description <markdown>", "--agent <agentId>"],
        "clawion task create --mission m1 --id t1 --title 'Spec' --description 'Write spec' --agent manager-1",
    ),
    HelpEntry(
        "task update",
        "Update task status or notes (manager only).",
        [
            "--mission <id>",
            "--id <taskId>",
            "--agent <agentId>",
            "--status <pending|ongoing|blocked|completed> (optional)",
            "--status-notes <text> (optional)",
        ],
        "clawion task update --mission m1 --id t1 --status blocked --status-notes 'Blocked: waiting on keys' --agent manager-1",
    ),
    HelpEntry(
        "task assign",
        "Assign a task to an agent (manager only).",
        ["--mission <id>", "--task <taskId>", "--to <agentId>", "--agent <agentId>"],
        "clawion task assign --mission m1 --task t1 --to agent-1 --agent manager-1",
    ),
    HelpEntry(
        "agent add",
        "Register an agent for a mission (manager only, or the first manager bootstrapping itself).",
        [
            "--mission <id>",
            "--id <agentId>",
            "--name <displayName>",
            "--system-role <manager|worker>",
            "--role-description <markdown> (required for workers)",
            "--agent <agentId>",
        ],
        "clawion agent add --mission m1 --id manager-1 --name Manager --system-role manager --agent manager-1",
    ),
    HelpEntry(
        "agent wake",
        "Generate the agent prompt and acknowledge unread mentions.",
        ["--mission <id>", "--agent <agentId>"],
        "clawion agent wake --mission m1 --agent agent-1",
    ),
    HelpEntry(
        "message add",
        "Append a message to a task thread.",
        ["--mission <id>", "--task <taskId>", "--content <markdown>", "--mentions <agentId,...>", "--agent <agentId>"],
        "clawion message add --mission m1 --task t1 --content 'Please review' --mentions agent-1,agent-2 --agent manager-1",
    ),
    HelpEntry(
        "thread show",
        "Show thread messages for a task (manager only).",
        ["--mission <id>", "--task <taskId>", "--agent <agentId>"],
        "clawion thread show --mission m1 --task t1 --agent manager-1",
    ),
    HelpEntry(
        "thread ack-all",
        "Acknowledge every pending mention in a thread (manager only).",
        ["--mission <id>", "--task <taskId>", "--agent <agentId>"],
        "clawion thread ack-all --mission m1 --task t1 --agent manager-1",
    ),
    HelpEntry(
        "working add",
        "Append a working event for the acting agent.",
        ["--mission <id>", "--content <markdown>", "--agent <agentId>"],
        "clawion working add --mission m1 --content 'Investigating API error' --agent agent-1",
    ),
    HelpEntry(
        "memory set",
        "Replace the acting agent's memory note.",
        ["--mission <id>", "--content <markdown>", "--agent <agentId>"],
        "clawion memory set --mission m1 --content 'Login flow done' --agent agent-1",
    ),
    HelpEntry(
        "secret set",
        "Give an agent a confidential brief shown only in its wake (manager only).",
        ["--mission <id>", "--for <agentId>", "--content <markdown>", "--agent <agentId>"],
        "clawion secret set --mission m1 --for agent-1 --content '...' --agent manager-1",
    ),
]


def render_help(topic: str | None = None) -> str:
    if not topic:
        commands = "\n".join(entry.command for entry in HELP_ENTRIES)
        return f"Clawion Help\n\nCommands:\n{commands}\n\nUse: clawion help <command> for details."

    entry = next((item for item in HELP_ENTRIES if item.command == topic), None)
    if entry is None:
        return f"Unknown help topic: {topic}"

    lines = [f"Command: {entry.command}", f"Purpose: {entry.purpose}", "Parameters:"]
    lines.extend(f"- {param}" for param in entry.params)
    if entry.example:
        lines.append(f"Example: {entry.example}")
    return "\n".join(lines)
