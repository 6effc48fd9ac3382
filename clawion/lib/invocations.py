"""CLI invocation log: one JSONL line per command run, for `clawion log`."""

import shlex
from pathlib import Path

from clawion.lib import clock, fs, paths
from clawion.models import CliInvocation


def command_string(argv: list[str]) -> str:
    return " ".join(["clawion", *(shlex.quote(arg) for arg in argv)])


def append_cli_invocation(argv: list[str], root: Path | None = None) -> CliInvocation:
    entry = CliInvocation(timestamp=clock.now_local(), command=command_string(argv))
    fs.append_jsonl(paths.invocations_log(root), entry)
    return entry


def list_cli_invocations(root: Path | None = None, limit: int | None = None) -> list[CliInvocation]:
    """Logged invocations in append order, optionally only the last `limit`."""
    entries = fs.read_jsonl(paths.invocations_log(root), CliInvocation)
    if limit is not None:
        return entries[-limit:] if limit > 0 else []
    return entries


def format_invocation(entry: CliInvocation) -> str:
    return f"[{entry.timestamp}] {entry.command}"
