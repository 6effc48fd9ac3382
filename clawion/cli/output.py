import json as json_lib
from pathlib import Path

import typer

from clawion.agent.api import assert_manager

from .errors import fail


def init_context(
    ctx: typer.Context,
    missions_dir: Path,
    json_output: bool = False,
    quiet_output: bool = False,
    agent: str | None = None,
) -> None:
    """Initialize CLI context with standard flags and the acting agent."""
    if ctx.obj is None or not isinstance(ctx.obj, dict):
        ctx.obj = {}
    ctx.obj["missions_dir"] = missions_dir
    ctx.obj["json_output"] = json_output
    ctx.obj["quiet_output"] = quiet_output
    ctx.obj["agent"] = agent.strip() if agent and agent.strip() else None


def missions_dir(ctx: typer.Context) -> Path:
    return ctx.obj["missions_dir"]


def require_agent(ctx: typer.Context) -> str:
    agent = ctx.obj.get("agent") if ctx.obj else None
    if not agent:
        fail("Command requires --agent <id>.")
    return agent


def require_manager(ctx: typer.Context, mission_id: str) -> str:
    agent = require_agent(ctx)
    assert_manager(missions_dir(ctx), mission_id, agent)
    return agent


def out_text(msg: str, ctx_obj: dict | None = None) -> None:
    if ctx_obj and ctx_obj.get("quiet_output"):
        return
    typer.echo(msg)


def is_json_mode(ctx: typer.Context) -> bool:
    """Check if JSON output mode is enabled."""
    return ctx.obj.get("json_output", False) if ctx.obj else False


def echo_json(data, ctx: typer.Context) -> bool:
    """Output data as JSON if in JSON mode. Returns True if output, False otherwise."""
    if is_json_mode(ctx):
        typer.echo(json_lib.dumps(data, indent=2, ensure_ascii=False))
        return True
    return False
