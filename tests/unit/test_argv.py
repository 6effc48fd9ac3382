from clawion.cli.argv import hoist_option


def test_hoists_option_before_subcommand():
    args = ["agent", "wake", "--mission", "m1", "--agent", "a1"]
    assert hoist_option(args, "agent") == ["--agent", "a1", "agent", "wake", "--mission", "m1"]


def test_hoists_equals_form():
    args = ["working", "add", "--agent=a1", "--content", "x"]
    assert hoist_option(args, "agent") == ["--agent", "a1", "working", "add", "--content", "x"]


def test_hoists_short_flag():
    args = ["task", "mine", "-a", "a1"]
    assert hoist_option(args, "agent", "a") == ["--agent", "a1", "task", "mine"]


def test_leaves_args_alone():
    """Boundary: already first, missing, or dangling flag."""
    assert hoist_option([], "agent") == []
    assert hoist_option(["--agent", "a1", "task"], "agent") == ["--agent", "a1", "task"]
    assert hoist_option(["mission", "list"], "agent") == ["mission", "list"]
    assert hoist_option(["task", "--agent"], "agent") == ["task", "--agent"]
