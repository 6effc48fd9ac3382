from clawion.lib import invocations, paths


def test_append_and_list(tmp_path):
    invocations.append_cli_invocation(["mission", "list"], root=tmp_path)
    invocations.append_cli_invocation(["task", "create", "--title", "Build login"], root=tmp_path)

    entries = invocations.list_cli_invocations(root=tmp_path)
    assert [e.command for e in entries] == [
        "clawion mission list",
        "clawion task create --title 'Build login'",
    ]
    assert paths.invocations_log(tmp_path).exists()


def test_limit(tmp_path):
    for n in range(3):
        invocations.append_cli_invocation([f"cmd{n}"], root=tmp_path)

    assert [e.command for e in invocations.list_cli_invocations(root=tmp_path, limit=2)] == [
        "clawion cmd1",
        "clawion cmd2",
    ]
    assert invocations.list_cli_invocations(root=tmp_path, limit=0) == []


def test_missing_log_is_empty(tmp_path):
    assert invocations.list_cli_invocations(root=tmp_path) == []


def test_format_invocation(tmp_path):
    entry = invocations.append_cli_invocation(["help"], root=tmp_path)
    assert invocations.format_invocation(entry) == f"[{entry.timestamp}] clawion help"
