"""HTTP read layer over the workspace."""

import pytest
from fastapi.testclient import TestClient

from clawion.api.main import app
from clawion.inbox.api import list_acks
from clawion.task.api import update_task
from clawion.thread.api import add_thread_message


@pytest.fixture
def client(test_workspace):
    return TestClient(app)


def test_overview_counts(client, missions_dir, mission):
    update_task(missions_dir, mission, "t1", status="blocked")

    response = client.get("/api/overview")

    assert response.status_code == 200
    assert response.headers["cache-control"] == "no-store"
    [entry] = response.json()["missions"]
    assert entry["id"] == "m1"
    assert entry["agentCount"] == 2
    assert entry["taskCount"] == 1
    assert entry["taskCounts"] == {"pending": 0, "ongoing": 0, "blocked": 1, "completed": 0}


def test_missions_and_board(client, mission):
    assert [m["id"] for m in client.get("/api/missions").json()] == ["m1"]

    body = client.get("/api/missions/m1").json()
    assert body["mission"]["name"] == "Alpha"
    assert body["roadmap"].strip() == ""

    agents = client.get("/api/missions/m1/agents").json()["agents"]
    assert [a["id"] for a in agents] == ["manager-1", "agent-1"]
    assert agents[1]["systemRole"] == "worker"

    tasks = client.get("/api/missions/m1/tasks").json()
    assert tasks["tasks"][0]["status"] == "pending"
    assert tasks["tasks"][0]["columnId"] == "pending"


def test_unknown_mission_is_404(client):
    response = client.get("/api/missions/ghost")
    assert response.status_code == 404
    assert "Mission not found: ghost" in response.json()["detail"]


def test_threads_with_pending_acks(client, missions_dir, mission):
    message = add_thread_message(missions_dir, mission, "t1", "manager-1", ["agent-1"], "Status?")

    [summary] = client.get("/api/missions/m1/threads").json()
    assert summary["taskId"] == "t1"
    assert summary["messageCount"] == 1
    assert summary["unackedMentionCount"] == 1
    assert summary["pendingAckAgentIds"] == ["agent-1"]

    thread = client.get("/api/missions/m1/threads/t1").json()
    assert [m["id"] for m in thread["messages"]] == [message.id]

    result = client.post("/api/missions/m1/threads/t1/ack-all").json()
    assert result == {"ackedEntries": 1, "ackedMessages": 1, "ackedAgents": 1}
    assert client.get("/api/missions/m1/threads").json()[0]["unackedMentionCount"] == 0


def test_wake_preview_does_not_ack(client, missions_dir, mission):
    add_thread_message(missions_dir, mission, "t1", "manager-1", ["agent-1"], "Status?")

    response = client.get("/api/missions/m1/wake/agent-1")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "## Unread Mentions (1)" in response.text
    assert list_acks(missions_dir, mission, "agent-1") == []

    assert client.get("/api/missions/m1/wake/ghost").status_code == 404


def test_working_and_memory(client, mission):
    assert client.get("/api/missions/m1/working/agent-1").json() == []
    assert client.get("/api/missions/m1/memory/agent-1").json() == {"agentId": "agent-1", "content": ""}


def test_update_mission_description_and_roadmap(client, missions_dir, mission):
    response = client.put("/api/missions/m1", json={"description": "Ship login and signup"})
    assert response.status_code == 200
    assert response.json()["mission"]["description"] == "Ship login and signup"
    assert client.get("/api/missions").json()[0]["description"] == "Ship login and signup"

    response = client.put("/api/missions/m1", json={"roadmap": "# Plan"})
    assert response.json()["roadmap"] == "# Plan\n"


def test_update_mission_requires_a_field(client, mission):
    response = client.put("/api/missions/m1", json={})
    assert response.status_code == 400
    assert "description or roadmap is required." in response.json()["detail"]

    assert client.put("/api/missions/ghost", json={"description": "x"}).status_code == 404


def test_update_agent_role_description(client, mission):
    response = client.put("/api/missions/m1/agents/agent-1", json={"roleDescription": "Design lead"})

    assert response.status_code == 200
    assert response.json() == {"agentId": "agent-1", "roleDescription": "Design lead", "updated": True}
    agents = client.get("/api/missions/m1/agents").json()["agents"]
    assert agents[1]["roleDescription"] == "Design lead"


def test_update_agent_role_rejects_blank_and_unknown(client, mission):
    response = client.put("/api/missions/m1/agents/agent-1", json={"roleDescription": "   "})
    assert response.status_code == 400

    response = client.put("/api/missions/m1/agents/ghost", json={"roleDescription": "x"})
    assert response.status_code == 404
    assert "Agent not found: ghost" in response.json()["detail"]

    assert client.put("/api/missions/m1/agents/agent-1", json={}).status_code == 422


def test_complete_task(client, missions_dir, mission):
    response = client.post("/api/missions/m1/tasks/t1/complete")

    assert response.status_code == 200
    assert response.json() == {"ok": True, "taskId": "t1"}
    task = client.get("/api/missions/m1/tasks").json()["tasks"][0]
    assert task["status"] == "completed"
    assert task["columnId"] == "completed"

    assert client.post("/api/missions/m1/tasks/nope/complete").status_code == 404
    assert client.post("/api/missions/ghost/tasks/t1/complete").status_code == 404
