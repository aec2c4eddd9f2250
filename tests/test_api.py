"""Tests for the HTTP surface in main.py"""

import pytest
from fastapi.testclient import TestClient

import main
from teaching.tutor_policy import SOLUTION_DUMP_MESSAGE


@pytest.fixture(scope="module")
def client():
    return TestClient(main.app)


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_registry_is_sealed_with_all_tools():
    assert main.default_registry.sealed
    assert set(main.default_registry.names()) == {
        "explain_concept", "next_topic", "assess_knowledge", "analyze_assessment",
    }


def test_malformed_json_is_invalid_request(client):
    res = client.post("/mcp", content=b"{not json", headers={"Content-Type": "application/json"})
    assert res.status_code == 400
    assert res.json()["error"] == "invalid_request"


def test_empty_tool_name(client):
    res = client.post("/mcp", json={"toolName": ""})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "invalid_request"
    assert any(issue["path"] == "toolName" for issue in body["issues"])
    assert body["message"]


def test_unknown_tool_is_404(client):
    res = client.post("/mcp", json={"toolName": "teleport", "input": {}})
    assert res.status_code == 404
    assert res.json()["error"] == "unknown_tool"


def test_invalid_tool_input(client):
    res = client.post("/mcp", json={"toolName": "assess_knowledge", "input": {}})
    assert res.status_code == 400
    assert res.json()["error"] == "invalid_tool_input"


def test_successful_call_has_policy_fields(client):
    res = client.post("/mcp", json={
        "toolName": "explain_concept",
        "input": {"concept": "cors"},
        "userContext": {"learnerLevel": "beginner"},
    })
    assert res.status_code == 200
    body = res.json()
    assert body["output"]["concept"] == "CORS"
    assert body["checkpoints"]
    assert body["tutorNotes"]
    assert body["hintLadder"]["level"] == 1
    assert body["output"].get("message") != SOLUTION_DUMP_MESSAGE


def test_assess_then_analyze_flow(client):
    context = {"learnerLevel": "beginner", "previousTopics": ["internet_basics"]}
    assess = client.post("/mcp", json={
        "toolName": "assess_knowledge",
        "input": {"topic": "cors_basics"},
        "userContext": context,
    }).json()
    assert len(assess["output"]["questions"]) == 2

    analyze = client.post("/mcp", json={
        "toolName": "analyze_assessment",
        "input": {"topic": "cors_basics", "answers": ["The browser", "no"]},
        "userContext": context,
    }).json()
    recommendation = analyze["output"]["recommendation"]
    assert recommendation["nextStep"] == "explain_concept"

    follow = client.post("/mcp", json={
        "toolName": recommendation["nextStep"],
        "input": recommendation["payload"],
        "userContext": context,
    })
    assert follow.status_code == 200
    assert follow.json()["output"]["concept"] == "CORS"


def test_unhandled_error_is_500(monkeypatch):
    async def boom(raw):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(main, "process_request", boom)
    client = TestClient(main.app, raise_server_exceptions=False)
    res = client.post("/mcp", json={"toolName": "next_topic", "input": {}})
    assert res.status_code == 500
    assert res.json() == {"error": "internal_server_error", "message": "Something went wrong."}
