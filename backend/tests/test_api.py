"""Tests for the HTTP API."""

import json

import pytest
from fastapi.testclient import TestClient

from empower.api.deps import get_generation_llm, get_store
from empower.main import app
from empower.schemas import RoadmapStatus
from empower.services.sample_data import FALLBACK_NOTICE, SAMPLE_ANALYSIS
from empower.services.session_service import SessionStore

from conftest import FakeChatModel

GENERATED = {
    "title": "AI Journey",
    "overview": "Drafted for you.",
    "milestones": [{"title": "Budgeting", "duration": "9 days"}],
}


@pytest.fixture
def llm() -> FakeChatModel:
    return FakeChatModel(json.dumps(GENERATED))


@pytest.fixture
def client(llm):
    store = SessionStore()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_generation_llm] = lambda: llm
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def session_id(client) -> str:
    resp = client.post("/api/sessions", json={"userName": "Asha"})
    assert resp.status_code == 201
    return resp.json()["id"]


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_create_and_get_session(client, session_id):
    data = client.get(f"/api/sessions/{session_id}").json()
    assert data["userName"] == "Asha"
    assert data["status"] == "empty"
    assert data["roadmap"] is None


def test_missing_session(client):
    assert client.get("/api/sessions/nope").status_code == 404
    assert client.post("/api/sessions/nope/checkpoints/x/toggle").status_code == 404
    assert client.delete("/api/sessions/nope").status_code == 404


def test_load_analysis_and_toggle(client, session_id):
    data = client.post(f"/api/sessions/{session_id}/roadmap", json=SAMPLE_ANALYSIS).json()
    assert data["status"] == "ready"
    assert [m["progress"] for m in data["roadmap"]["milestones"]] == [38, 30, 35]
    assert data["calendar"]["2025-03-26"]["dotColor"] == "#FF5722"

    data = client.post(f"/api/sessions/{session_id}/checkpoints/Tailoring-2/toggle").json()
    assert [m["progress"] for m in data["roadmap"]["milestones"]] == [67, 33, 33]
    assert data["calendar"]["2025-03-26"]["dotColor"] == "#4CAF50"

    calendar = client.get(f"/api/sessions/{session_id}/calendar").json()
    assert calendar == data["calendar"]


def test_unknown_checkpoint_toggle_is_noop(client, session_id):
    before = client.post(f"/api/sessions/{session_id}/roadmap", json=SAMPLE_ANALYSIS).json()
    after = client.post(f"/api/sessions/{session_id}/checkpoints/Knitting-9/toggle").json()
    assert after["roadmap"] == before["roadmap"]


def test_malformed_analysis_returns_fallback_with_notice(client, session_id):
    data = client.post(f"/api/sessions/{session_id}/roadmap", json={"unexpected": True}).json()
    assert data["status"] == "ready"
    assert data["notice"] == FALLBACK_NOTICE
    assert len(data["roadmap"]["milestones"]) == 3

    again = client.get(f"/api/sessions/{session_id}").json()
    assert again["notice"] is None


def test_build_from_skills(client, session_id):
    body = {
        "userName": "Meera",
        "skills": [
            {
                "skill": "Quantum Computing",
                "startDate": "2025-06-01",
                "endDate": "2025-06-15",
                "score": 40,
            }
        ],
    }
    data = client.post(f"/api/sessions/{session_id}/roadmap/skills", json=body).json()
    milestone = data["roadmap"]["milestones"][0]
    assert data["roadmap"]["title"] == "Empowerment Learning Journey for Meera"
    assert [r["title"] for r in milestone["resources"]] == [
        "Introduction to Quantum Computing",
        "Quantum Computing Guide",
    ]
    assert [cp["completed"] for cp in milestone["checkpoints"]] == [False, False, False]


def test_build_from_skills_rejects_bad_range(client, session_id):
    body = {"skills": [{"skill": "X", "startDate": "2025-06-15", "endDate": "2025-06-01", "score": 40}]}
    assert client.post(f"/api/sessions/{session_id}/roadmap/skills", json=body).status_code == 422


def test_generate_with_ai(client, session_id, llm):
    body = {"userContext": "New to budgeting", "startDate": "2025-07-01"}
    data = client.post(f"/api/sessions/{session_id}/roadmap/generate", json=body).json()
    milestone = data["roadmap"]["milestones"][0]
    assert data["roadmap"]["title"] == "AI Journey"
    assert milestone["startDate"] == "2025-07-01"
    assert milestone["endDate"] == "2025-07-10"
    assert [cp["date"] for cp in milestone["checkpoints"]] == ["2025-07-01", "2025-07-04", "2025-07-07"]
    assert len(llm.calls) == 1


def test_generate_falls_back_on_bad_reply(client, session_id, llm):
    llm.content = "not json at all"
    data = client.post(f"/api/sessions/{session_id}/roadmap/generate", json={}).json()
    assert data["notice"] == FALLBACK_NOTICE
    assert data["error"].startswith("Invalid roadmap response")
    assert data["roadmap"]["milestones"][0]["title"] == "Tailoring Development"


def test_generation_conflict(client, session_id):
    store = app.dependency_overrides[get_store]()
    store.get(session_id).status = RoadmapStatus.GENERATING
    resp = client.post(f"/api/sessions/{session_id}/roadmap", json=SAMPLE_ANALYSIS)
    assert resp.status_code == 409


def test_tasks(client, session_id):
    resp = client.post(f"/api/sessions/{session_id}/tasks", json={"text": "Buy thread", "date": "2025-03-22"})
    assert resp.status_code == 201
    task = resp.json()

    assert client.post(f"/api/sessions/{session_id}/tasks", json={"text": "  "}).status_code == 400

    toggled = client.post(f"/api/sessions/{session_id}/tasks/{task['id']}/toggle").json()
    assert toggled["completed"] is True
    assert client.post(f"/api/sessions/{session_id}/tasks/missing/toggle").status_code == 404

    tasks = client.get(f"/api/sessions/{session_id}/tasks").json()
    assert [t["text"] for t in tasks] == ["Buy thread"]

    calendar = client.get(f"/api/sessions/{session_id}/calendar").json()
    assert calendar["2025-03-22"]["dots"] == [{"key": "task", "color": "#3F51B5"}]


def test_upcoming_and_analytics(client, session_id):
    client.post(f"/api/sessions/{session_id}/roadmap", json=SAMPLE_ANALYSIS)

    upcoming = client.get(f"/api/sessions/{session_id}/upcoming").json()
    assert len(upcoming) == 5
    assert upcoming[0]["checkpoint"]["id"] == "Tailoring-2"

    analytics = client.get(f"/api/sessions/{session_id}/analytics").json()
    assert analytics["skills"]["labels"][0] == "Communication"
    assert analytics["progress"]["overallProgress"] == 34


def test_delete_session(client, session_id):
    assert client.delete(f"/api/sessions/{session_id}").status_code == 204
    assert client.get(f"/api/sessions/{session_id}").status_code == 404
