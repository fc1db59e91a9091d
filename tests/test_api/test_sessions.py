"""API tests for session and eval endpoints."""

import pytest
from fastapi.testclient import TestClient
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from api.main import app
from api.routes.sessions import sessions_db


@pytest.fixture
def client():
    """Test client."""
    sessions_db.clear()
    yield TestClient(app)
    sessions_db.clear()


@pytest.fixture
def session_id(client):
    """Id of a freshly created session."""
    response = client.post("/api/v1/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]


class TestHealthAPI:
    """Tests for health endpoints."""

    def test_health_check(self, client):
        """Test health endpoint."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness_counts_sessions(self, client, session_id):
        """Test readiness reports live sessions."""
        response = client.get("/health/ready")
        assert response.json() == {"ready": True, "sessions": 1}

    def test_root(self, client):
        """Test API root."""
        assert client.get("/").json()["name"] == "tforth API"


class TestSessionAPI:
    """Tests for /api/v1/sessions."""

    def test_create_session(self, client):
        """Test a new session has an empty stack and no procedures."""
        response = client.post("/api/v1/sessions")
        assert response.status_code == 201
        data = response.json()
        assert data["stack"] == []
        assert data["procedures"] == {}
        assert data["words"] == 13
        assert data["config"]["max_steps"] == 100_000

    def test_state_persists_between_calls(self, client, session_id):
        """Test definitions and stack carry over."""
        client.post(f"/api/v1/sessions/{session_id}/eval", json={"source": ": sq dup * ;"})
        response = client.post(f"/api/v1/sessions/{session_id}/eval", json={"source": "4 sq . 3"})
        data = response.json()
        assert data["success"] is True
        assert data["output"] == [16]
        assert data["stack"] == [3]

        state = client.get(f"/api/v1/sessions/{session_id}").json()
        assert state["procedures"] == {"sq": ["dup", "*"]}
        assert state["stack"] == [3]

    def test_language_error_is_not_http_error(self, client, session_id):
        """Test eval failures come back as success=false."""
        response = client.post(f"/api/v1/sessions/{session_id}/eval", json={"source": "1 nope 2"})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["error_kind"] == "UndefinedWord"
        assert data["error"] == 'Undefined word "nope"'
        assert data["stack"] == [1]

    def test_default_step_budget(self, client, session_id):
        """Test sessions stop runaway recursion."""
        response = client.post(f"/api/v1/sessions/{session_id}/eval", json={"source": ": f f ; f"})
        assert response.json()["error_kind"] == "StepLimitExceeded"

    def test_session_config(self, client):
        """Test creating a session with nested conditionals."""
        response = client.post("/api/v1/sessions", json={"nested_conditionals": True, "max_steps": 50})
        session_id = response.json()["session_id"]
        response = client.post(
            f"/api/v1/sessions/{session_id}/eval",
            json={"source": "0 if 1 if 2 then 3 then 4"},
        )
        data = response.json()
        assert data["success"] is True
        assert data["stack"] == [4]

    def test_invalid_config(self, client):
        """Test max_steps must be positive."""
        response = client.post("/api/v1/sessions", json={"max_steps": 0})
        assert response.status_code == 422

    def test_null_max_steps_rejected(self, client):
        """Test a session cannot opt out of the step limit."""
        response = client.post("/api/v1/sessions", json={"max_steps": None})
        assert response.status_code == 422

    def test_missing_source(self, client, session_id):
        """Test eval with missing source."""
        response = client.post(f"/api/v1/sessions/{session_id}/eval", json={})
        assert response.status_code == 422

    def test_unknown_session(self, client):
        """Test unknown ids return 404."""
        assert client.get("/api/v1/sessions/missing").status_code == 404
        response = client.post("/api/v1/sessions/missing/eval", json={"source": "1"})
        assert response.status_code == 404

    def test_delete_session(self, client, session_id):
        """Test deleting a session."""
        response = client.delete(f"/api/v1/sessions/{session_id}")
        assert response.json() == {"deleted": True}
        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404

    def test_sessions_are_isolated(self, client, session_id):
        """Test two sessions do not share definitions."""
        other = client.post("/api/v1/sessions").json()["session_id"]
        client.post(f"/api/v1/sessions/{session_id}/eval", json={"source": ": one 1 ;"})
        response = client.post(f"/api/v1/sessions/{other}/eval", json={"source": "one"})
        assert response.json()["error_kind"] == "UndefinedWord"


class TestEvalOnceAPI:
    """Tests for /api/v1/eval."""

    def test_eval_once(self, client):
        """Test one-shot evaluation."""
        response = client.post("/api/v1/eval", json={"source": "0 if 10 else 20 then ."})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["output"] == [20]
        assert data["tokens_consumed"] == 4

    def test_eval_once_is_stateless(self, client):
        """Test nothing carries over between one-shot calls."""
        client.post("/api/v1/eval", json={"source": ": one 1 ; 5"})
        response = client.post("/api/v1/eval", json={"source": "one"})
        assert response.json()["success"] is False
        assert sessions_db == {}
