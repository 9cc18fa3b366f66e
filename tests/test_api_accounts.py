"""Tests for the /accounts API endpoints.

All tests use an in-memory SQLite database via the FastAPI TestClient.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from headb.api.app import create_app
from headb.db.connection import get_connection
from headb.db.migrations import init_db

MISSING = "8aec7349-5d4f-4dce-b576-182841348a3e"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def client(tmp_path, monkeypatch):
    """Return a TestClient backed by an isolated in-memory DB.

    The lifespan opens its own connection inside a temporary workspace; it is
    replaced right away so each test starts from an empty database.
    """
    monkeypatch.setattr("headb.config.settings.workspace_dir", tmp_path)
    conn = get_connection(db_path=":memory:")  # type: ignore[arg-type]
    init_db(conn)
    app = create_app()

    with TestClient(app, raise_server_exceptions=True) as c:
        c.app.state.db = conn
        yield c

    conn.close()


def _create_account(client, handle: str = "test") -> dict:
    resp = client.post("/accounts", json={"handle": handle})
    assert resp.status_code == 201
    return resp.json()


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestAccounts:
    def test_empty_list(self, client):
        resp = client.get("/accounts")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_create_returns_generated_fields(self, client):
        data = _create_account(client, "alice")
        assert data["handle"] == "alice"
        assert len(data["id"]) == 36  # UUID format
        assert data["created_at"] == data["updated_at"]

    def test_get_roundtrip(self, client):
        created = _create_account(client)
        resp = client.get(f"/accounts/{created['id']}")
        assert resp.status_code == 200
        assert resp.json() == created

    def test_get_malformed_is_400(self, client):
        resp = client.get("/accounts/1234")
        assert resp.status_code == 400
        assert resp.json()["detail"]["code"] == "malformed_identifier"

    def test_get_unknown_is_404(self, client):
        resp = client.get(f"/accounts/{MISSING}")
        assert resp.status_code == 404
        assert resp.json()["detail"]["code"] == "account_not_found"

    def test_duplicate_handle_is_409(self, client):
        _create_account(client, "dup")
        resp = client.post("/accounts", json={"handle": "dup"})
        assert resp.status_code == 409

    def test_missing_handle_is_400(self, client):
        resp = client.post("/accounts", json={})
        assert resp.status_code == 400
        assert resp.json()["detail"]["code"] == "invalid_payload"

    def test_wrong_type_is_400(self, client):
        resp = client.post("/accounts", json={"handle": ["not", "text"]})
        assert resp.status_code == 400
        assert resp.json()["detail"]["code"] == "invalid_payload"

    def test_patch_and_put(self, client):
        created = _create_account(client, "before")
        resp = client.patch(f"/accounts/{created['id']}", json={"handle": "after"})
        assert resp.status_code == 200
        assert resp.json()["handle"] == "after"
        assert resp.json()["created_at"] == created["created_at"]

        resp = client.put(f"/accounts/{created['id']}", json={})
        assert resp.status_code == 200
        assert resp.json()["handle"] == "after"

    def test_delete_returns_deleted(self, client):
        created = _create_account(client)
        resp = client.delete(f"/accounts/{created['id']}")
        assert resp.status_code == 200
        assert resp.json() == created
        assert client.get(f"/accounts/{created['id']}").status_code == 404


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"api": "ok", "database": "ok"}


class TestCorsHeaders:
    def test_cors_header_present_on_get(self, client):
        resp = client.get("/accounts", headers={"Origin": "http://localhost:3000"})
        assert resp.status_code == 200
        assert resp.headers.get("access-control-allow-origin") == "*"
