"""Tests for the headb CLI command groups."""

import json

import pytest
from typer.testing import CliRunner

from headb.db import get_connection, init_db
from headb.db.accounts import create_account
from headb.db.collections import create_collection
from headb.db.documents import create_document, get_document
from cli.main import app

runner = CliRunner()

MISSING = "8aec7349-5d4f-4dce-b576-182841348a3e"


@pytest.fixture
def clean_db(tmp_path, monkeypatch):
    """Point the CLI at a fresh database inside tmp_path."""
    monkeypatch.setattr("headb.config.settings.workspace_dir", tmp_path)
    return tmp_path / "headb.db"


@pytest.fixture
def seeded(clean_db):
    """An account with one collection holding one document."""
    conn = get_connection()
    init_db(conn)
    account = create_account(conn, "alice")
    collection = create_collection(conn, account.id, "notes")
    document = create_document(conn, collection.id, {"title": "draft"})
    conn.close()
    return account, collection, document


def test_db_init(clean_db):
    result = runner.invoke(app, ["db", "init"])
    assert result.exit_code == 0
    assert "Database ready" in result.stdout
    assert clean_db.exists()


def test_account_new_and_list(clean_db):
    result = runner.invoke(app, ["accounts", "new", "alice"])
    assert result.exit_code == 0
    assert "✅ Account created: alice" in result.stdout

    result = runner.invoke(app, ["accounts", "list"])
    assert result.exit_code == 0
    assert "alice" in result.stdout


def test_account_list_empty(clean_db):
    result = runner.invoke(app, ["accounts", "list"])
    assert result.exit_code == 0
    assert "No accounts found." in result.stdout


def test_account_duplicate_handle_fails(seeded):
    result = runner.invoke(app, ["accounts", "new", "alice"])
    assert result.exit_code == 1
    assert "[conflict]" in result.output


def test_account_show(seeded):
    account, _, _ = seeded
    result = runner.invoke(app, ["accounts", "show", account.id])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == account.to_dict()


def test_account_show_malformed(clean_db):
    result = runner.invoke(app, ["accounts", "show", "1234"])
    assert result.exit_code == 1
    assert "[malformed_identifier]" in result.output


def test_account_rename_and_delete(seeded):
    account, _, _ = seeded
    result = runner.invoke(app, ["accounts", "rename", account.id, "bob"])
    assert result.exit_code == 0
    assert "bob" in result.stdout

    result = runner.invoke(app, ["accounts", "delete", account.id])
    assert result.exit_code == 0
    assert "Account deleted: bob" in result.stdout

    conn = get_connection()
    assert conn.execute("SELECT COUNT(*) FROM documents").fetchone()[0] == 0
    conn.close()


def test_collection_commands(seeded):
    account, collection, _ = seeded
    result = runner.invoke(app, ["collections", "new", account.id, "archive"])
    assert result.exit_code == 0
    assert "✅ Collection created: archive" in result.stdout

    result = runner.invoke(app, ["collections", "list", account.id])
    assert result.exit_code == 0
    assert "notes" in result.stdout
    assert "archive" in result.stdout

    result = runner.invoke(app, ["collections", "rename", account.id, collection.id, "journal"])
    assert result.exit_code == 0
    assert "journal" in result.stdout

    result = runner.invoke(app, ["collections", "show", account.id, collection.id])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["name"] == "journal"


def test_collection_show_other_owner(seeded):
    _, collection, _ = seeded
    conn = get_connection()
    other = create_account(conn, "mallory")
    conn.close()

    result = runner.invoke(app, ["collections", "show", other.id, collection.id])
    assert result.exit_code == 1
    assert "[collection_not_found]" in result.output


def test_collection_new_unknown_account(clean_db):
    result = runner.invoke(app, ["collections", "new", MISSING, "x"])
    assert result.exit_code == 1
    assert "[account_not_found]" in result.output


def test_document_new_and_list(seeded):
    account, collection, _ = seeded
    result = runner.invoke(
        app,
        ["documents", "new", account.id, collection.id, "--content", '{"n": 1}'],
    )
    assert result.exit_code == 0
    assert "✅ Document created" in result.stdout

    result = runner.invoke(app, ["documents", "list", account.id, collection.id])
    assert result.exit_code == 0
    assert '{"n": 1}' in result.stdout
    assert '{"title": "draft"}' in result.stdout


def test_document_new_invalid_json(seeded):
    account, collection, _ = seeded
    result = runner.invoke(
        app, ["documents", "new", account.id, collection.id, "--content", "{nope"]
    )
    assert result.exit_code == 1
    assert "not valid JSON" in result.output


def test_document_set_content_show_and_delete(seeded):
    account, collection, document = seeded
    args = [account.id, collection.id, document.id]

    result = runner.invoke(app, ["documents", "set-content", *args, '{"title": "final"}'])
    assert result.exit_code == 0

    result = runner.invoke(app, ["documents", "show", *args])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["content"] == {"title": "final"}

    result = runner.invoke(app, ["documents", "delete", *args])
    assert result.exit_code == 0
    assert "Document deleted" in result.stdout

    conn = get_connection()
    assert get_document(conn, document.id, collection.id) is None
    conn.close()


def test_document_show_missing(seeded):
    account, collection, _ = seeded
    result = runner.invoke(app, ["documents", "show", account.id, collection.id, MISSING])
    assert result.exit_code == 1
    assert "[document_not_found]" in result.output
