"""Tests for the fetch-then-merge update helper."""

from headb.services.merge import merge

STORED = {
    "id": "c1",
    "name": "A",
    "account_id": "u1",
    "created_at": 100,
    "updated_at": 100,
}


def test_patch_fields_override():
    assert merge(STORED, {"name": "B"})["name"] == "B"


def test_omitted_fields_are_kept():
    merged = merge(STORED, {})
    assert merged == STORED


def test_server_fields_are_ignored():
    merged = merge(STORED, {"id": "other", "created_at": 1, "updated_at": 2})
    assert merged == STORED


def test_protected_fields_are_ignored():
    merged = merge(STORED, {"account_id": "u2", "name": "B"}, protected={"account_id"})
    assert merged["account_id"] == "u1"
    assert merged["name"] == "B"


def test_unknown_fields_are_dropped():
    assert "colour" not in merge(STORED, {"colour": "red"})


def test_explicit_none_overrides():
    assert merge(STORED, {"name": None})["name"] is None


def test_inputs_are_not_mutated():
    patch = {"name": "B"}
    merge(STORED, patch)
    assert STORED["name"] == "A"
    assert patch == {"name": "B"}
