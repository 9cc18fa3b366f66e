"""CRUD operations for the ``collections`` table.

Lookups are always scoped by owner: a collection is only ever read through
``id`` *and* ``account_id`` together.
"""

from __future__ import annotations

import sqlite3
import uuid
from time import time
from typing import Optional

from headb.db.models import Collection


def _row_to_collection(row: sqlite3.Row) -> Collection:
    return Collection(
        id=row["id"],
        name=row["name"],
        account_id=row["account_id"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def create_collection(
    conn: sqlite3.Connection, account_id: str, name: Optional[str]
) -> Collection:
    """Insert a new collection owned by ``account_id`` and return it.

    Raises:
        sqlite3.IntegrityError: If ``name`` is null or ``account_id`` does
            not reference an existing account.
    """
    cid = str(uuid.uuid4())
    now = int(time())

    with conn:
        conn.execute(
            """
            INSERT INTO collections (id, name, account_id, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            (cid, name, account_id, now, now),
        )

    return get_collection(conn, cid, account_id)  # type: ignore[return-value]


def get_collection(
    conn: sqlite3.Connection, collection_id: str, account_id: str
) -> Optional[Collection]:
    """Fetch a collection by id, only if it belongs to ``account_id``."""
    row = conn.execute(
        "SELECT * FROM collections WHERE id = ? AND account_id = ?",
        (collection_id, account_id),
    ).fetchone()
    return _row_to_collection(row) if row else None


def list_collections(conn: sqlite3.Connection, account_id: str) -> list[Collection]:
    """Return all collections owned by ``account_id``."""
    rows = conn.execute(
        "SELECT * FROM collections WHERE account_id = ?", (account_id,)
    ).fetchall()
    return [_row_to_collection(r) for r in rows]


def update_collection(
    conn: sqlite3.Connection, collection_id: str, account_id: str, name: Optional[str]
) -> Optional[Collection]:
    """Overwrite the mutable fields of a collection.

    Ownership is never rewritten.  Returns ``None`` when the row is gone.
    """
    with conn:
        cursor = conn.execute(
            "UPDATE collections SET name = ?, updated_at = ? WHERE id = ?",
            (name, int(time()), collection_id),
        )
    if cursor.rowcount == 0:
        return None
    return get_collection(conn, collection_id, account_id)


def delete_collection(conn: sqlite3.Connection, collection_id: str) -> None:
    """Delete a collection (its documents go via CASCADE)."""
    with conn:
        conn.execute("DELETE FROM collections WHERE id = ?", (collection_id,))
