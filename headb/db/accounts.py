"""CRUD operations for the ``accounts`` table."""

from __future__ import annotations

import sqlite3
import uuid
from time import time
from typing import Optional

from headb.db.models import Account


def _row_to_account(row: sqlite3.Row) -> Account:
    return Account(
        id=row["id"],
        handle=row["handle"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def create_account(conn: sqlite3.Connection, handle: Optional[str]) -> Account:
    """Insert a new account and return it.

    Raises:
        sqlite3.IntegrityError: If ``handle`` is null or already taken.
    """
    aid = str(uuid.uuid4())
    now = int(time())

    with conn:
        conn.execute(
            """
            INSERT INTO accounts (id, handle, created_at, updated_at)
            VALUES (?, ?, ?, ?)
            """,
            (aid, handle, now, now),
        )

    return get_account(conn, aid)  # type: ignore[return-value]


def get_account(conn: sqlite3.Connection, account_id: str) -> Optional[Account]:
    """Fetch a single account by its UUID.  Returns ``None`` if not found."""
    row = conn.execute(
        "SELECT * FROM accounts WHERE id = ?", (account_id,)
    ).fetchone()
    return _row_to_account(row) if row else None


def list_accounts(conn: sqlite3.Connection) -> list[Account]:
    """Return every account."""
    rows = conn.execute("SELECT * FROM accounts").fetchall()
    return [_row_to_account(r) for r in rows]


def update_account(
    conn: sqlite3.Connection, account_id: str, handle: Optional[str]
) -> Optional[Account]:
    """Overwrite the mutable fields of an account.

    Returns ``None`` when the row no longer exists.
    """
    with conn:
        cursor = conn.execute(
            "UPDATE accounts SET handle = ?, updated_at = ? WHERE id = ?",
            (handle, int(time()), account_id),
        )
    if cursor.rowcount == 0:
        return None
    return get_account(conn, account_id)


def delete_account(conn: sqlite3.Connection, account_id: str) -> None:
    """Delete an account (collections and documents go via CASCADE).

    This is a no-op if the account does not exist.
    """
    with conn:
        conn.execute("DELETE FROM accounts WHERE id = ?", (account_id,))
