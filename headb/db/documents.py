"""CRUD operations for the ``documents`` table.

Content is an opaque JSON value stored as text.  Lookups are scoped by the
parent collection.
"""

from __future__ import annotations

import json
import sqlite3
import uuid
from time import time
from typing import Any, Optional

from headb.db.models import Document


def _row_to_document(row: sqlite3.Row) -> Document:
    return Document(
        id=row["id"],
        content=json.loads(row["content"]),
        collection_id=row["collection_id"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _content_json(content: Any) -> Optional[str]:
    # None maps to SQL NULL so the NOT NULL constraint rejects it.
    return None if content is None else json.dumps(content)


def create_document(
    conn: sqlite3.Connection, collection_id: str, content: Any
) -> Document:
    """Insert a new document under ``collection_id`` and return it.

    Raises:
        sqlite3.IntegrityError: If ``content`` is null or ``collection_id``
            does not reference an existing collection.
    """
    did = str(uuid.uuid4())
    now = int(time())

    with conn:
        conn.execute(
            """
            INSERT INTO documents (id, content, collection_id, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            (did, _content_json(content), collection_id, now, now),
        )

    return get_document(conn, did, collection_id)  # type: ignore[return-value]


def get_document(
    conn: sqlite3.Connection, document_id: str, collection_id: str
) -> Optional[Document]:
    """Fetch a document by id, only if it lives in ``collection_id``."""
    row = conn.execute(
        "SELECT * FROM documents WHERE id = ? AND collection_id = ?",
        (document_id, collection_id),
    ).fetchone()
    return _row_to_document(row) if row else None


def list_documents(conn: sqlite3.Connection, collection_id: str) -> list[Document]:
    """Return all documents in ``collection_id``."""
    rows = conn.execute(
        "SELECT * FROM documents WHERE collection_id = ?", (collection_id,)
    ).fetchall()
    return [_row_to_document(r) for r in rows]


def update_document(
    conn: sqlite3.Connection, document_id: str, collection_id: str, content: Any
) -> Optional[Document]:
    """Overwrite the content of a document.  Returns ``None`` when the row is gone."""
    with conn:
        cursor = conn.execute(
            "UPDATE documents SET content = ?, updated_at = ? WHERE id = ?",
            (_content_json(content), int(time()), document_id),
        )
    if cursor.rowcount == 0:
        return None
    return get_document(conn, document_id, collection_id)


def delete_document(conn: sqlite3.Connection, document_id: str) -> None:
    """Delete a document."""
    with conn:
        conn.execute("DELETE FROM documents WHERE id = ?", (document_id,))
