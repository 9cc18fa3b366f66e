"""Database initialisation helpers.

``init_db(conn)`` is idempotent and safe to call on an existing database.
"""

from __future__ import annotations

import logging
import sqlite3

from headb.config import settings

logger = logging.getLogger(__name__)

# Bump together with schema.sql.
SCHEMA_VERSION = 1


def _read_schema() -> str:
    return settings.schema_path.read_text(encoding="utf-8")


def init_db(conn: sqlite3.Connection) -> None:
    """Create all tables and indexes, then record the schema version.

    Every DDL statement uses ``IF NOT EXISTS`` so calling this multiple times
    on the same database is safe.

    Args:
        conn: An open, configured SQLite connection.
    """
    # executescript() issues an implicit COMMIT first, fine for DDL-only scripts.
    conn.executescript(_read_schema())
    _ensure_version_table(conn)
    if current_version(conn) < SCHEMA_VERSION:
        with conn:
            conn.execute(
                "INSERT INTO schema_version(version) VALUES (?)", (SCHEMA_VERSION,)
            )
        logger.info("Database schema initialised at version %d", SCHEMA_VERSION)


def _ensure_version_table(conn: sqlite3.Connection) -> None:
    """Create the internal schema-version tracking table if absent."""
    with conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS schema_version (
                version  INTEGER PRIMARY KEY,
                applied_at INTEGER DEFAULT (strftime('%s', 'now'))
            )
            """
        )


def current_version(conn: sqlite3.Connection) -> int:
    """Return the highest applied schema version (0 if none applied)."""
    row = conn.execute(
        "SELECT COALESCE(MAX(version), 0) FROM schema_version"
    ).fetchone()
    return row[0] if row else 0
