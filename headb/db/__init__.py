"""Database layer package.

Public re-exports so callers can write::

    from headb.db import get_connection, init_db
"""

from headb.db.connection import get_connection
from headb.db.migrations import init_db

__all__ = ["get_connection", "init_db"]
