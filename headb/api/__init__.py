"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from headb.api import app

    uvicorn headb.api:app --reload
"""

from headb.api.app import app

__all__ = ["app"]
