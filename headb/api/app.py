"""FastAPI application factory.

Lifespan
--------
On startup the app configures logging, opens a single SQLite connection
(shared across all requests via ``request.app.state.db``) and initialises the
schema.  On shutdown it closes the connection cleanly.

Routers
-------
    /accounts                                    account CRUD
    /accounts/{account_id}/collections           collections of an account
    /accounts/{account_id}/collections/{collection_id}/documents
                                                 documents of a collection
    /health                                      liveness + DB check
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from headb import __version__
from headb.api.errors import invalid_payload_handler
from headb.api.routers import accounts as accounts_router
from headb.api.routers import collections as collections_router
from headb.api.routers import documents as documents_router
from headb.db import get_connection, init_db
from headb.logging_setup import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the DB on startup and close it on shutdown."""
    configure_logging()
    conn = get_connection()
    init_db(conn)
    app.state.db = conn
    logger.info("headb API started")
    try:
        yield
    finally:
        conn.close()


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="headb API",
        description=(
            "REST interface over accounts, their collections and the "
            "documents inside them. Every nested operation checks the full "
            "ownership chain before touching storage."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, invalid_payload_handler)

    app.include_router(accounts_router.router, prefix="/accounts", tags=["accounts"])
    app.include_router(
        collections_router.router,
        prefix="/accounts/{account_id}/collections",
        tags=["collections"],
    )
    app.include_router(
        documents_router.router,
        prefix="/accounts/{account_id}/collections/{collection_id}/documents",
        tags=["documents"],
    )

    @app.get("/health", tags=["health"])
    def health(request: Request) -> dict[str, Any]:
        """Confirm the API is up and the database answers."""
        try:
            request.app.state.db.execute("SELECT 1").fetchone()
        except sqlite3.Error as exc:
            logger.error("Health check failed: %s", exc)
            raise HTTPException(status_code=503, detail="Could not reach the database.") from exc
        return {"api": "ok", "database": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn headb.api.app:app --reload
app = create_app()
