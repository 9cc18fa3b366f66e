"""headb CLI: entry-point for database and resource operations.

Usage:
    headb --help

Command groups:
    db           → schema bootstrap
    accounts     → account CRUD
    collections  → collections of an account
    documents    → documents of a collection
    serve        → run the HTTP API
"""

from __future__ import annotations

from typing import Optional

import typer

from headb.config import settings
from headb.db import get_connection, init_db
from headb.logging_setup import configure_logging
from cli.commands.accounts import accounts_app
from cli.commands.collections import collections_app
from cli.commands.documents import documents_app

app = typer.Typer(
    name="headb",
    help="headb command-line interface.",
    no_args_is_help=True,
)
app.add_typer(accounts_app, name="accounts")
app.add_typer(collections_app, name="collections")
app.add_typer(documents_app, name="documents")

db_app = typer.Typer(help="Database operations.", no_args_is_help=True)
app.add_typer(db_app, name="db")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override HEADB_LOG_LEVEL."),
) -> None:
    configure_logging(log_level.upper() if log_level else None)


@db_app.command("init")
def db_init() -> None:
    """Initialise the SQLite database (create tables if they do not exist)."""
    conn = get_connection()
    init_db(conn)
    conn.close()
    typer.echo(f"[db init] Database ready at {settings.db_path}")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind host (default HEADB_HOST)."),
    port: Optional[int] = typer.Option(None, help="Bind port (default HEADB_PORT)."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "headb.api.app:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_config=None,
    )


if __name__ == "__main__":
    app()
