"""Document commands, scoped by account and collection.

Content is passed as JSON text, e.g. ``'{"title": "draft"}'``.
"""

import json
from typing import Any

import typer

from headb.db import get_connection, init_db
from headb.services import documents
from cli.rendering import render_record, unwrap_or_exit

documents_app = typer.Typer(help="Manage the documents of a collection.", no_args_is_help=True)


def _parse_content(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        typer.echo(f"❌ Content is not valid JSON: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@documents_app.command("new")
def document_new(
    account_id: str = typer.Argument(..., help="Owning account UUID."),
    collection_id: str = typer.Argument(..., help="Parent collection UUID."),
    content: str = typer.Option("{}", "--content", help="Document content as JSON."),
) -> None:
    """Create a document in a collection."""
    data = {"content": _parse_content(content)}
    conn = get_connection()
    init_db(conn)
    try:
        document = unwrap_or_exit(
            documents.create_document(conn, account_id, collection_id, data)
        )
        typer.echo(f"✅ Document created: {document.id}")
    finally:
        conn.close()


@documents_app.command("list")
def document_list(
    account_id: str = typer.Argument(..., help="Owning account UUID."),
    collection_id: str = typer.Argument(..., help="Parent collection UUID."),
) -> None:
    """List the documents of a collection."""
    conn = get_connection()
    init_db(conn)
    try:
        found = unwrap_or_exit(documents.list_documents(conn, account_id, collection_id))
        if not found:
            typer.echo("No documents found.")
            return
        for d in found:
            typer.echo(f"  {d.id}  {json.dumps(d.content)}")
    finally:
        conn.close()


@documents_app.command("show")
def document_show(
    account_id: str = typer.Argument(..., help="Owning account UUID."),
    collection_id: str = typer.Argument(..., help="Parent collection UUID."),
    document_id: str = typer.Argument(..., help="Document UUID."),
) -> None:
    """Print one document as JSON."""
    conn = get_connection()
    init_db(conn)
    try:
        found = unwrap_or_exit(
            documents.get_document(conn, account_id, collection_id, document_id)
        )
        typer.echo(render_record(found))
    finally:
        conn.close()


@documents_app.command("set-content")
def document_set_content(
    account_id: str = typer.Argument(..., help="Owning account UUID."),
    collection_id: str = typer.Argument(..., help="Parent collection UUID."),
    document_id: str = typer.Argument(..., help="Document UUID."),
    content: str = typer.Argument(..., help="New content as JSON."),
) -> None:
    """Replace the content of a document."""
    patch = {"content": _parse_content(content)}
    conn = get_connection()
    init_db(conn)
    try:
        document = unwrap_or_exit(
            documents.update_document(conn, account_id, collection_id, document_id, patch)
        )
        typer.echo(f"✅ Document updated: {document.id}")
    finally:
        conn.close()


@documents_app.command("delete")
def document_delete(
    account_id: str = typer.Argument(..., help="Owning account UUID."),
    collection_id: str = typer.Argument(..., help="Parent collection UUID."),
    document_id: str = typer.Argument(..., help="Document UUID."),
) -> None:
    """Delete a document."""
    conn = get_connection()
    init_db(conn)
    try:
        document = unwrap_or_exit(
            documents.remove_document(conn, account_id, collection_id, document_id)
        )
        typer.echo(f"🗑️  Document deleted: {document.id}")
    finally:
        conn.close()
