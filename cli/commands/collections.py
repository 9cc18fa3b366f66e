"""Collection commands, always scoped by the owning account."""

import typer

from headb.db import get_connection, init_db
from headb.services import collections
from cli.rendering import render_record, unwrap_or_exit

collections_app = typer.Typer(help="Manage the collections of an account.", no_args_is_help=True)


@collections_app.command("new")
def collection_new(
    account_id: str = typer.Argument(..., help="Owning account UUID."),
    name: str = typer.Argument(..., help="Name of the new collection."),
) -> None:
    """Create a collection under an account."""
    conn = get_connection()
    init_db(conn)
    try:
        collection = unwrap_or_exit(
            collections.create_collection(conn, account_id, {"name": name})
        )
        typer.echo(f"✅ Collection created: {collection.name} ({collection.id})")
    finally:
        conn.close()


@collections_app.command("list")
def collection_list(account_id: str = typer.Argument(..., help="Owning account UUID.")) -> None:
    """List the collections of an account."""
    conn = get_connection()
    init_db(conn)
    try:
        found = unwrap_or_exit(collections.list_collections(conn, account_id))
        if not found:
            typer.echo("No collections found.")
            return
        for c in found:
            typer.echo(f"  {c.name} \t[{c.id}]")
    finally:
        conn.close()


@collections_app.command("show")
def collection_show(
    account_id: str = typer.Argument(..., help="Owning account UUID."),
    collection_id: str = typer.Argument(..., help="Collection UUID."),
) -> None:
    """Print one collection as JSON."""
    conn = get_connection()
    init_db(conn)
    try:
        found = unwrap_or_exit(collections.get_collection(conn, account_id, collection_id))
        typer.echo(render_record(found))
    finally:
        conn.close()


@collections_app.command("rename")
def collection_rename(
    account_id: str = typer.Argument(..., help="Owning account UUID."),
    collection_id: str = typer.Argument(..., help="Collection UUID."),
    name: str = typer.Argument(..., help="New name."),
) -> None:
    """Rename a collection."""
    conn = get_connection()
    init_db(conn)
    try:
        collection = unwrap_or_exit(
            collections.update_collection(conn, account_id, collection_id, {"name": name})
        )
        typer.echo(f"✅ Collection renamed: {collection.name} ({collection.id})")
    finally:
        conn.close()


@collections_app.command("delete")
def collection_delete(
    account_id: str = typer.Argument(..., help="Owning account UUID."),
    collection_id: str = typer.Argument(..., help="Collection UUID."),
) -> None:
    """Delete a collection together with its documents."""
    conn = get_connection()
    init_db(conn)
    try:
        collection = unwrap_or_exit(
            collections.remove_collection(conn, account_id, collection_id)
        )
        typer.echo(f"🗑️  Collection deleted: {collection.name} ({collection.id})")
    finally:
        conn.close()
