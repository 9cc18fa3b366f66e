"""Account management commands."""

import typer

from headb.db import get_connection, init_db
from headb.services import accounts
from cli.rendering import render_record, unwrap_or_exit

accounts_app = typer.Typer(help="Manage accounts.", no_args_is_help=True)


@accounts_app.command("new")
def account_new(
    handle: str = typer.Argument(..., help="Unique handle of the new account.")
) -> None:
    """Create a new account."""
    conn = get_connection()
    init_db(conn)
    try:
        account = unwrap_or_exit(accounts.create_account(conn, {"handle": handle}))
        typer.echo(f"✅ Account created: {account.handle} ({account.id})")
    finally:
        conn.close()


@accounts_app.command("list")
def account_list() -> None:
    """List all accounts."""
    conn = get_connection()
    init_db(conn)
    try:
        found = unwrap_or_exit(accounts.list_accounts(conn))
        if not found:
            typer.echo("No accounts found.")
            return
        for a in found:
            typer.echo(f"  {a.handle} \t[{a.id}]")
    finally:
        conn.close()


@accounts_app.command("show")
def account_show(account_id: str = typer.Argument(..., help="Account UUID.")) -> None:
    """Print one account as JSON."""
    conn = get_connection()
    init_db(conn)
    try:
        typer.echo(render_record(unwrap_or_exit(accounts.get_account(conn, account_id))))
    finally:
        conn.close()


@accounts_app.command("rename")
def account_rename(
    account_id: str = typer.Argument(..., help="Account UUID."),
    handle: str = typer.Argument(..., help="New handle."),
) -> None:
    """Change the handle of an account."""
    conn = get_connection()
    init_db(conn)
    try:
        account = unwrap_or_exit(accounts.update_account(conn, account_id, {"handle": handle}))
        typer.echo(f"✅ Account renamed: {account.handle} ({account.id})")
    finally:
        conn.close()


@accounts_app.command("delete")
def account_delete(account_id: str = typer.Argument(..., help="Account UUID.")) -> None:
    """Delete an account together with its collections and documents."""
    conn = get_connection()
    init_db(conn)
    try:
        account = unwrap_or_exit(accounts.remove_account(conn, account_id))
        typer.echo(f"🗑️  Account deleted: {account.handle} ({account.id})")
    finally:
        conn.close()
