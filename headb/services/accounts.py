"""Account resolver.

Accounts are the root of the ownership chain and have no owner of their
own, so this is plain CRUD with id validation.  ``get_account`` is the leaf
every collection and document operation resolves against.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Mapping, Optional

from headb.db import accounts as store
from headb.db.models import Account
from headb.services.identifiers import check_ids, normalize_id
from headb.services.merge import merge
from headb.services.result import Err, ErrorKind, Ok, Result
from headb.services.storage_errors import translate_storage_errors

logger = logging.getLogger(__name__)


def _not_found(account_id: str) -> Err:
    logger.warning("Could not find account %s", account_id)
    return Err(ErrorKind.ACCOUNT_NOT_FOUND, f"Could not find account for id {account_id}")


@translate_storage_errors()
def list_accounts(conn: sqlite3.Connection) -> Result[list[Account]]:
    return Ok(store.list_accounts(conn))


@translate_storage_errors()
def get_account(conn: sqlite3.Connection, account_id: Optional[str]) -> Result[Account]:
    invalid = check_ids(("account", account_id))
    if invalid:
        return invalid

    found = store.get_account(conn, normalize_id(account_id))  # type: ignore[arg-type]
    if found is None:
        return _not_found(account_id)  # type: ignore[arg-type]
    return Ok(found)


@translate_storage_errors()
def create_account(conn: sqlite3.Connection, data: Mapping[str, Any]) -> Result[Account]:
    """Create an account.  A null handle is Invalid Payload, a taken one Conflict."""
    account = store.create_account(conn, data.get("handle"))
    logger.info("Created account %s", account.id)
    return Ok(account)


@translate_storage_errors()
def update_account(
    conn: sqlite3.Connection,
    account_id: Optional[str],
    patch: Mapping[str, Any],
) -> Result[Account]:
    current = get_account(conn, account_id)
    if isinstance(current, Err):
        return current

    merged = merge(current.value.to_dict(), patch)
    updated = store.update_account(conn, current.value.id, merged["handle"])
    if updated is None:
        return _not_found(current.value.id)
    logger.info("Updated account %s", updated.id)
    return Ok(updated)


patch_account = update_account


@translate_storage_errors()
def remove_account(conn: sqlite3.Connection, account_id: Optional[str]) -> Result[Account]:
    """Delete an account and, by cascade, everything it owns."""
    current = get_account(conn, account_id)
    if isinstance(current, Err):
        return current

    store.delete_account(conn, current.value.id)
    logger.info("Deleted account %s", current.value.id)
    return current
