"""Collection resolver.

Every operation resolves the owning account before touching the
``collections`` table.  The scoped lookup (``id`` and ``account_id`` in one
query) is the authorization boundary: a collection owned by someone else
looks exactly like one that does not exist.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Mapping, Optional

from headb.db import collections as store
from headb.db.models import Collection
from headb.services import accounts
from headb.services.identifiers import check_ids, normalize_id
from headb.services.merge import merge
from headb.services.result import Err, ErrorKind, Ok, Result
from headb.services.storage_errors import translate_storage_errors

logger = logging.getLogger(__name__)

OWNERSHIP_FIELD = "account_id"


def _not_found(collection_id: str) -> Err:
    logger.warning("Could not find collection %s", collection_id)
    return Err(
        ErrorKind.COLLECTION_NOT_FOUND,
        f"Could not find collection for id {collection_id}",
    )


@translate_storage_errors()
def resolve_owner(conn: sqlite3.Connection, account_id: Optional[str]) -> Result[str]:
    """Confirm the owning account exists and return its normalized id."""
    found = accounts.get_account(conn, account_id)
    if isinstance(found, Err):
        return found
    return Ok(found.value.id)


@translate_storage_errors()
def list_collections(
    conn: sqlite3.Connection, account_id: Optional[str]
) -> Result[list[Collection]]:
    owner = resolve_owner(conn, account_id)
    if isinstance(owner, Err):
        return owner
    return Ok(store.list_collections(conn, owner.value))


@translate_storage_errors()
def get_collection(
    conn: sqlite3.Connection,
    account_id: Optional[str],
    collection_id: Optional[str],
) -> Result[Collection]:
    invalid = check_ids(("account", account_id), ("collection", collection_id))
    if invalid:
        return invalid

    owner = resolve_owner(conn, account_id)
    if isinstance(owner, Err):
        return owner

    found = store.get_collection(conn, normalize_id(collection_id), owner.value)  # type: ignore[arg-type]
    if found is None:
        return _not_found(collection_id)  # type: ignore[arg-type]
    return Ok(found)


@translate_storage_errors(missing_parent=ErrorKind.ACCOUNT_NOT_FOUND)
def create_collection(
    conn: sqlite3.Connection,
    account_id: Optional[str],
    data: Mapping[str, Any],
) -> Result[Collection]:
    """Create a collection owned by *account_id*.

    Ownership comes from the path; ``id`` or ``account_id`` in *data* are
    ignored.  A null or absent ``name`` is rejected by storage.
    """
    owner = resolve_owner(conn, account_id)
    if isinstance(owner, Err):
        return owner

    collection = store.create_collection(conn, owner.value, data.get("name"))
    logger.info("Created collection %s for account %s", collection.id, owner.value)
    return Ok(collection)


@translate_storage_errors()
def update_collection(
    conn: sqlite3.Connection,
    account_id: Optional[str],
    collection_id: Optional[str],
    patch: Mapping[str, Any],
) -> Result[Collection]:
    """Merge *patch* over the stored collection and write it back."""
    current = get_collection(conn, account_id, collection_id)
    if isinstance(current, Err):
        return current

    merged = merge(current.value.to_dict(), patch, protected={OWNERSHIP_FIELD})
    updated = store.update_collection(
        conn, current.value.id, current.value.account_id, merged["name"]
    )
    if updated is None:
        return _not_found(current.value.id)
    logger.info("Updated collection %s", updated.id)
    return Ok(updated)


patch_collection = update_collection


@translate_storage_errors()
def remove_collection(
    conn: sqlite3.Connection,
    account_id: Optional[str],
    collection_id: Optional[str],
) -> Result[Collection]:
    """Delete a collection and return it as it was before deletion."""
    current = get_collection(conn, account_id, collection_id)
    if isinstance(current, Err):
        return current

    store.delete_collection(conn, current.value.id)
    logger.info("Deleted collection %s", current.value.id)
    return current
