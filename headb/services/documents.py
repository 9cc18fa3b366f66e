"""Document resolver.

Mirrors :mod:`headb.services.collections` one level deeper.  The parent
collection is resolved through the collection resolver, and a missing
account is reported as a missing collection: callers of the document layer
only ever learn that the collection could not be found.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Mapping, Optional

from headb.db import documents as store
from headb.db.models import Document
from headb.services import collections
from headb.services.identifiers import check_ids, normalize_id
from headb.services.merge import merge
from headb.services.result import Err, ErrorKind, Ok, Result
from headb.services.storage_errors import translate_storage_errors

logger = logging.getLogger(__name__)

PARENT_FIELD = "collection_id"


def _not_found(document_id: str) -> Err:
    logger.warning("Could not find document %s", document_id)
    return Err(
        ErrorKind.DOCUMENT_NOT_FOUND,
        f"Could not find document for id {document_id}",
    )


@translate_storage_errors()
def resolve_parent(
    conn: sqlite3.Connection,
    account_id: Optional[str],
    collection_id: Optional[str],
) -> Result[str]:
    """Resolve the account → collection chain and return the collection id."""
    found = collections.get_collection(conn, account_id, collection_id)
    if isinstance(found, Err):
        if found.is_not_found:
            return Err(
                ErrorKind.COLLECTION_NOT_FOUND,
                f"Could not find collection for id {collection_id}",
            )
        return found
    return Ok(found.value.id)


@translate_storage_errors()
def list_documents(
    conn: sqlite3.Connection,
    account_id: Optional[str],
    collection_id: Optional[str],
) -> Result[list[Document]]:
    parent = resolve_parent(conn, account_id, collection_id)
    if isinstance(parent, Err):
        return parent
    return Ok(store.list_documents(conn, parent.value))


@translate_storage_errors()
def get_document(
    conn: sqlite3.Connection,
    account_id: Optional[str],
    collection_id: Optional[str],
    document_id: Optional[str],
) -> Result[Document]:
    invalid = check_ids(
        ("account", account_id),
        ("collection", collection_id),
        ("document", document_id),
    )
    if invalid:
        return invalid

    parent = resolve_parent(conn, account_id, collection_id)
    if isinstance(parent, Err):
        return parent

    found = store.get_document(conn, normalize_id(document_id), parent.value)  # type: ignore[arg-type]
    if found is None:
        return _not_found(document_id)  # type: ignore[arg-type]
    return Ok(found)


@translate_storage_errors(missing_parent=ErrorKind.COLLECTION_NOT_FOUND)
def create_document(
    conn: sqlite3.Connection,
    account_id: Optional[str],
    collection_id: Optional[str],
    data: Mapping[str, Any],
) -> Result[Document]:
    """Create a document in the resolved collection.

    ``content`` defaults to an empty object when absent; an explicit null is
    rejected by storage.
    """
    parent = resolve_parent(conn, account_id, collection_id)
    if isinstance(parent, Err):
        return parent

    document = store.create_document(conn, parent.value, data.get("content", {}))
    logger.info("Created document %s in collection %s", document.id, parent.value)
    return Ok(document)


@translate_storage_errors()
def update_document(
    conn: sqlite3.Connection,
    account_id: Optional[str],
    collection_id: Optional[str],
    document_id: Optional[str],
    patch: Mapping[str, Any],
) -> Result[Document]:
    """Merge *patch* over the stored document and write it back."""
    current = get_document(conn, account_id, collection_id, document_id)
    if isinstance(current, Err):
        return current

    merged = merge(current.value.to_dict(), patch, protected={PARENT_FIELD})
    updated = store.update_document(
        conn, current.value.id, current.value.collection_id, merged["content"]
    )
    if updated is None:
        return _not_found(current.value.id)
    logger.info("Updated document %s", updated.id)
    return Ok(updated)


patch_document = update_document


@translate_storage_errors()
def remove_document(
    conn: sqlite3.Connection,
    account_id: Optional[str],
    collection_id: Optional[str],
    document_id: Optional[str],
) -> Result[Document]:
    """Delete a document and return it as it was before deletion."""
    current = get_document(conn, account_id, collection_id, document_id)
    if isinstance(current, Err):
        return current

    store.delete_document(conn, current.value.id)
    logger.info("Deleted document %s", current.value.id)
    return current
