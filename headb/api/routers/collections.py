"""Collection endpoints, nested under an account.

Routes (prefix ``/accounts/{account_id}/collections``)
------
POST   ""                  Create a collection owned by the account
GET    ""                  List the account's collections
GET    /{collection_id}    Fetch one collection
PUT    /{collection_id}    Merge-update a collection
PATCH  /{collection_id}    Alias of PUT
DELETE /{collection_id}    Delete a collection (documents cascade)

PUT, PATCH and DELETE without a collection id answer 400 Missing Identifier.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from headb.api.errors import unwrap
from headb.services import collections

router = APIRouter()


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------

class CollectionCreate(BaseModel):
    name: Optional[str] = None


class CollectionUpdate(BaseModel):
    name: Optional[str] = None


class CollectionResponse(BaseModel):
    id: str
    name: str
    account_id: str
    created_at: int
    updated_at: int


def _patch_of(body: Optional[CollectionUpdate]) -> dict[str, Any]:
    return body.model_dump(exclude_unset=True) if body is not None else {}


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("", response_model=CollectionResponse, status_code=201)
def create(account_id: str, body: CollectionCreate, request: Request) -> dict[str, Any]:
    """Create a collection; the owner is taken from the path."""
    conn = request.app.state.db
    data = body.model_dump(exclude_unset=True)
    return unwrap(collections.create_collection(conn, account_id, data)).to_dict()


@router.get("", response_model=list[CollectionResponse])
def list_all(account_id: str, request: Request) -> list[dict[str, Any]]:
    """Return every collection owned by the account."""
    conn = request.app.state.db
    return [c.to_dict() for c in unwrap(collections.list_collections(conn, account_id))]


@router.put("", response_model=CollectionResponse)
@router.patch("", response_model=CollectionResponse)
def update_without_id(
    account_id: str, request: Request, body: Optional[CollectionUpdate] = None
) -> dict[str, Any]:
    conn = request.app.state.db
    return unwrap(collections.update_collection(conn, account_id, None, _patch_of(body))).to_dict()


@router.delete("", response_model=CollectionResponse)
def remove_without_id(account_id: str, request: Request) -> dict[str, Any]:
    conn = request.app.state.db
    return unwrap(collections.remove_collection(conn, account_id, None)).to_dict()


@router.get("/{collection_id}", response_model=CollectionResponse)
def get_one(account_id: str, collection_id: str, request: Request) -> dict[str, Any]:
    """Fetch one collection, only if the account owns it."""
    conn = request.app.state.db
    return unwrap(collections.get_collection(conn, account_id, collection_id)).to_dict()


@router.put("/{collection_id}", response_model=CollectionResponse)
def update(
    account_id: str, collection_id: str, body: CollectionUpdate, request: Request
) -> dict[str, Any]:
    """Merge the supplied fields over the stored collection."""
    conn = request.app.state.db
    result = collections.update_collection(conn, account_id, collection_id, _patch_of(body))
    return unwrap(result).to_dict()


@router.patch("/{collection_id}", response_model=CollectionResponse)
def patch(
    account_id: str, collection_id: str, body: CollectionUpdate, request: Request
) -> dict[str, Any]:
    """Same merge semantics as PUT."""
    conn = request.app.state.db
    result = collections.patch_collection(conn, account_id, collection_id, _patch_of(body))
    return unwrap(result).to_dict()


@router.delete("/{collection_id}", response_model=CollectionResponse)
def remove(account_id: str, collection_id: str, request: Request) -> dict[str, Any]:
    """Delete a collection and return it as it was."""
    conn = request.app.state.db
    return unwrap(collections.remove_collection(conn, account_id, collection_id)).to_dict()
