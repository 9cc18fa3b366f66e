"""Document endpoints, nested under an account's collection.

Routes (prefix ``/accounts/{account_id}/collections/{collection_id}/documents``)
------
POST   ""                Create a document in the collection
GET    ""                List the collection's documents
GET    /{document_id}    Fetch one document
PUT    /{document_id}    Merge-update a document
PATCH  /{document_id}    Alias of PUT
DELETE /{document_id}    Delete a document

PUT, PATCH and DELETE without a document id answer 400 Missing Identifier.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from headb.api.errors import unwrap
from headb.services import documents

router = APIRouter()


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------

class DocumentCreate(BaseModel):
    # Left unset, the document starts as an empty object.
    content: Any = None


class DocumentUpdate(BaseModel):
    content: Any = None


class DocumentResponse(BaseModel):
    id: str
    content: Any
    collection_id: str
    created_at: int
    updated_at: int


def _patch_of(body: Optional[DocumentUpdate]) -> dict[str, Any]:
    return body.model_dump(exclude_unset=True) if body is not None else {}


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("", response_model=DocumentResponse, status_code=201)
def create(
    account_id: str, collection_id: str, body: DocumentCreate, request: Request
) -> dict[str, Any]:
    """Create a document; the parent collection is taken from the path."""
    conn = request.app.state.db
    data = body.model_dump(exclude_unset=True)
    return unwrap(documents.create_document(conn, account_id, collection_id, data)).to_dict()


@router.get("", response_model=list[DocumentResponse])
def list_all(account_id: str, collection_id: str, request: Request) -> list[dict[str, Any]]:
    """Return every document in the collection."""
    conn = request.app.state.db
    found = unwrap(documents.list_documents(conn, account_id, collection_id))
    return [d.to_dict() for d in found]


@router.put("", response_model=DocumentResponse)
@router.patch("", response_model=DocumentResponse)
def update_without_id(
    account_id: str,
    collection_id: str,
    request: Request,
    body: Optional[DocumentUpdate] = None,
) -> dict[str, Any]:
    conn = request.app.state.db
    result = documents.update_document(conn, account_id, collection_id, None, _patch_of(body))
    return unwrap(result).to_dict()


@router.delete("", response_model=DocumentResponse)
def remove_without_id(account_id: str, collection_id: str, request: Request) -> dict[str, Any]:
    conn = request.app.state.db
    return unwrap(documents.remove_document(conn, account_id, collection_id, None)).to_dict()


@router.get("/{document_id}", response_model=DocumentResponse)
def get_one(
    account_id: str, collection_id: str, document_id: str, request: Request
) -> dict[str, Any]:
    """Fetch one document, only if it sits in the given collection."""
    conn = request.app.state.db
    result = documents.get_document(conn, account_id, collection_id, document_id)
    return unwrap(result).to_dict()


@router.put("/{document_id}", response_model=DocumentResponse)
def update(
    account_id: str,
    collection_id: str,
    document_id: str,
    body: DocumentUpdate,
    request: Request,
) -> dict[str, Any]:
    """Merge the supplied fields over the stored document."""
    conn = request.app.state.db
    result = documents.update_document(
        conn, account_id, collection_id, document_id, _patch_of(body)
    )
    return unwrap(result).to_dict()


@router.patch("/{document_id}", response_model=DocumentResponse)
def patch(
    account_id: str,
    collection_id: str,
    document_id: str,
    body: DocumentUpdate,
    request: Request,
) -> dict[str, Any]:
    """Same merge semantics as PUT."""
    conn = request.app.state.db
    result = documents.patch_document(
        conn, account_id, collection_id, document_id, _patch_of(body)
    )
    return unwrap(result).to_dict()


@router.delete("/{document_id}", response_model=DocumentResponse)
def remove(
    account_id: str, collection_id: str, document_id: str, request: Request
) -> dict[str, Any]:
    """Delete a document and return it as it was."""
    conn = request.app.state.db
    result = documents.remove_document(conn, account_id, collection_id, document_id)
    return unwrap(result).to_dict()
