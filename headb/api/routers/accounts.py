"""CRUD endpoints for accounts.

Routes
------
POST   /accounts                 Create an account
GET    /accounts                 List all accounts
GET    /accounts/{account_id}    Fetch a single account
PUT    /accounts/{account_id}    Merge-update an account
PATCH  /accounts/{account_id}    Alias of PUT
DELETE /accounts/{account_id}    Delete an account (collections and documents cascade)
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from headb.api.errors import unwrap
from headb.services import accounts

router = APIRouter()


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------

class AccountCreate(BaseModel):
    handle: Optional[str] = None


class AccountUpdate(BaseModel):
    handle: Optional[str] = None


class AccountResponse(BaseModel):
    id: str
    handle: str
    created_at: int
    updated_at: int


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("", response_model=AccountResponse, status_code=201)
def create(body: AccountCreate, request: Request) -> dict[str, Any]:
    """Create a new account."""
    conn = request.app.state.db
    account = unwrap(accounts.create_account(conn, body.model_dump(exclude_unset=True)))
    return account.to_dict()


@router.get("", response_model=list[AccountResponse])
def list_all(request: Request) -> list[dict[str, Any]]:
    """Return every account."""
    conn = request.app.state.db
    return [a.to_dict() for a in unwrap(accounts.list_accounts(conn))]


@router.get("/{account_id}", response_model=AccountResponse)
def get_one(account_id: str, request: Request) -> dict[str, Any]:
    """Fetch a single account by its UUID."""
    conn = request.app.state.db
    return unwrap(accounts.get_account(conn, account_id)).to_dict()


@router.put("/{account_id}", response_model=AccountResponse)
def update(account_id: str, body: AccountUpdate, request: Request) -> dict[str, Any]:
    """Merge the supplied fields over the stored account."""
    conn = request.app.state.db
    changes = body.model_dump(exclude_unset=True)
    return unwrap(accounts.update_account(conn, account_id, changes)).to_dict()


@router.patch("/{account_id}", response_model=AccountResponse)
def patch(account_id: str, body: AccountUpdate, request: Request) -> dict[str, Any]:
    """Same merge semantics as PUT."""
    conn = request.app.state.db
    changes = body.model_dump(exclude_unset=True)
    return unwrap(accounts.patch_account(conn, account_id, changes)).to_dict()


@router.delete("/{account_id}", response_model=AccountResponse)
def remove(account_id: str, request: Request) -> dict[str, Any]:
    """Delete an account and return it as it was."""
    conn = request.app.state.db
    return unwrap(accounts.remove_account(conn, account_id)).to_dict()
