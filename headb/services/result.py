"""Typed outcome of every resolver call.

Resolvers never raise for expected conditions.  They return ``Ok(value)`` or
``Err(kind, message)``; the HTTP and CLI layers decide how to surface an
``Err``.  ``STATUS_CODES`` is the fixed mapping from error kind to HTTP status.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    MALFORMED_ID = "malformed_identifier"
    MISSING_ID = "missing_identifier"
    ACCOUNT_NOT_FOUND = "account_not_found"
    COLLECTION_NOT_FOUND = "collection_not_found"
    DOCUMENT_NOT_FOUND = "document_not_found"
    INVALID_PAYLOAD = "invalid_payload"
    CONFLICT = "conflict"
    INTERNAL = "internal_error"


STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.MALFORMED_ID: 400,
    ErrorKind.MISSING_ID: 400,
    ErrorKind.INVALID_PAYLOAD: 400,
    ErrorKind.ACCOUNT_NOT_FOUND: 404,
    ErrorKind.COLLECTION_NOT_FOUND: 404,
    ErrorKind.DOCUMENT_NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


Result = Union[Ok[T], Err]
