"""Surfacing resolver results over HTTP."""

from __future__ import annotations

from typing import TypeVar

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from headb.services.result import Err, ErrorKind, Result, STATUS_CODES

T = TypeVar("T")


def unwrap(result: Result[T]) -> T:
    """Return the value of an ``Ok`` or raise the mapped ``HTTPException``."""
    if isinstance(result, Err):
        raise HTTPException(
            status_code=result.status_code,
            detail={"code": result.kind.value, "message": result.message},
        )
    return result.value


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


async def invalid_payload_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable request bodies as Invalid Payload (400)."""
    return JSONResponse(
        status_code=STATUS_CODES[ErrorKind.INVALID_PAYLOAD],
        content={
            "detail": {
                "code": ErrorKind.INVALID_PAYLOAD.value,
                "message": "Invalid request body",
                "errors": jsonable_errors(exc),
            }
        },
    )
