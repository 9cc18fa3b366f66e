"""Translation of storage-layer exceptions into resolver errors."""

from __future__ import annotations

import logging
import sqlite3
from functools import wraps
from typing import Any, Callable

from headb.services.result import Err, ErrorKind

logger = logging.getLogger(__name__)


def integrity_error(exc: sqlite3.IntegrityError, missing_parent: ErrorKind) -> Err:
    """Map a constraint failure to the error the caller should see.

    A FOREIGN KEY failure means the ancestor vanished after it was resolved
    (concurrent delete), so it is reported as that ancestor's Not Found.
    """
    text = str(exc)
    if "FOREIGN KEY" in text:
        return Err(missing_parent, "The parent resource no longer exists")
    if "UNIQUE" in text:
        return Err(ErrorKind.CONFLICT, f"Value already in use ({text})")
    return Err(ErrorKind.INVALID_PAYLOAD, f"Invalid values ({text})")


def translate_storage_errors(
    missing_parent: ErrorKind = ErrorKind.INTERNAL,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorate a resolver so storage exceptions come back as ``Err`` values.

    Only constraint failures are given a semantic meaning.  Every other
    ``sqlite3.Error`` is an infrastructure failure and becomes ``INTERNAL``;
    it is never reported as Not Found.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except sqlite3.IntegrityError as exc:
                logger.warning("%s rejected by storage: %s", func.__name__, exc)
                return integrity_error(exc, missing_parent)
            except sqlite3.Error:
                logger.exception("Storage failure in %s", func.__name__)
                return Err(ErrorKind.INTERNAL, "Storage failure, see server logs")

        return wrapper

    return decorator
