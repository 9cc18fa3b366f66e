"""Resource identifier validation.

Identifiers are UUIDs in canonical textual form: five groups of 8-4-4-4-12
hexadecimal digits separated by hyphens.  Case is ignored on input; stored
ids are lowercase.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from headb.services.result import Err, ErrorKind

_CANONICAL_UUID = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def is_valid_id(candidate: Any) -> bool:
    """Return True iff *candidate* is a canonical UUID string."""
    return isinstance(candidate, str) and _CANONICAL_UUID.fullmatch(candidate) is not None


def normalize_id(candidate: str) -> str:
    """Lowercase a valid id so it matches the stored form."""
    return candidate.lower()


def check_ids(*labelled: tuple[str, Any]) -> Optional[Err]:
    """Check ``(label, candidate)`` pairs in order, ancestors first.

    Returns the first failure, or ``None`` when every id is present and
    well-formed.  Pure: no storage access happens here.
    """
    for label, candidate in labelled:
        if candidate is None or candidate == "":
            return Err(ErrorKind.MISSING_ID, f"You need to provide a {label} id")
        if not is_valid_id(candidate):
            return Err(ErrorKind.MALFORMED_ID, f"Invalid uuid {candidate!r} for {label}")
    return None
