"""Fetch-then-merge update support.

An update reads the stored record, overlays the caller's fields with
:func:`merge`, and writes the result back in a single statement.  This is
not atomic: a write landing between the read and the write is silently
overwritten (last write wins, there is no version column).
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

# Never taken from a patch, whatever the entity.
SERVER_FIELDS = frozenset({"id", "created_at", "updated_at"})


def merge(
    current: Mapping[str, Any],
    patch: Mapping[str, Any],
    protected: Iterable[str] = (),
) -> dict[str, Any]:
    """Return *current* with the fields of *patch* laid over it.

    Fields absent from *patch* keep their stored value.  Keys in *protected*
    or :data:`SERVER_FIELDS`, and keys that are not fields of *current*, are
    ignored.  An explicit ``None`` does override; storage constraints decide
    whether it is acceptable.
    """
    blocked = SERVER_FIELDS.union(protected)
    merged = dict(current)
    for key, value in patch.items():
        if key in blocked or key not in merged:
            continue
        merged[key] = value
    return merged
