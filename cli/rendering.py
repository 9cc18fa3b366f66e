"""Output helpers shared by the CLI command groups."""

from __future__ import annotations

import json
from typing import Any, TypeVar

import typer

from headb.services.result import Err, Result

T = TypeVar("T")


def render_record(record: Any) -> str:
    """Pretty-print a DB row dataclass as JSON."""
    return json.dumps(record.to_dict(), indent=2, sort_keys=True)


def unwrap_or_exit(result: Result[T]) -> T:
    """Return the value of an ``Ok``; print the error and exit 1 on ``Err``."""
    if isinstance(result, Err):
        typer.echo(f"❌ {result.message} [{result.kind.value}]", err=True)
        raise typer.Exit(code=1)
    return result.value
