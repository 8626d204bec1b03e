"""Persistence helpers for chembalancer."""

from chembalancer.persistence.sqlite_store import (
    connect,
    ensure_schema,
    list_results,
    save_result,
)

__all__ = [
    "connect",
    "ensure_schema",
    "list_results",
    "save_result",
]
