"""SQLite history of balance runs."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS balance_run (
  id INTEGER PRIMARY KEY,
  formula TEXT NOT NULL,
  status TEXT NOT NULL,
  coefficients JSON,
  balanced TEXT,
  error TEXT,
  created_utc TEXT
);
"""


def connect(history_file: str | Path) -> sqlite3.Connection:
    """Open (and create) a history database."""
    path = Path(history_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    connection = sqlite3.connect(path)
    connection.row_factory = sqlite3.Row
    return connection


def ensure_schema(connection: sqlite3.Connection) -> None:
    connection.executescript(SCHEMA_SQL)
    connection.commit()


def save_result(
    connection: sqlite3.Connection,
    formula: str,
    status: str,
    coefficients: Sequence[int] | None = None,
    balanced: str | None = None,
    error: str | None = None,
    created_utc: str | None = None,
) -> int:
    """Persist one balance attempt and return its ID."""
    created_utc = created_utc or _utc_now()
    cursor = connection.execute(
        "INSERT INTO balance_run (formula, status, coefficients, balanced, error, created_utc)"
        " VALUES (?, ?, ?, ?, ?, ?)",
        (
            formula,
            status,
            json.dumps(list(coefficients)) if coefficients is not None else None,
            balanced,
            error,
            created_utc,
        ),
    )
    connection.commit()
    return int(cursor.lastrowid)


def list_results(connection: sqlite3.Connection, limit: int | None = None) -> list[dict[str, object]]:
    """Return recorded runs, newest first."""
    query = "SELECT * FROM balance_run ORDER BY id DESC"
    params: tuple[object, ...] = ()
    if limit is not None:
        query += " LIMIT ?"
        params = (limit,)
    results = []
    for row in connection.execute(query, params):
        record = dict(row)
        if record["coefficients"] is not None:
            record["coefficients"] = json.loads(record["coefficients"])
        results.append(record)
    return results


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()
