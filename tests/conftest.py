"""
Shared fixtures.

`InMemoryStates` stands in for `core.db`: it receives the same SQL text and
bound parameters the repository sends to Postgres and evaluates them over a
small seed set, so tests can assert both on results and on what was bound.
"""

from __future__ import annotations

import re
from typing import Any

import pytest
from fastapi.testclient import TestClient

from core import db

SEED_STATES: list[dict[str, Any]] = [
    {"id": 1, "name": "Alabama", "abbreviation": "AL", "capital": "Montgomery"},
    {"id": 2, "name": "Alaska", "abbreviation": "AK", "capital": "Juneau"},
    {"id": 3, "name": "Arizona", "abbreviation": "AZ", "capital": "Phoenix"},
    {"id": 5, "name": "California", "abbreviation": "CA", "capital": "Sacramento"},
    {"id": 13, "name": "Idaho", "abbreviation": "ID", "capital": "Boise"},
    {"id": 16, "name": "Kansas", "abbreviation": "KS", "capital": "Topeka"},
    {"id": 18, "name": "Louisiana", "abbreviation": "LA", "capital": "Baton Rouge"},
    {"id": 25, "name": "Missouri", "abbreviation": "MO", "capital": "Jefferson City"},
    {"id": 32, "name": "New York", "abbreviation": "NY", "capital": "Albany"},
    {"id": 43, "name": "Texas", "abbreviation": "TX", "capital": "Austin"},
]


def like_to_regex(pattern: str) -> re.Pattern[str]:
    """
    Compile a Postgres LIKE pattern (backslash escape) to a case-insensitive regex.
    """
    out: list[str] = []
    chars = iter(pattern)
    for ch in chars:
        if ch == "\\":
            out.append(re.escape(next(chars, "\\")))
        elif ch == "%":
            out.append(".*")
        elif ch == "_":
            out.append(".")
        else:
            out.append(re.escape(ch))
    return re.compile("".join(out), re.IGNORECASE | re.DOTALL)


class InMemoryStates:
    def __init__(self, rows: list[dict[str, Any]] | None = None) -> None:
        self.rows = [dict(r) for r in (rows if rows is not None else SEED_STATES)]
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.error: Exception | None = None

    def fail_with(self, message: str = "connection refused") -> None:
        self.error = db.DataSourceError(message)

    def _select(self, sql: str, args: tuple[Any, ...]) -> list[dict[str, Any]]:
        self.calls.append((sql, args))
        if self.error is not None:
            raise self.error

        rows = self.rows
        if "ILIKE $1" in sql:
            regex = like_to_regex(args[0])
            rows = [
                r
                for r in rows
                if any(regex.fullmatch(r[col]) for col in ("name", "abbreviation", "capital"))
            ]
        elif "WHERE id = $1" in sql:
            token = str(args[0]).strip()
            if not re.fullmatch(r"[+-]?\d+", token):
                raise db.DataSourceError(f'invalid input syntax for type integer: "{args[0]}"')
            rows = [r for r in rows if r["id"] == int(token)]
        return sorted((dict(r) for r in rows), key=lambda r: r["name"])

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        return self._select(sql, args)

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        rows = self._select(sql, args)
        return rows[0] if rows else None


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> InMemoryStates:
    fake = InMemoryStates()
    monkeypatch.setattr(db, "fetch_all", fake.fetch_all)
    monkeypatch.setattr(db, "fetch_one", fake.fetch_one)
    return fake


@pytest.fixture
def client(store: InMemoryStates) -> TestClient:
    from main import create_app

    # Not entered as a context manager: the lifespan (real pool) never runs.
    return TestClient(create_app())
