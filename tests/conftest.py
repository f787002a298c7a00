"""Shared test fixtures.

Provides a ``test_client`` for FastAPI, MagicMock-based Supabase clients and
an in-memory fake of the ``profiles`` table for end-to-end scenarios.
"""

import os
from collections.abc import Generator
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")

_GET_SUPABASE_TARGETS = (
    "app.services.submission.get_supabase",
    "app.services.listing.get_supabase",
    "app.routers.health.get_supabase",
)


def chainable_table_mock() -> MagicMock:
    """Return a mock that supports fluent chaining."""
    m = MagicMock()
    for method in ("select", "insert", "order", "limit", "eq"):
        getattr(m, method).return_value = m
    return m


class FakeProfilesTable:
    """In-memory stand-in for the ``profiles`` table.

    ``select().order(col)`` sorts by *col*; ``insert_error`` / ``select_error``
    make the next matching ``execute()`` raise.
    """

    def __init__(self) -> None:
        self.rows: list[dict[str, Any]] = []
        self.insert_calls = 0
        self.select_calls = 0
        self.insert_error: Exception | None = None
        self.select_error: Exception | None = None

    def query(self) -> "_FakeQuery":
        return _FakeQuery(self)


class _FakeQuery:
    def __init__(self, table: FakeProfilesTable) -> None:
        self._table = table
        self._pending: list[dict[str, Any]] | None = None
        self._order: str | None = None
        self._limit: int | None = None

    def insert(self, rows: list[dict[str, Any]]) -> "_FakeQuery":
        self._pending = [dict(r) for r in rows]
        return self

    def select(self, columns: str = "*") -> "_FakeQuery":
        return self

    def order(self, column: str) -> "_FakeQuery":
        self._order = column
        return self

    def limit(self, n: int) -> "_FakeQuery":
        self._limit = n
        return self

    def execute(self) -> SimpleNamespace:
        table = self._table
        if self._pending is not None:
            table.insert_calls += 1
            if table.insert_error is not None:
                raise table.insert_error
            table.rows.extend(self._pending)
            return SimpleNamespace(data=self._pending)

        table.select_calls += 1
        if table.select_error is not None:
            raise table.select_error
        rows = [dict(r) for r in table.rows]
        if self._order:
            rows.sort(key=lambda r: r.get(self._order) or "")
        if self._limit is not None:
            rows = rows[: self._limit]
        return SimpleNamespace(data=rows)


@pytest.fixture(autouse=True)
def reset_listing() -> Generator[None, None, None]:
    """Start every test with a fresh process-wide listing."""
    import app.services.listing as listing_mod

    listing_mod._listing = None
    yield
    listing_mod._listing = None


@pytest.fixture()
def fake_profiles() -> Generator[FakeProfilesTable, None, None]:
    """Patch every ``get_supabase`` import to a client backed by a fake table."""
    table = FakeProfilesTable()
    client = MagicMock()
    client.table.side_effect = lambda name: table.query()

    patchers = [patch(target, return_value=client) for target in _GET_SUPABASE_TARGETS]
    for p in patchers:
        p.start()
    try:
        yield table
    finally:
        for p in patchers:
            p.stop()


@pytest.fixture()
def mock_supabase_module() -> Generator[MagicMock, None, None]:
    """Patch the Supabase client at module level in the health router."""
    mock_client = MagicMock()
    mock_client.table.return_value = chainable_table_mock()

    with patch("app.routers.health.get_supabase", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def mock_supabase_disconnected() -> Generator[MagicMock, None, None]:
    """Patch ``get_supabase`` to simulate a disconnected database."""
    with patch(
        "app.routers.health.get_supabase",
        side_effect=Exception("Connection refused"),
    ):
        yield MagicMock()


@pytest.fixture()
def jane() -> dict[str, Any]:
    """Minimal valid form input."""
    return {
        "full_name": "Jane Doe",
        "username": "jdoe",
        "email": "jane@x.com",
        "department": "IT",
    }


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient."""
    from app.main import app

    with TestClient(app) as client:
        yield client
