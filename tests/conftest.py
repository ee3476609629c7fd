"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from pocketledger.dependencies import get_store
from pocketledger.main import app
from pocketledger.store import LedgerStore


@pytest.fixture(scope="function")
def store():
    """Create a fresh, opened ledger for each test using in-memory SQLite."""
    ledger = LedgerStore("sqlite:///:memory:")
    ledger.open()
    try:
        yield ledger
    finally:
        ledger.close()


@pytest.fixture(scope="function")
def client(store):
    """Create a test client backed by the in-memory ledger."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def gifts_category(store):
    """A user-created income category."""
    category_id = store.add_category("Gifts", "income", "gift", "#000")
    return category_id


@pytest.fixture
def sample_transactions(store):
    """A small ledger spread over two years."""
    ids = [
        store.add_transaction(100, "income", "Salary", "2024-01-15"),
        store.add_transaction(30, "expense", "Food", "2024-01-20", note="Groceries"),
        store.add_transaction(50, "income", "Freelance", "2024-03-05"),
        store.add_transaction("12.50", "expense", "Transport", "2023-12-31"),
    ]
    return ids
