"""Root conftest - shared fixtures: fresh in-memory ledger per test."""

import pytest
from fastapi.testclient import TestClient

from warikan.main import app
from warikan.services.ledger import LedgerStore
from warikan.store import get_ledger


@pytest.fixture
def ledger():
    return LedgerStore()


@pytest.fixture
def client(ledger):
    app.dependency_overrides[get_ledger] = lambda: ledger
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
