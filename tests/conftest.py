"""Pytest configuration and fixtures."""

import os

# Keep tests off the real database BEFORE any app imports
os.environ["PERSISTENCE_BACKEND"] = "memory"

from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient

from lease_tracker.deps import get_store
from lease_tracker.main import app
from lease_tracker.schemas.domain import Contract
from lease_tracker.store.contract_store import ContractStore
from lease_tracker.store.memory import MemoryPersistence

# Midnight, so days_until gives exact day counts
FIXED_NOW = datetime(2024, 1, 1, 0, 0, 0)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def make_contract():
    """Factory for contracts with sensible defaults."""

    def _make(contract_id: str = "c1", **fields) -> Contract:
        fields.setdefault("created_at", datetime(2023, 12, 1, 9, 30))
        return Contract(id=contract_id, **fields)

    return _make


@pytest.fixture
def persistence() -> MemoryPersistence:
    return MemoryPersistence()


@pytest.fixture
def store(persistence) -> ContractStore:
    return ContractStore(persistence)


@pytest.fixture
def client(store):
    """TestClient wired to the test store."""
    app.dependency_overrides[get_store] = lambda: store
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def today() -> date:
    return date.today()


@pytest.fixture(scope="function")
def sqlite_sessionmaker(tmp_path):
    """Create a SQLite database with schema for testing."""
    from lease_tracker.db.session import build_engine, build_sessionmaker, init_db

    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(engine)
    yield build_sessionmaker(engine)
    engine.dispose()
