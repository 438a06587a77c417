"""Factory for building the persistence backend from configuration."""

from __future__ import annotations

from lease_tracker.core.config import Settings, settings as default_settings
from lease_tracker.db.session import build_engine
from lease_tracker.store.contracts import ContractPersistence
from lease_tracker.store.json_file import JsonFilePersistence
from lease_tracker.store.memory import MemoryPersistence
from lease_tracker.store.sql import SqlPersistence


def build_persistence(config: Settings | None = None) -> ContractPersistence:
    """Build the backend named by PERSISTENCE_BACKEND.

    Settings used:
        PERSISTENCE_BACKEND: ``sql`` (default), ``json`` or ``memory``
        DATABASE_URL: SQLAlchemy URL for the ``sql`` backend
        DATA_FILE: path of the JSON document for the ``json`` backend
        STORAGE_KEY: key the contract list is stored under
    """
    config = config or default_settings
    backend = config.PERSISTENCE_BACKEND.strip().lower()

    if backend == "sql":
        return SqlPersistence(build_engine(config.DATABASE_URL), key=config.STORAGE_KEY)
    if backend == "json":
        return JsonFilePersistence(config.DATA_FILE, key=config.STORAGE_KEY)
    if backend == "memory":
        return MemoryPersistence()
    raise ValueError(f"Unknown persistence backend: {config.PERSISTENCE_BACKEND!r}")


__all__ = ["build_persistence"]
