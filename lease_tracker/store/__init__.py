"""Contract store and its persistence backends."""

from lease_tracker.store.contract_store import ContractStore
from lease_tracker.store.contracts import ContractPersistence, PersistenceError
from lease_tracker.store.json_file import JsonFilePersistence
from lease_tracker.store.memory import MemoryPersistence
from lease_tracker.store.sql import SqlPersistence

__all__ = [
    "ContractPersistence",
    "ContractStore",
    "JsonFilePersistence",
    "MemoryPersistence",
    "PersistenceError",
    "SqlPersistence",
]
