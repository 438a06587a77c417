"""Shared dependencies for FastAPI routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lease_tracker.services.upload import PlaceholderUploader, Uploader

if TYPE_CHECKING:
    from lease_tracker.store.contract_store import ContractStore

_store: "ContractStore | None" = None


def get_store() -> "ContractStore":
    """Get or lazily initialize the contract store singleton.

    Lazy initialization keeps imports free of database or file access.
    """
    global _store
    if _store is None:
        from lease_tracker.store.contract_store import ContractStore
        from lease_tracker.store.factory import build_persistence

        _store = ContractStore(build_persistence())
    return _store


def get_uploader() -> Uploader:
    return PlaceholderUploader()


__all__ = ["get_store", "get_uploader"]
