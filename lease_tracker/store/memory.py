"""Process-local persistence, for tests and throwaway sessions."""

from __future__ import annotations

from typing import Sequence

from lease_tracker.schemas.domain import Contract
from lease_tracker.store.contracts import ContractPersistence, dump_contracts, parse_contracts


class MemoryPersistence(ContractPersistence):
    """Keeps the serialized list in memory, so loads hand out fresh copies."""

    def __init__(self, contracts: Sequence[Contract] | None = None):
        self._raw: str | None = dump_contracts(contracts) if contracts else None
        self.save_count = 0

    def load(self) -> list[Contract]:
        if self._raw is None:
            return []
        return parse_contracts(self._raw)

    def save(self, contracts: Sequence[Contract]) -> None:
        self._raw = dump_contracts(contracts)
        self.save_count += 1


__all__ = ["MemoryPersistence"]
