"""In-memory contract collection backed by a persistence collaborator."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from lease_tracker.schemas.domain import Contract, ContractForm
from lease_tracker.store.contracts import ContractPersistence, PersistenceError

logger = logging.getLogger(__name__)


class ContractStore:
    """Source of truth for the contract list.

    The list is ordered newest first. Each mutation writes the whole list back
    through the persistence collaborator; a failed write is logged and the
    in-memory list is kept as is.
    """

    def __init__(self, persistence: ContractPersistence):
        self._persistence = persistence
        self._contracts: list[Contract] = persistence.load()
        logger.info("Loaded %d contracts", len(self._contracts))

    @property
    def persistence(self) -> ContractPersistence:
        return self._persistence

    def all(self) -> list[Contract]:
        return list(self._contracts)

    def find_by_id(self, contract_id: str) -> Optional[Contract]:
        return next((c for c in self._contracts if c.id == contract_id), None)

    def upsert(self, contract: Contract) -> Contract:
        """Replace the contract with the same id in place, or insert it at the head."""
        for index, existing in enumerate(self._contracts):
            if existing.id == contract.id:
                self._contracts[index] = contract
                logger.info("Replaced contract %s", contract.id)
                break
        else:
            self._contracts.insert(0, contract)
            logger.info("Added contract %s", contract.id)
        self._flush()
        return contract

    def save(self, form: ContractForm, now: Optional[datetime] = None) -> Contract:
        """Full-form save: create when the id is new, replace otherwise.

        The creation timestamp of an existing contract is carried over.
        """
        existing = self.find_by_id(form.id) if form.id else None
        created_at = existing.created_at if existing else (now or datetime.now(timezone.utc))
        contract = Contract(
            **form.model_dump(exclude={"id"}),
            id=form.id or uuid4().hex,
            created_at=created_at,
        )
        return self.upsert(contract)

    def remove(self, contract_id: str) -> bool:
        """Delete by id. Returns False, and writes nothing, if it was not there."""
        remaining = [c for c in self._contracts if c.id != contract_id]
        if len(remaining) == len(self._contracts):
            return False
        self._contracts = remaining
        logger.info("Removed contract %s", contract_id)
        self._flush()
        return True

    def _flush(self) -> None:
        try:
            self._persistence.save(list(self._contracts))
        except PersistenceError as exc:
            logger.warning("Contract list not persisted: %s", exc)


__all__ = ["ContractStore"]
