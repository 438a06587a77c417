"""Persistence interfaces, error types and the shared list codec."""

from __future__ import annotations

import json
from typing import Protocol, Sequence, runtime_checkable

from pydantic import TypeAdapter

from lease_tracker.schemas.domain import Contract

_contract_list = TypeAdapter(list[Contract])


class PersistenceError(Exception):
    """Wraps underlying persistence exceptions with operation context."""

    def __init__(self, op: str, key: str | None, message: str):
        self.op = op
        self.key = key
        self.message = message
        super().__init__(self.__str__())

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        key_repr = self.key or "<unknown>"
        return f"{self.op} failed for key={key_repr}: {self.message}"


@runtime_checkable
class ContractPersistence(Protocol):
    """Contract for whole-list persistence backends.

    ``load`` never raises: absent or corrupt data comes back as an empty list.
    ``save`` overwrites the stored list and raises PersistenceError on failure.
    """

    def load(self) -> list[Contract]:
        ...

    def save(self, contracts: Sequence[Contract]) -> None:
        ...


def dump_contracts(contracts: Sequence[Contract]) -> str:
    return json.dumps([c.to_document() for c in contracts])


def parse_contracts(raw: str | bytes | list) -> list[Contract]:
    """Decode a stored list. Raises ValueError on malformed data."""
    data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
    if not isinstance(data, list):
        raise ValueError(f"expected a list of contracts, got {type(data).__name__}")
    return _contract_list.validate_python(data)


__all__ = ["ContractPersistence", "PersistenceError", "dump_contracts", "parse_contracts"]
