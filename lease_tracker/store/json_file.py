"""JSON-file persistence: one document mapping storage keys to contract lists."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from lease_tracker.schemas.domain import Contract
from lease_tracker.store.contracts import ContractPersistence, PersistenceError, parse_contracts

logger = logging.getLogger(__name__)


class JsonFilePersistence(ContractPersistence):
    """Stores the list under ``key`` in a JSON object on disk.

    Other keys in the same file are left untouched. Writes go to a temporary
    file first and are moved into place, so a crash never leaves half a file.
    """

    def __init__(self, path: str | Path, key: str = "contracts_v1"):
        self.path = Path(path)
        self.key = key

    def _read_document(self) -> dict:
        if not self.path.exists():
            return {}
        document = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(document, dict):
            raise ValueError("data file does not hold a JSON object")
        return document

    def load(self) -> list[Contract]:
        try:
            document = self._read_document()
            if self.key not in document:
                return []
            return parse_contracts(document[self.key])
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable contract data in %s: %s", self.path, exc)
            return []

    def save(self, contracts: Sequence[Contract]) -> None:
        try:
            try:
                document = self._read_document()
            except ValueError:
                document = {}
            document[self.key] = [c.to_document() for c in contracts]

            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".contracts-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(document, fh)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise PersistenceError(op="save", key=self.key, message=str(exc)) from exc


__all__ = ["JsonFilePersistence"]
