"""SQL-backed persistence: the whole list as one row of the key-value table."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from lease_tracker.db.repository import get_value, put_value
from lease_tracker.db.session import build_sessionmaker, init_db, session_scope
from lease_tracker.schemas.domain import Contract
from lease_tracker.store.contracts import (
    ContractPersistence,
    PersistenceError,
    dump_contracts,
    parse_contracts,
)

logger = logging.getLogger(__name__)


def _wrap_error(op: str, key: str, exc: Exception) -> PersistenceError:
    return PersistenceError(op=op, key=key, message=str(exc))


class SqlPersistence(ContractPersistence):
    """Persistence backed by SQLAlchemy."""

    def __init__(self, engine: Engine, key: str = "contracts_v1"):
        self._engine = engine
        self._sessions = build_sessionmaker(engine)
        self.key = key
        init_db(engine)

    def load(self) -> list[Contract]:
        try:
            with session_scope(self._sessions) as db:
                raw = get_value(db, self.key)
        except SQLAlchemyError as exc:
            logger.warning("Could not read contracts under key %s: %s", self.key, exc)
            return []
        if raw is None:
            return []
        try:
            return parse_contracts(raw)
        except ValueError as exc:
            logger.warning("Ignoring corrupt contract data under key %s: %s", self.key, exc)
            return []

    def save(self, contracts: Sequence[Contract]) -> None:
        try:
            with session_scope(self._sessions) as db:
                put_value(db, self.key, dump_contracts(contracts))
        except SQLAlchemyError as exc:
            raise _wrap_error("save", self.key, exc) from exc

    def ping(self) -> None:
        """Round-trip to the database; raises PersistenceError when unreachable."""
        try:
            with self._engine.connect() as conn:
                conn.exec_driver_sql("SELECT 1")
        except SQLAlchemyError as exc:
            raise _wrap_error("ping", self.key, exc) from exc


__all__ = ["SqlPersistence"]
