"""Database package."""

from lease_tracker.db.models import KeyValueEntry
from lease_tracker.db.session import Base, build_engine, build_sessionmaker, init_db, session_scope

__all__ = [
    "Base",
    "KeyValueEntry",
    "build_engine",
    "build_sessionmaker",
    "init_db",
    "session_scope",
]
