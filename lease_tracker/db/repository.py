"""Repository helpers for key-value entries."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from lease_tracker.db.models import KeyValueEntry


def get_value(db: Session, key: str) -> Optional[str]:
    entry = db.get(KeyValueEntry, key)
    return entry.value if entry is not None else None


def put_value(db: Session, key: str, value: str) -> KeyValueEntry:
    """Insert or overwrite the entry stored under ``key``."""
    entry = db.get(KeyValueEntry, key)
    if entry is None:
        entry = KeyValueEntry(key=key, value=value)
        db.add(entry)
    else:
        entry.value = value
    db.flush()
    return entry


def delete_value(db: Session, key: str) -> None:
    db.query(KeyValueEntry).filter(KeyValueEntry.key == key).delete()
