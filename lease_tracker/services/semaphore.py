"""Alert semaphore: how urgent is a contract's next deadline."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional, Union

from lease_tracker.schemas.domain import Contract
from lease_tracker.services.dates import days_until

CRITICAL_DAYS = 7
WARNING_DAYS = 30
CAUTION_DAYS = 90


class SemaphoreLevel(str, enum.Enum):
    critical = "critical"
    warning = "warning"
    caution = "caution"
    ok = "ok"


def level_for_days(days: Union[int, float]) -> SemaphoreLevel:
    """Map days remaining to a level; each bound belongs to the more urgent band."""
    if days <= CRITICAL_DAYS:
        return SemaphoreLevel.critical
    if days <= WARNING_DAYS:
        return SemaphoreLevel.warning
    if days <= CAUTION_DAYS:
        return SemaphoreLevel.caution
    return SemaphoreLevel.ok


def deadline_for(contract: Contract):
    """The aviso date when set, otherwise the end date."""
    return contract.aviso_date or contract.end_date


def classify(contract: Contract, now: Optional[datetime] = None) -> SemaphoreLevel:
    return level_for_days(days_until(deadline_for(contract), now))


__all__ = ["SemaphoreLevel", "classify", "deadline_for", "level_for_days"]
