"""Calendar arithmetic for deadlines and contract terms."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Optional, Union

DateLike = Union[date, str, None]

SECONDS_PER_DAY = 24 * 60 * 60


def parse_date(value: DateLike) -> Optional[date]:
    """Return a date from a date or ISO ``YYYY-MM-DD`` string; None when blank."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    value = value.strip()
    if not value:
        return None
    return date.fromisoformat(value[:10])


def days_until(target: DateLike, now: Optional[datetime] = None) -> Union[int, float]:
    """Whole days from ``now`` until local midnight of ``target``, rounded up.

    Returns ``math.inf`` when there is no target date, so undated contracts
    rank as the least urgent.
    """
    target_date = parse_date(target)
    if target_date is None:
        return math.inf
    now = now or datetime.now()
    midnight = datetime.combine(target_date, datetime.min.time())
    if now.tzinfo is not None:
        now = now.astimezone().replace(tzinfo=None)
    return math.ceil((midnight - now).total_seconds() / SECONDS_PER_DAY)


def add_months(start: date, months: int) -> date:
    """Add calendar months to ``start``.

    Days past the end of the target month roll over into the next one
    (Jan 31 + 1 month is Mar 3, or Mar 2 in a leap year).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, 1) + timedelta(days=start.day - 1)


def end_date_for(signature_date: DateLike, duration_months: int) -> Optional[date]:
    """Contract end date, or None while the signature date is unknown."""
    start = parse_date(signature_date)
    if start is None:
        return None
    return add_months(start, duration_months)
