"""Month-by-month payment escalation schedules."""

from __future__ import annotations

import enum
from typing import Iterable, Optional, Sequence

from lease_tracker.schemas.domain import (
    Contract,
    EscalationRow,
    ManualEscalationRow,
    coerce_amount,
    coerce_count,
    to_number,
)


class EscalationMode(str, enum.Enum):
    auto = "auto"
    manual = "manual"


def automatic_schedule(
    monthly_amount: float,
    increment: float,
    max_months: int,
    regime_amount: float,
) -> list[EscalationRow]:
    """Step the payment up by a flat increment until it reaches the regime amount.

    Row 1 is the initial payment. Each of the following ``max_months`` rows adds
    ``increment``; the first step that reaches or passes ``regime_amount`` is
    written as exactly ``regime_amount`` and ends the schedule. A payment that
    already starts above the regime is held at the regime from month 1.

    An empty list means there is not enough data to compute a schedule.
    """
    start = coerce_amount(monthly_amount)
    step = coerce_amount(increment)
    cap = coerce_count(max_months)
    regime = coerce_amount(regime_amount)
    if not start or not regime or not cap:
        return []
    if start > regime:
        return [EscalationRow(month=1, amount=regime)]

    rows = [EscalationRow(month=1, amount=start)]
    current = start
    for i in range(1, cap + 1):
        following = current + step
        if following >= regime:
            rows.append(EscalationRow(month=i + 1, amount=regime))
            break
        rows.append(EscalationRow(month=i + 1, amount=round(following, 2)))
        current = following
    return rows


def manual_schedule(rows: Iterable[ManualEscalationRow]) -> list[EscalationRow]:
    """Keep the user's rows as typed, dropping any without a month or amount.

    Rows are neither sorted nor de-duplicated: repeated months are kept in
    entry order.
    """
    schedule = []
    for row in rows:
        month = to_number(row.month)
        amount = to_number(row.amount)
        if month is None or amount is None or month < 1 or amount < 0:
            continue
        schedule.append(EscalationRow(month=int(month), amount=amount))
    return schedule


def compute_schedule(
    mode: EscalationMode,
    *,
    monthly_amount: float = 0.0,
    increment: float = 0.0,
    max_months: int = 0,
    regime_amount: float = 0.0,
    manual_rows: Optional[Sequence[ManualEscalationRow]] = None,
) -> list[EscalationRow]:
    if mode is EscalationMode.manual:
        return manual_schedule(manual_rows or [])
    return automatic_schedule(monthly_amount, increment, max_months, regime_amount)


def schedule_for_contract(contract: Contract) -> list[EscalationRow]:
    """Automatic schedule from a stored contract's escalation fields."""
    return automatic_schedule(
        contract.monthly_amount,
        contract.escalation_fixed_increment,
        contract.escalation_max_months,
        contract.regime_amount,
    )


__all__ = [
    "EscalationMode",
    "automatic_schedule",
    "compute_schedule",
    "manual_schedule",
    "schedule_for_contract",
]
