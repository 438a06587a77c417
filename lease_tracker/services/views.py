"""Derived views over the contract list: filter, sort, alert order, totals.

Every function here is pure and recomputed from the snapshot it is given.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Optional, Sequence

from lease_tracker.schemas.domain import Contract, coerce_amount
from lease_tracker.services.dates import days_until

EPOCH = date(1970, 1, 1)


class SortKey(str, enum.Enum):
    aviso_date = "avisoDate"
    end_date = "endDate"
    duration_months = "durationMonths"
    signature_date = "signatureDate"
    monthly_amount = "monthlyAmount"


class SortDirection(str, enum.Enum):
    asc = "asc"
    desc = "desc"


_DATE_KEYS = {SortKey.aviso_date, SortKey.end_date, SortKey.signature_date}


@dataclass(frozen=True)
class Summary:
    total_contracts: int
    total_monthly_amount: float
    contracts_with_file: int


def amount_text(amount: float) -> str:
    """Render an amount as JavaScript's String() does: ``100``, ``100.5``, ``1e-7``."""
    number = float(amount)
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    text = repr(number)
    if "e" not in text:
        return text
    # plain notation between 1e-6 and 1e21, exponent with no zero padding outside
    if 1e-6 <= abs(number) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def _haystack(contract: Contract) -> str:
    file_name = contract.file_ref.name if contract.file_ref else ""
    return " ".join([contract.id, file_name, amount_text(contract.monthly_amount)]).lower()


def filter_contracts(contracts: Sequence[Contract], query: Optional[str]) -> list[Contract]:
    """Case-insensitive substring match on id, file name and monthly amount."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(contracts)
    return [c for c in contracts if needle in _haystack(c)]


def _sort_value(key: SortKey) -> Callable[[Contract], Any]:
    attr = {
        SortKey.aviso_date: "aviso_date",
        SortKey.end_date: "end_date",
        SortKey.duration_months: "duration_months",
        SortKey.signature_date: "signature_date",
        SortKey.monthly_amount: "monthly_amount",
    }[key]

    if key in _DATE_KEYS:
        # Missing dates count as the epoch, so they come first ascending
        return lambda c: getattr(c, attr) or EPOCH
    return lambda c: coerce_amount(getattr(c, attr))


def sort_contracts(
    contracts: Sequence[Contract],
    key: SortKey = SortKey.aviso_date,
    direction: SortDirection = SortDirection.asc,
) -> list[Contract]:
    """Stable sort; ties keep their input order in either direction."""
    return sorted(
        contracts,
        key=_sort_value(SortKey(key)),
        reverse=SortDirection(direction) is SortDirection.desc,
    )


def semaphore_order(contracts: Sequence[Contract], now: Optional[datetime] = None) -> list[Contract]:
    """Alert panel order: nearest aviso date first, undated contracts last.

    Only the aviso date counts here, regardless of the table sort.
    """
    return sorted(contracts, key=lambda c: days_until(c.aviso_date, now))


def summarize(contracts: Sequence[Contract]) -> Summary:
    return Summary(
        total_contracts=len(contracts),
        total_monthly_amount=sum(coerce_amount(c.monthly_amount) for c in contracts),
        contracts_with_file=sum(1 for c in contracts if c.file_ref is not None),
    )


__all__ = [
    "SortDirection",
    "SortKey",
    "Summary",
    "amount_text",
    "filter_contracts",
    "semaphore_order",
    "sort_contracts",
    "summarize",
]
