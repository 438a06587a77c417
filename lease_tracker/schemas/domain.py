"""Domain models for lease contracts and escalation schedules."""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from lease_tracker.services.dates import end_date_for

DEFAULT_DURATION_MONTHS = 12


def to_number(value: Any) -> Optional[float]:
    """Parse a finite number from user input; None when blank or invalid."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def coerce_amount(value: Any) -> float:
    """Coerce user input to a non-negative float, falling back to 0."""
    number = to_number(value)
    if number is None or number < 0:
        return 0.0
    return number


def coerce_count(value: Any, default: int = 0) -> int:
    """Coerce user input to a non-negative integer, falling back to ``default``."""
    number = to_number(value)
    if number is None or number < 0:
        return default
    return int(number)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FileRef(CamelModel):
    """Reference to a contract's file: no content, just where to find it."""

    name: str
    size: int = 0
    url: str = ""


class ContractFields(CamelModel):
    """Fields shared by the save form and the stored contract."""

    contract_name: str = ""
    signature_date: Optional[date] = None
    duration_months: int = DEFAULT_DURATION_MONTHS
    aviso_date: Optional[date] = None
    monthly_amount: float = 0.0
    escalation_fixed_increment: float = 0.0
    escalation_max_months: int = 0
    regime_amount: float = 0.0
    file_ref: Optional[FileRef] = None

    @field_validator("contract_name", mode="before")
    @classmethod
    def _name_or_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("signature_date", "aviso_date", mode="before")
    @classmethod
    def _blank_dates(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("monthly_amount", "escalation_fixed_increment", "regime_amount", mode="before")
    @classmethod
    def _amounts(cls, value: Any) -> float:
        return coerce_amount(value)

    @field_validator("escalation_max_months", mode="before")
    @classmethod
    def _max_months(cls, value: Any) -> int:
        return coerce_count(value)

    @field_validator("duration_months", mode="before")
    @classmethod
    def _duration(cls, value: Any) -> int:
        months = coerce_count(value, default=DEFAULT_DURATION_MONTHS)
        return months if months > 0 else DEFAULT_DURATION_MONTHS

    @model_validator(mode="after")
    def _term_fits_calendar(self) -> "ContractFields":
        try:
            end_date_for(self.signature_date, self.duration_months)
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"signatureDate plus durationMonths ends outside the calendar: {exc}") from exc
        return self


class ContractForm(ContractFields):
    """Full-form save payload. A missing id means a new contract."""

    id: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _blank_id(cls, value: Any) -> Any:
        return _blank_to_none(value)


class Contract(ContractFields):
    """A stored lease contract."""

    id: str
    end_date: Optional[date] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def _derive_end_date(self) -> "Contract":
        # endDate is never authoritative input
        self.end_date = end_date_for(self.signature_date, self.duration_months)
        return self

    def to_document(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class EscalationRow(CamelModel):
    """One month of an escalation schedule."""

    month: int = Field(ge=1)
    amount: float = Field(ge=0.0)


class ManualEscalationRow(CamelModel):
    """A row as typed by the user; either cell may be blank or garbage."""

    month: Optional[Any] = None
    amount: Optional[Any] = None
