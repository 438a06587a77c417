"""API request and response models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from lease_tracker.schemas.domain import CamelModel, Contract, EscalationRow, ManualEscalationRow
from lease_tracker.services.escalation import EscalationMode
from lease_tracker.services.semaphore import SemaphoreLevel


class ContractItem(CamelModel):
    """A contract as listed, with its alert state."""

    contract: Contract
    semaphore: SemaphoreLevel
    days_until_deadline: Optional[int] = None


class ContractListResponse(CamelModel):
    items: list[ContractItem]
    total: int


class SemaphoreEntry(CamelModel):
    """One line of the alert panel."""

    id: str
    contract_name: str
    signature_date: Optional[str] = None
    aviso_date: Optional[str] = None
    end_date: Optional[str] = None
    monthly_amount: float
    semaphore: SemaphoreLevel
    days_until_aviso: Optional[int] = None


class SemaphoreResponse(CamelModel):
    items: list[SemaphoreEntry]


class SummaryResponse(CamelModel):
    total_contracts: int
    total_monthly_amount: float
    contracts_with_file: int


class EscalationRequest(CamelModel):
    """Schedule preview for the values currently in the form."""

    mode: EscalationMode = EscalationMode.auto
    monthly_amount: Optional[float | str] = None
    escalation_fixed_increment: Optional[float | str] = None
    escalation_max_months: Optional[int | float | str] = None
    regime_amount: Optional[float | str] = None
    manual_rows: list[ManualEscalationRow] = Field(default_factory=list)


class EscalationResponse(CamelModel):
    mode: EscalationMode
    computable: bool
    rows: list[EscalationRow]
    message: Optional[str] = None


class UploadResponse(CamelModel):
    ok: bool
    message: Optional[str] = None
    url: Optional[str] = None
    error: Optional[str] = None
