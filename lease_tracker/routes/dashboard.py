"""Dashboard endpoints: alert semaphore, summary and escalation preview."""

import logging

from fastapi import APIRouter, Depends

from lease_tracker.deps import get_store
from lease_tracker.routes.contracts import INSUFFICIENT_DATA, finite_days
from lease_tracker.schemas.api import (
    EscalationRequest,
    EscalationResponse,
    SemaphoreEntry,
    SemaphoreResponse,
    SummaryResponse,
)
from lease_tracker.schemas.domain import Contract
from lease_tracker.services.dates import days_until
from lease_tracker.services.escalation import compute_schedule
from lease_tracker.services.semaphore import classify
from lease_tracker.services.views import semaphore_order, summarize
from lease_tracker.store.contract_store import ContractStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["dashboard"])


def _iso(value) -> str | None:
    return value.isoformat() if value else None


def _build_entry(contract: Contract) -> SemaphoreEntry:
    return SemaphoreEntry(
        id=contract.id,
        contract_name=contract.contract_name,
        signature_date=_iso(contract.signature_date),
        aviso_date=_iso(contract.aviso_date),
        end_date=_iso(contract.end_date),
        monthly_amount=contract.monthly_amount,
        semaphore=classify(contract),
        days_until_aviso=finite_days(days_until(contract.aviso_date)),
    )


@router.get("/dashboard/semaphore", response_model=SemaphoreResponse)
async def semaphore_panel(store: ContractStore = Depends(get_store)):
    """Contracts by nearest aviso date first."""
    return SemaphoreResponse(items=[_build_entry(c) for c in semaphore_order(store.all())])


@router.get("/dashboard/summary", response_model=SummaryResponse)
async def summary(store: ContractStore = Depends(get_store)):
    stats = summarize(store.all())
    return SummaryResponse(
        total_contracts=stats.total_contracts,
        total_monthly_amount=stats.total_monthly_amount,
        contracts_with_file=stats.contracts_with_file,
    )


@router.post("/escalation", response_model=EscalationResponse)
async def preview_escalation(request: EscalationRequest):
    """Escalation schedule for form values that have not been saved yet."""
    rows = compute_schedule(
        request.mode,
        monthly_amount=request.monthly_amount,
        increment=request.escalation_fixed_increment,
        max_months=request.escalation_max_months,
        regime_amount=request.regime_amount,
        manual_rows=request.manual_rows,
    )
    return EscalationResponse(
        mode=request.mode,
        computable=bool(rows),
        rows=rows,
        message=None if rows else INSUFFICIENT_DATA,
    )
