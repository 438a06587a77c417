"""Contract CRUD, listing and export endpoints."""

import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from lease_tracker.deps import get_store
from lease_tracker.schemas.api import ContractItem, ContractListResponse, EscalationResponse
from lease_tracker.schemas.domain import Contract, ContractForm
from lease_tracker.services.dates import days_until
from lease_tracker.services.escalation import EscalationMode, schedule_for_contract
from lease_tracker.services.export import export_contract_json, export_filename
from lease_tracker.services.semaphore import classify, deadline_for
from lease_tracker.services.views import SortDirection, SortKey, filter_contracts, sort_contracts
from lease_tracker.store.contract_store import ContractStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contracts", tags=["contracts"])

INSUFFICIENT_DATA = "Insufficient data to compute the escalation schedule"


def finite_days(days: float) -> Optional[int]:
    return None if math.isinf(days) else int(days)


def _build_item(contract: Contract) -> ContractItem:
    return ContractItem(
        contract=contract,
        semaphore=classify(contract),
        days_until_deadline=finite_days(days_until(deadline_for(contract))),
    )


def _get_or_404(store: ContractStore, contract_id: str) -> Contract:
    contract = store.find_by_id(contract_id)
    if contract is None:
        raise HTTPException(status_code=404, detail="Contract not found")
    return contract


@router.get("", response_model=ContractListResponse)
async def list_contracts(
    q: str = Query("", description="Matches id, file name or monthly amount"),
    sort: SortKey = Query(SortKey.aviso_date),
    direction: SortDirection = Query(SortDirection.asc),
    store: ContractStore = Depends(get_store),
):
    """Filtered and sorted contract table."""
    contracts = sort_contracts(filter_contracts(store.all(), q), sort, direction)
    items = [_build_item(c) for c in contracts]
    return ContractListResponse(items=items, total=len(items))


@router.post("", response_model=Contract)
async def save_contract(form: ContractForm, store: ContractStore = Depends(get_store)):
    """Create a contract, or fully replace the one with the same id."""
    return store.save(form)


@router.get("/{contract_id}", response_model=Contract)
async def get_contract(contract_id: str, store: ContractStore = Depends(get_store)):
    return _get_or_404(store, contract_id)


@router.put("/{contract_id}", response_model=Contract)
async def replace_contract(
    contract_id: str,
    form: ContractForm,
    store: ContractStore = Depends(get_store),
):
    """Full-form save addressed by id; the path id wins over the body."""
    return store.save(form.model_copy(update={"id": contract_id}))


@router.delete("/{contract_id}", status_code=204)
async def delete_contract(contract_id: str, store: ContractStore = Depends(get_store)):
    """Remove a contract. Unknown ids are not an error."""
    if not store.remove(contract_id):
        logger.info("Delete requested for unknown contract %s", contract_id)
    return Response(status_code=204)


@router.get("/{contract_id}/export")
async def export_contract(contract_id: str, store: ContractStore = Depends(get_store)):
    """Download the contract as a pretty-printed JSON document."""
    contract = _get_or_404(store, contract_id)
    return Response(
        content=export_contract_json(contract),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(contract)}"'},
    )


@router.get("/{contract_id}/escalation", response_model=EscalationResponse)
async def contract_escalation(contract_id: str, store: ContractStore = Depends(get_store)):
    """Automatic escalation schedule from the stored contract's fields."""
    rows = schedule_for_contract(_get_or_404(store, contract_id))
    return EscalationResponse(
        mode=EscalationMode.auto,
        computable=bool(rows),
        rows=rows,
        message=None if rows else INSUFFICIENT_DATA,
    )
