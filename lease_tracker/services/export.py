"""Single-contract JSON export."""

from __future__ import annotations

import json

from lease_tracker.schemas.domain import Contract


def export_filename(contract: Contract) -> str:
    return f"contract-{contract.id}.json"


def export_contract_json(contract: Contract) -> str:
    """Pretty-printed JSON of the contract's current fields (two-space indent)."""
    return json.dumps(contract.to_document(), indent=2, ensure_ascii=False)


__all__ = ["export_contract_json", "export_filename"]
