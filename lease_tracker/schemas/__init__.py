"""Domain and API schemas for lease contracts."""

from lease_tracker.schemas.domain import (
    Contract,
    ContractForm,
    EscalationRow,
    FileRef,
    ManualEscalationRow,
)

__all__ = [
    "Contract",
    "ContractForm",
    "EscalationRow",
    "FileRef",
    "ManualEscalationRow",
]
