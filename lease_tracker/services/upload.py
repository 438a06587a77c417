"""Upload collaborator: where contract files would be sent.

Only the placeholder exists for now. A real uploader must keep the same
result shape so that ``fileRef`` handling does not change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from lease_tracker.core.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadResult:
    ok: bool
    message: str
    url: Optional[str] = None


@runtime_checkable
class Uploader(Protocol):
    def upload(self, filename: Optional[str], data: bytes) -> UploadResult:
        ...


class PlaceholderUploader(Uploader):
    """Accepts anything and answers with the configured placeholder URL."""

    def __init__(self, url: Optional[str] = None, message: Optional[str] = None):
        self.url = url or settings.UPLOAD_PLACEHOLDER_URL
        self.message = message or settings.UPLOAD_MESSAGE

    def upload(self, filename: Optional[str], data: bytes) -> UploadResult:
        logger.info("Simulated upload of %s (%d bytes)", filename or "<no file>", len(data))
        return UploadResult(ok=True, message=self.message, url=self.url)


__all__ = ["PlaceholderUploader", "UploadResult", "Uploader"]
