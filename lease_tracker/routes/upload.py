"""Simulated file upload endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from lease_tracker.deps import get_uploader
from lease_tracker.schemas.api import UploadResponse
from lease_tracker.services.upload import Uploader

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["upload"])


@router.post("/upload", response_model=UploadResponse, response_model_exclude_none=True)
async def upload(
    file: Optional[UploadFile] = File(None),
    uploader: Uploader = Depends(get_uploader),
):
    """Accept a contract file and return where it can be retrieved."""
    data = await file.read() if file is not None else b""
    result = uploader.upload(file.filename if file is not None else None, data)
    if not result.ok:
        return JSONResponse(status_code=502, content={"ok": False, "error": result.message})
    return UploadResponse(ok=True, message=result.message, url=result.url)


@router.api_route("/upload", methods=["GET", "PUT", "PATCH", "DELETE", "OPTIONS"], include_in_schema=False)
async def upload_method_not_allowed():
    return JSONResponse(
        status_code=405,
        content={"ok": False, "error": "Method not allowed"},
        headers={"Allow": "POST"},
    )
