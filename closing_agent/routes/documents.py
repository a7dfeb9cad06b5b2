"""Offer document upload and extraction endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile

from closing_agent.core.config import settings
from closing_agent.deps import get_extractor
from closing_agent.schemas.api import ExtractResponse
from closing_agent.services.extraction import (
    ContractExtractor,
    ExtractionValidationError,
    extract_facts,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["documents"])


@router.post("/extract", response_model=ExtractResponse)
async def extract(
    file: UploadFile,
    extractor: ContractExtractor = Depends(get_extractor),
):
    """Upload an offer document and extract contract facts from it."""
    content = await file.read()
    filename = file.filename or "unnamed"

    try:
        extracted = extract_facts(
            extractor,
            content,
            filename=filename,
            content_type=file.content_type,
            max_size_mb=settings.MAX_FILE_SIZE_MB,
        )
    except ExtractionValidationError as e:
        if e.too_large:
            raise HTTPException(
                status_code=413,
                detail=f"File exceeds {settings.MAX_FILE_SIZE_MB}MB limit",
            )
        raise HTTPException(status_code=400, detail=str(e))

    if extracted is None:
        return ExtractResponse(filename=filename, extracted=None, message="No data extracted")

    logger.info("Extracted %d fields from %s", len(extracted.updates()), filename)
    return ExtractResponse(
        filename=filename,
        extracted=extracted,
        message="Contract data extracted successfully",
    )
