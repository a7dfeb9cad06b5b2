"""Contract fact extraction from uploaded offer documents.

Extraction is an external capability behind the ContractExtractor protocol.
The bundled SampleContractExtractor does no real parsing: PDFs and other
binary documents yield a fixed sample contract, plain text yields its first
line as the property address.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from closing_agent.schemas.domain import ContractFacts, ExtractedFacts

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Base class for extraction errors."""

    pass


class ExtractionValidationError(ExtractionError):
    """Upload rejected before extraction - final, no retry.

    Raised for: empty upload, file too large.
    """

    def __init__(self, message: str, *, too_large: bool = False):
        self.too_large = too_large
        super().__init__(message)


SAMPLE_CONTRACT = ExtractedFacts(
    property_address="1560 S 26th ST, Milwaukee, WI 53204",
    sale_price="250000",
    buyer_name="Declan Roddy",
    seller_name="SUV Properties LLC",
    acceptance_date="2025-09-09",
    closing_date="2025-10-10",
    inspection_period="15",
    appraisal_period="20",
    financing_deadline="25",
)


@runtime_checkable
class ContractExtractor(Protocol):
    """Contract for document extractors."""

    def extract(
        self,
        data: bytes,
        *,
        filename: str,
        content_type: Optional[str] = None,
    ) -> Optional[ExtractedFacts]:
        ...


def _is_text(filename: str, content_type: Optional[str]) -> bool:
    return "text" in (content_type or "") or filename.lower().endswith(".txt")


class SampleContractExtractor:
    """Stand-in extractor returning canned facts per file type."""

    def __init__(self, sample: ExtractedFacts = SAMPLE_CONTRACT):
        self.sample = sample

    def extract(
        self,
        data: bytes,
        *,
        filename: str,
        content_type: Optional[str] = None,
    ) -> Optional[ExtractedFacts]:
        # a declared PDF wins over a .txt filename
        if content_type != "application/pdf" and _is_text(filename, content_type):
            # utf-8-sig drops the BOM Windows editors prepend
            text = data.decode("utf-8-sig", errors="replace")
            first_line = text.splitlines()[0].strip() if text.strip() else ""
            if not first_line:
                return None
            return ExtractedFacts(property_address=first_line)

        logger.info("Returning sample contract facts for %s (%s)", filename, content_type)
        return self.sample


def extract_facts(
    extractor: ContractExtractor,
    data: bytes,
    *,
    filename: str,
    content_type: Optional[str] = None,
    max_size_mb: int = 25,
) -> Optional[ExtractedFacts]:
    """Validate an upload and run it through an extractor.

    Args:
        extractor: Extraction capability.
        data: Raw uploaded bytes.
        filename: Original filename, used for type sniffing.
        content_type: Declared MIME type, if any.
        max_size_mb: Maximum allowed upload size in MB.

    Returns:
        Extracted facts, or None when nothing could be extracted.

    Raises:
        ExtractionValidationError: Empty upload or file too large.
    """
    if not data:
        raise ExtractionValidationError("empty upload")

    max_size_bytes = max_size_mb * 1024 * 1024
    if len(data) > max_size_bytes:
        raise ExtractionValidationError(
            f"file too large: {len(data) / 1024 / 1024:.1f}MB > {max_size_mb}MB",
            too_large=True,
        )

    extracted = extractor.extract(data, filename=filename, content_type=content_type)
    if extracted is None or extracted.is_empty:
        logger.info("No contract data extracted from %s", filename)
        return None
    return extracted


def merge_facts(base: ContractFacts, extracted: Optional[ExtractedFacts]) -> ContractFacts:
    """Overlay extracted values on existing facts, returning a new instance."""
    if extracted is None:
        return base
    merged = base.model_dump()
    merged.update(extracted.updates())
    return ContractFacts.model_validate(merged)


__all__ = [
    "ContractExtractor",
    "ExtractionError",
    "ExtractionValidationError",
    "SAMPLE_CONTRACT",
    "SampleContractExtractor",
    "extract_facts",
    "merge_facts",
]
