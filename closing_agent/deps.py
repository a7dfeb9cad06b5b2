"""Shared dependencies for FastAPI routes."""

from __future__ import annotations

from closing_agent.services.extraction import ContractExtractor, SampleContractExtractor

_extractor: "ContractExtractor | None" = None


def get_extractor() -> ContractExtractor:
    """Get or lazily initialize the extractor singleton.

    Routes take it through Depends so tests can override it.
    """
    global _extractor
    if _extractor is None:
        _extractor = SampleContractExtractor()
    return _extractor


__all__ = ["get_extractor"]
