"""Domain schemas for contract facts, timelines and email drafts."""

from closing_agent.schemas.domain import (
    ContractFacts,
    EmailDraft,
    ExtractedFacts,
    Milestone,
    Priority,
)

__all__ = [
    "ContractFacts",
    "EmailDraft",
    "ExtractedFacts",
    "Milestone",
    "Priority",
]
