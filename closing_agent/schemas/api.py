"""API response models for timeline, email and extraction endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from closing_agent.schemas.domain import EmailDraft, ExtractedFacts, Milestone


class _Response(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimelineResponse(_Response):
    """Computed timeline; ``ready`` is False until an acceptance date is known."""

    ready: bool
    milestones: list[Milestone] = Field(default_factory=list)


class EmailsResponse(_Response):
    """Generated email drafts."""

    emails: list[EmailDraft]


class GenerateResponse(_Response):
    """Timeline, email drafts and chronology warnings from one generation pass."""

    ready: bool
    milestones: list[Milestone] = Field(default_factory=list)
    emails: list[EmailDraft]
    warnings: list[str] = Field(default_factory=list)


class ExtractResponse(_Response):
    """Result of running an uploaded document through the extractor."""

    filename: str
    extracted: Optional[ExtractedFacts] = None
    message: str
