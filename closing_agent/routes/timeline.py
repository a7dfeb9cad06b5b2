"""Timeline, email and report generation endpoints."""

import logging

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse, PlainTextResponse

from closing_agent.core.config import settings
from closing_agent.schemas.api import EmailsResponse, GenerateResponse, TimelineResponse
from closing_agent.schemas.domain import ContractFacts
from closing_agent.services.emails import generate_emails
from closing_agent.services.report import render_report_html, render_report_text
from closing_agent.services.timeline import compute_timeline
from closing_agent.services.validation import check_chronology

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["timeline"])


@router.post("/timeline", response_model=TimelineResponse)
def timeline(facts: ContractFacts):
    """Compute the milestone timeline."""
    milestones = compute_timeline(facts)
    return TimelineResponse(ready=milestones is not None, milestones=milestones or [])


@router.post("/emails", response_model=EmailsResponse)
def emails(facts: ContractFacts):
    """Generate the email drafts."""
    return EmailsResponse(emails=generate_emails(facts, signature=settings.EMAIL_SIGNATURE))


@router.post("/generate", response_model=GenerateResponse)
def generate(facts: ContractFacts):
    """Compute the timeline and email drafts in one pass."""
    milestones = compute_timeline(facts)
    drafts = generate_emails(facts, signature=settings.EMAIL_SIGNATURE)
    warnings = check_chronology(facts)
    if warnings:
        logger.warning("Chronology warnings for %s: %s", facts.property_address or "<no address>", warnings)

    return GenerateResponse(
        ready=milestones is not None,
        milestones=milestones or [],
        emails=drafts,
        warnings=warnings,
    )


@router.post("/report", response_class=HTMLResponse)
def report(
    facts: ContractFacts,
    format: str = Query("html", pattern="^(html|text)$"),
):
    """Printable report with the timeline and email drafts, as HTML or plain text."""
    milestones = compute_timeline(facts)
    drafts = generate_emails(facts, signature=settings.EMAIL_SIGNATURE)
    if format == "text":
        return PlainTextResponse(render_report_text(milestones, drafts))
    return HTMLResponse(render_report_html(milestones, drafts, title=settings.REPORT_TITLE))
