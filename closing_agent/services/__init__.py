"""Business logic services."""

from closing_agent.services.emails import (
    DEFAULT_TEMPLATES,
    EmailTemplate,
    generate_emails,
)
from closing_agent.services.extraction import (
    ContractExtractor,
    ExtractionError,
    ExtractionValidationError,
    SampleContractExtractor,
    extract_facts,
    merge_facts,
)
from closing_agent.services.report import render_report_html, render_report_text
from closing_agent.services.timeline import compute_timeline, derive_deadlines
from closing_agent.services.validation import check_chronology

__all__ = [
    "ContractExtractor",
    "DEFAULT_TEMPLATES",
    "EmailTemplate",
    "ExtractionError",
    "ExtractionValidationError",
    "SampleContractExtractor",
    "check_chronology",
    "compute_timeline",
    "derive_deadlines",
    "extract_facts",
    "generate_emails",
    "merge_facts",
    "render_report_html",
    "render_report_text",
]
