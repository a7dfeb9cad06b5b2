"""Chronology checks applied at the API boundary.

The timeline computation accepts any dates and periods. These checks only
produce warnings for the caller to show; they never block generation.
"""

from __future__ import annotations

from closing_agent.schemas.domain import ContractFacts
from closing_agent.services.timeline import derive_deadlines

_PERIOD_LABELS = {
    "inspection_period": "Inspection period",
    "appraisal_period": "Appraisal period",
    "financing_deadline": "Financing deadline",
}


def check_chronology(facts: ContractFacts) -> list[str]:
    """Return human-readable warnings about out-of-order contract dates."""
    deadlines = derive_deadlines(facts)
    if deadlines is None:
        return []

    warnings: list[str] = []

    if facts.closing_date is not None and facts.closing_date < deadlines.acceptance:
        warnings.append(
            f"Closing date {facts.closing_date.isoformat()} is before "
            f"acceptance date {deadlines.acceptance.isoformat()}"
        )

    for name, label in _PERIOD_LABELS.items():
        days = getattr(facts, name)
        if days < 0:
            warnings.append(f"{label} is negative ({days} days)")

    if facts.closing_date is not None:
        contingencies = (
            ("Inspection deadline", deadlines.inspection),
            ("Appraisal deadline", deadlines.appraisal),
            ("Financing deadline", deadlines.financing),
        )
        for label, deadline in contingencies:
            if deadline > facts.closing_date:
                warnings.append(
                    f"{label} {deadline.isoformat()} falls after closing date "
                    f"{facts.closing_date.isoformat()}"
                )

    return warnings


__all__ = ["check_chronology"]
