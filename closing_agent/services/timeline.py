"""Deadline derivation for an accepted offer.

Pure functions only: every date comes from the acceptance date, the
closing date and the three negotiated periods. No wall-clock access.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import date, timedelta

from closing_agent.schemas.domain import ContractFacts, Milestone, Priority

logger = logging.getLogger(__name__)

TITLE_SEARCH_DAYS = 7


def shift(start: date, days: int) -> date:
    """Add calendar days, clamping to the representable date range."""
    try:
        return start + timedelta(days=days)
    except OverflowError:
        return date.max if days > 0 else date.min


class Anchor(str, enum.Enum):
    """Derived date a milestone is offset from."""

    acceptance = "acceptance"
    inspection = "inspection"
    appraisal = "appraisal"
    financing = "financing"
    title_search = "title_search"
    final_walkthrough = "final_walkthrough"
    closing = "closing"


@dataclass(frozen=True, slots=True)
class Deadlines:
    """Dates derived once per computation."""

    acceptance: date
    inspection: date
    appraisal: date
    financing: date
    title_search: date
    final_walkthrough: date
    closing: date

    def resolve(self, anchor: Anchor, offset_days: int = 0) -> date:
        return shift(getattr(self, anchor.value), offset_days)


@dataclass(frozen=True, slots=True)
class MilestoneRule:
    """One catalog entry: which task falls on which derived date."""

    task: str
    anchor: Anchor
    offset_days: int
    priority: Priority
    responsible: str
    agent_action: bool = False


# Catalog order is the tie-break for milestones sharing a date.
MILESTONE_CATALOG: tuple[MilestoneRule, ...] = (
    MilestoneRule("Send Welcome Emails", Anchor.acceptance, 1, Priority.high, "Agent", True),
    MilestoneRule("Order Title Commitment", Anchor.acceptance, 1, Priority.high, "Agent", True),
    MilestoneRule("Coordinate with Lender", Anchor.acceptance, 2, Priority.medium, "Agent", True),
    MilestoneRule("Inspection Period Ends", Anchor.inspection, 0, Priority.high, "Buyer"),
    MilestoneRule("Follow up on Inspection Results", Anchor.inspection, 1, Priority.medium, "Agent", True),
    MilestoneRule("Title Search Completion", Anchor.title_search, 0, Priority.medium, "Title Company"),
    MilestoneRule("Appraisal Deadline", Anchor.appraisal, 0, Priority.high, "Lender"),
    MilestoneRule("Monitor Financing Progress", Anchor.financing, -7, Priority.high, "Agent", True),
    MilestoneRule("Financing Approval Deadline", Anchor.financing, 0, Priority.critical, "Buyer/Lender"),
    MilestoneRule("Prepare Closing Checklist", Anchor.final_walkthrough, -3, Priority.medium, "Agent", True),
    MilestoneRule("Final Walk-through", Anchor.final_walkthrough, 0, Priority.medium, "Buyer"),
    MilestoneRule("Closing Date", Anchor.closing, 0, Priority.critical, "All Parties"),
)


def derive_deadlines(facts: ContractFacts) -> Deadlines | None:
    """Compute the derived contract dates.

    Args:
        facts: Contract facts. Periods are already defaulted by the model.

    Returns:
        Deadlines, or None when there is no acceptance date.
    """
    accepted = facts.acceptance_date
    if accepted is None:
        return None

    closing = facts.effective_closing_date
    return Deadlines(
        acceptance=accepted,
        inspection=shift(accepted, facts.inspection_period),
        appraisal=shift(accepted, facts.appraisal_period),
        financing=shift(accepted, facts.financing_deadline),
        title_search=shift(accepted, TITLE_SEARCH_DAYS),
        final_walkthrough=shift(closing, -1),
        closing=closing,
    )


def compute_timeline(
    facts: ContractFacts,
    catalog: tuple[MilestoneRule, ...] = MILESTONE_CATALOG,
) -> list[Milestone] | None:
    """Build the dated milestone list for an accepted offer.

    Args:
        facts: Contract facts.
        catalog: Milestone rules in tie-break order.

    Returns:
        Milestones sorted ascending by date (stable, so same-day entries keep
        catalog order), or None when the acceptance date is missing.
    """
    deadlines = derive_deadlines(facts)
    if deadlines is None:
        logger.debug("No acceptance date; timeline not computed")
        return None

    milestones = [
        Milestone(
            task=rule.task,
            date=deadlines.resolve(rule.anchor, rule.offset_days),
            priority=rule.priority,
            responsible=rule.responsible,
            agent_action=rule.agent_action,
        )
        for rule in catalog
    ]
    return sorted(milestones, key=lambda m: m.date)


__all__ = [
    "Anchor",
    "Deadlines",
    "MILESTONE_CATALOG",
    "MilestoneRule",
    "compute_timeline",
    "derive_deadlines",
    "shift",
]
