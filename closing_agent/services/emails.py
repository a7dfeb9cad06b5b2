"""Notification email drafts for an accepted offer.

Templates are plain ``str.format`` skeletons with named fields, so the
catalog can be swapped or extended without touching the generation code.
Missing facts are replaced by one placeholder per field, the same in every
template.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from typing import Sequence

from closing_agent.schemas.domain import ContractFacts, EmailDraft

logger = logging.getLogger(__name__)

DEFAULT_SIGNATURE = "Your Real Estate Team"

PLACEHOLDERS = {
    "property_address": "the property",
    "buyer_name": "Buyer",
    "seller_name": "Seller",
    "sale_price": "TBD",
    "acceptance_date": "TBD",
    "closing_date": "TBD",
}


@dataclass(frozen=True, slots=True)
class ReferralResource:
    """A HUD-approved housing counseling agency."""

    name: str
    phone: str
    description: str


REFERRAL_RESOURCES: tuple[ReferralResource, ...] = (
    ReferralResource(
        "ACTS Housing",
        "(414) 937-9295",
        "Provides homeownership education and foreclosure prevention",
    ),
    ReferralResource(
        "UCC (United Community Center)",
        "(414) 384-3100",
        "Offers financial literacy and homebuyer education programs",
    ),
    ReferralResource(
        "HIR (Homeownership Initiative & Resources)",
        "(414) 264-2622",
        "Specializes in first-time homebuyer programs",
    ),
    ReferralResource(
        "Green Path Financial Wellness",
        "(877) 337-3399",
        "Comprehensive financial counseling and debt management",
    ),
)


def render_referral_resources(
    resources: Sequence[ReferralResource] = REFERRAL_RESOURCES,
    *,
    with_descriptions: bool = True,
) -> str:
    """Render the counseling agencies as a bulleted block."""
    lines: list[str] = []
    for resource in resources:
        lines.append(f"• {resource.name} - {resource.phone}")
        if with_descriptions:
            lines.append(f"  {resource.description}")
    return "\n".join(lines)


def template_fields(facts: ContractFacts, *, signature: str = DEFAULT_SIGNATURE) -> dict[str, str]:
    """Build the substitution mapping shared by every template."""
    fields = {
        "property_address": facts.property_address.strip(),
        "buyer_name": facts.buyer_name.strip(),
        "seller_name": facts.seller_name.strip(),
        "sale_price": facts.sale_price.strip(),
        "acceptance_date": facts.acceptance_date.isoformat() if facts.acceptance_date else "",
        "closing_date": facts.closing_date.isoformat() if facts.closing_date else "",
    }
    for name, placeholder in PLACEHOLDERS.items():
        if not fields[name]:
            fields[name] = placeholder

    fields.update(
        inspection_period=str(facts.inspection_period),
        appraisal_period=str(facts.appraisal_period),
        financing_deadline=str(facts.financing_deadline),
        referral_resources=render_referral_resources(),
        referral_contacts=render_referral_resources(with_descriptions=False),
        signature=signature,
    )
    return fields


# Every field name a template skeleton may reference
TEMPLATE_FIELDS: frozenset[str] = frozenset(template_fields(ContractFacts()))


@dataclass(frozen=True, slots=True)
class EmailTemplate:
    """Subject and body skeletons for one draft."""

    key: str
    title: str
    subject: str
    body: str

    def __post_init__(self) -> None:
        """Reject skeletons that could not be rendered.

        Raises:
            ValueError: Malformed braces, or a field outside TEMPLATE_FIELDS.
        """
        for part, skeleton in (("subject", self.subject), ("body", self.body)):
            try:
                names = {name for _, name, _, _ in string.Formatter().parse(skeleton) if name is not None}
            except ValueError as e:
                raise ValueError(f"template {self.key!r} {part} is malformed: {e}") from e
            unknown = names - TEMPLATE_FIELDS
            if unknown:
                listed = ", ".join(repr(n) for n in sorted(unknown))
                raise ValueError(f"template {self.key!r} {part} uses unknown fields: {listed}")

    def render(self, fields: dict[str, str]) -> EmailDraft:
        return EmailDraft(
            title=self.title,
            subject=self.subject.format_map(fields),
            body=self.body.format_map(fields),
        )


BUYER_WELCOME = EmailTemplate(
    key="buyer_welcome",
    title="Welcome Email - Buyer",
    subject="Congratulations! Your offer on {property_address} has been accepted",
    body="""Dear {buyer_name},

Congratulations! Your offer on {property_address} has been accepted.

Purchase price: {sale_price}

Here are your important upcoming deadlines:
• Inspection Period: {inspection_period} days from acceptance
• Financing Deadline: {financing_deadline} days from acceptance
• Closing Date: {closing_date}

Next steps:
1. Schedule your home inspection immediately
2. Contact your lender to begin the mortgage process
3. Review all contract documents carefully

HUD-Approved Housing Counseling Resources:
If you need assistance with homeownership counseling, budgeting, or financial guidance, these HUD-approved agencies can help:

{referral_resources}

We'll be in touch with detailed timeline and reminders.

Best regards,
{signature}""",
)

SELLER_WELCOME = EmailTemplate(
    key="seller_welcome",
    title="Welcome Email - Seller",
    subject="Great news! Your property at {property_address} is under contract",
    body="""Dear {seller_name},

Excellent news! Your property at {property_address} is now under contract.

Purchase price: {sale_price}

Key dates to remember:
• Buyer's inspection period: {inspection_period} days
• Expected closing: {closing_date}

What to expect:
1. The buyer will schedule an inspection within the next few days
2. We may receive requests for repairs or credits
3. Continue to maintain the property in good condition
4. Keep all utilities on through closing

We'll keep you updated throughout the process.

Best regards,
{signature}""",
)

AGENT_CHECKLIST = EmailTemplate(
    key="agent_checklist",
    title="Real Estate Agent - Internal Checklist",
    subject="Action Items: {property_address} Under Contract",
    body="""INTERNAL AGENT CHECKLIST - {property_address}

CONTRACT DETAILS:
• Property: {property_address}
• Buyer: {buyer_name}
• Seller: {seller_name}
• Sale Price: {sale_price}
• Acceptance Date: {acceptance_date}
• Closing Date: {closing_date}

IMMEDIATE ACTION ITEMS (Within 24-48 hours):
□ Send welcome emails to buyer and seller
□ Order title commitment
□ Coordinate with buyer's lender
□ Schedule inspection with buyer
□ Set up file with transaction coordinator
□ Send contract to all parties' attorneys (if applicable)

ONGOING DEADLINES TO MONITOR:
□ Inspection Period: {inspection_period} days
□ Financing Approval: {financing_deadline} days
□ Appraisal Completion: {appraisal_period} days

WEEKLY FOLLOW-UPS NEEDED:
□ Buyer's financing progress
□ Inspection results and repair negotiations
□ Appraisal scheduling and results
□ Title/survey issues resolution
□ Closing preparations

CLOSING PREPARATION (1 week before):
□ Final walk-through scheduled
□ Closing documents reviewed
□ Funds verification completed
□ Keys/garage remotes ready for transfer

This checklist can be printed and kept in the transaction file.""",
)

INSPECTION_REMINDER = EmailTemplate(
    key="inspection_reminder",
    title="Inspection Reminder - 3 Days Before",
    subject="Inspection Deadline Approaching - Action Required",
    body="""Dear {buyer_name},

This is a friendly reminder that your inspection period for {property_address} ends in 3 days.

If you haven't scheduled your inspection yet, please do so immediately. If you have completed the inspection and need to request repairs or credits, please send your requests as soon as possible.

Remember: If no inspection objections are submitted by the deadline, you waive your right to inspection-related negotiations.

If you have questions about the inspection process or need guidance on evaluating inspection results, consider contacting these HUD-approved housing counseling agencies:

{referral_contacts}

Please let us know if you need any assistance.

Best regards,
{signature}""",
)

FINANCING_REMINDER = EmailTemplate(
    key="financing_reminder",
    title="Financing Deadline Reminder",
    subject="Financing Approval Deadline - 7 Days Remaining",
    body="""Dear {buyer_name},

This is an important reminder that your financing approval deadline for {property_address} is in 7 days.

Please contact your lender immediately if you haven't received final approval. If you're experiencing any challenges with your loan process, these HUD-approved agencies can provide assistance:

{referral_resources}

Time-sensitive action items:
□ Contact lender for status update
□ Provide any additional documentation requested
□ Notify us immediately of any potential delays

Failure to meet the financing deadline may result in contract cancellation.

Best regards,
{signature}""",
)

DEFAULT_TEMPLATES: tuple[EmailTemplate, ...] = (
    BUYER_WELCOME,
    SELLER_WELCOME,
    AGENT_CHECKLIST,
    INSPECTION_REMINDER,
    FINANCING_REMINDER,
)


def generate_emails(
    facts: ContractFacts,
    templates: Sequence[EmailTemplate] = DEFAULT_TEMPLATES,
    *,
    signature: str = DEFAULT_SIGNATURE,
) -> list[EmailDraft]:
    """Render every template in the catalog against the contract facts.

    Args:
        facts: Contract facts; any of them may be missing.
        templates: Template catalog, rendered in order.
        signature: Sign-off line used by the client-facing templates.

    Returns:
        One EmailDraft per template.
    """
    fields = template_fields(facts, signature=signature)
    drafts = [template.render(fields) for template in templates]
    logger.info("Generated %d email drafts for %s", len(drafts), fields["property_address"])
    return drafts


__all__ = [
    "DEFAULT_SIGNATURE",
    "DEFAULT_TEMPLATES",
    "EmailTemplate",
    "PLACEHOLDERS",
    "REFERRAL_RESOURCES",
    "ReferralResource",
    "TEMPLATE_FIELDS",
    "generate_emails",
    "render_referral_resources",
    "template_fields",
]
