"""Tests for email draft generation."""

import string

import pytest

from closing_agent.schemas.domain import ContractFacts
from closing_agent.services.emails import (
    DEFAULT_TEMPLATES,
    PLACEHOLDERS,
    REFERRAL_RESOURCES,
    TEMPLATE_FIELDS,
    EmailTemplate,
    generate_emails,
    render_referral_resources,
    template_fields,
)


def _by_title(drafts):
    return {d.title: d for d in drafts}


class TestCatalog:
    """Default template catalog."""

    def test_five_templates_in_order(self):
        drafts = generate_emails(ContractFacts())
        assert [d.title for d in drafts] == [
            "Welcome Email - Buyer",
            "Welcome Email - Seller",
            "Real Estate Agent - Internal Checklist",
            "Inspection Reminder - 3 Days Before",
            "Financing Deadline Reminder",
        ]

    @pytest.mark.parametrize("template", DEFAULT_TEMPLATES, ids=lambda t: t.key)
    def test_templates_only_use_known_fields(self, template):
        """Every built-in template renders from template_fields alone."""
        known = set(template_fields(ContractFacts()))
        formatter = string.Formatter()
        for skeleton in (template.subject, template.body):
            names = {name for _, name, _, _ in formatter.parse(skeleton) if name}
            assert names <= known

    def test_unknown_field_rejected_at_definition(self):
        """A template naming a field generation cannot fill fails when built."""
        with pytest.raises(ValueError, match="unknown fields: 'buyer'"):
            EmailTemplate(key="k", title="T", subject="Hi {buyer}", body="x")

    def test_stray_brace_text_rejected_at_definition(self):
        """Brace text that is not a known field is caught in the body too."""
        with pytest.raises(ValueError, match="body uses unknown fields"):
            EmailTemplate(key="k", title="T", subject="Hi", body="Portal code {A1-}")

    def test_unbalanced_brace_rejected_at_definition(self):
        with pytest.raises(ValueError, match="malformed"):
            EmailTemplate(key="k", title="T", subject="Hi {buyer_name", body="x")

    def test_positional_field_rejected(self):
        with pytest.raises(ValueError, match="unknown fields"):
            EmailTemplate(key="k", title="T", subject="Hi {}", body="x")

    def test_escaped_braces_render_literally(self):
        """Doubled braces are literal text and never reach the field lookup."""
        template = EmailTemplate(key="k", title="T", subject="Code {{A1}}", body="{buyer_name}")
        draft = generate_emails(ContractFacts(), [template])[0]
        assert draft.subject == "Code {A1}"
        assert draft.body == "Buyer"

    def test_template_fields_matches_rendered_keys(self):
        """The allowed field set is exactly what template_fields produces."""
        assert TEMPLATE_FIELDS == set(template_fields(ContractFacts(buyer_name="Ann")))

    def test_custom_catalog(self):
        template = EmailTemplate(
            key="lender_intro",
            title="Lender Intro",
            subject="Loan file for {property_address}",
            body="Buyer {buyer_name} closes on {closing_date}.",
        )
        drafts = generate_emails(ContractFacts(buyer_name="Ann"), [template])
        assert len(drafts) == 1
        assert drafts[0].subject == "Loan file for the property"
        assert drafts[0].body == "Buyer Ann closes on TBD."


class TestSubstitution:
    """Facts are interpolated verbatim; gaps get placeholders."""

    def test_buyer_welcome_with_partial_facts(self):
        facts = ContractFacts(propertyAddress="123 Main St", buyerName="Jane Doe")
        buyer = _by_title(generate_emails(facts))["Welcome Email - Buyer"]
        assert "123 Main St" in buyer.subject
        assert "123 Main St" in buyer.body
        assert "Jane Doe" in buyer.body
        assert "Purchase price: TBD" in buyer.body
        assert "Closing Date: TBD" in buyer.body
        assert "undefined" not in buyer.body
        assert "None" not in buyer.body

    def test_full_facts(self, milwaukee_facts):
        drafts = _by_title(generate_emails(milwaukee_facts))
        checklist = drafts["Real Estate Agent - Internal Checklist"]
        assert "• Sale Price: 250000" in checklist.body
        assert "• Acceptance Date: 2025-09-09" in checklist.body
        assert "• Closing Date: 2025-10-10" in checklist.body
        assert "□ Inspection Period: 15 days" in checklist.body
        assert "□ Appraisal Completion: 20 days" in checklist.body
        assert "□ Financing Approval: 25 days" in checklist.body
        seller = drafts["Welcome Email - Seller"]
        assert seller.body.startswith("Dear SUV Properties LLC,")
        assert "Expected closing: 2025-10-10" in seller.body

    def test_placeholders_are_uniform(self):
        """Missing facts render the same placeholder in every draft."""
        drafts = generate_emails(ContractFacts())
        for draft in drafts:
            assert "{" not in draft.body and "}" not in draft.body
        checklist = _by_title(drafts)["Real Estate Agent - Internal Checklist"]
        assert "• Property: the property" in checklist.body
        assert "• Buyer: Buyer" in checklist.body
        assert "• Seller: Seller" in checklist.body
        assert "• Sale Price: TBD" in checklist.body
        assert "• Acceptance Date: TBD" in checklist.body

    def test_whitespace_only_counts_as_missing(self):
        """Whitespace-only text gets the placeholder."""
        fields = template_fields(ContractFacts(buyer_name="   "))
        assert fields["buyer_name"] == PLACEHOLDERS["buyer_name"]

    def test_default_periods_rendered(self):
        buyer = generate_emails(ContractFacts())[0]
        assert "Inspection Period: 10 days from acceptance" in buyer.body
        assert "Financing Deadline: 30 days from acceptance" in buyer.body

    def test_braces_in_input_are_not_reinterpreted(self):
        """Brace text in a fact is rendered verbatim, not as a field."""
        draft = generate_emails(ContractFacts(buyer_name="{seller_name}"))[0]
        assert draft.body.startswith("Dear {seller_name},")

    def test_signature(self):
        drafts = generate_emails(ContractFacts(), signature="The Roddy Group")
        assert drafts[0].body.endswith("Best regards,\nThe Roddy Group")


class TestReferralResources:
    """Static counseling-agency block."""

    def test_buyer_facing_templates_include_resources(self):
        drafts = _by_title(generate_emails(ContractFacts()))
        for title in (
            "Welcome Email - Buyer",
            "Inspection Reminder - 3 Days Before",
            "Financing Deadline Reminder",
        ):
            for resource in REFERRAL_RESOURCES:
                assert f"{resource.name} - {resource.phone}" in drafts[title].body

    def test_seller_and_checklist_omit_resources(self):
        """Counseling contacts only appear in buyer-facing drafts."""
        drafts = _by_title(generate_emails(ContractFacts()))
        for title in ("Welcome Email - Seller", "Real Estate Agent - Internal Checklist"):
            assert "(414) 937-9295" not in drafts[title].body

    def test_contacts_without_descriptions(self):
        block = render_referral_resources(with_descriptions=False)
        assert block.splitlines() == [
            "• ACTS Housing - (414) 937-9295",
            "• UCC (United Community Center) - (414) 384-3100",
            "• HIR (Homeownership Initiative & Resources) - (414) 264-2622",
            "• Green Path Financial Wellness - (877) 337-3399",
        ]

    def test_descriptions_are_indented(self):
        lines = render_referral_resources().splitlines()
        assert lines[1] == "  Provides homeownership education and foreclosure prevention"
        assert len(lines) == 2 * len(REFERRAL_RESOURCES)


class TestDeterminism:
    """Same input, same drafts."""

    def test_repeatable(self, milwaukee_facts):
        assert generate_emails(milwaukee_facts) == generate_emails(milwaukee_facts)
