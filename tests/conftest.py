"""Pytest configuration and fixtures."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from closing_agent.main import app
from closing_agent.schemas.domain import ContractFacts


@pytest.fixture
def client():
    """TestClient with lifespan events."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def milwaukee_facts():
    """Facts of the sample Milwaukee contract."""
    return ContractFacts(
        property_address="1560 S 26th ST, Milwaukee, WI 53204",
        buyer_name="Declan Roddy",
        seller_name="SUV Properties LLC",
        sale_price="250000",
        acceptance_date=date(2025, 9, 9),
        closing_date=date(2025, 10, 10),
        inspection_period=15,
        appraisal_period=20,
        financing_deadline=25,
    )


@pytest.fixture
def milwaukee_payload():
    """Same contract as the UI would post it."""
    return {
        "propertyAddress": "1560 S 26th ST, Milwaukee, WI 53204",
        "buyerName": "Declan Roddy",
        "sellerName": "SUV Properties LLC",
        "salePrice": "250000",
        "acceptanceDate": "2025-09-09",
        "closingDate": "2025-10-10",
        "inspectionPeriod": "15",
        "appraisalPeriod": "20",
        "financingDeadline": "25",
    }
