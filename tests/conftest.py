"""Shared test fixtures for the billing engine test suite."""

import pytest

from billing_engine.domain.models.document import IssuerProfile


@pytest.fixture
def delhi_issuer() -> IssuerProfile:
    """Issuer registered in Delhi (state code 07)."""
    return IssuerProfile(company_name="Craft Daddy", home_state="Delhi", home_state_code="07")


@pytest.fixture
def stored_invoice() -> dict:
    """An invoice exactly as the storage layer returns it (camelCase keys)."""
    return {
        "id": "inv-1",
        "number": "CD25001",
        "date": "2025-01-15",
        "dueDate": "2025-01-30",
        "status": "Draft",
        "clientId": "c-1",
        "placeOfSupply": "Delhi (07)",
        "items": [
            {
                "id": "li-1",
                "description": "Handmade gift hamper",
                "hsn": "4819",
                "qty": 225,
                "rate": 100,
                "taxRate": 5,
            },
        ],
        "discountType": "percentage",
        "discountValue": 0,
        "additionalCharges": [],
        "roundOff": 0,
        "notes": "Thanks for your business",
    }
