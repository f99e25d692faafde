"""Pytest fixtures for purchase_analyzer tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from purchase_analyzer.domain.models.property import PropertyForm, PropertyInput  # noqa: E402


@pytest.fixture
def scenario_form_data():
    """Raw text for a typical Vancouver one-bedroom condo."""
    return {
        "name": "Mount Pleasant 1BR",
        "purchase_price": "800,000",
        "down_payment_pct": "20",
        "mortgage_rate": "5.25",
        "amortization": "25",
        "strata_fees": "450",
        "annual_property_tax": "4,200",
        "annual_home_insurance": "1500",
        "maintenance_reserve": "200",
        "square_footage": "650",
        "estimated_rent": "2800",
        "year_built": "2005",
    }


@pytest.fixture
def scenario_form(scenario_form_data):
    return PropertyForm(**scenario_form_data)


@pytest.fixture
def scenario_input():
    """Typed equivalent of ``scenario_form``."""
    return PropertyInput(
        name="Mount Pleasant 1BR",
        purchase_price=800_000,
        down_payment_pct=20,
        mortgage_rate=5.25,
        amortization=25,
        strata_fees=450,
        annual_property_tax=4200,
        annual_home_insurance=1500,
        maintenance_reserve=200,
        square_footage=650,
        estimated_rent=2800,
        year_built=2005,
    )
