"""Property data models.

A property is edited as raw text (``PropertyForm``) and converted at the
parsing boundary into a typed, immutable ``PropertyInput`` for the
derivation engine.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from purchase_analyzer.core.market_constants import MAX_AMORTIZATION_YEARS


class PropertyType(str, Enum):
    """Dwelling category, selects the price-per-area benchmark."""

    CONDO = "condo"
    TOWNHOME = "townhome"


def _coerce_property_type(v: object) -> object:
    if isinstance(v, str):
        v = v.strip().lower()
        return v if v in {t.value for t in PropertyType} else PropertyType.CONDO.value
    return v


class PropertyForm(BaseModel):
    """Editable property record, one per tab.

    Numeric fields hold exactly what the user typed.
    """

    # Identity
    name: str = Field(default="New Property", description="Tab label")
    listing_url: str = Field(default="", description="Listing link, not validated")

    # Transaction
    purchase_price: str = Field(default="", description="Purchase price in $")
    property_type: PropertyType = Field(default=PropertyType.CONDO)

    # Financing
    down_payment_pct: str = Field(default="20", description="Down payment %")
    mortgage_rate: str = Field(default="5.25", description="Nominal annual rate %")
    amortization: str = Field(default="25", description="Amortization in years")

    # Recurring costs
    strata_fees: str = Field(default="", description="Monthly strata fees in $")
    annual_property_tax: str = Field(default="", description="Annual property tax in $")
    annual_home_insurance: str = Field(default="1500", description="Annual insurance in $")
    maintenance_reserve: str = Field(default="200", description="Monthly maintenance in $")

    # One-time costs
    legal_fees: str = Field(default="2000")
    home_inspection: str = Field(default="600")
    title_insurance: str = Field(default="300")

    # Physical
    square_footage: str = Field(default="")
    year_built: str = Field(default="")

    # Income
    estimated_rent: str = Field(default="", description="Monthly rent in $")

    model_config = {
        "validate_assignment": True,
    }

    @field_validator("property_type", mode="before")
    @classmethod
    def normalize_property_type(cls, v: object) -> object:
        """Unknown property types fall back to condo."""
        return _coerce_property_type(v)


class PropertyInput(BaseModel):
    """Typed, already-defaulted input to the derivation engine."""

    name: str = "New Property"
    listing_url: str = ""

    purchase_price: float = Field(default=0.0, ge=0)
    property_type: PropertyType = PropertyType.CONDO

    down_payment_pct: float = Field(default=20.0, ge=0, le=100)
    mortgage_rate: float = Field(default=5.25, ge=0)
    amortization: int = Field(default=25, ge=0, le=MAX_AMORTIZATION_YEARS)

    strata_fees: float = Field(default=0.0, ge=0)
    annual_property_tax: float = Field(default=0.0, ge=0)
    annual_home_insurance: float = Field(default=1500.0, ge=0)
    maintenance_reserve: float = Field(default=200.0, ge=0)

    legal_fees: float = Field(default=2000.0, ge=0)
    home_inspection: float = Field(default=600.0, ge=0)
    title_insurance: float = Field(default=300.0, ge=0)

    square_footage: float = Field(default=0.0, ge=0)
    year_built: int = Field(default=0, ge=0)

    estimated_rent: float = Field(default=0.0, ge=0)

    model_config = {
        "frozen": True,
    }

    @field_validator("property_type", mode="before")
    @classmethod
    def normalize_property_type(cls, v: object) -> object:
        """Unknown property types fall back to condo."""
        return _coerce_property_type(v)

    @property
    def monthly_property_tax(self) -> float:
        return self.annual_property_tax / 12.0

    @property
    def monthly_insurance(self) -> float:
        return self.annual_home_insurance / 12.0
