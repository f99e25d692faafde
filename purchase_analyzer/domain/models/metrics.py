"""Derived metrics data models.

``DerivedMetrics`` is the full output of one derivation: upfront costs,
monthly carrying costs, ratio metrics and their classification bands.
Unavailable ratios are ``None``, never NaN or infinity.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field

from purchase_analyzer.core.market_constants import MIN_UNINSURED_DOWN_PCT


class Rating(str, Enum):
    """Classification band attached to a metric."""

    FAVORABLE = "favorable"
    NEUTRAL = "neutral"
    UNFAVORABLE = "unfavorable"
    CAUTION = "caution"


class TaxBracketPortion(BaseModel):
    """Contribution of one transfer tax bracket."""

    lower: float = Field(..., ge=0, description="Bracket floor in $")
    upper: float | None = Field(None, description="Bracket ceiling in $, None if open-ended")
    rate: float = Field(..., ge=0, description="Marginal rate as a decimal")
    taxable: float = Field(default=0.0, ge=0, description="Part of the price inside the bracket")
    amount: float = Field(default=0.0, ge=0, description="Tax due on this bracket")

    model_config = {"frozen": True}


class DerivedMetrics(BaseModel):
    """Everything the dashboard displays for one property."""

    # Upfront
    purchase_price: float
    down_payment_pct: float
    down_payment_amount: float
    loan_amount: float
    transfer_tax: float
    transfer_tax_breakdown: tuple[TaxBracketPortion, ...] = ()
    legal_fees: float
    home_inspection: float
    title_insurance: float
    closing_costs: float
    total_cash_to_close: float

    # Mortgage (month 1)
    mortgage_payment: float
    mortgage_interest: float
    mortgage_principal: float

    # Monthly carrying costs
    strata_fees: float
    monthly_property_tax: float
    monthly_insurance: float
    maintenance: float
    total_monthly: float
    total_non_recoverable: float

    # Per area
    square_footage: float
    price_per_area: float | None = None
    strata_fees_per_area: float | None = None
    monthly_cost_per_area: float | None = None
    benchmark_per_area: float
    price_vs_benchmark_pct: float | None = None

    # Investment
    estimated_rent: float
    gross_rent_multiplier: float | None = None
    annual_net_operating_income: float = 0.0
    cap_rate: float = 0.0
    rent_vs_non_recoverable: float | None = None

    # Financing ratios
    loan_to_value_pct: float | None = None
    non_recoverable_to_price_pct: float | None = None

    building_age_years: int | None = None

    # Classification bands
    down_payment_rating: Rating | None = None
    ltv_rating: Rating | None = None
    price_vs_benchmark_rating: Rating | None = None
    strata_per_area_rating: Rating | None = None
    gross_rent_multiplier_rating: Rating | None = None
    cap_rate_rating: Rating | None = None
    rent_vs_non_recoverable_rating: Rating | None = None
    building_age_rating: Rating | None = None

    model_config = {"frozen": True}

    @computed_field
    @property
    def annual_total(self) -> float:
        """Projected yearly carrying cost."""
        return self.total_monthly * 12.0

    @computed_field
    @property
    def annual_non_recoverable(self) -> float:
        """Projected yearly cost that builds no equity."""
        return self.total_non_recoverable * 12.0

    @computed_field
    @property
    def non_recoverable_share_pct(self) -> float | None:
        """Share of the monthly outlay that builds no equity."""
        if self.total_monthly <= 0:
            return None
        return self.total_non_recoverable / self.total_monthly * 100.0

    @computed_field
    @property
    def requires_mortgage_insurance(self) -> bool:
        """Under 20% down the lender requires default insurance."""
        return self.down_payment_pct < MIN_UNINSURED_DOWN_PCT

    @property
    def has_area_metrics(self) -> bool:
        return self.square_footage > 0

    @property
    def has_rent_metrics(self) -> bool:
        return self.estimated_rent > 0
