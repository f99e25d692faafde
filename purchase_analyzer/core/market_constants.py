"""Market constants - single source of truth for reference figures.

Benchmarks are approximate Vancouver market averages. They are fixed
values, not fetched data; update them here when the market moves.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Benchmarks(BaseModel):
    """Reference figures used to classify derived metrics."""

    condo_price_per_area: float = Field(default=1050.0, gt=0, description="Condo $/sqft")
    townhome_price_per_area: float = Field(default=780.0, gt=0, description="Townhome $/sqft")
    strata_fee_per_area: float = Field(default=0.65, gt=0, description="Monthly strata $/sqft")
    average_cap_rate_pct: float = Field(default=3.0, gt=0, description="Average cap rate %")

    model_config = {"frozen": True}


BENCHMARKS = Benchmarks()

# Progressive transfer tax brackets: (lower bound, upper bound, marginal rate)
TRANSFER_TAX_BRACKETS: tuple[tuple[float, float, float], ...] = (
    (0.0, 200_000.0, 0.01),
    (200_000.0, 2_000_000.0, 0.02),
    (2_000_000.0, 3_000_000.0, 0.03),
    (3_000_000.0, float("inf"), 0.05),
)

# Defaults applied when a numeric field is blank or unparsable
FIELD_DEFAULTS: dict[str, float] = {
    "down_payment_pct": 20.0,
    "mortgage_rate": 5.25,
    "amortization": 25,
    "annual_home_insurance": 1500.0,
    "maintenance_reserve": 200.0,
    "legal_fees": 2000.0,
    "home_inspection": 600.0,
    "title_insurance": 300.0,
}

# Financing thresholds
LTV_INSURANCE_THRESHOLD_PCT = 80.0   # above this LTV, mortgage insurance applies
MIN_UNINSURED_DOWN_PCT = 20.0
MAX_AMORTIZATION_YEARS = 100

# Classification band edges
PRICE_VS_BENCHMARK_FAVORABLE_PCT = -5.0
PRICE_VS_BENCHMARK_UNFAVORABLE_PCT = 15.0
STRATA_UNFAVORABLE_MULT = 1.4
GRM_FAVORABLE_BELOW = 20.0
GRM_UNFAVORABLE_ABOVE = 30.0
CAP_RATE_UNFAVORABLE_MULT = 0.7
RENT_GAP_UNFAVORABLE_ABOVE = 1000.0
NEW_BUILDING_MAX_AGE = 10
OLD_BUILDING_MIN_AGE = 40

# Down payment slider grid
SLIDER_MIN_PCT = 5
SLIDER_MAX_PCT = 100
SLIDER_STEP_PCT = 5
SLIDER_TICKS = (5, 20, 35, 50, 65, 80, 100)
