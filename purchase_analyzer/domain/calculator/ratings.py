"""Classification bands for derived metrics.

Each function maps a metric value to a Rating, or None when the metric is
unavailable or falls outside every band.
"""

from __future__ import annotations

from purchase_analyzer.core.market_constants import (
    BENCHMARKS,
    CAP_RATE_UNFAVORABLE_MULT,
    GRM_FAVORABLE_BELOW,
    GRM_UNFAVORABLE_ABOVE,
    LTV_INSURANCE_THRESHOLD_PCT,
    MIN_UNINSURED_DOWN_PCT,
    NEW_BUILDING_MAX_AGE,
    OLD_BUILDING_MIN_AGE,
    PRICE_VS_BENCHMARK_FAVORABLE_PCT,
    PRICE_VS_BENCHMARK_UNFAVORABLE_PCT,
    RENT_GAP_UNFAVORABLE_ABOVE,
    STRATA_UNFAVORABLE_MULT,
)
from purchase_analyzer.domain.models.metrics import Rating


def rate_down_payment(down_pct: float) -> Rating:
    if down_pct >= MIN_UNINSURED_DOWN_PCT:
        return Rating.FAVORABLE
    return Rating.CAUTION


def rate_loan_to_value(ltv_pct: float | None) -> Rating | None:
    """LTV above 80% needs mortgage default insurance."""
    if ltv_pct is None:
        return None
    if ltv_pct <= LTV_INSURANCE_THRESHOLD_PCT:
        return Rating.FAVORABLE
    return Rating.CAUTION


def rate_price_vs_benchmark(diff_pct: float | None) -> Rating | None:
    if diff_pct is None:
        return None
    if diff_pct <= PRICE_VS_BENCHMARK_FAVORABLE_PCT:
        return Rating.FAVORABLE
    if diff_pct >= PRICE_VS_BENCHMARK_UNFAVORABLE_PCT:
        return Rating.UNFAVORABLE
    return Rating.NEUTRAL


def rate_strata_per_area(
    strata_per_area: float | None,
    benchmark: float = BENCHMARKS.strata_fee_per_area,
) -> Rating | None:
    if strata_per_area is None:
        return None
    if strata_per_area <= benchmark:
        return Rating.FAVORABLE
    if strata_per_area > benchmark * STRATA_UNFAVORABLE_MULT:
        return Rating.UNFAVORABLE
    return Rating.NEUTRAL


def rate_gross_rent_multiplier(grm: float | None) -> Rating | None:
    if grm is None:
        return None
    if grm < GRM_FAVORABLE_BELOW:
        return Rating.FAVORABLE
    if grm > GRM_UNFAVORABLE_ABOVE:
        return Rating.UNFAVORABLE
    return Rating.NEUTRAL


def rate_cap_rate(
    cap_rate: float | None,
    benchmark: float = BENCHMARKS.average_cap_rate_pct,
) -> Rating | None:
    if cap_rate is None:
        return None
    if cap_rate >= benchmark:
        return Rating.FAVORABLE
    if cap_rate < benchmark * CAP_RATE_UNFAVORABLE_MULT:
        return Rating.UNFAVORABLE
    return Rating.NEUTRAL


def rate_rent_vs_non_recoverable(gap: float | None) -> Rating | None:
    """Positive gap is a monthly shortfall, negative a surplus."""
    if gap is None:
        return None
    if gap <= 0:
        return Rating.FAVORABLE
    if gap > RENT_GAP_UNFAVORABLE_ABOVE:
        return Rating.UNFAVORABLE
    return Rating.NEUTRAL


def rate_building_age(age_years: int | None) -> Rating | None:
    if age_years is None:
        return None
    if age_years <= NEW_BUILDING_MAX_AGE:
        return Rating.FAVORABLE
    if age_years >= OLD_BUILDING_MIN_AGE:
        return Rating.CAUTION
    return None
