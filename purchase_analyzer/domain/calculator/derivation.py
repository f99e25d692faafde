"""Derivation engine.

Maps one PropertyInput (plus an optional down payment override) to the
complete DerivedMetrics record. Pure and total: the same arguments always
produce the same record, and no input makes it raise. Ratios whose
denominator is zero, or that overflow, come back as None.
"""

from __future__ import annotations

import math
from datetime import date

from purchase_analyzer.core.financial import calculate_mortgage_payment
from purchase_analyzer.core.market_constants import BENCHMARKS, Benchmarks
from purchase_analyzer.domain.calculator import ratings
from purchase_analyzer.domain.calculator.transfer_tax import transfer_tax_breakdown
from purchase_analyzer.domain.models.metrics import DerivedMetrics
from purchase_analyzer.domain.models.property import PropertyInput, PropertyType


def _ratio(numerator: float, denominator: float, scale: float = 1.0) -> float | None:
    """``numerator / denominator * scale``, or None when not a finite number."""
    if denominator <= 0:
        return None
    value = numerator / denominator * scale
    return value if math.isfinite(value) else None


def benchmark_price_per_area(property_type: PropertyType, benchmarks: Benchmarks = BENCHMARKS) -> float:
    """Reference $/sqft for the dwelling category."""
    if property_type is PropertyType.CONDO:
        return benchmarks.condo_price_per_area
    return benchmarks.townhome_price_per_area


def derive(
    prop: PropertyInput,
    down_pct_override: float | None = None,
    *,
    as_of_year: int | None = None,
    benchmarks: Benchmarks = BENCHMARKS,
) -> DerivedMetrics:
    """Compute every displayed figure for one property.

    Args:
        prop: Typed, already-defaulted property input
        down_pct_override: Transient down payment % that supersedes
            ``prop.down_payment_pct`` without changing it
        as_of_year: Reference year for building age. Defaults to the
            current calendar year.
        benchmarks: Market reference figures

    Returns:
        DerivedMetrics for the property
    """
    price = prop.purchase_price
    down_pct = prop.down_payment_pct if down_pct_override is None else down_pct_override
    down_amt = price * (down_pct / 100.0)
    loan_amt = price - down_amt

    # --- Upfront ---
    breakdown = transfer_tax_breakdown(price)
    transfer_tax = sum(b.amount for b in breakdown)
    closing_costs = transfer_tax + prop.legal_fees + prop.home_inspection + prop.title_insurance

    # --- Monthly ---
    mortgage = calculate_mortgage_payment(loan_amt, prop.mortgage_rate, prop.amortization)
    strata = prop.strata_fees
    prop_tax = prop.monthly_property_tax
    insurance = prop.monthly_insurance
    maintenance = prop.maintenance_reserve

    # Principal builds equity; everything else is a sunk cost
    carrying = strata + prop_tax + insurance + maintenance
    total_monthly = mortgage.payment + carrying
    total_non_recoverable = mortgage.interest + carrying

    # --- Per area ---
    sqft = prop.square_footage
    benchmark_ppa = benchmark_price_per_area(prop.property_type, benchmarks)
    price_per_area = _ratio(price, sqft)
    strata_per_area = _ratio(strata, sqft) if strata > 0 else None
    cost_per_area = _ratio(total_monthly, sqft)
    price_vs_benchmark = (
        _ratio(price_per_area - benchmark_ppa, benchmark_ppa, 100.0) if price_per_area else None
    )

    # --- Investment ---
    rent = prop.estimated_rent
    has_rent = rent > 0
    grm = _ratio(price, rent * 12.0)
    annual_noi = (
        rent * 12.0
        - strata * 12.0
        - prop.annual_property_tax
        - prop.annual_home_insurance
        - maintenance * 12.0
        if has_rent
        else 0.0
    )
    cap_rate = (_ratio(annual_noi, price, 100.0) or 0.0) if annual_noi > 0 else 0.0
    rent_gap = total_non_recoverable - rent if has_rent else None

    ltv = _ratio(loan_amt, price, 100.0)
    non_rec_to_price = _ratio(total_non_recoverable, price, 100.0)

    year = as_of_year if as_of_year is not None else date.today().year
    building_age = year - prop.year_built if prop.year_built > 0 else None

    return DerivedMetrics(
        purchase_price=price,
        down_payment_pct=down_pct,
        down_payment_amount=down_amt,
        loan_amount=loan_amt,
        transfer_tax=transfer_tax,
        transfer_tax_breakdown=breakdown,
        legal_fees=prop.legal_fees,
        home_inspection=prop.home_inspection,
        title_insurance=prop.title_insurance,
        closing_costs=closing_costs,
        total_cash_to_close=closing_costs + down_amt,
        mortgage_payment=mortgage.payment,
        mortgage_interest=mortgage.interest,
        mortgage_principal=mortgage.principal,
        strata_fees=strata,
        monthly_property_tax=prop_tax,
        monthly_insurance=insurance,
        maintenance=maintenance,
        total_monthly=total_monthly,
        total_non_recoverable=total_non_recoverable,
        square_footage=sqft,
        price_per_area=price_per_area,
        strata_fees_per_area=strata_per_area,
        monthly_cost_per_area=cost_per_area,
        benchmark_per_area=benchmark_ppa,
        price_vs_benchmark_pct=price_vs_benchmark,
        estimated_rent=rent,
        gross_rent_multiplier=grm,
        annual_net_operating_income=annual_noi,
        cap_rate=cap_rate,
        rent_vs_non_recoverable=rent_gap,
        loan_to_value_pct=ltv,
        non_recoverable_to_price_pct=non_rec_to_price,
        building_age_years=building_age,
        down_payment_rating=ratings.rate_down_payment(down_pct),
        ltv_rating=ratings.rate_loan_to_value(ltv),
        price_vs_benchmark_rating=ratings.rate_price_vs_benchmark(price_vs_benchmark),
        strata_per_area_rating=ratings.rate_strata_per_area(
            strata_per_area, benchmarks.strata_fee_per_area
        ),
        gross_rent_multiplier_rating=ratings.rate_gross_rent_multiplier(grm),
        cap_rate_rating=ratings.rate_cap_rate(
            cap_rate if has_rent else None, benchmarks.average_cap_rate_pct
        ),
        rent_vs_non_recoverable_rating=ratings.rate_rent_vs_non_recoverable(rent_gap),
        building_age_rating=ratings.rate_building_age(building_age),
    )
