"""Financial calculation functions.

Fixed-payment mortgage math. The monthly rate is the nominal annual rate
divided by 12; only the first month's principal/interest split is computed.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy_financial as npf


class MortgagePayment(NamedTuple):
    """Level monthly payment and its month-1 split."""

    payment: float
    interest: float
    principal: float


NO_PAYMENT = MortgagePayment(0.0, 0.0, 0.0)


def monthly_rate(annual_rate_pct: float) -> float:
    """Convert a nominal annual percentage to a monthly decimal rate."""
    return annual_rate_pct / 100.0 / 12.0


def calculate_monthly_payment(
    principal: float,
    annual_rate_pct: float,
    duration_months: int,
) -> float:
    """Calculate the level monthly payment (principal + interest).

    Args:
        principal: Loan amount in $
        annual_rate_pct: Annual interest rate as percentage (e.g., 5.25)
        duration_months: Loan term in months

    Returns:
        Monthly payment in $, 0 when the loan is empty or has no term
    """
    if principal <= 0 or duration_months <= 0:
        return 0.0

    rate = monthly_rate(annual_rate_pct)

    if 1.0 + rate == 1.0:
        return principal / duration_months

    try:
        payment = float(-npf.pmt(rate, duration_months, principal))
    except OverflowError:
        payment = math.inf
    if not math.isfinite(payment):
        # (1+i)^n overflowed: the payment converges to interest only
        return principal * rate
    return payment


def calculate_mortgage_payment(
    principal: float,
    annual_rate_pct: float,
    years: int,
) -> MortgagePayment:
    """Calculate the monthly payment and its first-month decomposition.

    Args:
        principal: Loan amount in $
        annual_rate_pct: Nominal annual rate in percent
        years: Amortization period in years

    Returns:
        MortgagePayment(payment, interest, principal). All zero for an empty
        loan or a zero rate or term.
    """
    if principal <= 0 or not annual_rate_pct or not years:
        return NO_PAYMENT

    rate = monthly_rate(annual_rate_pct)
    payment = calculate_monthly_payment(principal, annual_rate_pct, years * 12)

    # Rates below float resolution amortize like a zero-rate loan
    if 1.0 + rate == 1.0:
        return MortgagePayment(payment, 0.0, payment)

    interest = principal * rate
    return MortgagePayment(payment, interest, payment - interest)
