"""Property transfer tax.

Progressive marginal brackets, see ``TRANSFER_TAX_BRACKETS``:
  - 1% on the first $200,000
  - 2% on $200,000 - $2,000,000
  - 3% on $2,000,000 - $3,000,000
  - 5% above $3,000,000
"""

from __future__ import annotations

import math

from purchase_analyzer.core.market_constants import TRANSFER_TAX_BRACKETS
from purchase_analyzer.domain.models.metrics import TaxBracketPortion


def transfer_tax_breakdown(price: float) -> tuple[TaxBracketPortion, ...]:
    """Split the tax on ``price`` into one entry per bracket.

    Brackets the price does not reach are reported with zero taxable amount.

    Args:
        price: Purchase price in $ (negative prices are taxed as 0)

    Returns:
        One TaxBracketPortion per bracket, lowest first
    """
    p = max(0.0, float(price))
    portions = []
    for lower, upper, rate in TRANSFER_TAX_BRACKETS:
        taxable = max(0.0, min(p, upper) - lower)
        portions.append(
            TaxBracketPortion(
                lower=lower,
                upper=None if math.isinf(upper) else upper,
                rate=rate,
                taxable=taxable,
                amount=taxable * rate,
            )
        )
    return tuple(portions)


def calculate_transfer_tax(price: float) -> float:
    """Total transfer tax due on a purchase at ``price``."""
    return sum(portion.amount for portion in transfer_tax_breakdown(price))
