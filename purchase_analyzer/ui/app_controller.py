"""Application controller - glue between widgets and the portfolio.

Widget callbacks go through these functions so rejected edits are logged
and surfaced as warnings instead of crashing the rerun. The table builders
are plain pandas and carry no Streamlit dependency.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from purchase_analyzer.core.exceptions import PurchaseAnalyzerError
from purchase_analyzer.core.logging import get_logger
from purchase_analyzer.domain.models.metrics import DerivedMetrics
from purchase_analyzer.services.portfolio import PropertyPortfolio
from purchase_analyzer.ui.helpers import format_currency, format_pct

log = get_logger(__name__)


def handle_remove(portfolio: PropertyPortfolio, idx: int) -> str | None:
    """Remove a tab.

    Returns:
        Warning text if the removal was rejected, else None
    """
    try:
        portfolio.remove(idx)
    except PurchaseAnalyzerError as e:
        return str(e)
    return None


def handle_update(portfolio: PropertyPortfolio, field: str, value: Any) -> str | None:
    """Apply one form edit to the active property."""
    try:
        portfolio.update(field, value)
    except PurchaseAnalyzerError as e:
        log.warning("property_update_rejected", field=field, error=str(e))
        return str(e)
    return None


def handle_override(portfolio: PropertyPortfolio, pct: float | None) -> str | None:
    """Set or clear (``None``) the down payment slider override."""
    if pct is None:
        portfolio.reset_override()
        return None
    try:
        portfolio.set_override(pct)
    except PurchaseAnalyzerError as e:
        log.warning("override_rejected", pct=pct, error=str(e))
        return str(e)
    return None


def _bracket_label(lower: float, upper: float | None) -> str:
    if upper is None:
        return f"above {format_currency(lower)}"
    return f"{format_currency(lower)} - {format_currency(upper)}"


def build_tax_breakdown_frame(metrics: DerivedMetrics) -> pd.DataFrame:
    """Transfer tax table with one row per bracket the price reaches.

    Columns: Bracket, Rate, Taxable, Tax.
    """
    rows = [
        {
            "Bracket": _bracket_label(b.lower, b.upper),
            "Rate": format_pct(b.rate * 100, 0),
            "Taxable": b.taxable,
            "Tax": b.amount,
        }
        for b in metrics.transfer_tax_breakdown
        if b.taxable > 0
    ]
    return pd.DataFrame(rows, columns=["Bracket", "Rate", "Taxable", "Tax"])


def build_monthly_cost_frame(metrics: DerivedMetrics) -> pd.DataFrame:
    """Monthly outlay split into line items.

    Columns: Item, Monthly, Annual, Recoverable. Only the mortgage principal
    is recoverable.
    """
    items = [
        ("Mortgage principal", metrics.mortgage_principal, True),
        ("Mortgage interest", metrics.mortgage_interest, False),
        ("Strata fees", metrics.strata_fees, False),
        ("Property tax", metrics.monthly_property_tax, False),
        ("Home insurance", metrics.monthly_insurance, False),
        ("Maintenance", metrics.maintenance, False),
    ]
    df = pd.DataFrame(items, columns=["Item", "Monthly", "Recoverable"])
    df.insert(2, "Annual", df["Monthly"] * 12.0)
    return df


def summarize_property(metrics: DerivedMetrics, mortgage_rate: str, amortization: str) -> str:
    """One-line summary shown on the collapsed form header."""
    if not metrics.purchase_price:
        return "Click to enter property details"
    return (
        f"{format_currency(metrics.purchase_price)} · {metrics.down_payment_pct:g}% dn · "
        f"{mortgage_rate}% · {amortization}yr"
    )
