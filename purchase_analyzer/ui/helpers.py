"""UI helper functions for Streamlit.

Formatting and colour utilities. Single locale: en-CA dollars.
"""

from __future__ import annotations

from purchase_analyzer.domain.models.metrics import Rating

EM_DASH = "—"

RATING_COLORS = {
    Rating.FAVORABLE: "#34d399",
    Rating.NEUTRAL: "#fbbf24",
    Rating.CAUTION: "#fbbf24",
    Rating.UNFAVORABLE: "#f87171",
}


def format_number(value: float | None, decimals: int = 0) -> str:
    """Format with comma grouping, e.g. 1234567.8 -> "1,234,568"."""
    if value is None:
        return EM_DASH
    return f"{value:,.{decimals}f}"


def format_currency(value: float | None, decimals: int = 0) -> str:
    """Format a dollar amount.

    Args:
        value: Amount to format
        decimals: Number of decimal places

    Returns:
        Formatted string like "$1,234,567" or "-$250"
    """
    if value is None:
        return EM_DASH
    sign = "-" if value < 0 and round(abs(value), decimals) != 0 else ""
    return f"{sign}${abs(value):,.{decimals}f}"


def format_pct(value: float | None, decimals: int = 1) -> str:
    """Format a percentage value (already x100), e.g. "3.5%"."""
    if value is None:
        return EM_DASH
    return f"{value:,.{decimals}f}%"


def format_signed_pct(value: float | None, decimals: int = 1) -> str:
    """Percentage with an explicit plus sign for positive values."""
    if value is None:
        return EM_DASH
    prefix = "+" if value > 0 else ""
    return f"{prefix}{value:,.{decimals}f}%"


def format_multiplier(value: float | None, decimals: int = 1) -> str:
    if value is None:
        return EM_DASH
    return f"{value:,.{decimals}f}×"


def format_rent_gap(gap: float | None) -> str:
    """Describe rent minus non-recoverable cost as a shortfall or surplus."""
    if gap is None:
        return EM_DASH
    if gap > 0:
        return f"{format_currency(gap)} shortfall"
    return f"{format_currency(abs(gap))} surplus"


def rating_color(rating: Rating | None) -> str:
    """Dot colour for a metric row; transparent when unclassified."""
    if rating is None:
        return "transparent"
    return RATING_COLORS[rating]
