"""Raw form text to typed engine input.

Defaulting happens here, not in the engine: blank or unparsable text
takes the field's named default (0 when it has none), negative amounts
are clamped to 0, the down payment to 0-100 and the amortization to
``MAX_AMORTIZATION_YEARS``. Nothing in this module raises.
"""

from __future__ import annotations

import math
import re

from purchase_analyzer.core.market_constants import FIELD_DEFAULTS, MAX_AMORTIZATION_YEARS
from purchase_analyzer.domain.models.property import PropertyForm, PropertyInput

_STRIP_RE = re.compile(r"[\s,$%]")

FLOAT_FIELDS = (
    "purchase_price",
    "down_payment_pct",
    "mortgage_rate",
    "strata_fees",
    "annual_property_tax",
    "annual_home_insurance",
    "maintenance_reserve",
    "legal_fees",
    "home_inspection",
    "title_insurance",
    "square_footage",
    "estimated_rent",
)
INT_FIELDS = ("amortization", "year_built")


def parse_number(text: str | float | int | None, default: float = 0.0) -> float:
    """Parse user-typed numeric text.

    Tolerates thousands separators, a ``$`` sign, a ``%`` sign and
    surrounding whitespace. An explicit "0" is 0, not the default.

    Args:
        text: Raw field value
        default: Returned for blank, unparsable or non-finite input

    Returns:
        Parsed value or ``default``
    """
    if text is None:
        return default
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
    else:
        cleaned = _STRIP_RE.sub("", str(text))
        if not cleaned:
            return default
        try:
            value = float(cleaned)
        except ValueError:
            return default
    if not math.isfinite(value):
        return default
    return value


def parse_int(text: str | float | int | None, default: int = 0) -> int:
    """Parse user-typed integer text, truncating any fraction."""
    value = parse_number(text, float("nan"))
    if math.isnan(value):
        return default
    return int(value)


def build_property_input(form: PropertyForm) -> PropertyInput:
    """Convert one editable form into a defaulted PropertyInput."""
    values: dict[str, float | int] = {}
    for field in FLOAT_FIELDS:
        values[field] = max(0.0, parse_number(getattr(form, field), FIELD_DEFAULTS.get(field, 0.0)))
    for field in INT_FIELDS:
        values[field] = max(0, parse_int(getattr(form, field), int(FIELD_DEFAULTS.get(field, 0))))

    values["down_payment_pct"] = min(100.0, values["down_payment_pct"])
    values["amortization"] = min(MAX_AMORTIZATION_YEARS, values["amortization"])

    return PropertyInput(
        name=form.name,
        listing_url=form.listing_url,
        property_type=form.property_type,
        **values,
    )


def effective_down_payment_pct(prop: PropertyInput, override: float | None) -> float:
    """Down payment % actually used: the override if set, else the stored one."""
    return prop.down_payment_pct if override is None else override
