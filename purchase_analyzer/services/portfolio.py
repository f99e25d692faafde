"""Property portfolio service.

Ordered collection of editable properties (one per tab) with an active
selection and a transient down payment override. The collection is never
empty and the active index always points at an existing property.
"""

from __future__ import annotations

from numbers import Real
from typing import Any

from pydantic import ValidationError

from purchase_analyzer.core.exceptions import InvalidParameterError, LastPropertyError
from purchase_analyzer.core.logging import get_logger
from purchase_analyzer.core.market_constants import SLIDER_MAX_PCT, SLIDER_MIN_PCT, SLIDER_STEP_PCT
from purchase_analyzer.domain.calculator.derivation import derive
from purchase_analyzer.domain.models.metrics import DerivedMetrics
from purchase_analyzer.domain.models.property import PropertyForm
from purchase_analyzer.services.parsing import build_property_input, effective_down_payment_pct

log = get_logger(__name__)

FIRST_PROPERTY_NAME = "My First Property"


def validate_override(pct: float) -> float:
    """Check a slider value against the 5-100 grid in steps of 5."""
    if (
        not isinstance(pct, Real)
        or isinstance(pct, bool)
        or not SLIDER_MIN_PCT <= pct <= SLIDER_MAX_PCT
        or pct != int(pct)
        or int(pct) % SLIDER_STEP_PCT != 0
    ):
        raise InvalidParameterError(
            "down_pct_override",
            pct,
            f"must be {SLIDER_MIN_PCT}-{SLIDER_MAX_PCT} in steps of {SLIDER_STEP_PCT}",
        )
    return float(pct)


class PropertyPortfolio:
    """Tabs of properties being compared."""

    def __init__(self, properties: list[PropertyForm] | None = None, active_idx: int = 0):
        self._properties: list[PropertyForm] = list(properties or [PropertyForm(name=FIRST_PROPERTY_NAME)])
        self._active_idx = 0
        self._override: float | None = None
        self.select(active_idx)

    def __len__(self) -> int:
        return len(self._properties)

    @property
    def properties(self) -> tuple[PropertyForm, ...]:
        return tuple(self._properties)

    @property
    def active_idx(self) -> int:
        return self._active_idx

    @property
    def active(self) -> PropertyForm:
        return self._properties[self._active_idx]

    @property
    def down_pct_override(self) -> float | None:
        return self._override

    @property
    def effective_down_pct(self) -> float:
        """Down payment % the dashboard is currently showing."""
        return effective_down_payment_pct(build_property_input(self.active), self._override)

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < len(self._properties):
            raise InvalidParameterError("idx", idx, f"no property at this index (have {len(self._properties)})")

    def add(self) -> int:
        """Append a new default property and make it active.

        Returns:
            Index of the new property
        """
        prop = PropertyForm(name=f"Property {len(self._properties) + 1}")
        self._properties.append(prop)
        self._active_idx = len(self._properties) - 1
        self._override = None
        log.info("property_added", idx=self._active_idx, count=len(self._properties))
        return self._active_idx

    def remove(self, idx: int) -> None:
        """Delete the property at ``idx``.

        Removing a tab at or before the active one shifts the selection one
        step left, so the active property stays the same unless it was the
        one removed.

        Raises:
            LastPropertyError: If only one property remains
            InvalidParameterError: If ``idx`` is out of range
        """
        self._check_index(idx)
        if len(self._properties) == 1:
            log.warning("property_remove_rejected", idx=idx, reason="last_property")
            raise LastPropertyError()

        removed = self._properties.pop(idx)
        if self._active_idx >= idx and self._active_idx > 0:
            self._active_idx -= 1
        self._override = None
        log.info("property_removed", idx=idx, name=removed.name, active_idx=self._active_idx)

    def select(self, idx: int) -> None:
        """Switch the active tab and drop any slider override."""
        self._check_index(idx)
        self._active_idx = idx
        self._override = None

    def update(self, field: str, value: Any) -> None:
        """Edit one field of the active property.

        Editing the stored down payment discards the slider override.

        Raises:
            InvalidParameterError: If ``field`` is not a property field
        """
        if field not in PropertyForm.model_fields:
            raise InvalidParameterError("field", field, "unknown property field")
        try:
            setattr(self.active, field, value)
        except ValidationError as exc:
            raise InvalidParameterError(field, value, exc.errors()[0]["msg"]) from exc
        if field == "down_payment_pct":
            self._override = None
        log.debug("property_updated", idx=self._active_idx, field=field)

    def set_override(self, pct: float) -> None:
        """Apply a what-if down payment without touching the stored value."""
        self._override = validate_override(pct)
        log.debug("override_set", idx=self._active_idx, pct=self._override)

    def reset_override(self) -> None:
        self._override = None

    def derive_active(self, as_of_year: int | None = None) -> DerivedMetrics:
        """Run the derivation engine on the active property."""
        return derive(build_property_input(self.active), self._override, as_of_year=as_of_year)
