"""Data models for purchase_analyzer."""

from .metrics import DerivedMetrics, Rating, TaxBracketPortion
from .property import PropertyForm, PropertyInput, PropertyType

__all__ = [
    "DerivedMetrics",
    "PropertyForm",
    "PropertyInput",
    "PropertyType",
    "Rating",
    "TaxBracketPortion",
]
