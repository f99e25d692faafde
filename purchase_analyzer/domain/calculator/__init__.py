"""Derivation engine: transfer tax, ratings and the metrics pipeline."""

from .derivation import derive
from .transfer_tax import calculate_transfer_tax, transfer_tax_breakdown

__all__ = [
    "calculate_transfer_tax",
    "derive",
    "transfer_tax_breakdown",
]
