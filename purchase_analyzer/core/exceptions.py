"""Custom exceptions for purchase_analyzer.

Domain-specific exception types raised by the portfolio and session layers.
The derivation engine itself never raises.
"""

from __future__ import annotations

from typing import Any


class PurchaseAnalyzerError(Exception):
    """Base exception for all purchase_analyzer errors."""
    pass


class InvalidParameterError(PurchaseAnalyzerError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Portfolio Errors ---

class PortfolioError(PurchaseAnalyzerError):
    """Rejected change to the property collection."""
    pass


class LastPropertyError(PortfolioError):
    """Attempted to remove the only remaining property."""

    def __init__(self) -> None:
        super().__init__("Cannot remove the last remaining property")


# --- Configuration Errors ---

class ConfigurationError(PurchaseAnalyzerError):
    """Error in application configuration."""
    pass
