"""Core mortgage math, constants, logging and settings."""

from .exceptions import (
    ConfigurationError,
    InvalidParameterError,
    LastPropertyError,
    PortfolioError,
    PurchaseAnalyzerError,
)
from .financial import MortgagePayment, calculate_monthly_payment, calculate_mortgage_payment
from .market_constants import BENCHMARKS, Benchmarks

__all__ = [
    "BENCHMARKS",
    "Benchmarks",
    "MortgagePayment",
    "calculate_monthly_payment",
    "calculate_mortgage_payment",
    # Exceptions
    "PurchaseAnalyzerError",
    "InvalidParameterError",
    "PortfolioError",
    "LastPropertyError",
    "ConfigurationError",
]
