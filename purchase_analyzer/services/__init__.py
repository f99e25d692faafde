"""Services: input parsing and the property portfolio."""

from .parsing import build_property_input, parse_int, parse_number
from .portfolio import PropertyPortfolio

__all__ = [
    "PropertyPortfolio",
    "build_property_input",
    "parse_int",
    "parse_number",
]
