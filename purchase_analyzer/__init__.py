"""
purchase_analyzer - Real Estate Purchase Analyzer

Computes upfront closing costs, monthly carrying costs and investment
metrics for a property purchase.

Modules:
    - domain: Pydantic data models and the derivation engine
    - core: Mortgage math, market constants, logging and settings
    - services: Input parsing and the multi-property portfolio
    - ui: Streamlit pages and UI components
"""

__version__ = "1.2.0"
