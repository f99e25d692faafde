"""Main page rendering.

Composes the tab bar, input form and result sections for the active
property. Every rerun derives the metrics afresh from session state.
"""

from __future__ import annotations

import streamlit as st

from purchase_analyzer.core.settings import get_settings
from purchase_analyzer.ui.components.property_form import render_property_form
from purchase_analyzer.ui.components.property_tabs import render_property_tabs
from purchase_analyzer.ui.components.results import (
    render_monthly_cash_flow,
    render_property_metrics,
    render_summary,
    render_upfront_costs,
)
from purchase_analyzer.ui.state import SessionManager


def render_header() -> None:
    st.caption("VANCOUVER REAL ESTATE")
    st.title("Purchase Analyzer")
    st.caption("BC Property Transfer Tax · Mortgage · Strata")


def render_footer() -> None:
    st.caption(
        "For informational purposes only. Consult a mortgage broker and financial advisor. "
        "PTT rates current as of 2024. Vancouver benchmarks are approximate market averages."
    )


def render_main_page() -> None:
    """Render the whole dashboard for the active property."""
    portfolio = SessionManager.get_portfolio()

    render_header()
    render_property_tabs(portfolio)

    message = SessionManager.pop_flash()
    if message:
        st.warning(message)

    metrics = portfolio.derive_active()

    left, middle, right = st.columns([1, 1.4, 1])
    with left:
        render_property_form(portfolio, metrics)
    with middle:
        render_upfront_costs(metrics)
        render_monthly_cash_flow(portfolio, metrics)
        render_property_metrics(metrics)
    with right:
        render_summary(metrics)

    if get_settings().debug_mode:
        with st.expander("Debug: derived metrics"):
            st.json(metrics.model_dump(mode="json"))

    render_footer()
