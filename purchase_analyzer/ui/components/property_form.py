"""Input form bound to the active property."""

from __future__ import annotations

import streamlit as st

from purchase_analyzer.domain.models.metrics import DerivedMetrics
from purchase_analyzer.domain.models.property import PropertyType
from purchase_analyzer.services.portfolio import PropertyPortfolio
from purchase_analyzer.ui.app_controller import handle_update, summarize_property
from purchase_analyzer.ui.state import SessionManager

PROPERTY_TYPE_LABELS = {
    PropertyType.CONDO: "Condo / Apartment",
    PropertyType.TOWNHOME: "Townhome",
}

# (field, label, placeholder, help) grouped as displayed
PROPERTY_FIELDS = [
    ("purchase_price", "Purchase Price ($)", "800,000", None),
    ("square_footage", "Square Footage (sqft)", "650", None),
    ("year_built", "Year Built", "2005", None),
    ("down_payment_pct", "Down Payment (%)", "20", None),
    ("mortgage_rate", "Mortgage Interest Rate (%)", "5.25", None),
    ("amortization", "Amortization Period (yrs)", "25", None),
]
RECURRING_FIELDS = [
    ("strata_fees", "Monthly Strata Fees ($)", "450", None),
    ("annual_property_tax", "Annual Property Tax ($)", "4,200", None),
    ("annual_home_insurance", "Annual Home Insurance ($)", "1,500", None),
    ("maintenance_reserve", "Monthly Maintenance Reserve ($)", "200", None),
    ("estimated_rent", "Est. Monthly Rent ($)", "2,800", "for investment metrics"),
]
ONE_TIME_FIELDS = [
    ("legal_fees", "Legal Fees ($)", None, "one-time estimate"),
    ("home_inspection", "Home Inspection ($)", None, "one-time estimate"),
    ("title_insurance", "Title Insurance ($)", None, "one-time estimate"),
]


def _on_edit(portfolio: PropertyPortfolio, field: str, key: str) -> None:
    SessionManager.flash(handle_update(portfolio, field, st.session_state[key]))
    if field == "down_payment_pct":
        SessionManager.clear_widgets("w_slider")


def _text_field(portfolio: PropertyPortfolio, field: str, label: str,
                placeholder: str | None, help_text: str | None) -> None:
    key = f"w_{field}"
    st.text_input(
        label,
        value=getattr(portfolio.active, field),
        placeholder=placeholder,
        help=help_text,
        key=key,
        on_change=_on_edit,
        args=(portfolio, field, key),
    )


def render_property_form(portfolio: PropertyPortfolio, metrics: DerivedMetrics) -> None:
    """Render the collapsible form for the active property."""
    prop = portfolio.active
    collapsed = SessionManager.is_form_collapsed()

    header = f"✏️ {prop.name or 'Property Details'}"
    if collapsed:
        header += f"  \n{summarize_property(metrics, prop.mortgage_rate, prop.amortization)}"
    st.button(header, key="form_toggle", on_click=SessionManager.toggle_form, use_container_width=True)
    if collapsed:
        return

    _text_field(portfolio, "name", "Property Name", None, None)
    _text_field(portfolio, "listing_url", "Listing URL", "https://www.realtor.ca/...", None)
    if prop.listing_url:
        st.markdown(f"[↗ Open listing]({prop.listing_url})")
    st.divider()

    types = list(PropertyType)
    st.selectbox(
        "Property Type",
        options=types,
        index=types.index(prop.property_type),
        format_func=lambda t: PROPERTY_TYPE_LABELS[t],
        key="w_property_type",
        on_change=_on_edit,
        args=(portfolio, "property_type", "w_property_type"),
    )
    for field, label, placeholder, help_text in PROPERTY_FIELDS:
        _text_field(portfolio, field, label, placeholder, help_text)
    st.divider()
    for field, label, placeholder, help_text in RECURRING_FIELDS:
        _text_field(portfolio, field, label, placeholder, help_text)
    st.divider()
    for field, label, placeholder, help_text in ONE_TIME_FIELDS:
        _text_field(portfolio, field, label, placeholder, help_text)
