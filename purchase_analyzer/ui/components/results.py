"""Result sections: upfront costs, monthly cash flow, metrics, summary."""

from __future__ import annotations

import streamlit as st

from purchase_analyzer.core.market_constants import (
    BENCHMARKS,
    SLIDER_MAX_PCT,
    SLIDER_MIN_PCT,
    SLIDER_STEP_PCT,
    SLIDER_TICKS,
)
from purchase_analyzer.core.settings import get_settings
from purchase_analyzer.domain.models.metrics import DerivedMetrics, Rating
from purchase_analyzer.services.parsing import build_property_input
from purchase_analyzer.services.portfolio import PropertyPortfolio
from purchase_analyzer.ui.app_controller import build_tax_breakdown_frame, handle_override
from purchase_analyzer.ui.components.charts import render_monthly_items_chart, render_recoverable_split_chart
from purchase_analyzer.ui.helpers import (
    format_currency,
    format_multiplier,
    format_number,
    format_pct,
    format_rent_gap,
    format_signed_pct,
    rating_color,
)
from purchase_analyzer.ui.state import SessionManager

SLIDER_KEY = "w_slider_down"


def render_metric_row(label: str, value: str, context: str = "", rating: Rating | None = None) -> None:
    """One metric line with a coloured status dot."""
    dot = rating_color(rating)
    st.markdown(
        f"<div style='display:flex;justify-content:space-between;padding:4px 0;"
        f"border-bottom:1px solid rgba(120,113,108,0.3)'>"
        f"<span><span style='display:inline-block;width:8px;height:8px;border-radius:4px;"
        f"background:{dot};margin-right:8px'></span>{label}</span>"
        f"<span><b>{value}</b> <span style='color:gray;font-size:0.8em'>{context}</span></span></div>",
        unsafe_allow_html=True,
    )


def render_upfront_costs(metrics: DerivedMetrics) -> None:
    st.subheader("🏦 Upfront Costs")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Property Transfer Tax", format_currency(metrics.transfer_tax))
    c2.metric("Legal Fees", format_currency(metrics.legal_fees))
    c3.metric("Home Inspection", format_currency(metrics.home_inspection))
    c4.metric("Title Insurance", format_currency(metrics.title_insurance))

    c1, c2 = st.columns(2)
    c1.metric("Closing Costs", format_currency(metrics.closing_costs),
              help="PTT + legal + inspection + insurance")
    c2.metric("Total Cash to Close", format_currency(metrics.total_cash_to_close),
              help=f"Includes {format_currency(metrics.down_payment_amount)} down "
                   f"({metrics.down_payment_pct:g}%)")

    if metrics.purchase_price > 0 and get_settings().show_tax_breakdown:
        with st.expander("PTT calculation details"):
            df = build_tax_breakdown_frame(metrics)
            st.dataframe(
                df.style.format({"Taxable": "${:,.0f}", "Tax": "${:,.0f}"}),
                hide_index=True,
                use_container_width=True,
            )
            st.markdown(f"**Total PTT: {format_currency(metrics.transfer_tax)}**")


def _apply_slider(portfolio: PropertyPortfolio) -> None:
    SessionManager.flash(handle_override(portfolio, st.session_state[SLIDER_KEY]))


def _apply_tick(portfolio: PropertyPortfolio, pct: int) -> None:
    SessionManager.flash(handle_override(portfolio, pct))
    SessionManager.clear_widgets("w_slider")


def _reset_slider(portfolio: PropertyPortfolio) -> None:
    handle_override(portfolio, None)
    SessionManager.clear_widgets("w_slider")


def render_down_payment_slider(portfolio: PropertyPortfolio, metrics: DerivedMetrics) -> None:
    """What-if slider that overrides the stored down payment for display."""
    down = metrics.down_payment_pct
    head, amount, reset = st.columns([0.5, 0.25, 0.25])
    head.markdown(f"**Down Payment Scenario: {down:g}%**")
    amount.caption(format_currency(metrics.down_payment_amount) if metrics.purchase_price > 0 else "—")
    if portfolio.down_pct_override is not None:
        base = build_property_input(portfolio.active).down_payment_pct
        reset.button(f"reset to {base:g}%", key="slider_reset", on_click=_reset_slider, args=(portfolio,))

    st.slider(
        "Down payment %",
        min_value=float(SLIDER_MIN_PCT),
        max_value=float(SLIDER_MAX_PCT),
        step=float(SLIDER_STEP_PCT),
        value=float(min(max(round(down / SLIDER_STEP_PCT) * SLIDER_STEP_PCT, SLIDER_MIN_PCT), SLIDER_MAX_PCT)),
        key=SLIDER_KEY,
        on_change=_apply_slider,
        args=(portfolio,),
        label_visibility="collapsed",
    )
    for col, tick in zip(st.columns(len(SLIDER_TICKS)), SLIDER_TICKS):
        col.button(f"{tick}%", key=f"tick_{tick}", on_click=_apply_tick, args=(portfolio, tick),
                   type="primary" if down == tick else "secondary")

    if metrics.requires_mortgage_insurance:
        st.warning("⚠ CMHC mortgage insurance required under 20% down")


def render_monthly_cash_flow(portfolio: PropertyPortfolio, metrics: DerivedMetrics) -> None:
    st.subheader("📅 Monthly Cash Flow")
    with st.container(border=True):
        render_down_payment_slider(portfolio, metrics)

    c1, c2, c3 = st.columns(3)
    c1.metric("Mortgage Payment", format_currency(metrics.mortgage_payment))
    c2.metric("Principal (recoverable)", format_currency(metrics.mortgage_principal))
    c3.metric("Interest (non-rec)", format_currency(metrics.mortgage_interest))

    cols = st.columns(4)
    for col, (label, value) in zip(cols, [
        ("Strata Fees", metrics.strata_fees),
        ("Property Tax", metrics.monthly_property_tax),
        ("Home Insurance", metrics.monthly_insurance),
        ("Maintenance", metrics.maintenance),
    ]):
        col.metric(label, f"{format_currency(value)}/mo", help="non-recoverable")

    c1, c2 = st.columns(2)
    c1.metric("Total Monthly Cost", format_currency(metrics.total_monthly),
              help=f"{format_currency(metrics.annual_total)}/year")
    c2.metric("Non-Recoverable", format_currency(metrics.total_non_recoverable),
              help=f"{format_currency(metrics.annual_non_recoverable)}/year")
    render_monthly_items_chart(metrics)


def render_area_metrics(metrics: DerivedMetrics) -> None:
    st.markdown("**Per Square Foot**")
    render_metric_row(
        "Price / sqft",
        format_currency(metrics.price_per_area),
        f"{format_currency(metrics.benchmark_per_area)} avg",
        metrics.price_vs_benchmark_rating,
    )
    if metrics.price_vs_benchmark_pct is not None:
        render_metric_row("vs Vancouver avg", format_signed_pct(metrics.price_vs_benchmark_pct),
                          rating=metrics.price_vs_benchmark_rating)
    if metrics.strata_fees_per_area is not None:
        render_metric_row(
            "Strata / sqft",
            format_currency(metrics.strata_fees_per_area, 2),
            f"${BENCHMARKS.strata_fee_per_area:.2f} avg",
            metrics.strata_per_area_rating,
        )
    render_metric_row("Monthly cost / sqft", format_currency(metrics.monthly_cost_per_area, 2))
    if metrics.building_age_years is not None:
        render_metric_row("Building age", f"{metrics.building_age_years} yrs",
                          rating=metrics.building_age_rating)


def render_investment_metrics(metrics: DerivedMetrics) -> None:
    st.markdown("**Investment Metrics**" if metrics.has_rent_metrics else "**Financing Metrics**")
    render_metric_row(
        "LTV Ratio",
        format_pct(metrics.loan_to_value_pct),
        "no CMHC" if metrics.ltv_rating is Rating.FAVORABLE else "CMHC required",
        metrics.ltv_rating,
    )
    if metrics.non_recoverable_to_price_pct is not None:
        render_metric_row("Non-rec / price", format_pct(metrics.non_recoverable_to_price_pct, 3),
                          "monthly")
    if metrics.has_rent_metrics:
        render_metric_row("Gross Rent Multiplier", format_multiplier(metrics.gross_rent_multiplier),
                          "<20 good", metrics.gross_rent_multiplier_rating)
        render_metric_row("Cap Rate", format_pct(metrics.cap_rate, 2),
                          f"{BENCHMARKS.average_cap_rate_pct:.1f}% avg", metrics.cap_rate_rating)
        render_metric_row("Rent vs non-rec", format_rent_gap(metrics.rent_vs_non_recoverable),
                          "monthly", metrics.rent_vs_non_recoverable_rating)
    else:
        st.caption("Add an estimated rent to unlock investment metrics.")


def render_property_metrics(metrics: DerivedMetrics) -> None:
    st.subheader("🔍 Property Metrics")
    if not (metrics.has_area_metrics or metrics.has_rent_metrics):
        st.info("Add square footage or estimated rent to see property metrics.")
        return
    left, right = st.columns(2)
    with left:
        if metrics.has_area_metrics:
            render_area_metrics(metrics)
    with right:
        render_investment_metrics(metrics)


def render_summary(metrics: DerivedMetrics) -> None:
    st.subheader("📊 Summary")
    if metrics.purchase_price > 0:
        c1, c2, c3 = st.columns(3)
        c1.metric("Down Payment", f"{metrics.down_payment_pct:g}%",
                  help=format_currency(metrics.down_payment_amount))
        if metrics.down_payment_rating is Rating.CAUTION:
            c1.caption("⚠ under 20% down")
        c2.metric("Loan Amount", format_currency(metrics.loan_amount),
                  help=f"{format_pct(metrics.loan_to_value_pct)} LTV")
        c3.metric("Non-Rec Annual", format_currency(metrics.annual_non_recoverable),
                  help="true annual cost")

    render_recoverable_split_chart(metrics)

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Monthly Total", format_currency(metrics.total_monthly), help="all-in")
    c2.metric("Monthly Non-Rec", format_currency(metrics.total_non_recoverable), help="true cost")
    c3.metric("Annual Total", format_currency(metrics.annual_total), help="projected")
    c4.metric("Annual Non-Rec", format_currency(metrics.annual_non_recoverable), help="projected")

    if metrics.purchase_price > 0:
        with st.container(border=True):
            st.markdown(
                f"Loan amount: **{format_currency(metrics.loan_amount)}**  \n"
                f"Down payment: **{format_currency(metrics.down_payment_amount)} "
                f"({format_number(metrics.down_payment_pct, 0)}%)**  \n"
                f"Closing costs: **{format_currency(metrics.closing_costs)}**  \n"
                f"PTT: **{format_currency(metrics.transfer_tax)}**  \n"
                f"Mortgage (mo 1): **{format_currency(metrics.mortgage_payment)}/mo**  \n"
                f"Total cash to close: **{format_currency(metrics.total_cash_to_close)}**"
            )
