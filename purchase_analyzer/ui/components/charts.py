"""Chart components for visualization."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from purchase_analyzer.domain.models.metrics import DerivedMetrics
from purchase_analyzer.ui.app_controller import build_monthly_cost_frame
from purchase_analyzer.ui.helpers import format_currency, format_pct

RECOVERABLE_COLOR = "#f59e0b"
NON_RECOVERABLE_COLOR = "#ef4444"


def build_recoverable_split_figure(metrics: DerivedMetrics) -> go.Figure:
    """Single stacked bar: recoverable principal vs non-recoverable cost."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=["Monthly"],
        x=[metrics.total_non_recoverable],
        name="Non-recoverable",
        orientation="h",
        marker=dict(color=NON_RECOVERABLE_COLOR),
        hovertemplate="%{x:$,.0f}<extra>Non-recoverable</extra>",
    ))
    fig.add_trace(go.Bar(
        y=["Monthly"],
        x=[metrics.mortgage_principal],
        name="Recoverable (principal)",
        orientation="h",
        marker=dict(color=RECOVERABLE_COLOR),
        hovertemplate="%{x:$,.0f}<extra>Principal</extra>",
    ))
    share = metrics.non_recoverable_share_pct
    fig.update_layout(
        barmode="stack",
        height=160,
        margin=dict(l=10, r=10, t=40, b=10),
        title=f"{format_pct(share, 0)} non-recoverable of {format_currency(metrics.total_monthly)}",
        legend=dict(orientation="h", yanchor="bottom", y=-0.6, xanchor="left", x=0),
        xaxis=dict(tickprefix="$", tickformat=",.0f"),
        yaxis=dict(showticklabels=False),
    )
    return fig


def build_monthly_items_figure(metrics: DerivedMetrics) -> go.Figure:
    """Bar per monthly line item, coloured by recoverability."""
    df = build_monthly_cost_frame(metrics)
    colors = [RECOVERABLE_COLOR if r else NON_RECOVERABLE_COLOR for r in df["Recoverable"]]
    fig = go.Figure(go.Bar(
        x=df["Item"],
        y=df["Monthly"],
        marker=dict(color=colors),
        hovertemplate="%{x}: %{y:$,.0f}/mo<extra></extra>",
    ))
    fig.update_layout(
        height=300,
        margin=dict(l=10, r=10, t=30, b=10),
        title="Monthly cost by item",
        yaxis=dict(tickprefix="$", tickformat=",.0f"),
    )
    return fig


def render_recoverable_split_chart(metrics: DerivedMetrics, key: str = "split") -> None:
    if metrics.total_monthly <= 0:
        st.caption("Enter a price to see the monthly cost split.")
        return
    st.plotly_chart(build_recoverable_split_figure(metrics), use_container_width=True, key=key)


def render_monthly_items_chart(metrics: DerivedMetrics, key: str = "items") -> None:
    if metrics.total_monthly <= 0:
        return
    st.plotly_chart(build_monthly_items_figure(metrics), use_container_width=True, key=key)
