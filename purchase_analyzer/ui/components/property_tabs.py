"""Property tab bar: select, add and remove properties."""

from __future__ import annotations

import streamlit as st

from purchase_analyzer.services.portfolio import PropertyPortfolio
from purchase_analyzer.ui.app_controller import handle_remove
from purchase_analyzer.ui.state import SessionManager


def _select(portfolio: PropertyPortfolio, idx: int) -> None:
    portfolio.select(idx)
    SessionManager.clear_widgets()


def _add(portfolio: PropertyPortfolio) -> None:
    portfolio.add()
    SessionManager.clear_widgets()


def _remove(portfolio: PropertyPortfolio, idx: int) -> None:
    SessionManager.flash(handle_remove(portfolio, idx))
    SessionManager.clear_widgets()


def render_property_tabs(portfolio: PropertyPortfolio) -> None:
    """Render one button per property plus add/remove controls."""
    props = portfolio.properties
    cols = st.columns(len(props) + 1)

    for i, (col, prop) in enumerate(zip(cols, props)):
        with col:
            label = prop.name or f"Property {i + 1}"
            st.button(
                label,
                key=f"tab_{i}",
                type="primary" if i == portfolio.active_idx else "secondary",
                on_click=_select,
                args=(portfolio, i),
                use_container_width=True,
            )
            if len(props) > 1:
                st.button("×", key=f"tab_remove_{i}", help=f"Remove {label}",
                          on_click=_remove, args=(portfolio, i))

    with cols[-1]:
        st.button("+ Add Property", key="tab_add", on_click=_add, args=(portfolio,),
                  use_container_width=True)
