"""Session state management for the Streamlit app.

The portfolio (tabs, active selection, slider override) lives in
``st.session_state`` so it survives Streamlit reruns within a session.
"""

from __future__ import annotations

from typing import Any, TypeVar

import streamlit as st

from purchase_analyzer.services.portfolio import PropertyPortfolio

T = TypeVar("T")


def get_state(key: str, default: T) -> T:
    """Get a value from session state, storing ``default`` if absent."""
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def set_state(key: str, value: Any) -> None:
    st.session_state[key] = value


def init_state(defaults: dict[str, Any]) -> None:
    """Initialize multiple session state values, keeping existing ones."""
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


class SessionManager:
    """Manages all session state for the app."""

    DEFAULTS = {
        "form_collapsed": False,
        "flash_message": None,
    }

    @classmethod
    def initialize(cls) -> None:
        init_state(cls.DEFAULTS)
        if "portfolio" not in st.session_state:
            set_state("portfolio", PropertyPortfolio())

    @classmethod
    def get_portfolio(cls) -> PropertyPortfolio:
        """Get the session's portfolio, creating it on first access."""
        return get_state("portfolio", PropertyPortfolio())

    @classmethod
    def is_form_collapsed(cls) -> bool:
        return get_state("form_collapsed", False)

    @classmethod
    def toggle_form(cls) -> None:
        set_state("form_collapsed", not cls.is_form_collapsed())

    @classmethod
    def flash(cls, message: str | None) -> None:
        """Queue a warning to show on the next render."""
        set_state("flash_message", message)

    @classmethod
    def pop_flash(cls) -> str | None:
        message = get_state("flash_message", None)
        set_state("flash_message", None)
        return message

    @classmethod
    def clear_widgets(cls, prefix: str = "w_") -> None:
        """Drop widget values so inputs re-read the active property."""
        for key in [k for k in st.session_state.keys() if str(k).startswith(prefix)]:
            del st.session_state[key]
