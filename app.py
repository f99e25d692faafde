"""Main Application Entry Point.

Run with ``streamlit run app.py``.
"""

import streamlit as st

from purchase_analyzer.core.exceptions import ConfigurationError
from purchase_analyzer.core.logging import configure_logging, get_logger
from purchase_analyzer.core.settings import get_settings
from purchase_analyzer.ui.pages.main import render_main_page
from purchase_analyzer.ui.state import SessionManager

log = get_logger(__name__)


def main() -> None:
    st.set_page_config(page_title="Vancouver Purchase Analyzer", page_icon="🏠", layout="wide")
    configure_logging()
    try:
        get_settings()
    except ConfigurationError as e:
        log.error("startup_aborted", error=str(e))
        st.error(f"Configuration error: {e}")
        st.stop()

    SessionManager.initialize()
    log.debug("page_render", properties=len(SessionManager.get_portfolio()))
    render_main_page()


if __name__ == "__main__":
    main()
