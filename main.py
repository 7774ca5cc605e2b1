# main.py
import logging

import streamlit as st

from config import settings, theme
from views import invoice_view, landing_view

logger = logging.getLogger(__name__)

MENU_HOME = "🏠 Home"
MENU_INVOICE = "🧾 Invoice Generator"

# Menu label <-> ?page= slug, so the tool is directly linkable.
ROUTES = {
    MENU_HOME: "home",
    MENU_INVOICE: "invoice-generator",
}

# =========================
# 1) APP INIT
# =========================
def init_app():
    settings.configure_logging()
    st.set_page_config(page_title=settings.PAGE_TITLE, layout=settings.PAGE_LAYOUT)

    # Theme single source
    st.markdown(theme.CSS, unsafe_allow_html=True)

# =========================
# 2) SIDEBAR UI
# =========================
def _menu_from_query() -> str:
    slug = str(st.query_params.get("page", "")).lower()
    for label, route in ROUTES.items():
        if route == slug:
            return label
    return MENU_HOME

def open_invoice_tool() -> None:
    st.session_state["menu_radio"] = MENU_INVOICE

def _sidebar() -> str:
    with st.sidebar:
        st.markdown("## 🧭 CodeDreamers")

        if "menu_radio" not in st.session_state:
            st.session_state["menu_radio"] = _menu_from_query()

        selected = st.radio("Navigation", options=list(ROUTES), key="menu_radio")
        st.query_params["page"] = ROUTES[selected]

        st.divider()
        st.caption("Invoices live only in this browser tab and are discarded on reload.")

        return selected

# =========================
# 3) ROUTING
# =========================
def main():
    init_app()

    menu = _sidebar()

    if menu == MENU_INVOICE:
        invoice_view.render_page()
    else:
        landing_view.render_page(open_invoice_tool)

if __name__ == "__main__":
    try:
        main()
    except Exception:
        # Global error boundary so the page never goes blank
        logger.exception("Unhandled error while rendering the page")
        st.error("Something went wrong. Please reload the page.")
