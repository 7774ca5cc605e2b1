# invoice_view.py
from __future__ import annotations

from datetime import date
from typing import Optional

import streamlit as st

from config import settings
from controllers.invoice_callbacks import (
    action_export_pdf,
    cb_add_item,
    cb_field_changed,
    cb_item_changed,
    cb_remove_item,
    cb_reset_invoice,
    cb_start_invoice,
    cb_toggle_preview,
    field_key,
    item_key,
)
from modules.invoice_state import (
    InvoiceSession,
    ViewMode,
    get_session,
    validate_invoice,
)
from modules.preview import build_preview, render_preview_html
from modules.utils import format_quantity
from ui.components import page_header, section

# ==============================================================================
# 1) CONFIGURATION & CONSTANTS
# ==============================================================================

ITEM_COLUMN_RATIOS = [3, 1, 1, 0.45]  # Description | Quantity | Price | Del

TEXT_FIELDS = [
    ("invoice_number", "Invoice Number"),
    ("company_name", "Company Name"),
    ("client_name", "Client Name"),
]
DATE_FIELDS = [
    ("date", "Date"),
    ("due_date", "Due Date"),
]
AREA_FIELDS = [
    ("company_address", "Company Address"),
    ("client_address", "Client Address"),
]


# ==============================================================================
# 2) WIDGET STATE SYNC
# ==============================================================================

def _parse_date(text: str) -> Optional[date]:
    try:
        return date.fromisoformat(text) if text else None
    except ValueError:
        return None

def sync_widget_state(session: InvoiceSession) -> None:
    """Seeds widget keys from the store once, so widgets never fight the store."""
    data = session.data
    for name, _ in TEXT_FIELDS + AREA_FIELDS + [("notes", "")]:
        st.session_state.setdefault(field_key(name), getattr(data, name))
    for name, _ in DATE_FIELDS:
        st.session_state.setdefault(field_key(name), _parse_date(getattr(data, name)))

    for idx, item in enumerate(data.items):
        st.session_state.setdefault(item_key(session.revision, idx, "description"), item.description)
        st.session_state.setdefault(item_key(session.revision, idx, "quantity"), format_quantity(item.quantity))
        st.session_state.setdefault(item_key(session.revision, idx, "price"), format_quantity(item.price))


# ==============================================================================
# 3) SECTIONS
# ==============================================================================

def render_start_screen() -> None:
    st.write("")
    _, mid, _ = st.columns([1, 1, 1])
    mid.button(
        "📄 Create New Invoice",
        type="primary",
        on_click=cb_start_invoice,
        use_container_width=True,
    )

def render_form(session: InvoiceSession) -> None:
    sync_widget_state(session)

    left, right = st.columns(2, gap="medium")
    with left:
        name, label = TEXT_FIELDS[0]
        st.text_input(label, key=field_key(name), on_change=cb_field_changed, args=(name,))
        for name, label in DATE_FIELDS:
            st.date_input(label, key=field_key(name), on_change=cb_field_changed, args=(name,))
        st.text_area(
            AREA_FIELDS[0][1], key=field_key(AREA_FIELDS[0][0]), height=90,
            on_change=cb_field_changed, args=(AREA_FIELDS[0][0],),
        )
    with right:
        for name, label in TEXT_FIELDS[1:]:
            st.text_input(label, key=field_key(name), on_change=cb_field_changed, args=(name,))
        st.text_area(
            AREA_FIELDS[1][1], key=field_key(AREA_FIELDS[1][0]), height=90,
            on_change=cb_field_changed, args=(AREA_FIELDS[1][0],),
        )

    st.write("")
    section("Items")

    rev = session.revision
    for idx, _item in enumerate(session.data.items):
        col1, col2, col3, col4 = st.columns(ITEM_COLUMN_RATIOS, gap="small", vertical_alignment="bottom")
        col1.text_input(
            "Description", key=item_key(rev, idx, "description"), placeholder="Description",
            label_visibility="collapsed", on_change=cb_item_changed, args=(idx, "description"),
        )
        col2.text_input(
            "Quantity", key=item_key(rev, idx, "quantity"), placeholder="Quantity",
            label_visibility="collapsed", on_change=cb_item_changed, args=(idx, "quantity"),
        )
        col3.text_input(
            "Price", key=item_key(rev, idx, "price"), placeholder="Price",
            label_visibility="collapsed", on_change=cb_item_changed, args=(idx, "price"),
        )
        col4.button("🗑", key=f"del_{rev}_{idx}", on_click=cb_remove_item, args=(idx,), use_container_width=True)

    if not session.data.items:
        st.info("No items. The invoice table will be empty.")

    st.button("＋ Add Item", on_click=cb_add_item, use_container_width=True)

    st.text_area("Notes", key=field_key("notes"), height=90, on_change=cb_field_changed, args=("notes",))

def render_preview(session: InvoiceSession) -> None:
    doc = build_preview(session.data)
    st.markdown(render_preview_html(doc), unsafe_allow_html=True)

def render_issues(session: InvoiceSession) -> None:
    issues = validate_invoice(session.data)
    if issues:
        st.warning("\n".join(f"- {msg}" for msg in issues))

def render_actions(session: InvoiceSession) -> None:
    previewing = session.mode is ViewMode.PREVIEWING
    col1, col2 = st.columns(2)
    col1.button(
        "✏️ Edit" if previewing else "👁 Preview",
        on_click=cb_toggle_preview,
        use_container_width=True,
    )
    if col2.button("⬇️ Download PDF", type="primary", disabled=not previewing, use_container_width=True):
        with st.spinner("Generating PDF..."):
            action_export_pdf()


# ==============================================================================
# 4) EXPORT
# ==============================================================================

def render_download_section() -> None:
    err = st.session_state.get("export_error")
    if err:
        st.error(f"{err} Please try again.")

    pdf_bytes = st.session_state.get("generated_pdf_bytes")
    if not pdf_bytes or get_session().mode is not ViewMode.PREVIEWING:
        return

    with st.container(border=True):
        section("✅ PDF Ready")
        st.download_button(
            "📥 Save invoice.pdf",
            data=pdf_bytes,
            file_name=settings.EXPORT_FILENAME,
            mime="application/pdf",
            use_container_width=True,
        )


# ==============================================================================
# 5) MAIN EXECUTION
# ==============================================================================

def render_page() -> None:
    session = get_session()

    page_header("Invoice Generator", "Fill in the details, preview, and download a PDF.")

    if session.mode is ViewMode.NOT_STARTED:
        render_start_screen()
        return

    with st.container(border=True):
        if session.mode is ViewMode.EDITING:
            render_form(session)
        else:
            render_preview(session)

        st.write("")
        render_issues(session)
        render_actions(session)

    render_download_section()

    st.write("")
    _, mid, _ = st.columns([1, 1, 1])
    mid.button("Create New Invoice", on_click=cb_reset_invoice, use_container_width=True)
