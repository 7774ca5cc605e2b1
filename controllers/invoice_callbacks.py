import logging
from typing import Any

import streamlit as st

from modules import invoice as invoice_mod
from modules.invoice_state import (
    ViewModeError,
    get_session,
    invalidate_pdf,
)

logger = logging.getLogger(__name__)

# --- Widget keys ---

def field_key(name: str) -> str:
    return f"inv_{name}"

def item_key(revision: int, index: int, name: str) -> str:
    # Revision in the key: after add/remove/reset every row widget is recreated
    # with the store's values instead of keeping a stale positional value.
    return f"item_{revision}_{index}_{name}"

# --- Main Callbacks ---

def cb_start_invoice() -> None:
    get_session().start()

def cb_toggle_preview() -> None:
    try:
        get_session().toggle_preview()
    except ViewModeError as e:
        st.toast(str(e), icon="⚠️")
        return
    st.session_state["export_error"] = None

def cb_field_changed(name: str) -> None:
    """Copies a scalar form widget into the store."""
    value: Any = st.session_state.get(field_key(name))
    get_session().set_field(name, "" if value is None else value)
    invalidate_pdf()

def cb_item_changed(index: int, name: str) -> None:
    session = get_session()
    value = st.session_state.get(item_key(session.revision, index, name))
    try:
        session.set_item_field(index, name, value)
    except IndexError:
        # Row vanished between render and callback.
        logger.warning("Ignoring edit of removed item %d", index)
        return
    invalidate_pdf()

def cb_add_item() -> None:
    get_session().add_item()
    invalidate_pdf()

def cb_remove_item(index: int) -> None:
    try:
        get_session().remove_item(index)
    except IndexError:
        st.toast("Item already removed.", icon="⚠️")
        return
    invalidate_pdf()

def cb_reset_invoice() -> None:
    get_session().reset()
    for k in list(st.session_state.keys()):
        if str(k).startswith(("inv_", "item_")):
            del st.session_state[k]
    invalidate_pdf()
    st.session_state["export_error"] = None

# --- Export ---

def action_export_pdf() -> None:
    """
    Runs the export pipeline on the mounted preview and keeps the bytes for
    the download button. Failures are kept for the view to show; the user can
    simply retry.
    """
    st.session_state["export_error"] = None
    handle = get_session().preview_handle()
    if handle is None:
        st.toast("Switch to preview before downloading.", icon="⚠️")
        return

    try:
        result = invoice_mod.export_to_pdf(handle)
    except invoice_mod.ExportError as e:
        st.session_state["generated_pdf_bytes"] = None
        st.session_state["export_error"] = str(e)
        return

    st.session_state["generated_pdf_bytes"] = result.pdf_bytes
    st.toast("PDF Generated Successfully!", icon="✅")
