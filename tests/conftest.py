"""
Test configuration for the invoice generator tests
"""

import pytest
import streamlit as st

from modules.invoice_state import InvoiceSession


@pytest.fixture
def session():
    """Fresh session already in editing mode"""
    s = InvoiceSession()
    s.start()
    return s


@pytest.fixture
def consulting_session(session):
    """One 'Consulting' item, 3 x 100"""
    session.set_field("invoice_number", "INV-001")
    session.set_field("company_name", "CodeDreamers")
    session.set_field("client_name", "Acme Corp")
    session.set_item_field(0, "description", "Consulting")
    session.set_item_field(0, "quantity", "3")
    session.set_item_field(0, "price", "100")
    return session


@pytest.fixture
def fake_streamlit(monkeypatch):
    """Plain dict as st.session_state; st.toast calls are recorded"""
    state = {}
    toasts = []
    monkeypatch.setattr(st, "session_state", state)
    monkeypatch.setattr(st, "toast", lambda body, icon=None: toasts.append(body))
    return state, toasts
