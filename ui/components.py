import streamlit as st
from typing import Optional

from modules.utils import sanitize_text


def page_header(title: str, subtitle: Optional[str] = None):
    """Consistent page title + subtitle (match theme.py)."""
    st.markdown(f"<h1 class='page-title'>{sanitize_text(title)}</h1>", unsafe_allow_html=True)
    if subtitle:
        st.markdown(f"<div class='page-subtitle'>{sanitize_text(subtitle)}</div>", unsafe_allow_html=True)


def section(title: str):
    st.markdown(f"<div class='section-title'>{sanitize_text(title)}</div>", unsafe_allow_html=True)


def card(title: str, body: str) -> None:
    st.markdown(
        f"""
        <div class="service-card">
          <div class="service-title">{sanitize_text(title)}</div>
          <div class="service-body">{sanitize_text(body)}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
