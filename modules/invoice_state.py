import logging
import math
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, List, Optional, Tuple

import streamlit as st

from modules.utils import coerce_number

logger = logging.getLogger(__name__)

SESSION_KEY = "invoice_session"

ITEM_TEXT_FIELDS = ("description",)
ITEM_NUMERIC_FIELDS = ("quantity", "price")


# --- Errors ---

class UnknownFieldError(KeyError):
    """Raised when a field name is not part of InvoiceData / InvoiceItem."""


class ViewModeError(ValueError):
    """Raised on a view-mode transition that does not exist."""


# --- Data Model ---

@dataclass(frozen=True)
class InvoiceItem:
    description: str = ""
    quantity: float = 0
    price: float = 0


def _seed_items() -> Tuple[InvoiceItem, ...]:
    return (InvoiceItem(),)


@dataclass(frozen=True)
class InvoiceData:
    invoice_number: str = ""
    date: str = ""
    due_date: str = ""
    company_name: str = ""
    company_address: str = ""
    client_name: str = ""
    client_address: str = ""
    items: Tuple[InvoiceItem, ...] = field(default_factory=_seed_items)
    notes: str = ""


SCALAR_FIELDS = tuple(f.name for f in fields(InvoiceData) if f.name != "items")


class ViewMode(str, Enum):
    NOT_STARTED = "not_started"
    EDITING = "editing"
    PREVIEWING = "previewing"


# --- Validation ---

def validate_invoice(data: InvoiceData) -> List[str]:
    """
    Lists problems the form lets through (it stays permissive):
    non-numeric or negative quantity/price and an empty item list.
    """
    issues: List[str] = []
    if not data.items:
        issues.append("The invoice has no items.")
    for i, item in enumerate(data.items, 1):
        for name in ITEM_NUMERIC_FIELDS:
            val = getattr(item, name)
            if not math.isfinite(val):
                issues.append(f"Item {i}: {name} is not a valid number.")
            elif val < 0:
                issues.append(f"Item {i}: {name} is negative.")
    return issues


# --- Session (Line-Item Store + View-Mode Switch) ---

@dataclass(frozen=True)
class PreviewHandle:
    """What the preview view has mounted: an immutable snapshot of the invoice."""
    data: InvoiceData


class InvoiceSession:
    """
    Working state of one invoice editing session.

    Every mutation replaces `data` with a new InvoiceData snapshot, so a
    snapshot taken earlier (e.g. by an export) never sees later edits.
    """

    def __init__(self) -> None:
        self.data = InvoiceData()
        self.mode = ViewMode.NOT_STARTED
        # Bumped on structural changes so positional form widgets get rebuilt.
        self.revision = 0

    # Store

    def set_field(self, name: str, value: Any) -> InvoiceData:
        if name not in SCALAR_FIELDS:
            raise UnknownFieldError(name)
        self.data = replace(self.data, **{name: "" if value is None else str(value)})
        return self.data

    def set_item_field(self, index: int, name: str, value: Any) -> InvoiceData:
        items = list(self.data.items)
        if not 0 <= index < len(items):
            raise IndexError(f"item index {index} out of range (0..{len(items) - 1})")
        if name in ITEM_NUMERIC_FIELDS:
            value = coerce_number(value)
        elif name in ITEM_TEXT_FIELDS:
            value = "" if value is None else str(value)
        else:
            raise UnknownFieldError(name)

        items[index] = replace(items[index], **{name: value})
        self.data = replace(self.data, items=tuple(items))
        return self.data

    def add_item(self) -> InvoiceData:
        self.data = replace(self.data, items=self.data.items + (InvoiceItem(),))
        self.revision += 1
        return self.data

    def remove_item(self, index: int) -> InvoiceData:
        items = self.data.items
        if not 0 <= index < len(items):
            raise IndexError(f"item index {index} out of range (0..{len(items) - 1})")
        # The last item can go too; the table then renders without rows.
        self.data = replace(self.data, items=items[:index] + items[index + 1:])
        self.revision += 1
        return self.data

    def reset(self) -> InvoiceData:
        self.data = InvoiceData()
        self.mode = ViewMode.NOT_STARTED
        self.revision += 1
        logger.info("Invoice session reset")
        return self.data

    # View mode

    def start(self) -> ViewMode:
        if self.mode is ViewMode.NOT_STARTED:
            self.mode = ViewMode.EDITING
        return self.mode

    def toggle_preview(self) -> ViewMode:
        if self.mode is ViewMode.EDITING:
            self.mode = ViewMode.PREVIEWING
        elif self.mode is ViewMode.PREVIEWING:
            self.mode = ViewMode.EDITING
        else:
            raise ViewModeError("Start an invoice before switching to preview.")
        return self.mode

    def preview_handle(self) -> Optional[PreviewHandle]:
        """The mounted preview surface, only while previewing."""
        if self.mode is not ViewMode.PREVIEWING:
            return None
        return PreviewHandle(self.data)


def get_session() -> InvoiceSession:
    """Session owned by the current browser session (created on first use)."""
    session = st.session_state.get(SESSION_KEY)
    if not isinstance(session, InvoiceSession):
        session = InvoiceSession()
        st.session_state[SESSION_KEY] = session
    return session


def invalidate_pdf() -> None:
    """Invalidates the generated PDF so it is regenerated on next export."""
    st.session_state["generated_pdf_bytes"] = None
