# modules/preview.py
"""
Read-only projection of InvoiceData into the document the user previews and
exports. build_preview() is pure: equal input gives an equal PreviewDocument,
which the export pipeline relies on for stable snapshots.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from config import settings
from modules.invoice_state import InvoiceData
from modules.utils import (
    calculate_total,
    format_money,
    format_quantity,
    line_total,
    sanitize_text,
    split_lines,
)

TITLE = "Invoice"
BILL_TO_LABEL = "Bill To:"
NOTES_LABEL = "Notes:"
FOOTER_TEXT = "Thank you for your business!"
TABLE_HEADERS = ("Description", "Quantity", "Price", "Total")


@dataclass(frozen=True)
class PreviewRow:
    description: str
    quantity: str
    price: str
    total: str


@dataclass(frozen=True)
class PreviewDocument:
    title: str
    invoice_number: str
    company_name: str
    company_address: Tuple[str, ...]
    client_name: str
    client_address: Tuple[str, ...]
    date_line: str
    due_date_line: str
    headers: Tuple[str, ...]
    rows: Tuple[PreviewRow, ...]
    total: str
    currency: str
    notes: Optional[Tuple[str, ...]]
    footer: str


def build_preview(data: InvoiceData) -> PreviewDocument:
    rows = tuple(
        PreviewRow(
            description=item.description,
            quantity=format_quantity(item.quantity),
            price=format_money(item.price),
            total=format_money(line_total(item)),
        )
        for item in data.items
    )
    return PreviewDocument(
        title=TITLE,
        invoice_number=data.invoice_number,
        company_name=data.company_name,
        company_address=tuple(split_lines(data.company_address)),
        client_name=data.client_name,
        client_address=tuple(split_lines(data.client_address)),
        date_line=f"Date: {data.date}",
        due_date_line=f"Due Date: {data.due_date}",
        headers=TABLE_HEADERS,
        rows=rows,
        total=format_money(calculate_total(data.items)),
        currency=settings.CURRENCY_CODE,
        notes=tuple(split_lines(data.notes)) if data.notes else None,
        footer=FOOTER_TEXT,
    )


def _lines_html(lines) -> str:
    return "<br/>".join(sanitize_text(line) for line in lines)


def render_preview_html(doc: PreviewDocument) -> str:
    """Markup for st.markdown(unsafe_allow_html=True); every value is escaped."""
    head = "".join(f"<th>{sanitize_text(h)}</th>" for h in doc.headers)
    body = "".join(
        "<tr>"
        f"<td>{sanitize_text(r.description)}</td>"
        f"<td>{sanitize_text(r.quantity)}</td>"
        f"<td>{sanitize_text(r.price)}</td>"
        f"<td>{sanitize_text(r.total)}</td>"
        "</tr>"
        for r in doc.rows
    )

    notes_html = ""
    if doc.notes is not None:
        notes_html = (
            "<div style='margin-bottom:2rem;'>"
            f"<div class='inv-h2'>{NOTES_LABEL}</div>"
            f"<div class='inv-muted'>{_lines_html(doc.notes)}</div>"
            "</div>"
        )

    return (
        "<div class='inv-preview' id='invoice-preview'>"
        "<div class='inv-top'>"
        f"<div><div class='inv-title'>{sanitize_text(doc.title)}</div>"
        f"<div class='inv-muted'>{sanitize_text(doc.invoice_number)}</div></div>"
        "<div class='inv-right'>"
        f"<div class='inv-company'>{sanitize_text(doc.company_name)}</div>"
        f"<div class='inv-muted'>{_lines_html(doc.company_address)}</div>"
        "</div></div>"
        "<div class='inv-grid'>"
        f"<div><div class='inv-h2'>{BILL_TO_LABEL}</div>"
        f"<div class='inv-client'>{sanitize_text(doc.client_name)}</div>"
        f"<div class='inv-muted'>{_lines_html(doc.client_address)}</div></div>"
        "<div class='inv-right'>"
        f"<div class='inv-muted'>📅 {sanitize_text(doc.date_line)}</div>"
        f"<div class='inv-muted'>📅 {sanitize_text(doc.due_date_line)}</div>"
        "</div></div>"
        f"<table class='inv-table'><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"
        "<div class='inv-total-wrap'><div class='inv-total'>"
        "<div class='inv-total-row'><span><b>Total:</b></span>"
        f"<span class='inv-total-val'>{sanitize_text(doc.total)}</span></div>"
        f"<div class='inv-currency'>{sanitize_text(doc.currency)}</div>"
        "</div></div>"
        f"{notes_html}"
        f"<div class='inv-footer'>{sanitize_text(doc.footer)}</div>"
        "</div>"
    )
