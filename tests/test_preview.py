from modules.invoice_state import InvoiceData, InvoiceItem
from modules.preview import PreviewRow, build_preview, render_preview_html


def _data(**overrides):
    base = dict(
        invoice_number="INV-7",
        date="2024-05-01",
        due_date="2024-05-31",
        company_name="CodeDreamers",
        company_address="1 Main St\nSpringfield",
        client_name="Acme Corp",
        client_address="42 Elm Rd",
        items=(InvoiceItem("Consulting", 3, 100), InvoiceItem("Hosting", 1, 19.5)),
        notes="",
    )
    base.update(overrides)
    return InvoiceData(**base)


def test_preview_is_pure():
    assert build_preview(_data()) == build_preview(_data())
    assert render_preview_html(build_preview(_data())) == render_preview_html(build_preview(_data()))


def test_preview_blocks():
    doc = build_preview(_data())
    assert doc.title == "Invoice"
    assert doc.invoice_number == "INV-7"
    assert doc.company_address == ("1 Main St", "Springfield")
    assert doc.client_address == ("42 Elm Rd",)
    assert doc.date_line == "Date: 2024-05-01"
    assert doc.due_date_line == "Due Date: 2024-05-31"
    assert doc.headers == ("Description", "Quantity", "Price", "Total")
    assert doc.rows == (
        PreviewRow("Consulting", "3", "$100.00", "$300.00"),
        PreviewRow("Hosting", "1", "$19.50", "$19.50"),
    )
    assert doc.total == "$319.50"
    assert doc.currency == "USD"
    assert doc.footer == "Thank you for your business!"


def test_notes_block_only_when_present():
    assert build_preview(_data()).notes is None
    assert "Notes:" not in render_preview_html(build_preview(_data()))

    doc = build_preview(_data(notes="Net 30\nThanks"))
    assert doc.notes == ("Net 30", "Thanks")
    assert "Notes:" in render_preview_html(doc)


def test_empty_items_render_zero_rows_and_zero_total():
    doc = build_preview(_data(items=()))
    assert doc.rows == ()
    assert doc.total == "$0.00"
    html = render_preview_html(doc)
    assert "<tbody></tbody>" in html
    assert "<th>Description</th>" in html


def test_nan_shows_up_in_preview():
    doc = build_preview(_data(items=(InvoiceItem("Broken", float("nan"), 2),)))
    assert doc.rows[0].quantity == "NaN"
    assert doc.rows[0].total == "$NaN"
    assert doc.total == "$NaN"


def test_html_escapes_user_text():
    html = render_preview_html(build_preview(_data(client_name="<script>x</script>")))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
