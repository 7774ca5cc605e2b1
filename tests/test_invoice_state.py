import math
import random

import pytest

from modules.invoice_state import (
    InvoiceData,
    InvoiceItem,
    InvoiceSession,
    UnknownFieldError,
    ViewMode,
    ViewModeError,
    validate_invoice,
)


def test_defaults_seed_one_blank_item():
    data = InvoiceData()
    assert data.items == (InvoiceItem("", 0, 0),)
    assert data.invoice_number == ""
    assert data.company_address == ""
    assert data.notes == ""


def test_set_field_overwrites_scalar(session):
    before = session.data
    after = session.set_field("client_name", "Acme Corp")
    assert after.client_name == "Acme Corp"
    assert before.client_name == ""  # old snapshot untouched
    assert session.data is after


def test_set_field_accepts_any_text_for_dates(session):
    session.set_field("due_date", "not a date")
    assert session.data.due_date == "not a date"


@pytest.mark.parametrize("name", ["items", "total", "unknown"])
def test_set_field_rejects_unknown_names(session, name):
    with pytest.raises(UnknownFieldError):
        session.set_field(name, "x")


def test_set_item_field_coerces_numbers(session):
    session.set_item_field(0, "quantity", "2")
    session.set_item_field(0, "price", "10.5")
    session.set_item_field(0, "description", "Design")
    assert session.data.items[0] == InvoiceItem("Design", 2.0, 10.5)


def test_set_item_field_blank_number_is_zero(session):
    session.set_item_field(0, "quantity", "")
    assert session.data.items[0].quantity == 0


def test_set_item_field_non_numeric_is_nan(session):
    session.set_item_field(0, "price", "abc")
    assert math.isnan(session.data.items[0].price)


def test_set_item_field_bounds_and_field_name(session):
    with pytest.raises(IndexError):
        session.set_item_field(1, "price", "1")
    with pytest.raises(IndexError):
        session.set_item_field(-1, "price", "1")
    with pytest.raises(UnknownFieldError):
        session.set_item_field(0, "tax", "1")


def test_add_and_remove_keep_length_and_order(session):
    rng = random.Random(7)
    model = [session.data.items[0]]
    counter = 0
    for _ in range(200):
        if model and rng.random() < 0.4:
            idx = rng.randrange(len(model))
            session.remove_item(idx)
            del model[idx]
        else:
            session.add_item()
            counter += 1
            session.set_item_field(len(session.data.items) - 1, "description", f"item {counter}")
            model.append(InvoiceItem(f"item {counter}", 0, 0))
        assert list(session.data.items) == model


def test_remove_only_item_leaves_empty_list(session):
    session.remove_item(0)
    assert session.data.items == ()
    with pytest.raises(IndexError):
        session.remove_item(0)


def test_structural_changes_bump_revision(session):
    rev = session.revision
    session.add_item()
    session.remove_item(0)
    session.reset()
    assert session.revision == rev + 3


def test_reset_restores_defaults_from_any_state(consulting_session):
    s = consulting_session
    s.add_item()
    s.set_field("notes", "Net 30")
    s.toggle_preview()

    s.reset()
    assert s.data == InvoiceData()
    assert s.mode is ViewMode.NOT_STARTED


def test_view_mode_transitions():
    s = InvoiceSession()
    assert s.mode is ViewMode.NOT_STARTED
    with pytest.raises(ViewModeError):
        s.toggle_preview()

    assert s.start() is ViewMode.EDITING
    assert s.toggle_preview() is ViewMode.PREVIEWING
    assert s.start() is ViewMode.PREVIEWING  # no-op once started
    assert s.toggle_preview() is ViewMode.EDITING

    s.reset()
    assert s.start() is ViewMode.EDITING


def test_preview_handle_only_while_previewing(consulting_session):
    s = consulting_session
    assert s.preview_handle() is None
    s.toggle_preview()
    handle = s.preview_handle()
    assert handle is not None
    assert handle.data is s.data


def test_validate_invoice_reports_problems(session):
    assert validate_invoice(session.data) == []

    session.set_item_field(0, "quantity", "x")
    session.set_item_field(0, "price", "-5")
    issues = validate_invoice(session.data)
    assert issues == [
        "Item 1: quantity is not a valid number.",
        "Item 1: price is negative.",
    ]

    session.remove_item(0)
    assert validate_invoice(session.data) == ["The invoice has no items."]
