import math

import pytest

from modules.invoice_state import InvoiceItem
from modules.utils import (
    calculate_total,
    coerce_number,
    format_money,
    format_quantity,
    sanitize_text,
    split_lines,
)


def test_total_example():
    items = [InvoiceItem(quantity=2, price=10.5), InvoiceItem(quantity=1, price=3)]
    assert calculate_total(items) == 24


def test_total_of_empty_is_zero():
    assert calculate_total([]) == 0


def test_total_ignores_order():
    items = [
        InvoiceItem("a", 3, 19.99),
        InvoiceItem("b", 1, 0.5),
        InvoiceItem("c", 7, 2.25),
    ]
    assert calculate_total(items) == pytest.approx(calculate_total(list(reversed(items))))
    assert calculate_total(items) == pytest.approx(3 * 19.99 + 0.5 + 7 * 2.25)


def test_total_keeps_full_precision():
    items = [InvoiceItem(quantity=1, price=0.1), InvoiceItem(quantity=1, price=0.2)]
    assert calculate_total(items) == 0.1 + 0.2
    assert format_money(calculate_total(items)) == "$0.30"


def test_total_propagates_nan():
    assert math.isnan(calculate_total([InvoiceItem(quantity=math.nan, price=1)]))


@pytest.mark.parametrize(
    "raw, expected",
    [("3", 3.0), (" 2.5 ", 2.5), ("", 0.0), ("   ", 0.0), (None, 0.0), (4, 4.0), ("1e2", 100.0)],
)
def test_coerce_number(raw, expected):
    assert coerce_number(raw) == expected


def test_coerce_number_garbage_is_nan():
    assert math.isnan(coerce_number("12abc"))


def test_format_money():
    assert format_money(300) == "$300.00"
    assert format_money(0) == "$0.00"
    assert format_money(math.nan) == "$NaN"


def test_format_quantity():
    assert format_quantity(3.0) == "3"
    assert format_quantity(2.5) == "2.5"
    assert format_quantity(math.nan) == "NaN"


def test_split_lines_and_escape():
    assert split_lines("1 Main St\r\nSpringfield") == ["1 Main St", "Springfield"]
    assert split_lines("") == []
    assert sanitize_text("<b>&") == "&lt;b&gt;&amp;"


def test_format_money_negative_zero():
    assert format_money(-0.0) == "$0.00"
    assert format_money(0 * -5.0) == "$0.00"


@pytest.mark.parametrize("raw", ["1_000", "inf", "infinity", "INF", "nan", "-0x10", "0x", "1e", "١٢"])
def test_coerce_number_rejects_what_number_inputs_reject(raw):
    assert math.isnan(coerce_number(raw))


@pytest.mark.parametrize(
    "raw, expected",
    [("0x10", 16.0), ("0o17", 15.0), ("0b101", 5.0), (".5", 0.5), ("5.", 5.0), ("+3", 3.0),
     ("Infinity", math.inf), ("-Infinity", -math.inf)],
)
def test_coerce_number_number_like_spellings(raw, expected):
    assert coerce_number(raw) == expected
