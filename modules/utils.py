import math
import re
from typing import Any, Iterable

from config import settings


# What JS Number() accepts: decimal/exponent, signed Infinity, unsigned 0x/0o/0b.
_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\Z", re.ASCII)
_RADIX_RE = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)\Z", re.ASCII)
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def coerce_number(value: Any) -> float:
    """
    Numeric input coercion for quantity / price fields, following JS Number():
    blank text counts as 0, numeric text is parsed, anything else becomes NaN
    (kept as-is, it shows up in totals and in validate_invoice).
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).strip()
    if not s:
        return 0.0
    if s in _INFINITIES:
        return _INFINITIES[s]
    if _DECIMAL_RE.match(s):
        return float(s)
    if _RADIX_RE.match(s):
        return float(int(s, 0))
    return math.nan


def line_total(item) -> float:
    return item.quantity * item.price


def calculate_total(items: Iterable) -> float:
    """Grand total: sum of quantity x price over all items. Never cached."""
    return sum((line_total(item) for item in items), 0.0)


def format_money(value: Any) -> str:
    """Two-decimal display formatting, e.g. 300 -> '$300.00'."""
    val = float(value)
    if val == 0:
        val = 0.0  # -0.0 prints as "0.00"
    if math.isnan(val):
        return f"{settings.CURRENCY_SYMBOL}NaN"
    if math.isinf(val):
        return f"{settings.CURRENCY_SYMBOL}{'-' if val < 0 else ''}Infinity"
    return f"{settings.CURRENCY_SYMBOL}{val:.2f}"


def format_quantity(value: Any) -> str:
    """3.0 -> '3', 2.5 -> '2.5', nan -> 'NaN'."""
    val = float(value)
    if math.isnan(val):
        return "NaN"
    if math.isinf(val):
        return "Infinity" if val > 0 else "-Infinity"
    if val.is_integer():
        return str(int(val))
    return repr(val)


def split_lines(text: Any) -> list:
    """Multi-line text (addresses, notes) into display lines, keeping blank lines inside."""
    s = str(text or "").replace("\r\n", "\n").replace("\r", "\n")
    return s.split("\n") if s else []


def sanitize_text(text: Any) -> str:
    """Tiny HTML escape for unsafe_allow_html markup."""
    s = str(text or "")
    s = s.replace("&", "&amp;")
    s = s.replace("<", "&lt;").replace(">", "&gt;")
    s = s.replace('"', "&quot;").replace("'", "&#x27;")
    return s

