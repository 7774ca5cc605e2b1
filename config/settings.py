# config/settings.py
import logging
import os

from reportlab.lib.pagesizes import A4

# --- App ---
PAGE_TITLE = "Invoice Generator"
PAGE_LAYOUT = "wide"

# --- Money (single fixed unit) ---
CURRENCY_SYMBOL = "$"
CURRENCY_CODE = "USD"

# --- Export ---
EXPORT_FILENAME = "invoice.pdf"
PDF_PAGE_WIDTH = A4[0]  # points
RASTER_WIDTH = int(os.getenv("INVOICE_RASTER_WIDTH", "800"))  # px

# --- Logging ---
LOG_LEVEL = os.getenv("INVOICE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging() -> None:
    """Installs one stream handler on the root logger (idempotent across reruns)."""
    root = logging.getLogger()
    if getattr(root, "_invoice_configured", False):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(LOG_LEVEL)
    root._invoice_configured = True
