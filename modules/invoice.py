# modules/invoice.py
"""
Export pipeline: rasterise the mounted preview, embed the bitmap as the only
content of a single PDF page and hand back the file to download.
"""
import logging
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from config import settings
from config.theme import PREVIEW_COLORS
from modules.invoice_state import PreviewHandle
from modules.preview import NOTES_LABEL, BILL_TO_LABEL, PreviewDocument, build_preview

logger = logging.getLogger(__name__)

BASE_WIDTH = 800  # px the layout constants below are expressed in


class ExportError(RuntimeError):
    """Rasterising or embedding the preview failed."""


@dataclass(frozen=True)
class ExportResult:
    file_name: str
    pdf_bytes: bytes
    image_size: Tuple[int, int]  # px
    page_size: Tuple[float, float]  # points

    def save(self, directory=".") -> Path:
        """Writes the PDF under the fixed file name, replacing any previous one."""
        path = Path(directory) / self.file_name
        path.write_bytes(self.pdf_bytes)
        logger.info("Saved %s (%d bytes)", path, len(self.pdf_bytes))
        return path


# =========================================================
# Helpers
# =========================================================
def _font(size: float):
    return ImageFont.load_default(size=max(8, round(size)))


def _line_h(font) -> int:
    return font.getbbox("Agy")[3]


def _wrap(draw: ImageDraw.ImageDraw, text: str, font, max_w: float) -> List[str]:
    """Greedy word wrap; words wider than the column are broken by character."""
    if not text:
        return [""]
    lines: List[str] = []
    current = ""
    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if draw.textlength(candidate, font=font) <= max_w:
            current = candidate
            continue
        if current:
            lines.append(current)
        current = ""
        for ch in word:
            if current and draw.textlength(current + ch, font=font) > max_w:
                lines.append(current)
                current = ""
            current += ch
    lines.append(current)
    return lines


def _wrap_lines(draw: ImageDraw.ImageDraw, lines, font, max_w: float) -> List[str]:
    out: List[str] = []
    for line in lines:
        out.extend(_wrap(draw, line, font, max_w))
    return out


def _draw_right(draw: ImageDraw.ImageDraw, right_x: float, y: float, text: str, font, fill) -> None:
    draw.text((right_x - draw.textlength(text, font=font), y), text, font=font, fill=fill)


def _draw_lines(draw, x, y, lines, font, fill, align_right=False) -> float:
    """Draws lines top-down and returns the y after the last one."""
    lh = _line_h(font) + 4
    for line in lines:
        if align_right:
            _draw_right(draw, x, y, line, font, fill)
        else:
            draw.text((x, y), line, font=font, fill=fill)
        y += lh
    return y


# =========================================================
# RASTERISE
# =========================================================
def _layout(draw: ImageDraw.ImageDraw, doc: PreviewDocument, width: int) -> int:
    """
    Draws the document and returns the height it needs. Running it on a 1px
    tall image measures the height without painting anything visible.
    """
    s = width / BASE_WIDTH
    C = PREVIEW_COLORS
    pad = 32 * s
    gap = 32 * s
    right = width - pad
    col = (right - pad) / 2 - 8 * s  # header blocks: two columns side by side

    f_title = _font(36 * s)
    f_company = _font(19 * s)
    f_heading = _font(17 * s)
    f_body = _font(15 * s)
    f_total = _font(24 * s)
    f_small = _font(13 * s)

    y = pad

    # 1. Header: title + number | company
    left_y = _draw_lines(draw, pad, y, [doc.title], f_title, C["title"])
    left_y = _draw_lines(draw, pad, left_y + 4 * s, _wrap(draw, doc.invoice_number, f_body, col), f_body, C["muted"])
    right_y = _draw_lines(draw, right, y, _wrap(draw, doc.company_name, f_company, col), f_company, C["text"], align_right=True)
    right_y = _draw_lines(draw, right, right_y, _wrap_lines(draw, doc.company_address, f_body, col), f_body, C["muted"], align_right=True)
    y = max(left_y, right_y) + gap

    # 2. Bill to | dates
    left_y = _draw_lines(draw, pad, y, [BILL_TO_LABEL], f_heading, C["heading"])
    left_y = _draw_lines(draw, pad, left_y + 4 * s, _wrap(draw, doc.client_name, f_body, col), f_body, C["text"])
    left_y = _draw_lines(draw, pad, left_y, _wrap_lines(draw, doc.client_address, f_body, col), f_body, C["muted"])
    right_y = _draw_lines(draw, right, y, _wrap_lines(draw, [doc.date_line, doc.due_date_line], f_body, col), f_body, C["muted"], align_right=True)
    y = max(left_y, right_y) + gap

    # 3. Items table
    table_w = right - pad
    col_w = [table_w * 0.46, table_w * 0.16, table_w * 0.19, table_w * 0.19]
    col_right = [pad + sum(col_w[: i + 1]) for i in range(4)]
    cell_pad = 8 * s
    lh = _line_h(f_body) + 4

    y += cell_pad
    draw.text((pad, y), doc.headers[0], font=f_body, fill=C["muted"])
    for i in range(1, 4):
        _draw_right(draw, col_right[i], y, doc.headers[i], f_body, C["muted"])
    y += lh + cell_pad
    draw.line([(pad, y), (right, y)], fill=C["rule_strong"], width=max(1, round(2 * s)))

    for row in doc.rows:
        desc_lines = _wrap(draw, row.description, f_body, col_w[0] - cell_pad)
        cell_y = y + cell_pad
        _draw_lines(draw, pad, cell_y, desc_lines, f_body, C["text"])
        for i, val in enumerate((row.quantity, row.price, row.total), 1):
            _draw_right(draw, col_right[i], cell_y, val, f_body, C["text"])
        y = cell_y + lh * len(desc_lines) + cell_pad
        draw.line([(pad, y), (right, y)], fill=C["rule"], width=max(1, round(s)))
    y += gap

    # 4. Grand total box
    box_w = 240 * s
    box_pad = 16 * s
    box_h = box_pad + _line_h(f_total) + 8 * s + _line_h(f_small) + box_pad
    box_x = right - box_w
    draw.rounded_rectangle([box_x, y, right, y + box_h], radius=10 * s, fill=C["total_bg"])
    total_top = y + box_pad
    label_y = total_top + (_line_h(f_total) - _line_h(f_body)) / 2
    draw.text((box_x + box_pad, label_y), "Total:", font=f_body, fill=C["total_text"])
    _draw_right(draw, right - box_pad, total_top, doc.total, f_total, C["total_text"])
    draw.text(
        (box_x + box_pad, total_top + _line_h(f_total) + 8 * s),
        doc.currency,
        font=f_small,
        fill=C["total_text"],
    )
    y += box_h + gap

    # 5. Notes (only when present)
    if doc.notes is not None:
        y = _draw_lines(draw, pad, y, [NOTES_LABEL], f_heading, C["heading"])
        notes_lines = _wrap_lines(draw, doc.notes, f_body, right - pad)
        y = _draw_lines(draw, pad, y + 4 * s, notes_lines, f_body, C["muted"]) + gap

    # 6. Footer
    footer_x = (width - draw.textlength(doc.footer, font=f_small)) / 2
    draw.text((footer_x, y), doc.footer, font=f_small, fill=C["footer"])
    y += _line_h(f_small) + pad

    return int(round(y))


def rasterize_preview(doc: PreviewDocument, width: Optional[int] = None) -> Image.Image:
    """Renders the preview document to an RGB bitmap; equal documents give equal pixels."""
    width = width or settings.RASTER_WIDTH
    scratch = Image.new("RGB", (width, 1))
    height = _layout(ImageDraw.Draw(scratch), doc, width)

    image = Image.new("RGB", (width, height), PREVIEW_COLORS["background"])
    _layout(ImageDraw.Draw(image), doc, width)
    return image


def encode_png(image: Image.Image) -> bytes:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


# =========================================================
# PDF CONTAINER
# =========================================================
def page_size_for(image_size: Tuple[int, int], page_width: Optional[float] = None) -> Tuple[float, float]:
    """Page width is fixed, height follows the bitmap's aspect ratio (single page, no pagination)."""
    page_width = page_width or settings.PDF_PAGE_WIDTH
    img_w, img_h = image_size
    return page_width, img_h * page_width / img_w


def generate_pdf_bytes(png_bytes: bytes, image_size: Tuple[int, int]) -> Tuple[bytes, Tuple[float, float]]:
    page_w, page_h = page_size_for(image_size)

    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=(page_w, page_h), invariant=1)
    c.drawImage(ImageReader(BytesIO(png_bytes)), 0, 0, width=page_w, height=page_h)
    c.showPage()
    c.save()
    return buf.getvalue(), (page_w, page_h)


# =========================================================
# MAIN EXPORT
# =========================================================
def export_to_pdf(handle: Optional[PreviewHandle]) -> Optional[ExportResult]:
    """
    Exports the mounted preview. Returns None when no preview is mounted.
    The handle holds an immutable snapshot, so edits made after it was taken
    never reach this export.
    """
    if handle is None:
        logger.warning("Export requested without a mounted preview; nothing to do")
        return None

    logger.info("Exporting invoice %r", handle.data.invoice_number)
    try:
        doc = build_preview(handle.data)
        image = rasterize_preview(doc)
        png_bytes = encode_png(image)
        pdf_bytes, page_size = generate_pdf_bytes(png_bytes, image.size)
    except Exception as e:
        logger.exception("Invoice export failed")
        raise ExportError(f"Could not export the invoice: {e}") from e

    logger.info("Exported %s: %dx%d px on a %.1fx%.1f pt page", settings.EXPORT_FILENAME, *image.size, *page_size)
    return ExportResult(
        file_name=settings.EXPORT_FILENAME,
        pdf_bytes=pdf_bytes,
        image_size=image.size,
        page_size=page_size,
    )
