"""Utilities for exporting job summary PDFs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from io import BytesIO
from time import perf_counter

import structlog
from PIL import Image, ImageDraw
from reportlab.lib.pagesizes import A4, portrait
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from joblogger.backend.src.services.metrics import (
    job_pdf_exports_total,
    job_pdf_generation_seconds,
)
from joblogger.backend.src.services.summary_card import (
    Box,
    Icon,
    Rule,
    SummaryCard,
    TextRun,
    load_font,
)

LOGGER = structlog.get_logger(__name__)

RASTER_SCALE = 2
PAGE_MARGIN_MM = 15.0
PDF_MEDIA_TYPE = "application/pdf"


class RenderError(RuntimeError):
    """Raised when a summary card cannot be rasterized."""


@dataclass(frozen=True, slots=True)
class JobSummaryPdf:
    """Exported single-page summary ready to save or share."""

    filename: str
    content: bytes
    media_type: str = PDF_MEDIA_TYPE


@dataclass(frozen=True, slots=True)
class Placement:
    """Image rectangle on the page in millimetres, ``y`` measured from the top."""

    x: float
    y: float
    width: float
    height: float


def build_filename(client_name: str, job_date: date) -> str:
    safe_client = re.sub(r"\s+", "-", client_name)
    return f"{safe_client}-{job_date.isoformat()}.pdf"


def fit_image(
    page_width: float,
    page_height: float,
    aspect_ratio: float,
    margin: float = PAGE_MARGIN_MM,
) -> Placement:
    """Scale an image of ``aspect_ratio`` into the printable area of a page.

    The image fills the printable width unless that would overflow the
    printable height, in which case it fills the height instead. It is
    centred horizontally and starts at the top margin.
    """

    if aspect_ratio <= 0:
        raise ValueError("aspect ratio must be positive")

    content_width = page_width - margin * 2
    content_height = page_height - margin * 2

    width = content_width
    height = width / aspect_ratio
    if height > content_height:
        height = content_height
        width = height * aspect_ratio

    return Placement(x=(page_width - width) / 2, y=margin, width=width, height=height)


def _draw_icon(draw: ImageDraw.ImageDraw, icon: Icon, scale: int) -> None:
    x, y, size = icon.x * scale, icon.y * scale, icon.size * scale
    stroke = scale
    inset = size * 0.15
    left, top, right, bottom = x + inset, y + inset, x + size - inset, y + size - inset
    cx = (left + right) / 2

    if icon.name == "location":
        radius = (right - left) / 2
        draw.ellipse((left, top, right, top + radius * 2), outline=icon.color, width=stroke)
        draw.line((cx, top + radius * 2, cx, bottom), fill=icon.color, width=stroke)
    elif icon.name == "clock":
        cy = (top + bottom) / 2
        draw.ellipse((left, top, right, bottom), outline=icon.color, width=stroke)
        draw.line((cx, cy, cx, top + size * 0.25), fill=icon.color, width=stroke)
        draw.line((cx, cy, cx + size * 0.2, cy), fill=icon.color, width=stroke)
    elif icon.name == "clipboard":
        draw.rounded_rectangle((left, top, right, bottom), radius=2 * scale, outline=icon.color, width=stroke)
        draw.rectangle((cx - size * 0.15, top - scale, cx + size * 0.15, top + size * 0.1), fill=icon.color)
    elif icon.name == "briefcase":
        body_top = top + size * 0.2
        draw.rounded_rectangle((left, body_top, right, bottom), radius=2 * scale, outline=icon.color, width=stroke)
        draw.rectangle((cx - size * 0.15, top, cx + size * 0.15, body_top), outline=icon.color, width=stroke)
    else:
        raise RenderError(f"unknown icon {icon.name!r}")


def rasterize_card(card: SummaryCard | None, scale: int = RASTER_SCALE) -> Image.Image:
    """Draw ``card`` onto an RGB bitmap at ``scale`` times its CSS size."""

    if card is None:
        raise RenderError("summary card is not available")
    if card.width <= 0 or card.height <= 0:
        raise RenderError("summary card has no area")

    image = Image.new("RGB", (card.width * scale, card.height * scale), "#FFFFFF")
    draw = ImageDraw.Draw(image)

    for element in card.elements:
        if isinstance(element, Box):
            bounds = (
                element.x * scale,
                element.y * scale,
                (element.x + element.width) * scale - 1,
                (element.y + element.height) * scale - 1,
            )
            draw.rounded_rectangle(
                bounds,
                radius=element.radius * scale,
                fill=element.fill,
                outline=element.outline,
                width=scale,
            )
        elif isinstance(element, Rule):
            draw.line(
                (element.x1 * scale, element.y * scale, element.x2 * scale, element.y * scale),
                fill=element.color,
                width=scale,
            )
        elif isinstance(element, TextRun):
            font = load_font(element.size * scale, element.bold)
            offset = (element.line_height - element.size) / 2
            draw.text(
                (element.x * scale, (element.y + offset) * scale),
                element.text,
                font=font,
                fill=element.color,
            )
        elif isinstance(element, Icon):
            _draw_icon(draw, element, scale)
        else:
            raise RenderError(f"unsupported element {type(element).__name__}")

    return image


def compose_pdf(image: Image.Image, *, title: str = "Job Summary") -> bytes:
    """Place ``image`` on a single A4 portrait page and return the PDF bytes."""

    page_width, page_height = portrait(A4)
    placement = fit_image(page_width / mm, page_height / mm, image.width / image.height)

    buffer = BytesIO()
    pdf_canvas = canvas.Canvas(buffer, pagesize=portrait(A4), invariant=1)
    pdf_canvas.setTitle(title)
    pdf_canvas.drawImage(
        ImageReader(image),
        placement.x * mm,
        page_height - (placement.y + placement.height) * mm,
        width=placement.width * mm,
        height=placement.height * mm,
    )
    pdf_canvas.showPage()
    pdf_canvas.save()

    buffer.seek(0)
    return buffer.read()


def export_summary_pdf(card: SummaryCard | None) -> JobSummaryPdf | None:
    """Rasterize ``card`` into a named PDF, or return ``None`` on any failure."""

    start = perf_counter()
    try:
        image = rasterize_card(card)
        content = compose_pdf(image)
    except Exception:
        LOGGER.exception("job_pdf_export_failed")
        job_pdf_exports_total.labels(status="error").inc()
        return None

    job_pdf_generation_seconds.observe(perf_counter() - start)
    job_pdf_exports_total.labels(status="success").inc()
    filename = build_filename(card.client_name, card.job_date)
    LOGGER.info("job_pdf_exported", filename=filename, size=len(content))
    return JobSummaryPdf(filename=filename, content=content)


__all__ = [
    "JobSummaryPdf",
    "Placement",
    "RenderError",
    "build_filename",
    "compose_pdf",
    "export_summary_pdf",
    "fit_image",
    "rasterize_card",
]
