"""Tests for rasterizing summary cards and composing PDFs."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

import pytest

from joblogger.backend.src.schemas.job import Job
from joblogger.backend.src.services import pdf_generation
from joblogger.backend.src.services.pdf_generation import (
    RenderError,
    build_filename,
    export_summary_pdf,
    fit_image,
    rasterize_card,
)
from joblogger.backend.src.services.summary_card import render_summary_card

A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0


def _job() -> Job:
    return Job(
        id="job-1",
        client_name="John  Smith",
        address="12 High Street",
        description="Serviced boiler.",
        materials="",
        timestamp=date(2024, 3, 5),
        time_in="09:00",
        time_out="10:01",
    )


def test_build_filename_collapses_whitespace() -> None:
    assert build_filename("John  Smith", date(2024, 3, 5)) == "John-Smith-2024-03-05.pdf"
    assert build_filename("Ann\tMarie Lee", date(2023, 12, 31)) == "Ann-Marie-Lee-2023-12-31.pdf"


@pytest.mark.parametrize("aspect_ratio", [0.2, 0.5, 0.6734, 1.0, 1.5, 4.0, 10.0])
def test_fit_image_stays_within_printable_area(aspect_ratio: float) -> None:
    placement = fit_image(A4_WIDTH_MM, A4_HEIGHT_MM, aspect_ratio)

    assert placement.width <= A4_WIDTH_MM - 30 + 1e-9
    assert placement.height <= A4_HEIGHT_MM - 30 + 1e-9
    assert placement.x == pytest.approx((A4_WIDTH_MM - placement.width) / 2)
    assert placement.y == 15
    assert placement.width / placement.height == pytest.approx(aspect_ratio)


def test_fit_image_prefers_full_width_for_wide_images() -> None:
    placement = fit_image(A4_WIDTH_MM, A4_HEIGHT_MM, 2.0)

    assert placement.width == pytest.approx(180)
    assert placement.height == pytest.approx(90)
    assert placement.x == pytest.approx(15)


def test_fit_image_limits_tall_images_by_height() -> None:
    placement = fit_image(A4_WIDTH_MM, A4_HEIGHT_MM, 0.25)

    assert placement.height == pytest.approx(267)
    assert placement.width == pytest.approx(66.75)
    assert placement.x == pytest.approx((210 - 66.75) / 2)


def test_rasterize_card_doubles_resolution() -> None:
    card = render_summary_card(_job())
    image = rasterize_card(card)

    assert image.size == (card.width * 2, card.height * 2)
    assert image.mode == "RGB"
    assert image.getpixel((card.width, 0)) == (226, 232, 240)


def test_rasterize_missing_card_raises_render_error() -> None:
    with pytest.raises(RenderError):
        rasterize_card(None)


def test_export_summary_pdf_returns_named_single_page_pdf() -> None:
    document = export_summary_pdf(render_summary_card(_job()))

    assert document is not None
    assert document.filename == "John-Smith-2024-03-05.pdf"
    assert document.media_type == "application/pdf"
    assert document.content.startswith(b"%PDF")
    assert b"/Count 1" in document.content


def test_export_summary_pdf_is_byte_identical_for_same_card() -> None:
    card = render_summary_card(_job())

    first = export_summary_pdf(card)
    second = export_summary_pdf(card)

    assert first is not None and second is not None
    assert first.content == second.content


def test_export_without_card_returns_none() -> None:
    assert export_summary_pdf(None) is None


def test_rasterization_failure_returns_none(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_rasterize(card: object, scale: int = 2) -> None:
        raise OSError("font file missing")

    monkeypatch.setattr(pdf_generation, "rasterize_card", broken_rasterize)

    assert export_summary_pdf(render_summary_card(_job())) is None
