"""Fixed-layout summary card for a single job.

The card is a display list measured in CSS pixels. It always uses the light
palette below, whatever theme the calling interface is in, because the card
is rasterized into a shareable PDF.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from pathlib import Path

import reportlab
from PIL import ImageFont

from joblogger.backend.src.schemas.job import Job
from joblogger.backend.src.services.durations import format_duration
from joblogger.backend.src.services.text_summary import format_job_date

CARD_WIDTH = 624
PADDING = 20
ICON_SIZE = 20
TEXT_INDENT = PADDING + 32
SECTION_GAP = 16
ROW_GAP = 12
LINE_HEIGHT = 20
TITLE_LINE_HEIGHT = 28

WHITE = "#FFFFFF"
BORDER = "#E2E8F0"
BLUE_600 = "#2563EB"
SLATE_400 = "#94A3B8"
SLATE_500 = "#64748B"
SLATE_600 = "#475569"
SLATE_700 = "#334155"
SLATE_800 = "#1E293B"

_FONT_DIR = Path(reportlab.__file__).resolve().parent / "fonts"
_FONT_FILES = {False: "Vera.ttf", True: "VeraBd.ttf"}


@lru_cache(maxsize=64)
def load_font(size: int, bold: bool = False) -> ImageFont.FreeTypeFont:
    """Return the TrueType font used for both layout and rasterization."""

    return ImageFont.truetype(str(_FONT_DIR / _FONT_FILES[bold]), size)


@dataclass(frozen=True, slots=True)
class Box:
    x: float
    y: float
    width: float
    height: float
    fill: str
    outline: str | None = None
    radius: float = 0


@dataclass(frozen=True, slots=True)
class Rule:
    x1: float
    x2: float
    y: float
    color: str


@dataclass(frozen=True, slots=True)
class TextRun:
    x: float
    y: float
    text: str
    size: int
    color: str
    bold: bool = False
    line_height: float = LINE_HEIGHT


@dataclass(frozen=True, slots=True)
class Icon:
    name: str
    x: float
    y: float
    size: float
    color: str


Element = Box | Rule | TextRun | Icon


@dataclass(frozen=True, slots=True)
class SummaryCard:
    """Rendered visual document for one job."""

    width: int
    height: int
    elements: tuple[Element, ...]
    client_name: str
    job_date: date


def wrap_text(
    text: str,
    font: ImageFont.FreeTypeFont,
    max_width: float,
    first_line_width: float | None = None,
) -> list[str]:
    """Greedy word wrap that keeps explicit newlines."""

    lines: list[str] = []
    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split(" "):
            limit = first_line_width if first_line_width is not None and not lines else max_width
            candidate = f"{current} {word}" if current else word
            if font.getlength(candidate) <= limit:
                current = candidate
                continue
            if current:
                lines.append(current)
                limit = max_width
                current = ""
            while font.getlength(word) > limit and len(word) > 1:
                cut = len(word)
                while cut > 1 and font.getlength(word[:cut]) > limit:
                    cut -= 1
                lines.append(word[:cut])
                word = word[cut:]
                limit = max_width
            current = word
        lines.append(current)
    return lines


class _CardBuilder:
    def __init__(self) -> None:
        self.elements: list[Element] = []
        self.y: float = PADDING

    def text_block(
        self,
        text: str,
        *,
        x: float,
        size: int = 14,
        color: str = SLATE_700,
        bold: bool = False,
        line_height: float = LINE_HEIGHT,
    ) -> None:
        font = load_font(size, bold)
        for line in wrap_text(text, font, CARD_WIDTH - PADDING - x):
            self.elements.append(
                TextRun(x, self.y, line, size, color, bold, line_height)
            )
            self.y += line_height

    def labelled_row(self, icon: str, label: str, value: str) -> None:
        self.elements.append(Icon(icon, PADDING, self.y, ICON_SIZE, SLATE_400))
        label_font = load_font(14, bold=True)
        value_font = load_font(14)
        available = CARD_WIDTH - PADDING - TEXT_INDENT
        label_width = label_font.getlength(label) + value_font.getlength(" ")
        self.elements.append(TextRun(TEXT_INDENT, self.y, label, 14, SLATE_700, True))
        lines = wrap_text(value, value_font, available, available - label_width)
        for index, line in enumerate(lines):
            x = TEXT_INDENT + label_width if index == 0 else TEXT_INDENT
            self.elements.append(TextRun(x, self.y, line, 14, SLATE_700))
            self.y += LINE_HEIGHT

    def icon_row(self, icon: str, text: str) -> None:
        self.elements.append(Icon(icon, PADDING, self.y, ICON_SIZE, SLATE_400))
        self.text_block(text, x=TEXT_INDENT)

    def section(self, icon: str, title: str, body: str) -> None:
        self.y += SECTION_GAP
        self.elements.append(Rule(PADDING, CARD_WIDTH - PADDING, self.y, BORDER))
        self.y += SECTION_GAP
        self.elements.append(Icon(icon, PADDING, self.y, ICON_SIZE, SLATE_400))
        self.text_block(title, x=TEXT_INDENT, color=SLATE_800, bold=True)
        self.y += 8
        self.text_block(body, x=TEXT_INDENT, color=SLATE_600)


def render_summary_card(job: Job) -> SummaryCard:
    """Lay out the light-themed summary card for ``job``."""

    builder = _CardBuilder()
    builder.text_block(
        job.client_name,
        x=PADDING,
        size=18,
        color=BLUE_600,
        bold=True,
        line_height=TITLE_LINE_HEIGHT,
    )
    builder.text_block(format_job_date(job.timestamp), x=PADDING, color=SLATE_500)

    builder.y += SECTION_GAP
    builder.icon_row("location", job.address)
    builder.y += ROW_GAP
    duration = format_duration(job.time_in, job.time_out)
    builder.labelled_row("clock", "Time:", f"{job.time_in} - {job.time_out} ({duration})")

    builder.section("clipboard", "Work Performed", job.description)
    if job.materials:
        builder.section("briefcase", "Materials Used", job.materials)

    height = int(round(builder.y + PADDING))
    frame = Box(0, 0, CARD_WIDTH, height, WHITE, BORDER, radius=8)
    return SummaryCard(
        width=CARD_WIDTH,
        height=height,
        elements=(frame, *builder.elements),
        client_name=job.client_name,
        job_date=job.timestamp,
    )


__all__ = [
    "Box",
    "Icon",
    "Rule",
    "SummaryCard",
    "TextRun",
    "load_font",
    "render_summary_card",
    "wrap_text",
]
