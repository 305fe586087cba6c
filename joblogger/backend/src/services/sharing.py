"""Delivery of job summaries by download, messaging share, or email."""

from __future__ import annotations

import asyncio
import re
import webbrowser
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Protocol

import structlog

from joblogger.backend.src.schemas.job import Job
from joblogger.backend.src.schemas.preferences import Preferences
from joblogger.backend.src.services import pdf_generation, summary_card
from joblogger.backend.src.services.links import build_mailto_link, build_whatsapp_link
from joblogger.backend.src.services.metrics import job_shares_total
from joblogger.backend.src.services.pdf_generation import JobSummaryPdf
from joblogger.backend.src.services.text_summary import format_job_as_text

LOGGER = structlog.get_logger(__name__)

SHARE_TITLE = "Job Summary"
DOWNLOADING_TEXT = "Generating PDF..."
SHARING_TEXT = "Preparing to share..."


class FileShareChannel(Protocol):
    """Native file-sharing capability of the runtime."""

    def can_share(self, document: JobSummaryPdf) -> bool:
        ...

    async def share(self, document: JobSummaryPdf, *, title: str, text: str) -> None:
        ...


class UnavailableShareChannel:
    """Channel for runtimes without native file sharing."""

    def can_share(self, document: JobSummaryPdf) -> bool:
        return False

    async def share(self, document: JobSummaryPdf, *, title: str, text: str) -> None:
        raise RuntimeError("native file sharing is not available")


@dataclass(frozen=True, slots=True)
class ShareState:
    is_downloading: bool = False
    is_sharing: bool = False

    @property
    def is_busy(self) -> bool:
        return self.is_downloading or self.is_sharing

    @property
    def status_text(self) -> str:
        if self.is_downloading:
            return DOWNLOADING_TEXT
        if self.is_sharing:
            return SHARING_TEXT
        return ""


@dataclass(frozen=True, slots=True)
class ShareOutcome:
    """Which delivery path a share request took."""

    channel: Literal["file", "link"]
    url: str | None = None
    filename: str | None = None
    delivered: bool = True


def build_job_pdf(job: Job) -> JobSummaryPdf | None:
    """Render and export ``job``; ``None`` when no artifact could be produced."""

    try:
        card = summary_card.render_summary_card(job)
    except Exception:
        LOGGER.exception("summary_card_render_failed", job_id=job.id)
        card = None
    return pdf_generation.export_summary_pdf(card)


def download_name(filename: str) -> str:
    """Strip path separators so the suggested name stays a single file name."""

    return Path(re.sub(r"[/\\\x00]", "-", filename)).name


def save_download(document: JobSummaryPdf, downloads_dir: Path) -> Path:
    """Write the PDF into ``downloads_dir`` under its suggested filename."""

    downloads_dir.mkdir(parents=True, exist_ok=True)
    destination = downloads_dir / download_name(document.filename)
    if destination.resolve().parent != downloads_dir.resolve():
        raise PermissionError(f"refusing to write outside {downloads_dir}")
    if destination.exists():
        destination.unlink()
    destination.write_bytes(document.content)
    return destination


class ShareDispatcher:
    """Offers the download, WhatsApp and email paths for one job at a time.

    Callers are expected to disable their actions while :attr:`state` reports
    busy; the dispatcher itself does not queue or lock concurrent requests.
    """

    def __init__(
        self,
        preferences: Preferences,
        *,
        downloads_dir: Path,
        share_channel: FileShareChannel | None = None,
        open_url: Callable[[str], object] = webbrowser.open_new_tab,
        whatsapp_base_url: str = "https://wa.me/",
    ) -> None:
        self.preferences = preferences
        self.downloads_dir = downloads_dir
        self.share_channel = share_channel or UnavailableShareChannel()
        self.open_url = open_url
        self.whatsapp_base_url = whatsapp_base_url
        self.state = ShareState()

    async def download(self, job: Job) -> Path | None:
        """Export ``job`` and save it locally; ``None`` when nothing was saved."""

        self.state = ShareState(is_downloading=True, is_sharing=self.state.is_sharing)
        try:
            document = await asyncio.to_thread(build_job_pdf, job)
            if document is None:
                return None
            try:
                path = await asyncio.to_thread(save_download, document, self.downloads_dir)
            except OSError as exc:
                LOGGER.warning("job_pdf_save_failed", filename=document.filename, error=str(exc))
                return None
            job_shares_total.labels(channel="download").inc()
            LOGGER.info("job_pdf_downloaded", path=str(path))
            return path
        finally:
            self.state = ShareState(is_downloading=False, is_sharing=self.state.is_sharing)

    async def share_to_whatsapp(self, job: Job) -> ShareOutcome:
        """Share the PDF natively when possible, otherwise open a text link."""

        self.state = ShareState(is_downloading=self.state.is_downloading, is_sharing=True)
        try:
            document = await asyncio.to_thread(build_job_pdf, job)
            if document is not None and self._can_share(document):
                delivered = True
                try:
                    await self.share_channel.share(
                        document,
                        title=SHARE_TITLE,
                        text=f"Here is the job summary for {job.client_name}.",
                    )
                except Exception as exc:
                    # Cancelled or rejected shares are not surfaced to the user.
                    LOGGER.warning("native_share_failed", error=str(exc))
                    delivered = False
                job_shares_total.labels(channel="file").inc()
                return ShareOutcome(channel="file", filename=document.filename, delivered=delivered)

            url = build_whatsapp_link(format_job_as_text(job), self.whatsapp_base_url)
            await asyncio.to_thread(self.open_url, url)
            job_shares_total.labels(channel="whatsapp_link").inc()
            return ShareOutcome(channel="link", url=url)
        finally:
            self.state = ShareState(is_downloading=self.state.is_downloading, is_sharing=False)

    def email(self, job: Job) -> str:
        """Open a mail composition link for ``job`` and return it."""

        url = build_mailto_link(
            job,
            recipient=self.preferences.recipient_email,
            cc=self.preferences.user_email,
        )
        self.open_url(url)
        job_shares_total.labels(channel="email").inc()
        return url

    def _can_share(self, document: JobSummaryPdf) -> bool:
        try:
            return bool(self.share_channel.can_share(document))
        except Exception as exc:
            LOGGER.warning("share_capability_check_failed", error=str(exc))
            return False


__all__ = [
    "FileShareChannel",
    "ShareDispatcher",
    "ShareOutcome",
    "ShareState",
    "UnavailableShareChannel",
    "build_job_pdf",
    "download_name",
    "save_download",
]
