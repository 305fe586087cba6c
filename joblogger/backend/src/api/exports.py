"""Job summary export and sharing endpoints."""

from __future__ import annotations

import re
import unicodedata
import urllib.parse

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from joblogger.backend.src.api.jobs import lookup_job
from joblogger.backend.src.core.state import SessionState, get_session_state
from joblogger.backend.src.services.links import build_map_link
from joblogger.backend.src.services.sharing import build_job_pdf
from joblogger.backend.src.services.text_summary import format_job_as_text

router = APIRouter(tags=["exports"])


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and an RFC 5987 UTF-8 name."""

    fallback = unicodedata.normalize("NFKD", filename).encode("ascii", "ignore").decode("ascii")
    fallback = re.sub(r'["\\]', "", fallback) or "job-summary.pdf"
    encoded = urllib.parse.quote(filename, safe="")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{encoded}"


@router.get("/jobs/{job_id}/summary.txt", response_class=PlainTextResponse)
def job_summary_text(job_id: str, state: SessionState = Depends(get_session_state)) -> str:
    return format_job_as_text(lookup_job(job_id, state))


@router.get("/jobs/{job_id}/summary.pdf")
async def job_summary_pdf(
    job_id: str,
    state: SessionState = Depends(get_session_state),
) -> Response:
    """Stream the single-page PDF summary as an attachment."""

    job = lookup_job(job_id, state)
    document = await run_in_threadpool(build_job_pdf, job)
    if document is None:
        raise HTTPException(status_code=503, detail="PDF could not be generated")
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": content_disposition(document.filename)},
    )


@router.get("/jobs/{job_id}/map-link")
def job_map_link(job_id: str, state: SessionState = Depends(get_session_state)) -> dict[str, str]:
    return {"url": build_map_link(lookup_job(job_id, state))}


@router.post("/jobs/{job_id}/share/download")
async def download_job_pdf(
    job_id: str,
    state: SessionState = Depends(get_session_state),
) -> dict[str, str | None]:
    """Save the PDF into the downloads directory."""

    path = await state.dispatcher.download(lookup_job(job_id, state))
    return {"status": "saved" if path else "failed", "path": str(path) if path else None}


@router.post("/jobs/{job_id}/share/whatsapp")
async def share_job_whatsapp(
    job_id: str,
    state: SessionState = Depends(get_session_state),
) -> dict[str, str | bool | None]:
    outcome = await state.dispatcher.share_to_whatsapp(lookup_job(job_id, state))
    return {
        "channel": outcome.channel,
        "url": outcome.url,
        "filename": outcome.filename,
        "delivered": outcome.delivered,
    }


@router.get("/jobs/{job_id}/share/email")
def share_job_email(job_id: str, state: SessionState = Depends(get_session_state)) -> dict[str, str]:
    return {"url": state.dispatcher.email(lookup_job(job_id, state))}


@router.get("/share/status")
def share_status(state: SessionState = Depends(get_session_state)) -> dict[str, str | bool]:
    """Report whether an export is in flight so share actions can be disabled."""

    current = state.dispatcher.state
    return {
        "is_busy": current.is_busy,
        "is_downloading": current.is_downloading,
        "is_sharing": current.is_sharing,
        "status_text": current.status_text,
    }
