"""Plain-text job summaries for email bodies and text shares."""

from __future__ import annotations

from datetime import date

from joblogger.backend.src.schemas.job import Job
from joblogger.backend.src.services.durations import format_duration


def format_job_date(value: date) -> str:
    """Render a job date with the locale's short date format."""

    return value.strftime("%x")


def format_job_as_text(job: Job) -> str:
    """Return the fixed-template text summary of ``job``."""

    duration = format_duration(job.time_in, job.time_out)
    lines = [
        "--- JOB SUMMARY ---",
        "",
        f"*Client:* {job.client_name}",
        f"*Address:* {job.address}",
        f"*Date:* {format_job_date(job.timestamp)}",
        f"*Time:* {job.time_in} - {job.time_out} ({duration})",
        "",
        "--- Work Performed ---",
        job.description,
    ]
    if job.materials:
        lines.extend(["", "--- Materials Used ---", job.materials])
    return "\n".join(lines).strip()


__all__ = ["format_job_as_text", "format_job_date"]
