"""Deep-link builders for sharing and map lookups."""

from __future__ import annotations

import urllib.parse

from joblogger.backend.src.schemas.job import Job
from joblogger.backend.src.services.text_summary import format_job_as_text

# Characters left unescaped in a URI component, as browsers do for share links.
_URI_COMPONENT_SAFE = "-_.!~*'()"

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="


def encode_uri_component(value: str) -> str:
    return urllib.parse.quote(value, safe=_URI_COMPONENT_SAFE)


def email_subject(job: Job) -> str:
    return f"Job Summary: {job.client_name}"


def build_mailto_link(job: Job, *, recipient: str, cc: str) -> str:
    """Return a mail composition link carrying the text summary as its body."""

    subject = encode_uri_component(email_subject(job))
    body = encode_uri_component(format_job_as_text(job))
    return f"mailto:{recipient}?cc={cc}&subject={subject}&body={body}"


def build_whatsapp_link(text: str, base_url: str = "https://wa.me/") -> str:
    return f"{base_url.rstrip('/')}/?text={encode_uri_component(text)}"


def build_map_link(job: Job) -> str:
    """Link to the job site, preferring captured coordinates over the address."""

    if job.coordinates is not None:
        query = f"{job.coordinates.latitude},{job.coordinates.longitude}"
        return f"{MAPS_SEARCH_URL}{query}"
    return f"{MAPS_SEARCH_URL}{encode_uri_component(job.address)}"


__all__ = [
    "build_map_link",
    "build_mailto_link",
    "build_whatsapp_link",
    "email_subject",
    "encode_uri_component",
]
