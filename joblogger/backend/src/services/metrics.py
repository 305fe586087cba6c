"""Prometheus metric definitions for job summary exports."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

job_pdf_exports_total = Counter(
    "job_pdf_exports_total",
    "Total job summary PDF exports by outcome.",
    labelnames=["status"],
)

job_pdf_generation_seconds = Histogram(
    "job_pdf_generation_seconds",
    "Time spent rasterizing and composing a single job summary PDF.",
)

job_shares_total = Counter(
    "job_shares_total",
    "Job summary deliveries by channel.",
    labelnames=["channel"],
)

__all__ = [
    "job_pdf_exports_total",
    "job_pdf_generation_seconds",
    "job_shares_total",
]
