"""Elapsed-time helpers for job visits."""

from __future__ import annotations

from datetime import date, datetime, timedelta

_REFERENCE_DATE = date(2000, 1, 1)


def _parse_clock(value: str) -> datetime:
    parsed = datetime.strptime(value.strip(), "%H:%M")
    return datetime.combine(_REFERENCE_DATE, parsed.time())


def _pluralize(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_duration(time_in: str | None, time_out: str | None) -> str:
    """Return the human-readable time between two ``HH:MM`` clock readings.

    A ``time_out`` earlier than ``time_in`` is treated as an overnight shift
    and rolled forward by one day. Minutes are truncated, not rounded.
    Returns ``"N/A"`` when either reading is missing.
    """

    if not time_in or not time_out:
        return "N/A"

    started = _parse_clock(time_in)
    finished = _parse_clock(time_out)
    if finished < started:
        finished += timedelta(days=1)

    elapsed = int((finished - started).total_seconds())
    hours, remainder = divmod(elapsed, 3600)
    minutes = remainder // 60

    parts: list[str] = []
    if hours > 0:
        parts.append(_pluralize(hours, "hour"))
    if minutes > 0:
        parts.append(_pluralize(minutes, "minute"))
    return " ".join(parts) or "0 minutes"


__all__ = ["format_duration"]
