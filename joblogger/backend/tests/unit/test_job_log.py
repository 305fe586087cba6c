"""Tests for the in-memory job log and job schemas."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

import pytest
from pydantic import ValidationError

from joblogger.backend.src.schemas.job import JobCreate, JobUpdate
from joblogger.backend.src.services.job_log import JobLog, JobNotFoundError


def _payload(client: str, day: date, **overrides: object) -> dict[str, object]:
    fields: dict[str, object] = {
        "client_name": client,
        "address": "1 Main St",
        "description": "Work",
        "timestamp": day,
        "time_in": "08:00",
        "time_out": "12:00",
    }
    fields.update(overrides)
    return fields


def test_jobs_are_sorted_newest_first() -> None:
    log = JobLog()
    log.add(JobCreate(**_payload("Middle", date(2024, 3, 2))))
    log.add(JobCreate(**_payload("Oldest", date(2024, 3, 1))))
    log.add(JobCreate(**_payload("Newest", date(2024, 3, 3))))

    assert [job.client_name for job in log.list()] == ["Newest", "Middle", "Oldest"]


def test_same_day_jobs_keep_latest_insert_first() -> None:
    log = JobLog()
    log.add(JobCreate(**_payload("First", date(2024, 3, 1))))
    log.add(JobCreate(**_payload("Second", date(2024, 3, 1))))

    assert [job.client_name for job in log.list()] == ["Second", "First"]


def test_ids_are_unique() -> None:
    log = JobLog()
    ids = {log.add(JobCreate(**_payload(f"C{i}", date(2024, 1, 1)))).id for i in range(20)}
    assert len(ids) == 20


def test_update_replaces_record_and_resorts() -> None:
    log = JobLog()
    older = log.add(JobCreate(**_payload("Older", date(2024, 3, 1))))
    newer = log.add(JobCreate(**_payload("Newer", date(2024, 3, 2))))

    updated = log.update(older.id, JobUpdate(**_payload("Older Renamed", date(2024, 3, 9))))

    assert updated.id == older.id
    assert older.client_name == "Older"
    assert [job.id for job in log.list()] == [older.id, newer.id]
    assert log.get(older.id).client_name == "Older Renamed"


def test_update_unknown_job_raises() -> None:
    with pytest.raises(JobNotFoundError):
        JobLog().update("missing", JobUpdate(**_payload("X", date(2024, 1, 1))))


def test_get_unknown_job_raises() -> None:
    with pytest.raises(JobNotFoundError):
        JobLog().get("missing")


def test_job_rejects_malformed_clock_times() -> None:
    with pytest.raises(ValidationError):
        JobCreate(**_payload("X", date(2024, 1, 1), time_in="25:00"))


def test_jobs_are_immutable() -> None:
    job = JobLog().add(JobCreate(**_payload("X", date(2024, 1, 1))))
    with pytest.raises(ValidationError):
        job.client_name = "Y"  # type: ignore[misc]
