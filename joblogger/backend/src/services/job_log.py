"""In-memory job collection for the current session."""

from __future__ import annotations

from uuid import uuid4

import structlog

from joblogger.backend.src.schemas.job import Job, JobCreate, JobUpdate

LOGGER = structlog.get_logger(__name__)


class JobNotFoundError(LookupError):
    """Raised when a job id is not present in the log."""


class JobLog:
    """Jobs kept newest-first by date after every insert or update."""

    def __init__(self) -> None:
        self._jobs: list[Job] = []

    def _sort(self) -> None:
        self._jobs.sort(key=lambda job: job.timestamp, reverse=True)

    def add(self, payload: JobCreate) -> Job:
        job = Job(id=uuid4().hex, **payload.model_dump())
        self._jobs.insert(0, job)
        self._sort()
        LOGGER.info("job_logged", job_id=job.id, client=job.client_name)
        return job

    def update(self, job_id: str, payload: JobUpdate) -> Job:
        """Replace the job with ``job_id`` by a new record built from ``payload``."""

        for index, existing in enumerate(self._jobs):
            if existing.id == job_id:
                replacement = Job(id=existing.id, **payload.model_dump())
                self._jobs[index] = replacement
                self._sort()
                LOGGER.info("job_updated", job_id=job_id)
                return replacement
        raise JobNotFoundError(job_id)

    def get(self, job_id: str) -> Job:
        for job in self._jobs:
            if job.id == job_id:
                return job
        raise JobNotFoundError(job_id)

    def list(self) -> list[Job]:
        return list(self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)


__all__ = ["JobLog", "JobNotFoundError"]
