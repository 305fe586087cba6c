"""Endpoints for logging and editing jobs."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from joblogger.backend.src.core.state import SessionState, get_session_state
from joblogger.backend.src.schemas.job import Job, JobCreate, JobUpdate
from joblogger.backend.src.services.job_log import JobNotFoundError

router = APIRouter(prefix="/jobs", tags=["jobs"])


def lookup_job(job_id: str, state: SessionState) -> Job:
    try:
        return state.job_log.get(job_id)
    except JobNotFoundError:
        raise HTTPException(status_code=404, detail="Job not found")


@router.get("")
def list_jobs(state: SessionState = Depends(get_session_state)) -> list[Job]:
    """Return every logged job, most recent date first."""

    return state.job_log.list()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_job(
    payload: JobCreate,
    state: SessionState = Depends(get_session_state),
) -> Job:
    return state.job_log.add(payload)


@router.get("/{job_id}")
def read_job(job_id: str, state: SessionState = Depends(get_session_state)) -> Job:
    return lookup_job(job_id, state)


@router.put("/{job_id}")
def replace_job(
    job_id: str,
    payload: JobUpdate,
    state: SessionState = Depends(get_session_state),
) -> Job:
    """Replace a job with the submitted record, keeping its id."""

    try:
        return state.job_log.update(job_id, payload)
    except JobNotFoundError:
        raise HTTPException(status_code=404, detail="Job not found")
