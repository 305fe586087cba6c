"""Job site location capture endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from joblogger.backend.src.core.state import SessionState, get_session_state
from joblogger.backend.src.services.geolocation import capture_location

router = APIRouter(prefix="/location", tags=["location"])


@router.post("")
async def locate(state: SessionState = Depends(get_session_state)) -> dict[str, Any]:
    """Capture the current position; errors are reported, not raised."""

    result = await capture_location(state.location_provider)
    return {
        "coordinates": result.coordinates.model_dump() if result.coordinates else None,
        "address": result.address,
        "error": result.error,
    }
