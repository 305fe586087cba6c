"""Email preference endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from joblogger.backend.src.core.state import SessionState, get_session_state
from joblogger.backend.src.schemas.preferences import Preferences

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("")
def read_preferences(state: SessionState = Depends(get_session_state)) -> Preferences:
    return state.preferences


@router.put("")
def replace_preferences(
    payload: Preferences,
    state: SessionState = Depends(get_session_state),
) -> Preferences:
    """Swap in new sender/recipient addresses for subsequent emails."""

    state.dispatcher.preferences = payload
    return payload
