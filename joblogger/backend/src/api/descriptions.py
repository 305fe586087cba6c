"""AI description suggestion endpoint."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from joblogger.backend.src.services.descriptions import (
    DescriptionGenerationError,
    generate_description,
)

router = APIRouter(prefix="/descriptions", tags=["descriptions"])


class DescriptionRequest(BaseModel):
    keywords: str


@router.post("")
def suggest_description(payload: DescriptionRequest) -> dict[str, str]:
    try:
        return {"description": generate_description(payload.keywords)}
    except DescriptionGenerationError:
        raise HTTPException(
            status_code=502,
            detail="Failed to generate description. Please check your API key and try again.",
        )
