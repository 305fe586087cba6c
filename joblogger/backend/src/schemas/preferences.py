"""Preference schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Preferences(BaseModel):
    """Addresses used when emailing a job summary."""

    model_config = ConfigDict(frozen=True)

    user_email: str
    recipient_email: str
