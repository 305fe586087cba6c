"""Job record schemas."""

from __future__ import annotations

import re
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

_CLOCK_TIME = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class Coordinates(BaseModel):
    """Latitude/longitude pair captured for a job site."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class JobFields(BaseModel):
    """Editable fields shared by every job payload."""

    model_config = ConfigDict(frozen=True)

    client_name: str
    address: str
    description: str
    materials: str = ""
    timestamp: date
    time_in: str = ""
    time_out: str = ""
    coordinates: Coordinates | None = None

    @field_validator("time_in", "time_out")
    @classmethod
    def _validate_clock_time(cls, value: str) -> str:
        value = value.strip()
        if value and not _CLOCK_TIME.match(value):
            raise ValueError("expected a 24-hour HH:MM time")
        return value


class JobCreate(JobFields):
    """Payload for logging a new job."""


class JobUpdate(JobFields):
    """Payload that fully replaces an existing job."""


class Job(JobFields):
    """A single logged work visit."""

    id: str
