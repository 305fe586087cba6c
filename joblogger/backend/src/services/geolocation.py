"""Optional GPS capture for a job site."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Protocol

import structlog

from joblogger.backend.src.schemas.job import Coordinates

LOGGER = structlog.get_logger(__name__)

LOCATION_TIMEOUT_SECONDS = 10.0
UNSUPPORTED_MESSAGE = "Geolocation is not supported by your browser."


class LocationProvider(Protocol):
    """Source of a fresh, high-accuracy position fix."""

    async def current_position(self) -> Coordinates:
        ...


@dataclass(frozen=True, slots=True)
class LocationResult:
    coordinates: Coordinates | None = None
    address: str | None = None
    error: str | None = None


def format_gps_address(coordinates: Coordinates) -> str:
    return f"GPS: {coordinates.latitude:.5f}, {coordinates.longitude:.5f}"


async def capture_location(
    provider: LocationProvider | None,
    timeout: float = LOCATION_TIMEOUT_SECONDS,
) -> LocationResult:
    """Ask ``provider`` for a position, giving up after ``timeout`` seconds.

    Failures come back as a message in :attr:`LocationResult.error`; the
    caller's address text is left alone in that case.
    """

    if provider is None:
        return LocationResult(error=UNSUPPORTED_MESSAGE)

    try:
        coordinates = await asyncio.wait_for(provider.current_position(), timeout=timeout)
    except asyncio.TimeoutError:
        LOGGER.warning("location_timeout", timeout=timeout)
        return LocationResult(error="Error getting location: Timeout expired")
    except Exception as exc:
        LOGGER.warning("location_failed", error=str(exc))
        return LocationResult(error=f"Error getting location: {exc}")

    return LocationResult(coordinates=coordinates, address=format_gps_address(coordinates))


__all__ = [
    "LOCATION_TIMEOUT_SECONDS",
    "LocationProvider",
    "LocationResult",
    "capture_location",
    "format_gps_address",
]
