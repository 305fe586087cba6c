"""Tests for job site location capture."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

from joblogger.backend.src.schemas.job import Coordinates
from joblogger.backend.src.services.geolocation import (
    LOCATION_TIMEOUT_SECONDS,
    capture_location,
)


class FixedProvider:
    async def current_position(self) -> Coordinates:
        return Coordinates(latitude=51.5007292, longitude=-0.1246254)


class DeniedProvider:
    async def current_position(self) -> Coordinates:
        raise PermissionError("User denied Geolocation")


class StalledProvider:
    async def current_position(self) -> Coordinates:
        await asyncio.sleep(5)
        raise AssertionError("should have timed out")


def test_default_timeout_is_ten_seconds() -> None:
    assert LOCATION_TIMEOUT_SECONDS == 10.0


def test_successful_fix_formats_gps_address() -> None:
    result = asyncio.run(capture_location(FixedProvider()))

    assert result.coordinates == Coordinates(latitude=51.5007292, longitude=-0.1246254)
    assert result.address == "GPS: 51.50073, -0.12463"
    assert result.error is None


def test_provider_error_is_reported() -> None:
    result = asyncio.run(capture_location(DeniedProvider()))

    assert result.coordinates is None
    assert result.address is None
    assert result.error == "Error getting location: User denied Geolocation"


def test_timeout_is_reported() -> None:
    result = asyncio.run(capture_location(StalledProvider(), timeout=0.01))

    assert result.address is None
    assert result.error == "Error getting location: Timeout expired"


def test_missing_provider_is_unsupported() -> None:
    result = asyncio.run(capture_location(None))
    assert result.error == "Geolocation is not supported by your browser."
