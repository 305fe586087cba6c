"""Public API routers exposed by the FastAPI application."""

from . import (
    descriptions,
    exports,
    health,
    jobs,
    location,
    preferences,
)

__all__ = [
    "descriptions",
    "exports",
    "health",
    "jobs",
    "location",
    "preferences",
]
