"""Entrypoint for the FastAPI application."""

import os
from dotenv import load_dotenv

env_path = os.path.join(os.path.dirname(__file__), "../.env")
if os.path.exists(env_path):
    load_dotenv(dotenv_path=os.path.abspath(env_path))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import (
    descriptions,
    exports,
    health,
    jobs,
    location,
    preferences,
)
from .core.config import get_settings
from .core.logging import configure_logging
from .core.state import build_session_state


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Job Logger", version="0.1.0")
    app.state.session = build_session_state(get_settings())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/api")
    app.include_router(jobs.router, prefix="/api")
    app.include_router(exports.router, prefix="/api")
    app.include_router(descriptions.router, prefix="/api")
    app.include_router(preferences.router, prefix="/api")
    app.include_router(location.router, prefix="/api")

    return app


app = create_app()
