"""Session state shared by the API routers."""

from __future__ import annotations

import webbrowser
from dataclasses import dataclass

from fastapi import Request

from joblogger.backend.src.core.config import Settings
from joblogger.backend.src.schemas.preferences import Preferences
from joblogger.backend.src.services.geolocation import LocationProvider
from joblogger.backend.src.services.job_log import JobLog
from joblogger.backend.src.services.sharing import FileShareChannel, ShareDispatcher


def _leave_for_client(url: str) -> None:
    """The HTTP client opens returned links itself."""


@dataclass
class SessionState:
    job_log: JobLog
    dispatcher: ShareDispatcher
    location_provider: LocationProvider | None = None

    @property
    def preferences(self) -> Preferences:
        return self.dispatcher.preferences


def build_session_state(
    settings: Settings,
    *,
    share_channel: FileShareChannel | None = None,
    location_provider: LocationProvider | None = None,
) -> SessionState:
    preferences = Preferences(
        user_email=settings.user_email,
        recipient_email=settings.recipient_email,
    )
    dispatcher = ShareDispatcher(
        preferences,
        downloads_dir=settings.downloads_dir,
        share_channel=share_channel,
        open_url=webbrowser.open_new_tab if settings.open_links_in_browser else _leave_for_client,
        whatsapp_base_url=settings.whatsapp_base_url,
    )
    return SessionState(
        job_log=JobLog(),
        dispatcher=dispatcher,
        location_provider=location_provider,
    )


def get_session_state(request: Request) -> SessionState:
    """FastAPI dependency returning the application's session state."""

    return request.app.state.session
