"""Application configuration utilities."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings derived from environment variables."""

    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")
    user_email: str = Field(default="your-email@example.com", alias="USER_EMAIL")
    recipient_email: str = Field(
        default="work-email@example.com", alias="RECIPIENT_EMAIL"
    )
    downloads_path: str = Field(
        default=str(Path.home() / "Downloads"), alias="DOWNLOADS_PATH"
    )
    whatsapp_base_url: str = Field(
        default="https://wa.me/", alias="WHATSAPP_BASE_URL"
    )
    open_links_in_browser: bool = Field(default=False, alias="OPEN_LINKS_IN_BROWSER")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @property
    def downloads_dir(self) -> Path:
        """Return the downloads directory as an expanded path."""

        return Path(self.downloads_path).expanduser()


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
