"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_anon_key: str
    photos_table: str = "horror_photos"
    likes_table: str = "photo_likes"
    comments_table: str = "photo_comments"
    storage_bucket: str = "horror-images"
    session_store_path: Path = Path("~/.gallery_sync/session.json")
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def resolved_session_store_path(self) -> Path:
        """Return the session store path with the user directory expanded."""
        return self.session_store_path.expanduser()
