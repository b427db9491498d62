"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_BODY_BYTES = 50 * 1024 * 1024


class Settings(BaseSettings):
    """PageCraft application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    debug: bool = False
    expose_docs: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///data/db/pagecraft.db"

    # Paths
    frontend_dir: Path = Path("./public")

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Transport
    max_body_bytes: int = Field(default=DEFAULT_MAX_BODY_BYTES, ge=1)

    def sqlite_path(self) -> Path | None:
        """Return the on-disk database path for file-backed sqlite URLs."""
        if not self.database_url.startswith("sqlite") or "///" not in self.database_url:
            return None
        db_path = self.database_url.split("///", 1)[-1]
        if not db_path or db_path == ":memory:":
            return None
        return Path(db_path)
