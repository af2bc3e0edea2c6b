"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    debug_mode: bool = True
    log_level: str = "INFO"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    base_url: str | None = None
    cors_origins: str | None = None
    data_file: Path = Path("db.json")
    upload_dir: Path = Path("uploads")
    qrcode_dir: Path = Path("qrcodes")
    portfolio_dir: Path = Path("portfolio_uploads")
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def public_base_url(self) -> str:
        """Return the address prefix used to build file URLs."""
        return (self.base_url or f"http://localhost:{self.port}").rstrip("/")


def parse_cors_origins(raw: str | None, debug_mode: bool) -> list[str]:
    """Parse allowed CORS origins; debug mode allows every origin."""
    if debug_mode:
        return ["*"]
    if raw is None:
        return []
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
