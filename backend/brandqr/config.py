"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    brandqr_env: str = "development"
    brandqr_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Session store
    max_sessions: int = 256

    # Share page template (packaged template when unset)
    share_template_path: Path | None = None

    # Defaults for requests that omit geometry
    default_module_scale: float = 10.0
    default_border_modules: int = 4
    default_logo_size_percent: float = 20.0

    # Request limits (PNG export allocates 4x the canvas side squared)
    max_module_scale: float = 20.0
    max_border_modules: int = 16
    max_logo_bytes: int = 2_000_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
