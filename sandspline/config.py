"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "info"

    # Output location; defaults to the scene's own file or directory name
    out_dir: str = "."

    # Overrides for the scene defaults
    seed: int | None = None
    n_frames: int | None = None
    canvas_width: int | None = None
    canvas_height: int | None = None

    model_config = SettingsConfigDict(
        env_prefix="SANDSPLINE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
