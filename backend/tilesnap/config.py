"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    tilesnap_env: str = "development"
    tilesnap_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Symmetry centre of the 600x600 working canvas
    canvas_center_x: float = 300.0
    canvas_center_y: float = 300.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
