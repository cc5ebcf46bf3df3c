"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pathcommand_env: str = "development"
    pathcommand_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Option flags applied when a request or CLI call leaves them unset,
    # e.g. DEFAULT_OPTIONS='{"split_chains": true}'
    default_options: dict[str, bool] = {}

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
