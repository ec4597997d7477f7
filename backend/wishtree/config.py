"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    wishtree_env: str = "development"
    wishtree_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Tree layout
    tree_style: Literal["triangular", "rounded", "box"] = "triangular"
    layout_seed: int = 20251225
    light_count: int = 28
    snowflake_count: int = 30

    # Page copy
    page_title: str = "My Christmas gift to you"
    page_subtitle: str = "Click on an ornament to reveal a special Christmas message."

    # Remote message collaborator; empty means the in-process store
    message_source_url: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
