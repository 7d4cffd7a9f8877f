"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    realmsketch_env: str = "development"
    realmsketch_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Engine tuning
    scene_random_seed: int | None = None
    scene_edge_margin: float = 20.0
    scene_min_separation: float = 50.0
    scene_target_separation: float = 60.0
    scene_template_fallback: str = "starter-forest"
    scene_lod_threshold: int = 100

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
