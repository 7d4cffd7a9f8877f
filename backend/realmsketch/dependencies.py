"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from realmsketch.config import Settings, settings
from realmsketch.engine.config import EngineConfig
from realmsketch.engine.pipeline import SceneEngine, create_engine


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def get_engine() -> SceneEngine:
    # The engine is immutable, so one instance serves every request.
    config = get_settings()
    return create_engine(
        config=EngineConfig.from_settings(config),
        seed=config.scene_random_seed,
    )
