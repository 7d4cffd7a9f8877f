"""RealmSketch procedural scene engine."""

from realmsketch.engine.classifier import Complexity, Mood, PromptAnalysis, Theme, classify
from realmsketch.engine.config import EngineConfig
from realmsketch.engine.errors import InvalidInputError
from realmsketch.engine.pipeline import SceneEngine, create_engine

__all__ = [
    "classify",
    "Complexity",
    "Mood",
    "PromptAnalysis",
    "Theme",
    "EngineConfig",
    "InvalidInputError",
    "SceneEngine",
    "create_engine",
]
