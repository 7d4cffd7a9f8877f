"""Engine configuration: numeric knobs for placement, layout and suggestions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from realmsketch.engine.spatial_constants import (
    EDGE_MARGIN,
    LOD_OBJECT_THRESHOLD,
    MIN_SEPARATION,
    RADIAL_FRACTION,
    TARGET_SEPARATION,
)

if TYPE_CHECKING:
    from realmsketch.config import Settings


@dataclass(frozen=True)
class EngineConfig:
    """Controls generation and layout behavior. Immutable so engines can be shared."""

    # Placement
    edge_margin: float = EDGE_MARGIN
    radial_fraction: float = RADIAL_FRACTION
    default_elements: tuple[str, ...] = ("tree", "rock")

    # Random ranges: [low, high)
    synth_scale_range: tuple[float, float] = (0.8, 1.2)
    elaboration_scale_range: tuple[float, float] = (0.6, 0.9)
    elaboration_types: tuple[str, ...] = ("crystal", "rock")

    # Layout resolution
    min_separation: float = MIN_SEPARATION
    target_separation: float = TARGET_SEPARATION

    # Template fallback for themes without a dedicated template ("" disables)
    template_fallback_key: str = "starter-forest"

    # Suggestions
    max_suggestions: int = 4
    sparse_threshold: int = 3  # <3 objects: sparse regime
    lod_object_threshold: int = LOD_OBJECT_THRESHOLD

    # Scene inspection
    max_scene_objects: int = 1000

    def __post_init__(self) -> None:
        if self.target_separation < self.min_separation:
            raise ValueError(
                f"target_separation ({self.target_separation}) must be >= "
                f"min_separation ({self.min_separation})"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> EngineConfig:
        return cls(
            edge_margin=settings.scene_edge_margin,
            min_separation=settings.scene_min_separation,
            target_separation=settings.scene_target_separation,
            template_fallback_key=settings.scene_template_fallback,
            lod_object_threshold=settings.scene_lod_threshold,
        )
