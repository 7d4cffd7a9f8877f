"""Object synthesizer: fallback generation when no template matches.

Detected elements are spread evenly around a ring at the canvas midpoint.
Complex prompts additionally receive elaboration objects scattered at random.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable

import numpy as np

from realmsketch.engine.classifier import Complexity, Mood, PromptAnalysis
from realmsketch.engine.config import EngineConfig
from realmsketch.models.scene import CanvasSize, SceneObject
from realmsketch.utils.geometry import axis_bounds, clamp_to_canvas, polar_offset

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#6b7280"

# type -> (dark mood color, any other mood)
_COLOR_TABLE: dict[str, tuple[str, str]] = {
    "tree": ("#1f4d1f", "#22c55e"),
    "crystal": ("#4c1d95", "#06b6d4"),
    "portal": ("#8b5cf6", "#8b5cf6"),
    "house": ("#8b4513", "#f59e0b"),
    "tower": ("#7f1d1d", "#ef4444"),
    "rock": ("#6b7280", "#6b7280"),
}


def new_object_id() -> str:
    return f"obj-{uuid.uuid4().hex}"


def color_for(element: str, mood: Mood) -> str:
    """Presentation color for an element type under a mood."""
    pair = _COLOR_TABLE.get(element)
    if pair is None:
        return DEFAULT_COLOR
    dark, light = pair
    return dark if mood == Mood.DARK else light


def _uniform(rng: np.random.Generator, bounds: tuple[float, float]) -> float:
    lo, hi = bounds
    return float(rng.uniform(lo, hi))


def synthesize(
    analysis: PromptAnalysis,
    canvas: CanvasSize,
    rng: np.random.Generator,
    config: EngineConfig | None = None,
    id_factory: Callable[[], str] = new_object_id,
) -> list[SceneObject]:
    """Place one object per detected element on a ring around the canvas center."""
    config = config or EngineConfig()
    elements = analysis.elements or config.default_elements

    cx, cy = canvas.center
    radius = min(canvas.width, canvas.height) * config.radial_fraction
    step = 360.0 / len(elements)

    objects: list[SceneObject] = []
    for i, element in enumerate(elements):
        # A single element sits at angle 0, one radius right of center.
        x, y = polar_offset(cx, cy, radius, i * step)
        x, y = clamp_to_canvas(x, y, canvas.width, canvas.height, config.edge_margin)
        objects.append(
            SceneObject(
                id=id_factory(),
                type=element,
                x=x,
                y=y,
                rotation=_uniform(rng, (0.0, 360.0)),
                scale=_uniform(rng, config.synth_scale_range),
                color=color_for(element, analysis.mood),
                reasoning=f"Placed {element} based on prompt analysis",
            )
        )

    logger.debug("Synthesized %d objects from elements %s", len(objects), elements)
    return objects


def elaborate(
    analysis: PromptAnalysis,
    canvas: CanvasSize,
    rng: np.random.Generator,
    config: EngineConfig | None = None,
    id_factory: Callable[[], str] = new_object_id,
) -> list[SceneObject]:
    """Extra objects for complex prompts; empty for simple and medium ones."""
    config = config or EngineConfig()
    if analysis.complexity != Complexity.COMPLEX:
        return []

    x_bounds = axis_bounds(canvas.width, config.edge_margin)
    y_bounds = axis_bounds(canvas.height, config.edge_margin)

    extras: list[SceneObject] = []
    for element in config.elaboration_types:
        x = _uniform(rng, x_bounds)
        y = _uniform(rng, y_bounds)
        extras.append(
            SceneObject(
                id=id_factory(),
                type=element,
                x=x,
                y=y,
                rotation=_uniform(rng, (0.0, 360.0)),
                scale=_uniform(rng, config.elaboration_scale_range),
                color=color_for(element, analysis.mood),
                reasoning="Added for scene complexity",
            )
        )
    return extras
