"""Prefab template catalog: hand-tuned object layouts per theme.

The catalog is frozen at import time and shared by every request. Templates
are never handed out directly: `instantiate_template` clones them into fresh
SceneObjects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from realmsketch.engine.classifier import Theme
from realmsketch.engine.spatial_constants import EDGE_MARGIN
from realmsketch.models.scene import CanvasSize, SceneObject
from realmsketch.utils.geometry import clamp_to_canvas, normalize_angle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateObject:
    type: str
    x: float
    y: float
    rotation: float
    scale: float
    color: str


@dataclass(frozen=True)
class SceneTemplate:
    key: str
    name: str
    description: str
    objects: tuple[TemplateObject, ...]

    @property
    def object_types(self) -> tuple[str, ...]:
        return tuple(obj.type for obj in self.objects)


_TEMPLATES = (
    SceneTemplate(
        key="starter-forest",
        name="Mystical Forest",
        description="A peaceful woodland with glowing trees and crystal streams",
        objects=(
            TemplateObject("tree", 100, 100, 0, 1.0, "#22c55e"),
            TemplateObject("tree", 200, 150, 45, 1.2, "#16a34a"),
            TemplateObject("crystal", 150, 200, 0, 0.8, "#06b6d4"),
            TemplateObject("rock", 80, 180, 90, 1.0, "#6b7280"),
        ),
    ),
    SceneTemplate(
        key="cyber-city",
        name="Neon Metropolis",
        description="A futuristic cityscape with holographic displays",
        objects=(
            TemplateObject("tower", 120, 80, 0, 1.5, "#ef4444"),
            TemplateObject("tower", 220, 120, 0, 1.8, "#3b82f6"),
            TemplateObject("portal", 170, 160, 0, 1.0, "#8b5cf6"),
            TemplateObject("house", 80, 140, 15, 0.9, "#f59e0b"),
        ),
    ),
    SceneTemplate(
        key="floating-sanctuary",
        name="Sky Temple",
        description="Ancient ruins floating among the clouds",
        objects=(
            TemplateObject("portal", 160, 120, 0, 1.3, "#8b5cf6"),
            TemplateObject("crystal", 100, 100, 30, 1.1, "#06b6d4"),
            TemplateObject("crystal", 220, 140, -30, 1.1, "#06b6d4"),
            TemplateObject("rock", 140, 180, 0, 1.2, "#6b7280"),
        ),
    ),
)

TEMPLATES: Mapping[str, SceneTemplate] = MappingProxyType({t.key: t for t in _TEMPLATES})

# Themes with a dedicated template. GENERIC is deliberately absent.
THEME_TEMPLATE_KEYS: Mapping[Theme, str] = MappingProxyType({
    Theme.FOREST: "starter-forest",
    Theme.CYBERPUNK: "cyber-city",
    Theme.MYSTICAL: "floating-sanctuary",
})


def select_template(theme: Theme, fallback_key: str = "starter-forest") -> SceneTemplate | None:
    """Pick the template for a theme.

    Recognized themes without a dedicated template use `fallback_key`.
    GENERIC (nothing recognized) returns None so the caller synthesizes.
    """
    if theme == Theme.GENERIC:
        return None
    key = THEME_TEMPLATE_KEYS.get(theme, fallback_key)
    if not key:
        return None
    template = TEMPLATES.get(key)
    if template is None:
        logger.warning("Unknown template key %r for theme %s", key, theme.value)
    return template


def list_templates() -> list[SceneTemplate]:
    return list(TEMPLATES.values())


def instantiate_template(
    template: SceneTemplate,
    canvas: CanvasSize,
    id_factory: Callable[[], str],
    margin: float = EDGE_MARGIN,
) -> list[SceneObject]:
    """Clone template objects into new SceneObjects with fresh ids."""
    objects: list[SceneObject] = []
    for obj in template.objects:
        x, y = clamp_to_canvas(obj.x, obj.y, canvas.width, canvas.height, margin)
        objects.append(
            SceneObject(
                id=id_factory(),
                type=obj.type,
                x=x,
                y=y,
                rotation=normalize_angle(obj.rotation),
                scale=obj.scale,
                color=obj.color,
                reasoning=f"Generated from template: {template.name}",
            )
        )
    return objects
