"""Suggestion engine: next-step hints from the current scene state.

Three regimes keyed on object count. Ordering is fixed within each regime so
the same scene always yields the same list.
"""

from __future__ import annotations

from collections.abc import Sequence

from realmsketch.engine.config import EngineConfig
from realmsketch.models.scene import CanvasSize, SceneObject

STARTER_PROMPTS: tuple[str, ...] = (
    "Create a mystical forest with glowing trees",
    "Build a cyberpunk cityscape with neon towers",
    "Design a floating crystal sanctuary",
)

ADD_PORTAL = "Add a portal to connect realms"
ADD_CRYSTALS = "Place magical crystals for ambiance"
ADD_TREES = "Add more trees to create a forest"

POLISH_SUGGESTIONS: tuple[str, ...] = (
    "Create atmospheric lighting effects",
    "Add sound zones for immersion",
    "Design quest objectives for players",
)

LOD_HINT = "Use level of detail (LOD) for distant objects"


def suggest(
    objects: Sequence[SceneObject],
    canvas: CanvasSize,
    config: EngineConfig | None = None,
) -> list[str]:
    config = config or EngineConfig()
    count = len(objects)
    suggestions: list[str] = []

    if count == 0:
        suggestions.extend(STARTER_PROMPTS)
    elif count < config.sparse_threshold:
        types = {obj.type for obj in objects}
        if "portal" not in types:
            suggestions.append(ADD_PORTAL)
        if "crystal" not in types:
            suggestions.append(ADD_CRYSTALS)
        suggestions.append(ADD_TREES)
    else:
        suggestions.extend(POLISH_SUGGESTIONS)
        if count > config.lod_object_threshold:
            suggestions.append(LOD_HINT)

    return suggestions[: config.max_suggestions]
