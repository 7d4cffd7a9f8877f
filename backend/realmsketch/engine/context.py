"""GenerationContext: per-request state flowing through the generation stages.

classify -> template | synthesize -> elaborate -> resolve layout
"""

from __future__ import annotations

from dataclasses import dataclass, field

from realmsketch.engine.catalog import SceneTemplate
from realmsketch.engine.classifier import PromptAnalysis
from realmsketch.models.scene import CanvasSize, SceneObject


@dataclass
class GenerationContext:
    """State for a single generation request. Never shared between requests."""

    prompt: str
    canvas: CanvasSize
    # Caller's current scene; read-only anchors for layout resolution
    existing: list[SceneObject] = field(default_factory=list)

    analysis: PromptAnalysis | None = None
    template: SceneTemplate | None = None
    # Generated objects, replaced wholesale by each stage
    objects: list[SceneObject] = field(default_factory=list)
    elaboration_count: int = 0

    # Stage name -> elapsed ms
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def source(self) -> str:
        """Which path produced the base objects: "template:<key>" or "synthesized"."""
        if self.template is not None:
            return f"template:{self.template.key}"
        return "synthesized"

    @property
    def num_objects(self) -> int:
        return len(self.objects)
