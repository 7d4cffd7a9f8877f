"""Scene engine: validates input and runs the generation stages in order."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import numpy as np
from pydantic import ValidationError

from realmsketch.engine.catalog import instantiate_template, select_template
from realmsketch.engine.classifier import PromptAnalysis, classify
from realmsketch.engine.config import EngineConfig
from realmsketch.engine.context import GenerationContext
from realmsketch.engine.errors import InvalidInputError
from realmsketch.engine.inspection import SceneReport, inspect_scene
from realmsketch.engine.layout import resolve_layout
from realmsketch.engine.suggestions import suggest
from realmsketch.engine.synthesizer import elaborate, new_object_id, synthesize
from realmsketch.models.scene import CanvasSize, SceneObject

logger = logging.getLogger(__name__)

CanvasLike = CanvasSize | Mapping[str, Any]
ObjectLike = SceneObject | Mapping[str, Any]


def validate_canvas(canvas: CanvasLike) -> CanvasSize:
    """Coerce and check a canvas size. Dimensions must be finite and positive."""
    if not isinstance(canvas, CanvasSize):
        try:
            canvas = CanvasSize.model_validate(canvas)
        except ValidationError as e:
            raise InvalidInputError(f"Malformed canvas size: {e.errors()[0]['msg']}") from e

    for name, value in (("width", canvas.width), ("height", canvas.height)):
        if not math.isfinite(value) or value <= 0:
            raise InvalidInputError(f"Canvas {name} must be a positive number, got {value}")
    return canvas


def validate_objects(entries: Iterable[ObjectLike] | None) -> list[SceneObject]:
    """Coerce caller objects into SceneObjects, rejecting malformed entries.

    Always returns new instances so the engine never holds a caller's objects.
    """
    objects: list[SceneObject] = []
    for index, entry in enumerate(entries or ()):
        if isinstance(entry, SceneObject):
            objects.append(entry.model_copy())
            continue
        try:
            objects.append(SceneObject.model_validate(entry))
        except ValidationError as e:
            first = e.errors()[0]
            loc = ".".join(str(part) for part in first["loc"]) or "object"
            raise InvalidInputError(f"Object {index}: {loc}: {first['msg']}") from e
    return objects


class SceneEngine:
    """Stateless facade over the classifier, catalog, synthesizer, resolver and suggester.

    Holds only immutable configuration. With a `seed`, every call starts from
    a generator seeded the same way, so identical requests give identical
    layouts (ids aside).
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        seed: int | None = None,
        id_factory: Callable[[], str] = new_object_id,
    ) -> None:
        self.config = config or EngineConfig()
        self.seed = seed
        self.id_factory = id_factory

    def _rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)

    def classify(self, prompt: str) -> PromptAnalysis:
        return classify(prompt)

    def run(
        self,
        prompt: str,
        canvas: CanvasLike,
        existing: Iterable[ObjectLike] | None = None,
        rng: np.random.Generator | None = None,
    ) -> GenerationContext:
        """Run the full generation pipeline and return its context."""
        ctx = GenerationContext(
            prompt=prompt or "",
            canvas=validate_canvas(canvas),
            existing=validate_objects(existing),
        )
        rng = rng or self._rng()
        start = time.perf_counter()

        t0 = time.perf_counter()
        ctx.analysis = classify(ctx.prompt)
        ctx.timings["classify"] = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        ctx.template = select_template(ctx.analysis.theme, self.config.template_fallback_key)
        if ctx.template is not None:
            ctx.objects = instantiate_template(
                ctx.template, ctx.canvas, self.id_factory, self.config.edge_margin
            )
        else:
            ctx.objects = synthesize(ctx.analysis, ctx.canvas, rng, self.config, self.id_factory)

        extras = elaborate(ctx.analysis, ctx.canvas, rng, self.config, self.id_factory)
        ctx.elaboration_count = len(extras)
        ctx.objects = ctx.objects + extras
        ctx.timings["generate"] = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        ctx.objects = resolve_layout(ctx.objects, ctx.canvas, self.config, anchors=ctx.existing)
        ctx.timings["layout"] = (time.perf_counter() - t0) * 1000

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Generated %d objects (%s, theme=%s, complexity=%s) in %.1fms",
            ctx.num_objects,
            ctx.source,
            ctx.analysis.theme.value,
            ctx.analysis.complexity.label,
            total,
        )
        return ctx

    def generate(
        self,
        prompt: str,
        canvas: CanvasLike,
        existing: Iterable[ObjectLike] | None = None,
    ) -> list[SceneObject]:
        return self.run(prompt, canvas, existing).objects

    def resolve(self, objects: Iterable[ObjectLike], canvas: CanvasLike) -> list[SceneObject]:
        """Re-run layout resolution on a caller's objects."""
        return resolve_layout(validate_objects(objects), validate_canvas(canvas), self.config)

    def suggest(self, objects: Iterable[ObjectLike], canvas: CanvasLike) -> list[str]:
        return suggest(validate_objects(objects), validate_canvas(canvas), self.config)

    def inspect(self, objects: Iterable[ObjectLike], canvas: CanvasLike) -> SceneReport:
        return inspect_scene(validate_objects(objects), validate_canvas(canvas), self.config)


def create_engine(config: EngineConfig | None = None, seed: int | None = None) -> SceneEngine:
    """Factory function for creating an engine instance."""
    return SceneEngine(config=config, seed=seed)
