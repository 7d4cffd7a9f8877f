"""Scene inspection: health report for an object set (counts, crowding, bounds, size)."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from realmsketch.engine.config import EngineConfig
from realmsketch.models.scene import CanvasSize, SceneObject
from realmsketch.utils.geometry import pairwise_distances

# (upper bound exclusive, rating)
_PERFORMANCE_BANDS = (
    (50, "Excellent"),
    (150, "Good"),
    (300, "Fair"),
)
_POOR_RATING = "Poor - Consider optimization"

_BASE_SIZE_MB = 0.5
_OBJECT_SIZE_MB = 0.1


@dataclass
class SceneReport:
    object_count: int = 0
    type_counts: dict[str, int] = field(default_factory=dict)
    crowded_pairs: int = 0
    out_of_bounds: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    performance_rating: str = "Excellent"
    estimated_size: str = ""

    @property
    def score(self) -> int:
        return max(0, 100 - 5 * len(self.warnings))


def performance_rating(count: int) -> str:
    for bound, rating in _PERFORMANCE_BANDS:
        if count < bound:
            return rating
    return _POOR_RATING


def estimate_size(count: int) -> str:
    total_mb = _BASE_SIZE_MB + count * _OBJECT_SIZE_MB
    if total_mb < 1:
        return f"{round(total_mb * 1000)} KB"
    return f"{total_mb:.1f} MB"


def count_crowded_pairs(objects: Sequence[SceneObject], min_separation: float) -> int:
    if len(objects) < 2:
        return 0
    points = np.array([[obj.x, obj.y] for obj in objects], dtype=np.float64)
    dists = pairwise_distances(points)
    upper = np.triu(dists < min_separation, k=1)
    return int(np.count_nonzero(upper))


def inspect_scene(
    objects: Sequence[SceneObject],
    canvas: CanvasSize,
    config: EngineConfig | None = None,
) -> SceneReport:
    config = config or EngineConfig()
    count = len(objects)

    report = SceneReport(
        object_count=count,
        type_counts=dict(sorted(Counter(obj.type for obj in objects).items())),
        performance_rating=performance_rating(count),
        estimated_size=estimate_size(count),
    )

    if count == 0:
        report.warnings.append("Scene is empty - consider adding some objects")
    if count > config.max_scene_objects:
        report.warnings.append("Scene has many objects - this may impact performance")

    report.out_of_bounds = [
        obj.id
        for obj in objects
        if not (0 <= obj.x <= canvas.width and 0 <= obj.y <= canvas.height)
    ]
    if report.out_of_bounds:
        report.warnings.append(f"{len(report.out_of_bounds)} object(s) lie outside the canvas")

    report.crowded_pairs = count_crowded_pairs(objects, config.min_separation)
    if report.crowded_pairs:
        report.warnings.append(
            f"{report.crowded_pairs} object pair(s) closer than {config.min_separation:g} units"
        )

    return report
