"""Layout resolver: push apart objects that sit too close together.

One pass over all pairs in index order. When a pair is closer than the
minimum separation, the later object is moved to the target separation from
the earlier one along the line joining them, then clamped back into the
canvas. Later pushes can reintroduce smaller overlaps; no relaxation loop
runs afterwards.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from realmsketch.engine.config import EngineConfig
from realmsketch.models.scene import CanvasSize, SceneObject
from realmsketch.utils.geometry import clamp_to_canvas, distance, polar_offset

logger = logging.getLogger(__name__)


def resolve_layout(
    objects: Sequence[SceneObject],
    canvas: CanvasSize,
    config: EngineConfig | None = None,
    anchors: Sequence[SceneObject] = (),
) -> list[SceneObject]:
    """Return copies of `objects` with crowded pairs separated.

    `anchors` take part in the pass ahead of `objects` but are never moved
    and are not returned.
    """
    config = config or EngineConfig()
    n_fixed = len(anchors)

    # Work on plain coordinates; inputs stay untouched. Movable objects start
    # clamped so every returned position is in bounds, moved or not.
    positions = [[obj.x, obj.y] for obj in anchors]
    positions += [
        list(clamp_to_canvas(obj.x, obj.y, canvas.width, canvas.height, config.edge_margin))
        for obj in objects
    ]
    n = len(positions)
    displaced = 0

    for i in range(n):
        for j in range(max(i + 1, n_fixed), n):
            xi, yi = positions[i]
            xj, yj = positions[j]
            dist = distance(xi, yi, xj, yj)
            if dist >= config.min_separation:
                continue

            # Coincident points have no direction; atan2(0, 0) pushes along +x.
            angle = math.degrees(math.atan2(yj - yi, xj - xi))
            x, y = polar_offset(xi, yi, config.target_separation, angle)
            positions[j] = list(
                clamp_to_canvas(x, y, canvas.width, canvas.height, config.edge_margin)
            )
            displaced += 1

    if displaced:
        logger.debug("Layout pass displaced %d objects (of %d)", displaced, len(objects))

    return [
        obj.model_copy(update={"x": x, "y": y})
        for obj, (x, y) in zip(objects, positions[n_fixed:])
    ]

