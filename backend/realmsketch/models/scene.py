"""Scene object model: the unit of generation output and layout resolution."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CanvasSize(BaseModel):
    width: float = Field(..., description="Canvas width in editor units")
    height: float = Field(..., description="Canvas height in editor units")

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)


class SceneObject(BaseModel):
    """A placeable object on the world-builder canvas.

    Objects returned by the engine belong to the caller, which may move,
    rotate or rescale them freely.
    """

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    id: str
    type: str  # element tag: tree, crystal, rock, portal, house, tower, ...
    x: float
    y: float
    rotation: float  # degrees, [0, 360)
    scale: float = Field(..., gt=0)  # nominally [0.6, 2.0]
    color: str  # hex presentation hint, e.g. "#22c55e"
    reasoning: str | None = None  # provenance, for debugging only
