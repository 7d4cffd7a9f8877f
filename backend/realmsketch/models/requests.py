"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from realmsketch.models.scene import CanvasSize


class _CamelRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class GenerateRequest(_CamelRequest):
    prompt: str = Field(..., description="Free-text scene description")
    canvas_size: CanvasSize = Field(..., alias="canvasSize", description="Target canvas")
    # Raw dicts: the engine validates entries and reports malformed ones as 400s
    existing_objects: list[dict[str, Any]] = Field(
        default_factory=list,
        alias="existingObjects",
        description="Objects already on the canvas; new objects are laid out around them",
    )


class SceneRequest(_CamelRequest):
    objects: list[dict[str, Any]] = Field(default_factory=list, description="Current scene objects")
    canvas_size: CanvasSize = Field(..., alias="canvasSize", description="Canvas the objects live on")


class ClassifyRequest(BaseModel):
    prompt: str = Field(..., description="Free-text scene description")
