"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from realmsketch import __version__
from realmsketch.models.scene import SceneObject


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__
    templates_registered: int = 0


class AnalysisResponse(BaseModel):
    theme: str
    mood: str
    elements: list[str] = Field(default_factory=list)
    complexity: str
    word_count: int = 0


class GenerateResponse(BaseModel):
    objects: list[SceneObject]
    analysis: AnalysisResponse | None = None
    source: str = ""
    processing_time_ms: float = 0.0


class LayoutResponse(BaseModel):
    objects: list[SceneObject]


class SuggestResponse(BaseModel):
    suggestions: list[str] = Field(default_factory=list, max_length=4)


class InspectResponse(BaseModel):
    object_count: int = 0
    type_counts: dict[str, int] = Field(default_factory=dict)
    crowded_pairs: int = 0
    out_of_bounds: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    performance_rating: str = ""
    estimated_size: str = ""
    score: int = 100


class TemplateObjectInfo(BaseModel):
    type: str
    x: float
    y: float
    rotation: float
    scale: float
    color: str


class TemplateInfo(BaseModel):
    key: str
    name: str
    description: str
    objects: list[TemplateObjectInfo] = Field(default_factory=list)


class TemplatesResponse(BaseModel):
    templates: list[TemplateInfo] = Field(default_factory=list)
