"""POST /api/suggest, /api/layout, /api/inspect: operations on the caller's current scene."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from realmsketch.dependencies import get_engine
from realmsketch.engine.pipeline import SceneEngine
from realmsketch.models.requests import SceneRequest
from realmsketch.models.responses import InspectResponse, LayoutResponse, SuggestResponse

router = APIRouter()


@router.post("/suggest", response_model=SuggestResponse)
def suggest(req: SceneRequest, engine: SceneEngine = Depends(get_engine)) -> SuggestResponse:
    return SuggestResponse(suggestions=engine.suggest(req.objects, req.canvas_size))


@router.post("/layout", response_model=LayoutResponse)
def layout(req: SceneRequest, engine: SceneEngine = Depends(get_engine)) -> LayoutResponse:
    return LayoutResponse(objects=engine.resolve(req.objects, req.canvas_size))


@router.post("/inspect", response_model=InspectResponse)
def inspect(req: SceneRequest, engine: SceneEngine = Depends(get_engine)) -> InspectResponse:
    report = engine.inspect(req.objects, req.canvas_size)
    return InspectResponse(
        object_count=report.object_count,
        type_counts=report.type_counts,
        crowded_pairs=report.crowded_pairs,
        out_of_bounds=report.out_of_bounds,
        warnings=report.warnings,
        performance_rating=report.performance_rating,
        estimated_size=report.estimated_size,
        score=report.score,
    )
