"""POST /api/generate and /api/classify: prompt to scene objects."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from realmsketch.dependencies import get_engine
from realmsketch.engine.classifier import PromptAnalysis
from realmsketch.engine.pipeline import SceneEngine
from realmsketch.models.requests import ClassifyRequest, GenerateRequest
from realmsketch.models.responses import AnalysisResponse, GenerateResponse

router = APIRouter()


def _analysis_response(analysis: PromptAnalysis) -> AnalysisResponse:
    return AnalysisResponse(**analysis.to_dict())


@router.post("/generate", response_model=GenerateResponse)
def generate(req: GenerateRequest, engine: SceneEngine = Depends(get_engine)) -> GenerateResponse:
    start = time.perf_counter()

    ctx = engine.run(req.prompt, req.canvas_size, req.existing_objects)

    elapsed = (time.perf_counter() - start) * 1000

    return GenerateResponse(
        objects=ctx.objects,
        analysis=_analysis_response(ctx.analysis) if ctx.analysis else None,
        source=ctx.source,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/classify", response_model=AnalysisResponse)
def classify(req: ClassifyRequest, engine: SceneEngine = Depends(get_engine)) -> AnalysisResponse:
    return _analysis_response(engine.classify(req.prompt))
