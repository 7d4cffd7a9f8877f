"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from realmsketch import __version__
from realmsketch.engine.catalog import TEMPLATES
from realmsketch.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        templates_registered=len(TEMPLATES),
    )
