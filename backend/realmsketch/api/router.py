"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from realmsketch.api import generate, health, scene, templates

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(generate.router)
api_router.include_router(scene.router)
api_router.include_router(templates.router)
