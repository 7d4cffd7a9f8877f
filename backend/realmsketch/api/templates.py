"""GET /api/templates: prefab catalog listing."""

from __future__ import annotations

from fastapi import APIRouter

from realmsketch.engine.catalog import list_templates
from realmsketch.models.responses import TemplateInfo, TemplateObjectInfo, TemplatesResponse

router = APIRouter()


@router.get("/templates", response_model=TemplatesResponse)
async def templates() -> TemplatesResponse:
    return TemplatesResponse(
        templates=[
            TemplateInfo(
                key=t.key,
                name=t.name,
                description=t.description,
                objects=[
                    TemplateObjectInfo(
                        type=o.type, x=o.x, y=o.y, rotation=o.rotation, scale=o.scale, color=o.color
                    )
                    for o in t.objects
                ],
            )
            for t in list_templates()
        ]
    )
