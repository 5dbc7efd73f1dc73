"""POST /api/convert — path() and polygon() outputs, computed independently."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from clippath.config import Settings
from clippath.dependencies import get_settings
from clippath.engine.config import resolve_config
from clippath.engine.converter import convert_both
from clippath.models.requests import ConvertRequest
from clippath.models.responses import ConvertResponse

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
async def convert(req: ConvertRequest, settings: Settings = Depends(get_settings)) -> ConvertResponse:
    quality = req.quality or settings.default_quality
    config = resolve_config(quality, req.curve_segments, req.arc_segments)
    result = convert_both(req.path, config)

    return ConvertResponse(
        clip_path=result.clip_path,
        clip_path_error=result.clip_path_error,
        polygon=result.polygon,
        polygon_error=result.polygon_error,
        point_count=result.point_count,
        quality=quality,
        curve_segments=config.curve_segments,
        arc_segments=config.arc_segments,
    )
