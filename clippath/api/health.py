"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from clippath import __version__
from clippath.engine.config import QUALITY_PRESETS
from clippath.engine.registry import get_registry
from clippath.models.responses import HealthResponse, PresetResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        commands_registered=get_registry().count,
    )


@router.get("/presets")
async def presets() -> dict[str, PresetResponse]:
    return {
        quality.value: PresetResponse(
            curve_segments=config.curve_segments,
            arc_segments=config.arc_segments,
        )
        for quality, config in QUALITY_PRESETS.items()
    }
