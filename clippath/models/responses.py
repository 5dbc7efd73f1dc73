"""API response models."""

from __future__ import annotations

from pydantic import BaseModel

from clippath.engine.config import Quality


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    commands_registered: int = 0


class PresetResponse(BaseModel):
    curve_segments: int
    arc_segments: int


class ConvertResponse(BaseModel):
    # Empty string when the conversion failed or the input was blank
    clip_path: str = ""
    clip_path_error: str = ""
    polygon: str = ""
    polygon_error: str = ""
    point_count: int = 0
    quality: Quality = Quality.MEDIUM
    curve_segments: int = 8
    arc_segments: int = 16
