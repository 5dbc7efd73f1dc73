"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from clippath.engine.config import Quality


class ConvertRequest(BaseModel):
    path: str = Field(..., description="SVG path data (the d attribute)")
    quality: Quality | None = Field(
        default=None,
        description="Flattening preset (low, medium, high); server default when omitted",
    )
    curve_segments: int | None = Field(default=None, gt=0, description="Segments per Bézier curve")
    arc_segments: int | None = Field(default=None, gt=0, description="Segments per elliptical arc")
