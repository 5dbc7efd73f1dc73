"""Clip-path conversion engine."""

from clippath.engine.config import QUALITY_PRESETS, FlattenConfig, Quality, resolve_config
from clippath.engine.converter import ConversionResult, convert_both, to_clip_path, to_polygon
from clippath.engine.errors import (
    InterpretError,
    PathConversionError,
    PolygonError,
    TokenizeError,
    ValidationError,
)

__all__ = [
    "FlattenConfig",
    "Quality",
    "QUALITY_PRESETS",
    "resolve_config",
    "ConversionResult",
    "convert_both",
    "to_clip_path",
    "to_polygon",
    "PathConversionError",
    "TokenizeError",
    "InterpretError",
    "PolygonError",
    "ValidationError",
]
