"""Flattening configuration — controls polygon fidelity, never shape correctness."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Quality(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class FlattenConfig:
    """Fixed segment counts used when flattening curves into polylines."""

    # Segments per cubic/quadratic Bézier command
    curve_segments: int = 8
    # Segments per elliptical arc command
    arc_segments: int = 16

    def __post_init__(self) -> None:
        for name in ("curve_segments", "arc_segments"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


QUALITY_PRESETS: dict[Quality, FlattenConfig] = {
    Quality.LOW: FlattenConfig(curve_segments=4, arc_segments=8),
    Quality.MEDIUM: FlattenConfig(curve_segments=8, arc_segments=16),
    Quality.HIGH: FlattenConfig(curve_segments=16, arc_segments=32),
}

DEFAULT_QUALITY = Quality.MEDIUM


def resolve_config(
    quality: Quality | str | None = None,
    curve_segments: int | None = None,
    arc_segments: int | None = None,
) -> FlattenConfig:
    """Start from a preset and apply any direct segment-count overrides."""
    preset = QUALITY_PRESETS[Quality(quality) if quality is not None else DEFAULT_QUALITY]
    return FlattenConfig(
        curve_segments=preset.curve_segments if curve_segments is None else curve_segments,
        arc_segments=preset.arc_segments if arc_segments is None else arc_segments,
    )
