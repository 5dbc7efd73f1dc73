"""Public entry points — raw path text → CSS clip-path declarations.

``to_clip_path`` and ``to_polygon`` share no state and never depend on each
other's success. ``convert_both`` is the coordinating caller that runs the
two independently and reports each outcome separately.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from clippath.engine.config import FlattenConfig, Quality, resolve_config
from clippath.engine.errors import PathConversionError, ValidationError
from clippath.engine.interpreter import interpret
from clippath.engine.normalize import emit_polygon
from clippath.engine.tokenizer import tokenize
from clippath.utils.geometry import Point

logger = logging.getLogger(__name__)

_COMMAND_LETTER_RE = re.compile(r"[MmLlHhVvCcSsQqTtAaZz]")

Options = FlattenConfig | Quality | str | None


def _require_text(raw_path: str | None) -> str:
    if not raw_path or not raw_path.strip():
        raise ValidationError("SVG path cannot be empty")
    return raw_path.strip()


def _as_config(options: Options) -> FlattenConfig:
    if isinstance(options, FlattenConfig):
        return options
    return resolve_config(options)


def to_clip_path(raw_path: str) -> str:
    """Wrap the trimmed path text in ``clip-path: path('...')`` after a shallow letter check."""
    text = _require_text(raw_path)
    if not _COMMAND_LETTER_RE.search(text):
        raise ValidationError("Invalid SVG path format: no path command letter found")
    return f"clip-path: path('{text}');"


def extract_points(raw_path: str, options: Options = None) -> list[Point]:
    """Tokenize and interpret the path into absolute path-space points."""
    text = _require_text(raw_path)
    return interpret(tokenize(text), _as_config(options))


def to_polygon(raw_path: str, options: Options = None) -> str:
    """Flatten the path and emit ``clip-path: polygon(...)`` in percentage coordinates.

    ``options`` may be a FlattenConfig, a quality preset name, or None for the
    default preset. Raises the most specific stage error on failure.
    """
    points = extract_points(raw_path, options)
    return f"clip-path: polygon({emit_polygon(points)});"


@dataclass
class ConversionResult:
    clip_path: str = ""
    clip_path_error: str = ""
    polygon: str = ""
    polygon_error: str = ""
    point_count: int = 0


def convert_both(raw_path: str, options: Options = None) -> ConversionResult:
    """Run both conversions independently; one failing never hides the other."""
    result = ConversionResult()
    if not raw_path or not raw_path.strip():
        return result

    try:
        result.clip_path = to_clip_path(raw_path)
    except PathConversionError as e:
        result.clip_path_error = str(e)
        logger.info("Path conversion failed: %s", e)

    try:
        points = extract_points(raw_path, options)
        result.polygon = f"clip-path: polygon({emit_polygon(points)});"
        result.point_count = len(points)
    except PathConversionError as e:
        result.polygon_error = str(e)
        logger.info("Polygon conversion failed (%s): %s", e.kind, e)

    return result
