"""Tests for the public conversion entry points."""

import pytest

from clippath.engine.config import FlattenConfig
from clippath.engine.converter import convert_both, extract_points, to_clip_path, to_polygon
from clippath.engine.errors import InterpretError, PolygonError, TokenizeError, ValidationError
from tests.conftest import CIRCLE_PATH, HEART_PATH, SQUARE_PATH


def test_clip_path_embeds_trimmed_text():
    assert to_clip_path("  M0 0 L10 10 Z \n") == "clip-path: path('M0 0 L10 10 Z');"


def test_clip_path_does_not_parse_grammar():
    assert to_clip_path("M 10 X 20") == "clip-path: path('M 10 X 20');"


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_clip_path_rejects_blank(text):
    with pytest.raises(ValidationError) as exc:
        to_clip_path(text)
    assert str(exc.value) == "SVG path cannot be empty"


def test_clip_path_requires_command_letter():
    with pytest.raises(ValidationError):
        to_clip_path("10 20 30")


def test_polygon_square():
    assert to_polygon(SQUARE_PATH) == "clip-path: polygon(0% 0%, 100% 0%, 100% 100%, 0% 100%, 0% 0%);"


def test_polygon_single_point_is_insufficient():
    with pytest.raises(PolygonError) as exc:
        to_polygon("M10,10Z")
    assert exc.value.point_count == 1


def test_polygon_passes_through_tokenize_error():
    with pytest.raises(TokenizeError) as exc:
        to_polygon("M 10 X 20")
    assert exc.value.text == "X"


def test_polygon_passes_through_interpret_error():
    with pytest.raises(InterpretError):
        to_polygon("10 10 20 20")


def test_polygon_rejects_overflowing_number():
    with pytest.raises(TokenizeError) as exc:
        to_polygon("M0 0 L1e400 0 L0 1 Z")
    assert exc.value.text == "1e400"


def test_polygon_rejects_blank():
    with pytest.raises(ValidationError):
        to_polygon(" ")


@pytest.mark.parametrize("quality, count", [("low", 17), ("medium", 33), ("high", 65), (None, 33)])
def test_quality_presets_scale_arc_points(quality, count):
    # Two arcs back to the start; the closing Z is a no-op
    assert len(extract_points(CIRCLE_PATH, quality)) == count


def test_explicit_config():
    points = extract_points("M0 0 C 0 10 10 10 10 0 A 5 5 0 0 1 20 0", FlattenConfig(curve_segments=2, arc_segments=3))
    assert len(points) == 1 + 2 + 3


def test_polygon_is_idempotent(circle_path):
    assert to_polygon(HEART_PATH, "high") == to_polygon(HEART_PATH, "high")
    assert to_polygon(circle_path) == to_polygon(circle_path)


def test_convert_both_reports_independently():
    result = convert_both("M 10 X 20")
    assert result.clip_path == "clip-path: path('M 10 X 20');"
    assert result.clip_path_error == ""
    assert result.polygon == ""
    assert '"X"' in result.polygon_error


def test_convert_both_clip_path_survives_too_few_points():
    result = convert_both("M 0 0 L 10 10")
    assert result.clip_path == "clip-path: path('M 0 0 L 10 10');"
    assert "insufficient points" in result.polygon_error


def test_convert_both_no_command_letter():
    result = convert_both("123 456")
    assert result.clip_path == ""
    assert result.clip_path_error
    assert result.polygon == ""
    assert result.polygon_error


def test_convert_both_blank_input_is_silent():
    result = convert_both("   ")
    assert result.clip_path == result.polygon == ""
    assert result.clip_path_error == result.polygon_error == ""


def test_convert_both_success(square_path):
    result = convert_both(square_path)
    assert result.clip_path == f"clip-path: path('{square_path}');"
    assert result.polygon.startswith("clip-path: polygon(0% 0%")
    assert result.point_count == 5
