"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample path data

SQUARE_PATH = "M 10 10 L 90 10 L 90 90 L 10 90 Z"

COMPACT_SQUARE_PATH = "M10,10L90,10L90,90L10,90Z"

# Lucide "home" outline: relative lines, arcs with compact flags, H/V, z
HOME_PATH = "M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"

# Lucide "smile" mouth: smooth cubic after relative cubic
SMILE_PATH = "M8 14s1.5 2 4 2 4-2 4-2"

HEART_PATH = "M 50 90 C 20 70 0 50 0 30 C 0 10 20 0 35 0 C 45 0 50 10 50 15 C 50 10 55 0 65 0 C 80 0 100 10 100 30 C 100 50 80 70 50 90 Z"

CIRCLE_PATH = "M 50 0 A 50 50 0 1 1 50 100 A 50 50 0 1 1 50 0 Z"

WAVE_PATH = "M 0 50 Q 25 0 50 50 T 100 50 L 100 100 L 0 100 Z"

ARC_PATH = "M0,0 A 50 50 0 0 1 100 100"


@pytest.fixture
def square_path() -> str:
    return SQUARE_PATH


@pytest.fixture
def circle_path() -> str:
    return CIRCLE_PATH
