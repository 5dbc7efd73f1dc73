"""CursorState — the mutable interpreter-local drawing state.

Created at the origin when interpretation starts, mutated once per executed
command, discarded when interpretation ends.
"""

from __future__ import annotations

from dataclasses import dataclass

from clippath.utils.geometry import Point


@dataclass
class CursorState:
    # Current draw position
    x: float = 0.0
    y: float = 0.0
    # Point a Z/z closes back to; reset by every M/m
    subpath_start_x: float = 0.0
    subpath_start_y: float = 0.0
    # Reflection anchor for S/s and T/t
    last_control_x: float = 0.0
    last_control_y: float = 0.0
    # Letter of the most recently executed command ("" before the first)
    last_command: str = ""

    @property
    def cursor(self) -> Point:
        return Point(self.x, self.y)

    @property
    def subpath_start(self) -> Point:
        return Point(self.subpath_start_x, self.subpath_start_y)

    def resolve(self, x: float, y: float, relative: bool) -> Point:
        """Absolute point for an operand pair, offset by the cursor when relative."""
        if relative:
            return Point(self.x + x, self.y + y)
        return Point(x, y)

    def move_to(self, point: Point) -> None:
        self.x, self.y = point

    def start_subpath(self, point: Point) -> None:
        self.subpath_start_x, self.subpath_start_y = point

    def set_control(self, point: Point) -> None:
        self.last_control_x, self.last_control_y = point
