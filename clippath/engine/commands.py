"""Handlers for the SVG path command set.

Each handler reads its operands, updates the cursor and returns the
absolute points the command contributes, in traversal order.
"""

from __future__ import annotations

from clippath.engine.config import FlattenConfig
from clippath.engine.context import CursorState
from clippath.engine.flatten import cubic_bezier, elliptical_arc, quadratic_bezier
from clippath.engine.registry import Operands, command
from clippath.utils.geometry import Point, reflect, same_point

_XY = ("x-coordinate", "y-coordinate")

# Commands whose final control point S/s and T/t may reflect
_CUBIC_FAMILY = frozenset("CcSs")
_QUADRATIC_FAMILY = frozenset("QqTt")


@command(letter="M", operands=_XY, repeat_as="L", description="Move to; extra pairs are implicit line-tos")
def move_to(state: CursorState, args: Operands, relative: bool, config: FlattenConfig) -> list[Point]:
    target = state.resolve(args[0], args[1], relative)
    state.move_to(target)
    state.start_subpath(target)
    return [target]


@command(letter="L", operands=_XY, description="Line to")
def line_to(state: CursorState, args: Operands, relative: bool, config: FlattenConfig) -> list[Point]:
    target = state.resolve(args[0], args[1], relative)
    state.move_to(target)
    return [target]


@command(letter="H", operands=("x-coordinate",), description="Horizontal line to")
def horizontal_to(state: CursorState, args: Operands, relative: bool, config: FlattenConfig) -> list[Point]:
    target = Point(state.x + args[0] if relative else args[0], state.y)
    state.move_to(target)
    return [target]


@command(letter="V", operands=("y-coordinate",), description="Vertical line to")
def vertical_to(state: CursorState, args: Operands, relative: bool, config: FlattenConfig) -> list[Point]:
    target = Point(state.x, state.y + args[0] if relative else args[0])
    state.move_to(target)
    return [target]


@command(
    letter="C",
    operands=(
        "control point 1 x",
        "control point 1 y",
        "control point 2 x",
        "control point 2 y",
        "end x",
        "end y",
    ),
    description="Cubic Bézier",
)
def cubic_to(state: CursorState, args: Operands, relative: bool, config: FlattenConfig) -> list[Point]:
    c1 = state.resolve(args[0], args[1], relative)
    c2 = state.resolve(args[2], args[3], relative)
    end = state.resolve(args[4], args[5], relative)
    return _cubic(state, c1, c2, end, config)


@command(
    letter="S",
    operands=("control point 2 x", "control point 2 y", "end x", "end y"),
    description="Smooth cubic Bézier",
)
def smooth_cubic_to(state: CursorState, args: Operands, relative: bool, config: FlattenConfig) -> list[Point]:
    if state.last_command in _CUBIC_FAMILY:
        c1 = reflect(state.last_control_x, state.last_control_y, state.x, state.y)
    else:
        c1 = state.cursor
    c2 = state.resolve(args[0], args[1], relative)
    end = state.resolve(args[2], args[3], relative)
    return _cubic(state, c1, c2, end, config)


@command(
    letter="Q",
    operands=("control point x", "control point y", "end x", "end y"),
    description="Quadratic Bézier",
)
def quadratic_to(state: CursorState, args: Operands, relative: bool, config: FlattenConfig) -> list[Point]:
    ctrl = state.resolve(args[0], args[1], relative)
    end = state.resolve(args[2], args[3], relative)
    return _quadratic(state, ctrl, end, config)


@command(letter="T", operands=("end x", "end y"), description="Smooth quadratic Bézier")
def smooth_quadratic_to(state: CursorState, args: Operands, relative: bool, config: FlattenConfig) -> list[Point]:
    if state.last_command in _QUADRATIC_FAMILY:
        ctrl = reflect(state.last_control_x, state.last_control_y, state.x, state.y)
    else:
        ctrl = state.cursor
    end = state.resolve(args[0], args[1], relative)
    return _quadratic(state, ctrl, end, config)


@command(
    letter="A",
    operands=("rx", "ry", "x-axis-rotation", "large-arc-flag", "sweep-flag", "end x", "end y"),
    description="Elliptical arc",
)
def arc_to(state: CursorState, args: Operands, relative: bool, config: FlattenConfig) -> list[Point]:
    rx, ry, rotation, large_arc, sweep = args[:5]
    end = state.resolve(args[5], args[6], relative)
    points = elliptical_arc(
        state.cursor,
        end,
        rx,
        ry,
        rotation,
        large_arc != 0,
        sweep != 0,
        config.arc_segments,
    )
    state.move_to(end)
    return points


@command(letter="Z", description="Close path")
def close_path(state: CursorState, args: Operands, relative: bool, config: FlattenConfig) -> list[Point]:
    start = state.subpath_start
    if same_point(state.cursor, start):
        return []
    state.move_to(start)
    return [start]


def _cubic(state: CursorState, c1: Point, c2: Point, end: Point, config: FlattenConfig) -> list[Point]:
    points = cubic_bezier(state.cursor, c1, c2, end, config.curve_segments)
    state.set_control(c2)
    state.move_to(end)
    return points


def _quadratic(state: CursorState, ctrl: Point, end: Point, config: FlattenConfig) -> list[Point]:
    points = quadratic_bezier(state.cursor, ctrl, end, config.curve_segments)
    state.set_control(ctrl)
    state.move_to(end)
    return points
