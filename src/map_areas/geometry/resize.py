"""Handle-driven resizing of rectangular areas.

Each of the eight handles is described by which bound it drags on each axis.
The opposite bound on a moving axis stays fixed; an axis the handle does not
drag keeps both bounds. North is +y.
"""

from enum import IntEnum
from typing import Literal

from map_areas.model.area import Area
from map_areas.model.position import Position

Edge = Literal["min", "max"] | None


class Handle(IntEnum):
    """Resize handles: four corners then four edge midpoints."""

    NORTH_WEST = 0
    NORTH_EAST = 1
    SOUTH_EAST = 2
    SOUTH_WEST = 3
    NORTH = 4
    EAST = 5
    SOUTH = 6
    WEST = 7


# handle -> (dragged x bound, dragged y bound)
HANDLE_AXES: dict[Handle, tuple[Edge, Edge]] = {
    Handle.NORTH_WEST: ("min", "max"),
    Handle.NORTH_EAST: ("max", "max"),
    Handle.SOUTH_EAST: ("max", "min"),
    Handle.SOUTH_WEST: ("min", "min"),
    Handle.NORTH: (None, "max"),
    Handle.EAST: ("max", None),
    Handle.SOUTH: (None, "min"),
    Handle.WEST: ("min", None),
}

# Smallest allowed span (max - min) on either axis
MIN_SPAN = 1


def _resize_axis(lo: int, hi: int, edge: Edge, dragged: int) -> tuple[int, int]:
    if edge is None:
        return lo, hi

    fixed = hi if edge == "min" else lo
    new_lo, new_hi = min(fixed, dragged), max(fixed, dragged)

    if new_hi - new_lo < MIN_SPAN:
        if edge == "min":
            return fixed - MIN_SPAN, fixed
        return fixed, fixed + MIN_SPAN
    return new_lo, new_hi


def resize_area(area: Area, handle: Handle | int, dragged: Position) -> Area:
    """Resize ``area`` in place by dragging ``handle`` to ``dragged``.

    The result is stored normalized (start at the min corner). The plane of
    ``dragged`` is ignored.
    """
    x_edge, y_edge = HANDLE_AXES[Handle(handle)]
    min_x, max_x = _resize_axis(area.min_x, area.max_x, x_edge, dragged.x)
    min_y, max_y = _resize_axis(area.min_y, area.max_y, y_edge, dragged.y)

    plane = area.plane
    area.start_position = Position(min_x, min_y, plane)
    area.end_position = Position(max_x, max_y, plane)
    return area


def handle_positions(area: Area) -> list[Position]:
    """Anchor tile of every handle, indexed by :class:`Handle`."""
    mid_x = (area.min_x + area.max_x) // 2
    mid_y = (area.min_y + area.max_y) // 2
    lookup = {"min": (area.min_x, area.min_y), "max": (area.max_x, area.max_y)}

    anchors = []
    for handle in Handle:
        x_edge, y_edge = HANDLE_AXES[handle]
        x = lookup[x_edge][0] if x_edge else mid_x
        y = lookup[y_edge][1] if y_edge else mid_y
        anchors.append(Position(x, y, area.plane))
    return anchors
