"""Viewport visibility predicates for the renderer.

All tests are inclusive: a shape that merely touches the padded viewport edge
counts as visible.
"""

import math
from collections.abc import Sequence

from shapely.geometry import Point, box

from map_areas.config import settings
from map_areas.model.area import Area, TileBounds
from map_areas.model.chain import VertexChain
from map_areas.model.position import Position
from map_areas.viewport.projection import Padding, Projection, Viewport

Shape = Position | Area | VertexChain


def _padded_box(viewport: Viewport, projection: Projection, padding: Padding | float):
    amount = Padding.coerce(padding).to_projection(viewport, projection)
    return viewport.padded(amount).to_box()


def _bounds_box(points: Sequence[tuple[float, float]]):
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return box(min(xs), min(ys), max(xs), max(ys))


def projected_area_box(area: Area, projection: Projection):
    """Projected bounds of an area; the max edges are extended by one tile."""
    return _bounds_box([
        projection.project(area.min_x, area.min_y),
        projection.project(area.max_x + 1, area.max_y + 1),
    ])


def is_position_in_viewport(
    viewport: Viewport,
    projection: Projection,
    position: Position,
    padding: Padding | float = 0.0,
) -> bool:
    px, py = projection.project(position.x, position.y)
    return _padded_box(viewport, projection, padding).intersects(Point(px, py))


def is_area_in_viewport(
    viewport: Viewport,
    projection: Projection,
    area: Area,
    padding: Padding | float = 0.0,
) -> bool:
    return _padded_box(viewport, projection, padding).intersects(
        projected_area_box(area, projection)
    )


def is_polygon_in_viewport(
    viewport: Viewport,
    projection: Projection,
    positions: Sequence[Position],
    padding: Padding | float = 0.0,
) -> bool:
    """Vertex-in-viewport fast path, then a bounding-box intersection test."""
    if not positions:
        return False

    unpadded = viewport.to_box()
    projected = [projection.project(pos.x, pos.y) for pos in positions]
    if any(unpadded.intersects(Point(px, py)) for px, py in projected):
        return True

    return _padded_box(viewport, projection, padding).intersects(_bounds_box(projected))


def is_shape_visible(
    shape: Shape,
    viewport: Viewport,
    projection: Projection,
    padding: Padding | float | None = None,
) -> bool:
    """Dispatch on the shape type. Padding defaults to ``settings.viewport_padding``."""
    if padding is None:
        padding = settings.viewport_padding
    if isinstance(shape, Position):
        return is_position_in_viewport(viewport, projection, shape, padding)
    if isinstance(shape, Area):
        return is_area_in_viewport(viewport, projection, shape, padding)
    if isinstance(shape, VertexChain):
        return is_polygon_in_viewport(viewport, projection, shape.positions, padding)
    raise TypeError(f"Unsupported shape type: {type(shape).__name__}")


def viewport_tile_bounds(viewport: Viewport, projection: Projection) -> TileBounds:
    """The viewport's extent in whole tiles."""
    x1, y1 = projection.unproject(viewport.min_px, viewport.min_py)
    x2, y2 = projection.unproject(viewport.max_px, viewport.max_py)
    return TileBounds(
        math.floor(min(x1, x2)),
        math.floor(min(y1, y2)),
        math.floor(max(x1, x2)),
        math.floor(max(y1, y2)),
    )
