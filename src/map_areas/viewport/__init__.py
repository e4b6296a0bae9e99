"""Viewport culling for the map renderer."""

from map_areas.viewport.culling import (
    is_area_in_viewport,
    is_polygon_in_viewport,
    is_position_in_viewport,
    is_shape_visible,
    viewport_tile_bounds,
)
from map_areas.viewport.projection import LinearProjection, Padding, Projection, Viewport
from map_areas.viewport.render import ShapeRenderer, render_visible

__all__ = [
    "LinearProjection",
    "Padding",
    "Projection",
    "ShapeRenderer",
    "Viewport",
    "is_area_in_viewport",
    "is_polygon_in_viewport",
    "is_position_in_viewport",
    "is_shape_visible",
    "render_visible",
    "viewport_tile_bounds",
]
