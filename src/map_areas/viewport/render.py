"""Renderer-facing glue: cull shapes and hand the visible ones to a renderer."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from map_areas.config import settings
from map_areas.model.area import Area
from map_areas.model.chain import Path, PolyArea
from map_areas.viewport.culling import Shape, is_shape_visible
from map_areas.viewport.projection import Padding, Projection, Viewport

logger = logging.getLogger(__name__)


class ShapeRenderer(ABC):
    """Turns shapes into on-screen primitives. Implemented by the map layer."""

    @abstractmethod
    def draw_area(self, area: Area) -> None:
        ...

    @abstractmethod
    def draw_polygon(self, polygon: PolyArea) -> None:
        ...

    @abstractmethod
    def draw_path(self, path: Path) -> None:
        ...


def render_visible(
    shapes: Iterable[Shape],
    renderer: ShapeRenderer,
    viewport: Viewport,
    projection: Projection,
    padding: Padding | float | None = None,
) -> int:
    """Draw every visible shape and return how many were drawn.

    Each call recomputes visibility from scratch, so callers may drop the
    result of a superseded call. Without an explicit padding the configured
    ``viewport_padding`` applies.
    """
    padding = Padding.coerce(settings.viewport_padding if padding is None else padding)
    drawn = 0
    for shape in shapes:
        if not is_shape_visible(shape, viewport, projection, padding):
            continue
        if isinstance(shape, Area):
            renderer.draw_area(shape)
        elif isinstance(shape, PolyArea):
            renderer.draw_polygon(shape)
        elif isinstance(shape, Path):
            renderer.draw_path(shape)
        else:
            continue
        drawn += 1

    logger.debug("Rendered %d visible shapes", drawn)
    return drawn
