"""Drawing, converting and culling map areas, polygons and paths."""

# model must load before geometry: the chain types import geometry helpers,
# which in turn only import model submodules.
from map_areas.model import Area, AreaCollection, Path, PolyArea, Position, Region
from map_areas.converters import Converter, get_dialect
from map_areas.viewport import LinearProjection, Padding, Viewport, render_visible

__version__ = "0.1.0"

__all__ = [
    "Area",
    "AreaCollection",
    "Converter",
    "LinearProjection",
    "Padding",
    "Path",
    "PolyArea",
    "Position",
    "Region",
    "Viewport",
    "get_dialect",
    "render_visible",
]
