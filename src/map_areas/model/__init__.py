"""Core shape types: positions, regions, areas and vertex chains."""

from map_areas.model.position import PLANE_COUNT, Position
from map_areas.model.region import MAX_X, MAX_Y, MIN_X, MIN_Y, Region, is_in_world
from map_areas.model.area import Area, AreaCollection, TileBounds, find_overlaps
from map_areas.model.chain import Path, PolyArea, VertexChain

__all__ = [
    "Area",
    "AreaCollection",
    "MAX_X",
    "MAX_Y",
    "MIN_X",
    "MIN_Y",
    "PLANE_COUNT",
    "Path",
    "PolyArea",
    "Position",
    "Region",
    "TileBounds",
    "VertexChain",
    "find_overlaps",
    "is_in_world",
]
