"""Tile-grid geometry: containment, simplification, duplicates and resizing."""

from map_areas.geometry.duplicates import duplicate_groups, duplicate_indices
from map_areas.geometry.polygon import (
    bounding_box,
    contained_tiles,
    containment_mask,
    contains_tile,
)
from map_areas.geometry.resize import Handle, handle_positions, resize_area
from map_areas.geometry.simplify import is_redundant, simplify_positions

__all__ = [
    "Handle",
    "bounding_box",
    "contained_tiles",
    "containment_mask",
    "contains_tile",
    "duplicate_groups",
    "duplicate_indices",
    "handle_positions",
    "is_redundant",
    "resize_area",
    "simplify_positions",
]
