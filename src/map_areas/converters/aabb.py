"""Axis-aligned boxes and region boxes: the canonical interchange shapes."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from map_areas.model.area import Area
from map_areas.model.position import Position
from map_areas.model.region import REGION_SIZE, Region

logger = logging.getLogger(__name__)

# Sentinel plane bounds meaning "every plane"
PLANE_MIN = -(2**53 - 1)
PLANE_MAX = 2**53 - 1


@dataclass(frozen=True)
class AABB:
    """Inclusive tile box with a plane range."""

    min_x: int
    min_y: int
    min_z: int
    max_x: int
    max_y: int
    max_z: int

    @classmethod
    def of(cls, *values: int) -> "AABB":
        """Build a box from 1-6 positional values.

        1: region id, all planes
        2: (x, y), all planes
        3: (x, y, z)
        4: (x1, y1, x2, y2), all planes
        5: (x1, y1, x2, y2, z)
        6: (x1, y1, z1, x2, y2, z2)
        """
        n = len(values)
        if n == 1:
            return cls.from_region(values[0])
        if n == 2:
            x, y = values
            return cls(x, y, PLANE_MIN, x, y, PLANE_MAX)
        if n == 3:
            x, y, z = values
            return cls(x, y, z, x, y, z)
        if n == 4:
            x1, y1, x2, y2 = values
            return cls(min(x1, x2), min(y1, y2), PLANE_MIN, max(x1, x2), max(y1, y2), PLANE_MAX)
        if n == 5:
            x1, y1, x2, y2, z = values
            return cls(min(x1, x2), min(y1, y2), z, max(x1, x2), max(y1, y2), z)
        if n == 6:
            x1, y1, z1, x2, y2, z2 = values
            return cls(
                min(x1, x2), min(y1, y2), min(z1, z2),
                max(x1, x2), max(y1, y2), max(z1, z2),
            )
        raise ValueError(f"Invalid number of values for AABB: {n}")

    @classmethod
    def from_region(cls, region_id: int) -> "AABB":
        base = Region(region_id).base_position()
        return cls(
            base.x, base.y, PLANE_MIN,
            base.x + REGION_SIZE - 1, base.y + REGION_SIZE - 1, PLANE_MAX,
        )

    @classmethod
    def from_canonical(cls, values: Sequence[int]) -> "AABB | None":
        """Interchange tuple: ``[minX, minY, maxX, maxY]`` (plane 0) or the
        6-value form with the plane in positions 3 and 6.

        Returns None for other lengths or when the two planes differ.
        """
        if len(values) == 4:
            x1, y1, x2, y2 = values
            return cls.of(x1, y1, 0, x2, y2, 0)
        if len(values) == 6:
            if values[2] != values[5]:
                logger.warning("Ignoring AABB with mismatched planes: %s", list(values))
                return None
            return cls.of(*values)
        logger.debug("Ignoring AABB with %d values: %s", len(values), list(values))
        return None

    @classmethod
    def from_area(cls, area: Area) -> "AABB":
        return cls(area.min_x, area.min_y, area.plane, area.max_x, area.max_y, area.plane)

    @property
    def is_all_planes(self) -> bool:
        return self.min_z == PLANE_MIN and self.max_z == PLANE_MAX

    @property
    def plane(self) -> int:
        """Single plane of the box; 0 when it spans every plane."""
        return 0 if self.is_all_planes else self.min_z

    def to_area(self) -> Area:
        return Area(
            Position(self.min_x, self.min_y, self.plane),
            Position(self.max_x, self.max_y, self.plane),
        )

    def to_canonical(self) -> list[int]:
        plane = self.plane
        if plane > 0:
            return [self.min_x, self.min_y, plane, self.max_x, self.max_y, plane]
        return [self.min_x, self.min_y, self.max_x, self.max_y]


@dataclass(frozen=True)
class RegionBox:
    """A rectangle of whole regions spanned by two packed region ids, on plane 0."""

    from_id: int
    to_id: int

    def to_aabb(self) -> AABB:
        first, second = Region(self.from_id), Region(self.to_id)
        x1, x2 = sorted((first.chunk_x, second.chunk_x))
        y1, y2 = sorted((first.chunk_y, second.chunk_y))
        return AABB(
            x1 * REGION_SIZE,
            y1 * REGION_SIZE,
            0,
            (x2 + 1) * REGION_SIZE - 1,
            (y2 + 1) * REGION_SIZE - 1,
            0,
        )
