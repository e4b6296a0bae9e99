"""Regions: fixed 64x64 tile chunks addressed by a packed 16-bit id."""

from dataclasses import dataclass

from map_areas.model.position import Position

# Conventional world extent in tiles
MIN_X = 1024
MAX_X = 4224
MIN_Y = 1216
MAX_Y = 12608

REGION_SIZE = 64
_REGION_SHIFT = 6


def is_in_world(position: Position) -> bool:
    """Check whether a position lies inside the conventional world bounds."""
    return MIN_X <= position.x <= MAX_X and MIN_Y <= position.y <= MAX_Y


@dataclass(frozen=True)
class Region:
    """A 64x64 chunk: ``id = (chunk_x << 8) | chunk_y``."""

    id: int

    @classmethod
    def from_chunk(cls, chunk_x: int, chunk_y: int) -> "Region":
        return cls((chunk_x << 8) | (chunk_y & 0xFF))

    @classmethod
    def from_coordinates(cls, x: int, y: int) -> "Region":
        return cls.from_chunk(x >> _REGION_SHIFT, y >> _REGION_SHIFT)

    @classmethod
    def from_position(cls, position: Position) -> "Region":
        return cls.from_coordinates(position.x, position.y)

    @property
    def chunk_x(self) -> int:
        return self.id >> 8

    @property
    def chunk_y(self) -> int:
        return self.id & 0xFF

    def base_position(self, plane: int = 0) -> Position:
        """The chunk-aligned south-west corner tile."""
        return Position(
            self.chunk_x << _REGION_SHIFT,
            self.chunk_y << _REGION_SHIFT,
            plane,
        )

    def centre_position(self, plane: int = 0) -> Position:
        base = self.base_position(plane)
        return base.translate(REGION_SIZE // 2, REGION_SIZE // 2)

    def contains(self, position: Position) -> bool:
        base = self.base_position()
        return (
            base.x <= position.x < base.x + REGION_SIZE
            and base.y <= position.y < base.y + REGION_SIZE
        )
