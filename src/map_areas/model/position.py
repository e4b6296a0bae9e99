"""Tile positions and their packed integer form."""

from dataclasses import dataclass

PLANE_COUNT = 4

# Packed layout: 2 bits plane | 14 bits x | 14 bits y
_COORD_BITS = 14
_COORD_MASK = (1 << _COORD_BITS) - 1
_PLANE_SHIFT = _COORD_BITS * 2
_PLANE_MASK = PLANE_COUNT - 1

MAX_COORD = _COORD_MASK


@dataclass(frozen=True)
class Position:
    """A tile coordinate in the world grid.

    Attributes:
        x: Tile column, 0 at the west edge of the world.
        y: Tile row, grows northward.
        z: Plane (vertical layer), 0-3.
    """

    x: int
    y: int
    z: int = 0

    def pack(self) -> int:
        """Pack into a single 30-bit integer, usable as a lookup key."""
        return (
            ((self.z & _PLANE_MASK) << _PLANE_SHIFT)
            | ((self.x & _COORD_MASK) << _COORD_BITS)
            | (self.y & _COORD_MASK)
        )

    @classmethod
    def unpack(cls, packed: int) -> "Position":
        """Inverse of :meth:`pack`."""
        return cls(
            x=(packed >> _COORD_BITS) & _COORD_MASK,
            y=packed & _COORD_MASK,
            z=(packed >> _PLANE_SHIFT) & _PLANE_MASK,
        )

    def translate(self, dx: int, dy: int) -> "Position":
        """Return this position shifted by (dx, dy) on the same plane."""
        return Position(self.x + dx, self.y + dy, self.z)

    def with_plane(self, z: int) -> "Position":
        return Position(self.x, self.y, z)

    def is_valid(self) -> bool:
        """True when every component fits the packed range."""
        return (
            0 <= self.x <= MAX_COORD
            and 0 <= self.y <= MAX_COORD
            and 0 <= self.z < PLANE_COUNT
        )
