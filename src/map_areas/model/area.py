"""Axis-aligned rectangular areas and their ordered collection."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from map_areas.model.position import Position


@dataclass(frozen=True)
class TileBounds:
    """Inclusive tile bounds on a single plane."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def intersects(self, other: "TileBounds") -> bool:
        return (
            self.min_x <= other.max_x
            and other.min_x <= self.max_x
            and self.min_y <= other.max_y
            and other.min_y <= self.max_y
        )


@dataclass
class Area:
    """A rectangle between two corner positions.

    The corners may be stored un-ordered; the min/max accessors normalize on
    demand. The plane is taken from ``start_position``.
    """

    start_position: Position
    end_position: Position

    @property
    def min_x(self) -> int:
        return min(self.start_position.x, self.end_position.x)

    @property
    def max_x(self) -> int:
        return max(self.start_position.x, self.end_position.x)

    @property
    def min_y(self) -> int:
        return min(self.start_position.y, self.end_position.y)

    @property
    def max_y(self) -> int:
        return max(self.start_position.y, self.end_position.y)

    @property
    def plane(self) -> int:
        return self.start_position.z

    @property
    def width(self) -> int:
        """Width in tiles (both edges inclusive)."""
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def bounds(self) -> TileBounds:
        return TileBounds(self.min_x, self.min_y, self.max_x, self.max_y)

    def normalized(self) -> "Area":
        """Return a copy with start at the min corner and end at the max corner."""
        return Area(
            Position(self.min_x, self.min_y, self.plane),
            Position(self.max_x, self.max_y, self.plane),
        )

    def contains(self, position: Position) -> bool:
        return position.z == self.plane and self.bounds().contains(position.x, position.y)

    def intersects(self, other: "Area") -> bool:
        """Same plane and overlapping inclusive bounds."""
        return self.plane == other.plane and self.bounds().intersects(other.bounds())

    def move(self, dx: int, dy: int) -> None:
        """Translate both corners in place; the plane is kept."""
        self.start_position = self.start_position.translate(dx, dy)
        self.end_position = self.end_position.translate(dx, dy)


def find_overlaps(areas: Iterable[Area]) -> list[tuple[int, int]]:
    """Return index pairs ``(i, j)``, ``i < j``, of overlapping areas."""
    items = list(areas)
    overlaps: list[tuple[int, int]] = []
    for i, first in enumerate(items):
        for j in range(i + 1, len(items)):
            if first.intersects(items[j]):
                overlaps.append((i, j))
    return overlaps


@dataclass
class AreaCollection:
    """An ordered, mutable list of areas (the drawable for rectangle tools)."""

    areas: list[Area] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.areas)

    def __iter__(self) -> Iterator[Area]:
        return iter(self.areas)

    def __getitem__(self, index: int) -> Area:
        return self.areas[index]

    def add(self, area: Area) -> None:
        self.areas.append(area)

    def add_all(self, areas: Iterable[Area]) -> None:
        self.areas.extend(areas)

    def remove_last(self) -> Area | None:
        if self.areas:
            return self.areas.pop()
        return None

    def remove_all(self) -> None:
        self.areas.clear()

    def replace_all(self, areas: Iterable[Area]) -> None:
        """Clear and append in one step, used to commit a finished decode."""
        self.areas = list(areas)

    def overlapping_pairs(self) -> list[tuple[int, int]]:
        return find_overlaps(self.areas)
