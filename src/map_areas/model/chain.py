"""Vertex chains: closed polygons and open paths."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from map_areas.geometry.duplicates import duplicate_indices
from map_areas.geometry.polygon import contained_tiles, contains_tile
from map_areas.geometry.simplify import simplify_positions
from map_areas.model.position import Position


@dataclass
class VertexChain:
    """An ordered list of positions.

    All vertices are expected to share one plane; this is not enforced.
    """

    positions: list[Position] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __getitem__(self, index: int) -> Position:
        return self.positions[index]

    @property
    def plane(self) -> int:
        return self.positions[0].z if self.positions else 0

    def is_empty(self) -> bool:
        return not self.positions

    def add(self, position: Position) -> None:
        self.positions.append(position)

    def add_all(self, positions: Iterable[Position]) -> None:
        self.positions.extend(positions)

    def remove_last(self) -> Position | None:
        if self.positions:
            return self.positions.pop()
        return None

    def remove_all(self) -> None:
        self.positions.clear()

    def replace_all(self, positions: Iterable[Position]) -> None:
        self.positions = list(positions)

    def set_vertex(self, index: int, position: Position) -> None:
        """Replace one vertex, as when a handle is dragged.

        Raises:
            IndexError: No vertex at ``index``.
        """
        self.positions[index] = position

    def move(self, dx: int, dy: int) -> None:
        self.positions = [pos.translate(dx, dy) for pos in self.positions]

    def vertices(self) -> list[tuple[int, int]]:
        return [(pos.x, pos.y) for pos in self.positions]

    def duplicate_indices(self) -> list[int]:
        return duplicate_indices(self.positions)

    def _contained_tiles(self) -> list[Position]:
        plane = self.plane
        return [Position(x, y, plane) for x, y in contained_tiles(self.vertices())]


class PolyArea(VertexChain):
    """A closed vertex loop."""

    def contains(self, position: Position) -> bool:
        """Whether the tile at ``position`` is enclosed (plane is not checked)."""
        return contains_tile(position.x, position.y, self.vertices())

    def contained_tiles(self) -> list[Position]:
        return self._contained_tiles()


class Path(VertexChain):
    """An open vertex chain."""

    def simplify(self) -> int:
        """Drop redundant interior points in place; returns how many were removed."""
        simplified = simplify_positions(self.positions)
        removed = len(self.positions) - len(simplified)
        self.positions = simplified
        return removed

    def contained_tiles(self) -> list[Position]:
        """Tiles enclosed when the path is treated as implicitly closed.

        This is a preview of the area a path outlines; it needs at least three
        points and is empty otherwise.
        """
        if len(self.positions) < 3:
            return []
        return self._contained_tiles()
