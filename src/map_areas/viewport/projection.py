"""Projection between tile coordinates and the renderer's projection space.

The map widget owns the real projection; this package only needs something
that can map a tile coordinate to projection units and back. Shapes never hold
a reference to it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shapely.geometry import Polygon, box


class Projection(ABC):
    """Maps tile coordinates to projection space and back."""

    @abstractmethod
    def project(self, x: float, y: float) -> tuple[float, float]:
        ...

    @abstractmethod
    def unproject(self, px: float, py: float) -> tuple[float, float]:
        ...


@dataclass(frozen=True)
class LinearProjection(Projection):
    """Uniform scale with an origin offset (a flat, CRS.Simple-style map)."""

    scale: float = 1.0
    origin_x: float = 0.0
    origin_y: float = 0.0

    def project(self, x: float, y: float) -> tuple[float, float]:
        return (x - self.origin_x) * self.scale, (y - self.origin_y) * self.scale

    def unproject(self, px: float, py: float) -> tuple[float, float]:
        return px / self.scale + self.origin_x, py / self.scale + self.origin_y


@dataclass(frozen=True)
class Viewport:
    """Visible rectangle in projection space."""

    min_px: float
    min_py: float
    max_px: float
    max_py: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.min_px + self.max_px) / 2, (self.min_py + self.max_py) / 2

    def padded(self, amount: float) -> "Viewport":
        if amount <= 0:
            return self
        return Viewport(
            self.min_px - amount,
            self.min_py - amount,
            self.max_px + amount,
            self.max_py + amount,
        )

    def to_box(self) -> Polygon:
        return box(self.min_px, self.min_py, self.max_px, self.max_py)


@dataclass(frozen=True)
class Padding:
    """Viewport padding given explicitly in tiles and/or projection units."""

    tiles: float = 0.0
    projection: float = 0.0

    @classmethod
    def from_magnitude(cls, value: float) -> "Padding":
        """Legacy single-number padding: above 1 means tiles, 0 or less means none."""
        if value > 1:
            return cls(tiles=value)
        if value > 0:
            return cls(projection=value)
        return cls()

    @classmethod
    def coerce(cls, value: "Padding | float") -> "Padding":
        return value if isinstance(value, Padding) else cls.from_magnitude(value)

    def to_projection(self, viewport: Viewport, projection: Projection) -> float:
        """Total padding in projection units for the given viewport.

        Tile padding is measured at the viewport centre, so its size in
        projection units follows the current zoom. Negative amounts count
        as no padding.
        """
        amount = max(self.projection, 0.0)
        if self.tiles > 0:
            cx, cy = viewport.center
            tx, ty = projection.unproject(cx, cy)
            px, py = projection.project(tx + self.tiles, ty + self.tiles)
            amount += max(abs(px - cx), abs(py - cy))
        return amount
