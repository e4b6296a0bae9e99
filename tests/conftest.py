"""Pytest configuration and fixtures for map_areas tests."""

import pytest

from map_areas.model import Area, AreaCollection, Path, PolyArea, Position
from map_areas.viewport import LinearProjection, Viewport


@pytest.fixture
def square_polygon():
    """10x10 square with vertices on tile corners."""
    return PolyArea([
        Position(0, 0),
        Position(10, 0),
        Position(10, 10),
        Position(0, 10),
    ])


@pytest.fixture
def lumbridge_area():
    """An 11x11 area on plane 0."""
    return Area(Position(3200, 3200), Position(3210, 3210))


@pytest.fixture
def areas(lumbridge_area):
    return AreaCollection([lumbridge_area])


@pytest.fixture
def horizontal_path():
    return Path([Position(x, 0) for x in range(5)])


@pytest.fixture
def projection():
    """Identity projection: one projection unit per tile."""
    return LinearProjection()


@pytest.fixture
def viewport():
    """Viewport covering tiles 0..100 under the identity projection."""
    return Viewport(0, 0, 100, 100)
