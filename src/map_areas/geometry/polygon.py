"""Point-in-polygon tests over the tile grid.

Vertices sit on tile corners and a tile is inside when its centre is inside.
Every coordinate is doubled so the tile centre ``(tx + 0.5, ty + 0.5)`` becomes
the odd integer pair ``(2tx + 1, 2ty + 1)``; the crossing test then runs on
integers only and a centre can never share a y with a vertex.
"""

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from map_areas.model.area import TileBounds

Vertex = tuple[int, int]


def bounding_box(vertices: Sequence[Vertex]) -> TileBounds | None:
    """Integer bounding box of the vertices, or None when there are none."""
    if not vertices:
        return None
    xs = [v[0] for v in vertices]
    ys = [v[1] for v in vertices]
    return TileBounds(min(xs), min(ys), max(xs), max(ys))


def _crosses(x: int, y: int, xi: int, yi: int, xj: int, yj: int) -> bool:
    """Whether a horizontal ray from (x, y) crosses edge (xi, yi)-(xj, yj)."""
    if (yi > y) == (yj > y):
        return False
    dx = xj - xi
    dy = yj - yi
    cross = dx * (y - yi) - (x - xi) * dy
    return (cross > 0 and dy > 0) or (cross < 0 and dy < 0)


def contains_tile(tx: int, ty: int, vertices: Sequence[Vertex]) -> bool:
    """Ray-casting test for the centre of tile (tx, ty)."""
    if len(vertices) < 3:
        return False

    bbox = bounding_box(vertices)
    if bbox is None or not (bbox.min_x <= tx < bbox.max_x and bbox.min_y <= ty < bbox.max_y):
        return False

    x = 2 * tx + 1
    y = 2 * ty + 1
    inside = False
    j = len(vertices) - 1
    for i in range(len(vertices)):
        xi, yi = 2 * vertices[i][0], 2 * vertices[i][1]
        xj, yj = 2 * vertices[j][0], 2 * vertices[j][1]
        if _crosses(x, y, xi, yi, xj, yj):
            inside = not inside
        j = i
    return inside


def containment_mask(
    vertices: Sequence[Vertex],
) -> tuple[NDArray[np.bool_], TileBounds] | None:
    """Vectorized containment over every tile of the bounding box.

    Returns:
        ``(mask, bbox)`` where ``mask[row, col]`` tells whether tile
        ``(bbox.min_x + col, bbox.min_y + row)`` is inside, or None when the
        polygon has fewer than 3 vertices.
    """
    if len(vertices) < 3:
        return None
    bbox = bounding_box(vertices)
    if bbox is None:
        return None

    xs = 2 * np.arange(bbox.min_x, bbox.max_x + 1, dtype=np.int64) + 1
    ys = 2 * np.arange(bbox.min_y, bbox.max_y + 1, dtype=np.int64) + 1
    gx, gy = np.meshgrid(xs, ys)

    inside = np.zeros(gx.shape, dtype=bool)
    j = len(vertices) - 1
    for i in range(len(vertices)):
        xi, yi = 2 * vertices[i][0], 2 * vertices[i][1]
        xj, yj = 2 * vertices[j][0], 2 * vertices[j][1]
        j = i

        dy = yj - yi
        if dy == 0:
            continue
        dx = xj - xi
        straddles = (yi > gy) != (yj > gy)
        cross = dx * (gy - yi) - (gx - xi) * dy
        if dy > 0:
            inside ^= straddles & (cross > 0)
        else:
            inside ^= straddles & (cross < 0)

    return inside, bbox


def contained_tiles(vertices: Sequence[Vertex]) -> list[Vertex]:
    """All tiles whose centre lies inside the closed loop, in row-major order."""
    result = containment_mask(vertices)
    if result is None:
        return []
    mask, bbox = result
    rows, cols = np.nonzero(mask)
    return [
        (bbox.min_x + int(col), bbox.min_y + int(row))
        for row, col in zip(rows, cols)
    ]
