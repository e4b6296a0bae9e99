"""Lossy path simplification.

Interior points of straight runs are dropped so that only the endpoints of
each maximal collinear run remain. A run only counts as straight when both
segments travel in the same direction, so a back-and-forth reversal is kept.
"""

from collections.abc import Sequence

from map_areas.model.position import Position


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_redundant(a: Position, b: Position, c: Position) -> bool:
    """Check whether ``b`` lies on the straight, same-direction run a -> b -> c."""
    if not (a.z == b.z == c.z):
        return False

    dx1, dy1 = b.x - a.x, b.y - a.y
    dx2, dy2 = c.x - b.x, c.y - b.y

    # Horizontal
    if dy1 == 0 and dy2 == 0:
        return _sign(dx1) == _sign(dx2)

    # Vertical
    if dx1 == 0 and dx2 == 0:
        return _sign(dy1) == _sign(dy2)

    # Diagonal
    return (
        dy1 * dx2 == dy2 * dx1
        and _sign(dx1) == _sign(dx2)
        and _sign(dy1) == _sign(dy2)
    )


def simplify_positions(positions: Sequence[Position]) -> list[Position]:
    """Return the positions with redundant interior points removed.

    The comparison is always made against the last *kept* point, which
    collapses a whole run in one pass and makes the operation idempotent.
    """
    if len(positions) < 3:
        return list(positions)

    kept = [positions[0]]
    for i in range(1, len(positions) - 1):
        if not is_redundant(kept[-1], positions[i], positions[i + 1]):
            kept.append(positions[i])
    kept.append(positions[-1])
    return kept
