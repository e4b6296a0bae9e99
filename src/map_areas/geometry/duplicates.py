"""Duplicate vertex detection."""

from collections import defaultdict
from collections.abc import Sequence

from map_areas.model.position import Position


def duplicate_groups(positions: Sequence[Position]) -> dict[tuple[int, int], list[int]]:
    """Group vertex indices by exact (x, y); only groups with collisions are returned."""
    groups: dict[tuple[int, int], list[int]] = defaultdict(list)
    for index, pos in enumerate(positions):
        groups[(pos.x, pos.y)].append(index)
    return {key: indices for key, indices in groups.items() if len(indices) > 1}


def duplicate_indices(positions: Sequence[Position]) -> list[int]:
    """Sorted indices of every vertex that shares its (x, y) with another."""
    return sorted(i for indices in duplicate_groups(positions).values() for i in indices)
