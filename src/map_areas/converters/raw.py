"""Flat CSV codec, one shape or vertex per line."""

import logging
from collections.abc import Iterable

from map_areas.converters.aabb import AABB
from map_areas.converters.tokens import to_ints
from map_areas.model.area import Area
from map_areas.model.position import Position

logger = logging.getLogger(__name__)


def _split_line(line: str) -> list[str]:
    cleaned = line.strip().rstrip(",")
    return [part.strip() for part in cleaned.split(",") if part.strip()]


def _lines(text: str) -> list[str]:
    return [line for line in text.strip().splitlines() if line.strip()]


def decode_raw_aabbs(text: str) -> list[AABB]:
    """``minX,minY,maxX,maxY`` or ``minX,minY,plane,maxX,maxY,plane`` per line."""
    boxes = []
    for line in _lines(text):
        values = to_ints(_split_line(line))
        if values is None:
            logger.debug("Skipping raw line with non-integer values: %r", line)
            continue
        box = AABB.from_canonical(values)
        if box is not None:
            boxes.append(box)
    return boxes


def decode_raw_positions(text: str) -> list[Position]:
    """``x,y`` or ``x,y,z`` per line."""
    positions = []
    for line in _lines(text):
        parts = _split_line(line)
        if len(parts) not in (2, 3):
            logger.debug("Skipping raw vertex line: %r", line)
            continue
        values = to_ints(parts)
        if values is None:
            logger.debug("Skipping raw vertex with non-integer values: %r", line)
            continue
        x, y = values[0], values[1]
        z = values[2] if len(values) == 3 else 0
        positions.append(Position(x, y, z))
    return positions


def encode_raw_area(area: Area) -> str:
    return ",".join(str(v) for v in AABB.from_area(area).to_canonical())


def encode_raw_areas(areas: Iterable[Area]) -> str:
    return "\n".join(encode_raw_area(area) for area in areas)


def encode_raw_position(position: Position) -> str:
    if position.z > 0:
        return f"{position.x},{position.y},{position.z}"
    return f"{position.x},{position.y}"


def encode_raw_positions(positions: Iterable[Position]) -> str:
    return "\n".join(encode_raw_position(pos) for pos in positions)
