"""Whole-collection import and export for the import/export panel.

The panel works on all drawn areas plus the current polygon at once, in one of
four formats: ``json``, ``array``, ``raw`` or ``java``. Import accepts the same
formats, optionally auto-detected, and always routes area data through the
canonical ``"aabbs"`` representation.
"""

import json
import logging
import re
from enum import Enum
from typing import Any

from pydantic import BaseModel

from map_areas.converters.aabb import AABB
from map_areas.converters.canonical import decode_canonical
from map_areas.converters.dialects import (
    HD117,
    Dialect,
    available_dialects,
    get_dialect,
    strip_whitespace,
)
from map_areas.converters.errors import MalformedInputError, UnsupportedFormatError
from map_areas.converters.raw import (
    decode_raw_aabbs,
    decode_raw_positions,
    encode_raw_area,
    encode_raw_position,
)
from map_areas.converters.tokens import to_int, to_ints
from map_areas.model.area import Area, AreaCollection
from map_areas.model.chain import VertexChain
from map_areas.model.position import Position

logger = logging.getLogger(__name__)

_BRACKETED = re.compile(r"\[([^\[\]]+)\]")
_NESTED_ARRAY = re.compile(r"\[\s*\[\s*\d+")


class ExportFormat(str, Enum):
    JSON = "json"
    ARRAY = "array"
    RAW = "raw"
    JAVA = "java"

    @classmethod
    def parse(cls, value: "ExportFormat | str") -> "ExportFormat":
        try:
            return cls(value)
        except ValueError as e:
            raise UnsupportedFormatError(f"Unknown format: {value}") from e


class ShapeKind(str, Enum):
    AREA = "area"
    POLY = "poly"


class AreaExport(BaseModel):
    """Normalized area as written by the JSON export."""

    minX: int
    minY: int
    maxX: int
    maxY: int
    plane: int

    @classmethod
    def from_area(cls, area: Area) -> "AreaExport":
        return cls(
            minX=area.min_x,
            minY=area.min_y,
            maxX=area.max_x,
            maxY=area.max_y,
            plane=area.plane,
        )


class PositionExport(BaseModel):
    x: int
    y: int
    z: int


class CollectionExport(BaseModel):
    areas: list[AreaExport] | None = None
    polygon: list[PositionExport] | None = None


# ── Export ───────────────────────────────────────────────────────


def _array_values(values: list[int]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def _position_values(position: Position) -> list[int]:
    if position.z > 0:
        return [position.x, position.y, position.z]
    return [position.x, position.y]


def export_all(
    areas: AreaCollection,
    polygon: VertexChain | None = None,
    fmt: ExportFormat | str = ExportFormat.JSON,
    dialect: Dialect | str = HD117,
) -> str:
    """Export every area and the polygon's vertices in one text block."""
    fmt = ExportFormat.parse(fmt)
    positions = list(polygon) if polygon is not None else []

    if fmt is ExportFormat.JSON:
        export = CollectionExport(
            areas=[AreaExport.from_area(a) for a in areas] or None,
            polygon=[PositionExport(x=p.x, y=p.y, z=p.z) for p in positions] or None,
        )
        return json.dumps(export.model_dump(exclude_none=True), indent=2)

    if fmt is ExportFormat.ARRAY:
        parts = [_array_values(AABB.from_area(a).to_canonical()) for a in areas]
        parts += [_array_values(_position_values(p)) for p in positions]
        return ",\n".join(parts)

    if fmt is ExportFormat.RAW:
        parts = [encode_raw_area(a) for a in areas]
        parts += [encode_raw_position(p) for p in positions]
        return "\n".join(parts)

    dialect = get_dialect(dialect) if isinstance(dialect, str) else dialect
    parts = [dialect.encode_area(dialect, a) for a in areas]
    if positions:
        points = ",\n    ".join(dialect.encode_position(p) for p in positions)
        parts.append(f"new {dialect.point_constructor}[] {{\n    {points}\n}}")
    return ",\n".join(parts)


# ── Format detection ─────────────────────────────────────────────


def detect_format(text: str) -> tuple[ExportFormat, ShapeKind]:
    """Guess the format and shape kind of pasted text."""
    trimmed = text.strip()

    if trimmed.startswith(("{", "[")):
        try:
            parsed = json.loads(trimmed)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, list):
            if parsed and (isinstance(parsed[0], list) or (isinstance(parsed[0], dict) and "x" in parsed[0])):
                return ExportFormat.JSON, ShapeKind.POLY
            return ExportFormat.JSON, ShapeKind.AREA
        if isinstance(parsed, dict):
            if "positions" in parsed or "polygon" in parsed:
                return ExportFormat.JSON, ShapeKind.POLY
            return ExportFormat.JSON, ShapeKind.AREA

    if trimmed.startswith('"'):
        # Bare canonical fragment such as '"aabbs": [...]'
        return ExportFormat.JSON, ShapeKind.AREA

    stripped = strip_whitespace(trimmed)
    if "new" in stripped and "(" in stripped:
        dialects = [get_dialect(key) for key in available_dialects()]
        if any(f"new{d.area_constructor}(" in stripped for d in dialects):
            return ExportFormat.JAVA, ShapeKind.AREA
        if any(f"new{d.point_constructor}" in stripped for d in dialects):
            return ExportFormat.JAVA, ShapeKind.POLY

    if "[" in trimmed and "]" in trimmed:
        if _NESTED_ARRAY.search(trimmed):
            return ExportFormat.ARRAY, ShapeKind.POLY
        return ExportFormat.ARRAY, ShapeKind.AREA

    lines = [line for line in trimmed.splitlines() if line.strip()]
    if len(lines) > 1 and len(lines[0].strip().rstrip(",").split(",")) in (2, 3):
        return ExportFormat.RAW, ShapeKind.POLY

    return ExportFormat.RAW, ShapeKind.AREA


# ── Import ───────────────────────────────────────────────────────


def _area_object_to_aabb(obj: dict[str, Any]) -> AABB | None:
    """``{minX, minY, maxX, maxY, plane}`` or ``{x, y, width, height, z}``."""
    x = to_int(obj.get("x", 0))
    y = to_int(obj.get("y", 0))
    width = to_int(obj.get("width", 0))
    height = to_int(obj.get("height", 0))
    if None in (x, y, width, height):
        return None

    values = to_ints([
        obj.get("minX", x),
        obj.get("minY", y),
        obj.get("maxX", x + width),
        obj.get("maxY", y + height),
        obj.get("plane", obj.get("z", 0)),
    ])
    if values is None:
        return None
    min_x, min_y, max_x, max_y, plane = values
    return AABB.of(min_x, min_y, plane, max_x, max_y, plane)


def _json_positions(items: list[Any]) -> list[Position]:
    positions = []
    for item in items:
        if isinstance(item, dict):
            values = to_ints([
                item.get("x", item.get("X")),
                item.get("y", item.get("Y")),
                item.get("z", item.get("Z", 0)),
            ])
        elif isinstance(item, list) and len(item) in (2, 3):
            values = to_ints(item + [0] if len(item) == 2 else item)
        else:
            values = None
        if values is None:
            logger.debug("Dropping vertex %r", item)
            continue
        positions.append(Position(*values))
    return positions


def _import_json_areas(parsed: Any, text: str) -> list[AABB]:
    if isinstance(parsed, list):
        entries = parsed if parsed and isinstance(parsed[0], list) else [parsed]
        boxes = []
        for entry in entries:
            values = to_ints(entry) if isinstance(entry, list) else None
            box = AABB.from_canonical(values) if values is not None else None
            if box is not None:
                boxes.append(box)
        return boxes

    if not isinstance(parsed, dict):
        raise MalformedInputError("Expected a JSON object or array", text)

    if isinstance(parsed.get("areas"), list):
        boxes = []
        for obj in parsed["areas"]:
            box = _area_object_to_aabb(obj) if isinstance(obj, dict) else None
            if box is not None:
                boxes.append(box)
        return boxes
    if any(key in parsed for key in ("aabbs", "regions", "regionBoxes")):
        return decode_canonical(json.dumps(parsed))
    if "minX" in parsed or "x" in parsed:
        box = _area_object_to_aabb(parsed)
        return [box] if box is not None else []
    raise MalformedInputError(
        'Expected an "areas" array, an "aabbs" array, or an object with minX/minY/maxX/maxY',
        text,
    )


def _import_array_areas(text: str) -> list[AABB]:
    try:
        parsed = json.loads(text.strip())
    except json.JSONDecodeError:
        parsed = None

    if isinstance(parsed, list):
        return _import_json_areas(parsed, text)

    boxes = []
    for match in _BRACKETED.finditer(text):
        values = [to_int(v) for v in match.group(1).split(",")]
        values = [v for v in values if v is not None]
        box = AABB.from_canonical(values) if len(values) in (4, 6) else None
        if box is not None:
            boxes.append(box)
    return boxes


def _import_array_positions(text: str) -> list[Position]:
    """Every innermost ``[x, y]`` or ``[x, y, z]`` group, nested or not."""
    positions = []
    for match in _BRACKETED.finditer(text):
        values = to_ints(match.group(1).split(","))
        if values is None or len(values) not in (2, 3):
            logger.debug("Dropping vertex [%s]", match.group(1))
            continue
        positions.append(Position(*values))
    return positions


def import_text(
    text: str,
    areas: AreaCollection,
    polygon: VertexChain,
    fmt: ExportFormat | str | None = None,
    kind: ShapeKind | str | None = None,
    dialect: Dialect | str = HD117,
) -> int:
    """Import pasted text into ``areas`` or ``polygon``.

    ``fmt`` and ``kind`` are auto-detected when omitted. Only the targeted
    drawable is replaced, and only after the whole text has decoded.

    Returns:
        The number of areas or vertices imported.
    """
    if not text.strip():
        return 0

    detected_fmt, detected_kind = detect_format(text)
    fmt = ExportFormat.parse(fmt) if fmt is not None else detected_fmt
    kind = ShapeKind(kind) if kind is not None else detected_kind
    dialect = get_dialect(dialect) if isinstance(dialect, str) else dialect

    if kind is ShapeKind.POLY:
        if fmt is ExportFormat.JSON:
            try:
                parsed = json.loads(text.strip())
            except json.JSONDecodeError as e:
                raise MalformedInputError(f"Invalid JSON: {e.msg}", text) from e
            if isinstance(parsed, dict):
                items = parsed.get("positions") or parsed.get("polygon") or []
            else:
                items = parsed
            if not isinstance(items, list):
                raise MalformedInputError("Expected a list of vertices", text)
            positions = _json_positions(items)
        elif fmt is ExportFormat.ARRAY:
            positions = _import_array_positions(text)
        elif fmt is ExportFormat.JAVA:
            positions = dialect.decode_positions(text)
        else:
            positions = decode_raw_positions(text)
        polygon.replace_all(positions)
        logger.info("Imported polygon with %d vertices (%s)", len(positions), fmt.value)
        return len(positions)

    if fmt is ExportFormat.JSON:
        try:
            parsed = json.loads(text.strip())
        except json.JSONDecodeError:
            # Bare canonical fragment such as '"aabbs": [...]'
            boxes = decode_canonical(text)
        else:
            boxes = _import_json_areas(parsed, text)
        new_areas = [box.to_area() for box in boxes]
    elif fmt is ExportFormat.ARRAY:
        new_areas = [box.to_area() for box in _import_array_areas(text)]
    elif fmt is ExportFormat.JAVA:
        new_areas = dialect.decode_areas(dialect, text)
    else:
        new_areas = [box.to_area() for box in decode_raw_aabbs(text)]

    areas.replace_all(new_areas)
    logger.info("Imported %d areas (%s)", len(new_areas), fmt.value)
    return len(new_areas)
