"""Dialect table for the Java-like source forms used by automation clients.

Every dialect is a row of data: constructor names, how a rectangle is spelled
(two corners, origin plus size, or an AABB tuple), how many arguments its point
constructor takes, and where a non-zero plane goes when encoding. Decoding and
encoding functions are chosen per corner convention, so adding a dialect means
registering one more row rather than writing a new class.

Decoders run on whitespace-stripped text and only pick up complete
constructor calls; anything else is skipped. Every area pattern accepts a
trailing ``.setPlane(z)`` call, which overrides the plane given inside the
constructor.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from map_areas.converters.aabb import AABB
from map_areas.converters.canonical import decode_canonical, encode_canonical
from map_areas.converters.errors import UnknownDialectError
from map_areas.model.area import Area
from map_areas.model.position import Position

PLANE_OVERRIDE_METHOD = "setPlane"

_WHITESPACE = re.compile(r"\s")
_PLANE_OVERRIDE = rf"(?:\.{PLANE_OVERRIDE_METHOD}\((\d+)\))?"


class CornerConvention(str, Enum):
    """How a rectangle constructor spells its extent."""

    CORNERS = "corners"  # (x1, y1, x2, y2[, z])
    ORIGIN_SIZE = "origin_size"  # (x, y, width, height[, z])
    AABB = "aabb"  # (minX, minY[, z], maxX, maxY[, z])


class PlaneStyle(str, Enum):
    """Where the encoder writes a non-zero plane."""

    SUFFIX = "suffix"  # new Area(...).setPlane(z)
    ARGUMENT = "argument"  # trailing constructor argument


AreaDecodeFn = Callable[["Dialect", str], list[Area]]
AreaEncodeFn = Callable[["Dialect", Area], str]
AreasEncodeFn = Callable[[list[Area]], str]


@dataclass(frozen=True)
class Dialect:
    """One row of the dialect table."""

    key: str
    area_constructor: str
    point_constructor: str
    corner_convention: CornerConvention
    point_arity: tuple[int, ...]
    plane_style: PlaneStyle
    decode_areas: AreaDecodeFn
    encode_area: AreaEncodeFn
    # Replaces the Java array declaration when the dialect has its own array form
    encode_area_array: AreasEncodeFn | None = None

    def point_args_pattern(self) -> str:
        """Regex for the comma-separated point arguments (no capture group)."""
        required = min(self.point_arity)
        optional = max(self.point_arity) - required
        return ",".join([r"\d+"] * required) + r"(?:,\d+)?" * optional

    def decode_positions(self, text: str) -> list[Position]:
        stripped = strip_whitespace(text)
        pattern = re.compile(rf"new{re.escape(self.point_constructor)}\(({self.point_args_pattern()})\)")
        return [_point_from_args(match.group(1)) for match in pattern.finditer(stripped)]

    def encode_position(self, position: Position) -> str:
        return f"new {self.point_constructor}({position.x}, {position.y}, {position.z})"


def strip_whitespace(text: str) -> str:
    return _WHITESPACE.sub("", text)


def _split_ints(args: str) -> list[int]:
    return [int(v) for v in args.split(",")]


def _point_from_args(args: str) -> Position:
    values = _split_ints(args)
    z = values[2] if len(values) > 2 else 0
    return Position(values[0], values[1], z)


def _two_point_area(first: str, second: str, plane: int | None) -> Area:
    start = _point_from_args(first)
    end = _point_from_args(second)
    if plane is not None:
        start, end = start.with_plane(plane), end.with_plane(plane)
    return Area(start, end)


def _embedded_plane(values: list[int]) -> int:
    """Optional fifth constructor argument."""
    return values[4] if len(values) > 4 else 0


def _override(*planes: str | None) -> int | None:
    """Last non-empty plane capture wins (suffix beats trailing argument)."""
    result = None
    for plane in planes:
        if plane is not None:
            result = int(plane)
    return result


def _two_point_alternative(dialect: Dialect) -> str:
    area = re.escape(dialect.area_constructor)
    point = re.escape(dialect.point_constructor)
    args = dialect.point_args_pattern()
    return rf"new{area}\(new{point}\(({args})\),new{point}\(({args})\)(?:,(\d+))?\)"


# ── Corner convention decoders ───────────────────────────────────


def decode_corner_areas(dialect: Dialect, text: str) -> list[Area]:
    """``new Area(x1,y1,x2,y2[,z])`` or ``new Area(new P(..), new P(..)[, z])``."""
    area = re.escape(dialect.area_constructor)
    pattern = re.compile(
        rf"(?:new{area}\((\d+,\d+,\d+,\d+(?:,\d+)?)\)|{_two_point_alternative(dialect)})"
        + _PLANE_OVERRIDE
    )

    areas = []
    for match in pattern.finditer(strip_whitespace(text)):
        corners, first, second, plane_arg, plane_suffix = match.groups()
        if corners is not None:
            values = _split_ints(corners)
            z = int(plane_suffix) if plane_suffix is not None else _embedded_plane(values)
            areas.append(Area(Position(values[0], values[1], z), Position(values[2], values[3], z)))
        else:
            areas.append(_two_point_area(first, second, _override(plane_arg, plane_suffix)))
    return areas


def decode_origin_size_areas(dialect: Dialect, text: str) -> list[Area]:
    """``new WorldArea(x,y,width,height[,z])`` or the two-point form."""
    area = re.escape(dialect.area_constructor)
    pattern = re.compile(
        rf"(?:new{area}\((\d+,\d+,\d+,\d+(?:,\d+)?)\)|{_two_point_alternative(dialect)})"
        + _PLANE_OVERRIDE
    )

    areas = []
    for match in pattern.finditer(strip_whitespace(text)):
        origin_size, first, second, plane_arg, plane_suffix = match.groups()
        if origin_size is not None:
            values = _split_ints(origin_size)
            x, y, width, height = values[:4]
            z = int(plane_suffix) if plane_suffix is not None else _embedded_plane(values)
            areas.append(Area(
                Position(x, y + height - 1, z),
                Position(x + width - 1, y, z),
            ))
        else:
            areas.append(_two_point_area(first, second, _override(plane_arg, plane_suffix)))
    return areas


def decode_aabb_areas(dialect: Dialect, text: str) -> list[Area]:
    """Canonical JSON when the text looks like JSON, else ``new AABB(...)`` calls."""
    stripped = text.strip()
    if stripped.startswith(("{", '"')):
        return [box.to_area() for box in decode_canonical(stripped)]

    area = re.escape(dialect.area_constructor)
    pattern = re.compile(rf"new{area}\((\d+,\d+,\d+,\d+(?:,\d+,\d+)?)\)" + _PLANE_OVERRIDE)

    areas = []
    for match in pattern.finditer(strip_whitespace(text)):
        args, plane_suffix = match.groups()
        box = AABB.from_canonical(_split_ints(args))
        if box is None:
            continue
        decoded = box.to_area()
        if plane_suffix is not None:
            plane = int(plane_suffix)
            decoded = Area(decoded.start_position.with_plane(plane), decoded.end_position.with_plane(plane))
        areas.append(decoded)
    return areas


# ── Corner convention encoders ───────────────────────────────────


def encode_corner_area(dialect: Dialect, area: Area) -> str:
    start, end = area.start_position, area.end_position
    args = [start.x, start.y, end.x, end.y]
    plane = start.z
    if plane > 0 and dialect.plane_style is PlaneStyle.ARGUMENT:
        args.append(plane)
    expr = f"new {dialect.area_constructor}({', '.join(str(v) for v in args)})"
    if plane > 0 and dialect.plane_style is PlaneStyle.SUFFIX:
        expr += f".{PLANE_OVERRIDE_METHOD}({plane})"
    return expr


def encode_origin_size_area(dialect: Dialect, area: Area) -> str:
    return (
        f"new {dialect.area_constructor}"
        f"({area.min_x}, {area.min_y}, {area.width}, {area.height}, {area.plane})"
    )


def encode_aabb_area(dialect: Dialect, area: Area) -> str:
    values = AABB.from_area(area).to_canonical()
    return f"new {dialect.area_constructor}({', '.join(str(v) for v in values)})"


def encode_canonical_areas(areas: list[Area]) -> str:
    return encode_canonical(AABB.from_area(area) for area in areas)


# ── Registry ─────────────────────────────────────────────────────


OSBOT = Dialect(
    key="osbot",
    area_constructor="Area",
    point_constructor="Position",
    corner_convention=CornerConvention.CORNERS,
    point_arity=(3,),
    plane_style=PlaneStyle.SUFFIX,
    decode_areas=decode_corner_areas,
    encode_area=encode_corner_area,
)

DREAMBOT = Dialect(
    key="dreambot",
    area_constructor="Area",
    point_constructor="Tile",
    corner_convention=CornerConvention.CORNERS,
    point_arity=(2, 3),
    plane_style=PlaneStyle.ARGUMENT,
    decode_areas=decode_corner_areas,
    encode_area=encode_corner_area,
)

RUNELITE = Dialect(
    key="runelite",
    area_constructor="WorldArea",
    point_constructor="WorldPoint",
    corner_convention=CornerConvention.ORIGIN_SIZE,
    point_arity=(2, 3),
    plane_style=PlaneStyle.ARGUMENT,
    decode_areas=decode_origin_size_areas,
    encode_area=encode_origin_size_area,
)

HD117 = Dialect(
    key="hd117",
    area_constructor="AABB",
    point_constructor="WorldPoint",
    corner_convention=CornerConvention.AABB,
    point_arity=(3,),
    plane_style=PlaneStyle.ARGUMENT,
    decode_areas=decode_aabb_areas,
    encode_area=encode_aabb_area,
    encode_area_array=encode_canonical_areas,
)

_DIALECT_REGISTRY: dict[str, Dialect] = {
    dialect.key: dialect for dialect in (OSBOT, DREAMBOT, RUNELITE, HD117)
}


def register_dialect(dialect: Dialect) -> None:
    """Register (or replace) a dialect under its key."""
    _DIALECT_REGISTRY[dialect.key.lower()] = dialect


def get_dialect(key: str) -> Dialect:
    try:
        return _DIALECT_REGISTRY[key.lower()]
    except KeyError:
        raise UnknownDialectError(key) from None


def available_dialects() -> list[str]:
    return sorted(_DIALECT_REGISTRY)
