"""Text converters for bot-framework dialects and the exchange formats."""

from map_areas.converters.aabb import AABB, RegionBox
from map_areas.converters.canonical import decode_canonical, encode_canonical
from map_areas.converters.converter import Converter
from map_areas.converters.dialects import (
    DREAMBOT,
    HD117,
    OSBOT,
    RUNELITE,
    Dialect,
    available_dialects,
    get_dialect,
    register_dialect,
)
from map_areas.converters.errors import (
    MalformedInputError,
    UnknownDialectError,
    UnsupportedFormatError,
)
from map_areas.converters.exchange import ExportFormat, ShapeKind, detect_format, export_all, import_text
from map_areas.converters.named_areas import NamedAreaResolver, import_named_areas, parse_area_definitions
from map_areas.converters.templates import OutputStyle

__all__ = [
    "AABB",
    "Converter",
    "DREAMBOT",
    "Dialect",
    "ExportFormat",
    "HD117",
    "MalformedInputError",
    "NamedAreaResolver",
    "OSBOT",
    "OutputStyle",
    "RUNELITE",
    "RegionBox",
    "ShapeKind",
    "UnknownDialectError",
    "UnsupportedFormatError",
    "available_dialects",
    "decode_canonical",
    "detect_format",
    "encode_canonical",
    "export_all",
    "get_dialect",
    "import_named_areas",
    "import_text",
    "parse_area_definitions",
    "register_dialect",
]
