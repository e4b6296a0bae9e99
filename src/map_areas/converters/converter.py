"""Decode and encode shapes in one dialect."""

import logging

from map_areas.converters.dialects import Dialect, get_dialect
from map_areas.converters.raw import encode_raw_areas, encode_raw_positions
from map_areas.converters.templates import OutputStyle, declare
from map_areas.model.area import AreaCollection
from map_areas.model.chain import Path, PolyArea, VertexChain

logger = logging.getLogger(__name__)

Drawable = AreaCollection | PolyArea | Path


class Converter:
    """Text codec bound to a single dialect.

    ``decode`` replaces the target's contents with every shape found in the
    text; ``encode`` renders the target in the requested output style.
    """

    def __init__(self, dialect: Dialect | str):
        self.dialect = get_dialect(dialect) if isinstance(dialect, str) else dialect

    def decode(self, text: str, target: Drawable) -> int:
        """Decode ``text`` into ``target`` and return the number of shapes found.

        The target is only modified once the whole text has decoded, so a
        :class:`MalformedInputError` leaves it untouched.
        """
        if isinstance(target, AreaCollection):
            areas = self.dialect.decode_areas(self.dialect, text)
            target.replace_all(areas)
            found = len(areas)
        elif isinstance(target, VertexChain):
            positions = self.dialect.decode_positions(text)
            target.replace_all(positions)
            found = len(positions)
        else:
            raise TypeError(f"Cannot decode into {type(target).__name__}")

        logger.debug("Decoded %d shapes with dialect %s", found, self.dialect.key)
        return found

    def encode(self, target: Drawable, style: OutputStyle | str = OutputStyle.ARRAY) -> str:
        style = OutputStyle.parse(style)
        if isinstance(target, AreaCollection):
            return self.encode_areas(target, style)
        if isinstance(target, VertexChain):
            return self.encode_positions(target, style)
        raise TypeError(f"Cannot encode {type(target).__name__}")

    def encode_areas(self, areas: AreaCollection, style: OutputStyle) -> str:
        if style is OutputStyle.RAW:
            return encode_raw_areas(areas)

        items = list(areas)
        if style is OutputStyle.ARRAY and self.dialect.encode_area_array is not None:
            return self.dialect.encode_area_array(items)

        exprs = [self.dialect.encode_area(self.dialect, area) for area in items]
        return declare(style, self.dialect.area_constructor, "area", exprs)

    def encode_positions(self, chain: VertexChain, style: OutputStyle) -> str:
        if style is OutputStyle.RAW:
            return encode_raw_positions(chain)

        point = self.dialect.point_constructor
        exprs = [self.dialect.encode_position(pos) for pos in chain]
        if len(exprs) == 1:
            return declare(OutputStyle.SINGLE, point, "position", exprs)

        var_name = "polygon" if isinstance(chain, PolyArea) else "path"
        return declare(style, point, var_name, exprs)
