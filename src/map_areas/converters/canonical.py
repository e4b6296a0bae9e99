"""Canonical JSON codec for the ``aabbs`` / ``regions`` / ``regionBoxes`` keys.

Input is either a bare fragment (``"aabbs": [[...], ...]``) or a whole JSON
object. Invalid JSON, or a key whose value is not a list, is a hard error.
Missing or empty keys simply contribute no boxes, and a malformed entry inside
a list is dropped on its own.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from map_areas.converters.aabb import AABB, RegionBox
from map_areas.converters.errors import MalformedInputError
from map_areas.converters.tokens import to_int, to_ints

logger = logging.getLogger(__name__)

CANONICAL_KEYS = ("regionBoxes", "aabbs", "regions")


def _wrap_single(v: Any) -> Any:
    """A flat single entry (``[1, 2, 3, 4]``) becomes a one-entry list."""
    if isinstance(v, list) and v and not any(isinstance(item, list) for item in v):
        return [v]
    return v


class CanonicalSections(BaseModel):
    """The recognised keys of a canonical area object."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    aabbs: list[Any] = Field(default_factory=list)
    regions: list[Any] = Field(default_factory=list)
    region_boxes: list[Any] = Field(default_factory=list, alias="regionBoxes")

    @field_validator("aabbs", "region_boxes", mode="before")
    @classmethod
    def wrap_single_entry(cls, v):
        if v is None:
            return []
        return _wrap_single(v)

    @field_validator("regions", mode="before")
    @classmethod
    def default_regions(cls, v):
        return [] if v is None else v

    def to_aabbs(self) -> list[AABB]:
        """Expand every section to boxes, dropping entries with bad tokens."""
        boxes: list[AABB] = []

        for entry in self.aabbs:
            if not isinstance(entry, list):
                logger.debug("Dropping AABB entry that is not a list: %r", entry)
                continue
            values = to_ints(entry)
            if values is None:
                logger.debug("Dropping AABB with non-integer values: %s", entry)
                continue
            box = AABB.from_canonical(values)
            if box is not None:
                boxes.append(box)

        for entry in self.regions:
            region_id = to_int(entry)
            if region_id is None:
                logger.debug("Dropping non-integer region id: %r", entry)
                continue
            boxes.append(AABB.from_region(region_id))

        for entry in self.region_boxes:
            if not isinstance(entry, list):
                logger.debug("Dropping region box entry that is not a list: %r", entry)
                continue
            values = to_ints(entry)
            if not values:
                logger.debug("Dropping invalid region box: %s", entry)
                continue
            from_id = values[0]
            to_id = values[1] if len(values) > 1 else values[0]
            boxes.append(RegionBox(from_id, to_id).to_aabb())

        return boxes


def _as_object_text(text: str) -> str:
    stripped = text.strip()
    if stripped.startswith("{"):
        return stripped
    return "{" + stripped + "}"


def parse_sections(text: str) -> CanonicalSections:
    """Parse canonical text into its sections.

    Raises:
        MalformedInputError: JSON is invalid, is not an object, or a known key
            has the wrong type.
    """
    object_text = _as_object_text(text)
    try:
        parsed = json.loads(object_text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Invalid JSON: {e.msg}", text) from e

    if not isinstance(parsed, dict):
        raise MalformedInputError("Expected a JSON object", text)

    try:
        return CanonicalSections.model_validate(parsed)
    except ValidationError as e:
        raise MalformedInputError(f"Unexpected value type: {e.errors()[0]['msg']}", text) from e


def decode_canonical(text: str) -> list[AABB]:
    """Decode canonical text to boxes (aabbs, then regions, then regionBoxes)."""
    if not text.strip():
        return []
    return parse_sections(text).to_aabbs()


def format_values(values: Iterable[int]) -> str:
    return ", ".join(str(v) for v in values)


def encode_canonical(boxes: Iterable[AABB]) -> str:
    """Encode boxes as an ``"aabbs"`` fragment, one box per line."""
    lines = [f"    [ {format_values(box.to_canonical())} ]" for box in boxes]
    if not lines:
        return ""
    return '"aabbs": [\n' + ",\n".join(lines) + "\n]"
