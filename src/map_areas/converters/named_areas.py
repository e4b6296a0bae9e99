"""Named area definitions that reference each other.

A composite definition lists other definitions by name in ``areas`` and may
also carry its own boxes. Resolution is a depth-first walk; each branch carries
its own immutable set of ancestors so that two siblings referencing the same
name both resolve it, while a true cycle resolves to nothing on that branch.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from map_areas.config import settings
from map_areas.converters.aabb import AABB
from map_areas.converters.canonical import CanonicalSections
from map_areas.converters.errors import MalformedInputError
from map_areas.model.area import AreaCollection

logger = logging.getLogger(__name__)


class AreaDefinition(BaseModel):
    """One named entry of an area definition file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    areas: list[str] = Field(default_factory=list, description="Referenced area names")
    aabbs: list[Any] = Field(default_factory=list)
    regions: list[Any] = Field(default_factory=list)
    region_boxes: list[Any] = Field(default_factory=list, alias="regionBoxes")

    @property
    def has_shapes(self) -> bool:
        return bool(self.aabbs or self.regions or self.region_boxes)

    def direct_aabbs(self) -> list[AABB]:
        """Boxes declared directly on this definition."""
        sections = CanonicalSections(
            aabbs=self.aabbs, regions=self.regions, region_boxes=self.region_boxes
        )
        return sections.to_aabbs()


def parse_area_definitions(text: str) -> list[AreaDefinition]:
    """Parse a JSON array, a single object, or comma-separated objects.

    Raises:
        MalformedInputError: The text is not JSON in any of those shapes, or an
            entry does not look like an area definition.
    """
    raw_text = text.strip()
    if not raw_text:
        return []

    try:
        parsed = json.loads(raw_text)
    except json.JSONDecodeError as initial_error:
        candidate = "[" + raw_text.rstrip().rstrip(",") + "]"
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            raise MalformedInputError(f"Invalid JSON: {initial_error.msg}", text) from initial_error

    items = parsed if isinstance(parsed, list) else [parsed]
    try:
        return [AreaDefinition.model_validate(item) for item in items]
    except ValidationError as e:
        raise MalformedInputError(f"Invalid area definition: {e.errors()[0]['msg']}", text) from e


class NamedAreaResolver:
    """Flattens named definitions into boxes, skipping a block-list of names."""

    def __init__(
        self,
        definitions: Iterable[AreaDefinition],
        skip_names: Iterable[str] | None = None,
    ):
        self.definitions = list(definitions)
        self.by_name = {d.name: d for d in self.definitions if d.name}
        names = settings.skip_area_names if skip_names is None else skip_names
        self.skip_names = frozenset(names)

    def resolve(self, name: str, visiting: frozenset[str] = frozenset()) -> list[AreaDefinition]:
        """Definitions contributing shapes to ``name``, referenced ones first.

        ``visiting`` holds the ancestors of this branch only; it is never
        mutated, every recursive call receives an extended copy.
        """
        if name in visiting:
            logger.debug("Cycle detected at area %s", name)
            return []
        if name in self.skip_names:
            logger.debug("Skipping blocked area %s", name)
            return []

        definition = self.by_name.get(name)
        if definition is None:
            logger.debug("Dangling area reference %s", name)
            return []

        branch = visiting | {name}
        resolved: list[AreaDefinition] = []
        for ref_name in definition.areas:
            resolved.extend(self.resolve(ref_name, branch))

        if definition.has_shapes:
            resolved.append(definition)
        return resolved

    def resolve_aabbs(self, name: str) -> list[AABB]:
        return [box for d in self.resolve(name) for box in d.direct_aabbs()]

    def collect(self) -> list[AABB]:
        """Boxes of every top-level definition, with references expanded."""
        boxes: list[AABB] = []
        for definition in self.definitions:
            if definition.name and definition.name in self.skip_names:
                continue
            if definition.name and definition.areas:
                boxes.extend(self.resolve_aabbs(definition.name))
            elif definition.has_shapes:
                boxes.extend(definition.direct_aabbs())
        return boxes


def import_named_areas(
    text: str,
    areas: AreaCollection,
    skip_names: Iterable[str] | None = None,
) -> int:
    """Replace ``areas`` with every box resolved from a definition file."""
    resolver = NamedAreaResolver(parse_area_definitions(text), skip_names)
    boxes = resolver.collect()
    areas.replace_all(box.to_area() for box in boxes)
    logger.info("Imported %d areas from %d definitions", len(boxes), len(resolver.definitions))
    return len(boxes)
