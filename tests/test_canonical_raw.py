"""Tests for AABBs, region boxes and the canonical JSON and raw codecs."""

import pytest

from map_areas.converters import AABB, MalformedInputError, RegionBox, decode_canonical, encode_canonical
from map_areas.converters.aabb import PLANE_MAX, PLANE_MIN
from map_areas.converters.raw import (
    decode_raw_aabbs,
    decode_raw_positions,
    encode_raw_area,
    encode_raw_position,
)
from map_areas.model import Position


class TestAABB:
    """Tests for the overloaded AABB constructor."""

    def test_region_id(self):
        """A single value is a region id spanning every plane."""
        box = AABB.of(12850)
        assert box == AABB(3200, 3200, PLANE_MIN, 3263, 3263, PLANE_MAX)
        assert box.is_all_planes
        assert box.plane == 0

    def test_point_forms(self):
        assert AABB.of(5, 6) == AABB(5, 6, PLANE_MIN, 5, 6, PLANE_MAX)
        assert AABB.of(5, 6, 2) == AABB(5, 6, 2, 5, 6, 2)

    def test_corners_are_ordered(self):
        assert AABB.of(10, 10, 0, 0) == AABB(0, 0, PLANE_MIN, 10, 10, PLANE_MAX)
        assert AABB.of(10, 10, 0, 0, 1) == AABB(0, 0, 1, 10, 10, 1)

    def test_too_many_values(self):
        with pytest.raises(ValueError):
            AABB.of(1, 2, 3, 4, 5, 6, 7)

    def test_canonical_mismatched_planes(self):
        """A 6-tuple with different planes is ignored."""
        assert AABB.from_canonical([1, 2, 0, 3, 4, 1]) is None

    def test_canonical_four_values_is_plane_zero(self):
        assert AABB.from_canonical([1, 2, 3, 4]).to_area().plane == 0

    def test_region_box_single_region(self):
        """A one-region box covers that region's tiles, on plane 0."""
        box = RegionBox(12850, 12850).to_aabb()
        region = AABB.of(12850)
        assert (box.min_x, box.min_y, box.max_x, box.max_y) == (
            region.min_x, region.min_y, region.max_x, region.max_y
        )
        assert (box.min_z, box.max_z) == (0, 0)
        assert box.to_canonical() == region.to_canonical()

    def test_region_box_span(self):
        box = RegionBox(12851, 12850).to_aabb()
        assert (box.min_x, box.min_y, box.max_x, box.max_y) == (3200, 3200, 3263, 3327)


class TestCanonicalDecode:
    """Tests for the keyed JSON form."""

    def test_bare_fragment(self):
        boxes = decode_canonical('"aabbs": [[3200, 3200, 3210, 3210]]')
        area = boxes[0].to_area()
        assert len(boxes) == 1
        assert (area.min_x, area.min_y, area.max_x, area.max_y) == (3200, 3200, 3210, 3210)

    def test_whole_object(self):
        boxes = decode_canonical('{"aabbs": [[100, 100, 1, 110, 110, 1]], "description": "x"}')
        assert boxes[0].to_area().plane == 1

    def test_single_flat_entry(self):
        assert len(decode_canonical('"aabbs": [1, 2, 3, 4]')) == 1

    def test_section_order(self):
        """aabbs come first, then regions, then regionBoxes."""
        text = '{"regionBoxes": [[12851, 12851]], "regions": [12850], "aabbs": [[1, 2, 3, 4]]}'
        boxes = decode_canonical(text)
        assert [box.min_x for box in boxes] == [1, 3200, 3200]
        assert boxes[2].min_y == 3264

    def test_one_element_region_box(self):
        assert decode_canonical('"regionBoxes": [[12850]]') == [RegionBox(12850, 12850).to_aabb()]

    def test_entry_that_is_not_a_list_is_dropped(self):
        """One stray scalar does not cost the other boxes in the batch."""
        boxes = decode_canonical('"aabbs": [[1, 2, 3, 4], 5, [5, 6, 7, 8]]')
        assert [box.min_x for box in boxes] == [1, 5]
        assert len(decode_canonical('"aabbs": [[1, 2, 3, 4], null]')) == 1

    def test_region_box_entry_that_is_not_a_list_is_dropped(self):
        boxes = decode_canonical('"regionBoxes": ["x", [12850, 12850]]')
        assert boxes == [RegionBox(12850, 12850).to_aabb()]

    def test_empty_and_missing_keys(self):
        """Nothing to decode is not an error."""
        assert decode_canonical("") == []
        assert decode_canonical("{}") == []
        assert decode_canonical('"aabbs": []') == []
        assert decode_canonical('{"aabbs": null}') == []

    def test_bad_token_drops_entry(self):
        boxes = decode_canonical('"aabbs": [[1, "x", 3, 4], [1, 2, 3, 4], [1.5, 2, 3, 4]]')
        assert boxes == [AABB.of(1, 2, 0, 3, 4, 0)]

    def test_invalid_json(self):
        """Invalid JSON is a hard error carrying the offending text."""
        text = '"aabbs": [[1, 2, 3, 4]'
        with pytest.raises(MalformedInputError) as exc_info:
            decode_canonical(text)
        assert exc_info.value.text == text

    def test_wrong_value_type(self):
        with pytest.raises(MalformedInputError):
            decode_canonical('"aabbs": 5')

    def test_non_object(self):
        with pytest.raises(MalformedInputError):
            decode_canonical("[1, 2, 3, 4]")


class TestCanonicalEncode:
    """Tests for the ``"aabbs"`` fragment encoder."""

    def test_six_value_entry(self):
        assert encode_canonical([AABB.of(100, 100, 1, 110, 110, 1)]) == (
            '"aabbs": [\n    [ 100, 100, 1, 110, 110, 1 ]\n]'
        )

    def test_plane_zero_uses_four_values(self):
        text = encode_canonical([AABB.of(1, 2, 0, 3, 4, 0), AABB.of(12850)])
        assert text == '"aabbs": [\n    [ 1, 2, 3, 4 ],\n    [ 3200, 3200, 3263, 3263 ]\n]'

    def test_empty(self):
        assert encode_canonical([]) == ""


class TestRaw:
    """Tests for the flat CSV codec."""

    def test_area_round_trip(self):
        box = decode_raw_aabbs("3200,3200,3210,3210")[0]
        assert encode_raw_area(box.to_area()) == "3200,3200,3210,3210"

    def test_area_with_plane(self):
        box = decode_raw_aabbs("1, 2, 1, 3, 4, 1,")[0]
        assert encode_raw_area(box.to_area()) == "1,2,1,3,4,1"

    def test_bad_lines_skipped(self):
        boxes = decode_raw_aabbs("1,2,3,4\nfoo,2,3,4\n1,2,3\n\n5,6,7,8")
        assert [box.min_x for box in boxes] == [1, 5]

    def test_positions(self):
        positions = decode_raw_positions("1,2\n3,4,1\nbad\n5")
        assert positions == [Position(1, 2, 0), Position(3, 4, 1)]

    def test_position_plane_only_when_set(self):
        assert encode_raw_position(Position(1, 2)) == "1,2"
        assert encode_raw_position(Position(1, 2, 3)) == "1,2,3"
