"""Tests for index-tag addressing of wall segments."""

from __future__ import annotations

import logging

import pytest

from dungeonkit.dungeon import (
    InvalidSegmentTag,
    MeshAsset,
    SegmentedWall,
    SegmentIndexOutOfRange,
    TaggedSegment,
    WallSegment,
)
from dungeonkit.dungeon.errors import DungeonContentError, DungeonUsageError

BRICK = MeshAsset("SM_Wall_Brick")


class TestBuild:
    """SegmentedWall.build places segments by their tag, not their order."""

    def test_four_tagged_segments_give_size_four(self) -> None:
        children = [TaggedSegment.create(tag, BRICK) for tag in ("0", "1", "2", "3")]
        wall = SegmentedWall.build(children)

        assert wall.size == 4
        assert len(wall) == 4

    def test_segments_are_placed_by_tag(self) -> None:
        """Children arrive unordered; each lands at the index its tag names."""
        seg0, seg1, seg2 = WallSegment(), WallSegment(), WallSegment()
        children = [
            TaggedSegment(("2",), seg2),
            TaggedSegment(("0",), seg0),
            TaggedSegment(("1",), seg1),
        ]
        wall = SegmentedWall.build(children)

        assert wall.get_segment(0) is seg0
        assert wall.get_segment(1) is seg1
        assert wall.get_segment(2) is seg2
        assert list(wall) == [seg0, seg1, seg2]

    def test_only_first_tag_is_read(self) -> None:
        seg = WallSegment()
        wall = SegmentedWall.build([TaggedSegment(("0", "decorative", "7"), seg)])
        assert wall.get_segment(0) is seg

    def test_empty_wall(self) -> None:
        wall = SegmentedWall.build([])
        assert wall.size == 0
        assert not wall.is_valid_index(0)

    def test_unset_mesh_is_allowed(self) -> None:
        wall = SegmentedWall.build([TaggedSegment.create("0")])
        assert wall.get_segment(0).mesh is None

    def test_non_numeric_tag_raises(self) -> None:
        children = [TaggedSegment.create("0"), TaggedSegment.create("x")]
        with pytest.raises(InvalidSegmentTag):
            SegmentedWall.build(children, name="NorthWall")

    @pytest.mark.parametrize("tag", ["", " 1", "1.5", "one", "0x1"])
    def test_malformed_tags_raise(self, tag: str) -> None:
        with pytest.raises(InvalidSegmentTag):
            SegmentedWall.build([TaggedSegment.create(tag)])

    def test_missing_tag_raises(self) -> None:
        with pytest.raises(InvalidSegmentTag, match="missing its index tag"):
            SegmentedWall.build([TaggedSegment((), WallSegment())], name="EastWall")

    def test_tag_past_end_raises(self) -> None:
        children = [TaggedSegment.create("0"), TaggedSegment.create("2")]
        with pytest.raises(SegmentIndexOutOfRange):
            SegmentedWall.build(children)

    def test_negative_tag_is_out_of_range(self) -> None:
        """A negative number is numeric, so it fails the range check instead."""
        with pytest.raises(SegmentIndexOutOfRange):
            SegmentedWall.build([TaggedSegment.create("-1")])

    def test_duplicate_tag_last_write_wins(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Duplicate tags are tolerated: the later segment replaces the earlier."""
        first, second = WallSegment(BRICK), WallSegment(BRICK)
        children = [TaggedSegment(("0",), first), TaggedSegment(("0",), second)]

        with caplog.at_level(logging.WARNING):
            wall = SegmentedWall.build(children, name="WestWall")

        assert wall.size == 2
        assert wall.get_segment(0) is second
        # The slot nobody claimed still holds an (empty) segment.
        assert wall.get_segment(1).mesh is None
        assert "WestWall" in caplog.text


class TestAddressing:
    """Index validation and lookup on a built wall."""

    @pytest.fixture
    def wall(self) -> SegmentedWall:
        return SegmentedWall.build(
            [TaggedSegment.create(str(i), BRICK) for i in range(3)], name="SouthWall"
        )

    def test_valid_indices(self, wall: SegmentedWall) -> None:
        assert [wall.is_valid_index(i) for i in range(-1, 4)] == [
            False,
            True,
            True,
            True,
            False,
        ]

    def test_non_integer_indices_are_invalid(self, wall: SegmentedWall) -> None:
        assert not wall.is_valid_index(True)  # type: ignore[arg-type]
        assert not wall.is_valid_index(1.0)  # type: ignore[arg-type]
        assert not wall.is_valid_index("1")  # type: ignore[arg-type]

    def test_get_segment_out_of_range_raises(self, wall: SegmentedWall) -> None:
        with pytest.raises(SegmentIndexOutOfRange):
            wall.get_segment(3)
        with pytest.raises(SegmentIndexOutOfRange):
            wall.get_segment(-1)

    def test_segment_mesh_can_be_reassigned(self, wall: SegmentedWall) -> None:
        door = MeshAsset("SM_Door")
        wall.get_segment(1).mesh = door
        assert wall.get_segment(1).mesh == door
        assert wall.size == 3


class TestErrorTaxonomy:
    def test_tag_errors_are_content_errors(self) -> None:
        assert issubclass(InvalidSegmentTag, DungeonContentError)
        assert issubclass(InvalidSegmentTag, ValueError)

    def test_range_errors_are_index_errors(self) -> None:
        assert issubclass(SegmentIndexOutOfRange, DungeonUsageError)
        assert issubclass(SegmentIndexOutOfRange, IndexError)
