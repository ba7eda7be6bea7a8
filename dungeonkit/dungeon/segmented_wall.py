"""Walls split into individually addressable segments.

A room's wall is authored as a set of segment pieces, each tagged with the
decimal index of its position along the wall (counting from 0). The pieces
arrive in no particular order; ``SegmentedWall.build`` lays them out in a
dense array so that a segment can be looked up by index in O(1) and have its
mesh swapped between a wall piece and a doorway.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .errors import InvalidSegmentTag, SegmentIndexOutOfRange

logger = logging.getLogger(__name__)

_INDEX_TAG = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class MeshAsset:
    """Opaque handle to a static mesh. Meshes compare equal by name."""

    name: str


@dataclass
class WallSegment:
    """Holder for the mesh currently displayed by one wall segment."""

    mesh: MeshAsset | None = None


@dataclass(frozen=True)
class TaggedSegment:
    """A wall segment as authored, before it has been placed by index.

    Attributes:
        tags: Authoring tags; only the first one is read, as the index.
        segment: The mesh holder that ends up in the wall slot.
    """

    tags: tuple[str, ...]
    segment: WallSegment

    @classmethod
    def create(cls, tag: str, mesh: MeshAsset | None = None) -> TaggedSegment:
        return cls(tags=(tag,), segment=WallSegment(mesh))


def parse_index_tag(tagged: TaggedSegment, wall_name: str = "") -> int:
    """Read the segment index carried by the first tag of a segment.

    Raises:
        InvalidSegmentTag: If the segment has no tag or the tag is not an
            integer.
    """
    if not tagged.tags:
        raise InvalidSegmentTag(
            f"A wall segment is missing its index tag: {wall_name}"
        )
    tag = tagged.tags[0]
    if not isinstance(tag, str) or not _INDEX_TAG.fullmatch(tag):
        raise InvalidSegmentTag(
            f"A wall segment has an invalid index tag {tag!r}: {wall_name}"
        )
    return int(tag)


class SegmentedWall:
    """A wall of one or more adjacent segments, addressed by index.

    The number of segments is fixed when the wall is built. After that, the
    only mutation is assigning a new mesh to an existing segment.
    """

    def __init__(self, segments: Sequence[WallSegment], name: str = "") -> None:
        self.name = name
        self._segments: list[WallSegment] = list(segments)

    @classmethod
    def build(
        cls, children: Sequence[TaggedSegment], name: str = ""
    ) -> SegmentedWall:
        """Place each tagged segment at the index its tag names.

        Args:
            children: Every segment belonging to the wall, in any order.
            name: Identifies the wall in error messages and logs.

        Returns:
            A wall with ``len(children)`` slots.

        Raises:
            InvalidSegmentTag: A segment's tag is missing or not numeric.
            SegmentIndexOutOfRange: A tag names an index outside the wall.

        Note:
            Two segments with the same tag are not rejected; the later one
            replaces the earlier one and the slot it should have filled
            is left holding an empty segment with no mesh. This is almost
            always an authoring mistake, so it is logged.
        """
        size = len(children)
        slots = [WallSegment() for _ in range(size)]
        seen: set[int] = set()

        for child in children:
            index = parse_index_tag(child, name)
            if not 0 <= index < size:
                raise SegmentIndexOutOfRange(
                    f"Wall segment tagged {index} is outside [0, {size}): {name}"
                )
            if index in seen:
                logger.warning(
                    f"Wall {name!r} has more than one segment tagged {index}; "
                    "keeping the last one"
                )
            seen.add(index)
            slots[index] = child.segment

        return cls(slots, name=name)

    @property
    def size(self) -> int:
        return len(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[WallSegment]:
        return iter(self._segments)

    def is_valid_index(self, index: int) -> bool:
        """True if ``index`` addresses a segment of this wall."""
        if not isinstance(index, int) or isinstance(index, bool):
            return False
        return 0 <= index < len(self._segments)

    def get_segment(self, index: int) -> WallSegment:
        """Return the segment at ``index``.

        Raises:
            SegmentIndexOutOfRange: If the index is not valid for this wall.
        """
        if not self.is_valid_index(index):
            raise SegmentIndexOutOfRange(
                f"Wall {self.name!r} has no segment {index!r} "
                f"(size {len(self._segments)})"
            )
        return self._segments[index]

    def __repr__(self) -> str:
        return f"SegmentedWall(name={self.name!r}, size={len(self._segments)})"
