"""In-memory room templates.

A ``RoomBlueprint`` holds the same content an authored room asset does:
the tagged segments of each wall, the door and wall mesh pools, and the
specs it is filed under in the catalog. ``BlueprintInstantiator`` resolves
asset references against a set of blueprints, which lets the catalog and
factory run without a game engine behind them (tools, tests, headless
level previews).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .enums import WallDirection
from .errors import UnknownTemplate
from .room import Room
from .room_catalog import RoomSpecs
from .segmented_wall import MeshAsset, SegmentedWall, TaggedSegment, WallSegment

if TYPE_CHECKING:
    from dungeonkit.types import AssetReference, DungeonTheme, WorldPosition
    from dungeonkit.util.rng import RNG


@dataclass(frozen=True)
class SegmentBlueprint:
    """One authored wall segment: its index tags and starting mesh."""

    tags: tuple[str, ...]
    mesh: MeshAsset | None = None


def solid_wall(
    segment_count: int, mesh: MeshAsset | None
) -> tuple[SegmentBlueprint, ...]:
    """A wall of ``segment_count`` segments tagged 0..n-1, all showing ``mesh``."""
    return tuple(SegmentBlueprint((str(i),), mesh) for i in range(segment_count))


@dataclass(frozen=True, eq=False)
class RoomBlueprint:
    """Authored content for one room template.

    Attributes:
        theme: Catalog theme of the room.
        width: Segments along the North and South walls.
        length: Segments along the East and West walls.
        walls: Authored segments for each wall direction. Missing
            directions get a solid wall of the right size built from the
            first wall mesh.
        door_meshes: Meshes a segment may take when it becomes a door.
        wall_meshes: Meshes a segment may take when a door is removed.
    """

    theme: DungeonTheme
    width: int
    length: int
    door_meshes: tuple[MeshAsset, ...] = ()
    wall_meshes: tuple[MeshAsset, ...] = ()
    walls: Mapping[WallDirection, tuple[SegmentBlueprint, ...]] = field(
        default_factory=dict
    )

    @property
    def specs(self) -> RoomSpecs:
        return RoomSpecs(self.theme, self.width, self.length)

    def segments_for(self, direction: WallDirection) -> tuple[SegmentBlueprint, ...]:
        if direction in self.walls:
            return self.walls[direction]
        default_mesh = self.wall_meshes[0] if self.wall_meshes else None
        if direction in (WallDirection.NORTH, WallDirection.SOUTH):
            return solid_wall(self.width, default_mesh)
        return solid_wall(self.length, default_mesh)


class BlueprintInstantiator:
    """Spawns rooms from in-memory blueprints.

    Also acts as the catalog's template scanner: every blueprint whose
    asset reference starts with the scanned path is reported.
    """

    def __init__(
        self,
        blueprints: Mapping[AssetReference, RoomBlueprint],
        rng: RNG | None = None,
    ) -> None:
        self._blueprints = dict(blueprints)
        self._rng = rng
        self.live_rooms: list[Room] = []

    def scan(self, path: str) -> Iterator[tuple[AssetReference, RoomSpecs]]:
        for asset, blueprint in self._blueprints.items():
            if asset.startswith(path):
                yield asset, blueprint.specs

    def instantiate(self, asset: AssetReference, position: WorldPosition) -> Room:
        """Build a fresh room from the blueprint registered as ``asset``.

        Each call gets its own wall segments, so rooms never share state.

        Raises:
            UnknownTemplate: If no blueprint is registered for ``asset``.
            InvalidSegmentTag, SegmentIndexOutOfRange: If a wall's authored
                tags are malformed.
        """
        blueprint = self._blueprints.get(asset)
        if blueprint is None:
            raise UnknownTemplate(f"No room blueprint registered for {asset}")

        walls = {
            direction: SegmentedWall.build(
                [
                    TaggedSegment(segment.tags, WallSegment(segment.mesh))
                    for segment in blueprint.segments_for(direction)
                ],
                name=f"{asset}:{direction.name.title()}Wall",
            )
            for direction in WallDirection
        }
        room = Room(
            north=walls[WallDirection.NORTH],
            south=walls[WallDirection.SOUTH],
            east=walls[WallDirection.EAST],
            west=walls[WallDirection.WEST],
            door_meshes=blueprint.door_meshes,
            wall_meshes=blueprint.wall_meshes,
            name=asset,
            position=position,
            rng=self._rng,
        )
        self.live_rooms.append(room)
        return room

    def release(self, room: Room) -> None:
        if room in self.live_rooms:
            self.live_rooms.remove(room)
