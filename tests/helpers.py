from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from dungeonkit.dungeon import (
    MeshAsset,
    Room,
    SegmentedWall,
    TaggedSegment,
    WallDirection,
)
from dungeonkit.types import AssetReference

T = TypeVar("T")

DOOR_A = MeshAsset("SM_Door_Arch")
DOOR_B = MeshAsset("SM_Door_Portcullis")
WALL_A = MeshAsset("SM_Wall_Brick")
WALL_B = MeshAsset("SM_Wall_Cracked")


class FirstPicker:
    """Deterministic stand-in for an RNG: always picks the first element."""

    def __init__(self) -> None:
        self.pools: list[tuple] = []

    def choice(self, seq: Sequence[T]) -> T:
        self.pools.append(tuple(seq))
        return seq[0]


class LastPicker:
    """Deterministic stand-in for an RNG: always picks the last element."""

    def choice(self, seq: Sequence[T]) -> T:
        return seq[-1]


def make_wall(
    size: int, mesh: MeshAsset | None = WALL_A, name: str = "Wall"
) -> SegmentedWall:
    return SegmentedWall.build(
        [TaggedSegment.create(str(i), mesh) for i in range(size)], name=name
    )


def make_room(
    width: int = 4,
    length: int = 3,
    *,
    door_meshes: Sequence[MeshAsset] = (DOOR_A, DOOR_B),
    wall_meshes: Sequence[MeshAsset] = (WALL_A, WALL_B),
    rng=None,
    name: str = "/Game/Test/Rooms/TestRoom",
) -> Room:
    """A room with solid walls: width segments N/S, length segments E/W."""
    return Room(
        north=make_wall(width, name="NorthWall"),
        south=make_wall(width, name="SouthWall"),
        east=make_wall(length, name="EastWall"),
        west=make_wall(length, name="WestWall"),
        door_meshes=door_meshes,
        wall_meshes=wall_meshes,
        name=name,
        rng=rng if rng is not None else FirstPicker(),
    )


def asset(path: str) -> AssetReference:
    return AssetReference(path)


ALL_DIRECTIONS = tuple(WallDirection)
