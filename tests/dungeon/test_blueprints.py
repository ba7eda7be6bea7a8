"""Tests for in-memory room blueprints."""

from __future__ import annotations

from dungeonkit.dungeon import (
    BlueprintInstantiator,
    RoomBlueprint,
    RoomSpecs,
    SegmentBlueprint,
    WallDirection,
    WallLocation,
)
from dungeonkit.dungeon.blueprints import solid_wall
from tests.helpers import DOOR_A, WALL_A, WALL_B, FirstPicker, asset

ROOM = asset("/Game/Dungeon/Rooms/Forest/Glade")


def test_solid_wall_tags_segments_in_order() -> None:
    segments = solid_wall(3, WALL_A)
    assert [s.tags for s in segments] == [("0",), ("1",), ("2",)]
    assert all(s.mesh == WALL_A for s in segments)


def test_blueprint_specs() -> None:
    blueprint = RoomBlueprint("forest", 3, 2)
    assert blueprint.specs == RoomSpecs("forest", 3, 2)


def test_default_walls_follow_width_and_length() -> None:
    blueprint = RoomBlueprint("forest", 3, 2, wall_meshes=(WALL_B, WALL_A))
    assert len(blueprint.segments_for(WallDirection.NORTH)) == 3
    assert len(blueprint.segments_for(WallDirection.WEST)) == 2
    assert blueprint.segments_for(WallDirection.SOUTH)[0].mesh == WALL_B


def test_authored_door_is_detected_after_instantiation() -> None:
    """Segments authored with a door mesh spawn as doors."""
    blueprint = RoomBlueprint(
        "forest",
        2,
        2,
        door_meshes=(DOOR_A,),
        wall_meshes=(WALL_A,),
        walls={
            WallDirection.NORTH: (
                SegmentBlueprint(("1",), DOOR_A),
                SegmentBlueprint(("0",), WALL_A),
            )
        },
    )
    instantiator = BlueprintInstantiator({ROOM: blueprint}, rng=FirstPicker())

    room = instantiator.instantiate(ROOM, (0.0, 0.0, 0.0))

    assert room.name == ROOM
    assert room.has_door_at(WallLocation(WallDirection.NORTH, 1))
    assert not room.has_door_at(WallLocation(WallDirection.NORTH, 0))


def test_scan_filters_by_path() -> None:
    other = asset("/Game/Other/Room")
    instantiator = BlueprintInstantiator(
        {ROOM: RoomBlueprint("forest", 1, 1), other: RoomBlueprint("sewer", 2, 2)}
    )
    assert list(instantiator.scan("/Game/Dungeon/")) == [
        (ROOM, RoomSpecs("forest", 1, 1))
    ]


def test_release_forgets_room() -> None:
    instantiator = BlueprintInstantiator({ROOM: RoomBlueprint("forest", 1, 1)})
    room = instantiator.instantiate(ROOM, (0.0, 0.0, 0.0))
    assert instantiator.live_rooms == [room]

    instantiator.release(room)
    assert instantiator.live_rooms == []


def test_blueprints_can_be_hashed() -> None:
    """Blueprints with authored walls can key a set or dict."""
    blueprint = RoomBlueprint(
        "forest",
        1,
        1,
        walls={WallDirection.EAST: (SegmentBlueprint(("0",), WALL_A),)},
    )
    assert blueprint in {blueprint}
    assert hash(blueprint) == hash(blueprint)
