"""Dungeon rooms with runtime-configurable doorways.

A room is the structural building block of a dungeon: four segmented walls
that start out solid, plus the door and wall meshes its template allows.
Connecting two rooms means turning a wall segment into a doorway by giving
it one of the door meshes; closing it back up gives it one of the wall
meshes.

Whether a segment is a door is never stored. It is read off the segment's
current mesh: a segment is a door exactly when its mesh belongs to the
room's door mesh pool.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

import numpy as np

from dungeonkit import config
from dungeonkit.util import rng as rng_streams

from .enums import WallDirection
from .errors import (
    DuplicateDoor,
    InvalidWallLocation,
    MissingDoorMeshPool,
    MissingWallMeshPool,
    NoDoorAtLocation,
    WallDimensionMismatch,
)
from .segmented_wall import MeshAsset, SegmentedWall

if TYPE_CHECKING:
    from dungeonkit.types import WorldPosition
    from dungeonkit.util.rng import RNG

    from .room_catalog import RoomSpecs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WallLocation:
    """One addressable segment: a wall and an index along it (from 0)."""

    direction: WallDirection
    segment_index: int

    def __str__(self) -> str:
        return f"{self.direction.name}[{self.segment_index}]"


class Room:
    """A spawned room and the door engine that edits its walls.

    The walls and mesh pools come from the room's template and are fixed for
    the room's lifetime; only the mesh held by each wall segment changes.
    """

    def __init__(
        self,
        *,
        north: SegmentedWall,
        south: SegmentedWall,
        east: SegmentedWall,
        west: SegmentedWall,
        door_meshes: Sequence[MeshAsset],
        wall_meshes: Sequence[MeshAsset],
        name: str = "",
        position: WorldPosition = config.DEFAULT_ROOM_POSITION,
        rng: RNG | None = None,
    ) -> None:
        """Create a room from its template content.

        Args:
            north, south, east, west: The room's four walls.
            door_meshes: Meshes a segment may take when it becomes a door.
            wall_meshes: Meshes a segment may take when a door is removed.
            name: Template path, used in diagnostics.
            position: Where the room sits in the level.
            rng: Source for mesh selection. Defaults to the shared
                "dungeon.doors" / "dungeon.walls" streams.
        """
        self.name = name
        self.position = position
        self._north = north
        self._south = south
        self._east = east
        self._west = west
        self._door_meshes: tuple[MeshAsset, ...] = tuple(door_meshes)
        self._wall_meshes: tuple[MeshAsset, ...] = tuple(wall_meshes)
        self._door_rng: RNG
        self._wall_rng: RNG
        if rng is not None:
            self._door_rng = self._wall_rng = rng
        else:
            self._door_rng = rng_streams.get(config.DOOR_RNG_DOMAIN)
            self._wall_rng = rng_streams.get(config.WALL_RNG_DOMAIN)

    @property
    def door_meshes(self) -> tuple[MeshAsset, ...]:
        return self._door_meshes

    @property
    def wall_meshes(self) -> tuple[MeshAsset, ...]:
        return self._wall_meshes

    # -------------------------------------------------------------------------
    # Template validation
    # -------------------------------------------------------------------------

    def validate(self) -> None:
        """Reject a template that can't open or close doorways.

        Raises:
            MissingDoorMeshPool: If the template defines no door meshes.
            MissingWallMeshPool: If the template defines no wall meshes.
        """
        if not self._door_meshes:
            raise MissingDoorMeshPool(
                f"Room template missing door meshes: {self.name}"
            )
        if not self._wall_meshes:
            raise MissingWallMeshPool(
                f"Room template missing wall meshes: {self.name}"
            )

    def validate_dimensions(self, specs: RoomSpecs) -> None:
        """Check the walls against the template's advertised size.

        North and South walls must have ``specs.width`` segments, East and
        West walls ``specs.length``.

        Raises:
            WallDimensionMismatch: On the first wall with the wrong size.
        """
        for direction in WallDirection:
            expected = self._expected_wall_size(direction, specs)
            actual = self.get_wall(direction).size
            if actual != expected:
                raise WallDimensionMismatch(
                    f"Room {self.name!r}: {direction.name} wall has {actual} "
                    f"segments, specs {specs} require {expected}"
                )

    @staticmethod
    def _expected_wall_size(direction: WallDirection, specs: RoomSpecs) -> int:
        match direction:
            case WallDirection.NORTH | WallDirection.SOUTH:
                return specs.width
            case WallDirection.EAST | WallDirection.WEST:
                return specs.length
            case _:
                assert_never(direction)

    # -------------------------------------------------------------------------
    # Wall addressing
    # -------------------------------------------------------------------------

    def get_wall(self, direction: WallDirection) -> SegmentedWall:
        """Return the wall on the given side of the room."""
        match direction:
            case WallDirection.NORTH:
                return self._north
            case WallDirection.SOUTH:
                return self._south
            case WallDirection.EAST:
                return self._east
            case WallDirection.WEST:
                return self._west
            case _:
                assert_never(direction)

    def is_valid_location(self, location: WallLocation) -> bool:
        """True if the location's index exists on the location's wall.

        Valid indices are [0, width) on the North and South walls and
        [0, length) on the East and West walls.
        """
        if not isinstance(location.direction, WallDirection):
            return False
        wall = self.get_wall(location.direction)
        return wall.is_valid_index(location.segment_index)

    def _require_valid_location(self, location: WallLocation, action: str) -> None:
        if not self.is_valid_location(location):
            raise InvalidWallLocation(
                f"Attempted to {action} an invalid location {location} "
                f"in room {self.name!r}"
            )

    # -------------------------------------------------------------------------
    # Doors
    # -------------------------------------------------------------------------

    def has_door_at(self, location: WallLocation) -> bool:
        """True if the segment at ``location`` currently shows a door mesh.

        Raises:
            InvalidWallLocation: If the location doesn't exist in this room.
        """
        self._require_valid_location(location, "check for a door at")
        return self._mesh_at(location) in self._door_meshes

    def add_door(self, location: WallLocation) -> None:
        """Turn a wall segment into a doorway using a random door mesh.

        Raises:
            MissingDoorMeshPool: If the template defines no door meshes.
            InvalidWallLocation: If the location doesn't exist in this room.
            DuplicateDoor: If there is already a door at the location.
        """
        if not self._door_meshes:
            raise MissingDoorMeshPool(
                f"Room template missing door meshes: {self.name}"
            )
        self._require_valid_location(location, "add a door to")
        if self.has_door_at(location):
            raise DuplicateDoor(
                f"Attempted to add a door at {location} in room {self.name!r}, "
                "which already has a door"
            )

        mesh = self._door_rng.choice(self._door_meshes)
        self._set_mesh(location, mesh)
        logger.debug(f"Added door {mesh.name} at {location} in room {self.name!r}")

    def remove_door(self, location: WallLocation) -> None:
        """Wall up a doorway using a random wall mesh.

        Raises:
            MissingWallMeshPool: If the template defines no wall meshes.
            InvalidWallLocation: If the location doesn't exist in this room.
            NoDoorAtLocation: If there is no door at the location.
        """
        if not self._wall_meshes:
            raise MissingWallMeshPool(
                f"Room template missing wall meshes: {self.name}"
            )
        self._require_valid_location(location, "remove a door from")
        if not self.has_door_at(location):
            raise NoDoorAtLocation(
                f"Attempted to remove a door at {location} in room {self.name!r}, "
                "which has no door"
            )

        mesh = self._wall_rng.choice(self._wall_meshes)
        self._set_mesh(location, mesh)
        logger.debug(f"Removed door at {location} in room {self.name!r}")

    def door_locations(self) -> Iterator[WallLocation]:
        """Yield every location that currently has a door."""
        for direction in WallDirection:
            for index, segment in enumerate(self.get_wall(direction)):
                if segment.mesh in self._door_meshes:
                    yield WallLocation(direction, index)

    def door_mask(self, direction: WallDirection) -> np.ndarray:
        """Boolean array over one wall's segments, True where there is a door."""
        wall = self.get_wall(direction)
        return np.fromiter(
            (segment.mesh in self._door_meshes for segment in wall),
            dtype=bool,
            count=wall.size,
        )

    def _mesh_at(self, location: WallLocation) -> MeshAsset | None:
        wall = self.get_wall(location.direction)
        return wall.get_segment(location.segment_index).mesh

    def _set_mesh(self, location: WallLocation, mesh: MeshAsset) -> None:
        wall = self.get_wall(location.direction)
        wall.get_segment(location.segment_index).mesh = mesh

    def __repr__(self) -> str:
        return f"Room(name={self.name!r}, position={self.position})"
