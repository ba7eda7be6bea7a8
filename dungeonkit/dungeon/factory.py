"""Spawning assembled rooms from catalog templates.

Resolving a template into a live room is somebody else's job (an engine,
or ``BlueprintInstantiator`` for in-memory content). The factory wraps that
step with the checks and door placement every spawned room needs:

    instantiate -> validate template -> place -> add requested doors

A spawn either returns a room with every requested door, or raises and
hands the half-built room back to the instantiator for disposal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from dungeonkit import config

from .errors import DungeonError

if TYPE_CHECKING:
    from dungeonkit.types import AssetReference, WorldPosition

    from .room import Room, WallLocation
    from .room_catalog import RoomAssetCatalog, RoomSpecs

logger = logging.getLogger(__name__)


class RoomInstantiator(Protocol):
    """Turns a template reference into a live room, and disposes of rooms."""

    def instantiate(self, asset: AssetReference, position: WorldPosition) -> Room:
        """Return a new room with its walls and mesh pools populated."""
        ...

    def release(self, room: Room) -> None:
        """Dispose of a room that will not be used."""
        ...


@dataclass(frozen=True)
class SpawnInfo:
    """Everything needed to spawn one room.

    Attributes:
        asset: The room template to spawn.
        position: Where to place the room.
        door_locations: Segments to open as doors, applied in order.
    """

    asset: AssetReference
    position: WorldPosition = config.DEFAULT_ROOM_POSITION
    door_locations: tuple[WallLocation, ...] = ()


class RoomFactory:
    """Spawns rooms through an instantiator and opens their doors."""

    def __init__(self, instantiator: RoomInstantiator) -> None:
        self.instantiator = instantiator

    def spawn(self, spawn_info: SpawnInfo) -> Room:
        """Spawn a room and add a door at each requested location.

        Raises:
            MissingDoorMeshPool, MissingWallMeshPool: The template can't be
                used for door placement.
            InvalidWallLocation: A door location doesn't exist in the room.
            DuplicateDoor: A location was requested twice, or the template
                already has a door there.

        Whatever the failure, the room is released before the error
        propagates.
        """
        room = self.instantiator.instantiate(spawn_info.asset, spawn_info.position)
        try:
            room.validate()
            room.position = spawn_info.position
            for location in spawn_info.door_locations:
                room.add_door(location)
        except Exception as e:
            logger.error(f"Failed to spawn room {spawn_info.asset}: {e}")
            self.instantiator.release(room)
            raise

        logger.info(
            f"Spawned room {spawn_info.asset} at {spawn_info.position} "
            f"with {len(spawn_info.door_locations)} doors"
        )
        return room

    def validate_templates(
        self,
        catalog: RoomAssetCatalog,
        specs: RoomSpecs | None = None,
        check_dimensions: bool = config.STRICT_WALL_DIMENSIONS,
    ) -> dict[AssetReference, DungeonError]:
        """Instantiate every template in the catalog once and check it.

        Meant for a load-time content pass: problems are collected and
        logged rather than raised, so one broken template doesn't stop the
        rest from being checked.

        Args:
            catalog: The templates to check.
            specs: Only check templates with these specs.
            check_dimensions: Also compare wall sizes against the specs.

        Returns:
            The error for each template that failed; empty if all passed.
        """
        failures: dict[AssetReference, DungeonError] = {}
        for asset, template_specs in catalog:
            if specs is not None and template_specs != specs:
                continue
            room: Room | None = None
            try:
                room = self.instantiator.instantiate(
                    asset, config.DEFAULT_ROOM_POSITION
                )
                room.validate()
                if check_dimensions:
                    room.validate_dimensions(template_specs)
            except DungeonError as e:
                logger.error(f"[FAIL] room template {asset}: {e}")
                failures[asset] = e
            finally:
                if room is not None:
                    self.instantiator.release(room)
        return failures
