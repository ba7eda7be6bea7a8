"""A dungeon: the ordered set of rooms assembled for one level."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .factory import RoomFactory, SpawnInfo
    from .room import Room

logger = logging.getLogger(__name__)


class Dungeon:
    """Owns the rooms of one level, in the order they were added.

    Rooms belong to exactly one dungeon and live as long as it does.
    """

    def __init__(self, factory: RoomFactory | None = None, name: str = "") -> None:
        self.name = name
        self.factory = factory
        self._rooms: list[Room] = []

    @property
    def rooms(self) -> tuple[Room, ...]:
        return tuple(self._rooms)

    def add_room(self, room: Room) -> None:
        """Attach an already spawned room to the dungeon."""
        if any(existing is room for existing in self._rooms):
            raise ValueError(f"Room {room.name!r} is already part of this dungeon")
        self._rooms.append(room)
        logger.debug(f"Dungeon {self.name!r} now has {len(self._rooms)} rooms")

    def spawn_room(self, spawn_info: SpawnInfo) -> Room:
        """Spawn a room through the dungeon's factory and attach it.

        A failed spawn leaves the dungeon unchanged.
        """
        if self.factory is None:
            raise RuntimeError(f"Dungeon {self.name!r} has no room factory")
        room = self.factory.spawn(spawn_info)
        self.add_room(room)
        return room

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)

    def __len__(self) -> int:
        return len(self._rooms)
