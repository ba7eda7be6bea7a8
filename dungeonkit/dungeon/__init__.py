"""Dungeon assembly from a catalog of room templates.

This package indexes room templates by their specs, addresses wall
segments by their authored index tags, and opens or closes doorways in
spawned rooms.
"""

from .blueprints import BlueprintInstantiator, RoomBlueprint, SegmentBlueprint
from .dungeon import Dungeon
from .enums import WallDirection
from .errors import (
    DungeonContentError,
    DungeonError,
    DungeonUsageError,
    DuplicateDoor,
    EmptyCatalog,
    InvalidRoomSpecs,
    InvalidSegmentTag,
    InvalidWallLocation,
    MissingDoorMeshPool,
    MissingWallMeshPool,
    NoDoorAtLocation,
    SegmentIndexOutOfRange,
    UnknownSpecs,
    UnknownTemplate,
    UnknownTheme,
    WallDimensionMismatch,
)
from .factory import RoomFactory, RoomInstantiator, SpawnInfo
from .room import Room, WallLocation
from .room_catalog import RoomAssetCatalog, RoomSpecs, TemplateScanner
from .segmented_wall import MeshAsset, SegmentedWall, TaggedSegment, WallSegment

__all__ = [
    "BlueprintInstantiator",
    "DuplicateDoor",
    "Dungeon",
    "DungeonContentError",
    "DungeonError",
    "DungeonUsageError",
    "EmptyCatalog",
    "InvalidRoomSpecs",
    "InvalidSegmentTag",
    "InvalidWallLocation",
    "MeshAsset",
    "MissingDoorMeshPool",
    "MissingWallMeshPool",
    "NoDoorAtLocation",
    "Room",
    "RoomAssetCatalog",
    "RoomBlueprint",
    "RoomFactory",
    "RoomInstantiator",
    "RoomSpecs",
    "SegmentBlueprint",
    "SegmentIndexOutOfRange",
    "SegmentedWall",
    "SpawnInfo",
    "TaggedSegment",
    "TemplateScanner",
    "UnknownSpecs",
    "UnknownTemplate",
    "UnknownTheme",
    "WallDimensionMismatch",
    "WallDirection",
    "WallLocation",
    "WallSegment",
]
