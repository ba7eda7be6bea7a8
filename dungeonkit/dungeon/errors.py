"""Errors raised while assembling dungeon rooms.

Everything here is a contract violation: either the authored content is
broken (``DungeonContentError``) or a caller asked for something the
current state doesn't allow (``DungeonUsageError``). None of them are
transient, and the operation that raised them has made no changes.

Each error also derives the closest builtin so that code catching
``LookupError`` or ``ValueError`` keeps working.
"""

from __future__ import annotations


class DungeonError(Exception):
    """Base class for every dungeon assembly error."""


class DungeonContentError(DungeonError):
    """Room template or wall content is malformed and must not be used."""


class DungeonUsageError(DungeonError):
    """A precondition of the called operation does not hold."""


# =============================================================================
# Wall segments
# =============================================================================


class InvalidSegmentTag(DungeonContentError, ValueError):
    """A wall segment has no index tag, or its tag is not an integer."""


class SegmentIndexOutOfRange(DungeonUsageError, IndexError):
    """A segment index falls outside ``[0, size)`` of its wall."""


# =============================================================================
# Catalog
# =============================================================================


class EmptyCatalog(DungeonContentError, ValueError):
    """A catalog was built from zero room templates."""


class InvalidRoomSpecs(DungeonUsageError, ValueError):
    """Room specs with a non-positive or non-integer dimension."""


class UnknownSpecs(DungeonUsageError, LookupError):
    """No room template matches the requested specs."""


class UnknownTheme(DungeonUsageError, LookupError):
    """No room template of the requested theme was ever indexed."""


class UnknownTemplate(DungeonUsageError, LookupError):
    """An instantiator was asked for an asset it cannot resolve."""


# =============================================================================
# Rooms and doors
# =============================================================================


class InvalidWallLocation(DungeonUsageError, ValueError):
    """The direction/index combination does not address a wall segment."""


class MissingDoorMeshPool(DungeonContentError):
    """The room template defines no door meshes."""


class MissingWallMeshPool(DungeonContentError):
    """The room template defines no wall meshes."""


class WallDimensionMismatch(DungeonContentError, ValueError):
    """A wall's segment count disagrees with the room's width or length."""


class DuplicateDoor(DungeonUsageError):
    """A door was added where one already exists."""


class NoDoorAtLocation(DungeonUsageError):
    """A door was removed from a segment that doesn't have one."""
