"""
Configuration constants.

Centralizes the tunable values used by dungeon assembly.
Organized by functional area for easy maintenance.
"""

from dungeonkit.types import AssetReference, WorldPosition

# =============================================================================
# RANDOM STREAMS
# =============================================================================

# Mesh picked when a segment becomes a doorway
DOOR_RNG_DOMAIN = "dungeon.doors"

# Mesh picked when a doorway is walled back up
WALL_RNG_DOMAIN = "dungeon.walls"

# Choosing between interchangeable templates that share the same specs
TEMPLATE_RNG_DOMAIN = "dungeon.templates"

# =============================================================================
# ROOM CONTENT
# =============================================================================

# Content path scanned for room templates when building the catalog
ROOM_ASSETS_PATH = AssetReference("/Game/Dungeon/Rooms/")

# Rooms spawned without an explicit placement land here
DEFAULT_ROOM_POSITION: WorldPosition = (0.0, 0.0, 0.0)

# When True, template validation also requires North/South walls to have
# `width` segments and East/West walls to have `length` segments.
STRICT_WALL_DIMENSIONS = True
