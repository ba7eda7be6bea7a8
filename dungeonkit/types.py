from __future__ import annotations

from typing import NewType

# =============================================================================
# DUNGEON CONTENT TYPES
# =============================================================================

# Categorical tag grouping room templates into a visual/gameplay style.
# Example: "crypt", "forest", "sewer"
DungeonTheme = str

# Room dimensions are measured in floor tiles, never in world units.
TileCount = int  # Example: width=4 means 4 wall segments along North/South

# Opaque handle to an unloaded room template. The core never dereferences it;
# resolving it into a live room is the instantiator's job.
AssetReference = NewType("AssetReference", str)

# =============================================================================
# PLACEMENT TYPES
# =============================================================================

# Where a room's origin sits in the level. Example: (1000.0, 1000.0, 0.0)
WorldPosition = tuple[float, float, float]

# =============================================================================
# RANDOMNESS
# =============================================================================

RandomSeed = int | str | None
