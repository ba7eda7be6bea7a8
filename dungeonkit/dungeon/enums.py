from enum import Enum, auto


class WallDirection(Enum):
    """The four walls every room is built from."""

    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()
