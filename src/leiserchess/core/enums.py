"""Core enumerations for the LeiserChess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds. Monarchs face orthogonally, pawns diagonally."""

    PAWN = 1
    MONARCH = 2


# Directions are plain Enums rather than IntEnums so that members of the two
# classes never compare equal to each other. Declaration order is clockwise.


class Orthogonal(Enum):
    """Orthogonal facing, the direction class of monarchs."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"


class Diagonal(Enum):
    """Diagonal facing, the direction class of pawns."""

    NORTH_EAST = "NE"
    SOUTH_EAST = "SE"
    SOUTH_WEST = "SW"
    NORTH_WEST = "NW"


class Rotation(Enum):
    """Relative turn between two directions of the same class."""

    RIGHT = "R"  # quarter turn clockwise
    U_TURN = "U"  # half turn
    LEFT = "L"  # quarter turn counter-clockwise

    def __str__(self) -> str:
        return self.value


class ActionFault(Enum):
    """Reason an action failed validation."""

    TOO_MANY_VICTIMS = "too many victims"
    MONARCH_SHOVE = "monarchs cannot be shoved"
    SHOVE_FROM_LOWER_QI = "must shove from higher qi square"
    ROTATION_NOT_IN_PLACE = "rotation requires identical source/destination"
    NOT_ADJACENT = "source must be adjacent to destination"
