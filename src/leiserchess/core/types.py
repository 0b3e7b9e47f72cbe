"""Board coordinates and the centre-biased qi metric.

File 0–7 maps to letters a–h and rank 0–7 to digits 1–8, so
``Location(0, 0)`` is ``a1`` and ``Location(7, 7)`` is ``h8``.
"""

from __future__ import annotations

from dataclasses import dataclass

from leiserchess.core.constants import BOARD_SIZE
from leiserchess.core.errors import InvalidLocation

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Location:
    """Immutable (file, rank) pair.

    Construction does not bounds-check; boards reject out-of-range locations
    with :class:`InvalidLocation`.
    """

    file: int
    rank: int

    @property
    def is_on_board(self) -> bool:
        return 0 <= self.file < BOARD_SIZE and 0 <= self.rank < BOARD_SIZE

    @property
    def index(self) -> int:
        """Flat cell index, a1=0 … h8=63."""
        return self.rank * BOARD_SIZE + self.file

    @property
    def qi(self) -> int:
        """Squared distance from the board centre on a doubled grid.

        2 on the four centre squares, 98 on the corners.
        """
        dx = 2 * self.file - (BOARD_SIZE - 1)
        dy = 2 * self.rank - (BOARD_SIZE - 1)
        return dx * dx + dy * dy

    def is_adjacent(self, other: Location) -> bool:
        """Chebyshev distance exactly one. A location is not adjacent to itself."""
        if self == other:
            return False
        return abs(self.file - other.file) <= 1 and abs(self.rank - other.rank) <= 1

    @property
    def name(self) -> str:
        """Square name, e.g. ``Location(4, 3).name == 'e4'``."""
        if not self.is_on_board:
            raise InvalidLocation(f"Location off the board: {self!r}")
        return _FILES[self.file] + _RANKS[self.rank]

    def __str__(self) -> str:
        if not self.is_on_board:
            return f"({self.file}, {self.rank})"
        return self.name


def parse_location(name: str) -> Location:
    """Parse a square name, e.g. 'e4' → ``Location(4, 3)``."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise InvalidLocation(f"Invalid square name: {name!r}")
    return Location(_FILES.index(name[0]), _RANKS.index(name[1]))


def all_locations() -> list[Location]:
    """Every on-board location in index order."""
    return [Location(f, r) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Location(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Location(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Location(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Location(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Location(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Location(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Location(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Location(f, 7) for f in range(8))
