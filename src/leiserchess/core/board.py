"""Board - directional piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from leiserchess.core.constants import BOARD_SIZE, MAX_PIECES
from leiserchess.core.enums import Color, Diagonal, Orthogonal, PieceKind
from leiserchess.core.errors import InvalidBoard, InvalidLocation, InvalidPiece
from leiserchess.core.interfaces import IBoard
from leiserchess.core.piece import Piece, validate_piece
from leiserchess.core.types import Location

_CELLS = BOARD_SIZE * BOARD_SIZE


def _cell_text(piece: Piece | None) -> str:
    if piece is None:
        return " ."
    return str(piece) if piece.is_valid else "??"


class Board(IBoard[Location, Piece]):
    """Mutable 64-cell board.

    Checked access (:meth:`get`, :meth:`set`, :meth:`remove`) bounds-checks
    locations and validates pieces. The ``*_unchecked`` methods skip every
    check and must only be reached once legality is established, e.g. from
    :meth:`StandardAction.apply_unchecked` after a passed ``validate``.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * _CELLS

    # -- Validation ---------------------------------------------------------

    def validate_location(self, location: Location) -> None:
        if not location.is_on_board:
            raise InvalidLocation(
                f"Location out of bounds: ({location.file}, {location.rank})"
            )

    def validate_piece(self, piece: Piece) -> None:
        validate_piece(piece)

    def validate_board(self) -> None:
        count = 0
        for location, piece in self.occupied():
            try:
                validate_piece(piece)
            except InvalidPiece as exc:
                raise InvalidBoard(f"Invalid piece at {location}: {exc}") from exc
            count += 1
        if count == 0:
            raise InvalidBoard("Board has no pieces")
        if count > MAX_PIECES:
            raise InvalidBoard(f"Board has {count} pieces (max {MAX_PIECES})")

    # -- Unchecked element access -------------------------------------------

    def get_unchecked(self, location: Location) -> Piece | None:
        return self._squares[location.index]

    def set_unchecked(self, location: Location, piece: Piece) -> None:
        self._squares[location.index] = piece

    def remove_unchecked(self, location: Location) -> None:
        self._squares[location.index] = None

    # -- Query helpers ------------------------------------------------------

    def is_empty(self, location: Location) -> bool:
        return self.get(location) is None

    def occupied(self) -> Iterator[tuple[Location, Piece]]:
        """Occupied cells in index order (a1, b1, …, h8)."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield Location(idx % BOARD_SIZE, idx // BOARD_SIZE), piece

    def piece_count(self) -> int:
        return sum(1 for p in self._squares if p is not None)

    def row(self, rank: int) -> list[Piece | None]:
        """Cells of one rank from file a to file h."""
        if not 0 <= rank < BOARD_SIZE:
            raise InvalidLocation(f"Rank out of bounds: {rank}")
        start = rank * BOARD_SIZE
        return self._squares[start : start + BOARD_SIZE]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * _CELLS

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard opening position.

        Black monarchs start on rank 1 facing north, white monarchs on
        rank 8 facing south; each side has six pawns in three pairs.
        """
        b = cls()
        for f in (0, BOARD_SIZE - 1):
            b.set(Location(f, 0), Piece(Color.BLACK, PieceKind.MONARCH, Orthogonal.NORTH))
            b.set(Location(f, 7), Piece(Color.WHITE, PieceKind.MONARCH, Orthogonal.SOUTH))

        for f in (0, 3, 6):
            b.set(Location(f, 1), Piece(Color.BLACK, PieceKind.PAWN, Diagonal.SOUTH_EAST))
            b.set(Location(f + 1, 1), Piece(Color.BLACK, PieceKind.PAWN, Diagonal.SOUTH_WEST))
            b.set(Location(f, 6), Piece(Color.WHITE, PieceKind.PAWN, Diagonal.NORTH_EAST))
            b.set(Location(f + 1, 6), Piece(Color.WHITE, PieceKind.PAWN, Diagonal.NORTH_WEST))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = [_cell_text(p) for p in self.row(rank)]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("   a  b  c  d  e  f  g  h")
        return "\n".join(rows)
