"""Piece value object and its two-character notation."""

from __future__ import annotations

from dataclasses import dataclass, replace

from leiserchess.core.direction import Direction, is_diagonal, is_orthogonal
from leiserchess.core.enums import Color, Diagonal, Orthogonal, PieceKind
from leiserchess.core.errors import InvalidPiece

# Token ↔ (PieceKind, Direction) for white; black tokens are the lowercase form.
_WHITE_TOKENS: dict[str, tuple[PieceKind, Direction]] = {
    "NN": (PieceKind.MONARCH, Orthogonal.NORTH),
    "EE": (PieceKind.MONARCH, Orthogonal.EAST),
    "SS": (PieceKind.MONARCH, Orthogonal.SOUTH),
    "WW": (PieceKind.MONARCH, Orthogonal.WEST),
    "NE": (PieceKind.PAWN, Diagonal.NORTH_EAST),
    "SE": (PieceKind.PAWN, Diagonal.SOUTH_EAST),
    "SW": (PieceKind.PAWN, Diagonal.SOUTH_WEST),
    "NW": (PieceKind.PAWN, Diagonal.NORTH_WEST),
}

_TOKEN_MAP: dict[str, tuple[Color, PieceKind, Direction]] = {
    **{t: (Color.WHITE, k, d) for t, (k, d) in _WHITE_TOKENS.items()},
    **{t.lower(): (Color.BLACK, k, d) for t, (k, d) in _WHITE_TOKENS.items()},
}

_TOKENS: dict[tuple[Color, PieceKind, Direction], str] = {
    v: k for k, v in _TOKEN_MAP.items()
}

PIECE_TOKENS: frozenset[str] = frozenset(_TOKEN_MAP)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a directional piece.

    A piece with a mismatched kind and direction can be constructed, but it
    has no token and is rejected by :func:`validate_piece`.
    """

    color: Color
    kind: PieceKind
    direction: Direction

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Two-character token (uppercase = white, lowercase = black)."""
        try:
            return _TOKENS[(self.color, self.kind, self.direction)]
        except KeyError:
            raise InvalidPiece(f"Piece has no notation: {self!r}") from None

    @classmethod
    def from_token(cls, token: str) -> Piece:
        """Create piece from its token, e.g. 'NE' → white pawn facing north-east."""
        try:
            color, kind, direction = _TOKEN_MAP[token]
        except KeyError:
            raise InvalidPiece(f"Invalid piece token: {token!r}") from None
        return cls(color, kind, direction)

    # ── Helpers ──────────────────────────────────────────────────────────

    def with_direction(self, direction: Direction) -> Piece:
        return replace(self, direction=direction)

    @property
    def is_valid(self) -> bool:
        if self.kind == PieceKind.MONARCH:
            return is_orthogonal(self.direction)
        if self.kind == PieceKind.PAWN:
            return is_diagonal(self.direction)
        return False


def validate_piece(piece: Piece) -> None:
    """Raise :class:`InvalidPiece` unless monarch⇔orthogonal, pawn⇔diagonal."""
    if not piece.is_valid:
        raise InvalidPiece(
            f"{piece.kind.name.title()} cannot face {piece.direction.name}"
        )
