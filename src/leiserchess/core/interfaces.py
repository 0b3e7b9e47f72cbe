"""Abstract board and action interfaces.

Boards are generic over their location and piece types so that another
geometry can reuse the checked/unchecked contract and the action protocol.
The checked operations validate and then delegate to the unchecked fast
path; the fast path is for callers that have already established legality.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from leiserchess.core.errors import RemoveEmptyError

L = TypeVar("L")
P = TypeVar("P")
B = TypeVar("B", bound="IIndexable")


# ── Element access ───────────────────────────────────────────────────────────


class IIndexable(ABC, Generic[L, P]):
    """A grid of optional pieces addressed by location."""

    @abstractmethod
    def validate_location(self, location: L) -> None:
        """Raise if *location* is not addressable on this board."""

    @abstractmethod
    def validate_piece(self, piece: P) -> None:
        """Raise if *piece* may not be placed on this board."""

    @abstractmethod
    def get_unchecked(self, location: L) -> P | None:
        """Piece at *location*. Caller guarantees *location* is valid."""

    @abstractmethod
    def set_unchecked(self, location: L, piece: P) -> None:
        """Place *piece*. Caller guarantees *location* and *piece* are valid."""

    @abstractmethod
    def remove_unchecked(self, location: L) -> None:
        """Empty *location*. Caller guarantees *location* is valid."""

    def get(self, location: L) -> P | None:
        self.validate_location(location)
        return self.get_unchecked(location)

    def set(self, location: L, piece: P) -> None:
        self.validate_location(location)
        self.validate_piece(piece)
        self.set_unchecked(location, piece)

    def remove(self, location: L) -> P:
        """Remove and return the piece at *location*."""
        self.validate_location(location)
        piece = self.get_unchecked(location)
        if piece is None:
            raise RemoveEmptyError(f"No piece to remove at {location}")
        self.remove_unchecked(location)
        return piece


class IBoard(IIndexable[L, P]):
    """An indexable grid with whole-board invariants."""

    @abstractmethod
    def validate_board(self) -> None:
        """Raise if the board as a whole breaks an invariant."""


# ── Actions ──────────────────────────────────────────────────────────────────


class IAction(ABC, Generic[B]):
    """A candidate board transformation, validated before it is applied."""

    @abstractmethod
    def validate(self, board: B) -> None:
        """Raise if the action is illegal on *board*. Never mutates."""

    @abstractmethod
    def apply_unchecked(self, board: B) -> None:
        """Mutate *board*. Only call after :meth:`validate` has passed."""

    def apply(self, board: B) -> None:
        self.validate(board)
        self.apply_unchecked(board)
