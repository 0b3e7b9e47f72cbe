"""StandardAction - relocation, shove or in-place rotation of one piece."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from leiserchess.core.board import Board
from leiserchess.core.constants import MAX_VICTIMS
from leiserchess.core.direction import Direction
from leiserchess.core.enums import ActionFault, PieceKind
from leiserchess.core.errors import InvalidAction
from leiserchess.core.interfaces import IAction
from leiserchess.core.piece import Piece
from leiserchess.core.types import Location

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StandardAction(IAction[Board]):
    """Immutable candidate transformation of a :class:`Board`.

    Attributes:
        victims: Locations emptied before the piece is placed.
        source: Where the acting piece starts.
        destination: Where the acting piece ends up.
        piece: The acting piece, with its direction before the action.
        new_direction: Facing after an in-place rotation, ``None`` for a move.

    The source square is only vacated when it is listed among *victims*;
    a move generator that relocates a piece must include its source there.
    """

    victims: tuple[Location, ...]
    source: Location
    destination: Location
    piece: Piece
    new_direction: Direction | None = None

    # ── Derived ──────────────────────────────────────────────────────────

    @property
    def is_rotation(self) -> bool:
        return self.new_direction is not None

    @property
    def transformed_piece(self) -> Piece:
        """The piece as written to the destination."""
        if self.new_direction is None:
            return self.piece
        return self.piece.with_direction(self.new_direction)

    # ── Protocol ─────────────────────────────────────────────────────────

    def validate(self, board: Board) -> None:
        if len(self.victims) > MAX_VICTIMS:
            self._reject(ActionFault.TOO_MANY_VICTIMS)

        for location in (*self.victims, self.source, self.destination):
            board.validate_location(location)

        occupant = board.get(self.destination)
        if occupant is not None:
            if occupant.kind == PieceKind.MONARCH:
                self._reject(ActionFault.MONARCH_SHOVE)
            # Equal qi is a sideways push and is not a shove.
            if self.source.qi <= self.destination.qi:
                self._reject(ActionFault.SHOVE_FROM_LOWER_QI)

        if self.new_direction is not None:
            if self.source != self.destination:
                self._reject(ActionFault.ROTATION_NOT_IN_PLACE)
        elif not self.source.is_adjacent(self.destination):
            self._reject(ActionFault.NOT_ADJACENT)

    def apply_unchecked(self, board: Board) -> None:
        """Write the action to *board* without validation.

        Trusted callers only: the locations must be on the board, which
        :meth:`validate` guarantees.
        """
        for victim in self.victims:
            board.remove_unchecked(victim)
        board.set_unchecked(self.destination, self.transformed_piece)

    def _reject(self, fault: ActionFault) -> None:
        _LOGGER.debug("Rejected %s→%s: %s", self.source, self.destination, fault.value)
        raise InvalidAction(fault)
