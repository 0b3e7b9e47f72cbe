"""Error taxonomy raised by the checked operations of the core.

Every error is a :class:`ValueError`, so callers that only care about
malformed input can catch that alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from leiserchess.core.enums import ActionFault


class LeiserChessError(ValueError):
    """Base class for all rule-core errors."""


class InvalidLocation(LeiserChessError):
    """A coordinate lies outside the board."""


class InvalidPiece(LeiserChessError):
    """A piece's kind and direction class do not match, or a token is unknown."""


class InvalidBoard(LeiserChessError):
    """The board breaks a whole-board invariant."""


class NotationError(InvalidBoard):
    """Board text could not be decoded."""


class InvalidRotation(LeiserChessError):
    """Two directions are not related by a same-class turn."""


class RemoveEmptyError(LeiserChessError):
    """Attempted to remove a piece from an empty square."""


class InvalidAction(LeiserChessError):
    """An action is illegal on the board it was validated against."""

    def __init__(self, fault: ActionFault) -> None:
        super().__init__(f"Invalid action: {fault.value}")
        self.fault = fault


class SessionError(LeiserChessError):
    """A game session cannot record or undo an action."""
