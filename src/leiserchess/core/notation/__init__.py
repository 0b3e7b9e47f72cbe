"""Notation package: board text codec and move text encoder."""

from leiserchess.core.notation.fen import (
    OPENING_POSITION,
    board_from_text,
    board_to_text,
    render_board,
)
from leiserchess.core.notation.move import MOVE_MARKER, action_to_text

__all__ = [
    "MOVE_MARKER",
    "OPENING_POSITION",
    "action_to_text",
    "board_from_text",
    "board_to_text",
    "render_board",
]
