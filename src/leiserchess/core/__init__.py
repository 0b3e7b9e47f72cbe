"""Core domain layer — LeiserChess rules with zero external dependencies.

Quick start::

    from leiserchess.core import OPENING_POSITION, StandardAction, board_from_text
    from leiserchess.core.types import A1, A2

    board = board_from_text(OPENING_POSITION)
    action = StandardAction((A1,), A1, A2, board.get(A1))
    action.validate(board)
    action.apply_unchecked(board)
"""

from leiserchess.core.action import StandardAction
from leiserchess.core.board import Board
from leiserchess.core.constants import (
    BOARD_SIZE,
    MAX_ACTIONS,
    MAX_HISTORY_LENGTH,
    MAX_PIECES,
    MAX_VICTIMS,
)
from leiserchess.core.direction import (
    Direction,
    is_diagonal,
    is_orthogonal,
    rotate,
    rotation_code,
)
from leiserchess.core.enums import (
    ActionFault,
    Color,
    Diagonal,
    Orthogonal,
    PieceKind,
    Rotation,
)
from leiserchess.core.errors import (
    InvalidAction,
    InvalidBoard,
    InvalidLocation,
    InvalidPiece,
    InvalidRotation,
    LeiserChessError,
    NotationError,
    RemoveEmptyError,
    SessionError,
)
from leiserchess.core.interfaces import IAction, IBoard, IIndexable
from leiserchess.core.notation import (
    OPENING_POSITION,
    action_to_text,
    board_from_text,
    board_to_text,
    render_board,
)
from leiserchess.core.piece import Piece, validate_piece
from leiserchess.core.types import Location, all_locations, parse_location

__all__ = [
    # Constants
    "BOARD_SIZE",
    "MAX_ACTIONS",
    "MAX_HISTORY_LENGTH",
    "MAX_PIECES",
    "MAX_VICTIMS",
    # Enums
    "ActionFault",
    "Color",
    "Diagonal",
    "Orthogonal",
    "PieceKind",
    "Rotation",
    # Types / helpers
    "Direction",
    "Location",
    "all_locations",
    "is_diagonal",
    "is_orthogonal",
    "parse_location",
    "rotate",
    "rotation_code",
    "validate_piece",
    # Errors
    "InvalidAction",
    "InvalidBoard",
    "InvalidLocation",
    "InvalidPiece",
    "InvalidRotation",
    "LeiserChessError",
    "NotationError",
    "RemoveEmptyError",
    "SessionError",
    # Domain objects
    "Board",
    "IAction",
    "IBoard",
    "IIndexable",
    "Piece",
    "StandardAction",
    # Notation
    "OPENING_POSITION",
    "action_to_text",
    "board_from_text",
    "board_to_text",
    "render_board",
]
