"""Game session — current board, side to move and action history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from leiserchess.core.action import StandardAction
from leiserchess.core.board import Board
from leiserchess.core.constants import MAX_ACTIONS, MAX_HISTORY_LENGTH
from leiserchess.core.enums import Color
from leiserchess.core.errors import LeiserChessError, SessionError
from leiserchess.core.notation import (
    OPENING_POSITION,
    action_to_text,
    board_from_text,
    board_to_text,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ActionRecord:
    """A single entry in the action history."""

    action: StandardAction
    notation: str
    color: Color
    board_text: str


@dataclass
class Session:
    """Owns the live board and applies validated actions to it.

    This is a pure data/logic class — no I/O, no clocks, no players.
    History holds the board text of every position reached, starting with
    the initial one, so it is always one longer than :attr:`actions`.
    """

    start_text: str = OPENING_POSITION
    side_to_move: Color = Color.WHITE
    max_actions: int = MAX_ACTIONS
    max_history: int = MAX_HISTORY_LENGTH
    board: Board = field(init=False)
    history: list[str] = field(default_factory=list, init=False)
    actions: list[ActionRecord] = field(default_factory=list, init=False)
    start_side: Color = field(init=False)

    def __post_init__(self) -> None:
        if self.max_actions < 0 or self.max_history < 1:
            raise SessionError(
                f"Invalid capacities: max_actions={self.max_actions}, "
                f"max_history={self.max_history}"
            )
        self.start_side = self.side_to_move
        self.reset(self.start_text, self.side_to_move)

    # ── Initialisation ───────────────────────────────────────────────────

    def reset(self, text: str | None = None, side_to_move: Color | None = None) -> None:
        """Start over from *text* with *side_to_move*.

        Either defaults to the position and side the session started from.
        """
        if text is None:
            text = self.start_text
        if side_to_move is None:
            side_to_move = self.start_side
        board = board_from_text(text)
        board.validate_board()
        self.start_text = text
        self.start_side = side_to_move
        self.board = board
        self.side_to_move = side_to_move
        self.history = [board_to_text(board)]
        self.actions = []

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def ply_count(self) -> int:
        return len(self.actions)

    @property
    def board_text(self) -> str:
        return self.history[-1]

    # ── Action application ───────────────────────────────────────────────

    def apply(self, action: StandardAction) -> ActionRecord:
        """Validate *action*, apply it and record it.

        The session is left untouched when the action is illegal or when the
        resulting board breaks a board invariant.
        An in-place rotation of a piece on the board is always rejected: its
        destination is occupied by the piece itself, so validation treats it
        as a shove onto a monarch or onto a square of equal qi.
        """
        if len(self.actions) >= self.max_actions:
            raise SessionError(f"Action limit reached ({self.max_actions})")
        if len(self.history) >= self.max_history:
            raise SessionError(f"History limit reached ({self.max_history})")
        if action.piece.color != self.side_to_move:
            raise SessionError(
                f"{self.side_to_move} to move, got a {action.piece.color} piece"
            )

        try:
            notation = action_to_text(action)
            action.validate(self.board)
            board = self.board.copy()
            # Safe: validate() passed against an identical board.
            action.apply_unchecked(board)
            board.validate_board()
        except LeiserChessError as exc:
            _LOGGER.info("Rejected action %r: %s", action, exc)
            raise

        record = ActionRecord(
            action=action,
            notation=notation,
            color=self.side_to_move,
            board_text=board_to_text(board),
        )
        self.board = board
        self.history.append(record.board_text)
        self.actions.append(record)
        self.side_to_move = self.side_to_move.opposite
        _LOGGER.debug("Applied %s for %s", notation, record.color)
        return record

    def undo(self) -> ActionRecord:
        """Undo the last action and return its record."""
        if not self.actions:
            raise SessionError("No action to undo")

        record = self.actions.pop()
        self.history.pop()
        self.board = board_from_text(self.history[-1])
        self.side_to_move = record.color
        _LOGGER.debug("Undid %s", record.notation)
        return record
