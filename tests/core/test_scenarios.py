"""End-to-end rule scenarios across board, action and notation."""

import pytest

from leiserchess.core.action import StandardAction
from leiserchess.core.board import Board
from leiserchess.core.enums import ActionFault, Color, Diagonal, Orthogonal, PieceKind
from leiserchess.core.errors import InvalidAction
from leiserchess.core.notation import (
    OPENING_POSITION,
    action_to_text,
    board_from_text,
    board_to_text,
)
from leiserchess.core.piece import Piece
from leiserchess.core.types import A1, A2, A3, B2, C3, D4

WHITE_PAWN_NE = Piece(Color.WHITE, PieceKind.PAWN, Diagonal.NORTH_EAST)


class TestScenarios:
    def test_opening_round_trip(self) -> None:
        assert board_to_text(board_from_text(OPENING_POSITION)) == OPENING_POSITION

    def test_adjacent_move_validates(self) -> None:
        board = Board()
        board.set(A1, WHITE_PAWN_NE)
        StandardAction((), A1, A2, WHITE_PAWN_NE).validate(board)

    def test_non_adjacent_move_fails(self) -> None:
        board = Board()
        board.set(A1, WHITE_PAWN_NE)
        with pytest.raises(InvalidAction) as exc_info:
            StandardAction((), A1, A3, WHITE_PAWN_NE).validate(board)
        assert exc_info.value.fault == ActionFault.NOT_ADJACENT

    def test_rotation_applies_and_encodes(self) -> None:
        board = Board()
        monarch = Piece(Color.WHITE, PieceKind.MONARCH, Orthogonal.NORTH)
        action = StandardAction((), A1, A1, monarch, Orthogonal.EAST)
        action.validate(board)
        action.apply_unchecked(board)
        assert board.get(A1) == Piece(Color.WHITE, PieceKind.MONARCH, Orthogonal.EAST)
        assert action_to_text(action) == "a1R"

    def test_monarch_destination_always_fails(self) -> None:
        board = board_from_text(OPENING_POSITION)
        # a1 holds a monarch, so the source and victims are irrelevant.
        for source, victims in ((B2, ()), (A2, (A2,)), (A1, (A1, B2))):
            with pytest.raises(InvalidAction) as exc_info:
                StandardAction(victims, source, A1, WHITE_PAWN_NE).validate(board)
            assert exc_info.value.fault == ActionFault.MONARCH_SHOVE

    def test_pawn_destination_from_lower_qi_fails(self) -> None:
        board = Board()
        board.set(C3, Piece(Color.BLACK, PieceKind.PAWN, Diagonal.SOUTH_EAST))
        assert D4.qi <= C3.qi
        with pytest.raises(InvalidAction) as exc_info:
            StandardAction((D4,), D4, C3, WHITE_PAWN_NE).validate(board)
        assert exc_info.value.fault == ActionFault.SHOVE_FROM_LOWER_QI

    def test_opening_move_relocates_pawn(self) -> None:
        board = board_from_text(OPENING_POSITION)
        pawn = board.get(B2)
        assert pawn is not None
        action = StandardAction((B2,), B2, C3, pawn)
        action.apply(board)
        board.validate_board()
        assert board_to_text(board) == (
            "nn6nn/se2sesw1sesw/2sw5/8/8/8/NENW1NENW1NENW/SS6SS"
        )
        assert action_to_text(action) == "_c3"
