"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from leiserchess.core.board import Board
from leiserchess.core.enums import Color, Diagonal, Orthogonal, PieceKind
from leiserchess.core.notation import OPENING_POSITION, board_from_text
from leiserchess.core.piece import Piece


@pytest.fixture
def opening_board() -> Board:
    return board_from_text(OPENING_POSITION)


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def white_pawn() -> Piece:
    return Piece(Color.WHITE, PieceKind.PAWN, Diagonal.NORTH_EAST)


@pytest.fixture
def black_pawn() -> Piece:
    return Piece(Color.BLACK, PieceKind.PAWN, Diagonal.SOUTH_WEST)


@pytest.fixture
def white_monarch() -> Piece:
    return Piece(Color.WHITE, PieceKind.MONARCH, Orthogonal.NORTH)


@pytest.fixture
def black_monarch() -> Piece:
    return Piece(Color.BLACK, PieceKind.MONARCH, Orthogonal.SOUTH)
