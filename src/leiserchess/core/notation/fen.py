"""Board notation parsing and serialization.

Rows are separated by ``/`` and the first row is rank 1 (``a1`` … ``h1``).
Pieces are two-character tokens and runs of empty squares a single digit. An
optional side-to-move marker may trail the placement; it is accepted and
discarded, so it never appears in the output.
"""

from __future__ import annotations

import logging

from leiserchess.core.board import Board
from leiserchess.core.constants import BOARD_SIZE
from leiserchess.core.errors import NotationError
from leiserchess.core.notation.tokens import (
    ROW_SEPARATOR,
    scan_digit,
    scan_piece,
    scan_row_separator,
    scan_side_marker,
    scan_whitespace,
)
from leiserchess.core.piece import Piece
from leiserchess.core.types import Location

_LOGGER = logging.getLogger(__name__)

OPENING_POSITION = "nn6nn/sesw1sesw1sesw/8/8/8/8/NENW1NENW1NENW/SS6SS"


def _fail(message: str, text: str) -> NotationError:
    _LOGGER.debug("Board notation rejected (%s): %r", message, text)
    return NotationError(f"Invalid board notation ({message}): {text!r}")


def board_from_text(text: str) -> Board:
    """Parse board notation into a :class:`Board`.

    The board is not checked against :meth:`Board.validate_board`; an empty
    placement such as ``8/8/8/8/8/8/8/8`` decodes to an empty board.
    """
    board = Board()
    pos = 0
    file = 0
    rank = 0
    seen_marker = False

    while pos < len(text):
        if (token := scan_piece(text, pos)) is not None:
            if seen_marker or rank >= BOARD_SIZE or file >= BOARD_SIZE:
                raise _fail("row too wide", text)
            board.set(Location(file, rank), Piece.from_token(token))
            file += 1
        elif (token := scan_digit(text, pos)) is not None:
            file += int(token)
            if seen_marker or rank >= BOARD_SIZE or file > BOARD_SIZE:
                raise _fail("row too wide", text)
        elif (token := scan_row_separator(text, pos)) is not None:
            if file != BOARD_SIZE:
                raise _fail(f"rank {rank + 1} has {file} squares", text)
            rank += 1
            file = 0
            if rank >= BOARD_SIZE:
                raise _fail(f"more than {BOARD_SIZE} rows", text)
        elif (token := scan_whitespace(text, pos)) is not None:
            pass
        elif (token := scan_side_marker(text, pos)) is not None:
            if seen_marker:
                raise _fail("repeated side-to-move marker", text)
            if rank != BOARD_SIZE - 1 or file != BOARD_SIZE:
                raise _fail("side-to-move marker inside placement", text)
            seen_marker = True
        else:
            raise _fail(f"unexpected {text[pos]!r} at offset {pos}", text)
        pos += len(token)

    if rank != BOARD_SIZE - 1 or file != BOARD_SIZE:
        raise _fail(f"expected {BOARD_SIZE} full rows", text)
    return board


def board_to_text(board: Board) -> str:
    """Serialise a :class:`Board` to notation without a side-to-move marker."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE):
        empty = 0
        row = ""
        for piece in board.row(rank):
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return ROW_SEPARATOR.join(rows)


def render_board(board: Board) -> str:
    """Human-readable grid, one text row per line, ``.`` for empty squares."""
    lines: list[str] = []
    for row in board_to_text(board).split(ROW_SEPARATOR):
        line = ""
        for ch in row:
            line += " ." * int(ch) if ch.isdigit() else ch
        lines.append(line)
    return "\n".join(lines)
