"""Rule constants shared by the board, actions and the game session."""

from __future__ import annotations

BOARD_SIZE = 8

# Upper bound on pieces on the board at any time.
MAX_PIECES = 32

# Upper bound on pieces removed from the board by a single action.
MAX_VICTIMS = 3

# Upper bound on actions taken in a game.
MAX_ACTIONS = 100

# Upper bound on board positions reached before a game terminates.
MAX_HISTORY_LENGTH = 400
