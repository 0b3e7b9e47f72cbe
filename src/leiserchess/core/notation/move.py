"""Move notation (encode only).

A plain move is written as ``_`` followed by the destination square, a
rotation as the square followed by its rotation code, e.g. ``_a2`` and
``a1R``. The text does not record the source square, so a move cannot be
reconstructed from it and there is no parser.
"""

from __future__ import annotations

from leiserchess.core.action import StandardAction
from leiserchess.core.direction import rotation_code

MOVE_MARKER = "_"


def action_to_text(action: StandardAction) -> str:
    """Serialise *action*; raises :class:`InvalidRotation` for a bad rotation."""
    square = action.destination.name
    if action.new_direction is not None:
        return f"{square}{rotation_code(action.piece.direction, action.new_direction)}"
    return f"{MOVE_MARKER}{square}"
