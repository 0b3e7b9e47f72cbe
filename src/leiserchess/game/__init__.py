"""Game management layer — a session applying actions to a live board.

Quick start::

    from leiserchess.game import Session

    session = Session()
    session.apply(action)
"""

from leiserchess.game.session import ActionRecord, Session

__all__ = [
    "ActionRecord",
    "Session",
]
