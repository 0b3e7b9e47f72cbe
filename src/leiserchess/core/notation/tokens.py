"""Token scanners for board notation.

Each scanner looks at *text* starting at *pos* and returns the matched token,
or ``None`` when the text there does not start with that kind of token. The
board decoder advances by ``len(token)``.
"""

from __future__ import annotations

import re

from leiserchess.core.piece import PIECE_TOKENS

ROW_SEPARATOR = "/"
SIDE_MARKERS = frozenset("WBwb")

_WHITESPACE_RE = re.compile(r"\s+")


def scan_piece(text: str, pos: int) -> str | None:
    """A two-character piece token such as ``NE`` or ``ss``."""
    token = text[pos : pos + 2]
    return token if token in PIECE_TOKENS else None


def scan_digit(text: str, pos: int) -> str | None:
    """A single ASCII digit giving a run of empty squares."""
    ch = text[pos : pos + 1]
    return ch if ch and ch in "0123456789" else None


def scan_row_separator(text: str, pos: int) -> str | None:
    return ROW_SEPARATOR if text.startswith(ROW_SEPARATOR, pos) else None


def scan_whitespace(text: str, pos: int) -> str | None:
    match = _WHITESPACE_RE.match(text, pos)
    return match.group() if match else None


def scan_side_marker(text: str, pos: int) -> str | None:
    """A side-to-move letter: ``W``/``w`` for white, ``B``/``b`` for black."""
    ch = text[pos : pos + 1]
    return ch if ch and ch in SIDE_MARKERS else None
