"""Direction classes and the rotation classifier."""

from __future__ import annotations

from typing import TypeAlias

from leiserchess.core.enums import Diagonal, Orthogonal, Rotation
from leiserchess.core.errors import InvalidRotation

Direction: TypeAlias = Orthogonal | Diagonal

# Clockwise steps for each turn.
_STEPS: dict[Rotation, int] = {
    Rotation.RIGHT: 1,
    Rotation.U_TURN: 2,
    Rotation.LEFT: 3,
}
_ROTATIONS: dict[int, Rotation] = {v: k for k, v in _STEPS.items()}


def is_orthogonal(direction: Direction) -> bool:
    return isinstance(direction, Orthogonal)


def is_diagonal(direction: Direction) -> bool:
    return isinstance(direction, Diagonal)


def _cycle(direction: Direction) -> list[Direction]:
    if isinstance(direction, Orthogonal):
        return list(Orthogonal)
    if isinstance(direction, Diagonal):
        return list(Diagonal)
    raise InvalidRotation(f"Not a direction: {direction!r}")


def rotate(direction: Direction, rotation: Rotation) -> Direction:
    """Turn *direction* by *rotation* within its own class."""
    cycle = _cycle(direction)
    return cycle[(cycle.index(direction) + _STEPS[rotation]) % len(cycle)]


def rotation_code(old: Direction, new: Direction) -> Rotation:
    """Classify the turn from *old* to *new*.

    Raises :class:`InvalidRotation` when the directions are identical or
    belong to different classes.
    """
    if type(old) is not type(new):
        raise InvalidRotation(f"Cannot rotate across direction classes: {old} → {new}")
    if old == new:
        raise InvalidRotation(f"Rotation must change direction: {old}")
    cycle = _cycle(old)
    steps = (cycle.index(new) - cycle.index(old)) % len(cycle)
    return _ROTATIONS[steps]
