"""Apply typed throws to the 21-slot pin sequence."""

from __future__ import annotations

from typing import Sequence, Tuple

from scorekeeper.engine.errors import GameOver, ThrowRejected
from scorekeeper.engine.throws import (
    PENDING,
    SLOT_COUNT,
    TENTH_FRAME_SLOT,
    Kind,
    Throw,
    normalize,
    position_at,
)


def fresh_pins() -> Tuple[Throw, ...]:
    return (PENDING,) * SLOT_COUNT


def advance(pins: Sequence[Throw], cursor: int) -> int:
    """Return the next cursor once the ball at `cursor` has been written."""
    throw = pins[cursor]
    if cursor < TENTH_FRAME_SLOT:
        if cursor % 2 == 0 and throw.kind is Kind.STRIKE:
            return cursor + 2
        return cursor + 1
    if cursor == TENTH_FRAME_SLOT:
        return cursor + 1
    if cursor == TENTH_FRAME_SLOT + 1:
        if pins[TENTH_FRAME_SLOT].kind is Kind.STRIKE or throw.kind is Kind.SPARE:
            return cursor + 1
        return SLOT_COUNT
    return SLOT_COUNT


def cursor_after(pins: Sequence[Throw]) -> int:
    """Replay the advance rules over a stored sequence."""
    cursor = 0
    while cursor < SLOT_COUNT and pins[cursor].thrown:
        cursor = advance(pins, cursor)
    return cursor


def record_throw(pins: Sequence[Throw], cursor: int, token: str) -> Tuple[Tuple[Throw, ...], int]:
    """Record `token` at `cursor` and return the new sequence and cursor.

    Raises ThrowRejected when the token is not a legal throw for the slot;
    `pins` is never modified.
    """
    if cursor >= SLOT_COUNT:
        raise GameOver(token)
    position = position_at(pins, cursor)
    if position is None:
        raise ThrowRejected(token, cursor)
    throw = normalize(token, position)
    if throw is None:
        raise ThrowRejected(token, cursor)

    updated = list(pins)
    updated[cursor] = throw
    return tuple(updated), advance(updated, cursor)
