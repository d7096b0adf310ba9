"""Best final score still reachable from a partial game."""

from __future__ import annotations

from typing import List, Sequence

from scorekeeper.engine.frames import score_frames
from scorekeeper.engine.throws import (
    SLOT_COUNT,
    SPARE,
    STRIKE,
    TENTH_FRAME_SLOT,
    Kind,
    Throw,
)

PERFECT_GAME = 300


def best_completion(pins: Sequence[Throw], cursor: int) -> List[Throw]:
    """Return a copy of `pins` with every remaining ball thrown as well as possible."""
    scratch = list(pins)
    if cursor <= TENTH_FRAME_SLOT:
        if cursor % 2 == 1:
            scratch[cursor] = SPARE
            cursor += 1
        for slot in range(cursor, SLOT_COUNT):
            if slot >= TENTH_FRAME_SLOT or slot % 2 == 0:
                scratch[slot] = STRIKE
    else:
        for slot in range(cursor, SLOT_COUNT):
            previous = scratch[slot - 1].kind
            scratch[slot] = STRIKE if previous in (Kind.STRIKE, Kind.SPARE) else SPARE
    return scratch


def project_max(pins: Sequence[Throw], cursor: int) -> int:
    final = score_frames(best_completion(pins, cursor))[-1]
    return final if final is not None else 0
