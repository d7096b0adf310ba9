"""Cumulative frame scoring for a recorded pin sequence."""

from __future__ import annotations

from typing import List, Optional, Sequence

from scorekeeper.engine.recorder import advance
from scorekeeper.engine.throws import FRAME_COUNT, PIN_COUNT, SLOT_COUNT, Kind, Throw

FrameScores = List[Optional[int]]


def fresh_scores() -> FrameScores:
    return [0] + [None] * FRAME_COUNT


def knocked_down(pins: Sequence[Throw]) -> List[int]:
    """Return the pin count of every thrown ball, in throwing order."""

    rolls: List[int] = []
    cursor = 0
    while cursor < SLOT_COUNT and pins[cursor].thrown:
        throw = pins[cursor]
        if throw.kind is Kind.STRIKE:
            rolls.append(PIN_COUNT)
        elif throw.kind is Kind.SPARE:
            rolls.append(PIN_COUNT - rolls[-1] if rolls else PIN_COUNT)
        elif throw.kind is Kind.OPEN:
            rolls.append(throw.pins)
        else:
            rolls.append(0)
        cursor = advance(pins, cursor)
    return rolls


def calculate_frame_totals(rolls: Sequence[int]) -> List[Optional[int]]:
    """Return cumulative frame totals following ten-pin bowling rules."""

    totals: List[Optional[int]] = [None] * FRAME_COUNT
    cumulative = 0
    roll_index = 0

    for frame_index in range(FRAME_COUNT):
        if roll_index >= len(rolls):
            break

        first = rolls[roll_index]

        if frame_index < FRAME_COUNT - 1:
            if first == PIN_COUNT:
                if roll_index + 2 >= len(rolls):
                    break
                cumulative += PIN_COUNT + rolls[roll_index + 1] + rolls[roll_index + 2]
                totals[frame_index] = cumulative
                roll_index += 1
                continue

            if roll_index + 1 >= len(rolls):
                break

            second = rolls[roll_index + 1]
            if first + second == PIN_COUNT:
                if roll_index + 2 >= len(rolls):
                    break
                cumulative += PIN_COUNT + rolls[roll_index + 2]
            else:
                cumulative += first + second

            totals[frame_index] = cumulative
            roll_index += 2
            continue

        # Tenth frame: two balls, or three once a strike or spare earns the bonus
        if roll_index + 1 >= len(rolls):
            break

        second = rolls[roll_index + 1]
        if first == PIN_COUNT or first + second == PIN_COUNT:
            if roll_index + 2 >= len(rolls):
                break
            cumulative += first + second + rolls[roll_index + 2]
        else:
            cumulative += first + second

        totals[frame_index] = cumulative
        break

    return totals


def score_frames(pins: Sequence[Throw]) -> FrameScores:
    """Return the 11-entry cumulative scores; index 0 is the zero base."""
    return [0] + calculate_frame_totals(knocked_down(pins))
