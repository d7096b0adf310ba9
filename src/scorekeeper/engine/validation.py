"""Check records loaded from disk and repair whatever is broken.

A loaded record is never rejected as a whole.  Each check resets the smallest
piece that fails it to a safe default:

* a blank name, an impossible max score or cursor resets the whole record;
* an illegal pin sequence or impossible frame scores reset both the pins and
  the scores of that game, since one is derived from the other;
* a cursor that does not match the pins resets the current game.

Archived games get the pin and score checks independently.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional, Tuple

from scorekeeper.engine.frames import FrameScores, fresh_scores
from scorekeeper.engine.projection import PERFECT_GAME
from scorekeeper.engine.record import (
    UNDETERMINED,
    ArchivedGame,
    GameRecord,
    sanitize_name,
    scores_from_wire,
)
from scorekeeper.engine.recorder import cursor_after, fresh_pins
from scorekeeper.engine.throws import FRAME_COUNT, SLOT_COUNT, Throw, is_legal, position_at

logger = logging.getLogger(__name__)

INVALID_VALUE = "Found an invalid value. Initialize to appropriate values."
MAX_FRAME_VALUE = 30


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def check_pins(symbols: Any) -> Optional[Tuple[Throw, ...]]:
    """Return the decoded pins, or None if any slot breaks the throw rules."""
    if not isinstance(symbols, (list, tuple)) or len(symbols) != SLOT_COUNT:
        return None
    pins = [Throw.parse(s) for s in symbols]
    if any(p is None for p in pins):
        return None
    for slot, throw in enumerate(pins):
        if throw.thrown and not is_legal(throw, position_at(pins, slot)):
            return None
    end = cursor_after(pins)
    if any(p.thrown for p in pins[end:]):
        return None
    return tuple(pins)


def check_scores(values: Any) -> Optional[FrameScores]:
    """Return the decoded scores, or None if they cannot come from a real game."""
    if not isinstance(values, (list, tuple)) or len(values) != FRAME_COUNT + 1:
        return None
    ints = [_as_int(v) for v in values]
    if any(v is None for v in ints) or ints[0] != 0:
        return None

    previous = 0
    undetermined = False
    for frame, value in enumerate(ints[1:], start=1):
        if value == UNDETERMINED:
            undetermined = True
            continue
        if undetermined or value < previous or value - previous > MAX_FRAME_VALUE:
            return None
        if value > MAX_FRAME_VALUE * frame:
            return None
        previous = value
    return scores_from_wire(ints)


def _repair_game(pins_raw: Any, scores_raw: Any) -> Tuple[Tuple[Throw, ...], FrameScores, bool]:
    pins = check_pins(pins_raw)
    scores = check_scores(scores_raw)
    if pins is None or scores is None:
        logger.error(INVALID_VALUE)
        return fresh_pins(), fresh_scores(), False
    return pins, scores, True


def _repair_archives(raw: Any) -> List[ArchivedGame]:
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        logger.error(INVALID_VALUE)
        return []

    archives: List[ArchivedGame] = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            logger.error(INVALID_VALUE)
            archives.append(ArchivedGame(time="", pins=fresh_pins(), scores=tuple(fresh_scores())))
            continue
        pins, scores, _ = _repair_game(entry.get("pins"), entry.get("scores"))
        time = entry.get("time", "")
        archives.append(ArchivedGame(time=str(time), pins=pins, scores=tuple(scores)))
    return archives


def repair_record(raw: Any, now: Optional[datetime] = None) -> GameRecord:
    """Build a valid GameRecord from a deserialised JSON mapping."""
    if not isinstance(raw, Mapping):
        logger.error(INVALID_VALUE)
        return GameRecord.fresh(now=now)

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        logger.error(INVALID_VALUE)
        return GameRecord.fresh(now=now)

    max_score = _as_int(raw.get("maxScore"))
    if max_score is None or not 0 <= max_score <= PERFECT_GAME:
        logger.error(INVALID_VALUE)
        return GameRecord.fresh(now=now)

    cursor = _as_int(raw["cursor"] if "cursor" in raw else raw.get("times"))
    if cursor is None or not 0 <= cursor <= SLOT_COUNT:
        logger.error(INVALID_VALUE)
        return GameRecord.fresh(now=now)

    safe_name = sanitize_name(name)
    if safe_name != name:
        logger.error(INVALID_VALUE)

    pins, scores, intact = _repair_game(raw.get("pins"), raw.get("scores"))
    if intact and cursor != cursor_after(pins):
        logger.error(INVALID_VALUE)
        pins, scores, intact = fresh_pins(), fresh_scores(), False
    if not intact:
        cursor = 0
        max_score = PERFECT_GAME

    return GameRecord(
        name=safe_name,
        pins=pins,
        scores=scores,
        max_score=max_score,
        cursor=cursor,
        archives=_repair_archives(raw.get("archives")),
    )


def validate(record: GameRecord) -> GameRecord:
    """Re-check an in-memory record; a valid record comes back unchanged."""
    return repair_record(record.to_dict())
