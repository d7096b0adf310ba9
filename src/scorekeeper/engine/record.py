"""Game records, archived games and their JSON-ready form."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from scorekeeper.engine.frames import FrameScores, fresh_scores
from scorekeeper.engine.projection import PERFECT_GAME
from scorekeeper.engine.recorder import fresh_pins
from scorekeeper.engine.throws import Throw

UNDETERMINED = -1

NAME_FORMAT = "%Y%m%d-%H%M%S%Z"
ARCHIVE_TIME_FORMAT = "%Y/%m/%d %H:%M:%S %z %Z"

_UNSAFE_NAME_CHARS = re.compile(r'[\\/:*?"<>|]')


def _now(now: Optional[datetime] = None) -> datetime:
    return now if now is not None else datetime.now().astimezone()


def default_name(now: Optional[datetime] = None) -> str:
    return _now(now).strftime(NAME_FORMAT)


def sanitize_name(name: str) -> str:
    """Replace characters that cannot appear in a file name with '-'."""
    return _UNSAFE_NAME_CHARS.sub("-", name)


def archive_time(now: Optional[datetime] = None) -> str:
    return _now(now).strftime(ARCHIVE_TIME_FORMAT)


def pins_to_wire(pins: Sequence[Throw]) -> List[str]:
    return [p.symbol for p in pins]


def scores_to_wire(scores: Sequence[Optional[int]]) -> List[int]:
    return [UNDETERMINED if s is None else int(s) for s in scores]


def scores_from_wire(values: Sequence[int]) -> FrameScores:
    return [None if v == UNDETERMINED else v for v in values]


@dataclass(frozen=True)
class ArchivedGame:
    time: str
    pins: Tuple[Throw, ...]
    scores: Tuple[Optional[int], ...]

    @property
    def final_score(self) -> Optional[int]:
        return self.scores[-1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time": self.time,
            "pins": pins_to_wire(self.pins),
            "scores": scores_to_wire(self.scores),
        }


@dataclass
class GameRecord:
    name: str
    pins: Tuple[Throw, ...] = field(default_factory=fresh_pins)
    scores: FrameScores = field(default_factory=fresh_scores)
    max_score: int = PERFECT_GAME
    cursor: int = 0
    archives: List[ArchivedGame] = field(default_factory=list)

    @classmethod
    def fresh(cls, name: str = "", now: Optional[datetime] = None) -> "GameRecord":
        name = sanitize_name(name)
        return cls(name=name or default_name(now))

    def reset_game(self) -> None:
        self.pins = fresh_pins()
        self.scores = fresh_scores()
        self.max_score = PERFECT_GAME
        self.cursor = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "pins": pins_to_wire(self.pins),
            "scores": scores_to_wire(self.scores),
            "maxScore": self.max_score,
            "cursor": self.cursor,
            "archives": [a.to_dict() for a in self.archives],
        }


@dataclass(frozen=True)
class ArchiveSummary:
    """Totals over the final scores of archived games."""

    games: int
    total: int
    average: Optional[int]
    high: Optional[int]
    low: Optional[int]

    @staticmethod
    def of(archives: Sequence[ArchivedGame]) -> "ArchiveSummary":
        finals = [a.final_score for a in archives if a.final_score is not None]
        if not finals:
            return ArchiveSummary(games=len(archives), total=0, average=None, high=None, low=None)
        total = sum(finals)
        return ArchiveSummary(
            games=len(archives),
            total=total,
            average=total // len(finals),
            high=max(finals),
            low=min(finals),
        )
