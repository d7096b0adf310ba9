"""The score keeper: one player's record, updated throw by throw."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from scorekeeper.engine.errors import ThrowRejected
from scorekeeper.engine.frames import FrameScores, score_frames
from scorekeeper.engine.projection import project_max
from scorekeeper.engine.record import ArchivedGame, ArchiveSummary, GameRecord, archive_time
from scorekeeper.engine.recorder import record_throw
from scorekeeper.engine.throws import SLOT_COUNT
from scorekeeper.engine.validation import repair_record

logger = logging.getLogger(__name__)


class ScoreKeeper:
    def __init__(self, record: GameRecord):
        self.game_record = record

    @classmethod
    def new(cls, name: str = "", now: Optional[datetime] = None) -> "ScoreKeeper":
        return cls(GameRecord.fresh(name, now=now))

    @classmethod
    def load(cls, raw: Any, now: Optional[datetime] = None) -> "ScoreKeeper":
        """Repair a deserialised record and bring its scores up to date."""
        keeper = cls(repair_record(raw, now=now))
        keeper._recompute()
        return keeper

    # --- Queries -------------------------------------------------------

    @property
    def name(self) -> str:
        return self.game_record.name

    @property
    def cursor(self) -> int:
        return self.game_record.cursor

    @property
    def game_over(self) -> bool:
        return self.game_record.cursor >= SLOT_COUNT

    def current_scores(self) -> FrameScores:
        return list(self.game_record.scores)

    def max_score(self) -> int:
        return self.game_record.max_score

    def summary(self) -> ArchiveSummary:
        return ArchiveSummary.of(self.game_record.archives)

    def to_dict(self) -> Dict[str, Any]:
        return self.game_record.to_dict()

    # --- Updates -------------------------------------------------------

    def record(self, token: str, now: Optional[datetime] = None) -> bool:
        """Record one typed throw; returns False when the token was rejected.

        Typing into a finished game archives it and starts the next one.
        """
        if self.game_over:
            self.archive_and_reset(now=now)
            logger.info("Game start.")

        data = self.game_record
        try:
            data.pins, data.cursor = record_throw(data.pins, data.cursor, token)
        except ThrowRejected as exc:
            logger.warning("Invalid value. Type again. (%s)", exc)
            return False

        self._recompute()
        logger.info("Update Score.")
        if self.game_over:
            logger.info("Game over.")
        return True

    def archive_and_reset(self, now: Optional[datetime] = None) -> ArchivedGame:
        data = self.game_record
        archived = ArchivedGame(
            time=archive_time(now),
            pins=tuple(data.pins),
            scores=tuple(data.scores),
        )
        data.archives.append(archived)
        data.reset_game()
        return archived

    def finish(self, now: Optional[datetime] = None) -> None:
        """Archive a completed game before the record is saved."""
        if self.game_over:
            self.archive_and_reset(now=now)

    def _recompute(self) -> None:
        data = self.game_record
        data.scores = score_frames(data.pins)
        data.max_score = project_max(data.pins, data.cursor)
