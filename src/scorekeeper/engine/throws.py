"""Throw symbols, ball positions and the throw input grammar."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

PIN_COUNT = 10
SLOT_COUNT = 21
FRAME_COUNT = 10
TENTH_FRAME_SLOT = 18


class Kind(Enum):
    PENDING = "yet"
    OPEN = "open"
    GUTTER = "G"
    MISS = "-"
    STRIKE = "X"
    SPARE = "/"
    FOUL = "F"


@dataclass(frozen=True)
class Throw:
    kind: Kind
    pins: int = 0

    @property
    def symbol(self) -> str:
        if self.kind is Kind.OPEN:
            return str(self.pins)
        return self.kind.value

    @property
    def thrown(self) -> bool:
        return self.kind is not Kind.PENDING

    @staticmethod
    def open(pins: int) -> "Throw":
        if not 1 <= pins <= 9:
            raise ValueError(f"open throw needs 1-9 pins, got {pins}")
        return Throw(Kind.OPEN, pins)

    @staticmethod
    def parse(symbol: str) -> Optional["Throw"]:
        """Decode a stored symbol; unknown symbols give None."""
        if isinstance(symbol, str) and len(symbol) == 1 and symbol in "123456789":
            return Throw(Kind.OPEN, int(symbol))
        for kind in Kind:
            if kind is not Kind.OPEN and kind.value == symbol:
                return _BY_KIND[kind]
        return None

    def __repr__(self) -> str:
        return f"Throw({self.symbol})"


PENDING = Throw(Kind.PENDING)
GUTTER = Throw(Kind.GUTTER)
MISS = Throw(Kind.MISS)
STRIKE = Throw(Kind.STRIKE, PIN_COUNT)
SPARE = Throw(Kind.SPARE)
FOUL = Throw(Kind.FOUL)

_BY_KIND = {
    Kind.PENDING: PENDING,
    Kind.GUTTER: GUTTER,
    Kind.MISS: MISS,
    Kind.STRIKE: STRIKE,
    Kind.SPARE: SPARE,
    Kind.FOUL: FOUL,
}


# --- Ball positions ---------------------------------------------------------


@dataclass(frozen=True)
class FreshRack:
    """A ball thrown at all ten pins."""

    frame: int
    ball: int


@dataclass(frozen=True)
class StandingPins:
    """A ball thrown at whatever `first` left standing."""

    frame: int
    ball: int
    first: Throw

    @property
    def standing(self) -> int:
        # Gutter, Foul and Miss knock nothing down
        return PIN_COUNT - (self.first.pins if self.first.kind is Kind.OPEN else 0)


Position = Union[FreshRack, StandingPins]


def position_at(pins: Sequence[Throw], slot: int) -> Optional[Position]:
    """Return the ball position for `slot`, or None when no ball belongs there.

    No ball belongs to the partner slot of a strike in frames 1-9, to a
    second ball whose first ball is still pending, to the third ball of
    frame 10 unless a strike or spare earned it, or past slot 20.
    """
    if slot < 0 or slot >= SLOT_COUNT:
        return None
    if slot < TENTH_FRAME_SLOT:
        frame = slot // 2 + 1
        if slot % 2 == 0:
            return FreshRack(frame, 1)
        first = pins[slot - 1]
        if first.kind in (Kind.PENDING, Kind.STRIKE):
            return None
        return StandingPins(frame, 2, first)

    ball = slot - TENTH_FRAME_SLOT + 1
    if ball == 1:
        return FreshRack(FRAME_COUNT, 1)
    if ball == 2:
        first = pins[TENTH_FRAME_SLOT]
        if first.kind is Kind.PENDING:
            return None
        if first.kind is Kind.STRIKE:
            return FreshRack(FRAME_COUNT, 2)
        return StandingPins(FRAME_COUNT, 2, first)

    first, second = pins[TENTH_FRAME_SLOT], pins[TENTH_FRAME_SLOT + 1]
    if second.kind is Kind.PENDING:
        return None
    if first.kind is Kind.STRIKE:
        if second.kind is Kind.STRIKE:
            return FreshRack(FRAME_COUNT, 3)
        return StandingPins(FRAME_COUNT, 3, second)
    if second.kind is Kind.SPARE:
        return FreshRack(FRAME_COUNT, 3)
    return None


# --- Input grammar ----------------------------------------------------------


def normalize(token: str, position: Position) -> Optional[Throw]:
    """Translate a typed token into the throw it means at `position`.

    Returns None for tokens that make no sense there, for example a spare
    mark on a fresh rack or more pins than are standing.
    """
    token = (token or "").strip()
    fresh = isinstance(position, FreshRack)
    standing = PIN_COUNT if fresh else position.standing

    # ASCII only: "²" or "٣" are digits to str.isdigit but not throws
    if token.isascii() and token.isdecimal():
        n = int(token)
        if n == 0:
            return GUTTER if fresh else MISS
        if n < standing:
            return Throw.open(n)
        if n == standing:
            return STRIKE if fresh else SPARE
        return None

    if token in ("x", "X"):
        return STRIKE if fresh else None
    if token == "/":
        return None if fresh else SPARE
    if token in ("g", "G", "-"):
        return GUTTER if fresh else MISS
    if token in ("f", "F"):
        return FOUL
    return None


def is_legal(throw: Throw, position: Optional[Position]) -> bool:
    """True when `throw` could have been recorded at `position`."""
    if throw.kind is Kind.PENDING:
        return True
    if position is None:
        return False
    if isinstance(position, FreshRack):
        if throw.kind is Kind.OPEN:
            return throw.pins < PIN_COUNT
        return throw.kind in (Kind.STRIKE, Kind.GUTTER, Kind.FOUL)
    if throw.kind is Kind.OPEN:
        return throw.pins < position.standing
    return throw.kind in (Kind.SPARE, Kind.MISS, Kind.FOUL)
