import pytest

from scorekeeper.engine.recorder import fresh_pins
from scorekeeper.engine.throws import (
    FOUL,
    GUTTER,
    MISS,
    PENDING,
    SPARE,
    STRIKE,
    FreshRack,
    Kind,
    StandingPins,
    Throw,
    is_legal,
    normalize,
    position_at,
)

FIRST_BALL = FreshRack(frame=1, ball=1)
AFTER_THREE = StandingPins(frame=1, ball=2, first=Throw.open(3))


@pytest.mark.parametrize(
    "token, expected",
    [
        ("0", GUTTER),
        ("5", Throw.open(5)),
        (" 7 ", Throw.open(7)),
        ("10", STRIKE),
        ("x", STRIKE),
        ("X", STRIKE),
        ("g", GUTTER),
        ("G", GUTTER),
        ("-", GUTTER),
        ("f", FOUL),
        ("F", FOUL),
        ("/", None),
        ("11", None),
        ("-1", None),
        ("+5", None),
        ("", None),
        ("a", None),
        ("²", None),
        ("٣", None),
    ],
)
def test_normalize_first_ball(token, expected):
    assert normalize(token, FIRST_BALL) == expected


@pytest.mark.parametrize(
    "token, expected",
    [
        ("0", MISS),
        ("6", Throw.open(6)),
        ("7", SPARE),
        ("8", None),
        ("10", None),
        ("/", SPARE),
        ("x", None),
        ("g", MISS),
        ("-", MISS),
        ("F", FOUL),
    ],
)
def test_normalize_second_ball(token, expected):
    assert normalize(token, AFTER_THREE) == expected


@pytest.mark.parametrize("first", [GUTTER, FOUL])
def test_ten_after_zero_first_ball_is_a_spare(first):
    position = StandingPins(frame=4, ball=2, first=first)
    assert position.standing == 10
    assert normalize("10", position) == SPARE
    assert normalize("9", position) == Throw.open(9)


def test_zero_variants_stay_distinct():
    assert normalize("0", FIRST_BALL).symbol == "G"
    assert normalize("0", AFTER_THREE).symbol == "-"
    assert normalize("-", FIRST_BALL).symbol == "G"
    assert normalize("-", AFTER_THREE).symbol == "-"


@pytest.mark.parametrize("symbol", ["yet", "1", "9", "X", "/", "G", "-", "F"])
def test_parse_round_trips_symbols(symbol):
    assert Throw.parse(symbol).symbol == symbol


@pytest.mark.parametrize("symbol", ["0", "10", "open", "x", "", None, 5])
def test_parse_rejects_unknown_symbols(symbol):
    assert Throw.parse(symbol) is None


def test_open_rejects_out_of_range_counts():
    with pytest.raises(ValueError):
        Throw.open(10)


def _pins(**slots):
    pins = list(fresh_pins())
    for key, throw in slots.items():
        pins[int(key[1:])] = throw
    return pins


def test_position_at_frames_one_to_nine():
    pins = _pins(s0=STRIKE, s2=Throw.open(4))
    assert position_at(pins, 0) == FreshRack(1, 1)
    assert position_at(pins, 1) is None
    assert position_at(pins, 3) == StandingPins(2, 2, Throw.open(4))
    assert position_at(pins, 5) is None


def test_position_at_tenth_frame():
    assert position_at(_pins(s18=STRIKE), 19) == FreshRack(10, 2)
    assert position_at(_pins(s18=Throw.open(5)), 19) == StandingPins(10, 2, Throw.open(5))
    assert position_at(_pins(s18=STRIKE, s19=STRIKE), 20) == FreshRack(10, 3)
    assert position_at(_pins(s18=STRIKE, s19=Throw.open(5)), 20) == StandingPins(10, 3, Throw.open(5))
    assert position_at(_pins(s18=Throw.open(5), s19=SPARE), 20) == FreshRack(10, 3)
    assert position_at(_pins(s18=Throw.open(4), s19=Throw.open(3)), 20) is None
    assert position_at(_pins(), 21) is None


def test_is_legal():
    assert is_legal(PENDING, None)
    assert is_legal(STRIKE, FIRST_BALL)
    assert not is_legal(SPARE, FIRST_BALL)
    assert not is_legal(MISS, FIRST_BALL)
    assert is_legal(SPARE, AFTER_THREE)
    assert is_legal(Throw.open(6), AFTER_THREE)
    assert not is_legal(Throw.open(7), AFTER_THREE)
    assert not is_legal(GUTTER, AFTER_THREE)
    assert not is_legal(FOUL, None)
    assert Throw.parse("yet").kind is Kind.PENDING
