from datetime import datetime, timezone

import pytest

from scorekeeper.engine.keeper import ScoreKeeper
from scorekeeper.engine.record import ArchiveSummary, archive_time, default_name

NOW = datetime(2024, 5, 1, 20, 15, 3, tzinfo=timezone.utc)


def play(keeper, tokens):
    return [keeper.record(token, now=NOW) for token in tokens]


def test_new_keeper_starts_fresh():
    keeper = ScoreKeeper.new("Alice")
    assert keeper.name == "Alice"
    assert keeper.cursor == 0
    assert not keeper.game_over
    assert keeper.current_scores() == [0] + [None] * 10
    assert keeper.max_score() == 300


def test_blank_name_gets_timestamp():
    assert ScoreKeeper.new("", now=NOW).name == "20240501-201503UTC"
    assert default_name(NOW) == "20240501-201503UTC"


def test_archive_time_format():
    assert archive_time(NOW) == "2024/05/01 20:15:03 +0000 UTC"


def test_record_reports_acceptance():
    keeper = ScoreKeeper.new("Alice")
    assert play(keeper, ["7", "5", "2"]) == [True, False, True]
    assert keeper.cursor == 2
    assert keeper.current_scores()[1] == 9


def test_rejection_leaves_state_unchanged(caplog):
    keeper = ScoreKeeper.new("Alice")
    play(keeper, ["x", "4"])
    before = keeper.to_dict()
    with caplog.at_level("WARNING"):
        assert not keeper.record("7")
        assert not keeper.record("7")
    assert keeper.to_dict() == before
    assert "Invalid value. Type again." in caplog.text


@pytest.mark.parametrize("token", ["²", "¹", "٣"])
def test_non_ascii_digits_are_rejected(token):
    keeper = ScoreKeeper.new("Bob")
    assert keeper.record(token) is False
    assert keeper.cursor == 0
    assert keeper.to_dict() == ScoreKeeper.new("Bob").to_dict()


def test_perfect_game():
    keeper = ScoreKeeper.new("Alice")
    assert all(play(keeper, ["x"] * 12))
    assert keeper.game_over
    assert keeper.current_scores()[10] == 300
    assert keeper.max_score() == 300


def test_max_score_tracks_the_game():
    keeper = ScoreKeeper.new("Alice")
    play(keeper, ["9"])
    assert keeper.max_score() == 290
    play(keeper, ["-"])
    assert keeper.max_score() == 279


def test_typing_after_game_over_starts_next_game():
    keeper = ScoreKeeper.new("Alice")
    play(keeper, ["x"] * 12)
    assert keeper.record("5", now=NOW)

    archives = keeper.game_record.archives
    assert len(archives) == 1
    assert archives[0].final_score == 300
    assert archives[0].time == "2024/05/01 20:15:03 +0000 UTC"
    assert keeper.cursor == 1
    assert keeper.max_score() == 290


def test_rejected_token_after_game_over_still_archives():
    keeper = ScoreKeeper.new("Alice")
    play(keeper, ["0"] * 20)
    assert not keeper.record("/", now=NOW)
    assert len(keeper.game_record.archives) == 1
    assert keeper.cursor == 0


def test_finish_archives_only_finished_games():
    keeper = ScoreKeeper.new("Alice")
    play(keeper, ["x", "x"])
    keeper.finish(now=NOW)
    assert keeper.game_record.archives == []
    assert keeper.cursor == 4

    play(keeper, ["x"] * 10)
    assert keeper.game_over
    keeper.finish(now=NOW)
    assert len(keeper.game_record.archives) == 1
    assert keeper.cursor == 0
    assert keeper.max_score() == 300


def test_summary_of_archived_games():
    keeper = ScoreKeeper.new("Alice")
    for tokens in (["x"] * 12, ["0"] * 20, ["5", "/"] * 10 + ["5"]):
        play(keeper, tokens)
        keeper.archive_and_reset(now=NOW)

    summary = keeper.summary()
    assert summary == ArchiveSummary(games=3, total=450, average=150, high=300, low=0)


def test_summary_without_archives():
    summary = ScoreKeeper.new("Alice").summary()
    assert summary.games == 0
    assert summary.average is None


def test_summary_skips_unfinished_archives():
    keeper = ScoreKeeper.new("Alice")
    play(keeper, ["x"])
    keeper.archive_and_reset(now=NOW)
    play(keeper, ["3", "4"] * 10)
    keeper.archive_and_reset(now=NOW)
    summary = keeper.summary()
    assert summary.games == 2
    assert summary.total == 70
    assert summary.high == summary.low == 70


def test_load_recomputes_scores():
    keeper = ScoreKeeper.new("Alice")
    play(keeper, ["x", "7", "/", "4"])
    raw = keeper.to_dict()
    raw["scores"] = [0, 5] + [-1] * 9
    raw["maxScore"] = 12

    loaded = ScoreKeeper.load(raw)
    assert loaded.current_scores()[:3] == [0, 20, 34]
    assert loaded.max_score() == keeper.max_score()
    assert loaded.to_dict() == keeper.to_dict()


def test_load_repairs_broken_records():
    loaded = ScoreKeeper.load({"name": "Bob", "pins": "bad"}, now=NOW)
    assert loaded.name == "20240501-201503UTC"
    assert loaded.cursor == 0
    assert loaded.max_score() == 300
