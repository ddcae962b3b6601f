"""
统计记录测试
Statistics Record Tests
"""
import random

import pytest

from rps_cli.game import Outcome, Statistics
from rps_cli.game.game_logic import record_outcome, reset_statistics


def test_defaults_are_zero():
    assert Statistics() == Statistics(0, 0, 0, 0)
    assert Statistics().win_rate == 0.0


@pytest.mark.parametrize("outcome, expected", [
    (Outcome.WIN, Statistics(wins=1, total_games=1)),
    (Outcome.LOSS, Statistics(losses=1, total_games=1)),
    (Outcome.TIE, Statistics(ties=1, total_games=1)),
])
def test_record_increments_one_counter(outcome, expected):
    assert record_outcome(Statistics(), outcome) == expected


def test_record_does_not_mutate_input():
    before = Statistics(wins=2, losses=1, ties=0, total_games=3)
    record_outcome(before, Outcome.TIE)
    assert before == Statistics(wins=2, losses=1, ties=0, total_games=3)


def test_counts_after_n_rounds():
    rng = random.Random(3)
    outcomes = [rng.choice(list(Outcome)) for _ in range(57)]
    stats = Statistics()
    for outcome in outcomes:
        stats = record_outcome(stats, outcome)
    assert stats.total_games == 57
    assert stats.wins + stats.losses + stats.ties == stats.total_games
    assert stats.wins == outcomes.count(Outcome.WIN)
    assert stats.is_consistent()


def test_reset_is_all_zero():
    assert reset_statistics() == Statistics(0, 0, 0, 0)


def test_win_rate_percentage():
    assert Statistics(wins=1, losses=2, ties=1, total_games=4).win_rate == 25.0


def test_dict_uses_durable_keys():
    stats = Statistics(wins=3, losses=2, ties=1, total_games=6)
    assert stats.to_dict() == {"wins": 3, "losses": 2, "ties": 1, "totalGames": 6}
    assert Statistics.from_dict(stats.to_dict()) == stats


@pytest.mark.parametrize("data", [
    [],
    "wins",
    {"wins": 1, "losses": 0, "ties": 0},
    {"wins": -1, "losses": 0, "ties": 0, "totalGames": 0},
    {"wins": "1", "losses": 0, "ties": 0, "totalGames": 1},
    {"wins": True, "losses": 0, "ties": 0, "totalGames": 1},
    {"wins": 1.5, "losses": 0, "ties": 0, "totalGames": 1},
])
def test_from_dict_rejects_malformed(data):
    with pytest.raises(ValueError):
        Statistics.from_dict(data)
