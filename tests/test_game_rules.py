"""
游戏规则测试
Game Rules Tests
"""
import itertools
import random

import pytest

from rps_cli.game import GameRules, Move, Outcome
from rps_cli.utils import GameException


def test_identical_moves_tie():
    """相同出拳为平局"""
    for move in Move:
        assert GameRules.judge(move, move) == Outcome.TIE


@pytest.mark.parametrize("player, opponent", [
    (Move.ROCK, Move.SCISSORS),
    (Move.PAPER, Move.ROCK),
    (Move.SCISSORS, Move.PAPER),
])
def test_winning_pairs(player, opponent):
    assert GameRules.judge(player, opponent) == Outcome.WIN
    assert GameRules.judge(opponent, player) == Outcome.LOSS


def test_judge_is_antisymmetric_and_total():
    """3x3 全部组合都有结果，且胜负互为反面"""
    for a, b in itertools.product(Move, repeat=2):
        result = GameRules.judge(a, b)
        assert result in Outcome
        if result == Outcome.WIN:
            assert GameRules.judge(b, a) == Outcome.LOSS
        elif result == Outcome.LOSS:
            assert GameRules.judge(b, a) == Outcome.WIN


def test_relation_is_a_three_cycle():
    """每个出拳恰好战胜一个、输给一个，没有自环"""
    beaten = [GameRules.beats(move) for move in Move]
    assert sorted(m.value for m in beaten) == sorted(m.value for m in Move)
    for move in Move:
        assert GameRules.beats(move) != move
        assert sum(GameRules.beats(other) == move for other in Move) == 1
    # 绕一圈回到起点
    start = Move.ROCK
    assert GameRules.beats(GameRules.beats(GameRules.beats(start))) == start


def test_judge_rejects_non_moves():
    with pytest.raises(GameException):
        GameRules.judge("rock", Move.PAPER)


def test_random_move_uses_injected_source():
    rng = random.Random(7)
    picks = {GameRules.random_move(rng) for _ in range(200)}
    assert picks == set(Move)


@pytest.mark.parametrize("text, expected", [
    ("rock", Move.ROCK),
    ("  Paper ", Move.PAPER),
    ("SCISSORS", Move.SCISSORS),
    ("lizard", None),
    ("", None),
    (None, None),
])
def test_move_from_string(text, expected):
    assert Move.from_string(text) is expected
