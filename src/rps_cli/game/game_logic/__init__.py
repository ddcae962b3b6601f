"""
游戏逻辑模块
Game Logic Module
"""
from .move import Move
from .game_rules import GameRules, Outcome
from .statistics import Statistics, record_outcome, reset_statistics
from .game_engine import GameEngine, RoundResult, MoveProvider

__all__ = [
    'Move',
    'GameRules',
    'Outcome',
    'Statistics',
    'record_outcome',
    'reset_statistics',
    'GameEngine',
    'RoundResult',
    'MoveProvider'
]
