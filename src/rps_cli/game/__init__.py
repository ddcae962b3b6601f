"""
游戏模块
Game Module
"""
from .session_controller import SessionController
from .game_logic import Move, GameRules, Outcome, Statistics, GameEngine, RoundResult
from .state_machine import SessionState, SessionStateMachine
from .move_providers import interactive_move_provider, preset_move_provider

__all__ = [
    'SessionController',
    'Move',
    'GameRules',
    'Outcome',
    'Statistics',
    'GameEngine',
    'RoundResult',
    'SessionState',
    'SessionStateMachine',
    'interactive_move_provider',
    'preset_move_provider'
]
