"""
游戏逻辑模块
Game Logic Module
"""
from .move_set import MoveSet
from .game_rules import OutcomeResolver, Verdict
from .game_session import GameSession, RoundResult, build_verdict_matrix

__all__ = [
    'MoveSet',
    'OutcomeResolver',
    'Verdict',
    'GameSession',
    'RoundResult',
    'build_verdict_matrix'
]
