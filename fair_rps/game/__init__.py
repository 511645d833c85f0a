"""
游戏逻辑模块
Game Module
"""
from .game_controller import GameController
from .game_logic import MoveSet, OutcomeResolver, Verdict, GameSession, RoundResult
from .commitment import CommitmentBase, HmacCommitment
from .state_machine import GameState, GameStateMachine
from .help_table import build_outcome_table, render_outcome_table

__all__ = [
    'GameController',
    'MoveSet',
    'OutcomeResolver',
    'Verdict',
    'GameSession',
    'RoundResult',
    'CommitmentBase',
    'HmacCommitment',
    'GameState',
    'GameStateMachine',
    'build_outcome_table',
    'render_outcome_table'
]
