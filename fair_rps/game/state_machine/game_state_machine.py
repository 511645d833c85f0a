"""
游戏状态机
Game State Machine
"""
from typing import Optional, Callable, Dict
from .game_state import GameState
from ...utils.exceptions import GameException
from ...utils.logger import get_logger

logger = get_logger("FairRPS.GameStateMachine")


class GameStateMachine:
    """游戏状态机类"""

    # 状态转换规则；无效输入时停留在 AWAITING_INPUT
    VALID_TRANSITIONS: Dict[GameState, list] = {
        GameState.AWAITING_INPUT: [GameState.AWAITING_INPUT, GameState.SHOW_HELP,
                                   GameState.RESOLVED, GameState.QUIT],
        GameState.SHOW_HELP: [GameState.AWAITING_INPUT],
        GameState.RESOLVED: [],
        GameState.QUIT: []
    }

    TERMINAL_STATES = (GameState.RESOLVED, GameState.QUIT)

    def __init__(self, initial_state: GameState = GameState.AWAITING_INPUT):
        """
        初始化状态机

        Args:
            initial_state: 初始状态
        """
        self.current_state = initial_state
        self.previous_state: Optional[GameState] = None
        self.state_handlers: Dict[GameState, Callable] = {}

        logger.debug(f"游戏状态机初始化，初始状态: {self.current_state}")

    def register_state_handler(self, state: GameState, handler: Callable):
        """
        注册状态处理函数（进入该状态时调用）

        Args:
            state: 状态
            handler: 处理函数
        """
        self.state_handlers[state] = handler
        logger.debug(f"注册状态处理函数: {state}")

    def transition_to(self, new_state: GameState):
        """
        转换到新状态并调用其处理函数

        Args:
            new_state: 新状态

        Raises:
            GameException: 转换规则不允许
        """
        if not self.can_transition_to(new_state):
            raise GameException(
                f"Invalid state transition: {self.current_state} -> {new_state}",
                game_state=str(self.current_state)
            )

        old_state = self.current_state
        self.previous_state = old_state
        self.current_state = new_state

        logger.debug(f"状态转换: {old_state} -> {new_state}")

        handler = self.state_handlers.get(new_state)
        if handler:
            handler()

    def get_current_state(self) -> GameState:
        """获取当前状态"""
        return self.current_state

    def get_previous_state(self) -> Optional[GameState]:
        """获取上一个状态"""
        return self.previous_state

    def can_transition_to(self, state: GameState) -> bool:
        """
        检查是否可以转换到指定状态

        Args:
            state: 目标状态

        Returns:
            bool: 是否可以转换
        """
        return state in self.VALID_TRANSITIONS.get(self.current_state, [])

    def is_in_state(self, state: GameState) -> bool:
        """检查是否在指定状态"""
        return self.current_state == state

    def is_finished(self) -> bool:
        """是否已到达终止状态"""
        return self.current_state in self.TERMINAL_STATES
