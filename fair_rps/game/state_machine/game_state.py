"""
游戏状态枚举
Game State Enumeration
"""
from enum import Enum, auto


class GameState(Enum):
    """游戏状态枚举"""
    AWAITING_INPUT = auto()    # 等待玩家输入
    SHOW_HELP = auto()         # 显示胜负表
    RESOLVED = auto()          # 已判定
    QUIT = auto()              # 玩家退出

    def __str__(self):
        return self.name
