"""
自定义异常类
Custom Exception Classes
"""
from typing import Optional, Any


class FairRPSException(Exception):
    """游戏相关异常基类"""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationException(FairRPSException):
    """配置异常"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key


class MoveSetException(ConfigurationException):
    """招式列表参数异常（数量不足、偶数个、重复等）"""
    def __init__(self, message: str, reason: str):
        super().__init__(message, config_key="moves")
        self.reason = reason


class GameException(FairRPSException):
    """游戏逻辑异常"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state


class InvalidInputException(GameException):
    """胜负判定的输入不满足前置条件"""
    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class RandomnessSourceException(FairRPSException):
    """安全随机源不可用，会话无法继续"""
