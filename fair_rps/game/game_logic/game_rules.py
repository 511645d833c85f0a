"""
游戏规则实现
Game Rules Implementation - 任意奇数个招式的环形胜负判定
"""
from enum import Enum
from ...utils.exceptions import InvalidInputException
from ...utils.logger import get_logger

logger = get_logger("FairRPS.GameRules")


class Verdict(Enum):
    """胜负结果枚举（值即显示文本）"""
    WIN = "Win"
    LOSE = "Lose"
    DRAW = "Draw"

    def __str__(self):
        return self.value


class OutcomeResolver:
    """
    环形胜负判定

    N个招式按顺序排成一个环。每个招式胜过它之前的 N//2 个招式，
    负于它之后的 N//2 个招式；对 Rock Paper Scissors 即经典规则。
    """

    @staticmethod
    def determine(self_index: int, other_index: int, n: int) -> Verdict:
        """
        判断 self_index 一方对 other_index 一方的结果

        Args:
            self_index: 己方招式编号（1..n）
            other_index: 对方招式编号（1..n）
            n: 招式总数（奇数且 >= 3）

        Returns:
            Verdict: 己方视角的结果

        Raises:
            InvalidInputException: n 非法或编号越界
        """
        OutcomeResolver._check_preconditions(self_index, other_index, n)

        half = n // 2
        # 对方相对己方的环形有符号距离，落在 [-half, half]
        delta = ((other_index - self_index + half + n) % n) - half

        logger.debug(f"判定: 己方={self_index}, 对方={other_index}, N={n}, 距离={delta}")

        if delta == 0:
            return Verdict.DRAW
        # 对方在己方之后半圈内：对方胜
        if delta > 0:
            return Verdict.LOSE
        return Verdict.WIN

    @staticmethod
    def _check_preconditions(self_index: int, other_index: int, n: int):
        if not _is_int(n) or n < 3 or n % 2 == 0:
            raise InvalidInputException(
                f"Number of moves must be an odd integer >= 3, got {n!r}", value=n
            )
        for index in (self_index, other_index):
            if not _is_int(index) or not 1 <= index <= n:
                raise InvalidInputException(
                    f"Move index must be an integer in [1, {n}], got {index!r}", value=index
                )


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
