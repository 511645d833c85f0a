"""
招式集合
Move Set
"""
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple
from ...utils.exceptions import MoveSetException
from ...utils.logger import get_logger

logger = get_logger("FairRPS.MoveSet")

MIN_MOVES = 3
USAGE_EXAMPLE = "fair-rps Rock Paper Scissors"


@dataclass(frozen=True)
class MoveSet:
    """
    有序、不可变的招式名称集合，对外使用1..N的编号

    构造时校验：至少3个、奇数个、名称非空且忽略大小写后互不相同。
    """
    moves: Tuple[str, ...]

    def __post_init__(self):
        # 允许传入list等序列，统一保存为tuple
        object.__setattr__(self, 'moves', tuple(self.moves))
        self._validate(self.moves)

    @classmethod
    def from_arguments(cls, args: Sequence[str]) -> 'MoveSet':
        """
        从命令行参数创建招式集合

        Args:
            args: 招式名称列表

        Returns:
            MoveSet: 招式集合

        Raises:
            MoveSetException: 参数不满足要求
        """
        move_set = cls(tuple(args))
        logger.info(f"招式集合创建成功，共 {len(move_set)} 个招式")
        return move_set

    @staticmethod
    def _validate(moves: Tuple[str, ...]):
        count = len(moves)
        if count == 0:
            raise MoveSetException(
                "Please provide at least 3 or more odd arguments. "
                f"Example: {USAGE_EXAMPLE}",
                reason="empty"
            )
        if count < MIN_MOVES:
            raise MoveSetException(
                "Not enough arguments. Please provide at least 3 or more odd arguments.",
                reason="not_enough"
            )
        if count % 2 == 0:
            raise MoveSetException(
                "Please provide an odd number of arguments (3 or more).",
                reason="even"
            )
        if any(not isinstance(move, str) or not move.strip() for move in moves):
            raise MoveSetException(
                "Move names must be non-empty.",
                reason="blank"
            )

        seen = set()
        for move in moves:
            key = move.lower()
            if key in seen:
                raise MoveSetException(
                    f"Please provide unique arguments (case-insensitive): '{move}' is repeated.",
                    reason="duplicate"
                )
            seen.add(key)

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[str]:
        return iter(self.moves)

    def name(self, index: int) -> str:
        """
        根据编号获取招式名称

        Args:
            index: 招式编号（1..N）

        Returns:
            str: 招式名称

        Raises:
            IndexError: 编号越界
        """
        if not self.is_valid_index(index):
            raise IndexError(f"Move index out of range: {index}")
        return self.moves[index - 1]

    def is_valid_index(self, index: int) -> bool:
        """检查编号是否在1..N范围内"""
        return isinstance(index, int) and not isinstance(index, bool) and 1 <= index <= len(self.moves)

    def indexed(self) -> Iterator[Tuple[int, str]]:
        """按 (编号, 名称) 遍历招式"""
        return enumerate(self.moves, start=1)
