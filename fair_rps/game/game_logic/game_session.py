"""
游戏会话
Game Session - 一局：电脑预先出招并承诺，玩家出招后判定并公开密钥
"""
import secrets
from typing import Optional, List
from dataclasses import dataclass, field
from datetime import datetime
from .move_set import MoveSet
from .game_rules import OutcomeResolver, Verdict
from ..commitment import CommitmentBase, HmacCommitment
from ...utils.exceptions import GameException, InvalidInputException, RandomnessSourceException
from ...utils.logger import get_logger

logger = get_logger("FairRPS.GameSession")


@dataclass
class RoundResult:
    """回合结果数据类"""
    human_index: int
    computer_index: int
    human_move: str
    computer_move: str
    verdict: Verdict
    key_hex: str
    digest_hex: str
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'human_index': self.human_index,
            'computer_index': self.computer_index,
            'human_move': self.human_move,
            'computer_move': self.computer_move,
            'verdict': self.verdict.value,
            'key': self.key_hex,
            'digest': self.digest_hex,
            'timestamp': self.timestamp.isoformat()
        }


class GameSession:
    """
    单局游戏会话

    构造时生成密钥、选定电脑招式并计算摘要；之后密钥与电脑招式不再改变。
    密钥只在 play() 中公开一次。
    """

    def __init__(self,
                 move_set: MoveSet,
                 commitment: Optional[CommitmentBase] = None,
                 computer_index: Optional[int] = None):
        """
        初始化游戏会话

        Args:
            move_set: 招式集合
            commitment: 承诺方案（默认 HMAC-SHA3-256）
            computer_index: 指定电脑招式编号（测试用，默认安全随机选择）

        Raises:
            RandomnessSourceException: 安全随机源不可用
            InvalidInputException: 指定的电脑招式编号越界
        """
        self.move_set = move_set
        self.commitment = commitment if commitment is not None else HmacCommitment()

        self._key = self.commitment.generate_key()

        if computer_index is None:
            computer_index = self._pick_computer_index(len(move_set))
        elif not move_set.is_valid_index(computer_index):
            raise InvalidInputException(
                f"Computer move index out of range: {computer_index!r}", value=computer_index
            )
        self._computer_index = computer_index

        self.digest = self.commitment.commit(self._key, move_set.name(computer_index))
        self.result: Optional[RoundResult] = None

        logger.info(f"会话已创建，招式数: {len(move_set)}，摘要: {self.digest_hex}")

    @staticmethod
    def _pick_computer_index(n: int) -> int:
        try:
            return secrets.randbelow(n) + 1
        except (OSError, NotImplementedError) as e:
            raise RandomnessSourceException(f"Secure random source unavailable: {e}") from e

    @property
    def digest_hex(self) -> str:
        """摘要的十六进制表示"""
        return self.digest.hex()

    def is_resolved(self) -> bool:
        """本局是否已判定"""
        return self.result is not None

    def play(self, human_index: int) -> RoundResult:
        """
        玩家出招，判定结果并公开密钥

        Args:
            human_index: 玩家招式编号（1..N）

        Returns:
            RoundResult: 回合结果

        Raises:
            GameException: 本局已经结束
            InvalidInputException: 编号越界
        """
        if self.is_resolved():
            raise GameException("Round already resolved", game_state="RESOLVED")
        if not self.move_set.is_valid_index(human_index):
            raise InvalidInputException(
                f"Move index out of range: {human_index!r}", value=human_index
            )

        verdict = OutcomeResolver.determine(human_index, self._computer_index, len(self.move_set))
        key = self.commitment.reveal(self._key)

        self.result = RoundResult(
            human_index=human_index,
            computer_index=self._computer_index,
            human_move=self.move_set.name(human_index),
            computer_move=self.move_set.name(self._computer_index),
            verdict=verdict,
            key_hex=key.hex(),
            digest_hex=self.digest_hex
        )

        logger.info(f"回合结束: 玩家={self.result.human_move}, "
                    f"电脑={self.result.computer_move}, 结果={verdict.value}")
        return self.result


def build_verdict_matrix(move_set: MoveSet) -> List[List[Verdict]]:
    """
    按行=电脑招式、列=玩家招式计算玩家视角的结果矩阵

    只依赖招式集合与判定规则，不涉及密钥或电脑的实际招式。
    """
    n = len(move_set)
    return [
        [OutcomeResolver.determine(human, computer, n) for human in range(1, n + 1)]
        for computer in range(1, n + 1)
    ]
