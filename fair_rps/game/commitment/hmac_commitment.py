"""
HMAC-SHA3-256 承诺实现
HMAC-SHA3-256 Commitment
"""
import hashlib
import hmac
import secrets
from .commitment_base import CommitmentBase
from ...utils.exceptions import RandomnessSourceException
from ...utils.logger import get_logger

logger = get_logger("FairRPS.HmacCommitment")

KEY_SIZE_BYTES = 32  # 256 bit


class HmacCommitment(CommitmentBase):
    """使用 secrets 生成密钥、HMAC-SHA3-256 绑定招式的承诺方案"""

    def generate_key(self) -> bytes:
        try:
            key = secrets.token_bytes(KEY_SIZE_BYTES)
        except (OSError, NotImplementedError) as e:
            raise RandomnessSourceException(f"Secure random source unavailable: {e}") from e

        logger.debug("会话密钥已生成")
        return key

    def commit(self, key: bytes, move: str) -> bytes:
        return hmac.new(key, move.encode('utf-8'), hashlib.sha3_256).digest()

    def reveal(self, key: bytes) -> bytes:
        return bytes(key)

    def verify(self, key: bytes, move: str, digest: bytes) -> bool:
        return hmac.compare_digest(self.commit(key, move), digest)
