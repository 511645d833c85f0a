"""
承诺方案抽象基类
Commitment Scheme Base Class
"""
from abc import ABC, abstractmethod


class CommitmentBase(ABC):
    """承诺方案抽象基类，定义生成密钥、承诺、公开密钥的接口"""

    @abstractmethod
    def generate_key(self) -> bytes:
        """
        生成会话密钥

        Returns:
            bytes: 新的随机密钥

        Raises:
            RandomnessSourceException: 安全随机源不可用
        """
        pass

    @abstractmethod
    def commit(self, key: bytes, move: str) -> bytes:
        """
        计算绑定密钥与招式的摘要

        Args:
            key: 会话密钥
            move: 招式名称

        Returns:
            bytes: 摘要
        """
        pass

    @abstractmethod
    def reveal(self, key: bytes) -> bytes:
        """
        公开密钥（只能在玩家出招之后调用）

        Args:
            key: 会话密钥

        Returns:
            bytes: 原始密钥
        """
        pass

    def verify(self, key: bytes, move: str, digest: bytes) -> bool:
        """
        校验公开的密钥与招式能否得到之前展示的摘要

        Args:
            key: 公开的密钥
            move: 对方声称的招式
            digest: 之前展示的摘要

        Returns:
            bool: 是否一致
        """
        return self.commit(key, move) == digest
