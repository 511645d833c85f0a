"""
公平承诺模块
Fair Commitment Module
"""
from .commitment_base import CommitmentBase
from .hmac_commitment import HmacCommitment, KEY_SIZE_BYTES

__all__ = ['CommitmentBase', 'HmacCommitment', 'KEY_SIZE_BYTES']
