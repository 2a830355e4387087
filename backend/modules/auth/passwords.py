"""
Argon2id password hashing.

argon2-cffi is CPU-bound and synchronous, so both operations run in a
worker thread.
"""

import asyncio

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from argon2.low_level import Type

from .interfaces import IPasswordHasher


class Argon2PasswordHasher(IPasswordHasher):
    """IPasswordHasher backed by argon2-cffi. Each hash gets a fresh salt."""

    def __init__(self, hasher: PasswordHasher | None = None):
        self._hasher = hasher or PasswordHasher(
            time_cost=2,
            memory_cost=51200,
            parallelism=2,
            hash_len=32,
            salt_len=16,
            type=Type.ID,
        )

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._hasher.hash, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        try:
            return await asyncio.to_thread(self._hasher.verify, password_hash, password)
        except (VerificationError, InvalidHashError):
            return False
