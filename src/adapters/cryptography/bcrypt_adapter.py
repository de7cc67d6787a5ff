"""
bcrypt adapter - Implements Encrypter protocol.

Hashing runs in a worker thread so the event loop stays responsive while
bcrypt burns through its cost factor.
"""

import asyncio

import bcrypt

# bcrypt ignores input past 72 bytes (4.x) or rejects it (5.x)
MAX_INPUT_BYTES = 72


class BcryptAdapter:
    """
    Implements Encrypter protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, rounds: int = 12) -> None:
        """
        Initialize adapter with a bcrypt work factor.

        Args:
            rounds: bcrypt cost factor (log2 of iterations)
        """
        self._rounds = rounds

    async def encrypt(self, value: str) -> str:
        """
        Return the bcrypt hash of value as a UTF-8 string.

        Raises:
            ValueError: If value encodes to more than 72 bytes
        """
        encoded = value.encode()
        if len(encoded) > MAX_INPUT_BYTES:
            raise ValueError(f"bcrypt input exceeds {MAX_INPUT_BYTES} bytes")
        return await asyncio.to_thread(self._hash, encoded)

    def _hash(self, value: bytes) -> str:
        return bcrypt.hashpw(value, bcrypt.gensalt(rounds=self._rounds)).decode()
