"""
Postboard Server - Password Hashing

This module turns plaintext passwords into bcrypt digests and checks
candidates against stored digests. Both operations are deliberately slow,
so they run in the threadpool and are awaited by the route handlers.
"""

import bcrypt
from fastapi.concurrency import run_in_threadpool

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _PasswordBytes(password: str) -> bytes:
    """Encode a password and truncate to bcrypt's maximum length"""
    return password.encode('utf-8')[:BCRYPT_MAX_PASSWORD_BYTES]


class PasswordHasher:
    """
    Salted, adaptive one-way password hashing using bcrypt

    The work factor is the bcrypt cost: each increment doubles the time
    needed to compute (and to brute force) a digest.
    """

    def __init__(self, work_factor: int):
        """
        Args:
            work_factor: bcrypt cost parameter (4-31)
        """
        self.work_factor = work_factor

    def HashPasswordSync(self, password: str) -> str:
        """
        Hash a password using bcrypt with a fresh salt

        Args:
            password: Plain text password

        Returns:
            str: bcrypt digest (salt and cost embedded)
        """
        salt = bcrypt.gensalt(rounds=self.work_factor)
        hashed = bcrypt.hashpw(_PasswordBytes(password), salt)

        # Return as string for database storage
        return hashed.decode('utf-8')

    @staticmethod
    def VerifyPasswordSync(plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against a digest in constant time

        A malformed or empty digest never matches.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Stored digest

        Returns:
            bool: True if password matches, False otherwise
        """
        if not hashed_password:
            return False

        try:
            return bcrypt.checkpw(_PasswordBytes(plain_password), hashed_password.encode('utf-8'))
        except ValueError:
            # bcrypt rejects digests with an invalid salt or prefix
            return False

    async def HashPassword(self, password: str) -> str:
        """Hash a password without blocking the event loop"""
        return await run_in_threadpool(self.HashPasswordSync, password)

    async def VerifyPassword(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password without blocking the event loop"""
        return await run_in_threadpool(self.VerifyPasswordSync, plain_password, hashed_password)
