"""
Password Hasher - bcrypt hashing for client secrets

Module: security.password_hasher
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - bcrypt with per-call random salt
  - SHA-256 pre-hash to stay under bcrypt's 72-byte input limit

SECURITY NOTES:
- Cost factor configurable (10 by default, 4 minimum)
- Same plaintext never hashes identically twice (embedded salt)
"""

import base64
import hashlib
from typing import Protocol

import bcrypt

from ..core.constants import DEFAULT_BCRYPT_ROUNDS, MAX_BCRYPT_ROUNDS, MIN_BCRYPT_ROUNDS
from ..core.exceptions import CredentialError, InvalidArgumentError


class PasswordHasher(Protocol):
    """Slow salted one-way hash of a plaintext"""

    def hash(self, plaintext: str) -> bytes: ...


class BcryptPasswordHasher:
    """
    Slow salted one-way hash for credential plaintexts.

    The plaintext is reduced to base64(sha256(plaintext)) before bcrypt,
    so long composites keep every byte significant.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        """
        Args:
            rounds: bcrypt cost factor

        Raises:
            InvalidArgumentError: If rounds outside bcrypt's range
        """
        if not MIN_BCRYPT_ROUNDS <= rounds <= MAX_BCRYPT_ROUNDS:
            raise InvalidArgumentError(
                f"bcrypt rounds must be between {MIN_BCRYPT_ROUNDS} and {MAX_BCRYPT_ROUNDS}"
            )
        self.rounds = rounds

    def hash(self, plaintext: str) -> bytes:
        """
        Hash a plaintext

        Args:
            plaintext: Value to hash

        Returns:
            bcrypt hash ("$2b$<cost>$<salt+digest>") as bytes

        Raises:
            CredentialError: If bcrypt fails
        """
        try:
            digest = base64.b64encode(hashlib.sha256(plaintext.encode("utf-8")).digest())
            return bcrypt.hashpw(digest, bcrypt.gensalt(rounds=self.rounds))
        except (ValueError, TypeError) as e:
            raise CredentialError(f"Password hashing failed: {e}") from e

