"""
Randomness and clock sources

Module: security.sources
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - SecureRandomSource backed by the OS CSPRNG
  - SystemClock backed by wall-clock time

Both are injected into CredentialGenerator and TokenSigner so tests can
substitute deterministic sources.
"""

import secrets
import time
from typing import Protocol

from ..core.exceptions import ClockError, RandomSourceError


class RandomSource(Protocol):
    """Anything that can produce secure random bytes"""

    def token_bytes(self, size: int) -> bytes: ...


class Clock(Protocol):
    """Anything that can read Unix time in seconds"""

    def now(self) -> float: ...


class SecureRandomSource:
    """Cryptographically secure random bytes (secrets module)"""

    def token_bytes(self, size: int) -> bytes:
        """
        Read random bytes

        Args:
            size: Number of bytes

        Returns:
            `size` random bytes

        Raises:
            RandomSourceError: If the OS entropy source is unavailable
        """
        try:
            data = secrets.token_bytes(size)
        except (OSError, NotImplementedError) as e:
            raise RandomSourceError(f"Secure randomness unavailable: {e}") from e

        if len(data) != size:
            raise RandomSourceError(f"Short read from random source ({len(data)}/{size})")
        return data


class SystemClock:
    """Wall-clock time in Unix seconds"""

    def now(self) -> float:
        try:
            return time.time()
        except (OSError, OverflowError) as e:
            raise ClockError(f"System clock unavailable: {e}") from e
