"""
Credential Generator - Client id / secret issuance

Module: security.credentials
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - RFC-4122 UUID v4 generation from the injected random source
  - Credential id from sub-second clock + 80 random bits
  - Credential time stamped in the reference timezone
  - bcrypt-hashed, base64-encoded client secret

ARCHITECTURE:
CredentialGenerator provides:
  - generate() -> ClientCredential (fresh on every call)
  - No storage, no caching: ownership goes to the caller

SECURITY NOTES:
- Composite plaintext aud#client_id#time%credential_id binds the
  secret to one issuance event and is never returned or logged
- Secrets are salted: identical inputs never produce the same secret
"""

import base64
import logging
import uuid
import zoneinfo
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..core.constants import (
    COMPOSITE_ID_SEPARATOR,
    COMPOSITE_SEPARATOR,
    CREDENTIAL_RANDOM_BYTES,
    CREDENTIAL_TIMEZONE,
    UUID_RANDOM_BYTES,
)
from ..core.exceptions import ClockError, ConfigError, KeyDerivationError
from .password_hasher import BcryptPasswordHasher, PasswordHasher
from .sources import Clock, RandomSource, SecureRandomSource, SystemClock


@dataclass(frozen=True)
class ClientCredential:
    """Freshly issued client credential"""
    credential_id: str
    credential_time: int
    client_aud: str
    client_id: str
    client_secret: str

    def __repr__(self) -> str:
        return (
            f"ClientCredential(credential_id={self.credential_id!r}, "
            f"credential_time={self.credential_time}, client_aud={self.client_aud!r}, "
            f"client_id={self.client_id!r}, client_secret='***')"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (for JSON transport to the caller)"""
        return asdict(self)


def new_uuid4(random_source: Optional[RandomSource] = None) -> str:
    """
    Generate a random UUID (RFC-4122 version 4)

    Version nibble forced to 0100, variant bits to 10, lowercase
    8-4-4-4-12 hex layout.

    Args:
        random_source: Source of the 16 random bytes

    Returns:
        UUID string

    Raises:
        RandomSourceError: If randomness is unavailable
    """
    source = random_source or SecureRandomSource()
    data = source.token_bytes(UUID_RANDOM_BYTES)
    return str(uuid.UUID(bytes=data, version=4))


class CredentialGenerator:
    """
    Issues client credentials for a fixed audience.

    Stateless apart from the audience and the injected capabilities;
    safe to share between threads.
    """

    def __init__(
        self,
        audience: str,
        random_source: Optional[RandomSource] = None,
        password_hasher: Optional[PasswordHasher] = None,
        clock: Optional[Clock] = None,
        timezone_name: str = CREDENTIAL_TIMEZONE,
    ):
        """
        Initialize credential generator

        Args:
            audience: Audience stamped on every credential
            random_source: Secure random source (default OS CSPRNG)
            password_hasher: Secret hasher (default bcrypt, cost 10)
            clock: Wall clock (default SystemClock)
            timezone_name: IANA zone for credential_time

        Raises:
            KeyDerivationError: If audience empty
            ConfigError: If timezone unknown
        """
        if not isinstance(audience, str) or not audience:
            raise KeyDerivationError("Audience must be a non-empty string")

        try:
            self.timezone = zoneinfo.ZoneInfo(timezone_name)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"Invalid timezone '{timezone_name}'") from e

        self.logger = logging.getLogger("security.credentials")
        self.audience = audience
        self.random_source = random_source or SecureRandomSource()
        self.password_hasher = password_hasher or BcryptPasswordHasher()
        self.clock = clock or SystemClock()

    def generate(self) -> ClientCredential:
        """
        Issue a new credential

        Returns:
            ClientCredential with a hashed secret

        Raises:
            RandomSourceError: If randomness is unavailable
            ClockError: If the clock cannot be read
            CredentialError: If hashing fails
        """
        now = self.clock.now()
        credential_id = f"{now}.{self.random_source.token_bytes(CREDENTIAL_RANDOM_BYTES).hex()}"
        credential_time = self._credential_time(now)
        client_id = new_uuid4(self.random_source)

        plaintext = (
            f"{self.audience}{COMPOSITE_SEPARATOR}{client_id}{COMPOSITE_SEPARATOR}"
            f"{credential_time}{COMPOSITE_ID_SEPARATOR}{credential_id}"
        )
        hashed = self.password_hasher.hash(plaintext)
        client_secret = base64.b64encode(hashed).decode("ascii")

        self.logger.debug(
            f"Credential issued (aud={self.audience}, client_id={client_id[:8]}...)"
        )

        return ClientCredential(
            credential_id=credential_id,
            credential_time=credential_time,
            client_aud=self.audience,
            client_id=client_id,
            client_secret=client_secret,
        )

    def _credential_time(self, now: float) -> int:
        try:
            return int(datetime.fromtimestamp(now, tz=self.timezone).timestamp())
        except (OverflowError, OSError, ValueError) as e:
            raise ClockError(f"Cannot convert clock reading {now!r}: {e}") from e
