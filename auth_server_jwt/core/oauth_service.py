"""
OAuth Service - Credential and token issuance for one audience

Module: core.oauth_service
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - Construction from (audience, secret) or ServiceConfig
  - generate(): client credential issuance
  - sign(): compact HS256 access token issuance

ARCHITECTURE:
OAuthService owns:
  - KeyMaterial (built once, immutable)
  - CredentialGenerator
  - TokenSigner
Multiple audiences require multiple independent instances.
"""

import logging
from typing import Iterable, Optional

from ..security.credentials import ClientCredential, CredentialGenerator
from ..security.key_material import KeyMaterial
from ..security.password_hasher import BcryptPasswordHasher, PasswordHasher
from ..security.sources import Clock, RandomSource, SystemClock
from ..security.token_signer import TokenSigner
from .config import ServiceConfig
from .constants import CREDENTIAL_TIMEZONE, DEFAULT_TOKEN_TTL


class OAuthService:
    """
    Issues client credentials and access tokens for a single audience.

    No mutable state is shared between calls; one instance can serve
    concurrent threads.
    """

    def __init__(
        self,
        audience: str,
        secret: str,
        random_source: Optional[RandomSource] = None,
        password_hasher: Optional[PasswordHasher] = None,
        clock: Optional[Clock] = None,
        timezone_name: str = CREDENTIAL_TIMEZONE,
        default_ttl: int = DEFAULT_TOKEN_TTL,
    ):
        """
        Initialize service

        Args:
            audience: Audience for credentials and tokens
            secret: Shared HS256 secret
            random_source: Secure random source (default OS CSPRNG)
            password_hasher: Client secret hasher (default bcrypt)
            clock: Wall clock (default SystemClock)
            timezone_name: Reference zone for credential_time
            default_ttl: TTL used when sign() gets none

        Raises:
            KeyDerivationError: If secret empty or algorithm unsupported
            ConfigError: If timezone unknown
        """
        self.logger = logging.getLogger("core.oauth_service")
        clock = clock or SystemClock()

        self._key_material = KeyMaterial(secret, audience)
        self.audience = audience
        self.default_ttl = default_ttl
        self.credentials = CredentialGenerator(
            audience,
            random_source=random_source,
            password_hasher=password_hasher,
            clock=clock,
            timezone_name=timezone_name,
        )
        self.signer = TokenSigner(self._key_material, clock=clock)

        self.logger.info(
            f"OAuth service initialized (aud={audience}, tz={timezone_name}, "
            f"default_ttl={default_ttl}s)"
        )

    @classmethod
    def from_config(cls, config: ServiceConfig, **overrides) -> "OAuthService":
        """
        Build a service from validated configuration

        Args:
            config: ServiceConfig
            **overrides: Injected capabilities (random_source, password_hasher, clock)

        Raises:
            ConfigError: If configuration invalid
            KeyDerivationError: If secret rejected
        """
        config.validate()
        overrides.setdefault("password_hasher", BcryptPasswordHasher(config.bcrypt_rounds))
        return cls(
            config.audience,
            config.secret,
            timezone_name=config.timezone,
            default_ttl=config.default_ttl,
            **overrides,
        )

    def __repr__(self) -> str:
        return f"OAuthService(audience={self.audience!r})"

    def generate(self) -> ClientCredential:
        """Issue a new client credential (see CredentialGenerator.generate)"""
        return self.credentials.generate()

    def sign(
        self,
        issuer: str,
        ttl_seconds: Optional[int] = None,
        scope: Iterable[str] = (),
    ) -> str:
        """
        Issue a compact JWT (see TokenSigner.sign)

        Args:
            issuer: Token issuer
            ttl_seconds: Lifetime in seconds (default: service default_ttl)
            scope: Ordered permission strings
        """
        if ttl_seconds is None:
            ttl_seconds = self.default_ttl
        return self.signer.sign(issuer, ttl_seconds, scope)
