"""
Service configuration

Module: core.config
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - ServiceConfig dataclass
  - Loading from AUTHSRV_* environment variables
  - Validation of timezone, bcrypt cost and TTL
"""

import os
import zoneinfo
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    CREDENTIAL_TIMEZONE,
    DEFAULT_BCRYPT_ROUNDS,
    DEFAULT_TOKEN_TTL,
    ENV_AUDIENCE,
    ENV_BCRYPT_ROUNDS,
    ENV_DEFAULT_TTL,
    ENV_SECRET,
    ENV_TIMEZONE,
    MAX_BCRYPT_ROUNDS,
    MIN_BCRYPT_ROUNDS,
)
from .exceptions import ConfigError


@dataclass(frozen=True)
class ServiceConfig:
    """Configuration for one audience-bound service instance"""
    audience: str
    secret: str
    timezone: str = CREDENTIAL_TIMEZONE
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS
    default_ttl: int = DEFAULT_TOKEN_TTL

    def __repr__(self) -> str:
        return (
            f"ServiceConfig(audience={self.audience!r}, secret='***', "
            f"timezone={self.timezone!r}, bcrypt_rounds={self.bcrypt_rounds}, "
            f"default_ttl={self.default_ttl})"
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        """
        Build configuration from AUTHSRV_* environment variables

        Args:
            environ: Mapping to read from (default os.environ)

        Returns:
            Validated ServiceConfig

        Raises:
            ConfigError: If a variable is missing or malformed
        """
        env = os.environ if environ is None else environ

        audience = env.get(ENV_AUDIENCE, "")
        secret = env.get(ENV_SECRET, "")

        config = cls(
            audience=audience,
            secret=secret,
            timezone=env.get(ENV_TIMEZONE, CREDENTIAL_TIMEZONE),
            bcrypt_rounds=_parse_int(env, ENV_BCRYPT_ROUNDS, DEFAULT_BCRYPT_ROUNDS),
            default_ttl=_parse_int(env, ENV_DEFAULT_TTL, DEFAULT_TOKEN_TTL),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """
        Validate configuration values

        Raises:
            ConfigError: On the first invalid value
        """
        if not self.audience:
            raise ConfigError(f"Audience is required ({ENV_AUDIENCE})")
        if not self.secret:
            raise ConfigError(f"Secret is required ({ENV_SECRET})")

        try:
            zoneinfo.ZoneInfo(self.timezone)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"Invalid timezone '{self.timezone}'") from e

        if not MIN_BCRYPT_ROUNDS <= self.bcrypt_rounds <= MAX_BCRYPT_ROUNDS:
            raise ConfigError(
                f"bcrypt rounds must be between {MIN_BCRYPT_ROUNDS} and "
                f"{MAX_BCRYPT_ROUNDS} (got {self.bcrypt_rounds})"
            )
        if self.default_ttl < 0:
            raise ConfigError(f"Default TTL must be >= 0 (got {self.default_ttl})")


def _parse_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer (got {raw!r})") from e
