"""
Constants for the credential and token service

Module: core.constants
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial constants definition
  - Signing algorithm and key usage
  - Credential generation parameters
  - Token defaults
  - Environment variable names

SECURITY NOTES:
- Only HS256 is supported (single symmetric key per audience)
- Credential timestamps use a fixed reference timezone, not the host locale
- Consumers expecting UTC business time must convert downstream
"""

from typing import Final

# ============================================================================
# Service Identity
# ============================================================================

SERVICE_NAME: Final[str] = "auth_server_jwt"
SERVICE_VERSION: Final[str] = "0.1.0"

# ============================================================================
# Signing
# ============================================================================

SIGNING_ALGORITHM: Final[str] = "HS256"
SUPPORTED_ALGORITHMS: Final[tuple] = (SIGNING_ALGORITHM,)
KEY_USE_SIGNATURE: Final[str] = "sig"
TOKEN_TYPE: Final[str] = "JWT"

# Compact JSON, no whitespace
JSON_SEPARATORS: Final[tuple] = (",", ":")

# ============================================================================
# Credential Generation
# ============================================================================

CREDENTIAL_TIMEZONE: Final[str] = "America/Sao_Paulo"
CREDENTIAL_RANDOM_BYTES: Final[int] = 10  # 80 bits
UUID_RANDOM_BYTES: Final[int] = 16

# Composite plaintext separators: aud#client_id#time%credential_id
COMPOSITE_SEPARATOR: Final[str] = "#"
COMPOSITE_ID_SEPARATOR: Final[str] = "%"

# bcrypt cost factor (4-31, 10-12 recommended)
DEFAULT_BCRYPT_ROUNDS: Final[int] = 10
MIN_BCRYPT_ROUNDS: Final[int] = 4
MAX_BCRYPT_ROUNDS: Final[int] = 31

# ============================================================================
# Tokens
# ============================================================================

DEFAULT_TOKEN_TTL: Final[int] = 3600  # seconds

# ============================================================================
# Environment
# ============================================================================

ENV_PREFIX: Final[str] = "AUTHSRV_"
ENV_AUDIENCE: Final[str] = ENV_PREFIX + "AUDIENCE"
ENV_SECRET: Final[str] = ENV_PREFIX + "SECRET"
ENV_TIMEZONE: Final[str] = ENV_PREFIX + "TIMEZONE"
ENV_BCRYPT_ROUNDS: Final[str] = ENV_PREFIX + "BCRYPT_ROUNDS"
ENV_DEFAULT_TTL: Final[str] = ENV_PREFIX + "DEFAULT_TTL"

# ============================================================================
# Logging
# ============================================================================

LOG_LEVEL_INFO: Final[str] = "INFO"
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_default_config() -> dict:
    """
    Get default service configuration

    Returns:
        dict: Default configuration (audience and secret left unset)
    """
    return {
        "service": {
            "name": SERVICE_NAME,
            "version": SERVICE_VERSION,
        },
        "signing": {
            "algorithm": SIGNING_ALGORITHM,
            "key_use": KEY_USE_SIGNATURE,
        },
        "credentials": {
            "timezone": CREDENTIAL_TIMEZONE,
            "random_bytes": CREDENTIAL_RANDOM_BYTES,
            "bcrypt_rounds": DEFAULT_BCRYPT_ROUNDS,
        },
        "tokens": {
            "default_ttl": DEFAULT_TOKEN_TTL,
        },
        "logging": {
            "level": LOG_LEVEL_INFO,
            "format": LOG_FORMAT,
        },
    }
