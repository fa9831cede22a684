"""
auth_server_jwt - OAuth client credentials and HS256 JWT issuance

Mints client id / hashed secret pairs for newly registered clients and
signs short-lived, scope-bounded access tokens for a single audience.

CHANGELOG:
[2026-10-19 v0.1.0] Initial release
  - Client credential generation (UUID v4 + bcrypt secret)
  - Compact HS256 token signing
  - Environment-based configuration and CLI

SECURITY NOTES:
- One immutable signing key per service instance
- No storage, no verification: consumers persist and validate
- Credential time uses a fixed reference timezone (America/Sao_Paulo)
"""

__version__ = "0.1.0"

from .core.oauth_service import OAuthService
from .core.config import ServiceConfig
from .core.exceptions import (
    AuthServerError,
    KeyDerivationError,
    RandomSourceError,
    ClockError,
    SigningError,
    SerializationError,
    InvalidArgumentError,
    CredentialError,
    ConfigError,
)
from .security.credentials import ClientCredential, new_uuid4
from .security.token_signer import TokenClaims

__all__ = [
    "OAuthService",
    "ServiceConfig",
    "ClientCredential",
    "TokenClaims",
    "new_uuid4",
    "AuthServerError",
    "KeyDerivationError",
    "RandomSourceError",
    "ClockError",
    "SigningError",
    "SerializationError",
    "InvalidArgumentError",
    "CredentialError",
    "ConfigError",
]
