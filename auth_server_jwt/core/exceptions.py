"""
Exceptions for the credential and token service

Module: core.exceptions
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial error taxonomy
  - Key derivation errors (construction time)
  - Environment errors (randomness, clock)
  - Signing and serialization errors (token issuance)
  - Caller input and configuration errors

SECURITY NOTES:
- Messages never include secret material
- Environment errors are terminal for the call (no retries)
"""


class AuthServerError(Exception):
    """Base error for the credential/token service"""
    pass


class KeyDerivationError(AuthServerError):
    """Signing key cannot be derived (empty secret, unsupported algorithm)"""
    pass


class RandomSourceError(AuthServerError):
    """Secure randomness is unavailable"""
    pass


class ClockError(AuthServerError):
    """System clock cannot be read"""
    pass


class SigningError(AuthServerError):
    """Key material rejected the signing operation"""
    pass


class SerializationError(AuthServerError):
    """Claims cannot be encoded as JSON"""
    pass


class InvalidArgumentError(AuthServerError):
    """Caller supplied an invalid argument"""
    pass


class CredentialError(AuthServerError):
    """Client secret hashing failed"""
    pass


class ConfigError(AuthServerError):
    """Service configuration is invalid"""
    pass
