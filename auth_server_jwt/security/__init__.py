"""
Security module - Signing key, credentials and tokens

Provides:
- KeyMaterial: HS256 signing key bound to an audience
- CredentialGenerator: client id / hashed secret issuance
- TokenSigner: compact JWT issuance
- BcryptPasswordHasher: salted client secret hashing
- SecureRandomSource, SystemClock: injectable environment sources
"""

from .key_material import KeyMaterial
from .credentials import ClientCredential, CredentialGenerator, new_uuid4
from .token_signer import TokenClaims, TokenSigner
from .password_hasher import BcryptPasswordHasher, PasswordHasher
from .sources import Clock, RandomSource, SecureRandomSource, SystemClock

__all__ = [
    "KeyMaterial",
    "ClientCredential",
    "CredentialGenerator",
    "new_uuid4",
    "TokenClaims",
    "TokenSigner",
    "BcryptPasswordHasher",
    "PasswordHasher",
    "RandomSource",
    "Clock",
    "SecureRandomSource",
    "SystemClock",
]
