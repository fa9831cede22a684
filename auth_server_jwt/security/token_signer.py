"""
Token Signer - Compact HS256 JWT issuance

Module: security.token_signer
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - Claim assembly (iat, nbf, exp, iss, aud, scope)
  - Compact JSON payload, claim order preserved
  - HS256 signature through KeyMaterial
  - Unpadded base64url compact serialization

ARCHITECTURE:
TokenSigner provides:
  - sign(issuer, ttl_seconds, scope) -> compact JWT
  - Audience always taken from KeyMaterial (never caller-supplied)

SECURITY NOTES:
- ttl_seconds == 0 issues an already-expired token (exp == iat)
- Negative TTLs are rejected
- Tokens are never logged
- All times are Unix seconds (UTC)
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from jwt.utils import base64url_encode

from ..core.constants import JSON_SEPARATORS, TOKEN_TYPE
from ..core.exceptions import (
    ClockError,
    InvalidArgumentError,
    SerializationError,
    SigningError,
)
from .key_material import KeyMaterial
from .sources import Clock, SystemClock


@dataclass(frozen=True)
class TokenClaims:
    """Claim set of one access token"""
    iat: int
    nbf: int
    exp: int
    iss: str
    aud: str
    scope: List[str] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        """Claims in wire order: iat, nbf, exp, iss, aud, scope"""
        return {
            "iat": self.iat,
            "nbf": self.nbf,
            "exp": self.exp,
            "iss": self.iss,
            "aud": self.aud,
            "scope": list(self.scope),
        }


class TokenSigner:
    """
    Builds, signs and serializes access tokens for one audience.

    Pure function of (claims, key) apart from reading the clock.
    """

    def __init__(self, key_material: KeyMaterial, clock: Optional[Clock] = None):
        """
        Initialize token signer

        Args:
            key_material: Signing key (also provides the audience)
            clock: Wall clock (default SystemClock)
        """
        self.logger = logging.getLogger("security.token_signer")
        self.key_material = key_material
        self.clock = clock or SystemClock()

    @property
    def header(self) -> Dict[str, str]:
        return {"alg": self.key_material.algorithm, "typ": TOKEN_TYPE}

    def build_claims(self, issuer: str, ttl_seconds: int, scope: Iterable[str]) -> TokenClaims:
        """
        Validate inputs and assemble the claim set

        Args:
            issuer: Token issuer (iss)
            ttl_seconds: Lifetime in seconds (0 = already expired)
            scope: Ordered permission strings

        Returns:
            TokenClaims stamped with the current time

        Raises:
            InvalidArgumentError: If issuer, TTL or scope container invalid
            SerializationError: If a scope entry is not a string
            ClockError: If the clock cannot be read
        """
        if not isinstance(issuer, str) or not issuer:
            raise InvalidArgumentError("Issuer must be a non-empty string")

        # bool is an int subclass
        if isinstance(ttl_seconds, bool) or not isinstance(ttl_seconds, int):
            raise InvalidArgumentError(f"TTL must be an integer (got {type(ttl_seconds).__name__})")
        if ttl_seconds < 0:
            raise InvalidArgumentError(f"TTL must be >= 0 (got {ttl_seconds})")

        if isinstance(scope, (str, bytes)):
            raise InvalidArgumentError("Scope must be a sequence of strings, not a string")
        try:
            scope_list = list(scope)
        except TypeError as e:
            raise InvalidArgumentError(f"Scope must be iterable: {e}") from e

        for entry in scope_list:
            if not isinstance(entry, str):
                raise SerializationError(
                    f"Scope entries must be strings (got {type(entry).__name__})"
                )

        reading = self.clock.now()
        try:
            now = int(reading)
        except (OverflowError, ValueError, TypeError) as e:
            raise ClockError(f"Cannot convert clock reading {reading!r}: {e}") from e

        return TokenClaims(
            iat=now,
            nbf=now,
            exp=now + ttl_seconds,
            iss=issuer,
            aud=self.key_material.audience,
            scope=scope_list,
        )

    def sign(self, issuer: str, ttl_seconds: int, scope: Iterable[str]) -> str:
        """
        Issue a compact JWT

        Args:
            issuer: Token issuer (iss)
            ttl_seconds: Lifetime in seconds
            scope: Ordered permission strings

        Returns:
            "<header>.<payload>.<signature>" (unpadded base64url)

        Raises:
            InvalidArgumentError: If inputs invalid
            SerializationError: If claims cannot be encoded
            SigningError: If the key rejects the operation
        """
        claims = self.build_claims(issuer, ttl_seconds, scope)
        token = self.serialize(claims)

        self.logger.debug(
            f"Token signed (iss={issuer}, aud={claims.aud}, ttl={ttl_seconds}s, "
            f"scope={len(claims.scope)} entries)"
        )
        return token

    def serialize(self, claims: TokenClaims) -> str:
        """
        Sign a claim set and produce the compact form

        Raises:
            SerializationError: If claims cannot be encoded
            SigningError: If claims target another audience or signing fails
        """
        if claims.aud != self.key_material.audience:
            raise SigningError(
                f"Claims audience '{claims.aud}' does not match key audience"
            )

        header_segment = base64url_encode(_encode_json(self.header))
        payload_segment = base64url_encode(_encode_json(claims.to_payload()))
        signing_input = header_segment + b"." + payload_segment

        signature = self.key_material.sign(signing_input)
        return (signing_input + b"." + base64url_encode(signature)).decode("ascii")


def _encode_json(obj: Dict[str, Any]) -> bytes:
    try:
        return json.dumps(obj, separators=JSON_SEPARATORS).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot encode claims as JSON: {e}") from e
