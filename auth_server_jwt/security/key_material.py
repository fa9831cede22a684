"""
Key Material - Symmetric signing key for one audience

Module: security.key_material
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial implementation
  - HS256 key derivation from a shared secret
  - Signing capability without raw key access

ARCHITECTURE:
KeyMaterial provides:
  - One immutable key per (audience, secret) pair
  - sign(bytes) -> signature, used by TokenSigner
  - Algorithm resolution through PyJWT's algorithm registry

SECURITY NOTES:
- The raw key is never exposed (no accessor, redacted repr)
- Secrets shorter than 32 bytes are accepted but logged as weak
"""

import logging

from jwt.algorithms import get_default_algorithms
from jwt.exceptions import InvalidKeyError

from ..core.constants import KEY_USE_SIGNATURE, SIGNING_ALGORITHM, SUPPORTED_ALGORITHMS
from ..core.exceptions import KeyDerivationError, SigningError

MIN_RECOMMENDED_SECRET_BYTES = 32


class KeyMaterial:
    """
    Immutable HMAC signing key bound to an audience.

    Built once per service instance. Only the signing operation is
    exposed; callers never see the prepared key.
    """

    __slots__ = ("_audience", "_algorithm", "_key_use", "_signer", "_key")

    def __init__(self, secret: str, audience: str, algorithm: str = SIGNING_ALGORITHM):
        """
        Derive the signing key

        Args:
            secret: Shared secret value
            audience: Audience the key is bound to
            algorithm: JWS algorithm (only HS256 supported)

        Raises:
            KeyDerivationError: If secret/audience empty or algorithm unsupported
        """
        logger = logging.getLogger("security.key_material")

        if not isinstance(secret, str) or not secret:
            raise KeyDerivationError("Secret must be a non-empty string")
        if not isinstance(audience, str) or not audience:
            raise KeyDerivationError("Audience must be a non-empty string")
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise KeyDerivationError(f"Unsupported algorithm: {algorithm}")

        signer = get_default_algorithms().get(algorithm)
        if signer is None:
            raise KeyDerivationError(f"Algorithm not available: {algorithm}")

        try:
            key = signer.prepare_key(secret)
        except InvalidKeyError as e:
            raise KeyDerivationError(f"Secret rejected for {algorithm}: {e}") from e

        if len(key) < MIN_RECOMMENDED_SECRET_BYTES:
            logger.warning(
                f"Secret for audience '{audience}' is shorter than "
                f"{MIN_RECOMMENDED_SECRET_BYTES} bytes"
            )

        object.__setattr__(self, "_audience", audience)
        object.__setattr__(self, "_algorithm", algorithm)
        object.__setattr__(self, "_key_use", KEY_USE_SIGNATURE)
        object.__setattr__(self, "_signer", signer)
        object.__setattr__(self, "_key", key)

        logger.info(f"Key material derived (audience={audience}, alg={algorithm})")

    def __setattr__(self, name, value):
        raise AttributeError("KeyMaterial is immutable")

    def __delattr__(self, name):
        raise AttributeError("KeyMaterial is immutable")

    def __repr__(self) -> str:
        return (
            f"KeyMaterial(audience={self._audience!r}, alg={self._algorithm!r}, "
            f"use={self._key_use!r}, key='***')"
        )

    @property
    def audience(self) -> str:
        return self._audience

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def key_use(self) -> str:
        return self._key_use

    def sign(self, signing_input: bytes) -> bytes:
        """
        Compute the signature of a JWS signing input

        Args:
            signing_input: ASCII bytes "<b64 header>.<b64 payload>"

        Returns:
            Raw signature bytes

        Raises:
            SigningError: If the input is not bytes or the HMAC fails
        """
        if not isinstance(signing_input, (bytes, bytearray)):
            raise SigningError("Signing input must be bytes")

        try:
            return self._signer.sign(bytes(signing_input), self._key)
        except (TypeError, ValueError) as e:
            raise SigningError(f"{self._algorithm} signing failed: {e}") from e
