"""
Unit Tests - Client credential issuance

Module: tests.test_credentials
Date: 2026-10-19
Version: 0.1.0

CHANGELOG:
[2026-10-19 v0.1.0] Initial tests
  - UUID v4 layout (version/variant bits, 8-4-4-4-12)
  - Credential id / time / composite plaintext layout
  - Uniqueness over 10,000 samples
  - Salted bcrypt secrets
  - Environment failures (randomness, clock)
"""

import base64
import hashlib
import re
import unittest
from unittest.mock import patch

import bcrypt

from auth_server_jwt.core.exceptions import (
    ClockError,
    ConfigError,
    InvalidArgumentError,
    KeyDerivationError,
    RandomSourceError,
)
from auth_server_jwt.security.credentials import (
    ClientCredential,
    CredentialGenerator,
    new_uuid4,
)
from auth_server_jwt.security.password_hasher import BcryptPasswordHasher
from auth_server_jwt.security.sources import SecureRandomSource, SystemClock

AUDIENCE = "api.example.com"
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


class FixedRandom:
    """Returns the same byte repeated"""

    def __init__(self, byte: int):
        self.byte = byte

    def token_bytes(self, size: int) -> bytes:
        return bytes([self.byte]) * size


class FailingRandom:
    def token_bytes(self, size: int) -> bytes:
        raise RandomSourceError("entropy pool closed")


class FixedClock:
    def __init__(self, now: float):
        self._now = now

    def now(self) -> float:
        return self._now


class FailingClock:
    def now(self) -> float:
        raise ClockError("clock unavailable")


class RecordingHasher:
    """Cheap stand-in for bcrypt that remembers plaintexts"""

    def __init__(self):
        self.plaintexts = []

    def hash(self, plaintext: str) -> bytes:
        self.plaintexts.append(plaintext)
        return hashlib.sha256(plaintext.encode("utf-8")).hexdigest().encode("ascii")


class TestUUIDv4(unittest.TestCase):
    """Test suite for new_uuid4"""

    def test_format_and_bits(self):
        """Test version nibble, variant bits and layout"""
        for _ in range(1000):
            value = new_uuid4()
            self.assertRegex(value, UUID_PATTERN)
            hex_digits = value.replace("-", "")
            self.assertEqual(hex_digits[12], "4")
            self.assertIn(hex_digits[16], "89ab")

    def test_all_ones_input(self):
        """Test bits are forced on an all-0xff input"""
        self.assertEqual(
            new_uuid4(FixedRandom(0xFF)),
            "ffffffff-ffff-4fff-bfff-ffffffffffff",
        )

    def test_all_zeros_input(self):
        """Test bits are forced on an all-zero input"""
        self.assertEqual(
            new_uuid4(FixedRandom(0x00)),
            "00000000-0000-4000-8000-000000000000",
        )

    def test_random_failure(self):
        """Test random source failure propagates"""
        with self.assertRaises(RandomSourceError):
            new_uuid4(FailingRandom())


class TestCredentialGenerator(unittest.TestCase):
    """Test suite for CredentialGenerator"""

    def setUp(self):
        """Setup before each test"""
        self.hasher = RecordingHasher()
        self.generator = CredentialGenerator(
            AUDIENCE,
            random_source=FixedRandom(0xAB),
            password_hasher=self.hasher,
            clock=FixedClock(1700000000.25),
        )

    def test_credential_layout(self):
        """Test credential fields with deterministic sources"""
        credential = self.generator.generate()

        self.assertIsInstance(credential, ClientCredential)
        self.assertEqual(credential.credential_id, "1700000000.25." + "ab" * 10)
        self.assertEqual(credential.credential_time, 1700000000)
        self.assertEqual(credential.client_aud, AUDIENCE)
        self.assertEqual(credential.client_id, "abababab-abab-4bab-abab-abababababab")

    def test_composite_plaintext(self):
        """Test the hashed plaintext binds aud, client id, time and credential id"""
        credential = self.generator.generate()

        expected = (
            f"{AUDIENCE}#{credential.client_id}#{credential.credential_time}"
            f"%{credential.credential_id}"
        )
        self.assertEqual(self.hasher.plaintexts, [expected])

    def test_secret_is_base64_of_hash(self):
        """Test client_secret is the base64-encoded hasher output"""
        credential = self.generator.generate()
        decoded = base64.b64decode(credential.client_secret)
        self.assertEqual(
            decoded,
            hashlib.sha256(self.hasher.plaintexts[0].encode("utf-8")).hexdigest().encode("ascii"),
        )

    def test_to_dict_keys(self):
        """Test dictionary form keeps the five fields in order"""
        data = self.generator.generate().to_dict()
        self.assertEqual(
            list(data),
            ["credential_id", "credential_time", "client_aud", "client_id", "client_secret"],
        )

    def test_repr_hides_secret(self):
        """Test the secret never appears in repr"""
        credential = self.generator.generate()
        self.assertNotIn(credential.client_secret, repr(credential))

    def test_credential_time_is_unix_timestamp(self):
        """Test the reference timezone does not shift the Unix timestamp"""
        utc_generator = CredentialGenerator(
            AUDIENCE,
            password_hasher=RecordingHasher(),
            clock=FixedClock(1700000000.9),
            timezone_name="UTC",
        )
        self.assertEqual(utc_generator.generate().credential_time, 1700000000)
        self.assertEqual(self.generator.generate().credential_time, 1700000000)

    def test_credential_id_uses_real_sources(self):
        """Test credential id format with system sources"""
        generator = CredentialGenerator(AUDIENCE, password_hasher=RecordingHasher())
        credential = generator.generate()

        seconds, fraction, suffix = credential.credential_id.rsplit(".", 2)
        self.assertTrue(seconds.isdigit())
        self.assertTrue(fraction.isdigit())
        self.assertRegex(suffix, r"^[0-9a-f]{20}$")
        self.assertRegex(credential.client_id, UUID_PATTERN)

    def test_uniqueness(self):
        """Test 10,000 credentials share no credential_id or client_id"""
        generator = CredentialGenerator(AUDIENCE, password_hasher=RecordingHasher())
        credentials = [generator.generate() for _ in range(10000)]

        self.assertEqual(len({c.credential_id for c in credentials}), 10000)
        self.assertEqual(len({c.client_id for c in credentials}), 10000)

    def test_random_failure(self):
        """Test RandomSourceError surfaces"""
        generator = CredentialGenerator(
            AUDIENCE, random_source=FailingRandom(), password_hasher=RecordingHasher()
        )
        with self.assertRaises(RandomSourceError):
            generator.generate()

    def test_clock_failure(self):
        """Test ClockError surfaces"""
        generator = CredentialGenerator(
            AUDIENCE, password_hasher=RecordingHasher(), clock=FailingClock()
        )
        with self.assertRaises(ClockError):
            generator.generate()

    def test_unconvertible_clock_reading(self):
        """Test an out-of-range clock reading becomes ClockError"""
        generator = CredentialGenerator(
            AUDIENCE, password_hasher=RecordingHasher(), clock=FixedClock(1e20)
        )
        with self.assertRaises(ClockError):
            generator.generate()

    def test_empty_audience_rejected(self):
        """Test empty audience rejected"""
        with self.assertRaises(KeyDerivationError):
            CredentialGenerator("")

    def test_unknown_timezone_rejected(self):
        """Test unknown timezone rejected"""
        with self.assertRaises(ConfigError):
            CredentialGenerator(AUDIENCE, timezone_name="Mars/Olympus_Mons")


class TestBcryptSecrets(unittest.TestCase):
    """Test suite for bcrypt-backed secrets"""

    def setUp(self):
        """Setup before each test"""
        self.hasher = BcryptPasswordHasher(rounds=4)

    def test_secret_is_bcrypt_hash(self):
        """Test the decoded secret is a bcrypt hash of the pre-hashed plaintext"""
        generator = CredentialGenerator(AUDIENCE, password_hasher=self.hasher)
        credential = generator.generate()

        hashed = base64.b64decode(credential.client_secret)
        self.assertTrue(hashed.startswith(b"$2b$04$"))

        plaintext = (
            f"{AUDIENCE}#{credential.client_id}#{credential.credential_time}"
            f"%{credential.credential_id}"
        )
        digest = base64.b64encode(hashlib.sha256(plaintext.encode("utf-8")).digest())
        self.assertTrue(bcrypt.checkpw(digest, hashed))

    def test_same_plaintext_hashes_differently(self):
        """Test salted hashing"""
        self.assertNotEqual(self.hasher.hash("same"), self.hasher.hash("same"))

    def test_secrets_differ_between_calls(self):
        """Test two credentials from identical deterministic sources still differ"""
        generator = CredentialGenerator(
            AUDIENCE,
            random_source=FixedRandom(0x11),
            password_hasher=self.hasher,
            clock=FixedClock(1700000000.0),
        )
        first = generator.generate()
        second = generator.generate()

        self.assertEqual(first.client_id, second.client_id)
        self.assertNotEqual(first.client_secret, second.client_secret)

    def test_long_plaintext_accepted(self):
        """Test plaintexts beyond 72 bytes are hashed without error"""
        self.assertTrue(self.hasher.hash("x" * 500).startswith(b"$2b$04$"))

    def test_invalid_rounds(self):
        """Test cost factor bounds"""
        with self.assertRaises(InvalidArgumentError):
            BcryptPasswordHasher(rounds=3)
        with self.assertRaises(InvalidArgumentError):
            BcryptPasswordHasher(rounds=32)


class TestSources(unittest.TestCase):
    """Test suite for system sources"""

    def test_random_length(self):
        """Test requested length honoured"""
        self.assertEqual(len(SecureRandomSource().token_bytes(10)), 10)

    def test_clock_reads_float(self):
        """Test clock returns a positive float"""
        self.assertGreater(SystemClock().now(), 0)

    def test_random_os_error(self):
        """Test OS entropy failure becomes RandomSourceError"""
        with patch(
            "auth_server_jwt.security.sources.secrets.token_bytes",
            side_effect=OSError("getrandom failed"),
        ):
            with self.assertRaises(RandomSourceError):
                SecureRandomSource().token_bytes(10)

    def test_random_not_implemented(self):
        """Test missing entropy source becomes RandomSourceError"""
        with patch(
            "auth_server_jwt.security.sources.secrets.token_bytes",
            side_effect=NotImplementedError("no urandom"),
        ):
            with self.assertRaises(RandomSourceError):
                SecureRandomSource().token_bytes(10)

    def test_random_short_read(self):
        """Test fewer bytes than requested becomes RandomSourceError"""
        with patch(
            "auth_server_jwt.security.sources.secrets.token_bytes",
            return_value=b"\x00" * 4,
        ):
            with self.assertRaises(RandomSourceError):
                SecureRandomSource().token_bytes(10)

    def test_clock_os_error(self):
        """Test unreadable clock becomes ClockError"""
        with patch(
            "auth_server_jwt.security.sources.time.time",
            side_effect=OSError("clock_gettime failed"),
        ):
            with self.assertRaises(ClockError):
                SystemClock().now()

    def test_clock_overflow(self):
        """Test clock overflow becomes ClockError"""
        with patch(
            "auth_server_jwt.security.sources.time.time",
            side_effect=OverflowError("timestamp out of range"),
        ):
            with self.assertRaises(ClockError):
                SystemClock().now()

    def test_generator_surfaces_os_failure(self):
        """Test OS entropy failure reaches generate() as RandomSourceError"""
        generator = CredentialGenerator(AUDIENCE, password_hasher=RecordingHasher())
        with patch(
            "auth_server_jwt.security.sources.secrets.token_bytes",
            side_effect=OSError("getrandom failed"),
        ):
            with self.assertRaises(RandomSourceError):
                generator.generate()


if __name__ == "__main__":
    unittest.main(verbosity=2)
