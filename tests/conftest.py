"""
Pytest configuration and shared fixtures for roots tests.

Provides:
- A deterministic in-memory Schnorr backend for gate-ordering tests
- Known-good key material and a signed event taken from real traffic
- Logging configuration
"""

from __future__ import annotations

import hashlib
import logging

import pytest

from roots.core.exceptions import (
    MalformedPrivateKeyError,
    UnparsablePublicKeyError,
    UnparsableSignatureError,
)
from roots.models import Event


# ============================================================================
# Key material
# ============================================================================

TEST_PRIVATE_KEY = "f43a0435f69529f310bbd1d6263d2fbf0977f54bfe2310cc37ae5904b83bb167"
TEST_PUBLIC_KEY = "cfa87f35acbde29ba1ab3ee42de527b2cad33ac487e80cf2d6405ea0042c8fef"
TEST_CREATED_AT = 1760740551

HELLO_WORLD_ID = "c7a702e6158744ca03508bbb4c90f9dbb0d6e88fefbfaa511d5ab24b4e3c48ad"
HELLO_WORLD_SIG = (
    "83b71e15649c9e9da362c175f988c36404cabf357a976d869102a74451cfb8af"
    "486f6088b5631033b4927bd46cad7a0d90d7f624aefc0ac260364aa65c36071a"
)


# ============================================================================
# Fake Schnorr backend
# ============================================================================


class FakeSchnorrBackend:
    """Deterministic stand-in for a real curve library.

    The "public key" is a hash of the private key and the "signature" is a
    hash of the public key and message, so signing and verifying agree
    without any elliptic-curve math. Inputs listed in ``unparsable_sigs``
    or ``unparsable_pubkeys`` raise the parse errors a real provider would.
    """

    def __init__(self) -> None:
        self.unparsable_sigs: set[bytes] = set()
        self.unparsable_pubkeys: set[bytes] = set()
        self.calls: list[str] = []
        self._counter = 0

    def derive_public_key(self, private_key: bytes) -> bytes:
        self.calls.append("derive_public_key")
        if len(private_key) != 32 or private_key == bytes(32):
            raise MalformedPrivateKeyError
        return hashlib.sha256(b"pub" + private_key).digest()

    def sign(self, message: bytes, private_key: bytes) -> bytes:
        self.calls.append("sign")
        public_key = self.derive_public_key(private_key)
        return hashlib.sha512(public_key + message).digest()

    def verify(self, message: bytes, signature: bytes, public_key: bytes) -> bool:
        self.calls.append("verify")
        if len(signature) != 64 or signature in self.unparsable_sigs:
            raise UnparsableSignatureError
        if len(public_key) != 32 or public_key in self.unparsable_pubkeys:
            raise UnparsablePublicKeyError
        return signature == hashlib.sha512(public_key + message).digest()

    def generate_private_key(self) -> bytes:
        self.calls.append("generate_private_key")
        self._counter += 1
        return hashlib.sha256(self._counter.to_bytes(8, "big")).digest()


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def fake_backend() -> FakeSchnorrBackend:
    """A fresh deterministic Schnorr backend."""
    return FakeSchnorrBackend()


@pytest.fixture
def private_key() -> str:
    """Private key whose x-only public key is ``public_key``."""
    return TEST_PRIVATE_KEY


@pytest.fixture
def public_key() -> str:
    """x-only public key of ``private_key``."""
    return TEST_PUBLIC_KEY


@pytest.fixture
def unsigned_event() -> Event:
    """The "hello world" text note before hashing and signing."""
    return Event(
        pubkey=TEST_PUBLIC_KEY,
        created_at=TEST_CREATED_AT,
        kind=1,
        tags=[],
        content="hello world",
    )


@pytest.fixture
def signed_event() -> Event:
    """A real event with a valid BIP-340 signature."""
    return Event(
        id=HELLO_WORLD_ID,
        pubkey=TEST_PUBLIC_KEY,
        created_at=TEST_CREATED_AT,
        kind=1,
        tags=[],
        content="hello world",
        sig=HELLO_WORLD_SIG,
    )
