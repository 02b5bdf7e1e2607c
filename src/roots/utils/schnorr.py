"""BIP-340 Schnorr capability over secp256k1.

All curve arithmetic lives behind the narrow
[SchnorrBackend][roots.utils.schnorr.SchnorrBackend] protocol: four
byte-level operations and nothing else. The NIP-01 layer never touches a
curve library directly, so any conformant provider can be substituted by
passing ``backend=`` to the signing and validation functions (the test
suite does exactly that with an in-memory fake).

The default provider, [NostrSdkBackend][roots.utils.schnorr.NostrSdkBackend],
delegates to ``nostr_sdk`` (Rust ``secp256k1`` through FFI).

Note:
    ``nostr_sdk`` exposes Schnorr verification only on its own ``Event``
    type, which checks ``sig`` against the *stored* ``id`` without
    rehashing. [NostrSdkBackend.verify()][roots.utils.schnorr.NostrSdkBackend.verify]
    wraps the message in a placeholder event to reach it; the other event
    fields do not take part in the check. That path reports an off-curve
    key or an out-of-range ``r``/``s`` as a plain verification failure, so
    the BIP-340 parse rules are applied beforehand by
    [check_signature_encoding()][roots.utils.schnorr.check_signature_encoding]
    and [check_x_only_public_key()][roots.utils.schnorr.check_x_only_public_key].
"""

from __future__ import annotations

import json
from typing import Protocol, runtime_checkable

from nostr_sdk import Event as NostrEvent
from nostr_sdk import Keys, NostrSdkError, PublicKey

from roots.core.exceptions import (
    MalformedPrivateKeyError,
    SigningError,
    UnparsablePublicKeyError,
    UnparsableSignatureError,
)


MESSAGE_SIZE = 32
SIGNATURE_SIZE = 64
PUBLIC_KEY_SIZE = 32
PRIVATE_KEY_SIZE = 32

# secp256k1 field prime and group order (BIP-340)
FIELD_PRIME = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def check_signature_encoding(signature: bytes) -> None:
    """Reject a signature that BIP-340 refuses to parse.

    A signature is ``r || s`` with ``r < p`` and ``s < n``.

    Raises:
        UnparsableSignatureError: If the length or either scalar is out of range.
    """
    if len(signature) != SIGNATURE_SIZE:
        raise UnparsableSignatureError(
            f"malformed signature: expected {SIGNATURE_SIZE} bytes, got {len(signature)}"
        )
    if int.from_bytes(signature[:32], "big") >= FIELD_PRIME:
        raise UnparsableSignatureError("malformed signature: r is not a field element")
    if int.from_bytes(signature[32:], "big") >= CURVE_ORDER:
        raise UnparsableSignatureError("malformed signature: s is not below the group order")


def check_x_only_public_key(public_key: bytes) -> None:
    """Reject an x-only public key that does not lift onto secp256k1.

    ``x`` must be a field element and ``x^3 + 7`` must be a square mod p,
    which is the ``lift_x`` precondition of BIP-340.

    Raises:
        UnparsablePublicKeyError: If the length is wrong or no curve point has this x.
    """
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise UnparsablePublicKeyError(
            f"malformed public key: expected {PUBLIC_KEY_SIZE} bytes, got {len(public_key)}"
        )
    x = int.from_bytes(public_key, "big")
    if x >= FIELD_PRIME:
        raise UnparsablePublicKeyError("malformed public key: x is not a field element")
    c = (pow(x, 3, FIELD_PRIME) + 7) % FIELD_PRIME
    y = pow(c, (FIELD_PRIME + 1) // 4, FIELD_PRIME)
    if y * y % FIELD_PRIME != c:
        raise UnparsablePublicKeyError("malformed public key: x is not on the curve")


@runtime_checkable
class SchnorrBackend(Protocol):
    """Byte-level Schnorr operations required by the NIP-01 layer.

    Implementations must be re-entrant and free of side effects visible to
    callers; the library invokes them concurrently without locking.
    """

    def sign(self, message: bytes, private_key: bytes) -> bytes:
        """Return a 64-byte signature over a 32-byte *message*.

        Raises:
            MalformedPrivateKeyError: If *private_key* is not a valid scalar.
            SigningError: If the provider fails to sign.
        """
        ...

    def verify(self, message: bytes, signature: bytes, public_key: bytes) -> bool:
        """Return whether *signature* is valid for *message* under *public_key*.

        Raises:
            UnparsableSignatureError: If *signature* is not a Schnorr signature.
            UnparsablePublicKeyError: If *public_key* is not an x-only point.
        """
        ...

    def derive_public_key(self, private_key: bytes) -> bytes:
        """Return the 32-byte x-only public key for *private_key*."""
        ...

    def generate_private_key(self) -> bytes:
        """Return 32 random bytes forming a valid secp256k1 scalar."""
        ...


class NostrSdkBackend:
    """[SchnorrBackend][roots.utils.schnorr.SchnorrBackend] backed by ``nostr_sdk``."""

    @staticmethod
    def _keys(private_key: bytes) -> Keys:
        if len(private_key) != PRIVATE_KEY_SIZE:
            raise MalformedPrivateKeyError(
                f"private key must be {PRIVATE_KEY_SIZE} bytes, got {len(private_key)}"
            )
        try:
            return Keys.parse(private_key.hex())
        except NostrSdkError as e:
            raise MalformedPrivateKeyError(f"invalid private key: {e}") from e

    def sign(self, message: bytes, private_key: bytes) -> bytes:
        if len(message) != MESSAGE_SIZE:
            raise SigningError(f"message must be {MESSAGE_SIZE} bytes, got {len(message)}")
        keys = self._keys(private_key)
        try:
            return bytes.fromhex(keys.sign_schnorr(message))
        except NostrSdkError as e:
            raise SigningError(f"schnorr signature error: {e}") from e

    def verify(self, message: bytes, signature: bytes, public_key: bytes) -> bool:
        # nostr_sdk accepts off-curve keys and out-of-range scalars and just
        # fails verification, so parse errors are detected here first.
        check_signature_encoding(signature)
        check_x_only_public_key(public_key)
        try:
            author = PublicKey.parse(public_key.hex())
        except NostrSdkError as e:
            raise UnparsablePublicKeyError(f"malformed public key: {e}") from e

        carrier = {
            "id": message.hex(),
            "pubkey": author.to_hex(),
            "created_at": 0,
            "kind": 1,
            "tags": [],
            "content": "",
            "sig": signature.hex(),
        }
        try:
            event = NostrEvent.from_json(json.dumps(carrier))
        except NostrSdkError as e:
            raise UnparsableSignatureError(f"malformed signature: {e}") from e
        return event.verify_signature()

    def derive_public_key(self, private_key: bytes) -> bytes:
        return bytes.fromhex(self._keys(private_key).public_key().to_hex())

    def generate_private_key(self) -> bytes:
        return bytes.fromhex(Keys.generate().secret_key().to_hex())


DEFAULT_BACKEND: SchnorrBackend = NostrSdkBackend()


def resolve_backend(backend: SchnorrBackend | None) -> SchnorrBackend:
    """Return *backend*, or the module default when it is ``None``."""
    return DEFAULT_BACKEND if backend is None else backend
