"""
Schnorr signatures over event ids (NIP-01).

The signed message is the raw 32-byte digest behind ``event.id``, never its
hex text. All curve work is delegated to a
[SchnorrBackend][roots.utils.schnorr.SchnorrBackend]; every function
accepts ``backend=`` to substitute one.

See Also:
    [roots.nips.nip01.validation.validate_signature][roots.nips.nip01.validation.validate_signature]:
        The validator's signature gate, built on
        [verify_event_id_signature()][roots.nips.nip01.signing.verify_event_id_signature].
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from roots.core.exceptions import MalformedIdError, MalformedPrivateKeyError
from roots.utils.encoding import decode_hex, encode_hex, is_hex64
from roots.utils.keys import derive_public_key
from roots.utils.schnorr import resolve_backend

from .canonical import compute_event_id


if TYPE_CHECKING:
    from roots.models.event import Event
    from roots.utils.schnorr import SchnorrBackend


def sign_event_id(
    event_id: str,
    private_key: str,
    *,
    backend: SchnorrBackend | None = None,
) -> str:
    """Sign an event id with *private_key*.

    Args:
        event_id: 64 lowercase hex characters.
        private_key: 64 lowercase hex characters.
        backend: Schnorr provider. Defaults to ``nostr_sdk``.

    Returns:
        The signature as 128 lowercase hex characters.

    Raises:
        MalformedIdError: If *event_id* is not 64 lowercase hex characters.
        MalformedPrivateKeyError: If *private_key* is malformed.
        SigningError: If the backend fails to sign.
    """
    if not is_hex64(private_key):
        raise MalformedPrivateKeyError
    if not is_hex64(event_id):
        raise MalformedIdError
    signature = resolve_backend(backend).sign(
        decode_hex(event_id, "id"), decode_hex(private_key, "private_key")
    )
    return encode_hex(signature)


def verify_event_id_signature(
    event_id: str,
    sig: str,
    pubkey: str,
    *,
    backend: SchnorrBackend | None = None,
) -> bool:
    """Return whether *sig* is a valid signature of *event_id* by *pubkey*.

    A well-formed but wrong signature returns ``False``; inputs that cannot
    be decoded or parsed raise instead.

    Raises:
        UndecodableHexError: If a field is not hex (checked id, sig, pubkey).
        UnparsableSignatureError: If *sig* is not a Schnorr signature.
        UnparsablePublicKeyError: If *pubkey* is not an x-only point.
    """
    message = decode_hex(event_id, "id")
    signature = decode_hex(sig, "sig")
    public_key = decode_hex(pubkey, "pubkey")
    return resolve_backend(backend).verify(message, signature, public_key)


def finalize_event(
    event: Event,
    private_key: str,
    *,
    backend: SchnorrBackend | None = None,
) -> Event:
    """Return a signed copy of *event*.

    Sets ``pubkey`` to the key's x-only public key, recomputes ``id`` and
    signs it. Any ``pubkey``, ``id`` or ``sig`` already on *event* is
    replaced; the original instance is left untouched.

    Raises:
        MalformedPrivateKeyError: If *private_key* is malformed.
        IdentityComputationError: If the event cannot be serialized.
        SigningError: If the backend fails to sign.
    """
    pubkey = derive_public_key(private_key, backend=backend)
    unsigned = dataclasses.replace(event, pubkey=pubkey, id="", sig="")
    event_id = compute_event_id(unsigned)
    sig = sign_event_id(event_id, private_key, backend=backend)
    return dataclasses.replace(unsigned, id=event_id, sig=sig)
