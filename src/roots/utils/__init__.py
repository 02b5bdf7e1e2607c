"""Hex codec, Schnorr capability, and key management.

The utils layer depends on [roots.models][roots.models] and
[roots.core][roots.core] only. It provides the low-level pieces the NIP-01
layer composes: strict hex validation, the swappable Schnorr backend, and
key generation/derivation.

Attributes:
    encoding: Fixed-length lowercase hex patterns and hex/bytes conversion.
    schnorr: The [SchnorrBackend][roots.utils.schnorr.SchnorrBackend]
        protocol and its default ``nostr_sdk`` implementation.
    keys: Private key generation, x-only public key derivation, and
        [KeysConfig][roots.utils.keys.KeysConfig] for loading a key from the
        environment.

Note:
    The utils layer has **zero** imports from ``roots.nips``.
"""

from .encoding import decode_hex, encode_hex, is_hex64, is_hex128, is_hex_prefix
from .keys import KeysConfig, derive_public_key, generate_private_key, load_private_key_from_env
from .schnorr import DEFAULT_BACKEND, NostrSdkBackend, SchnorrBackend


__all__ = [
    "DEFAULT_BACKEND",
    "KeysConfig",
    "NostrSdkBackend",
    "SchnorrBackend",
    "decode_hex",
    "derive_public_key",
    "encode_hex",
    "generate_private_key",
    "is_hex64",
    "is_hex128",
    "is_hex_prefix",
    "load_private_key_from_env",
]
