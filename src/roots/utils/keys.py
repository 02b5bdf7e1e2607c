"""Nostr private/public key utilities.

Key generation and x-only public key derivation on top of the
[SchnorrBackend][roots.utils.schnorr.SchnorrBackend] capability, plus a
Pydantic model that loads a signing key from an environment variable.
Keys are handled as 64-character lowercase hex strings, the form NIP-01
puts on the wire.

Warning:
    Private keys must **never** be stored in configuration files, source
    code, or logged. Load them from the environment or a secret manager.
    [KeysConfig][roots.utils.keys.KeysConfig] keeps the key in a
    ``pydantic.SecretStr`` so it is masked in ``repr`` and dumps.

Examples:
    ```python
    sk = generate_private_key()
    pk = derive_public_key(sk)   # 64 lowercase hex, x-only

    os.environ["PRIVATE_KEY"] = sk  # pragma: allowlist secret
    config = KeysConfig()
    config.public_key == pk      # True
    ```
"""

from __future__ import annotations

import os
from typing import Any

from nostr_sdk import Keys, NostrSdkError
from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator

from roots.core.exceptions import ConfigurationError, MalformedPrivateKeyError

from .encoding import decode_hex, encode_hex, is_hex64
from .schnorr import SchnorrBackend, resolve_backend


ENV_PRIVATE_KEY = "PRIVATE_KEY"  # pragma: allowlist secret  # Default env var name


def generate_private_key(*, backend: SchnorrBackend | None = None) -> str:
    """Generate a random private key as 64 lowercase hex characters."""
    return encode_hex(resolve_backend(backend).generate_private_key())


def derive_public_key(private_key: str, *, backend: SchnorrBackend | None = None) -> str:
    """Derive the x-only public key for *private_key*.

    The result is the 32-byte x coordinate of the public point, i.e. the
    33-byte compressed encoding with its leading parity byte removed.

    Args:
        private_key: 64 lowercase hex characters.
        backend: Schnorr provider. Defaults to ``nostr_sdk``.

    Returns:
        The public key as 64 lowercase hex characters.

    Raises:
        MalformedPrivateKeyError: If *private_key* is not 64 lowercase hex
            characters or is not a valid secp256k1 scalar.
    """
    if not is_hex64(private_key):
        raise MalformedPrivateKeyError
    secret = decode_hex(private_key, "private_key")
    return encode_hex(resolve_backend(backend).derive_public_key(secret))


def parse_private_key(value: str) -> str:
    """Normalize a private key given as hex or ``nsec1`` bech32 to lowercase hex.

    Raises:
        MalformedPrivateKeyError: If *value* is not a valid secret key.
    """
    try:
        return Keys.parse(value.strip()).secret_key().to_hex()
    except NostrSdkError as e:
        raise MalformedPrivateKeyError(f"invalid private key: {e}") from e


def load_private_key_from_env(env_var: str = ENV_PRIVATE_KEY) -> str:
    """Load a private key from an environment variable.

    Args:
        env_var: Name of the environment variable holding the key (hex or
            ``nsec1``).

    Returns:
        The private key as 64 lowercase hex characters.

    Raises:
        ConfigurationError: If the variable is not set or is empty.
        MalformedPrivateKeyError: If the value is not a valid secret key.
    """
    value = os.getenv(env_var)
    if not value:
        raise ConfigurationError(
            f"{env_var} environment variable is required. Generate one with: openssl rand -hex 32"
        )
    return parse_private_key(value)


class KeysConfig(BaseModel):
    """Pydantic model holding the signing key.

    When ``private_key`` is not given explicitly it is loaded from the
    environment variable named by ``keys_env``. Explicit values may be hex
    or ``nsec1`` and are normalized to lowercase hex.

    Attributes:
        keys_env: Environment variable name for the private key.
        private_key: The private key as lowercase hex, masked in output.

    Raises:
        ConfigurationError: If the environment variable is not set.
        MalformedPrivateKeyError: If the key is malformed.
    """

    keys_env: str = Field(
        default=ENV_PRIVATE_KEY,
        min_length=1,
        description="Environment variable name for private key",
    )
    private_key: SecretStr = Field(description="Private key loaded from keys_env (required)")

    @model_validator(mode="before")
    @classmethod
    def _load_private_key_from_env(cls, data: Any) -> Any:
        """Auto-populate ``private_key`` from the environment variable."""
        if isinstance(data, dict) and "private_key" not in data:
            env_var = data.get("keys_env", ENV_PRIVATE_KEY)
            data = {**data, "private_key": load_private_key_from_env(env_var)}
        return data

    @field_validator("private_key", mode="before")
    @classmethod
    def _normalize_private_key(cls, v: Any) -> Any:
        if isinstance(v, SecretStr):
            v = v.get_secret_value()
        if isinstance(v, str):
            return parse_private_key(v)
        return v

    @property
    def public_key(self) -> str:
        """Derived x-only public key as lowercase hex."""
        return derive_public_key(self.private_key.get_secret_value())
