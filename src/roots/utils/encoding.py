"""Fixed-length lowercase hexadecimal validation and conversion.

Event ids, public keys and private keys are 64 lowercase hex characters;
signatures are 128. Uppercase digits are *not* accepted by the patterns:
the protocol fixes the textual form, and two spellings of the same bytes
would otherwise hash to different event ids.

Examples:
    ```python
    is_hex64("c7a702e6...48ad")   # True
    decode_hex("c7a7", "id")      # b"\\xc7\\xa7"
    encode_hex(b"\\xc7\\xa7")        # "c7a7"
    ```
"""

from __future__ import annotations

import binascii
import re
from typing import Any

from roots.core.exceptions import UndecodableHexError
from roots.models.constants import ID_HEX_LENGTH, SIG_HEX_LENGTH


HEX64_PATTERN = re.compile(rf"[a-f0-9]{{{ID_HEX_LENGTH}}}")
HEX128_PATTERN = re.compile(rf"[a-f0-9]{{{SIG_HEX_LENGTH}}}")

_HEX_PREFIX_PATTERN = re.compile(rf"[a-f0-9]{{0,{ID_HEX_LENGTH}}}")


def is_hex64(value: Any) -> bool:
    """Return True if *value* is exactly 64 lowercase hex characters."""
    return isinstance(value, str) and HEX64_PATTERN.fullmatch(value) is not None


def is_hex128(value: Any) -> bool:
    """Return True if *value* is exactly 128 lowercase hex characters."""
    return isinstance(value, str) and HEX128_PATTERN.fullmatch(value) is not None


def is_hex_prefix(value: Any) -> bool:
    """Return True if *value* is a lowercase hex string of at most 64 characters."""
    return isinstance(value, str) and _HEX_PREFIX_PATTERN.fullmatch(value) is not None


def decode_hex(value: str, field: str) -> bytes:
    """Decode a hex string to bytes.

    Stricter than ``bytes.fromhex``: embedded whitespace is rejected.

    Args:
        value: Hex text to decode.
        field: Event field name reported on failure (``"id"``, ``"sig"``,
            ``"pubkey"``).

    Raises:
        UndecodableHexError: If *value* is not valid hex.
    """
    try:
        return binascii.unhexlify(value)
    except (ValueError, TypeError) as e:
        raise UndecodableHexError(field) from e


def encode_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex."""
    return data.hex()
