"""Nostr protocol (NIP) implementations.

Only NIP-01 lives here: the rules every client and relay must agree on
for event identity, signatures, and subscription filters. Anything that
deviates from them breaks wire compatibility with other implementations.

See Also:
    [roots.nips.nip01][roots.nips.nip01]: The NIP-01 compliance core.
"""

from .nip01 import (
    EventValidator,
    FilterConfig,
    compute_event_id,
    decode_filter,
    encode_filter,
    finalize_event,
    is_valid_event,
    load_filters,
    matches,
    matches_any,
    serialize_event,
    sign_event_id,
    validate_event,
    verify_event_id_signature,
)


__all__ = [
    "EventValidator",
    "FilterConfig",
    "compute_event_id",
    "decode_filter",
    "encode_filter",
    "finalize_event",
    "is_valid_event",
    "load_filters",
    "matches",
    "matches_any",
    "serialize_event",
    "sign_event_id",
    "validate_event",
    "verify_event_id_signature",
]
