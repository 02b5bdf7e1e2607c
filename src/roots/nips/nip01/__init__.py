"""NIP-01: event identity, signatures, validation, and subscription filters.

Attributes:
    canonical: Canonical serialization and SHA-256 event ids.
    signing: Schnorr signing and verification over event ids, and
        [finalize_event()][roots.nips.nip01.signing.finalize_event].
    validation: The three-gate (structure, identity, signature) event
        validator.
    codec: Filter wire codec with reserved-name precedence.
    matching: Filter evaluation against events.
    configs: Pydantic filter configuration loaded from YAML.
"""

from .canonical import compute_event_id, serialize_event
from .codec import decode_filter, encode_filter, filter_from_dict, filter_to_dict
from .configs import FilterConfig, load_filters
from .matching import build_tag_index, matches, matches_any
from .signing import finalize_event, sign_event_id, verify_event_id_signature
from .validation import (
    EventValidator,
    is_valid_event,
    validate_event,
    validate_id,
    validate_signature,
    validate_structure,
)


__all__ = [
    "EventValidator",
    "FilterConfig",
    "build_tag_index",
    "compute_event_id",
    "decode_filter",
    "encode_filter",
    "filter_from_dict",
    "filter_to_dict",
    "finalize_event",
    "is_valid_event",
    "load_filters",
    "matches",
    "matches_any",
    "serialize_event",
    "sign_event_id",
    "validate_event",
    "validate_id",
    "validate_signature",
    "validate_structure",
    "verify_event_id_signature",
]
