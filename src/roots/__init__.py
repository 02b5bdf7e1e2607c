r"""roots -- the NIP-01 compliance core of the Nostr protocol.

Canonical event identity, Schnorr signatures binding an event to its
author, structural and cryptographic event validation, and the
subscription filter model with its wire codec and matcher. Storage,
transport, and relay sessions are left to the caller.

Imports flow strictly downward:

```text
            nips          NIP-01 protocol logic
           /    \
        utils   core      hex codec, Schnorr backend, keys / errors, logging, yaml
           \    /
           models         Pure frozen dataclasses (zero I/O)
```

Attributes:
    models: [Event][roots.models.event.Event],
        [Filter][roots.models.filter.Filter] and
        [Bound][roots.models.filter.Bound]. Standard library only.
    core: Exception hierarchy, structured logging, YAML loading.
    utils: Hex codec, the swappable Schnorr backend, key utilities.
    nips: NIP-01 serialization, signing, validation, filter codec and
        matching.

Note:
    Top-level imports (``from roots import Event``) use lazy loading and
    resolve on first access, so ``import roots`` does not load
    ``nostr_sdk`` until a signing or validation name is used.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("nostr-roots")

__all__ = [
    "Bound",
    "Event",
    "EventValidator",
    "Filter",
    "FilterConfig",
    "KeysConfig",
    "Logger",
    "RootsError",
    "compute_event_id",
    "decode_filter",
    "derive_public_key",
    "encode_filter",
    "finalize_event",
    "generate_private_key",
    "is_valid_event",
    "load_filters",
    "matches",
    "matches_any",
    "serialize_event",
    "sign_event_id",
    "validate_event",
    "verify_event_id_signature",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "Bound": ("roots.models", "Bound"),
    "Event": ("roots.models", "Event"),
    "Filter": ("roots.models", "Filter"),
    "Logger": ("roots.core", "Logger"),
    "RootsError": ("roots.core", "RootsError"),
    "KeysConfig": ("roots.utils", "KeysConfig"),
    "derive_public_key": ("roots.utils", "derive_public_key"),
    "generate_private_key": ("roots.utils", "generate_private_key"),
    "EventValidator": ("roots.nips", "EventValidator"),
    "FilterConfig": ("roots.nips", "FilterConfig"),
    "compute_event_id": ("roots.nips", "compute_event_id"),
    "decode_filter": ("roots.nips", "decode_filter"),
    "encode_filter": ("roots.nips", "encode_filter"),
    "finalize_event": ("roots.nips", "finalize_event"),
    "is_valid_event": ("roots.nips", "is_valid_event"),
    "load_filters": ("roots.nips", "load_filters"),
    "matches": ("roots.nips", "matches"),
    "matches_any": ("roots.nips", "matches_any"),
    "serialize_event": ("roots.nips", "serialize_event"),
    "sign_event_id": ("roots.nips", "sign_event_id"),
    "validate_event": ("roots.nips", "validate_event"),
    "verify_event_id_signature": ("roots.nips", "verify_event_id_signature"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'roots' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
