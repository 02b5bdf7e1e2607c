"""roots exception hierarchy.

Every failure this library reports is a local, synchronous property of the
input data, so nothing here is retryable. Each concrete class carries a
default message in the protocol's own wording; callers may pass a more
specific one.

Exception hierarchy:

```text
RootsError (base -- never raised directly)
├── ConfigurationError          -- bad YAML, invalid config values, missing env vars
├── KeyMaterialError
│   └── MalformedPrivateKeyError
├── SigningError                -- the Schnorr backend failed to sign
└── ProtocolError               -- NIP-01 compliance failures
    ├── EventValidationError
    │   ├── MalformedPublicKeyError     structure gate
    │   ├── MalformedIdError            structure gate
    │   ├── MalformedSignatureError     structure gate
    │   ├── MalformedTagError           structure gate
    │   ├── EmptyIdError                identity gate
    │   ├── IdentityComputationError    identity gate
    │   ├── IdMismatchError             identity gate
    │   ├── UndecodableHexError         signature gate
    │   ├── UnparsableSignatureError    signature gate
    │   ├── UnparsablePublicKeyError    signature gate
    │   └── InvalidSignatureError       signature gate
    └── FilterError
        ├── FilterDecodeError
        └── FilterEncodeError
```

See Also:
    [roots.nips.nip01.validation][]: Raises the
        [EventValidationError][roots.core.exceptions.EventValidationError]
        family in fixed gate order.
    [roots.nips.nip01.codec][]: Raises
        [FilterDecodeError][roots.core.exceptions.FilterDecodeError] and
        [FilterEncodeError][roots.core.exceptions.FilterEncodeError].
"""

from __future__ import annotations

from typing import ClassVar


class RootsError(Exception):
    """Base exception for all roots errors.

    Never raised directly -- always use a specific subclass.
    """

    default_message: ClassVar[str] = "roots error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(RootsError):
    """Invalid or missing configuration (YAML, env vars)."""

    default_message = "invalid configuration"


# ---------------------------------------------------------------------------
# Keys and signing
# ---------------------------------------------------------------------------


class KeyMaterialError(RootsError):
    """Base for errors about private key material."""

    default_message = "invalid key material"


class MalformedPrivateKeyError(KeyMaterialError):
    """Private key is not 64 lowercase hex characters or not a valid scalar."""

    default_message = "private key must be 64 lowercase hex characters"


class SigningError(RootsError):
    """The Schnorr backend could not produce a signature."""

    default_message = "schnorr signature error"


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


class ProtocolError(RootsError):
    """NIP-01 compliance failure."""

    default_message = "protocol error"


class EventValidationError(ProtocolError):
    """Base for every reason an event can fail validation."""

    default_message = "event is invalid"


class MalformedPublicKeyError(EventValidationError):
    default_message = "public key must be 64 lowercase hex characters"


class MalformedIdError(EventValidationError):
    default_message = "event id must be 64 hex characters"


class MalformedSignatureError(EventValidationError):
    default_message = "event signature must be 128 hex characters"


class MalformedTagError(EventValidationError):
    default_message = "tags must contain at least two elements"


class EmptyIdError(EventValidationError):
    default_message = "event id is empty"


class IdentityComputationError(EventValidationError):
    """The canonical form could not be encoded, so no id can be computed."""

    default_message = "failed to compute event id"


class IdMismatchError(EventValidationError):
    """The stored id differs from the id recomputed from the event fields.

    Attributes:
        stored: The ``id`` carried by the event.
        computed: The id recomputed from the canonical serialization.
    """

    def __init__(self, stored: str, computed: str) -> None:
        self.stored = stored
        self.computed = computed
        super().__init__(f"event id {stored!r} does not match computed id {computed!r}")


class UndecodableHexError(EventValidationError):
    """A hex field could not be decoded to bytes.

    Attributes:
        field: Which event field failed: ``"id"``, ``"sig"`` or ``"pubkey"``.
    """

    _LABELS: ClassVar[dict[str, str]] = {
        "id": "invalid event id hex",
        "sig": "invalid event signature hex",
        "pubkey": "invalid public key hex",
    }

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or self._LABELS.get(field, f"invalid {field} hex"))


class UnparsableSignatureError(EventValidationError):
    default_message = "malformed signature"


class UnparsablePublicKeyError(EventValidationError):
    default_message = "malformed public key"


class InvalidSignatureError(EventValidationError):
    """The signature parsed but does not verify against the id and pubkey."""

    default_message = "event signature is invalid"


class FilterError(ProtocolError):
    """Base for filter codec failures."""

    default_message = "filter error"


class FilterDecodeError(FilterError):
    """Wire filter JSON is malformed. No partial filter is produced."""

    default_message = "malformed filter"


class FilterEncodeError(FilterError):
    """A filter could not be encoded (e.g. a non-JSON extension value)."""

    default_message = "filter could not be encoded"
