"""
Event validation pipeline (NIP-01).

An event is valid when it passes three gates, evaluated in this order and
stopping at the first failure:

1. **Structure** -- pubkey is 64 lowercase hex, id is 64 lowercase hex,
   sig is 128 lowercase hex, and every tag has at least two elements. The
   checks run in exactly that order so the reported error is deterministic.
2. **Identity** -- the id is non-empty and equals the SHA-256 of the
   canonical serialization.
3. **Signature** -- the sig is a valid Schnorr signature of the id bytes
   under the pubkey.

Every gate is a pure function that raises a subclass of
[EventValidationError][roots.core.exceptions.EventValidationError]; nothing
is retried because every failure is a property of the event itself.

Examples:
    ```python
    validate_event(event)            # raises on the first failing gate
    is_valid_event(event)            # True / False

    validator = EventValidator()
    validator.is_valid(event)        # also logs the rejection reason
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roots.core.exceptions import (
    EmptyIdError,
    EventValidationError,
    IdMismatchError,
    InvalidSignatureError,
    MalformedIdError,
    MalformedPublicKeyError,
    MalformedSignatureError,
    MalformedTagError,
)
from roots.core.logger import Logger
from roots.models.constants import MIN_TAG_LENGTH
from roots.utils.encoding import is_hex64, is_hex128
from roots.utils.schnorr import resolve_backend

from .canonical import compute_event_id
from .signing import verify_event_id_signature


if TYPE_CHECKING:
    from roots.models.event import Event
    from roots.utils.schnorr import SchnorrBackend


def validate_structure(event: Event) -> None:
    """Check field shapes and tag arity.

    Raises:
        MalformedPublicKeyError: pubkey is not 64 lowercase hex characters.
        MalformedIdError: id is not 64 lowercase hex characters.
        MalformedSignatureError: sig is not 128 lowercase hex characters.
        MalformedTagError: some tag has fewer than two elements.
    """
    if not is_hex64(event.pubkey):
        raise MalformedPublicKeyError
    if not is_hex64(event.id):
        raise MalformedIdError
    if not is_hex128(event.sig):
        raise MalformedSignatureError
    for tag in event.tags:
        if len(tag) < MIN_TAG_LENGTH:
            raise MalformedTagError


def validate_id(event: Event) -> None:
    """Check that ``event.id`` matches the recomputed content hash.

    Raises:
        EmptyIdError: The event carries no id.
        IdentityComputationError: The event cannot be serialized.
        IdMismatchError: The stored and computed ids differ.
    """
    if not event.id:
        raise EmptyIdError
    computed = compute_event_id(event)
    if computed != event.id:
        raise IdMismatchError(event.id, computed)


def validate_signature(event: Event, *, backend: SchnorrBackend | None = None) -> None:
    """Check that ``event.sig`` signs ``event.id`` under ``event.pubkey``.

    Raises:
        UndecodableHexError: id, sig or pubkey is not hex.
        UnparsableSignatureError: sig is not a Schnorr signature.
        UnparsablePublicKeyError: pubkey is not an x-only curve point.
        InvalidSignatureError: sig parses but does not verify.
    """
    if not verify_event_id_signature(event.id, event.sig, event.pubkey, backend=backend):
        raise InvalidSignatureError


def validate_event(event: Event, *, backend: SchnorrBackend | None = None) -> None:
    """Run the structure, identity and signature gates in order.

    Raises:
        EventValidationError: The first failing gate's error.
    """
    validate_structure(event)
    validate_id(event)
    validate_signature(event, backend=backend)


def is_valid_event(event: Event, *, backend: SchnorrBackend | None = None) -> bool:
    """Return whether *event* passes [validate_event()][roots.nips.nip01.validation.validate_event]."""
    try:
        validate_event(event, backend=backend)
    except EventValidationError:
        return False
    return True


class EventValidator:
    """Validation entry point bound to a Schnorr backend and a logger.

    Holds no per-event state, so one instance can be shared across threads.

    Args:
        backend: Schnorr provider. Defaults to ``nostr_sdk``.
        logger: Structured logger for rejection reports. Defaults to
            ``Logger("roots.validator")``.

    Examples:
        ```python
        validator = EventValidator()
        accepted = [e for e in events if validator.is_valid(e)]
        ```
    """

    def __init__(
        self,
        *,
        backend: SchnorrBackend | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._backend = resolve_backend(backend)
        self._logger = logger or Logger("roots.validator")

    @property
    def backend(self) -> SchnorrBackend:
        return self._backend

    def validate(self, event: Event) -> None:
        """Raise the first failing gate's error, like [validate_event()][roots.nips.nip01.validation.validate_event]."""
        validate_event(event, backend=self._backend)

    def is_valid(self, event: Event) -> bool:
        """Return whether *event* is valid, logging the reason when it is not."""
        try:
            validate_event(event, backend=self._backend)
        except EventValidationError as e:
            if self._logger.is_enabled_for(logging.DEBUG):
                self._logger.debug(
                    "event_rejected",
                    event_id=event.id or "<empty>",
                    error=type(e).__name__,
                    reason=str(e),
                )
            return False
        return True
