"""Shared constants for the models layer.

Wire-format names and protocol limits used by the event and filter models
and by the NIP-01 codec and matcher. Placing them here avoids circular
dependencies between the models, utils, and nips layers.

See Also:
    [roots.models.filter][]: Uses [TAG_MARKER][roots.models.constants.TAG_MARKER]
        and [RESERVED_FILTER_FIELDS][roots.models.constants.RESERVED_FILTER_FIELDS]
        to describe the wire layout of a filter.
    [roots.nips.nip01.codec][]: Applies the reserved-name precedence rules.
"""

from __future__ import annotations

from enum import IntEnum


class EventKind(IntEnum):
    """Well-known NIP-01 event kinds.

    The protocol does not restrict ``kind`` to these values; they exist for
    readability in builders, configs, and tests.

    Attributes:
        SET_METADATA: Kind 0 -- user profile metadata.
        TEXT_NOTE: Kind 1 -- short text note.
        RECOMMEND_RELAY: Kind 2 -- legacy relay recommendation (deprecated).
        CONTACTS: Kind 3 -- contact list (NIP-02).
    """

    SET_METADATA = 0
    TEXT_NOTE = 1
    RECOMMEND_RELAY = 2
    CONTACTS = 3


# Leading element of the canonical array ``[0, pubkey, created_at, kind, tags, content]``
CANONICAL_VERSION = 0

# Event ids, public keys and private keys are all 32 bytes
ID_HEX_LENGTH = 64
SIG_HEX_LENGTH = 128

MIN_TAG_LENGTH = 2

EVENT_KIND_MAX = 65_535

EVENT_FIELDS: tuple[str, ...] = ("id", "pubkey", "created_at", "kind", "tags", "content", "sig")

TAG_MARKER = "#"

RESERVED_FILTER_FIELDS: frozenset[str] = frozenset(
    {"ids", "authors", "kinds", "since", "until", "limit"}
)
