"""Pure frozen dataclasses with zero I/O for Nostr events and filters.

The models layer is the foundation of the package. It has **no
dependencies** on any other roots package, only the Python standard
library. Every model uses ``@dataclass(frozen=True, slots=True)`` and
validates Python types in ``__post_init__``, normalizing lists into tuples
so instances are deeply immutable where the protocol allows it.

Attributes:
    Event: The seven-field NIP-01 event with its wire JSON codec.
    Filter: Subscription filter with structured fields, tag predicates, and
        an extensions bag.
    Bound: Tri-state (unset / cleared / value) integer used by the
        ``since``, ``until`` and ``limit`` filter fields.
    EventKind: Well-known event kinds.

Note:
    Models check types, not protocol validity. An
    [Event][roots.models.event.Event] with a malformed pubkey constructs
    fine and is rejected later by
    [validate_event()][roots.nips.nip01.validation.validate_event] with a
    precise error.
"""

from .constants import EVENT_KIND_MAX, RESERVED_FILTER_FIELDS, TAG_MARKER, EventKind
from .event import Event, Tag
from .filter import Bound, BoundState, Filter


__all__ = [
    "EVENT_KIND_MAX",
    "RESERVED_FILTER_FIELDS",
    "TAG_MARKER",
    "Bound",
    "BoundState",
    "Event",
    "EventKind",
    "Filter",
    "Tag",
]
