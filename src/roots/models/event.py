"""
Immutable NIP-01 event with its wire JSON codec.

The [Event][roots.models.event.Event] model carries the seven protocol
fields exactly as they appear on the wire. Construction checks Python
types only; whether an event is *valid* (hex shapes, tag arity, identity,
signature) is decided by
[roots.nips.nip01.validation][roots.nips.nip01.validation], so malformed
events can still be represented and rejected with a precise error.

See Also:
    [roots.nips.nip01.canonical][]: Canonical serialization and id
        computation over an [Event][roots.models.event.Event].
    [roots.nips.nip01.signing][]: Produces signed copies of an event via
        ``dataclasses.replace``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ._validation import freeze_str_tuple, validate_instance, validate_int, validate_mapping
from .constants import EVENT_FIELDS


if TYPE_CHECKING:
    from collections.abc import Mapping


Tag = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Event:
    """Immutable Nostr event.

    ``tags`` may be passed as any list/tuple of lists/tuples of strings and
    is normalized to a tuple of tuples on construction. ``id`` and ``sig``
    default to empty strings until the event is hashed and signed.

    Attributes:
        id: Lowercase hex SHA-256 of the canonical serialization.
        pubkey: Author x-only public key as lowercase hex.
        created_at: Unix timestamp in seconds. Any int is accepted.
        kind: Event kind. Any int is accepted.
        tags: Ordered tags; each tag is an ordered tuple of strings.
        content: Arbitrary text.
        sig: Schnorr signature over ``id`` as lowercase hex.

    Raises:
        TypeError: If a field has the wrong Python type.

    Examples:
        ```python
        event = Event(
            pubkey="cfa8...8fef",
            created_at=1760740551,
            kind=1,
            tags=[["e", "5c83...", "wss://relay.example.com"]],
            content="hello world",
        )
        event.tags          # (("e", "5c83...", "wss://relay.example.com"),)
        Event.from_json(event.to_json()) == event  # True
        ```
    """

    id: str = ""
    pubkey: str = ""
    created_at: int = 0
    kind: int = 0
    tags: tuple[Tag, ...] = ()
    content: str = ""
    sig: str = ""

    def __post_init__(self) -> None:
        validate_instance(self.id, str, "id")
        validate_instance(self.pubkey, str, "pubkey")
        validate_int(self.created_at, "created_at")
        validate_int(self.kind, "kind")
        validate_instance(self.content, str, "content")
        validate_instance(self.sig, str, "sig")

        if isinstance(self.tags, str) or not isinstance(self.tags, (list, tuple)):
            raise TypeError(f"tags must be a list or tuple, got {type(self.tags).__name__}")
        tags = tuple(freeze_str_tuple(tag, f"tags[{i}]") for i, tag in enumerate(self.tags))
        object.__setattr__(self, "tags", tags)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation as a plain JSON-compatible dict."""
        return {
            "id": self.id,
            "pubkey": self.pubkey,
            "created_at": self.created_at,
            "kind": self.kind,
            "tags": [list(tag) for tag in self.tags],
            "content": self.content,
            "sig": self.sig,
        }

    def to_json(self) -> str:
        """Encode as compact wire JSON with non-ASCII characters kept raw."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Event:
        """Build an event from a decoded wire object.

        All seven fields must be present; key order is irrelevant and
        unknown keys are ignored.

        Raises:
            TypeError: If *data* is not a mapping or a field has the wrong type.
            ValueError: If one of the seven fields is missing.
        """
        validate_mapping(data, "event")
        missing = [name for name in EVENT_FIELDS if name not in data]
        if missing:
            raise ValueError(f"event is missing required fields: {', '.join(missing)}")
        return cls(**{name: data[name] for name in EVENT_FIELDS})

    @classmethod
    def from_json(cls, data: str | bytes) -> Event:
        """Decode wire JSON into an event.

        Raises:
            ValueError: If *data* is not valid JSON or a field is missing.
            TypeError: If the JSON is not an object or a field has the wrong type.
        """
        return cls.from_dict(json.loads(data))
