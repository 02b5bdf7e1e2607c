"""
Canonical serialization and content-addressed event ids (NIP-01).

An event id is the SHA-256 of one exact byte sequence: the JSON array
``[0, pubkey, created_at, kind, tags, content]`` with no whitespace, UTF-8
encoded, and non-ASCII characters written raw. Only ``"``, ``\\`` and
control characters are escaped. Any other spelling of the same logical
array (pretty-printed, ``\\uXXXX`` escapes, reordered) hashes differently
and breaks interoperability, so the encoding is pinned at the byte level.

Examples:
    ```python
    event = Event(pubkey="cfa8...8fef", created_at=1760740551, kind=1, content="hello world")
    serialize_event(event)
    # b'[0,"cfa8...8fef",1760740551,1,[],"hello world"]'
    compute_event_id(event)
    # 'c7a702e6158744ca03508bbb4c90f9dbb0d6e88fefbfaa511d5ab24b4e3c48ad'
    ```
"""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING

from roots.core.exceptions import IdentityComputationError
from roots.models.constants import CANONICAL_VERSION


if TYPE_CHECKING:
    from roots.models.event import Event


def serialize_event(event: Event) -> bytes:
    """Return the canonical bytes of *event* used for id computation.

    ``id`` and ``sig`` do not take part in the serialization.

    Raises:
        IdentityComputationError: If the content or a tag cannot be encoded
            as UTF-8 (e.g. it holds a lone surrogate).
    """
    canonical = [
        CANONICAL_VERSION,
        event.pubkey,
        event.created_at,
        event.kind,
        [list(tag) for tag in event.tags],
        event.content,
    ]
    try:
        text = json.dumps(canonical, ensure_ascii=False, separators=(",", ":"))
        return text.encode("utf-8")
    except (UnicodeEncodeError, ValueError, TypeError) as e:
        raise IdentityComputationError(f"failed to compute event id: {e}") from e


def compute_event_id(event: Event) -> str:
    """Return the lowercase hex SHA-256 of the canonical serialization.

    Raises:
        IdentityComputationError: If the event cannot be serialized.
    """
    return hashlib.sha256(serialize_event(event)).hexdigest()
