"""
Filter wire codec (NIP-01).

A filter travels as one flat JSON object whose keys belong to three
families:

* the six structured fields ``ids``, ``authors``, ``kinds``, ``since``,
  ``until``, ``limit``;
* tag predicates, whose keys start with ``#`` (``"#e": [...]``);
* anything else, kept as an opaque extension.

Decoding partitions the object in three explicit passes over a working
copy: pop the structured fields, pop the ``#`` keys, bag the remainder.
Encoding is the inverse merge with a fixed precedence: structured and tag
fields always win, and an extension whose key is a reserved name or starts
with ``#`` is **dropped silently**. That drop is deliberate and one-way;
``decode(encode(f))`` loses such entries and keeps everything else.
Extensions hold decoded JSON values, so the re-encoded text of an
extension is equivalent to, but not necessarily identical with, the text
that was received.

Presence is preserved exactly:

| Python value                  | wire            |
|-------------------------------|-----------------|
| ``ids=None``                  | key omitted     |
| ``ids=()``                    | ``"ids": []``   |
| ``since=Bound.unset()``       | key omitted     |
| ``since=Bound.cleared()``     | ``"since": null`` |
| ``since=Bound.of(4000)``      | ``"since": 4000`` |

Examples:
    ```python
    encode_filter(Filter(ids=["abc"], extensions={"ids": ["fake"]}))
    # '{"ids":["abc"]}'

    decode_filter('{"kinds":[1],"#e":["5c83"],"search":"nostr"}')
    # Filter(kinds=(1,), tags={'e': ('5c83',)}, extensions={'search': 'nostr'}, ...)
    ```
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from typing import Any

from roots.core.exceptions import FilterDecodeError, FilterEncodeError
from roots.models.constants import RESERVED_FILTER_FIELDS, TAG_MARKER
from roots.models.filter import Bound, Filter


logger = logging.getLogger(__name__)


# =============================================================================
# Encoding
# =============================================================================


def filter_to_dict(filter_: Filter) -> dict[str, Any]:
    """Merge a filter's fields into a single wire object.

    Structured fields come first, then tag predicates, then extensions.
    Extension keys that collide with a structured name or start with ``#``
    are skipped.
    """
    output: dict[str, Any] = {}

    if filter_.ids is not None:
        output["ids"] = list(filter_.ids)
    if filter_.authors is not None:
        output["authors"] = list(filter_.authors)
    if filter_.kinds is not None:
        output["kinds"] = list(filter_.kinds)
    for name in ("since", "until", "limit"):
        bound: Bound = getattr(filter_, name)
        if bound.is_present:
            output[name] = bound.get()

    for name, values in filter_.tags.items():
        output[TAG_MARKER + name] = list(values)

    for key, value in filter_.extensions.items():
        if key in RESERVED_FILTER_FIELDS or key.startswith(TAG_MARKER):
            logger.debug("extension dropped: %s collides with a reserved filter key", key)
            continue
        output[key] = value

    return output


def encode_filter(filter_: Filter) -> str:
    """Encode a filter as compact wire JSON.

    ``NaN`` and the infinities have no JSON spelling and are refused rather
    than written as the non-standard ``NaN``/``Infinity`` tokens.

    Raises:
        FilterEncodeError: If an extension value is not JSON-serializable,
            is a non-finite float, or is nested too deeply to serialize.
    """
    try:
        return json.dumps(
            filter_to_dict(filter_),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise FilterEncodeError(f"filter could not be encoded: {e}") from e


# =============================================================================
# Decoding
# =============================================================================


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _decode_str_list(value: Any, key: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise FilterDecodeError(f"{key!r} must be an array of strings")
    return tuple(value)


def _decode_int_list(value: Any, key: str) -> tuple[int, ...]:
    if not isinstance(value, list) or not all(_is_int(v) for v in value):
        raise FilterDecodeError(f"{key!r} must be an array of integers")
    return tuple(value)


def _decode_bound(value: Any, key: str) -> Bound:
    if value is None:
        return Bound.cleared()
    if not _is_int(value):
        raise FilterDecodeError(f"{key!r} must be an integer or null")
    return Bound.of(value)


def _extract_structured(raw: dict[str, Any]) -> dict[str, Any]:
    """First pass: pop the six reserved fields out of *raw*.

    ``null`` for a list field means the field is absent; ``null`` for a
    bound means the field was cleared.
    """
    fields: dict[str, Any] = {}
    for key in ("ids", "authors"):
        if key in raw:
            value = raw.pop(key)
            if value is not None:
                fields[key] = _decode_str_list(value, key)
    if "kinds" in raw:
        value = raw.pop("kinds")
        if value is not None:
            fields["kinds"] = _decode_int_list(value, "kinds")
    for key in ("since", "until", "limit"):
        if key in raw:
            fields[key] = _decode_bound(raw.pop(key), key)
    return fields


def _extract_tags(raw: dict[str, Any]) -> dict[str, tuple[str, ...]]:
    """Second pass: pop every ``#``-prefixed key out of *raw*.

    A ``null`` tag value decodes to an empty value set.
    """
    tags: dict[str, tuple[str, ...]] = {}
    for key in [k for k in raw if k.startswith(TAG_MARKER)]:
        value = raw.pop(key)
        tags[key[len(TAG_MARKER) :]] = () if value is None else _decode_str_list(value, key)
    return tags


def filter_from_dict(data: Mapping[str, Any]) -> Filter:
    """Partition a decoded wire object into a [Filter][roots.models.filter.Filter].

    Raises:
        FilterDecodeError: If *data* is not an object or a structured or tag
            field has the wrong JSON type. No partial filter is returned.
    """
    if not isinstance(data, Mapping):
        raise FilterDecodeError(f"filter must be a JSON object, got {type(data).__name__}")
    if not all(isinstance(key, str) for key in data):
        raise FilterDecodeError("filter keys must be strings")

    raw = dict(data)
    fields = _extract_structured(raw)
    tags = _extract_tags(raw)
    return Filter(**fields, tags=tags, extensions=raw)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not a JSON number")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"number {token} is out of range")
    return value


def decode_filter(data: str | bytes) -> Filter:
    """Decode wire JSON into a [Filter][roots.models.filter.Filter].

    Only RFC 8259 JSON is accepted: the ``NaN``/``Infinity`` tokens and
    numbers that overflow a float are rejected.

    Raises:
        FilterDecodeError: If *data* is not valid JSON, is nested too deeply
            to parse, or is not a well-formed filter object.
    """
    try:
        parsed = json.loads(
            data,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except (ValueError, TypeError, RecursionError) as e:
        raise FilterDecodeError(f"malformed filter JSON: {e}") from e
    return filter_from_dict(parsed)
