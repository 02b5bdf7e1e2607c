"""
Immutable NIP-01 subscription filter.

A [Filter][roots.models.filter.Filter] holds seven optional predicate
groups plus an ``extensions`` bag for wire fields this library does not
recognize. On the wire all of them share a single JSON object; the
partitioning rules live in [roots.nips.nip01.codec][roots.nips.nip01.codec]
and the evaluation rules in
[roots.nips.nip01.matching][roots.nips.nip01.matching].

``since``, ``until`` and ``limit`` are tri-state: a field can be absent
from the wire, present as ``null``, or present with a number. Each state is
modelled explicitly by [Bound][roots.models.filter.Bound] so that
``decode(encode(f)) == f`` holds without guessing.

See Also:
    [roots.models.constants.RESERVED_FILTER_FIELDS][roots.models.constants.RESERVED_FILTER_FIELDS]:
        Field names that extensions can never override.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ._validation import freeze_int_tuple, freeze_str_tuple, validate_int, validate_mapping


if TYPE_CHECKING:
    from collections.abc import Mapping


class BoundState(StrEnum):
    """Presence state of a tri-state filter field.

    Attributes:
        UNSET: The field was never sent; omitted from the wire.
        CLEARED: The field was sent as ``null``.
        VALUE: The field carries an integer.
    """

    UNSET = "unset"
    CLEARED = "cleared"
    VALUE = "value"


@dataclass(frozen=True, slots=True)
class Bound:
    """Tri-state integer used for ``since``, ``until`` and ``limit``.

    Use the factory methods rather than the constructor:

    ```python
    Bound.unset()    # absent
    Bound.cleared()  # explicit null
    Bound.of(4000)   # 4000
    ```

    Raises:
        TypeError: If ``value`` is not an int for the ``VALUE`` state.
        ValueError: If ``value`` is given for ``UNSET`` or ``CLEARED``.
    """

    state: BoundState = BoundState.UNSET
    value: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "state", BoundState(self.state))
        if self.state is BoundState.VALUE:
            validate_int(self.value, "value")
        elif self.value is not None:
            raise ValueError(f"a {self.state} bound cannot carry a value")

    @classmethod
    def unset(cls) -> Bound:
        return cls(BoundState.UNSET)

    @classmethod
    def cleared(cls) -> Bound:
        return cls(BoundState.CLEARED)

    @classmethod
    def of(cls, value: int) -> Bound:
        return cls(BoundState.VALUE, value)

    @property
    def is_present(self) -> bool:
        """True when the field appears on the wire (``null`` or a number)."""
        return self.state is not BoundState.UNSET

    def get(self) -> int | None:
        """Return the integer for the ``VALUE`` state, else ``None``."""
        return self.value if self.state is BoundState.VALUE else None


def _coerce_bound(value: Any, name: str) -> Bound:
    if isinstance(value, Bound):
        return value
    validate_int(value, name)
    return Bound.of(value)


@dataclass(frozen=True, slots=True)
class Filter:
    """Subscription filter with explicit presence semantics.

    ``None`` and ``()`` are different values for ``ids``, ``authors`` and
    ``kinds``: the first is omitted when encoding, the second is emitted as
    ``[]``. Both impose no constraint when matching.

    Attributes:
        ids: Event id prefixes.
        authors: Author pubkey prefixes.
        kinds: Exact event kinds.
        since: Inclusive lower bound on ``created_at``.
        until: Inclusive upper bound on ``created_at``.
        limit: Advisory result limit. Never used for matching.
        tags: Tag name (without ``#``) to accepted values. An empty value
            tuple accepts any event.
        extensions: Unrecognized wire fields, keyed by their wire name. Values
            are the *decoded* JSON (``dict``, ``list``, ``str``, ``int``,
            ``float``, ``bool`` or ``None``), not the raw wire text, so
            re-encoding may change number spelling or whitespace.

    Raises:
        TypeError: If a field has the wrong Python type.

    Examples:
        ```python
        f = Filter(kinds=[1], since=4000, tags={"e": ["5c83..."]})
        f.kinds        # (1,)
        f.since        # Bound(state=<BoundState.VALUE: 'value'>, value=4000)
        f.tags["e"]    # ('5c83...',)
        ```

    Note:
        ``tags`` and ``extensions`` are wrapped in ``MappingProxyType`` so
        the mappings themselves cannot be mutated. Extension values are
        stored as given and should be treated as read-only. Filters are
        hashable; the hash covers extension keys only.
    """

    ids: tuple[str, ...] | None = None
    authors: tuple[str, ...] | None = None
    kinds: tuple[int, ...] | None = None
    since: Bound = Bound()
    until: Bound = Bound()
    limit: Bound = Bound()
    tags: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    extensions: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.ids is not None:
            object.__setattr__(self, "ids", freeze_str_tuple(self.ids, "ids"))
        if self.authors is not None:
            object.__setattr__(self, "authors", freeze_str_tuple(self.authors, "authors"))
        if self.kinds is not None:
            object.__setattr__(self, "kinds", freeze_int_tuple(self.kinds, "kinds"))

        for name in ("since", "until", "limit"):
            object.__setattr__(self, name, _coerce_bound(getattr(self, name), name))

        validate_mapping(self.tags, "tags")
        tags: dict[str, tuple[str, ...]] = {}
        for name, values in self.tags.items():
            if not isinstance(name, str):
                raise TypeError(f"tag names must be str, got {type(name).__name__}")
            tags[name] = freeze_str_tuple(values, f"tags[{name!r}]")
        object.__setattr__(self, "tags", MappingProxyType(tags))

        validate_mapping(self.extensions, "extensions")
        for key in self.extensions:
            if not isinstance(key, str):
                raise TypeError(f"extension keys must be str, got {type(key).__name__}")
        object.__setattr__(self, "extensions", MappingProxyType(dict(self.extensions)))

    def __hash__(self) -> int:
        # Extension values may be lists or dicts; only their keys are hashed,
        # which keeps hash() consistent with ==.
        return hash(
            (
                self.ids,
                self.authors,
                self.kinds,
                self.since,
                self.until,
                self.limit,
                frozenset(self.tags.items()),
                frozenset(self.extensions),
            )
        )
