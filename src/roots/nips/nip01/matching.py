"""
Filter matching (NIP-01).

[matches()][roots.nips.nip01.matching.matches] decides whether an event
satisfies a filter. Every populated predicate group must hold (AND); the
groups are independent, so evaluation short-circuits on the first failure
without the order affecting the result.

| group    | satisfied when                                                   |
|----------|------------------------------------------------------------------|
| ids      | absent/empty, or ``event.id`` starts with one of the prefixes    |
| authors  | absent/empty, or ``event.pubkey`` starts with one of the prefixes|
| kinds    | absent/empty, or ``event.kind`` is listed                        |
| time     | ``since <= created_at <= until`` for each bound that is set      |
| tags     | for each tag name with a non-empty value set, the event has a    |
|          | tag of that name whose second element is one of the values       |

``limit`` is never consulted; it is for whoever pages the results.

Note:
    A tag name mapped to an **empty** value set imposes no constraint:
    ``{"#e": []}`` matches every event, with or without ``e`` tags. This is
    the established protocol behavior and is kept on purpose, even though a
    naive reading might expect it to match nothing. The exemption applies to
    that tag name only; other tag names in the same filter still apply.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING

from roots.models.constants import MIN_TAG_LENGTH


if TYPE_CHECKING:
    from roots.models.event import Event, Tag
    from roots.models.filter import Filter


def build_tag_index(tags: Iterable[Tag]) -> dict[str, set[str]]:
    """Map each tag name to the set of its second elements.

    Tags with fewer than two elements are skipped.
    """
    index: dict[str, set[str]] = {}
    for tag in tags:
        if len(tag) < MIN_TAG_LENGTH:
            continue
        index.setdefault(tag[0], set()).add(tag[1])
    return index


def _has_prefix(candidate: str, prefixes: tuple[str, ...] | None) -> bool:
    if not prefixes:
        return True
    return candidate.startswith(prefixes)


def _match_ids(filter_: Filter, event: Event) -> bool:
    return _has_prefix(event.id, filter_.ids)


def _match_authors(filter_: Filter, event: Event) -> bool:
    return _has_prefix(event.pubkey, filter_.authors)


def _match_kinds(filter_: Filter, event: Event) -> bool:
    return not filter_.kinds or event.kind in filter_.kinds


def _match_time_range(filter_: Filter, event: Event) -> bool:
    since = filter_.since.get()
    if since is not None and event.created_at < since:
        return False
    until = filter_.until.get()
    return until is None or event.created_at <= until


def _match_tags(filter_: Filter, event: Event) -> bool:
    constrained: Mapping[str, tuple[str, ...]] = {
        name: values for name, values in filter_.tags.items() if values
    }
    if not constrained:
        return True
    index = build_tag_index(event.tags)
    return all(
        not index.get(name, set()).isdisjoint(values) for name, values in constrained.items()
    )


_PREDICATES: tuple[Callable[[Filter, Event], bool], ...] = (
    _match_ids,
    _match_authors,
    _match_kinds,
    _match_time_range,
    _match_tags,
)


def matches(filter_: Filter, event: Event) -> bool:
    """Return whether *event* satisfies every populated predicate of *filter_*."""
    return all(predicate(filter_, event) for predicate in _PREDICATES)


def matches_any(filters: Iterable[Filter], event: Event) -> bool:
    """Return whether *event* satisfies at least one of *filters*.

    A subscription's filter list is OR-combined; an empty list matches
    nothing.
    """
    return any(matches(f, event) for f in filters)
