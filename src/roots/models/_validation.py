"""Shared validation helpers for frozen dataclass models.

Private module, not part of the public API. Used by ``__post_init__``
methods in sibling model modules to enforce runtime type constraints and
to normalize list inputs into immutable tuples.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def validate_instance(value: Any, expected: type, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an instance of *expected*."""
    if not isinstance(value, expected):
        article = "an" if expected.__name__[0] in "AEIOUaeiou" else "a"
        raise TypeError(f"{name} must be {article} {expected.__name__}, got {type(value).__name__}")


def validate_int(value: Any, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an ``int`` (``bool`` excluded).

    Unlike the timestamp checks of a storage layer, negative values are
    accepted: the protocol places no range restriction on ``created_at``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_mapping(value: Any, name: str) -> None:
    """Raise ``TypeError`` if *value* is not a ``Mapping``."""
    if not isinstance(value, Mapping):
        raise TypeError(f"{name} must be a Mapping, got {type(value).__name__}")


def freeze_str_tuple(value: Any, name: str) -> tuple[str, ...]:
    """Return *value* as a tuple of strings, rejecting any non-``str`` item.

    Accepts lists and tuples. Strings themselves are rejected: iterating a
    ``str`` would silently split it into characters.
    """
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise TypeError(f"{name} must be a list or tuple of str, got {type(value).__name__}")
    for item in value:
        if not isinstance(item, str):
            raise TypeError(f"{name} items must be str, got {type(item).__name__}")
    return tuple(value)


def freeze_int_tuple(value: Any, name: str) -> tuple[int, ...]:
    """Return *value* as a tuple of ints (``bool`` excluded)."""
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"{name} must be a list or tuple of int, got {type(value).__name__}")
    for item in value:
        validate_int(item, f"{name} items")
    return tuple(value)
