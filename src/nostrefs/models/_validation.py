"""Shared validation helpers for frozen dataclass models.

Private module, not part of the public API. Used exclusively by
``__post_init__`` methods in sibling model modules to enforce runtime
type constraints and to normalize tag sequences into immutable tuples.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def validate_instance(value: Any, expected: type, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an instance of *expected*."""
    if not isinstance(value, expected):
        article = "an" if expected.__name__[0] in "AEIOUaeiou" else "a"
        raise TypeError(f"{name} must be {article} {expected.__name__}, got {type(value).__name__}")


def validate_non_negative_int(value: Any, name: str) -> None:
    """Raise if *value* is not a non-negative ``int`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


def validate_str(value: Any, name: str) -> None:
    """Raise ``TypeError`` if *value* is not a ``str``."""
    validate_instance(value, str, name)


def freeze_tags(tags: Any, name: str = "tags") -> tuple[tuple[str, ...], ...]:
    """Validate a tag list and return it as a tuple of string tuples.

    Each tag must be a non-empty sequence of strings. Strings themselves are
    rejected as tags since they are sequences of characters.

    Raises:
        TypeError: If *tags* or one of its tags is not a sequence, or a
            tag value is not a ``str``.
        ValueError: If a tag is empty.
    """
    if isinstance(tags, str | bytes) or not isinstance(tags, Sequence):
        raise TypeError(f"{name} must be a sequence, got {type(tags).__name__}")

    frozen: list[tuple[str, ...]] = []
    for i, tag in enumerate(tags):
        if isinstance(tag, str | bytes) or not isinstance(tag, Sequence):
            raise TypeError(f"{name}[{i}] must be a sequence, got {type(tag).__name__}")
        if not tag:
            raise ValueError(f"{name}[{i}] must not be empty")
        for value in tag:
            validate_str(value, f"{name}[{i}] value")
        frozen.append(tuple(tag))
    return tuple(frozen)


def freeze_relays(relays: Any, name: str = "relays") -> tuple[str, ...]:
    """Validate a relay URL list and return it as a tuple."""
    if isinstance(relays, str | bytes) or not isinstance(relays, Sequence):
        raise TypeError(f"{name} must be a sequence, got {type(relays).__name__}")
    for relay in relays:
        validate_str(relay, f"{name} value")
    return tuple(relays)
