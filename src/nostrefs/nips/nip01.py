"""
NIP-01 event identity, coordinates and ordering.

Replaceable events are identified by their coordinate rather than their id:
``kind:pubkey`` for replaceable kinds and ``kind:pubkey:identifier`` for
addressable kinds, where the identifier comes from the event's ``d`` tag.
This module derives coordinates and unique ids, converts between coordinate
strings and pointer records, and projects ``e``/``a`` tags to pointers.

Coordinate parsing is configured explicitly with
[CoordinateOptions][nostrefs.nips.nip01.CoordinateOptions]:

| ``require_identifier`` | ``silent`` | identifier missing     | kind/pubkey missing    |
|------------------------|------------|------------------------|------------------------|
| False                  | True       | ``CustomAddressPointer`` | ``None``             |
| False                  | False      | ``CustomAddressPointer`` | ``MissingComponentError`` |
| True                   | True       | ``None``               | ``None``               |
| True                   | False      | ``MissingComponentError`` | ``MissingComponentError`` |

See Also:
    [nostrefs.nips.nip10][]: Uses the tag projections to build
        [EventReferences][nostrefs.models.pointers.EventReferences].
"""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING

from nostrefs.core.exceptions import (
    MissingComponentError,
    MissingIdentifierError,
    NotReplaceableError,
)
from nostrefs.models.constants import REPLACEABLE_KIND_RANGES, REPLACEABLE_LEGACY_KINDS, TagType
from nostrefs.models.pointers import AddressPointer, CustomAddressPointer, EventPointer
from nostrefs.models.tags import ATag, ETag, find_identifier, parse_tag


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from nostrefs.models.event import DraftEvent, Event


# =============================================================================
# Replaceability
# =============================================================================


def is_replaceable(kind: int) -> bool:
    """Return True if events of *kind* are replaceable or addressable.

    Replaceable kinds are 0, 3 and 41, plus ``[10000, 20000)`` and
    ``[30000, 40000)``.
    """
    if kind in REPLACEABLE_LEGACY_KINDS:
        return True
    return any(start <= kind < end for start, end in REPLACEABLE_KIND_RANGES)


# =============================================================================
# Coordinates
# =============================================================================


@dataclass(frozen=True, slots=True)
class CoordinateOptions:
    """Configuration for [parse_coordinate()][nostrefs.nips.nip01.parse_coordinate].

    Attributes:
        require_identifier: Treat a missing identifier as a missing component.
        silent: Return ``None`` instead of raising on a missing component.
    """

    require_identifier: bool = False
    silent: bool = True


#: Accepts ``kind:pubkey`` and returns ``None`` on malformed input.
LENIENT = CoordinateOptions()
#: Requires ``kind:pubkey:identifier`` and raises on malformed input.
STRICT = CoordinateOptions(require_identifier=True, silent=False)


def _parse_kind(segment: str | None) -> int | None:
    if segment and segment.isascii() and segment.isdigit():
        return int(segment)
    return None


def parse_coordinate(
    text: str, options: CoordinateOptions = LENIENT
) -> AddressPointer | CustomAddressPointer | None:
    """Parse a ``kind:pubkey[:identifier]`` coordinate string.

    Segments after the third are ignored. An empty identifier counts as
    missing.

    Args:
        text: The coordinate string, usually the second value of an ``a`` tag.
        options: Parsing configuration, see the table in the module docstring.

    Returns:
        [AddressPointer][nostrefs.models.pointers.AddressPointer] when an
        identifier is present, [CustomAddressPointer][nostrefs.models.pointers.CustomAddressPointer]
        when it is absent and not required, or ``None`` when a required
        component is missing in silent mode.

    Raises:
        MissingComponentError: If a required component is missing and
            ``options.silent`` is False.

    Examples:
        ```python
        parse_coordinate("30023:ab12:my-article")
        # AddressPointer(kind=30023, pubkey='ab12', identifier='my-article', relays=())
        parse_coordinate("30023:ab12", CoordinateOptions(require_identifier=True))
        # None
        ```
    """
    parts = text.split(":")
    kind = _parse_kind(parts[0])
    pubkey = parts[1] if len(parts) > 1 else ""
    identifier = parts[2] if len(parts) > 2 else ""  # noqa: PLR2004

    missing: str | None = None
    if kind is None:
        missing = "kind"
    elif not pubkey:
        missing = "pubkey"
    elif options.require_identifier and not identifier:
        missing = "identifier"

    if missing is not None:
        if options.silent:
            return None
        raise MissingComponentError(missing)

    assert kind is not None  # noqa: S101
    if identifier:
        return AddressPointer(kind=kind, pubkey=pubkey, identifier=identifier)
    return CustomAddressPointer(kind=kind, pubkey=pubkey)


def get_event_coordinate(event: Event) -> str:
    """Return the event's coordinate, including the ``d`` identifier when present."""
    identifier = find_identifier(event.tags)
    if identifier:
        return f"{event.kind}:{event.pubkey}:{identifier}"
    return f"{event.kind}:{event.pubkey}"


def get_event_address_pointer(event: Event) -> AddressPointer:
    """Return the address pointer of a replaceable event.

    Raises:
        NotReplaceableError: If the event kind is not replaceable.
        MissingIdentifierError: If the event has no non-empty ``d`` tag.
    """
    if not is_replaceable(event.kind):
        raise NotReplaceableError(event.kind)
    identifier = find_identifier(event.tags)
    if not identifier:
        raise MissingIdentifierError
    return AddressPointer(kind=event.kind, pubkey=event.pubkey, identifier=identifier)


def pointer_to_a_tag(pointer: AddressPointer | CustomAddressPointer) -> list[str]:
    """Render an ``a`` tag for *pointer*, with its first relay as hint if any."""
    tag = [TagType.ADDRESS.value, pointer.coordinate]
    if pointer.relays:
        tag.append(pointer.relays[0])
    return tag


# =============================================================================
# Tag projections
# =============================================================================


def e_tag_to_event_pointer(tag: ETag | Sequence[str]) -> EventPointer:
    """Project an ``e`` tag to an [EventPointer][nostrefs.models.pointers.EventPointer]."""
    if not isinstance(tag, ETag):
        parsed = parse_tag(tag, -1)
        if not isinstance(parsed, ETag):
            raise ValueError(f"not an e tag: {list(tag)!r}")
        tag = parsed
    return EventPointer(id=tag.event_id, relays=(tag.relay,) if tag.relay else ())


def a_tag_to_address_pointer(tag: ATag | Sequence[str]) -> AddressPointer:
    """Project an ``a`` tag to an [AddressPointer][nostrefs.models.pointers.AddressPointer].

    The coordinate is parsed with [STRICT][nostrefs.nips.nip01.STRICT]
    options, so an identifier is required.

    Raises:
        MissingComponentError: If the coordinate lacks a kind, pubkey or identifier.
    """
    if not isinstance(tag, ATag):
        parsed = parse_tag(tag, -1)
        if not isinstance(parsed, ATag):
            raise ValueError(f"not an a tag: {list(tag)!r}")
        tag = parsed
    pointer = parse_coordinate(tag.coordinate, STRICT)
    assert isinstance(pointer, AddressPointer)  # noqa: S101  # STRICT never returns None
    if tag.relay:
        return AddressPointer(
            kind=pointer.kind,
            pubkey=pointer.pubkey,
            identifier=pointer.identifier,
            relays=(tag.relay,),
        )
    return pointer


# =============================================================================
# Identity and ordering
# =============================================================================


def get_event_uid(event: Event) -> str:
    """Return a key that is stable across updates of a replaceable event.

    The coordinate for replaceable kinds, the event id otherwise.
    """
    if is_replaceable(event.kind):
        return get_event_coordinate(event)
    return event.id


def sort_by_date(a: Event | DraftEvent, b: Event | DraftEvent) -> int:
    """Comparator ordering events newest first, for ``functools.cmp_to_key``."""
    return b.created_at - a.created_at


def sort_events_by_date(events: Iterable[Event]) -> list[Event]:
    """Return a new list of *events*, newest first; ties keep input order."""
    return sorted(events, key=attrgetter("created_at"), reverse=True)


def truncated_id(value: str, keep: int = 6) -> str:
    """Shorten an id for display as ``<first keep>...<last keep>``.

    Values too short to benefit are returned unchanged.
    """
    if len(value) < keep * 2 + 3:
        return value
    return f"{value[:keep]}...{value[-keep:]}"
