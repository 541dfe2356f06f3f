"""
Pointer and reference records derived from events.

Pointers locate events for fetch collaborators: an
[EventPointer][nostrefs.models.pointers.EventPointer] by id, an
[AddressPointer][nostrefs.models.pointers.AddressPointer] by coordinate.
Reference records group the results of NIP-10 thread resolution at two
levels: typed tags ([ThreadTags][nostrefs.models.pointers.ThreadTags]) and
pointers ([EventReferences][nostrefs.models.pointers.EventReferences]).

All records are frozen and carry relays as tuples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._validation import freeze_relays, validate_non_negative_int, validate_str
from .constants import RelayMode


if TYPE_CHECKING:
    from .tags import ATag, ETag


@dataclass(frozen=True, slots=True)
class EventPointer:
    """Locates an event by id, with optional relay hints, author and kind."""

    id: str
    relays: tuple[str, ...] = ()
    author: str | None = None
    kind: int | None = None

    def __post_init__(self) -> None:
        validate_str(self.id, "id")
        object.__setattr__(self, "relays", freeze_relays(self.relays))


@dataclass(frozen=True, slots=True)
class AddressPointer:
    """Locates a replaceable event by ``kind:pubkey:identifier``."""

    kind: int
    pubkey: str
    identifier: str
    relays: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        validate_non_negative_int(self.kind, "kind")
        validate_str(self.pubkey, "pubkey")
        validate_str(self.identifier, "identifier")
        object.__setattr__(self, "relays", freeze_relays(self.relays))

    @property
    def coordinate(self) -> str:
        return f"{self.kind}:{self.pubkey}:{self.identifier}"


@dataclass(frozen=True, slots=True)
class CustomAddressPointer:
    """Address pointer whose identifier may be absent (``kind:pubkey``)."""

    kind: int
    pubkey: str
    identifier: str | None = None
    relays: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        validate_non_negative_int(self.kind, "kind")
        validate_str(self.pubkey, "pubkey")
        if self.identifier is not None:
            validate_str(self.identifier, "identifier")
        object.__setattr__(self, "relays", freeze_relays(self.relays))

    @property
    def coordinate(self) -> str:
        if self.identifier:
            return f"{self.kind}:{self.pubkey}:{self.identifier}"
        return f"{self.kind}:{self.pubkey}"


@dataclass(frozen=True, slots=True)
class RelayConfig:
    """A relay URL and the mode it is used in."""

    url: str
    mode: RelayMode = RelayMode.ALL


@dataclass(frozen=True, slots=True)
class TagReference:
    """One thread position resolved to tags; at least one field is set."""

    e: ETag | None = None
    a: ATag | None = None


@dataclass(frozen=True, slots=True)
class ThreadTags:
    """Root and reply positions of an event, as typed tags."""

    root: TagReference | None = None
    reply: TagReference | None = None


@dataclass(frozen=True, slots=True)
class PointerReference:
    """One thread position resolved to pointers; at least one field is set."""

    e: EventPointer | None = None
    a: AddressPointer | None = None


@dataclass(frozen=True, slots=True)
class EventReferences:
    """Root and reply positions of an event, as pointers.

    Consumed by thread views and by reply composition, which copies the
    root and reply pointers onto the new event's tags.
    """

    root: PointerReference | None = None
    reply: PointerReference | None = None
