"""Pure frozen dataclasses with zero I/O for Nostr events, tags and pointers.

The models layer is the foundation of the package. It has **no dependencies**
on any other nostrefs package -- only the Python standard library. Every model
uses ``@dataclass(frozen=True, slots=True)`` for immutability, and all
validation happens in ``__post_init__`` so invalid instances never escape the
constructor.

Attributes:
    Event: Signed Nostr event with structural validation and conversion from
        ``nostr_sdk.Event``.
    DraftEvent: Unsigned event template accepted by the interpretation
        functions.
    ETag, ATag, PTag, RTag, DTag, UnknownTag: Typed tag variants produced by
        [parse_tag][nostrefs.models.tags.parse_tag], each remembering its slot
        in the originating tag list.
    EventPointer, AddressPointer, CustomAddressPointer: Locators consumed by
        fetch collaborators.
    ThreadTags, EventReferences: NIP-10 root/reply results at tag and
        pointer level.
    RelayConfig: Relay URL with [RelayMode][nostrefs.models.constants.RelayMode].

Note:
    All models use ``object.__setattr__`` in ``__post_init__`` to store
    normalized tuples on frozen dataclasses.
"""

from .constants import (
    DEFAULT_REPOST_KINDS,
    EVENT_KIND_MAX,
    EventKind,
    Marker,
    RelayMode,
    TagType,
)
from .event import DraftEvent, Event
from .pointers import (
    AddressPointer,
    CustomAddressPointer,
    EventPointer,
    EventReferences,
    PointerReference,
    RelayConfig,
    TagReference,
    ThreadTags,
)
from .tags import (
    ATag,
    DTag,
    ETag,
    PTag,
    RTag,
    Tag,
    UnknownTag,
    find_identifier,
    is_a_tag,
    is_d_tag,
    is_e_tag,
    is_p_tag,
    is_r_tag,
    parse_tag,
    parse_tags,
)


__all__ = [
    "DEFAULT_REPOST_KINDS",
    "EVENT_KIND_MAX",
    "ATag",
    "AddressPointer",
    "CustomAddressPointer",
    "DTag",
    "DraftEvent",
    "ETag",
    "Event",
    "EventKind",
    "EventPointer",
    "EventReferences",
    "Marker",
    "PTag",
    "PointerReference",
    "RTag",
    "RelayConfig",
    "RelayMode",
    "Tag",
    "TagReference",
    "TagType",
    "ThreadTags",
    "UnknownTag",
    "find_identifier",
    "is_a_tag",
    "is_d_tag",
    "is_e_tag",
    "is_p_tag",
    "is_r_tag",
    "parse_tag",
    "parse_tags",
]
