"""Shared constants for the models layer.

Defines the enumerations and kind ranges used across the model and NIP
modules. Placing them here keeps ``nostrefs.nips`` free of circular imports
back into the models layer.

See Also:
    [nostrefs.models.tags][]: Uses [TagType][nostrefs.models.constants.TagType]
        and [Marker][nostrefs.models.constants.Marker] to classify raw tags.
    [nostrefs.nips.nip01][]: Uses the replaceable kind ranges for
        [is_replaceable()][nostrefs.nips.nip01.is_replaceable].
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class EventKind(IntEnum):
    """Well-known Nostr event kinds referenced by the interpretation logic.

    Attributes:
        SET_METADATA: Kind 0 -- user profile metadata (NIP-01, replaceable).
        TEXT_NOTE: Kind 1 -- short text note (NIP-01).
        CONTACTS: Kind 3 -- contact list (NIP-02, replaceable).
        REPOST: Kind 6 -- repost of a text note (NIP-18).
        GENERIC_REPOST: Kind 16 -- repost of any other kind (NIP-18).
        CHANNEL_METADATA: Kind 41 -- channel metadata (NIP-28, replaceable).
        RELAY_LIST: Kind 10002 -- relay list metadata (NIP-65).
        LONG_FORM: Kind 30023 -- long-form article (NIP-23, addressable).
        COMMUNITY_DEFINITION: Kind 34550 -- community definition (NIP-72).
    """

    SET_METADATA = 0
    TEXT_NOTE = 1
    CONTACTS = 3
    REPOST = 6
    GENERIC_REPOST = 16
    CHANNEL_METADATA = 41
    RELAY_LIST = 10_002
    LONG_FORM = 30_023
    COMMUNITY_DEFINITION = 34_550


class TagType(StrEnum):
    """Single-letter tag discriminators interpreted by this package.

    Attributes:
        EVENT: ``e`` -- reference to an event by id.
        ADDRESS: ``a`` -- reference to a replaceable event by coordinate.
        PUBKEY: ``p`` -- reference to a person by public key.
        IDENTIFIER: ``d`` -- identifier of an addressable event.
        RELAY: ``r`` -- relay URL with optional read/write mode.
    """

    EVENT = "e"
    ADDRESS = "a"
    PUBKEY = "p"
    IDENTIFIER = "d"
    RELAY = "r"


class Marker(StrEnum):
    """NIP-10 markers carried in the fourth slot of ``e`` and ``a`` tags."""

    ROOT = "root"
    REPLY = "reply"
    MENTION = "mention"


class RelayMode(StrEnum):
    """Usage mode of a relay declared by an ``r`` tag (NIP-65).

    An ``r`` tag without a mode means the relay is used for both reading
    and writing, represented as ``ALL``.
    """

    READ = "read"
    WRITE = "write"
    ALL = "all"


#: Kinds below 10000 that are replaceable for historical reasons.
REPLACEABLE_LEGACY_KINDS: frozenset[int] = frozenset(
    {EventKind.SET_METADATA, EventKind.CONTACTS, EventKind.CHANNEL_METADATA}
)

#: Half-open ``[start, end)`` ranges of replaceable and addressable kinds.
REPLACEABLE_KIND_RANGES: tuple[tuple[int, int], ...] = (
    (10_000, 20_000),
    (30_000, 40_000),
)

#: Kinds treated as reposts unless configured otherwise.
DEFAULT_REPOST_KINDS: frozenset[int] = frozenset({EventKind.REPOST})

EVENT_KIND_MAX = 65_535
