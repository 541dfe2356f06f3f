"""
NIP-19 bech32 entities embedded in content.

Content references other events and people with bech32 links such as
``nostr:npub1...`` or ``@note1...``. [NOSTR_LINK_PATTERN][nostrefs.nips.nip19.NOSTR_LINK_PATTERN]
finds candidate links; [decode_entity()][nostrefs.nips.nip19.decode_entity]
decodes one with ``nostr_sdk`` and maps it to the tag type and value it
refers to:

| Entity     | Tag type | Value                |
|------------|----------|----------------------|
| ``npub``     | ``p``      | public key         |
| ``nprofile`` | ``p``      | embedded public key |
| ``note``     | ``e``      | event id           |
| ``nevent``   | ``e``      | embedded event id  |

Relay hints, authors and kinds embedded in ``nprofile``/``nevent`` are not
used. ``naddr`` and ``nrelay`` links are matched by the pattern but do not
decode to a tag reference.

Note:
    Decoding never raises. Bad checksums, unsupported entities and payloads
    the SDK rejects all yield ``None`` and are logged at DEBUG level.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from nostr_sdk import EventId, Nip19Event, Nip19Profile, NostrSdkError, PublicKey

from nostrefs.models.constants import TagType


logger = logging.getLogger(__name__)

#: Matches ``[nostr:|@]<hrp>1<bech32 data>``; group 1 is the prefix, group 2
#: the bech32 entity and group 3 its human-readable part.
NOSTR_LINK_PATTERN = re.compile(
    r"(nostr:|@)?((npub|note|nprofile|nevent|nrelay|naddr)1[qpzry9x8gf2tvdw0s3jn54khce6mua7l]{6,})",
    re.IGNORECASE,
)


class DecodedEntity(NamedTuple):
    """A decoded bech32 entity reduced to the tag it references.

    Attributes:
        type: Entity name (``npub``, ``nprofile``, ``note``, ``nevent``).
        tag_type: Tag discriminator the entity maps to (``p`` or ``e``).
        id: Hex public key or event id.
    """

    type: str
    tag_type: TagType
    id: str


def _decode_npub(link: str) -> str:
    return PublicKey.parse(link).to_hex()


def _decode_nprofile(link: str) -> str:
    return Nip19Profile.from_bech32(link).public_key().to_hex()


def _decode_note(link: str) -> str:
    return EventId.parse(link).to_hex()


def _decode_nevent(link: str) -> str:
    return Nip19Event.from_bech32(link).event_id().to_hex()


_DECODERS = {
    "npub": (TagType.PUBKEY, _decode_npub),
    "nprofile": (TagType.PUBKEY, _decode_nprofile),
    "note": (TagType.EVENT, _decode_note),
    "nevent": (TagType.EVENT, _decode_nevent),
}


def decode_entity(link: str) -> DecodedEntity | None:
    """Decode a bech32 entity into the tag type and id it references.

    Args:
        link: The bech32 string without ``nostr:`` or ``@`` prefix.

    Returns:
        The [DecodedEntity][nostrefs.nips.nip19.DecodedEntity], or ``None``
        if the entity is unsupported or cannot be decoded. Mixed-case
        strings are invalid bech32 and yield ``None``.
    """
    if link not in (link.lower(), link.upper()):
        logger.debug("link_decode_failed reason=mixed_case link=%s", link)
        return None
    link = link.lower()
    hrp, sep, _ = link.partition("1")
    entry = _DECODERS.get(hrp) if sep else None
    if entry is None:
        return None

    tag_type, decoder = entry
    try:
        return DecodedEntity(hrp, tag_type, decoder(link))
    except (NostrSdkError, ValueError, TypeError):
        logger.debug("link_decode_failed link=%s", link)
        return None


def find_links(content: str) -> list[tuple[re.Match[str], DecodedEntity]]:
    """Return every decodable link in *content* with its regex match, in order."""
    found: list[tuple[re.Match[str], DecodedEntity]] = []
    for match in NOSTR_LINK_PATTERN.finditer(content):
        decoded = decode_entity(match.group(2))
        if decoded is not None:
            found.append((match, decoded))
    return found


def encode_note_id(event_id: str) -> str:
    """Encode a hex event id as a ``note1...`` string.

    Raises:
        NostrSdkError: If *event_id* is not a valid event id.
    """
    return EventId.parse(event_id).to_bech32()


def encode_npub(pubkey: str) -> str:
    """Encode a hex public key as an ``npub1...`` string.

    Raises:
        NostrSdkError: If *pubkey* is not a valid public key.
    """
    return PublicKey.parse(pubkey).to_bech32()
