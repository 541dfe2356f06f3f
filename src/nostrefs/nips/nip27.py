"""
NIP-27 content references.

Matches bech32 links found in an event's content against the event's own
tags. A ``nostr:npub1...`` link in the content references every ``p`` tag
carrying that public key; a ``nostr:note1...`` link references every ``e``
tag carrying that event id. Tags referenced this way are mentions: NIP-10
excludes them from legacy root/reply positions.

Tags are tracked by slot index, so a tag referenced by several links is
reported once, and two distinct tags with identical contents are reported
separately.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nostrefs.models.constants import TagType

from .nip19 import find_links


if TYPE_CHECKING:
    from collections.abc import Sequence

    from nostrefs.models.event import DraftEvent, Event


def get_content_tag_ref_indexes(content: str, tags: Sequence[Sequence[str]]) -> list[int]:
    """Return the slot indexes of tags referenced from *content*.

    Indexes are ordered by first discovery: link order in the content,
    then tag order for each link.
    """
    found: dict[int, None] = {}
    for _, decoded in find_links(content):
        for i, tag in enumerate(tags):
            if len(tag) >= 2 and tag[0] == decoded.tag_type and tag[1] == decoded.id:  # noqa: PLR2004
                found.setdefault(i, None)
    return list(found)


def get_content_tag_refs(content: str, tags: Sequence[Sequence[str]]) -> list[Sequence[str]]:
    """Return the tags referenced from *content*, in discovery order, without duplicates."""
    return [tags[i] for i in get_content_tag_ref_indexes(content, tags)]


def filter_tags_by_content_refs(
    content: str,
    tags: Sequence[Sequence[str]],
    referenced: bool = True,  # noqa: FBT001, FBT002
) -> list[Sequence[str]]:
    """Select the tags that are (or, with ``referenced=False``, are not) referenced from content.

    Unlike [get_content_tag_refs()][nostrefs.nips.nip27.get_content_tag_refs]
    the result keeps the original tag order.
    """
    refs = set(get_content_tag_ref_indexes(content, tags))
    return [tag for i, tag in enumerate(tags) if (i in refs) == referenced]


def is_mentioned_in_content(event: Event | DraftEvent, pubkey: str) -> bool:
    """Return True if the content links to a ``p`` tag carrying *pubkey*."""
    return any(
        tag[0] == TagType.PUBKEY and tag[1] == pubkey
        for tag in filter_tags_by_content_refs(event.content, event.tags)
    )
