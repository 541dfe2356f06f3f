"""NIP implementations for event interpretation.

Each module covers the part of one NIP this package needs. All functions
are pure: they read an [Event][nostrefs.models.event.Event] or
[DraftEvent][nostrefs.models.event.DraftEvent] and return fresh records.

Attributes:
    nip01: Replaceability, coordinates, unique ids, tag-to-pointer
        projections and date ordering.
    nip10: Thread root/reply resolution.
    nip18: Repost detection and embedded-note decoding.
    nip19: ``nostr:`` link pattern and bech32 entity decoding (``nostr_sdk``).
    nip27: Content references matched against tags.
    nip65: ``r`` tag relay configuration.
"""

from .nip01 import (
    LENIENT,
    STRICT,
    CoordinateOptions,
    a_tag_to_address_pointer,
    e_tag_to_event_pointer,
    get_event_address_pointer,
    get_event_coordinate,
    get_event_uid,
    is_replaceable,
    parse_coordinate,
    pointer_to_a_tag,
    sort_by_date,
    sort_events_by_date,
    truncated_id,
)
from .nip10 import get_references, interpret_tags, is_reply
from .nip18 import EmbeddedEventSchema, is_repost, parse_hardcoded_note_content
from .nip19 import NOSTR_LINK_PATTERN, DecodedEntity, decode_entity, encode_note_id, encode_npub
from .nip27 import (
    filter_tags_by_content_refs,
    get_content_tag_ref_indexes,
    get_content_tag_refs,
    is_mentioned_in_content,
)
from .nip65 import get_relay_configs, parse_r_tag


__all__ = [
    "LENIENT",
    "NOSTR_LINK_PATTERN",
    "STRICT",
    "CoordinateOptions",
    "DecodedEntity",
    "EmbeddedEventSchema",
    "a_tag_to_address_pointer",
    "decode_entity",
    "e_tag_to_event_pointer",
    "encode_note_id",
    "encode_npub",
    "filter_tags_by_content_refs",
    "get_content_tag_ref_indexes",
    "get_content_tag_refs",
    "get_event_address_pointer",
    "get_event_coordinate",
    "get_event_uid",
    "get_references",
    "get_relay_configs",
    "interpret_tags",
    "is_mentioned_in_content",
    "is_replaceable",
    "is_reply",
    "is_repost",
    "parse_coordinate",
    "parse_hardcoded_note_content",
    "parse_r_tag",
    "pointer_to_a_tag",
    "sort_by_date",
    "sort_events_by_date",
    "truncated_id",
]
