"""
Immutable Nostr event records.

[Event][nostrefs.models.event.Event] is the signed record consumed by every
interpretation function in [nostrefs.nips][]. [DraftEvent][nostrefs.models.event.DraftEvent]
is the unsigned variant used while composing replies: it carries the fields
needed for tag interpretation but no id, author or signature.

Both are frozen dataclasses. Tags are normalized to a tuple of string tuples
on construction so an instance can never be mutated through a shared list.

See Also:
    [nostrefs.models.tags][]: Typed views over the raw tags stored here.
    [nostrefs.nips.nip18.parse_hardcoded_note_content][]: Builds an
        [Event][nostrefs.models.event.Event] from JSON embedded in content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from time import time
from typing import TYPE_CHECKING, Any

from ._validation import (
    freeze_tags,
    validate_non_negative_int,
    validate_str,
)


if TYPE_CHECKING:
    from collections.abc import Mapping

    from nostr_sdk import Event as NostrEvent


_EVENT_FIELDS: tuple[str, ...] = ("id", "pubkey", "created_at", "kind", "tags", "content", "sig")


@dataclass(frozen=True, slots=True)
class Event:
    """Immutable signed Nostr event.

    Validation is structural only: field types, non-negative ``kind`` and
    ``created_at``, and non-empty string tags. The id and signature are
    never checked against the content.

    Attributes:
        id: Event id (hex SHA-256 of the serialized event).
        pubkey: Author public key (hex).
        created_at: Unix timestamp in seconds.
        kind: Event kind.
        tags: Ordered tags, each a non-empty tuple of strings.
        content: Free-text content.
        sig: Schnorr signature (hex).

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If ``kind`` or ``created_at`` is negative or a tag is empty.

    Examples:
        ```python
        event = Event(
            id="ab" * 32,
            pubkey="cd" * 32,
            created_at=1700000000,
            kind=1,
            tags=[["e", "ef" * 32, "", "root"]],
            content="hello",
            sig="00" * 64,
        )
        event.tags  # (('e', 'efef...', '', 'root'),)
        ```
    """

    id: str
    pubkey: str
    created_at: int
    kind: int
    tags: tuple[tuple[str, ...], ...]
    content: str
    sig: str

    def __post_init__(self) -> None:
        validate_str(self.id, "id")
        validate_str(self.pubkey, "pubkey")
        validate_non_negative_int(self.created_at, "created_at")
        validate_non_negative_int(self.kind, "kind")
        validate_str(self.content, "content")
        validate_str(self.sig, "sig")
        object.__setattr__(self, "tags", freeze_tags(self.tags))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Event:
        """Build an event from a JSON-like mapping.

        A missing ``tags`` key is treated as an empty tag list. Unknown
        keys are ignored.

        Raises:
            ValueError: If a required field is missing.
            TypeError: If a field has the wrong type.
        """
        missing = [name for name in _EVENT_FIELDS if name != "tags" and name not in data]
        if missing:
            raise ValueError(f"missing event fields: {', '.join(missing)}")
        return cls(
            id=data["id"],
            pubkey=data["pubkey"],
            created_at=data["created_at"],
            kind=data["kind"],
            tags=data.get("tags") or (),
            content=data["content"],
            sig=data["sig"],
        )

    @classmethod
    def from_nostr_event(cls, event: NostrEvent) -> Event:
        """Convert a ``nostr_sdk.Event`` into an [Event][nostrefs.models.event.Event].

        Uses the SDK accessor chain, so any object exposing the same
        methods (``id().to_hex()``, ``author().to_hex()``, ...) works.
        """
        return cls(
            id=event.id().to_hex(),
            pubkey=event.author().to_hex(),
            created_at=event.created_at().as_secs(),
            kind=event.kind().as_u16(),
            tags=[list(tag.as_vec()) for tag in event.tags().to_vec()],
            content=event.content(),
            sig=event.signature(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the NIP-01 JSON object shape."""
        return {
            "id": self.id,
            "pubkey": self.pubkey,
            "created_at": self.created_at,
            "kind": self.kind,
            "tags": [list(tag) for tag in self.tags],
            "content": self.content,
            "sig": self.sig,
        }


@dataclass(frozen=True, slots=True)
class DraftEvent:
    """Unsigned event template, e.g. a reply being composed.

    Accepted wherever only ``kind``, ``tags`` and ``content`` are needed.
    """

    kind: int
    content: str = ""
    tags: tuple[tuple[str, ...], ...] = ()
    created_at: int = field(default_factory=lambda: int(time()))

    def __post_init__(self) -> None:
        validate_non_negative_int(self.kind, "kind")
        validate_str(self.content, "content")
        validate_non_negative_int(self.created_at, "created_at")
        object.__setattr__(self, "tags", freeze_tags(self.tags))
