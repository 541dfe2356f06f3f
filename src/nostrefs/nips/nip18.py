"""
NIP-18 reposts and embedded notes.

A kind 6 repost carries the reposted event serialized as JSON in its
content. Older clients instead "quote-repost" by posting a note whose whole
content is a single ``nostr:`` link. This module recognizes both forms and
decodes the embedded JSON back into an [Event][nostrefs.models.event.Event].

Note:
    Embedded JSON comes from untrusted content. Every failure (invalid JSON,
    missing or mistyped fields, empty tags) results in ``None``; nothing
    here raises.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from nostrefs.models.constants import DEFAULT_REPOST_KINDS
from nostrefs.models.event import Event

from .nip19 import NOSTR_LINK_PATTERN


if TYPE_CHECKING:
    from collections.abc import Collection

    from nostrefs.models.event import DraftEvent


logger = logging.getLogger(__name__)


class EmbeddedEventSchema(BaseModel):
    """Structural schema of an event serialized inside another event's content.

    Strict mode rejects coercions such as ``"1"`` for ``kind`` or ``true``
    for ``created_at``; a float timestamp such as ``1700000000.0`` is
    rejected too. Unknown keys are ignored.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    id: str
    pubkey: str
    created_at: int = Field(ge=0)
    kind: int = Field(ge=0)
    tags: list[list[str]]
    content: str
    sig: str


def is_repost(
    event: Event | DraftEvent,
    repost_kinds: Collection[int] = DEFAULT_REPOST_KINDS,
) -> bool:
    """Return True for repost kinds, or when the content is exactly one ``nostr:`` link.

    The link form is checked syntactically; the bech32 payload is not decoded.
    """
    if event.kind in repost_kinds:
        return True
    return NOSTR_LINK_PATTERN.fullmatch(event.content) is not None


def parse_hardcoded_note_content(event: Event | DraftEvent) -> Event | None:
    """Decode the event embedded as JSON in *event*'s content.

    A missing or null ``tags`` field defaults to an empty list before
    validation.

    Returns:
        The embedded [Event][nostrefs.models.event.Event], or ``None`` if the
        content is not JSON, is a falsy JSON value, or fails structural
        validation.
    """
    try:
        data = json.loads(event.content)
    except (ValueError, RecursionError):
        return None

    if not data:
        return None
    if not isinstance(data, dict):
        logger.debug("embedded_event_invalid reason=not_an_object")
        return None

    data = {**data, "tags": data.get("tags") or []}

    try:
        schema = EmbeddedEventSchema.model_validate(data)
        return Event(**schema.model_dump())
    except (ValidationError, ValueError, TypeError) as e:
        logger.debug("embedded_event_invalid reason=%s", type(e).__name__)
        return None
