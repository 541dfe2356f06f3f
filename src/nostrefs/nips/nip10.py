"""
NIP-10 thread resolution: which events a note is rooted in and replying to.

Resolution runs an ordered decision table over the event's ``e`` and ``a``
tags. Each rule only fills positions the previous rules left empty:

1. **Markers** -- the first tag marked ``root`` and the first marked
   ``reply``, separately for ``e`` and ``a`` tags.
2. **Direct-reply shorthand** -- when only one of root/reply is marked for a
   tag type, it fills both positions. A direct reply to the root needs no
   separate ``reply`` tag, and some clients only write ``reply``.
3. **Legacy positional tags** -- when no ``e`` tag is marked at all, the
   unmarked ``e`` tags not mentioned in the content are read positionally:
   the first is the root, the last is the reply. ``a`` tags have no
   positional convention.

See Also:
    [nostrefs.nips.nip27][]: Supplies the content mentions excluded by rule 3.
    [nostrefs.nips.nip01][]: Projects the resolved tags to pointers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

from nostrefs.core.exceptions import MissingComponentError
from nostrefs.models.constants import DEFAULT_REPOST_KINDS, Marker
from nostrefs.models.pointers import (
    AddressPointer,
    EventReferences,
    PointerReference,
    TagReference,
    ThreadTags,
)
from nostrefs.models.tags import ATag, ETag, parse_tags

from .nip01 import a_tag_to_address_pointer, e_tag_to_event_pointer
from .nip27 import get_content_tag_ref_indexes


if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Sequence

    from nostrefs.models.event import DraftEvent, Event


logger = logging.getLogger(__name__)

_TagT = TypeVar("_TagT", ETag, ATag)


@dataclass(slots=True)
class _ThreadState:
    """Working state of one resolution; discarded when it returns."""

    content: str
    raw_tags: Sequence[Sequence[str]]
    e_tags: list[ETag]
    a_tags: list[ATag]
    legacy_fallback: bool
    root_e: ETag | None = None
    reply_e: ETag | None = None
    root_a: ATag | None = None
    reply_a: ATag | None = None
    rules_applied: list[str] = field(default_factory=list)


def _first_marked(tags: list[_TagT], marker: Marker) -> _TagT | None:
    return next((t for t in tags if t.marker == marker), None)


def _apply_markers(state: _ThreadState) -> None:
    state.root_e = _first_marked(state.e_tags, Marker.ROOT)
    state.reply_e = _first_marked(state.e_tags, Marker.REPLY)
    state.root_a = _first_marked(state.a_tags, Marker.ROOT)
    state.reply_a = _first_marked(state.a_tags, Marker.REPLY)
    if state.root_e or state.reply_e or state.root_a or state.reply_a:
        state.rules_applied.append("markers")


def _apply_direct_reply_shorthand(state: _ThreadState) -> None:
    if (state.root_e is None) != (state.reply_e is None):
        state.root_e = state.reply_e = state.root_e or state.reply_e
        state.rules_applied.append("shorthand_e")
    if (state.root_a is None) != (state.reply_a is None):
        state.root_a = state.reply_a = state.root_a or state.reply_a
        state.rules_applied.append("shorthand_a")


def _apply_legacy_positions(state: _ThreadState) -> None:
    if not state.legacy_fallback or state.root_e is not None or state.reply_e is not None:
        return

    mentioned = set(get_content_tag_ref_indexes(state.content, state.raw_tags))
    legacy = [t for t in state.e_tags if t.marker is None and t.index not in mentioned]
    if legacy:
        state.root_e = legacy[0]
        state.reply_e = legacy[-1]
        state.rules_applied.append("legacy_positions")


_RULES: tuple[Callable[[_ThreadState], None], ...] = (
    _apply_markers,
    _apply_direct_reply_shorthand,
    _apply_legacy_positions,
)


def interpret_tags(event: Event | DraftEvent, *, legacy_fallback: bool = True) -> ThreadTags:
    """Resolve the root and reply positions of *event* as typed tags.

    Args:
        event: The event to inspect. Never modified.
        legacy_fallback: Apply the positional convention when no ``e`` tag
            carries a marker.

    Returns:
        [ThreadTags][nostrefs.models.pointers.ThreadTags] whose ``root`` and
        ``reply`` are set only when at least one of their ``e``/``a`` fields
        was resolved.

    Examples:
        ```python
        event = DraftEvent(kind=1, tags=[["e", "R", "", "root"]])
        interpret_tags(event).reply.e.event_id  # 'R'
        ```
    """
    parsed = parse_tags(event.tags)
    state = _ThreadState(
        content=event.content,
        raw_tags=event.tags,
        e_tags=[t for t in parsed if isinstance(t, ETag)],
        a_tags=[t for t in parsed if isinstance(t, ATag)],
        legacy_fallback=legacy_fallback,
    )
    for rule in _RULES:
        rule(state)

    logger.debug("thread_tags_resolved rules=%s", ",".join(state.rules_applied) or "none")

    root = TagReference(e=state.root_e, a=state.root_a)
    reply = TagReference(e=state.reply_e, a=state.reply_a)
    return ThreadTags(
        root=root if root.e or root.a else None,
        reply=reply if reply.e or reply.a else None,
    )


def _to_address_pointer(tag: ATag | None) -> AddressPointer | None:
    if tag is None:
        return None
    try:
        return a_tag_to_address_pointer(tag)
    except MissingComponentError as e:
        logger.debug("a_tag_skipped coordinate=%s missing=%s", tag.coordinate, e.field)
        return None


def _to_pointer_reference(ref: TagReference | None) -> PointerReference | None:
    if ref is None:
        return None
    e = e_tag_to_event_pointer(ref.e) if ref.e else None
    a = _to_address_pointer(ref.a)
    if e is None and a is None:
        return None
    return PointerReference(e=e, a=a)


def get_references(event: Event | DraftEvent, *, legacy_fallback: bool = True) -> EventReferences:
    """Resolve the root and reply positions of *event* as pointers.

    Runs [interpret_tags()][nostrefs.nips.nip10.interpret_tags] and
    projects each tag to its pointer. An ``a`` tag whose coordinate has no
    identifier cannot become an address pointer and is dropped; a position
    left with neither pointer is omitted.
    """
    tags = interpret_tags(event, legacy_fallback=legacy_fallback)
    return EventReferences(
        root=_to_pointer_reference(tags.root),
        reply=_to_pointer_reference(tags.reply),
    )


def is_reply(
    event: Event | DraftEvent,
    *,
    repost_kinds: Collection[int] = DEFAULT_REPOST_KINDS,
    legacy_fallback: bool = True,
) -> bool:
    """Return True if *event* replies to another event.

    Reposts are never replies, even though they carry ``e`` tags.
    """
    if event.kind in repost_kinds:
        return False
    return get_references(event, legacy_fallback=legacy_fallback).reply is not None
