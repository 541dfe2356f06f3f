"""
Tag classification and typed tag variants.

Nostr tags travel as untyped string arrays whose meaning is given by the
first element. This module provides two layers over that wire shape:

* Classifier predicates ([is_e_tag][nostrefs.models.tags.is_e_tag],
  [is_a_tag][nostrefs.models.tags.is_a_tag], ...) that test the raw array.
* [parse_tag][nostrefs.models.tags.parse_tag], which converts a raw array
  once into a closed set of frozen variants
  ([ETag][nostrefs.models.tags.ETag], [ATag][nostrefs.models.tags.ATag],
  [PTag][nostrefs.models.tags.PTag], [RTag][nostrefs.models.tags.RTag],
  [DTag][nostrefs.models.tags.DTag], [UnknownTag][nostrefs.models.tags.UnknownTag]).

Every variant records ``index``, the slot of the tag in the originating
sequence. Two tags with identical contents in different slots are
different tags; de-duplication throughout the package compares slots, not
contents.

Note:
    Empty-string relay hints and markers are normalized to ``None``. A tag
    written as ``["e", "<id>", "", "root"]`` has no relay hint and the
    ``root`` marker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import TagType


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


# =============================================================================
# Predicates
# =============================================================================


def _has_type(tag: Sequence[str], tag_type: TagType) -> bool:
    return len(tag) >= 2 and tag[0] == tag_type  # noqa: PLR2004


def is_e_tag(tag: Sequence[str]) -> bool:
    """Return True for an event reference tag (``["e", <id>, ...]``)."""
    return _has_type(tag, TagType.EVENT)


def is_a_tag(tag: Sequence[str]) -> bool:
    """Return True for an address reference tag (``["a", <coordinate>, ...]``)."""
    return _has_type(tag, TagType.ADDRESS)


def is_p_tag(tag: Sequence[str]) -> bool:
    """Return True for a person reference tag (``["p", <pubkey>, ...]``)."""
    return _has_type(tag, TagType.PUBKEY)


def is_d_tag(tag: Sequence[str]) -> bool:
    """Return True for an identifier tag (``["d", <identifier>]``)."""
    return _has_type(tag, TagType.IDENTIFIER)


def is_r_tag(tag: Sequence[str]) -> bool:
    """Return True for a relay tag (``["r", <url>, <mode>?]``)."""
    return _has_type(tag, TagType.RELAY)


def _slot(tag: Sequence[str], position: int) -> str | None:
    """Return the value at *position*, or ``None`` if missing or empty."""
    if len(tag) > position and tag[position]:
        return tag[position]
    return None


# =============================================================================
# Variants
# =============================================================================


@dataclass(frozen=True, slots=True)
class ETag:
    """``["e", event_id, relay?, marker?]``"""

    index: int
    event_id: str
    relay: str | None = None
    marker: str | None = None

    def to_list(self) -> list[str]:
        return _trim([TagType.EVENT.value, self.event_id, self.relay or "", self.marker or ""])


@dataclass(frozen=True, slots=True)
class ATag:
    """``["a", coordinate, relay?, marker?]``"""

    index: int
    coordinate: str
    relay: str | None = None
    marker: str | None = None

    def to_list(self) -> list[str]:
        return _trim([TagType.ADDRESS.value, self.coordinate, self.relay or "", self.marker or ""])


@dataclass(frozen=True, slots=True)
class PTag:
    """``["p", pubkey, relay?]``"""

    index: int
    pubkey: str
    relay: str | None = None

    def to_list(self) -> list[str]:
        return _trim([TagType.PUBKEY.value, self.pubkey, self.relay or ""])


@dataclass(frozen=True, slots=True)
class RTag:
    """``["r", url, mode?]`` where mode is ``read``, ``write`` or absent."""

    index: int
    url: str
    mode: str | None = None

    def to_list(self) -> list[str]:
        return _trim([TagType.RELAY.value, self.url, self.mode or ""])


@dataclass(frozen=True, slots=True)
class DTag:
    """``["d", identifier]``"""

    index: int
    identifier: str

    def to_list(self) -> list[str]:
        return [TagType.IDENTIFIER.value, self.identifier]


@dataclass(frozen=True, slots=True)
class UnknownTag:
    """Any tag not covered by the other variants, kept verbatim."""

    index: int
    values: tuple[str, ...]

    def to_list(self) -> list[str]:
        return list(self.values)


Tag = ETag | ATag | PTag | RTag | DTag | UnknownTag


def _trim(values: list[str]) -> list[str]:
    """Drop trailing empty slots so optional fields do not appear on the wire."""
    while len(values) > 2 and not values[-1]:  # noqa: PLR2004
        values.pop()
    return values


def parse_tag(raw: Sequence[str], index: int) -> Tag:
    """Convert a raw tag array into its typed variant.

    Args:
        raw: The wire tag, a non-empty sequence of strings.
        index: Slot of the tag in its originating sequence.

    Returns:
        The matching variant, or [UnknownTag][nostrefs.models.tags.UnknownTag]
        when the discriminator is not interpreted or the tag is too short.
    """
    if is_e_tag(raw):
        return ETag(index, raw[1], relay=_slot(raw, 2), marker=_slot(raw, 3))
    if is_a_tag(raw):
        return ATag(index, raw[1], relay=_slot(raw, 2), marker=_slot(raw, 3))
    if is_p_tag(raw):
        return PTag(index, raw[1], relay=_slot(raw, 2))
    if is_r_tag(raw):
        return RTag(index, raw[1], mode=_slot(raw, 2))
    if is_d_tag(raw):
        return DTag(index, raw[1])
    return UnknownTag(index, tuple(raw))


def parse_tags(tags: Iterable[Sequence[str]]) -> list[Tag]:
    """Parse every tag of an event, preserving order and slot indexes."""
    return [parse_tag(raw, i) for i, raw in enumerate(tags)]


def find_identifier(tags: Iterable[Sequence[str]]) -> str | None:
    """Return the value of the first ``d`` tag, or ``None`` if absent or empty."""
    for raw in tags:
        if is_d_tag(raw):
            return raw[1] or None
    return None
