"""NIP-65 relay list entries.

Relay list events (kind 10002) declare the relays a user reads from and
writes to with ``r`` tags: ``["r", <url>]`` for both directions,
``["r", <url>, "read"]`` or ``["r", <url>, "write"]`` for one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nostrefs.models.constants import RelayMode
from nostrefs.models.pointers import RelayConfig
from nostrefs.models.tags import RTag, parse_tag, parse_tags


if TYPE_CHECKING:
    from collections.abc import Sequence

    from nostrefs.models.event import DraftEvent, Event


def parse_r_tag(tag: RTag | Sequence[str]) -> RelayConfig:
    """Convert an ``r`` tag into a [RelayConfig][nostrefs.models.pointers.RelayConfig].

    An unknown or missing mode means the relay is used for both directions.

    Raises:
        ValueError: If *tag* is not an ``r`` tag.
    """
    if not isinstance(tag, RTag):
        parsed = parse_tag(tag, -1)
        if not isinstance(parsed, RTag):
            raise ValueError(f"not an r tag: {list(tag)!r}")
        tag = parsed

    if tag.mode == RelayMode.WRITE:
        return RelayConfig(tag.url, RelayMode.WRITE)
    if tag.mode == RelayMode.READ:
        return RelayConfig(tag.url, RelayMode.READ)
    return RelayConfig(tag.url, RelayMode.ALL)


def get_relay_configs(event: Event | DraftEvent) -> list[RelayConfig]:
    """Return the relays declared by every ``r`` tag of *event*, in tag order."""
    return [parse_r_tag(tag) for tag in parse_tags(event.tags) if isinstance(tag, RTag)]
