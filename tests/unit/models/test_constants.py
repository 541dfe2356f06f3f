"""Unit tests for nostrefs.models.constants."""

from __future__ import annotations

from nostrefs.models.constants import (
    DEFAULT_REPOST_KINDS,
    EventKind,
    Marker,
    RelayMode,
    TagType,
)


class TestEventKind:
    def test_values(self) -> None:
        assert EventKind.SET_METADATA == 0
        assert EventKind.REPOST == 6
        assert EventKind.RELAY_LIST == 10_002
        assert EventKind.LONG_FORM == 30_023

    def test_default_repost_kinds(self) -> None:
        assert DEFAULT_REPOST_KINDS == frozenset({6})


class TestStrEnums:
    def test_tag_types_compare_to_strings(self) -> None:
        assert TagType.EVENT == "e"
        assert TagType.ADDRESS == "a"
        assert TagType.PUBKEY == "p"

    def test_markers(self) -> None:
        assert Marker.ROOT == "root"
        assert Marker.REPLY == "reply"

    def test_relay_modes(self) -> None:
        assert {m.value for m in RelayMode} == {"read", "write", "all"}
