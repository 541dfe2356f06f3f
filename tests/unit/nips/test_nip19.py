"""Unit tests for nostrefs.nips.nip19 (bech32 links)."""

from __future__ import annotations

import pytest
from nostr_sdk import EventId, Nip19Event, Nip19Profile, PublicKey

from nostrefs.models.constants import TagType
from nostrefs.nips.nip19 import (
    NOSTR_LINK_PATTERN,
    DecodedEntity,
    decode_entity,
    encode_note_id,
    encode_npub,
    find_links,
)


class TestPattern:
    def test_prefixes(self, npub: str) -> None:
        for prefix in ("nostr:", "@", ""):
            match = NOSTR_LINK_PATTERN.search(f"hi {prefix}{npub}!")
            assert match is not None
            assert match.group(2) == npub
            assert match.group(3) == "npub"

    def test_case_insensitive(self, npub: str) -> None:
        match = NOSTR_LINK_PATTERN.search(f"NOSTR:{npub.upper()}")
        assert match is not None
        assert match.group(3) == "NPUB"

    def test_short_payload_not_matched(self) -> None:
        assert NOSTR_LINK_PATTERN.search("nostr:npub1qq") is None


class TestDecodeEntity:
    def test_npub(self, npub: str, pubkey_hex: str) -> None:
        assert decode_entity(npub) == DecodedEntity("npub", TagType.PUBKEY, pubkey_hex)

    def test_note(self, note: str, event_id_hex: str) -> None:
        assert decode_entity(note) == DecodedEntity("note", TagType.EVENT, event_id_hex)

    def test_uppercase(self, note: str, event_id_hex: str) -> None:
        decoded = decode_entity(note.upper())
        assert decoded is not None
        assert decoded.id == event_id_hex

    def test_mixed_case_rejected(self, note: str) -> None:
        assert decode_entity(note[:8] + note[8:].upper()) is None

    def test_mixed_case_link_not_found(self, note: str) -> None:
        assert find_links(f"nostr:{note[:8]}{note[8:].upper()}") == []

    def test_nprofile(self, pubkey_hex: str) -> None:
        nprofile = Nip19Profile(PublicKey.parse(pubkey_hex), []).to_bech32()
        assert decode_entity(nprofile) == DecodedEntity("nprofile", TagType.PUBKEY, pubkey_hex)

    def test_nevent(self, event_id_hex: str) -> None:
        nevent = Nip19Event(EventId.parse(event_id_hex)).to_bech32()
        assert decode_entity(nevent) == DecodedEntity("nevent", TagType.EVENT, event_id_hex)

    def test_bad_checksum(self, npub: str) -> None:
        last = "q" if npub[-1] != "q" else "p"
        assert decode_entity(npub[:-1] + last) is None

    @pytest.mark.parametrize("link", ["", "npub", "naddr1qqqqqqqq", "nrelay1qqqqqqqq", "xyz1abc"])
    def test_unsupported(self, link: str) -> None:
        assert decode_entity(link) is None


class TestFindLinks:
    def test_order_and_skip_undecodable(self, npub: str, note: str, pubkey_hex: str) -> None:
        content = f"@{note} and nostr:npub1qqqqqqqqqq then nostr:{npub}"
        found = find_links(content)
        assert [decoded.type for _, decoded in found] == ["note", "npub"]
        assert found[1][1].id == pubkey_hex
        assert found[0][0].group(1) == "@"

    def test_no_links(self) -> None:
        assert find_links("plain text") == []


class TestEncode:
    def test_note_id(self, event_id_hex: str) -> None:
        encoded = encode_note_id(event_id_hex)
        assert encoded.startswith("note1")
        assert EventId.parse(encoded).to_hex() == event_id_hex

    def test_npub(self, pubkey_hex: str) -> None:
        assert encode_npub(pubkey_hex).startswith("npub1")
