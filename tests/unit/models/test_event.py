"""Unit tests for nostrefs.models.event."""

from __future__ import annotations

import dataclasses
from typing import Any
from unittest.mock import MagicMock

import pytest

from nostrefs.models import DraftEvent, Event


class TestConstruction:
    def test_tags_frozen_to_tuples(self, make_event) -> None:
        event = make_event(tags=[["e", "x"], ["p", "y", "wss://r"]])
        assert event.tags == (("e", "x"), ("p", "y", "wss://r"))

    def test_input_list_not_shared(self, make_event) -> None:
        tags = [["e", "x"]]
        event = make_event(tags=tags)
        tags[0].append("mutated")
        assert event.tags == (("e", "x"),)

    def test_frozen(self, make_event) -> None:
        event = make_event()
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.kind = 2  # type: ignore[misc]

    def test_negative_kind_rejected(self, make_event) -> None:
        with pytest.raises(ValueError, match="kind must be non-negative"):
            make_event(kind=-1)

    def test_bool_created_at_rejected(self, make_event) -> None:
        with pytest.raises(TypeError, match="created_at must be an int, got bool"):
            make_event(created_at=True)

    def test_empty_tag_rejected(self, make_event) -> None:
        with pytest.raises(ValueError, match=r"tags\[1\] must not be empty"):
            make_event(tags=[["e", "x"], []])

    def test_non_string_tag_value_rejected(self, make_event) -> None:
        with pytest.raises(TypeError, match="must be a str, got int"):
            make_event(tags=[["e", 1]])

    def test_string_tag_rejected(self, make_event) -> None:
        with pytest.raises(TypeError, match=r"tags\[0\] must be a sequence"):
            make_event(tags=["e"])

    def test_content_must_be_str(self, make_event) -> None:
        with pytest.raises(TypeError, match="content must be a str"):
            make_event(content=None)


class TestFromDict:
    def test_round_trip(self, event_dict: dict[str, Any]) -> None:
        event = Event.from_dict(event_dict)
        assert event.to_dict() == event_dict

    def test_missing_tags_defaults_to_empty(self, event_dict: dict[str, Any]) -> None:
        del event_dict["tags"]
        assert Event.from_dict(event_dict).tags == ()

    def test_missing_field(self, event_dict: dict[str, Any]) -> None:
        del event_dict["sig"]
        with pytest.raises(ValueError, match="missing event fields: sig"):
            Event.from_dict(event_dict)

    def test_unknown_keys_ignored(self, event_dict: dict[str, Any]) -> None:
        event_dict["seen_on"] = ["wss://r"]
        assert Event.from_dict(event_dict).content == "hello"


class TestFromNostrEvent:
    @pytest.fixture
    def mock_nostr_event(self) -> MagicMock:
        """A mock nostr_sdk Event with the SDK accessor chains."""
        mock = MagicMock()
        mock.id.return_value.to_hex.return_value = "a" * 64
        mock.author.return_value.to_hex.return_value = "b" * 64
        mock.created_at.return_value.as_secs.return_value = 1234567890
        mock.kind.return_value.as_u16.return_value = 30023

        tag1 = MagicMock()
        tag1.as_vec.return_value = ["d", "article"]
        tag2 = MagicMock()
        tag2.as_vec.return_value = ["e", "c" * 64, "", "root"]
        mock.tags.return_value.to_vec.return_value = [tag1, tag2]

        mock.content.return_value = "Hello, Nostr!"
        mock.signature.return_value = "f" * 128
        return mock

    def test_fields(self, mock_nostr_event: MagicMock) -> None:
        event = Event.from_nostr_event(mock_nostr_event)
        assert event.id == "a" * 64
        assert event.pubkey == "b" * 64
        assert event.created_at == 1234567890
        assert event.kind == 30023
        assert event.content == "Hello, Nostr!"
        assert event.sig == "f" * 128

    def test_tags(self, mock_nostr_event: MagicMock) -> None:
        event = Event.from_nostr_event(mock_nostr_event)
        assert event.tags == (("d", "article"), ("e", "c" * 64, "", "root"))


class TestDraftEvent:
    def test_defaults(self) -> None:
        draft = DraftEvent(kind=1)
        assert draft.content == ""
        assert draft.tags == ()
        assert draft.created_at > 0

    def test_tags_validated(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            DraftEvent(kind=1, tags=[[]])
