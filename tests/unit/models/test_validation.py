"""Tests for nostrefs.models._validation shared helpers."""

from __future__ import annotations

import pytest

from nostrefs.models._validation import (
    freeze_relays,
    freeze_tags,
    validate_instance,
    validate_non_negative_int,
    validate_str,
)


class TestValidateInstance:
    def test_correct_type_passes(self) -> None:
        validate_instance("hello", str, "field")

    def test_wrong_type_raises(self) -> None:
        with pytest.raises(TypeError, match="field must be a str, got int"):
            validate_instance(42, str, "field")

    def test_article_an_for_vowel(self) -> None:
        with pytest.raises(TypeError, match="field must be an int"):
            validate_instance("x", int, "field")


class TestValidateNonNegativeInt:
    def test_zero_accepted(self) -> None:
        validate_non_negative_int(0, "kind")

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="kind must be non-negative"):
            validate_non_negative_int(-1, "kind")

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="kind must be an int, got bool"):
            validate_non_negative_int(False, "kind")

    def test_float_rejected(self) -> None:
        with pytest.raises(TypeError, match="kind must be an int, got float"):
            validate_non_negative_int(1.0, "kind")


class TestValidateStr:
    def test_empty_string_passes(self) -> None:
        validate_str("", "field")

    def test_none_rejected(self) -> None:
        with pytest.raises(TypeError, match="field must be a str, got NoneType"):
            validate_str(None, "field")


class TestFreezeTags:
    def test_lists_become_tuples(self) -> None:
        assert freeze_tags([["e", "x"], ("p", "y")]) == (("e", "x"), ("p", "y"))

    def test_empty_list(self) -> None:
        assert freeze_tags([]) == ()

    def test_dict_rejected(self) -> None:
        with pytest.raises(TypeError, match="tags must be a sequence, got dict"):
            freeze_tags({"e": "x"})

    def test_empty_tag_rejected(self) -> None:
        with pytest.raises(ValueError, match=r"tags\[0\] must not be empty"):
            freeze_tags([()])


class TestFreezeRelays:
    def test_list_becomes_tuple(self) -> None:
        assert freeze_relays(["wss://a", "wss://b"]) == ("wss://a", "wss://b")

    def test_non_string_relay_rejected(self) -> None:
        with pytest.raises(TypeError, match="relays value must be a str"):
            freeze_relays([1])
