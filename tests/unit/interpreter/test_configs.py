"""Unit tests for nostrefs.interpreter.configs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from nostrefs.interpreter import InterpreterConfig, LoggingConfig


class TestLoggingConfig:
    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.json_output is False
        assert config.max_value_length == 1000

    def test_max_value_length_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(max_value_length=0)


class TestInterpreterConfig:
    def test_defaults(self) -> None:
        config = InterpreterConfig()
        assert config.repost_kinds == [6]
        assert config.legacy_fallback is True
        assert config.logging == LoggingConfig()

    def test_nested_logging_from_dict(self) -> None:
        config = InterpreterConfig(**{"logging": {"json_output": True}})
        assert config.logging.json_output is True

    def test_custom_repost_kinds(self) -> None:
        assert InterpreterConfig(repost_kinds=[6, 16]).repost_kinds == [6, 16]

    def test_empty_repost_kinds_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not be empty"):
            InterpreterConfig(repost_kinds=[])

    @pytest.mark.parametrize("kind", [-1, 65536])
    def test_out_of_range_repost_kind_rejected(self, kind: int) -> None:
        with pytest.raises(ValidationError, match="out of range"):
            InterpreterConfig(repost_kinds=[6, kind])

    def test_boundary_kinds_accepted(self) -> None:
        assert InterpreterConfig(repost_kinds=[0, 65535]).repost_kinds == [0, 65535]
