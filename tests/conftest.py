"""
Pytest configuration and shared fixtures for nostrefs tests.

Provides:
- An ``make_event`` factory for building events with placeholder fields
- Real bech32 identifiers produced with ``nostr_sdk``
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

import pytest
from nostr_sdk import Keys

from nostrefs.models import Event
from nostrefs.nips.nip19 import encode_note_id, encode_npub


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Event Fixtures
# ============================================================================

EventFactory = Callable[..., Event]


@pytest.fixture
def make_event() -> EventFactory:
    """Build an Event, defaulting every field not under test."""

    def _make(
        *,
        kind: int = 1,
        tags: Sequence[Sequence[str]] = (),
        content: str = "",
        pubkey: str = "P",
        created_at: int = 1_700_000_000,
        id: str = "a" * 64,  # noqa: A002
        sig: str = "f" * 128,
    ) -> Event:
        return Event(
            id=id,
            pubkey=pubkey,
            created_at=created_at,
            kind=kind,
            tags=tags,
            content=content,
            sig=sig,
        )

    return _make


@pytest.fixture
def event_dict() -> dict[str, Any]:
    """A NIP-01 event as a JSON-like dictionary."""
    return {
        "id": "a" * 64,
        "pubkey": "b" * 64,
        "created_at": 1_700_000_000,
        "kind": 1,
        "tags": [["e", "c" * 64, "wss://relay.example.com", "root"], ["p", "d" * 64]],
        "content": "hello",
        "sig": "f" * 128,
    }


# ============================================================================
# Bech32 Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def pubkey_hex() -> str:
    """A valid hex public key."""
    return Keys.generate().public_key().to_hex()


@pytest.fixture(scope="session")
def npub(pubkey_hex: str) -> str:
    return encode_npub(pubkey_hex)


@pytest.fixture(scope="session")
def event_id_hex() -> str:
    return "e" * 64


@pytest.fixture(scope="session")
def note(event_id_hex: str) -> str:
    return encode_note_id(event_id_hex)
