"""Configured facade over the NIP interpretation functions.

[EventInterpreter][nostrefs.interpreter.service.EventInterpreter] applies one
[InterpreterConfig][nostrefs.interpreter.configs.InterpreterConfig] to every
call, so collaborators (thread views, reply composers, event stores) share
the same repost kinds and legacy-tag policy without threading options
through each call site.

The interpreter holds no state besides its configuration and logger. Every
method builds its result from scratch, so one instance can be shared across
threads.

Examples:
    ```python
    from nostrefs.interpreter import EventInterpreter

    interpreter = EventInterpreter.from_dict({"repost_kinds": [6, 16]})
    refs = interpreter.get_references(event)
    if refs.reply:
        fetch(refs.reply.e or refs.reply.a)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Self

from pydantic import ValidationError

from nostrefs.core.exceptions import ConfigurationError
from nostrefs.core.logger import Logger
from nostrefs.core.yaml import load_yaml
from nostrefs.nips import nip01, nip10, nip18, nip27, nip65

from .configs import InterpreterConfig


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from nostrefs.models.event import DraftEvent, Event
    from nostrefs.models.pointers import EventReferences, RelayConfig, ThreadTags


class EventInterpreter:
    """Interprets events with a fixed configuration.

    Attributes:
        NAME: Logger name used for the interpreter's own log events.
    """

    NAME: ClassVar[str] = "interpreter"

    def __init__(self, config: InterpreterConfig | None = None) -> None:
        self._config = config or InterpreterConfig()
        self._repost_kinds = frozenset(self._config.repost_kinds)
        self._logger = Logger(
            self.NAME,
            json_output=self._config.logging.json_output,
            max_value_length=self._config.logging.max_value_length,
        )

    @property
    def config(self) -> InterpreterConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create an interpreter from a configuration dictionary.

        Raises:
            ConfigurationError: If *data* does not validate against
                [InterpreterConfig][nostrefs.interpreter.configs.InterpreterConfig].
        """
        try:
            config = InterpreterConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid interpreter config: {e}") from e
        return cls(config)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Create an interpreter from a YAML configuration file.

        Raises:
            ConfigurationError: If the file is missing, malformed, or invalid.
        """
        return cls.from_dict(load_yaml(config_path))

    # -------------------------------------------------------------------------
    # Threads
    # -------------------------------------------------------------------------

    def interpret_tags(self, event: Event | DraftEvent) -> ThreadTags:
        return nip10.interpret_tags(event, legacy_fallback=self._config.legacy_fallback)

    def get_references(self, event: Event | DraftEvent) -> EventReferences:
        refs = nip10.get_references(event, legacy_fallback=self._config.legacy_fallback)
        self._logger.debug(
            "references_resolved",
            kind=event.kind,
            root=refs.root is not None,
            reply=refs.reply is not None,
        )
        return refs

    def is_reply(self, event: Event | DraftEvent) -> bool:
        return nip10.is_reply(
            event,
            repost_kinds=self._repost_kinds,
            legacy_fallback=self._config.legacy_fallback,
        )

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def is_repost(self, event: Event | DraftEvent) -> bool:
        return nip18.is_repost(event, self._repost_kinds)

    def is_mentioned_in_content(self, event: Event | DraftEvent, pubkey: str) -> bool:
        return nip27.is_mentioned_in_content(event, pubkey)

    def get_content_tag_refs(self, event: Event | DraftEvent) -> list[Sequence[str]]:
        return nip27.get_content_tag_refs(event.content, event.tags)

    def parse_embedded_event(self, event: Event | DraftEvent) -> Event | None:
        """Decode the event embedded in a repost's content, if any."""
        embedded = nip18.parse_hardcoded_note_content(event)
        if embedded is None and event.kind in self._repost_kinds and event.content:
            self._logger.debug("embedded_event_unreadable", kind=event.kind)
        return embedded

    def relay_configs(self, event: Event | DraftEvent) -> list[RelayConfig]:
        return nip65.get_relay_configs(event)

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def get_event_uid(self, event: Event) -> str:
        return nip01.get_event_uid(event)

    def unique_events(self, events: Iterable[Event]) -> list[Event]:
        """Collapse events sharing a UID, keeping the newest of each.

        For replaceable events this keeps only the latest version of each
        coordinate; regular events are de-duplicated by id. Of two versions
        with the same ``created_at`` the first seen wins.

        Returns:
            A new list, newest first.
        """
        latest: dict[str, Event] = {}
        total = 0
        for event in events:
            total += 1
            uid = nip01.get_event_uid(event)
            current = latest.get(uid)
            if current is None or event.created_at > current.created_at:
                latest[uid] = event

        self._logger.debug("events_deduplicated", total=total, unique=len(latest))
        return nip01.sort_events_by_date(latest.values())
