"""nostrefs exception hierarchy.

Typed exceptions for contract violations and configuration problems.
Parsing of untrusted text (content links, embedded JSON, coordinates in
silent mode) never raises; these exceptions are reserved for callers that
ask for strict behavior or request something the event cannot provide.

Exception hierarchy:

```text
NostrefsError (base -- never raised directly)
├── ConfigurationError           -- invalid interpreter config or YAML
└── ProtocolError                -- NIP contract violations
    ├── CoordinateError
    │   └── MissingComponentError -- strict coordinate parse, field missing
    └── AddressPointerError
        ├── NotReplaceableError   -- kind is not replaceable
        └── MissingIdentifierError -- replaceable event without "d" tag
```

See Also:
    [parse_coordinate()][nostrefs.nips.nip01.parse_coordinate]: Raises
        [MissingComponentError][nostrefs.core.exceptions.MissingComponentError]
        when called with ``silent=False``.
    [get_event_address_pointer()][nostrefs.nips.nip01.get_event_address_pointer]:
        Raises the [AddressPointerError][nostrefs.core.exceptions.AddressPointerError]
        subclasses.
"""

from __future__ import annotations


class NostrefsError(Exception):
    """Base exception for all nostrefs errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(NostrefsError):
    """Invalid or missing configuration (YAML file, config dictionary).

    See Also:
        [load_yaml()][nostrefs.core.yaml.load_yaml]: YAML loading function.
        [EventInterpreter.from_dict()][nostrefs.interpreter.service.EventInterpreter.from_dict]:
            Wraps pydantic validation failures in this exception.
    """


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


class ProtocolError(NostrefsError):
    """NIP contract violation."""


class CoordinateError(ProtocolError):
    """Base for coordinate (``kind:pubkey:identifier``) parsing errors."""


class MissingComponentError(CoordinateError):
    """A required coordinate component is missing or malformed.

    Attributes:
        field: Name of the missing component: ``kind``, ``pubkey`` or
            ``identifier``.
    """

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing {field}")
        self.field = field


class AddressPointerError(ProtocolError):
    """Base for failures deriving an address pointer from an event."""


class NotReplaceableError(AddressPointerError):
    """An address pointer was requested for a non-replaceable kind.

    Attributes:
        kind: The offending event kind.
    """

    def __init__(self, kind: int) -> None:
        super().__init__(f"Event kind {kind} is not replaceable")
        self.kind = kind


class MissingIdentifierError(AddressPointerError):
    """An address pointer was requested for an event without a ``d`` tag."""

    def __init__(self) -> None:
        super().__init__("Missing identifier")
