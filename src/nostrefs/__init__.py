r"""nostrefs -- Nostr event tag interpretation and reference resolution.

Derives canonical identity, thread positions (root/reply), inline content
references and address coordinates from Nostr events. Everything is pure
and synchronous: no networking, no signature verification, no caching.

Imports flow strictly downward:

```text
          interpreter        Configured facade (pydantic config, YAML)
               |
             nips            NIP-01/10/18/19/27/65 logic
            /    \
         core    models      Exceptions, logging | frozen dataclasses
```

Attributes:
    models: Frozen dataclasses for events, tags and pointers. Stdlib only.
    core: Exceptions, structured logging, YAML loading.
    nips: Protocol logic, one module per NIP.
    interpreter: [EventInterpreter][nostrefs.interpreter.EventInterpreter].

Note:
    Top-level imports (``from nostrefs import Event``) use lazy loading
    and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("nostrefs")

__all__ = [
    "AddressPointer",
    "DraftEvent",
    "Event",
    "EventInterpreter",
    "EventPointer",
    "EventReferences",
    "InterpreterConfig",
    "Logger",
    "get_event_uid",
    "get_references",
    "interpret_tags",
    "parse_coordinate",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "AddressPointer": ("nostrefs.models", "AddressPointer"),
    "DraftEvent": ("nostrefs.models", "DraftEvent"),
    "Event": ("nostrefs.models", "Event"),
    "EventPointer": ("nostrefs.models", "EventPointer"),
    "EventReferences": ("nostrefs.models", "EventReferences"),
    "Logger": ("nostrefs.core", "Logger"),
    "get_event_uid": ("nostrefs.nips", "get_event_uid"),
    "get_references": ("nostrefs.nips", "get_references"),
    "interpret_tags": ("nostrefs.nips", "interpret_tags"),
    "parse_coordinate": ("nostrefs.nips", "parse_coordinate"),
    "EventInterpreter": ("nostrefs.interpreter", "EventInterpreter"),
    "InterpreterConfig": ("nostrefs.interpreter", "InterpreterConfig"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'nostrefs' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
