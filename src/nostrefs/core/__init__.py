"""Core layer: exceptions, structured logging and YAML configuration loading.

Depends only on the standard library and PyYAML, and is used by
``nostrefs.nips`` and ``nostrefs.interpreter``.

Attributes:
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][nostrefs.core.logger.Logger].
    NostrefsError: Root of the exception hierarchy.
        See [nostrefs.core.exceptions][].
    load_yaml: Safe YAML loading. See [load_yaml()][nostrefs.core.yaml.load_yaml].
"""

from .exceptions import (
    AddressPointerError,
    ConfigurationError,
    CoordinateError,
    MissingComponentError,
    MissingIdentifierError,
    NostrefsError,
    NotReplaceableError,
    ProtocolError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs, setup_logging
from .yaml import load_yaml


__all__ = [
    "AddressPointerError",
    "ConfigurationError",
    "CoordinateError",
    "Logger",
    "MissingComponentError",
    "MissingIdentifierError",
    "NostrefsError",
    "NotReplaceableError",
    "ProtocolError",
    "StructuredFormatter",
    "format_kv_pairs",
    "load_yaml",
    "setup_logging",
]
