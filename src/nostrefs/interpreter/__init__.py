"""Configured event interpreter.

Attributes:
    EventInterpreter: Facade applying one configuration to the NIP functions.
    InterpreterConfig: Pydantic configuration, loadable from YAML.
"""

from .configs import InterpreterConfig, LoggingConfig
from .service import EventInterpreter


__all__ = [
    "EventInterpreter",
    "InterpreterConfig",
    "LoggingConfig",
]
