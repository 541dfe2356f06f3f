"""EventInterpreter configuration models.

See Also:
    [EventInterpreter][nostrefs.interpreter.service.EventInterpreter]: The
        class that consumes these configurations.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from nostrefs.models.constants import EVENT_KIND_MAX, EventKind


class LoggingConfig(BaseModel):
    """Output options for the interpreter's structured logger.

    See Also:
        [Logger][nostrefs.core.logger.Logger]: The logger built from these options.
    """

    json_output: bool = Field(default=False, description="Emit JSON instead of key=value")
    max_value_length: int = Field(
        default=1000,
        ge=1,
        description="Truncate logged values longer than this many characters",
    )


class InterpreterConfig(BaseModel):
    """Configuration for [EventInterpreter][nostrefs.interpreter.service.EventInterpreter].

    Examples:
        ```yaml
        repost_kinds: [6, 16]
        legacy_fallback: true
        logging:
          json_output: false
        ```
    """

    repost_kinds: list[int] = Field(
        default_factory=lambda: [int(EventKind.REPOST)],
        description="Event kinds treated as reposts (never replies)",
    )
    legacy_fallback: bool = Field(
        default=True,
        description="Read unmarked e tags positionally when no marker is present",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("repost_kinds")
    @classmethod
    def repost_kinds_valid(cls, v: list[int]) -> list[int]:
        if not v:
            raise ValueError("repost_kinds must not be empty")
        invalid = [k for k in v if not 0 <= k <= EVENT_KIND_MAX]
        if invalid:
            raise ValueError(f"repost_kinds out of range 0-{EVENT_KIND_MAX}: {invalid}")
        return v
