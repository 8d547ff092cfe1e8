"""InternalConfig: authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully
validated, frozen, and contains no optional fields.
"""

from typing import Literal
from pydantic import ConfigDict, Field
from pactum.schemas.base import PactumBaseModel


class InternalLoggingConfig(PactumBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = ConfigDict(extra='forbid', frozen=True)


class InternalConfig(PactumBaseModel):
    """Authoritative runtime configuration.

    Runtime modules access fields directly:

        if context.config.enforce:
            ...

    No .get() calls and no fallback defaults in runtime code; all of that
    happens during config resolution.
    """

    enabled: bool
    enforce: bool
    annotation_sigil: str = Field(min_length=1, max_length=1)
    return_token: str = Field(min_length=1)
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
