"""ParamConfig: library defaults for pactum.

Every tunable setting has its default here. Runtime code never reads
ParamConfig directly; it only receives InternalConfig.
"""

from typing import Literal
from pydantic import Field, field_validator
from pactum.schemas.base import PactumBaseModel


class LoggingConfig(PactumBaseModel):
    """Logging configuration for the ``pactum`` logger."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper().strip()
        return v


class ParamConfig(PactumBaseModel):
    """Complete default configuration.

    This is the base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, env_cfg)

    Fields
    ------
    enabled
        When False, ``ContractContext.contract`` returns bodies unwrapped.
    enforce
        When False, contracts call their body without running checks.
    annotation_sigil
        Leading character marking an annotation token (``@number``).
    return_token
        Token naming the return-value target in shorthand metadata.
    """

    enabled: bool = True
    enforce: bool = True
    annotation_sigil: str = Field("@", min_length=1, max_length=1)
    return_token: str = Field("return", min_length=1)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
