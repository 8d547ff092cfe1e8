"""UserConfig: forgiving, minimal user-facing configuration.

Accepts both lowercase field names and uppercase aliases (ENABLED,
ENFORCE, SIGIL, RETURN_TOKEN, LOG_LEVEL). Users only specify what they want
to override from ParamConfig defaults; unknown keys are ignored.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from pactum.schemas.base import PactumBaseModel


class UserConfig(PactumBaseModel):
    """User-facing configuration schema.

    Usage
    -----
        user_cfg = UserConfig(ENFORCE=False, LOG_LEVEL="debug")
        internal = resolve_config(param_cfg, user_cfg)
    """

    enabled: Optional[bool] = Field(None, alias="ENABLED")
    enforce: Optional[bool] = Field(None, alias="ENFORCE")
    annotation_sigil: Optional[str] = Field(None, alias="SIGIL", min_length=1, max_length=1)
    return_token: Optional[str] = Field(None, alias="RETURN_TOKEN", min_length=1)
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        None, alias="LOG_LEVEL"
    )

    model_config = PactumBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert UserConfig to the nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.enabled is not None:
            overrides["enabled"] = self.enabled
        if self.enforce is not None:
            overrides["enforce"] = self.enforce
        if self.annotation_sigil is not None:
            overrides["annotation_sigil"] = self.annotation_sigil
        if self.return_token is not None:
            overrides["return_token"] = self.return_token
        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
