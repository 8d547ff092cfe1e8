"""EnvConfig: process-environment overrides.

Operational switches that commonly change between runs without touching
code: turning wrapping or checking off, and verbosity. Highest priority in
config resolution.
"""

from typing import Literal, Mapping, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PREFIX = "PACTUM_"


class EnvConfig(BaseSettings):
    """Environment variable overrides.

    Reads ``PACTUM_ENABLED``, ``PACTUM_ENFORCE`` and ``PACTUM_LOG_LEVEL``.
    Boolean values accept the usual pydantic spellings ("1", "true",
    "off", ...). Blank variables count as unset.

    Usage
    -----
        env_cfg = EnvConfig.from_environ()
        internal = resolve_config(param_cfg, user_cfg, env_cfg)
    """

    enabled: Optional[bool] = None
    enforce: Optional[bool] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("enabled", "enforce", "log_level", mode="before")
    @classmethod
    def blank_is_unset(cls, v):
        if isinstance(v, str):
            return v.strip() or None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "EnvConfig":
        """Build EnvConfig from ``os.environ``, or from an explicit mapping.

        An explicit mapping is read instead of the process environment, so
        callers (and tests) control exactly which variables are seen.
        """
        if environ is None:
            return cls()
        values = {
            key[len(ENV_PREFIX):].lower(): value
            for key, value in environ.items()
            if key.upper().startswith(ENV_PREFIX)
        }
        return cls.model_validate(values)

    @classmethod
    def empty(cls) -> "EnvConfig":
        """An EnvConfig with no overrides, ignoring the process environment."""
        return cls.model_validate({})

    def to_internal_overrides(self) -> dict:
        """Convert environment config to internal config structure."""
        overrides = {}

        if self.enabled is not None:
            overrides["enabled"] = self.enabled
        if self.enforce is not None:
            overrides["enforce"] = self.enforce
        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
