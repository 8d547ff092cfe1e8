"""Pydantic configuration schemas for pactum.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Library defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
EnvConfig : class
    Process-environment overrides
"""

from pactum.schemas.resolve import resolve_config
from pactum.schemas.internal import InternalConfig
from pactum.schemas.param import ParamConfig
from pactum.schemas.user import UserConfig
from pactum.schemas.env import EnvConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'EnvConfig',
]
