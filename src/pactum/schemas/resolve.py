"""Configuration resolution and merging logic.

Single entrypoint: resolve_config(). It merges ParamConfig, UserConfig and
EnvConfig in precedence order and returns a validated InternalConfig.

Precedence (highest to lowest):
1. EnvConfig (process environment)
2. UserConfig (explicit overrides from code)
3. ParamConfig (library defaults)
"""

from typing import Optional, Union
from pactum.schemas.param import ParamConfig
from pactum.schemas.user import UserConfig
from pactum.schemas.env import EnvConfig
from pactum.schemas.internal import InternalConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Deep merge multiple dictionaries.

    Later dictionaries override earlier ones. Nested dictionaries are
    merged recursively; other values are replaced.

    Examples
    --------
    >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
    {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result = base.copy()

    for override in overrides:
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            else:
                result[key] = value

    return result


def resolve_config(
    param_cfg: Union[dict, ParamConfig, None] = None,
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    env_cfg: Optional[Union[dict, EnvConfig]] = None,
) -> InternalConfig:
    """Resolve final runtime configuration from param, user and env configs.

    Parameters
    ----------
    param_cfg : dict or ParamConfig, optional
        Library defaults. ``None`` means ``ParamConfig()``.
    user_cfg : dict or UserConfig, optional
        Explicit overrides. If None or empty, no user overrides applied.
    env_cfg : dict or EnvConfig, optional
        Environment overrides. If None or empty, no environment overrides
        applied. Pass ``EnvConfig.from_environ()`` to honour ``PACTUM_*``
        variables.

    Returns
    -------
    InternalConfig
        Fully validated, immutable runtime configuration

    Raises
    ------
    ValidationError
        If any layer fails Pydantic validation

    Examples
    --------
    >>> config = resolve_config(ParamConfig(), UserConfig(ENFORCE=False))
    >>> config.enforce
    False
    """
    if param_cfg is None:
        param = ParamConfig()
    elif not isinstance(param_cfg, ParamConfig):
        param = ParamConfig.model_validate(param_cfg)
    else:
        param = param_cfg

    if user_cfg is None or (isinstance(user_cfg, dict) and not user_cfg):
        user = UserConfig()
    elif not isinstance(user_cfg, UserConfig):
        user = UserConfig.model_validate(user_cfg)
    else:
        user = user_cfg

    if env_cfg is None or (isinstance(env_cfg, dict) and not env_cfg):
        env = EnvConfig.empty()
    elif not isinstance(env_cfg, EnvConfig):
        env = EnvConfig.model_validate(env_cfg)
    else:
        env = env_cfg

    merged = deep_merge(
        param.model_dump(),
        user.to_internal_overrides(),
        env.to_internal_overrides(),
    )

    return InternalConfig.model_validate(merged)
