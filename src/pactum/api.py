"""Module-level convenience API bound to the process-wide default context.

The registration and lookup functions are guarded by contracts themselves,
so bad arguments raise ContractViolation like any other guarded call. Their
guards resolve against a private registry of stock annotations, which user
registrations cannot override.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from pactum.context import ContractContext, default_context
from pactum.contracts.failure import ConfigurationError
from pactum.contracts.metadata import Metadata
from pactum.schemas import EnvConfig, InternalConfig, UserConfig

_guards = ContractContext()


def _register_many(mapping):
    default_context().register_many(mapping)


def _register_one(name, predicate):
    default_context().register(name, predicate)


def _has_annotation(name):
    return default_context().has(name)


def _build_contract(spec, body):
    return default_context().contract(spec, body)


register = _guards.union(
    ["mapping", "@hash"], _register_many,
    ["name", "@string", "predicate", "@function"], _register_one,
)
register.__doc__ = """Register annotations in the default registry.

Call as ``register(name, predicate)`` or ``register({name: predicate, ...})``.
Existing names are overwritten.
"""

register_many = _guards.contract(["mapping", "@hash"], _register_many)

has_annotation = _guards.contract(["name", "@string", "return", "@bool"], _has_annotation)

_contract = _guards.contract(["spec", "@safe", "body", "@function"], _build_contract)


def contract(spec: Any, body: Optional[Callable] = None) -> Callable:
    """Guard ``body`` with a contract, or return a decorator when ``body`` is omitted.

    Parameters
    ----------
    spec : Metadata, Mapping, list or tuple
        Structured metadata or a shorthand token list.
    body : callable, optional
        The callable to guard.

    Examples
    --------
    >>> @contract(["x", "@number", "return", "@number"])
    ... def double(x):
    ...     return x * 2
    >>> double(21)
    42
    """
    if body is None:
        if callable(spec) and not isinstance(spec, (Metadata, Mapping, list, tuple)):
            raise ConfigurationError(
                "Cannot infer contract metadata from a callable; "
                "use contract(spec)(func) or contract(spec, func)"
            )

        def decorator(func: Callable) -> Callable:
            return _contract(spec, func)
        return decorator
    return _contract(spec, body)


def union(*entries: Any) -> Callable:
    """Dispatching callable over contracts, callables and ``(spec, callable)`` pairs."""
    return default_context().union(*entries)


def configure(
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    env_cfg: Optional[Union[dict, EnvConfig]] = None,
) -> InternalConfig:
    """Reconfigure the default context.

    Environment overrides (``PACTUM_*``) keep precedence unless ``env_cfg``
    is given explicitly.
    """
    if env_cfg is None:
        env_cfg = EnvConfig.from_environ()
    return default_context().configure(user_cfg, env_cfg)
