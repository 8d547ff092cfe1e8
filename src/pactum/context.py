"""Runtime context: one annotation registry plus one resolved configuration.

Contracts hold a reference to the context that built them and read its
registry and settings on every call. The process-wide default context is
created on first use, populated with the stock annotations and configured
from the ``PACTUM_*`` environment variables.
"""

import logging
import threading
from typing import Any, Callable, Mapping, Optional, Union

from pactum.annotations.registry import Annotation, AnnotationRegistry
from pactum.contracts.builders import build_from_structured, build_from_tokens, build_metadata
from pactum.contracts.metadata import Metadata
from pactum.contracts.union import union
from pactum.contracts.wrapper import has_contract, wrap
from pactum.schemas import EnvConfig, InternalConfig, ParamConfig, UserConfig, resolve_config

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "pactum"


class ContractContext:
    """Explicit handle on a registry and its runtime configuration.

    Parameters
    ----------
    registry : AnnotationRegistry, optional
        Defaults to a fresh registry with the stock annotations.
    config : InternalConfig, optional
        Defaults to ``resolve_config(ParamConfig())``.

    Examples
    --------
    >>> ctx = ContractContext()
    >>> ctx.register("even", lambda value: value % 2 == 0)
    >>> half = ctx.contract(["n", "@integer", "@even", "return", "@integer"], lambda n: n // 2)
    >>> half(10)
    5
    """

    def __init__(self, registry: Optional[AnnotationRegistry] = None,
                 config: Optional[InternalConfig] = None):
        self.config = config if config is not None else resolve_config(ParamConfig())
        if registry is None:
            registry = AnnotationRegistry.with_builtins(sigil=self.config.annotation_sigil)
        self.registry = registry

    def configure(
        self,
        user_cfg: Optional[Union[dict, UserConfig]] = None,
        env_cfg: Optional[Union[dict, EnvConfig]] = None,
        param_cfg: Optional[Union[dict, ParamConfig]] = None,
    ) -> InternalConfig:
        """Resolve and install a new configuration (Param < User < Env).

        Existing contracts built from this context see the new settings on
        their next call. A new sigil applies to metadata built afterwards;
        existing contracts keep the annotation names they were built with.
        """
        config = resolve_config(param_cfg, user_cfg, env_cfg)
        self.config = config
        self.registry.set_sigil(config.annotation_sigil)
        self.apply_logging_config()
        logger.debug("Context reconfigured: enabled=%s, enforce=%s", config.enabled, config.enforce)
        return config

    def apply_logging_config(self) -> None:
        """Set the ``pactum`` package logger level from the configuration."""
        logging.getLogger(PACKAGE_LOGGER).setLevel(self.config.logging.level)

    # Registry -------------------------------------------------------------

    def register(self, name: str, predicate: Callable) -> None:
        self.registry.register(name, predicate)

    def register_many(self, mapping: Mapping) -> None:
        self.registry.register_many(mapping)

    def has(self, name: str) -> bool:
        return self.registry.has(name)

    def resolve(self, name: str) -> Optional[Annotation]:
        return self.registry.resolve(name)

    # Metadata -------------------------------------------------------------

    def build_from_structured(self, data: Any) -> Metadata:
        return build_from_structured(data)

    def build_from_tokens(self, tokens: Any) -> Metadata:
        return build_from_tokens(
            tokens,
            sigil=self.config.annotation_sigil,
            return_token=self.config.return_token,
        )

    def build_metadata(self, spec: Any) -> Metadata:
        return build_metadata(
            spec,
            sigil=self.config.annotation_sigil,
            return_token=self.config.return_token,
        )

    # Contracts ------------------------------------------------------------

    def contract(self, spec: Any, body: Optional[Callable] = None) -> Callable:
        """Guard ``body`` with the contract described by ``spec``.

        Without ``body`` this returns a decorator. When the context is
        disabled (``enabled=False``) the body is returned unwrapped.
        """
        if body is None:
            def decorator(func: Callable) -> Callable:
                return self.contract(spec, func)
            return decorator

        if not self.config.enabled:
            return body
        return wrap(spec, body, self)

    def union(self, *entries: Any) -> Callable:
        """Dispatching callable over ``entries``; see ``pactum.contracts.union``."""
        return union(*entries, context=self)

    @staticmethod
    def has_contract(value: Any) -> bool:
        return has_contract(value)


_default_context: Optional[ContractContext] = None
_default_lock = threading.Lock()


def default_context() -> ContractContext:
    """The process-wide context, created on first use."""
    global _default_context
    with _default_lock:
        if _default_context is None:
            config = resolve_config(ParamConfig(), None, EnvConfig.from_environ())
            _default_context = ContractContext(config=config)
            _default_context.apply_logging_config()
            logger.info(
                "Default contract context initialized: %d annotations, enabled=%s, enforce=%s",
                len(_default_context.registry), config.enabled, config.enforce,
            )
        return _default_context


def reset_default_context(context: Optional[ContractContext] = None) -> ContractContext:
    """Replace the process-wide context (a fresh one when ``context`` is None).

    Contracts built earlier keep the context they were built with.
    """
    global _default_context
    with _default_lock:
        _default_context = context
    return default_context()
