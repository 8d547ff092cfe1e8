"""Root-level pytest fixtures for the pactum test suite.

Provides shared configuration, registry and context fixtures. Tests build
their own ContractContext from these rather than touching the process-wide
default context; tests that exercise the module-level API use
``default_ctx``, which swaps in a fresh default context and restores the
previous one afterwards.
"""

import logging

import pytest

from pactum.annotations import AnnotationRegistry
from pactum.context import PACKAGE_LOGGER, ContractContext, default_context, reset_default_context
from pactum.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Library defaults.

    Use this as the base for all test configs. Override specific values
    with ``make_config``.
    """
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Returns a callable that accepts UserConfig-compatible kwargs.

    Examples
    --------
    >>> def test_checks_off(make_config):
    ...     config = make_config(ENFORCE=False)
    ...     assert config.enforce is False
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            user = UserConfig(**user_overrides)
            return resolve_config(param_config, user, None)
        else:
            return resolve_config(param_config, None, None)

    return _make


# =============================================================================
# Registry / Context Fixtures
# =============================================================================

@pytest.fixture
def registry():
    """Fresh registry holding only the stock annotations."""
    return AnnotationRegistry.with_builtins()


@pytest.fixture
def context(registry, internal_config):
    """Isolated context with default settings."""
    return ContractContext(registry=registry, config=internal_config)


@pytest.fixture
def make_context(make_config):
    """Factory for isolated contexts with user overrides."""
    def _make(**user_overrides):
        config = make_config(**user_overrides)
        return ContractContext(
            registry=AnnotationRegistry.with_builtins(sigil=config.annotation_sigil),
            config=config,
        )

    return _make


@pytest.fixture
def default_ctx():
    """Fresh process-wide context, restored after the test."""
    previous = default_context()
    ctx = reset_default_context(ContractContext())
    yield ctx
    reset_default_context(previous)


@pytest.fixture
def package_logger():
    """The ``pactum`` logger, with its level restored after the test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield logger
    logger.setLevel(level)
