"""Contracts: fail-fast enforcement at call boundaries.

This package holds the metadata model and builders, the per-call argument
map, the contract wrapper and the union dispatcher. Contracts fail
immediately and loudly; there is no recovery path inside the library.

Key principle:
- Pydantic validates configuration and metadata shape
- Contracts validate values at call time
- Registered predicates decide what a valid value is
"""

from pactum.contracts.failure import ConfigurationError, ContractViolation, ErrorKind, PactumError
from pactum.contracts.base import require, require_config
from pactum.contracts.arguments import MISSING, build_argument_map
from pactum.contracts.metadata import Metadata
from pactum.contracts.builders import build_from_structured, build_from_tokens, build_metadata
from pactum.contracts.wrapper import Contract, Postcondition, Precondition, has_contract, wrap
from pactum.contracts.union import ContractUnion, noop, union

__all__ = [
    "ConfigurationError",
    "ContractViolation",
    "ErrorKind",
    "PactumError",
    "require",
    "require_config",
    "MISSING",
    "build_argument_map",
    "Metadata",
    "build_from_structured",
    "build_from_tokens",
    "build_metadata",
    "Contract",
    "Precondition",
    "Postcondition",
    "has_contract",
    "wrap",
    "ContractUnion",
    "noop",
    "union",
]
