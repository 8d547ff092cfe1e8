"""`pactum` - runtime contracts for Python callables.

Wraps callables so that every call is checked against named argument and
return-value predicates ("annotations"), and dispatches between several
guarded callables by contract satisfaction.

Subpackages:
- contracts: metadata, builders, wrapper, union dispatch, error kinds
- annotations: predicate registry and stock annotations
- schemas: layered pydantic configuration

Examples
--------
>>> import pactum
>>> add = pactum.union(
...     ["a", "@number", "b", "@number", "return", "@number"], lambda a, b: a + b,
...     ["a", "@string", "b", "@string", "return", "@string"], lambda a, b: a + b,
... )
>>> add(42, 69)
111
"""

from pactum.contracts import (
    MISSING,
    ConfigurationError,
    Contract,
    ContractUnion,
    ContractViolation,
    ErrorKind,
    Metadata,
    PactumError,
    build_from_structured,
    build_from_tokens,
    has_contract,
)
from pactum.annotations import Annotation, AnnotationRegistry
from pactum.context import ContractContext, default_context, reset_default_context
from pactum.api import configure, contract, has_annotation, register, register_many, union

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "ConfigurationError",
    "Contract",
    "ContractUnion",
    "ContractViolation",
    "ErrorKind",
    "Metadata",
    "PactumError",
    "build_from_structured",
    "build_from_tokens",
    "has_contract",
    "Annotation",
    "AnnotationRegistry",
    "ContractContext",
    "default_context",
    "reset_default_context",
    "configure",
    "contract",
    "has_annotation",
    "register",
    "register_many",
    "union",
]
