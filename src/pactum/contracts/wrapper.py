"""Contract wrapper.

A Contract guards one callable body. Every call:

1. builds the argument map from the actual arguments and ``metadata.names``
2. runs preconditions in declared order (parameter order, then per-parameter
   annotation order)
3. calls the body with the original arguments
4. runs postconditions against the return value, in declared order
5. returns the body's result

Annotation names are resolved in the context's registry at call time, so
predicates registered after a contract was built still take effect.
"""

import functools
import logging
import types
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional, Tuple

from pactum.contracts.arguments import MISSING, ArgumentMap, build_argument_map
from pactum.contracts.base import require, require_config
from pactum.contracts.builders import build_metadata
from pactum.contracts.failure import ConfigurationError
from pactum.contracts.metadata import Metadata

if TYPE_CHECKING:
    from pactum.annotations.registry import AnnotationRegistry
    from pactum.context import ContractContext

logger = logging.getLogger(__name__)

CONTRACT_MARKER = "__pactum_contract__"
RETURN_TARGET = "return"


def has_contract(value: Any) -> bool:
    """True if ``value`` is callable and carries the contract marker."""
    return callable(value) and getattr(value, CONTRACT_MARKER, False) is True


def _callable_name(func: Callable) -> str:
    return getattr(func, "__name__", None) or type(func).__name__


def _bare_name(annotation: str, sigil: str) -> str:
    """Registry key for an annotation token, fixed when the contract is built."""
    if annotation.startswith(sigil):
        return annotation[len(sigil):]
    return annotation


@dataclass(frozen=True)
class Precondition:
    """One annotation applied to one parameter."""

    target: str
    annotation: str
    name: str

    def check(self, registry: "AnnotationRegistry", arg_map: ArgumentMap) -> None:
        value = arg_map.get(self.target, MISSING)
        predicate = registry.lookup(self.name)
        if predicate is None:
            raise ConfigurationError(
                f'Annotation {self.annotation}, for parameter "{self.target}", does not exist',
                target=self.target,
                annotation=self.annotation,
            )
        require(
            predicate(value, self.target, arg_map),
            f'Argument for parameter "{self.target}", does not satisfy {self.annotation}: {value!r}',
            target=self.target,
            annotation=self.annotation,
            value=value,
        )


@dataclass(frozen=True)
class Postcondition:
    """One annotation applied to the return value."""

    annotation: str
    name: str

    def check(self, registry: "AnnotationRegistry", retval: Any, arg_map: ArgumentMap) -> None:
        predicate = registry.lookup(self.name)
        if predicate is None:
            raise ConfigurationError(
                f"Annotation {self.annotation}, for return value, does not exist",
                target=RETURN_TARGET,
                annotation=self.annotation,
            )
        require(
            predicate(retval, None, arg_map),
            f"Function return value does not satisfy {self.annotation}: {retval!r}",
            target=RETURN_TARGET,
            annotation=self.annotation,
            value=retval,
        )


@dataclass(frozen=True)
class CustomPrecondition:
    """Arbitrary ``check(arg_map) -> bool`` attached with ``Contract.pre``."""

    func: Callable[[ArgumentMap], Any]

    def check(self, registry: "AnnotationRegistry", arg_map: ArgumentMap) -> None:
        name = _callable_name(self.func)
        require(
            self.func(arg_map),
            f"Arguments do not satisfy precondition {name}",
            annotation=name,
            value=arg_map,
        )


@dataclass(frozen=True)
class CustomPostcondition:
    """Arbitrary ``check(retval, arg_map) -> bool`` attached with ``Contract.post``."""

    func: Callable[[Any, ArgumentMap], Any]

    def check(self, registry: "AnnotationRegistry", retval: Any, arg_map: ArgumentMap) -> None:
        name = _callable_name(self.func)
        require(
            self.func(retval, arg_map),
            f"Function return value does not satisfy postcondition {name}: {retval!r}",
            target=RETURN_TARGET,
            annotation=name,
            value=retval,
        )


class Contract:
    """Guarded callable enforcing ordered pre/postconditions.

    Parameters
    ----------
    metadata : Metadata
        Parameter names and annotation names.
    body : callable
        The wrapped callable.
    context : ContractContext
        Supplies the annotation registry and runtime settings, both read at
        call time.
    preconditions, postconditions : iterable, optional
        Explicit condition sequences. Derived from ``metadata`` when omitted.

    Notes
    -----
    Contracts are immutable; ``pre`` and ``post`` return new contracts.
    """

    __pactum_contract__ = True

    def __init__(self, metadata: Metadata, body: Callable, context: "ContractContext",
                 preconditions: Optional[Iterable] = None,
                 postconditions: Optional[Iterable] = None):
        functools.update_wrapper(self, body, updated=())
        self.metadata = metadata
        self.body = body
        self.context = context

        sigil = context.config.annotation_sigil
        if preconditions is None:
            preconditions = [
                Precondition(name, annotation, _bare_name(annotation, sigil))
                for name in metadata.names
                for annotation in metadata.annotations_for(name)
            ]
        if postconditions is None:
            postconditions = [
                Postcondition(annotation, _bare_name(annotation, sigil))
                for annotation in metadata.retval
            ]

        self.preconditions: Tuple = tuple(preconditions)
        self.postconditions: Tuple = tuple(postconditions)

    def __call__(self, *args, **kwargs):
        if not self.context.config.enforce:
            return self.body(*args, **kwargs)

        arg_map = self.argument_map(args, kwargs)
        self.check_preconditions(arg_map)
        retval = self.body(*args, **kwargs)
        self.check_postconditions(retval, arg_map)
        return retval

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __repr__(self) -> str:
        return f"<Contract {_callable_name(self.body)} {self.metadata.to_tokens()}>"

    def argument_map(self, args: tuple, kwargs: dict) -> ArgumentMap:
        """Argument map for one call of this contract."""
        return build_argument_map(self.metadata.names, args, kwargs)

    def check_preconditions(self, arg_map: ArgumentMap) -> None:
        """Run every precondition in declared order; first failure raises."""
        registry = self.context.registry
        for condition in self.preconditions:
            condition.check(registry, arg_map)

    def check_postconditions(self, retval: Any, arg_map: ArgumentMap) -> None:
        """Run every postcondition in declared order; first failure raises."""
        registry = self.context.registry
        for condition in self.postconditions:
            condition.check(registry, retval, arg_map)

    def pre(self, check: Callable[[ArgumentMap], Any]) -> "Contract":
        """Return a new contract with ``check(arg_map)`` appended to the preconditions."""
        require_config(callable(check), f"Precondition must be callable, got {check!r}")
        return Contract(
            self.metadata, self.body, self.context,
            self.preconditions + (CustomPrecondition(check),),
            self.postconditions,
        )

    def post(self, check: Callable[[Any, ArgumentMap], Any]) -> "Contract":
        """Return a new contract with ``check(retval, arg_map)`` appended to the postconditions."""
        require_config(callable(check), f"Postcondition must be callable, got {check!r}")
        return Contract(
            self.metadata, self.body, self.context,
            self.preconditions,
            self.postconditions + (CustomPostcondition(check),),
        )


def wrap(spec: Any, body: Callable, context: Optional["ContractContext"] = None) -> Callable:
    """Wrap ``body`` in a contract described by ``spec``.

    Parameters
    ----------
    spec : Metadata, Mapping, list or tuple
        Metadata, its structured mapping form, or a shorthand token list.
    body : callable
        The callable to guard. If it already carries a contract it is
        returned unchanged.
    context : ContractContext, optional
        Registry and settings holder. Defaults to the process-wide context.

    Returns
    -------
    callable
        A ``Contract`` (or ``body`` itself when already contracted).

    Raises
    ------
    ConfigurationError
        If ``body`` is not callable or ``spec`` is malformed.
    """
    if has_contract(body):
        return body
    require_config(callable(body), f"Contract body must be callable, got {body!r}")

    if context is None:
        from pactum.context import default_context
        context = default_context()

    metadata = build_metadata(
        spec,
        sigil=context.config.annotation_sigil,
        return_token=context.config.return_token,
    )
    contract = Contract(metadata, body, context)
    logger.debug(
        "Built contract for %s: %d preconditions, %d postconditions",
        _callable_name(body), len(contract.preconditions), len(contract.postconditions),
    )
    return contract
