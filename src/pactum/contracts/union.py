"""Contract union: dispatch over an ordered list of candidates.

Candidates are tried in declared order. An uncontracted candidate always
matches. A contracted candidate matches when all its preconditions pass;
the first match runs its body and postconditions and returns. When every
candidate fails, the violation from the highest-position candidate is
raised. Non-contract errors propagate immediately.
"""

import logging
import types
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence, Tuple

from pactum.contracts.base import require_config
from pactum.contracts.failure import ConfigurationError, ContractViolation
from pactum.contracts.metadata import Metadata
from pactum.contracts.wrapper import has_contract, wrap

if TYPE_CHECKING:
    from pactum.context import ContractContext

logger = logging.getLogger(__name__)

_SPEC_TYPES = (Metadata, Mapping, list, tuple)


def noop(*args, **kwargs) -> None:
    """Union of zero candidates: accepts anything, does nothing."""
    return None


def _unbind(candidate: Callable, args: tuple) -> Tuple[Callable, tuple]:
    """Split a bound contract into the Contract and its full argument tuple."""
    if isinstance(candidate, types.MethodType):
        return candidate.__func__, (candidate.__self__,) + args
    return candidate, args


class ContractUnion:
    """Ordered, immutable set of candidates with trial-and-error dispatch.

    Parameters
    ----------
    candidates : sequence of callables
        Contracts and/or plain callables. Order is both the trial order and
        the tie-break order for failure reporting.
    """

    def __init__(self, candidates: Sequence[Callable]):
        self.candidates = tuple(candidates)

    def __call__(self, *args, **kwargs):
        return self.dispatch(args, kwargs)

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __repr__(self) -> str:
        return f"<ContractUnion of {len(self.candidates)} candidates>"

    def dispatch(self, args: tuple, kwargs: dict) -> Any:
        """Select and invoke the first candidate whose preconditions pass.

        Raises
        ------
        ContractViolation
            From the highest-position candidate, when no candidate matches.
        """
        violation: Optional[ContractViolation] = None
        violation_rank = -1

        for position, candidate in enumerate(self.candidates):
            if not has_contract(candidate):
                return candidate(*args, **kwargs)

            candidate, call_args = _unbind(candidate, args)
            arg_map = candidate.argument_map(call_args, kwargs)
            try:
                candidate.check_preconditions(arg_map)
            except ContractViolation as exc:
                logger.debug("Union candidate #%d rejected: %s", position, exc)
                if position > violation_rank:
                    violation = exc
                    violation_rank = position
                continue

            retval = candidate.body(*call_args, **kwargs)
            if candidate.context.config.enforce:
                candidate.check_postconditions(retval, arg_map)
            return retval

        if violation is not None:
            raise violation
        return None


def union(*entries: Any, context: Optional["ContractContext"] = None) -> Callable:
    """Build a dispatching callable from contracts, callables and spec pairs.

    Entries may be:

    - a callable (contracted or plain), added as-is
    - a spec (Metadata, metadata mapping, or token list/tuple) immediately
      followed by a callable; the pair is wrapped into a Contract

    Returns
    -------
    callable
        ``noop`` for zero entries, the single candidate for one entry, and a
        ``ContractUnion`` otherwise.

    Raises
    ------
    ConfigurationError
        If a spec is not followed by a callable, or an entry is neither a
        spec nor a callable.

    Examples
    --------
    >>> add = union(
    ...     ["a", "@number", "b", "@number", "return", "@number"], lambda a, b: a + b,
    ...     ["a", "@string", "b", "@string", "return", "@string"], lambda a, b: a + b,
    ... )
    >>> add(42, 69), add("foo", "bar")
    (111, 'foobar')
    """
    if not entries:
        return noop

    if context is None:
        from pactum.context import default_context
        context = default_context()

    candidates: List[Callable] = []
    index = 0
    while index < len(entries):
        entry = entries[index]
        if isinstance(entry, _SPEC_TYPES):
            require_config(
                index + 1 < len(entries) and callable(entries[index + 1]),
                f"Expected callable after argument #{index}",
            )
            candidates.append(wrap(entry, entries[index + 1], context))
            index += 2
        elif callable(entry):
            candidates.append(entry)
            index += 1
        else:
            raise ConfigurationError(f"Invalid argument for contract union: {entry!r}")

    if len(candidates) == 1:
        return candidates[0]

    logger.debug("Built contract union of %d candidates", len(candidates))
    return ContractUnion(candidates)
