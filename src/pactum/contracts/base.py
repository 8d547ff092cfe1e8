"""Base contract enforcement utilities.

``require`` and ``require_config`` are the single raising points used by
the wrapper, the builders and the union parser.
"""

from typing import Any, Optional

from pactum.contracts.failure import ConfigurationError, ContractViolation


def require(condition: bool, message: str, target: Optional[str] = None,
            annotation: Optional[str] = None, value: Any = None) -> None:
    """Enforce a call-boundary contract.

    Parameters
    ----------
    condition : bool
        The invariant that must be true. If False, ContractViolation is raised.
    message : str
        Human-readable description of the violation.
    target, annotation, value : optional
        Structured detail attached to the raised violation.

    Raises
    ------
    ContractViolation
        If condition is False.

    Examples
    --------
    >>> require(isinstance(x, int), 'Argument for parameter "x", does not satisfy @number: 1.5',
    ...         target="x", annotation="@number", value=x)
    """
    if not condition:
        raise ContractViolation(message, target=target, annotation=annotation, value=value)


def require_config(condition: bool, message: str, target: Optional[str] = None,
                   annotation: Optional[str] = None) -> None:
    """Enforce a configuration invariant.

    Raises
    ------
    ConfigurationError
        If condition is False. This indicates a programming mistake.
    """
    if not condition:
        raise ConfigurationError(message, target=target, annotation=annotation)
