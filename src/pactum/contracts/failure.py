"""Centralized error kinds for contract enforcement.

Two failure kinds exist and are never conflated. Both carry an explicit
``kind`` tag so callers can branch on it, and both are distinct classes so
callers can catch them separately.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Tag carried by every pactum error.

    CONTRACT: a predicate evaluated false against an actual value.
    CONFIGURATION: the metadata itself is invalid (unknown annotation,
    malformed builder input, bad union arguments).
    """
    CONTRACT = "contract"
    CONFIGURATION = "configuration"


class PactumError(Exception):
    """Base class for all errors raised by pactum."""

    kind: ErrorKind


class ContractViolation(PactumError, RuntimeError):
    """Raised when a precondition or postcondition is not satisfied.

    This indicates a bad runtime value at a call boundary, not a setup
    mistake.

    Attributes
    ----------
    target : str
        Parameter name, or ``"return"`` for the return value.
    annotation : str
        Annotation (or custom check) name that failed.
    value : Any
        The offending value.
    """

    kind = ErrorKind.CONTRACT

    def __init__(self, message: str, target: Optional[str] = None,
                 annotation: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.target = target
        self.annotation = annotation
        self.value = value


class ConfigurationError(PactumError, ValueError):
    """Raised for programming/setup errors.

    Key distinction:
    - ConfigurationError: metadata references an unregistered annotation,
      or builder/union input is malformed
    - ContractViolation: a value failed a registered predicate
    """

    kind = ErrorKind.CONFIGURATION

    def __init__(self, message: str, target: Optional[str] = None,
                 annotation: Optional[str] = None):
        super().__init__(message)
        self.target = target
        self.annotation = annotation
