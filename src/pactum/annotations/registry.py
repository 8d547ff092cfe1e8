"""Annotation registry: name -> predicate lookup.

Names are stored bare (``number``); lookups accept the name with or without
the leading sigil (``@number``). Re-registering a name overwrites the
previous predicate. Contracts resolve annotation names on every call, so
registrations take effect immediately for existing contracts.

Thread Safety
-------------
All reads and writes go through an internal lock.
"""

import inspect
import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from pactum.annotations.builtins import BUILTIN_ANNOTATIONS
from pactum.contracts.base import require_config

logger = logging.getLogger(__name__)


def _positional_arity(predicate: Callable) -> int:
    """Number of leading (value, target, arg_map) arguments a predicate accepts.

    Only positional parameters without defaults count, so an option such as
    ``strict=True`` keeps its default. ``value`` is always passed when the
    predicate takes any positional parameter.
    """
    try:
        signature = inspect.signature(predicate)
    except (TypeError, ValueError):
        return 1

    count = 0
    positional = False
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return 3
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY,
                              inspect.Parameter.POSITIONAL_OR_KEYWORD):
            positional = True
            if parameter.default is inspect.Parameter.empty:
                count += 1
    if positional:
        count = max(count, 1)
    return min(count, 3)


@dataclass(frozen=True)
class Annotation:
    """A registered predicate.

    Calling it forwards ``(value, target, arg_map)`` truncated to the
    predicate's positional arity, so predicates may be written as
    ``f(value)``, ``f(value, target)`` or ``f(value, target, arg_map)``.
    Positional parameters with defaults are left to their defaults.
    """

    name: str
    predicate: Callable
    arity: int

    def __call__(self, value: Any, target: Optional[str] = None,
                 arg_map: Optional[dict] = None) -> Any:
        return self.predicate(*(value, target, arg_map)[:self.arity])


class AnnotationRegistry:
    """Mutable mapping from annotation name to predicate.

    Parameters
    ----------
    annotations : Mapping, optional
        Initial ``name -> predicate`` entries.
    sigil : str
        Leading character stripped from names on lookup.

    Examples
    --------
    >>> registry = AnnotationRegistry.with_builtins()
    >>> registry.register("even", lambda value: value % 2 == 0)
    >>> registry.resolve("@even")(4)
    True
    """

    def __init__(self, annotations: Optional[Mapping] = None, sigil: str = "@"):
        self.sigil = sigil
        self._annotations: Dict[str, Annotation] = {}
        self._lock = threading.Lock()
        if annotations:
            self.register_many(annotations)

    @classmethod
    def with_builtins(cls, sigil: str = "@") -> "AnnotationRegistry":
        """Registry pre-populated with the stock annotations."""
        return cls(BUILTIN_ANNOTATIONS, sigil=sigil)

    def _key(self, name: str) -> str:
        require_config(
            isinstance(name, str),
            f"Annotation name must be a string, got {type(name).__name__}",
        )
        name = name.strip()
        if name.startswith(self.sigil):
            name = name[len(self.sigil):]
        return name

    def register(self, name: str, predicate: Callable) -> None:
        """Add or overwrite one annotation.

        Raises
        ------
        ConfigurationError
            If the name is empty or the predicate is not callable.
        """
        key = self._key(name)
        require_config(bool(key), "Annotation name must be non-empty")
        require_config(
            callable(predicate),
            f"Predicate for annotation {name!r} must be callable, got {predicate!r}",
        )
        annotation = Annotation(key, predicate, _positional_arity(predicate))

        with self._lock:
            replaced = key in self._annotations
            self._annotations[key] = annotation

        if replaced:
            logger.debug("Annotation %s%s overwritten", self.sigil, key)
        else:
            logger.debug("Registered annotation %s%s", self.sigil, key)

    def register_many(self, mapping: Mapping) -> None:
        """Register every ``name -> predicate`` item of ``mapping``."""
        require_config(
            isinstance(mapping, Mapping),
            f"Annotation map must be a mapping, got {type(mapping).__name__}",
        )
        for name, predicate in mapping.items():
            self.register(name, predicate)

    def unregister(self, name: str) -> bool:
        """Remove an annotation. Returns False if it was not registered."""
        key = self._key(name)
        with self._lock:
            removed = self._annotations.pop(key, None) is not None
        if removed:
            logger.debug("Unregistered annotation %s%s", self.sigil, key)
        return removed

    def has(self, name: str) -> bool:
        """True if ``name`` is registered."""
        if not isinstance(name, str):
            return False
        key = self._key(name)
        with self._lock:
            return key in self._annotations

    def resolve(self, name: str) -> Optional[Annotation]:
        """The registered Annotation for ``name``, or None."""
        key = self._key(name)
        with self._lock:
            return self._annotations.get(key)

    def lookup(self, key: str) -> Optional[Annotation]:
        """The Annotation registered under the bare ``key``, or None.

        Unlike ``resolve`` no sigil is stripped, so the result does not
        depend on the current sigil.
        """
        with self._lock:
            return self._annotations.get(key)

    def set_sigil(self, sigil: str) -> None:
        """Change the sigil stripped from names passed to the lookup methods."""
        with self._lock:
            self.sigil = sigil

    def names(self) -> List[str]:
        """Sorted bare names of every registered annotation."""
        with self._lock:
            return sorted(self._annotations)

    def copy(self) -> "AnnotationRegistry":
        """Independent registry with the same entries."""
        clone = AnnotationRegistry(sigil=self.sigil)
        with self._lock:
            clone._annotations = dict(self._annotations)
        return clone

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._annotations)
