"""Annotation predicates and the registry that resolves them by name."""

from pactum.annotations.builtins import BUILTIN_ANNOTATIONS
from pactum.annotations.registry import Annotation, AnnotationRegistry

__all__ = [
    "BUILTIN_ANNOTATIONS",
    "Annotation",
    "AnnotationRegistry",
]
