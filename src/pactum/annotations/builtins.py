"""Stock annotation predicates.

Every AnnotationRegistry built with ``with_builtins()`` starts from
BUILTIN_ANNOTATIONS. Consumers may override any entry by registering the
same name again.
"""

import numbers
from collections.abc import Mapping, Sequence

from pactum.contracts.arguments import MISSING
from pactum.contracts.wrapper import has_contract


def is_null(value) -> bool:
    return value is None


def is_undefined(value) -> bool:
    return value is MISSING


def is_function(value) -> bool:
    return callable(value)


def is_object(value) -> bool:
    """Plain key/value object: any Mapping."""
    return isinstance(value, Mapping)


def is_array(value) -> bool:
    """Ordered sequence, excluding text and bytes."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_string(value) -> bool:
    return isinstance(value, str)


def is_number(value) -> bool:
    """Real number; booleans are not numbers here."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_integer(value) -> bool:
    """Non-negative integral number (``3`` and ``3.0`` pass, ``-1`` does not)."""
    if not is_number(value) or not value >= 0:
        return False
    return isinstance(value, numbers.Integral) or float(value).is_integer()


def is_bool(value) -> bool:
    return isinstance(value, bool)


def is_truthy(value) -> bool:
    return bool(value)


def is_falsy(value) -> bool:
    return not value


def is_defined(value) -> bool:
    return value is not MISSING


def is_not_null(value) -> bool:
    return value is not None


def is_safe(value) -> bool:
    return value is not None and value is not MISSING


def is_contract(value) -> bool:
    return has_contract(value)


def is_iterable(value) -> bool:
    return is_object(value) or is_array(value)


def is_hash(value) -> bool:
    return is_object(value) and not is_array(value)


BUILTIN_ANNOTATIONS = {
    "null": is_null,
    "undefined": is_undefined,
    "function": is_function,
    "object": is_object,
    "array": is_array,
    "string": is_string,
    "number": is_number,
    "integer": is_integer,
    "bool": is_bool,
    "truthy": is_truthy,
    "falsy": is_falsy,
    "defined": is_defined,
    "notnull": is_not_null,
    "safe": is_safe,
    "contract": is_contract,
    "iterable": is_iterable,
    "hash": is_hash,
}
