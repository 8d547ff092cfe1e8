"""Metadata builders.

Two independent producers of the same Metadata shape:

- ``build_from_structured``: metadata already in final shape
- ``build_from_tokens``: flat shorthand list such as
  ``["a", "@number", "b", "@number", "return", "@number"]``

Deriving metadata from a callable's source or signature is not supported;
callers must always pass one of the explicit forms.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Dict, List

from pydantic import ValidationError

from pactum.contracts.base import require_config
from pactum.contracts.failure import ConfigurationError
from pactum.contracts.metadata import Metadata


def build_from_structured(data: Any) -> Metadata:
    """Build Metadata from its structured form.

    Parameters
    ----------
    data : Metadata or Mapping
        Either a ``Metadata`` instance (returned unchanged) or a mapping with
        ``names``, ``params`` and ``retval`` keys.

    Returns
    -------
    Metadata

    Raises
    ------
    ConfigurationError
        If the mapping does not describe valid metadata.
    """
    if isinstance(data, Metadata):
        return data
    require_config(
        isinstance(data, Mapping),
        f"Structured metadata must be a mapping, got {type(data).__name__}",
    )
    try:
        return Metadata.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid structured metadata: {exc}") from exc


def build_from_tokens(tokens: Any, sigil: str = "@", return_token: str = "return") -> Metadata:
    """Build Metadata from a flat shorthand token list.

    Each non-annotation token starts a new target (a parameter name, or
    ``return_token``); every following token that starts with ``sigil``
    attaches to that target. The initial target is the return value, so
    annotations placed before the first name belong to ``retval``. Repeated
    parameter names merge into the first-seen entry.

    Parameters
    ----------
    tokens : list or tuple of str
    sigil : str
        Leading character of annotation tokens.
    return_token : str
        Token naming the return-value target.

    Returns
    -------
    Metadata

    Raises
    ------
    ConfigurationError
        On a non-sequence input, non-string or empty tokens, or a bare sigil.

    Examples
    --------
    >>> meta = build_from_tokens(["x", "@number", "return", "@number"])
    >>> meta.names, meta.params, meta.retval
    (('x',), {'x': ('@number',)}, ('@number',))
    """
    require_config(
        isinstance(tokens, Sequence) and not isinstance(tokens, (str, bytes)),
        f"Shorthand metadata must be a list of tokens, got {type(tokens).__name__}",
    )

    names: List[str] = []
    params: Dict[str, List[str]] = {}
    retval: List[str] = []
    current = retval

    for index, token in enumerate(tokens):
        require_config(
            isinstance(token, str),
            f"Token #{index} must be a string, got {type(token).__name__}",
        )
        token = token.strip()
        require_config(bool(token), f"Token #{index} is empty")

        if token.startswith(sigil):
            require_config(
                len(token) > len(sigil),
                f"Token #{index} is a bare annotation sigil {token!r}",
            )
            current.append(token)
        elif token == return_token:
            current = retval
        else:
            if token not in params:
                names.append(token)
                params[token] = []
            current = params[token]

    try:
        return Metadata(names=names, params=params, retval=retval)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid shorthand metadata: {exc}") from exc


def build_metadata(spec: Any, sigil: str = "@", return_token: str = "return") -> Metadata:
    """Build Metadata from any supported explicit form.

    ``Metadata`` and mappings go through ``build_from_structured``; lists and
    tuples go through ``build_from_tokens``.

    Raises
    ------
    ConfigurationError
        If ``spec`` is a callable (source inference is not supported) or any
        other unsupported type.
    """
    if isinstance(spec, (Metadata, Mapping)):
        return build_from_structured(spec)
    if isinstance(spec, (list, tuple)):
        return build_from_tokens(spec, sigil=sigil, return_token=return_token)
    if callable(spec):
        raise ConfigurationError(
            "Cannot infer contract metadata from a callable; "
            "pass Metadata, a metadata mapping, or a token list"
        )
    raise ConfigurationError(f"Unsupported metadata specification: {spec!r}")
