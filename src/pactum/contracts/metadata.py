"""Normalized contract metadata.

Metadata describes a callable's parameter names (in positional order), the
annotation names attached to each parameter, and the annotation names
attached to the return value. It is immutable once built.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, List, Tuple

from pydantic import ConfigDict, Field, field_validator, model_validator

from pactum.schemas.base import PactumBaseModel


class Metadata(PactumBaseModel):
    """Parameter-name / annotation-name description driving a Contract.

    Invariants
    ----------
    - ``names`` has no duplicates and no empty entries
    - every key of ``params`` appears in ``names``
    - every name in ``names`` has a ``params`` entry (possibly empty)
    - ``params`` is a read-only mapping

    Examples
    --------
    >>> meta = Metadata(names=["x"], params={"x": ["@number"]}, retval=["@number"])
    >>> meta.params["x"]
    ('@number',)
    """

    names: Tuple[str, ...] = ()
    params: Mapping[str, Tuple[str, ...]] = Field(default_factory=dict)
    retval: Tuple[str, ...] = ()

    model_config = ConfigDict(
        extra='forbid',
        str_strip_whitespace=True,
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def fill_params(cls, data: Any) -> Any:
        """Give every declared name a params entry, in declaration order."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        names = data.get("names") or ()
        params = data.get("params") or {}
        if not isinstance(params, Mapping) or isinstance(names, str):
            return data

        filled = {}
        for name in names:
            if isinstance(name, str) and name not in filled:
                filled[name] = params.get(name) or ()
        for name, annotations in params.items():
            if name not in filled:
                filled[name] = annotations or ()
        data["params"] = filled
        if data.get("retval") is None:
            data["retval"] = ()
        return data

    @field_validator("names")
    @classmethod
    def check_names(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Parameter names must be non-empty and unique."""
        seen = set()
        for name in v:
            if not name:
                raise ValueError("parameter names must be non-empty")
            if name in seen:
                raise ValueError(f"duplicate parameter name {name!r}")
            seen.add(name)
        return v

    @field_validator("params")
    @classmethod
    def freeze_params(cls, v: Dict[str, Tuple[str, ...]]) -> Mapping[str, Tuple[str, ...]]:
        """Expose params as a read-only view."""
        return MappingProxyType(dict(v))

    @field_validator("retval")
    @classmethod
    def check_retval(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Annotation names must be non-empty."""
        if any(not annotation for annotation in v):
            raise ValueError("annotation names must be non-empty")
        return v

    @model_validator(mode="after")
    def check_params_declared(self) -> "Metadata":
        """Every annotated parameter must be a declared name."""
        undeclared = [name for name in self.params if name not in self.names]
        if undeclared:
            raise ValueError(f"params reference undeclared names: {undeclared}")
        for name, annotations in self.params.items():
            if any(not annotation for annotation in annotations):
                raise ValueError(f"empty annotation name for parameter {name!r}")
        return self

    def annotations_for(self, name: str) -> Tuple[str, ...]:
        """Annotation names attached to parameter ``name``."""
        return self.params.get(name, ())

    def to_tokens(self, return_token: str = "return") -> List[str]:
        """Flatten to the shorthand token list.

        ``build_from_tokens(meta.to_tokens()) == meta`` for any valid
        metadata whose annotation names carry the sigil.
        """
        tokens: List[str] = []
        for name in self.names:
            tokens.append(name)
            tokens.extend(self.params.get(name, ()))
        if self.retval:
            tokens.append(return_token)
            tokens.extend(self.retval)
        return tokens
