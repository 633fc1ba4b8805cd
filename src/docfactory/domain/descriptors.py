"""Field descriptors — the declarative input to the mapper compiler.

A descriptor is either a bare field name or a record. Records are
validated into a frozen :class:`FieldSpec` once, at factory construction
time; conversion never inspects descriptor shapes again.

Record keys:

- ``key``: field name in both entity and document (required, non-empty).
- ``copy``: when given (even ``False`` or ``None``) selects deep-copy or shared values.
- ``timestamp``: a :class:`TimeCodec`, or ``True`` for the built-in codec.
- ``nested``: ``{"factory": ..., "collection": bool}``.
- ``to_json`` / ``from_json`` (or ``toJSON`` / ``fromJSON``): explicit
  conversion functions for one direction.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from docfactory.domain.capabilities import NestedConverter, TimeCodec
from docfactory.domain.errors import InvalidDescriptorError


class NestedSpec(BaseModel):
    """Delegation to another factory-like converter."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    factory: Any
    collection: bool = False

    @field_validator("factory")
    @classmethod
    def _check_factory(cls, value: Any) -> Any:
        if not isinstance(value, NestedConverter) or not (
            callable(value.to_json) and callable(value.from_json)
        ):
            msg = "nested factory must expose callable to_json and from_json"
            raise ValueError(msg)
        return value


class FieldSpec(BaseModel):
    """Validated record form of a field descriptor."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    key: StrictStr = Field(min_length=1)
    deep_copy: bool | None = Field(default=None, alias="copy")
    timestamp: Any = None
    nested: NestedSpec | None = None
    to_json: Callable[[Any], Any] | None = Field(default=None, alias="toJSON")
    from_json: Callable[[Any], Any] | None = Field(default=None, alias="fromJSON")

    @field_validator("timestamp")
    @classmethod
    def _check_timestamp(cls, value: Any) -> Any:
        if value is None or value is False:
            return None
        if value is True:
            return value
        if not isinstance(value, TimeCodec) or not callable(value.utc):
            msg = "timestamp codec must expose a callable utc()"
            raise ValueError(msg)
        return value

    @property
    def wants_default_codec(self) -> bool:
        """True when ``timestamp=True`` asked for the built-in codec."""
        return self.timestamp is True

    @property
    def copy_given(self) -> bool:
        """True when the descriptor carried a ``copy`` key, even ``None``.

        Any given ``copy`` selects copy or shared mode; only a truthy
        value deep-copies.
        """
        return "deep_copy" in self.model_fields_set


type Descriptor = str | Mapping[str, Any] | FieldSpec


def parse_descriptor(descriptor: Descriptor) -> FieldSpec:
    """Normalize a bare name, mapping, or :class:`FieldSpec`.

    Raises:
        InvalidDescriptorError: If the descriptor has no usable key or any
            of its options is malformed.
    """
    if isinstance(descriptor, FieldSpec):
        return descriptor
    try:
        if isinstance(descriptor, str):
            return FieldSpec(key=descriptor)
        if isinstance(descriptor, Mapping):
            return FieldSpec.model_validate(dict(descriptor))
    except ValidationError as exc:
        msg = f"Invalid field descriptor {descriptor!r}: {exc}"
        raise InvalidDescriptorError(msg) from exc
    msg = f"Field descriptor must be a str or a mapping, got {type(descriptor).__name__}"
    raise InvalidDescriptorError(msg)
