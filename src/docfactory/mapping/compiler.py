"""Mapper compiler — one field descriptor in, one ``(key, Mapper)`` out.

Modes are layered in ascending precedence, each later one replacing the
conversion functions chosen by the earlier ones:

1. identity (default)
2. ``timestamp``
3. ``nested`` (single value or collection)
4. ``copy`` (``True`` deep-copies, ``False`` shares)
5. explicit ``to_json`` / ``from_json``, per direction

INVARIANT: compilation is pure. The same descriptor always compiles to
behaviorally identical mappers, and no descriptor shape is inspected at
conversion time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from docfactory.domain.capabilities import NestedConverter, TimeCodec
from docfactory.domain.descriptors import Descriptor, FieldSpec, parse_descriptor
from docfactory.domain.errors import IllegalTimeValueError
from docfactory.domain.values import deep_copy, is_blank
from docfactory.infrastructure.timecodec import IsoTimeCodec

logger = logging.getLogger(__name__)

Convert = Callable[[Any], Any]


class MapperMode(StrEnum):
    """Which base behavior a compiled mapper ended up with."""

    IDENTITY = "identity"
    TIMESTAMP = "timestamp"
    NESTED = "nested"
    NESTED_COLLECTION = "nested_collection"
    COPY = "copy"
    SHARED = "shared"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class Mapper:
    """Compiled pair of conversion functions for one field."""

    to_json: Convert
    from_json: Convert
    mode: MapperMode = MapperMode.IDENTITY


def _identity(value: Any) -> Any:
    return value


IDENTITY_MAPPER = Mapper(_identity, _identity)


def owner_name(klass: Any) -> str:
    """Name used in diagnostics for the type owning a field."""
    if klass is None:
        return "unknown"
    return getattr(klass, "__qualname__", None) or getattr(klass, "__name__", None) or str(klass)


def _timestamp_pair(codec: TimeCodec, owner: str) -> tuple[Convert, Convert]:
    def to_json(time: Any) -> str | None:
        if is_blank(time):
            return None
        formatter = getattr(time, "format", None)
        # str.format is not a time formatter.
        if isinstance(time, str | bytes) or not callable(formatter):
            logger.warning("Illegal time value %r for type %s", time, owner)
            raise IllegalTimeValueError(time, owner)
        return formatter()

    def from_json(text: Any) -> Any:
        return None if is_blank(text) else codec.utc(text)

    return to_json, from_json


def _collection_pair(factory: NestedConverter) -> tuple[Convert, Convert]:
    def to_json(entities: Any) -> list[Any] | None:
        if is_blank(entities):
            return None
        return [factory.to_json(item) for item in entities]

    def from_json(documents: Any) -> list[Any] | None:
        if is_blank(documents):
            return None
        return [factory.from_json(item) for item in documents]

    return to_json, from_json


def compile_spec(spec: FieldSpec, klass: Any = None) -> Mapper:
    """Resolve the conversion functions for an already validated spec."""
    to_json: Convert = _identity
    from_json: Convert = _identity
    mode = MapperMode.IDENTITY

    if spec.timestamp is not None:
        codec = IsoTimeCodec() if spec.wants_default_codec else spec.timestamp
        to_json, from_json = _timestamp_pair(codec, owner_name(klass))
        mode = MapperMode.TIMESTAMP

    if spec.nested is not None:
        factory = spec.nested.factory
        if spec.nested.collection:
            to_json, from_json = _collection_pair(factory)
            mode = MapperMode.NESTED_COLLECTION
        else:
            to_json, from_json = factory.to_json, factory.from_json
            mode = MapperMode.NESTED

    if spec.copy_given:
        if spec.deep_copy:
            to_json = from_json = deep_copy
            mode = MapperMode.COPY
        else:
            to_json = from_json = _identity
            mode = MapperMode.SHARED

    if spec.to_json is not None:
        to_json = spec.to_json
        mode = MapperMode.CUSTOM
    if spec.from_json is not None:
        from_json = spec.from_json
        mode = MapperMode.CUSTOM

    return Mapper(to_json=to_json, from_json=from_json, mode=mode)


def create_mapper(descriptor: Descriptor, klass: Any = None) -> tuple[str, Mapper]:
    """Compile one field descriptor into ``(key, mapper)``.

    Args:
        descriptor: A bare field name, a descriptor mapping, or a
            :class:`FieldSpec`.
        klass: The type owning the field. Only used in error messages.

    Raises:
        InvalidDescriptorError: If the descriptor cannot be compiled.
    """
    if isinstance(descriptor, str) and descriptor:
        return descriptor, IDENTITY_MAPPER

    spec = parse_descriptor(descriptor)
    mapper = compile_spec(spec, klass)
    logger.debug("Compiled field %s (%s) for %s", spec.key, mapper.mode, owner_name(klass))
    return spec.key, mapper
