"""Factory — whole-entity conversion over a fixed set of field mappers.

A Factory is built once from a list of field descriptors and reused for
any number of conversions. Its key set never changes after construction:
``to_json`` emits exactly those keys and ``from_json`` assigns exactly
those keys, so extra input fields are dropped.

Overrides replace a computed value only when the override is not blank
(see :func:`docfactory.domain.values.is_blank`). A ``0``, ``""`` or
``False`` override falls back to the mapper result.

Usage::

    class TripFactory(Factory):
        def __init__(self) -> None:
            super().__init__(
                ["id", {"key": "departs", "timestamp": True}],
                Trip,
            )
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from docfactory.domain.descriptors import Descriptor
from docfactory.domain.values import is_blank, read_field, write_field
from docfactory.mapping.compiler import Mapper, create_mapper, owner_name
from docfactory.mapping.sealing import Entity, seal

logger = logging.getLogger(__name__)

_NO_OVERRIDES: Mapping[str, Any] = MappingProxyType({})


def assign_data(
    keys: Iterable[str],
    source: Any,
    target: Any = None,
    overrides: Mapping[str, Any] | None = None,
) -> Any:
    """Assign (not copy) *keys* from *source* to *target*.

    A non-blank ``overrides[key]`` wins over ``source[key]``. When *target*
    is omitted a new dict is created. Returns *target*.
    """
    if target is None:
        target = {}
    overrides = overrides or _NO_OVERRIDES
    for key in keys:
        override = overrides.get(key)
        value = read_field(source, key) if is_blank(override) else override
        write_field(target, key, value)
    return target


class _Converted(Mapping[str, Any]):
    """Read-only view of *source* with each field passed through its mapper.

    Conversion happens on lookup, so a field whose override wins is never
    converted.
    """

    def __init__(self, source: Any, mappers: Mapping[str, Mapper], direction: str) -> None:
        self._source = source
        self._mappers = mappers
        self._direction = direction

    def __getitem__(self, key: str) -> Any:
        convert = getattr(self._mappers[key], self._direction)
        return convert(read_field(self._source, key))

    def get(self, key: str, default: Any = None) -> Any:
        # Mapping.get would turn a KeyError raised by a mapper into *default*.
        return self[key] if key in self._mappers else default

    def __iter__(self) -> Iterator[str]:
        return iter(self._mappers)

    def __len__(self) -> int:
        return len(self._mappers)


class Factory:
    """Bidirectional entity/document converter.

    Attributes:
        klass: Zero-argument constructor for ``from_json`` results.
        mappers: Read-only mapping of field key to compiled :class:`Mapper`.
        keys: The field keys, in declaration order.
    """

    def __init__(
        self,
        descriptors: Iterable[Descriptor] | None = None,
        klass: type | None = None,
    ) -> None:
        self.klass: type = klass or Entity
        pairs = [create_mapper(descriptor, klass) for descriptor in descriptors or ()]
        self.mappers: Mapping[str, Mapper] = MappingProxyType(dict(pairs))
        self.keys: tuple[str, ...] = tuple(self.mappers)
        logger.debug("Factory for %s with keys %s", owner_name(klass), list(self.keys))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={list(self.keys)!r}, klass={self.klass.__name__})"

    def to_json(
        self,
        entity: Any = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Convert *entity* into a plain document dict.

        Returns ``None`` for a blank entity.
        """
        if is_blank(entity):
            return None

        converted = _Converted(entity, self.mappers, "to_json")
        document: dict[str, Any] = assign_data(self.keys, converted, {}, overrides)
        return document

    def from_json(self, document: Any = None, overrides: Mapping[str, Any] | None = None) -> Any:
        """Create a sealed entity from *document*.

        Returns ``None`` for a blank document.
        """
        if is_blank(document):
            return None

        converted = _Converted(document, self.mappers, "from_json")
        return seal(assign_data(self.keys, converted, self.klass(), overrides))
