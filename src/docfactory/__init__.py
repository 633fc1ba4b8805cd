"""docfactory — declarative entity-to-document mapping.

Build a :class:`Factory` from field descriptors, then convert entities
to plain documents with :meth:`Factory.to_json` and back with
:meth:`Factory.from_json`.
"""

from __future__ import annotations

from docfactory.config.logging import configure_logging, reset_logging
from docfactory.config.settings import DocFactorySettings
from docfactory.domain.capabilities import Instant, NestedConverter, TimeCodec
from docfactory.domain.descriptors import FieldSpec, NestedSpec, parse_descriptor
from docfactory.domain.errors import (
    FactoryError,
    IllegalTimeValueError,
    InvalidDescriptorError,
    SealedEntityError,
)
from docfactory.infrastructure.timecodec import IsoTimeCodec, UtcInstant
from docfactory.mapping.compiler import Mapper, MapperMode, create_mapper
from docfactory.mapping.factory import Factory, assign_data
from docfactory.mapping.sealing import Entity, is_sealed, seal

__all__ = [
    "DocFactorySettings",
    "Entity",
    "Factory",
    "FactoryError",
    "FieldSpec",
    "IllegalTimeValueError",
    "Instant",
    "InvalidDescriptorError",
    "IsoTimeCodec",
    "Mapper",
    "MapperMode",
    "NestedConverter",
    "NestedSpec",
    "SealedEntityError",
    "TimeCodec",
    "UtcInstant",
    "assign_data",
    "configure_logging",
    "create_mapper",
    "is_sealed",
    "parse_descriptor",
    "reset_logging",
    "seal",
]
