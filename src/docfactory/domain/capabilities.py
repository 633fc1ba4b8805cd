"""Capability protocols for the collaborators a Factory consumes.

Nothing here assumes a concrete library. A time codec only needs ``utc``,
the instants it returns only need ``format``, and a nested converter only
needs ``to_json`` / ``from_json``. Any ``Factory`` is a ``NestedConverter``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Instant(Protocol):
    """A point in time that can render itself as a round-trippable string."""

    def format(self) -> str: ...


@runtime_checkable
class TimeCodec(Protocol):
    """Parses document strings into :class:`Instant` values, in UTC."""

    def utc(self, text: str) -> Instant: ...


@runtime_checkable
class NestedConverter(Protocol):
    """Converts a sub-entity to a sub-document and back."""

    def to_json(self, value: Any) -> Any: ...

    def from_json(self, document: Any) -> Any: ...
