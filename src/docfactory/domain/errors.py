"""Exception hierarchy for docfactory.

Two error kinds exist:

- Construction-time contract violations (``InvalidDescriptorError``):
  a descriptor that cannot be compiled. Configuration bugs, never retried.
- Conversion-time type violations (``IllegalTimeValueError``): a timestamp
  field given a value that cannot be formatted.

``SealedEntityError`` is raised by sealed result objects when a caller
tries to widen or shrink their attribute set.
"""

from __future__ import annotations


class FactoryError(Exception):
    """Base class for all docfactory errors."""


class InvalidDescriptorError(FactoryError, AssertionError):
    """A field descriptor could not be compiled into a mapper."""


class IllegalTimeValueError(FactoryError, TypeError):
    """A timestamp field received a value without a ``format()`` method."""

    def __init__(self, value: object, owner: str) -> None:
        self.value = value
        self.owner = owner
        super().__init__(
            f"illegal time value {value!r} ({type(value).__name__}) for type {owner}"
        )


class SealedEntityError(FactoryError, AttributeError):
    """Attempt to add or delete an attribute on a sealed object."""
