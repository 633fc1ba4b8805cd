"""Sealed result objects.

A sealed object keeps its attribute set fixed: attributes it already has
stay writable, new attributes cannot be added and none can be deleted.

Sealing swaps the instance onto a cached subclass of its own class that
declares ``__slots__ = ()``, so the memory layout is unchanged and
``isinstance(obj, original_cls)`` still holds.
"""

from __future__ import annotations

import threading
import types
from typing import Any, TypeVar

from docfactory.domain.errors import SealedEntityError

T = TypeVar("T")

_SEALED_FLAG = "__docfactory_sealed__"

_cache: dict[type, type] = {}
_cache_lock = threading.Lock()


class Entity(types.SimpleNamespace):
    """Default result type for :meth:`Factory.from_json`.

    A plain attribute bag: equality compares attributes, ``vars()`` gives
    the field dict.
    """


def _class_defines(cls: type, name: str) -> bool:
    """True when *name* is a data descriptor (slot, property) on *cls*."""
    for klass in cls.__mro__:
        attr = klass.__dict__.get(name)
        if attr is not None and hasattr(type(attr), "__set__"):
            return True
    return False


def _sealed_setattr(self: Any, name: str, value: Any) -> None:
    own = getattr(self, "__dict__", None)
    if (own is None or name not in own) and not _class_defines(type(self), name):
        msg = f"cannot add attribute {name!r}: {type(self).__name__} object is sealed"
        raise SealedEntityError(msg)
    super(type(self), self).__setattr__(name, value)


def _sealed_delattr(self: Any, name: str) -> None:
    msg = f"cannot delete attribute {name!r}: {type(self).__name__} object is sealed"
    raise SealedEntityError(msg)


def _sealed_class(cls: type) -> type:
    with _cache_lock:
        sealed = _cache.get(cls)
        if sealed is None:
            sealed = type(
                cls.__name__,
                (cls,),
                {
                    "__slots__": (),
                    "__module__": cls.__module__,
                    "__qualname__": cls.__qualname__,
                    "__setattr__": _sealed_setattr,
                    "__delattr__": _sealed_delattr,
                    _SEALED_FLAG: True,
                },
            )
            _cache[cls] = sealed
        return sealed


def is_sealed(obj: Any) -> bool:
    """Return True if *obj* was sealed by :func:`seal`."""
    return bool(getattr(type(obj), _SEALED_FLAG, False))


def seal(obj: T) -> T:
    """Lock the attribute set of *obj* in place and return it.

    Idempotent. Raises ``TypeError`` for objects whose class cannot be
    reassigned (builtins such as ``dict``).
    """
    if is_sealed(obj):
        return obj
    obj.__class__ = _sealed_class(type(obj))
    return obj
