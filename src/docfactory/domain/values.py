"""Value rules shared by the compiler and the factory.

A value is *blank* when it is ``None``, ``False``, a numeric zero, NaN,
or an empty string. Containers are never blank, so an empty dict is a valid
document and an empty list is a present collection.
"""

from __future__ import annotations

import copy
import inspect
import math
import numbers
import types
from collections.abc import Mapping, MutableMapping
from typing import Any

_MISSING = object()


def is_blank(value: Any) -> bool:
    """Return True when *value* counts as absent.

    Examples:
        >>> is_blank(None), is_blank(0), is_blank(""), is_blank(False)
        (True, True, True, True)
        >>> is_blank({}), is_blank([]), is_blank("0")
        (False, False, False)
    """
    if value is None or value is False:
        return True
    if isinstance(value, str | bytes):
        return len(value) == 0
    if isinstance(value, numbers.Number):
        if isinstance(value, numbers.Real) and math.isnan(value):
            return True
        return value == 0
    return False


def read_field(source: Any, key: str) -> Any:
    """Read *key* from a mapping or an attribute-bearing object.

    Missing fields (and unset slots) read as ``None``. An ``AttributeError``
    raised from inside a property getter propagates.
    """
    if isinstance(source, Mapping):
        return source.get(key)
    try:
        return getattr(source, key)
    except AttributeError:
        static = inspect.getattr_static(source, key, _MISSING)
        if static is _MISSING or isinstance(static, types.MemberDescriptorType):
            return None
        raise


def write_field(target: Any, key: str, value: Any) -> None:
    """Write *key* into a mutable mapping, or set it as an attribute."""
    if isinstance(target, MutableMapping):
        target[key] = value
    else:
        setattr(target, key, value)


def deep_copy(value: Any) -> Any:
    """Structural copy — no aliasing between input and output."""
    return copy.deepcopy(value)
