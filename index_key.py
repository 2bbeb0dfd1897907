"""
Key <-> dense array index conversion.

Dense engines address nodes by position, so their keys must be convertible
to an array index. Python already has a protocol for that (``__index__``);
conversion back from an index is left to a ``key_type`` callable owned by
the engine.
"""

from __future__ import annotations

import operator
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class IndexKey(Protocol):
    """A key usable as a dense array index."""

    def __index__(self) -> int:
        ...


def to_index(key: Any) -> Optional[int]:
    """
    Convert key to an array index, or None if it has no index form.

    Booleans are refused even though they implement ``__index__``.
    """
    if isinstance(key, bool):
        return None
    try:
        return operator.index(key)
    except TypeError:
        return None
