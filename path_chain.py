"""
Backward-linked path chain used during a single search call.

Entries live in flat arrays and point at their parent by slot number, so a
frontier only holds integers and a full path is rebuilt on demand.
"""

from typing import Generic, List, Optional, TypeVar

K = TypeVar("K")


class PathChain(Generic[K]):
    """Arena of (key, parent slot) entries."""

    def __init__(self) -> None:
        self._keys: List[K] = []
        self._parents: List[Optional[int]] = []

    def __len__(self) -> int:
        return len(self._keys)

    def add(self, key: K, parent: Optional[int] = None) -> int:
        """Append an entry and return its slot."""
        self._keys.append(key)
        self._parents.append(parent)
        return len(self._keys) - 1

    def key(self, slot: int) -> K:
        return self._keys[slot]

    def path_to(self, slot: int) -> List[K]:
        """
        Keys from the root entry down to slot (inclusive).
        """
        path: List[K] = []
        current: Optional[int] = slot
        while current is not None:
            path.append(self._keys[current])
            current = self._parents[current]
        path.reverse()
        return path
