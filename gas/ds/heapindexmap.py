"""A dict-indexed map whose entries are also ordered in a min-heap."""

from __future__ import annotations

from typing import Any, Callable, Generic, Hashable, Iterator, TypeVar

from .heaparraymap import _IndexedHeap, _Slot

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class HeapIndexMap(_IndexedHeap, Generic[K, V]):
    """Entries found through a dict index and ordered by score in a min-heap."""

    __slots__ = ("_index",)

    def __init__(self) -> None:
        super().__init__()
        self._index: dict[K, int] = {}

    def get(self, key: K) -> tuple[int, Any]:
        """Return ``(slot, value)``, or ``(-1, None)`` when the key is absent."""
        slot = self._index.get(key)
        if slot is None:
            return -1, None
        return slot, self._values[slot]

    def update(self, i: int, score: Any) -> None:
        """Change the score of entry ``i`` and restore heap order."""
        self._check_slot(i)
        self._update(i, score)

    def put(self, key: K, value: V, score: Any) -> None:
        """Insert an entry, or replace value and score of an existing key."""
        slot = self._index.get(key)
        if slot is not None:
            self._values[slot] = value
            self.update(slot, score)
            return
        n = len(self._values)
        self._index[key] = n
        self._keys.append(key)
        self._values.append(value)
        self._pos.append(n)
        self._push_slot(_Slot(n, score))

    def remove(self, i: int) -> None:
        """Remove entry ``i``; the last entry takes its slot."""
        self._check_slot(i)
        removed = self._keys[i]
        last = len(self._keys) - 1
        self._remove_slot(self._pos[i])
        self._move_last_into(i)
        if last != i:
            self._index[self._keys[i]] = i
        del self._index[removed]

    def top(self) -> tuple[int, K, V, Any]:
        """Return ``(slot, key, value, score)`` of the lowest score."""
        return self._top()

    def pop(self) -> None:
        """Remove the entry with the lowest score."""
        self.remove(self._head_slot())

    def __len__(self) -> int:
        return len(self._keys)

    def filter(self, keep: Callable[[V], bool]) -> None:
        """Remove every entry whose value ``keep`` rejects."""
        i = 0
        while i < len(self._values):
            if keep(self._values[i]):
                i += 1
            else:
                self.remove(i)

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._values))

    def check(self) -> bool:
        """Return whether entry, heap and index positions agree."""
        if len(self._index) != len(self._heap) or not self._links_consistent():
            return False
        return all(self._index.get(k) == i for i, k in enumerate(self._keys))