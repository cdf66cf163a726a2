"""A linearly searched map whose entries are also ordered in a min-heap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class _Slot:
    item: int
    score: Any


class _IndexedHeap:
    """Dense entry lists plus a min-heap; ``_pos[i]`` is entry ``i``'s heap position."""

    __slots__ = ("_keys", "_values", "_pos", "_heap")

    def __init__(self) -> None:
        self._keys: list[Any] = []
        self._values: list[Any] = []
        self._pos: list[int] = []
        self._heap: list[_Slot] = []

    def _update(self, i: int, score: Any) -> None:
        p = self._pos[i]
        self._heap[p].score = score
        self._pos[i] = self._fix(p)

    def _top(self) -> tuple[int, Any, Any, Any]:
        head = self._heap[0]
        return head.item, self._keys[head.item], self._values[head.item], head.score

    def _head_slot(self) -> int:
        return self._heap[0].item

    def _check_slot(self, i: int) -> None:
        if not 0 <= i < len(self._keys):
            raise IndexError(f"slot {i} out of range")

    def _swap(self, a: int, b: int) -> None:
        heap = self._heap
        self._pos[heap[a].item], self._pos[heap[b].item] = b, a
        heap[a], heap[b] = heap[b], heap[a]

    def _up(self, j: int) -> int:
        while j > 0:
            parent = (j - 1) // 2
            if self._heap[parent].score <= self._heap[j].score:
                break
            self._swap(parent, j)
            j = parent
        return j

    def _down(self, i: int, n: int) -> int:
        heap = self._heap
        while (child := 2 * i + 1) < n:
            if child + 1 < n and heap[child + 1].score <= heap[child].score:
                child += 1
            if heap[i].score <= heap[child].score:
                break
            self._swap(i, child)
            i = child
        return i

    def _fix(self, i: int) -> int:
        moved = self._down(i, len(self._heap))
        return self._up(i) if moved == i else moved

    def _push_slot(self, slot: _Slot) -> int:
        self._heap.append(slot)
        return self._up(len(self._heap) - 1)

    def _remove_slot(self, p: int) -> None:
        heap = self._heap
        last = len(heap) - 1
        if last != p:
            self._pos[heap[last].item] = p
            heap[p], heap[last] = heap[last], heap[p]
            if self._down(p, last) == p:
                self._up(p)
        heap.pop()

    def _move_last_into(self, i: int) -> None:
        last = len(self._keys) - 1
        if last != i:
            self._keys[i] = self._keys[last]
            self._values[i] = self._values[last]
            self._pos[i] = self._pos[last]
            self._heap[self._pos[i]].item = i
        self._keys.pop()
        self._values.pop()
        self._pos.pop()

    def _links_consistent(self) -> bool:
        n = len(self._heap)
        if len(self._keys) != n or len(self._values) != n or len(self._pos) != n:
            return False
        return all(self._heap[p].item == i for i, p in enumerate(self._pos))


class HeapArrayMap(_IndexedHeap, Generic[K, V]):
    """Entries searched linearly by key; ``push`` does not check for duplicates."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__()

    def get(self, key: K) -> tuple[int, Any]:
        """Return ``(slot, value)`` of the first match, or ``(-1, None)``."""
        for slot, k in enumerate(self._keys):
            if k == key:
                return slot, self._values[slot]
        return -1, None

    def update(self, i: int, score: Any) -> None:
        self._check_slot(i)
        self._update(i, score)

    def push(self, key: K, value: V, score: Any) -> None:
        n = len(self._keys)
        self._keys.append(key)
        self._values.append(value)
        self._pos.append(n)
        self._push_slot(_Slot(n, score))

    def remove(self, i: int) -> None:
        self._check_slot(i)
        self._remove_slot(self._pos[i])
        self._move_last_into(i)

    def top(self) -> tuple[int, K, V, Any]:
        """Return ``(slot, key, value, score)`` of the lowest score."""
        return self._top()

    def pop(self) -> None:
        self.remove(self._head_slot())

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return iter(list(zip(self._keys, self._values)))

    def check(self) -> bool:
        return self._links_consistent()