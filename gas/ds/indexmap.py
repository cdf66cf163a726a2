"""A map kept in dense lists, located through a dict index."""

from __future__ import annotations

from typing import Any, Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class IndexMap(Generic[K, V]):
    """Removal moves the last entry into the freed slot."""

    __slots__ = ("_index", "_keys", "_values")

    def __init__(self) -> None:
        self._index: dict[K, int] = {}
        self._keys: list[K] = []
        self._values: list[V] = []

    def get(self, key: K) -> tuple[int, Any]:
        """Return ``(slot, value)``, or ``(-1, None)`` when absent."""
        slot = self._index.get(key)
        return (-1, None) if slot is None else (slot, self._values[slot])

    def put(self, key: K, value: V) -> None:
        slot = self._index.get(key)
        if slot is not None:
            self._values[slot] = value
            return
        self._index[key] = len(self._values)
        self._keys.append(key)
        self._values.append(value)

    def remove(self, i: int) -> None:
        if not 0 <= i < len(self._keys):
            raise IndexError(f"slot {i} out of range")
        removed = self._keys[i]
        self._keys[i] = self._keys[-1]
        self._values[i] = self._values[-1]
        self._index[self._keys[i]] = i
        del self._index[removed]
        self._keys.pop()
        self._values.pop()

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)