"""A small map kept as two parallel lists with linear lookup."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class ArrayMap(Generic[K, V]):
    """``push`` does not check for duplicate keys."""

    __slots__ = ("_keys", "_values")

    def __init__(self) -> None:
        self._keys: list[K] = []
        self._values: list[V] = []

    def get(self, key: K) -> tuple[int, Any]:
        """Return ``(slot, value)`` of the first match, or ``(-1, None)``."""
        for slot, k in enumerate(self._keys):
            if k == key:
                return slot, self._values[slot]
        return -1, None

    def push(self, key: K, value: V) -> None:
        self._keys.append(key)
        self._values.append(value)

    def remove(self, i: int) -> None:
        if not 0 <= i < len(self._keys):
            raise IndexError(f"slot {i} out of range")
        self._keys[i] = self._keys[-1]
        self._values[i] = self._values[-1]
        self._keys.pop()
        self._values.pop()

    def keys(self) -> list[K]:
        return list(self._keys)

    def values(self) -> list[V]:
        return list(self._values)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return iter(list(zip(self._keys, self._values)))

    def __len__(self) -> int:
        return len(self._keys)