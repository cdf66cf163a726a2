"""Registry of identified objects, referenced from JSON by integer id."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Hashable

_registry: dict[Hashable, dict[int, Any]] = {}


def register_proxy(kind: Hashable, item: Any) -> None:
    _registry.setdefault(kind, {})[item.id()] = item


def lookup_ptr(kind: Hashable, ident: int) -> Any:
    """Return the object with id ``ident`` under ``kind``; None if ``kind`` is unknown."""
    items = _registry.get(kind)
    if items is None:
        return None
    try:
        return items[ident]
    except KeyError:
        raise KeyError(f"no {kind!r} registered with id {ident}") from None


@dataclass
class Proxy:
    """A reference to a registered object, resolved when decoded."""

    kind: Hashable
    target: Any = None

    def get(self) -> Any:
        return self.target

    @classmethod
    def from_json(cls, kind: Hashable, raw: str | bytes) -> "Proxy":
        ident = json.loads(raw)
        if isinstance(ident, bool) or not isinstance(ident, int):
            raise ValueError(f"proxy id must be an integer, got {ident!r}")
        if not -(2**31) <= ident < 2**31:
            raise ValueError(f"proxy id {ident} out of 32-bit range")
        return cls(kind, lookup_ptr(kind, ident))


def _field(kind: Hashable, data: dict[str, Any], key: str) -> Proxy:
    """Resolve ``data[key]`` as a proxy, or an empty one when the key is missing."""
    if key not in data:
        return Proxy(kind)
    return Proxy.from_json(kind, json.dumps(data[key]))