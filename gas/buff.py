"""Timed buffs grouped by kind and combined into one value."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from .iface import NEVER


class BuffCompose(IntEnum):
    NONE = 0
    ADD = 1
    PERCENT = 2
    MAGNIFY = 3


class BuffStack(IntEnum):
    NONE = 0
    GREATER = 1
    LONGER = 2
    SEPARATE = 3


@dataclass(frozen=True)
class BuffNode:
    source: str
    value: float
    expire: int
    kind: int


class BuffList:
    """All buffs of one kind on a unit."""

    __slots__ = ("kind", "compose", "stack", "nodes")

    def __init__(
        self,
        kind: int,
        compose: BuffCompose,
        stack: BuffStack,
        nodes: Iterable[BuffNode] | None = None,
    ) -> None:
        self.kind = kind
        self.compose = BuffCompose(compose)
        self.stack = BuffStack(stack)
        self.nodes: list[BuffNode] = list(nodes or ())

    def merge(self, node: BuffNode) -> int:
        """Add ``node`` following the stacking rule; return the next expiry."""
        if self.stack is not BuffStack.SEPARATE:
            for i, old in enumerate(self.nodes):
                if old.source == node.source:
                    if (self.stack is BuffStack.GREATER and old.value < node.value) or (
                        self.stack is BuffStack.LONGER and old.expire < node.expire
                    ):
                        self.nodes[i] = node
                    return self.next_expire()
        self.nodes.append(node)
        return self.next_expire()

    def refresh(self, now: int, base: float) -> float:
        """Drop buffs expired at ``now`` and return the combined value."""
        self.nodes = [n for n in self.nodes if n.expire > now]
        values = [n.value for n in self.nodes]
        if self.compose is BuffCompose.NONE:
            return 1.0 if values else 0.0
        if self.compose is BuffCompose.ADD:
            return base + sum(values)
        if self.compose is BuffCompose.PERCENT:
            return base * (1 + sum(values))
        return base * math.prod(1 + v for v in values)

    def next_expire(self) -> int:
        return min((n.expire for n in self.nodes), default=NEVER)