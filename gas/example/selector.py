"""Target selection by faction, range and count."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Iterable

from .game import GameUnit, GameWorld


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


@dataclass
class SelectorConfig:
    """Picks the caster itself, or up to ``count`` allies or enemies in range."""

    ident: int = 0
    range: float = 0.0
    count: int = 0
    ally: bool = False
    self_: bool = False

    def id(self) -> int:
        return self.ident

    @classmethod
    def from_json(cls, raw: str | bytes) -> "SelectorConfig":
        data = json.loads(raw)
        return cls(
            ident=int(data.get("id", 0)),
            range=float(data.get("range", 0.0)),
            count=int(data.get("count", 0)),
            ally=bool(data.get("ally", False)),
            self_=bool(data.get("self", False)),
        )

    def select(
        self, world: GameWorld, unit: GameUnit, exclude: Iterable[int] | None
    ) -> list[GameUnit]:
        if self.self_:
            return [unit]
        if self.count <= 0:
            return []
        excluded = set(exclude or ())
        picked: list[GameUnit] = []
        for other in world.units.values():
            if (
                (unit.faction == other.faction) == self.ally
                and distance(unit.x, unit.y, other.x, other.y) < self.range
                and other.id not in excluded
            ):
                picked.append(other)
            if len(picked) >= self.count:
                break
        return picked