"""Effects applied to a unit: damage, healing or a new running entity."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import IntEnum

from ..ds.jsonproxy import Proxy, _field
from .game import RUNNING_KIND, GameUnit, GameWorld


class ModifierType(IntEnum):
    NONE = 0
    DAMAGE = 1
    HEAL = 2
    ADD_RUNNING = 3


@dataclass
class ModifierConfig:
    ident: int = 0
    type: int = ModifierType.NONE
    value: int = 0
    running: Proxy = field(default_factory=lambda: Proxy(RUNNING_KIND))

    def id(self) -> int:
        return self.ident

    @classmethod
    def from_json(cls, raw: str | bytes) -> "ModifierConfig":
        data = json.loads(raw)
        return cls(
            ident=int(data.get("id", 0)),
            type=int(data.get("type", 0)),
            value=int(data.get("value", 0)),
            running=_field(RUNNING_KIND, data, "running"),
        )

    def apply(self, world: GameWorld, unit: GameUnit) -> None:
        if self.type == ModifierType.DAMAGE:
            print(f"    unit {unit.id}: damage {unit.hp}->{unit.hp - self.value}")
            unit.hp -= self.value
        elif self.type == ModifierType.HEAL:
            print(f"    unit {unit.id}: heal {unit.hp}->{unit.hp + self.value}")
            unit.hp += self.value
        elif self.type == ModifierType.ADD_RUNNING:
            running = self.running.get().activate(world, unit)
            unit.gas.add_running(world, unit, running)
            print(f"    unit {unit.id}: add running {running.id()}")